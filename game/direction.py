from enum import IntEnum


class Direction(IntEnum):
    """이동 방향. 0:상, 1:하, 2:좌, 3:우"""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


DIRECTION_NAMES = ['Up', 'Down', 'Left', 'Right']
