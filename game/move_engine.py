import logging

from .direction import Direction, DIRECTION_NAMES
from .line_slider import slide_line

logger = logging.getLogger(__name__)


def line_positions(direction, width, height):
    """방향별로 이동 순서에 맞춘 줄 목록을 만듭니다.

    각 줄은 (x, y) 좌표 튜플이며 0번이 타일이 향하는 가장자리입니다.
    상/하는 열마다, 좌/우는 행마다 한 줄씩 만들어집니다.
    """
    if direction == Direction.UP:  # Up: top->bottom
        return [tuple((c, k) for k in range(height)) for c in range(width)]
    elif direction == Direction.DOWN:  # Down: bottom->top
        return [tuple((c, height - 1 - k) for k in range(height)) for c in range(width)]
    elif direction == Direction.LEFT:  # Left: left->right
        return [tuple((k, r) for k in range(width)) for r in range(height)]
    elif direction == Direction.RIGHT:  # Right: right->left
        return [tuple((width - 1 - k, r) for k in range(width)) for r in range(height)]
    raise ValueError(f"unknown direction: {direction!r}")


class MoveEngine:
    def __init__(self, board):
        self.board = board

    def apply_move(self, direction):
        """주어진 방향으로 모든 줄을 밀고, 하나라도 바뀌었으면 True 를 반환합니다."""
        board_changed = False
        for line in line_positions(direction, self.board.width, self.board.height):
            # 줄끼리는 칸을 공유하지 않으므로 처리 순서는 결과에 영향이 없습니다.
            if slide_line(self.board, line):
                board_changed = True

        if not board_changed:
            logger.debug("%s 이동: 변화 없음", DIRECTION_NAMES[direction])
        return board_changed
