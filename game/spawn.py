import logging
import random

logger = logging.getLogger(__name__)

MIN_TILE_VALUE = 2


class SpawnEngine:
    def __init__(self, board, rng=None):
        self.board = board
        self.rng = rng if rng is not None else random

    def try_spawn(self):
        """빈칸 하나를 균등한 확률로 골라 새 타일(2)을 놓습니다.

        빈칸이 없으면 보드를 건드리지 않고 False 를 반환합니다.
        """
        empty_tiles = list(self.board.enumerate_empty_cells())
        if not empty_tiles:
            logger.debug("빈칸이 없어 새 타일을 놓지 않습니다.")
            return False

        x, y = self.rng.choice(empty_tiles)
        self.board.set(x, y, MIN_TILE_VALUE)
        logger.debug("새 타일 %d -> (%d, %d), 빈칸 %d개 중 선택",
                     MIN_TILE_VALUE, x, y, len(empty_tiles))
        return True
