import logging

from .board import Board
from .move_engine import MoveEngine
from .spawn import SpawnEngine

logger = logging.getLogger(__name__)


class Game2048:
    def __init__(self, width=4, height=4, rng=None, on_change=None):
        """
        한 판의 보드와 이동/생성 엔진을 묶어 턴을 진행합니다.

        Args:
            width, height: 보드 크기.
            rng: 새 타일 위치를 고를 난수원 (random.Random 호환). 없으면 random 모듈.
            on_change: 보드를 다시 그려야 할 때 board 를 인자로 호출되는 함수.
        """
        self.board = Board(width, height)
        self.mover = MoveEngine(self.board)
        self.spawner = SpawnEngine(self.board, rng)
        self.on_change = on_change

    def start(self):
        """빈 보드에 첫 타일을 하나 놓고 처음 화면을 그리게 합니다."""
        self.spawner.try_spawn()
        logger.info("게임 시작: %dx%d 보드", self.board.width, self.board.height)
        self._request_redraw()

    def turn(self, direction):
        """
        한 턴을 진행합니다: 이동 -> (변화가 있으면) 새 타일 -> 다시 그리기.
        보드가 바뀌었으면 True 를 반환합니다.
        """
        board_changed = self.mover.apply_move(direction)
        if board_changed:
            # 보드가 가득 차 있으면 새 타일이 나오지 않을 뿐입니다.
            self.spawner.try_spawn()
            self._request_redraw()
        return board_changed

    def _request_redraw(self):
        if self.on_change is not None:
            self.on_change(self.board)
