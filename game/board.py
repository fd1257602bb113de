import numpy as np


class Board:
    """타일 값을 담는 고정 크기 격자입니다.

    격자는 (height, width) 모양의 numpy 배열이며 [y, x] 로 접근합니다.
    모든 칸은 0(빈칸) 이거나 2 이상의 2의 거듭제곱입니다.
    """

    def __init__(self, width=4, height=4):
        self.width = width
        self.height = height
        self.grid = np.zeros((height, width), dtype=int)

    def _check_bounds(self, x, y):
        # numpy 는 음수 인덱스를 조용히 허용하므로 직접 검사합니다.
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"cell ({x}, {y}) is outside the {self.width}x{self.height} board"
            )

    def get(self, x, y):
        self._check_bounds(x, y)
        return int(self.grid[y, x])

    def set(self, x, y, value):
        self._check_bounds(x, y)
        if value != 0 and (value < 2 or value & (value - 1)):
            raise ValueError(f"{value} is not a valid tile value")
        self.grid[y, x] = value

    def is_empty(self, x, y):
        return self.get(x, y) == 0

    def enumerate_empty_cells(self):
        """빈칸의 (x, y) 좌표를 행 우선 순서로 하나씩 돌려줍니다.

        보드는 호출 사이에 바뀌므로 매번 새로 계산합니다.
        """
        for y, x in np.argwhere(self.grid == 0):
            yield int(x), int(y)

    def view(self):
        """렌더러용 읽기 전용 격자 뷰를 반환합니다."""
        grid_view = self.grid.view()
        grid_view.flags.writeable = False
        return grid_view
