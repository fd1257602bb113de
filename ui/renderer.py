import config
import numpy as np

from colorama import Cursor, Style

SAVE_CURSOR = '\033[s'
RESTORE_CURSOR = '\033[u'


def tile_color(value):
    """타일 값에 맞는 색상 시퀀스. 색이 정해지지 않은 값은 기본 색으로 되돌립니다."""
    return config.TILE_COLORS.get(value, Style.RESET_ALL)


class Tile:
    def __init__(self, value, pos):
        self.value = value
        self.pos = pos  # board 위치 (x, y)
        self.cursor_pos = self._get_cursor_pos(pos)

    def _get_cursor_pos(self, pos):
        """보드 좌표 (x, y)를 터미널 커서 좌표 (열, 행)으로 변환"""
        x, y = pos
        column = x * config.HORIZONTAL_STEP + config.HORIZONTAL_OFFSET
        row = y * config.VERTICAL_STEP + config.VERTICAL_OFFSET
        return column, row

    def draw(self):
        column, row = self.cursor_pos
        return Cursor.POS(column, row) + Style.RESET_ALL + tile_color(self.value) + str(self.value)


class BoardRenderer:
    def __init__(self, terminal):
        self.terminal = terminal

    def draw(self, board):
        """화면을 지우고 빈 박스 격자를 그린 뒤 각 타일의 값을 칸 안에 채웁니다."""
        self.terminal.clear_screen()
        out = [config.DEFAULT_COLORS]

        for _ in range(board.height):
            out.append(config.BLOCK_TOP * board.width + '\n')
            out.append(config.BLOCK_MID * board.width + '\n')
            out.append(config.BLOCK_BOTTOM * board.width + '\n')

        for line in config.HELP_LINES:
            out.append(line + '\n')
        # 타일을 다 그린 뒤 커서를 안내문 아래로 되돌립니다.
        out.append(SAVE_CURSOR)

        tiles = [Tile(int(val), (c, r)) for (r, c), val in np.ndenumerate(board.view()) if val != 0]
        for tile in tiles:
            out.append(tile.draw())

        out.append(RESTORE_CURSOR)
        stream = self.terminal.stdout
        stream.write(''.join(out))
        stream.flush()
