import io

from game.board import Board


def make_board(rows):
    """행 목록(위에서 아래로)으로 보드를 만듭니다."""
    board = Board(width=len(rows[0]), height=len(rows))
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            board.set(x, y, value)
    return board


def board_rows(board):
    return board.view().tolist()


def line_board(values):
    """한 줄짜리 보드와 왼쪽 끝이 0번인 줄을 함께 반환합니다."""
    board = make_board([values])
    line = tuple((x, 0) for x in range(len(values)))
    return board, line


def reference_slide(values):
    """압축 후 인접한 같은 값을 한 번씩만 합치는 기준 구현"""
    row = [v for v in values if v != 0]
    new_row = []
    j = 0
    while j < len(row):
        if j + 1 < len(row) and row[j] == row[j + 1]:
            new_row.append(row[j] * 2)
            j += 2
        else:
            new_row.append(row[j])
            j += 1
    return new_row + [0] * (len(values) - len(new_row))


class FirstCellRandom:
    """항상 첫 번째 후보를 고르는 난수원"""
    def __init__(self):
        self.candidates = []

    def choice(self, seq):
        self.candidates.append(list(seq))
        return seq[0]


class FakeTerminal:
    def __init__(self, stdin_text=b""):
        self.stdin = io.TextIOWrapper(io.BytesIO(stdin_text), encoding="utf-8")
        self.stdout = io.StringIO()
        self.clear_count = 0
        self.is_setup = False

    def clear_screen(self):
        self.clear_count += 1
        self.stdout.write("\033[2J\033[0;0H")

    def __enter__(self):
        self.is_setup = True
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.is_setup = False
        return False
