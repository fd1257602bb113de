import sys
import termios

from colorama import Cursor, ansi


class Terminal:
    """
    터미널을 게임용으로 설정합니다 (줄 단위 입력과 에코 끄기).

    with 문으로 사용하면 어떤 경로로 빠져나가든 원래 설정이 복구됩니다.
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._original = None

    @property
    def is_setup(self):
        return self._original is not None

    def setup(self):
        if self.is_setup:
            raise RuntimeError("terminal is already in game mode")

        fd = self.stdin.fileno()
        # 복구용 원래 설정을 받아 두고, 이를 바탕으로 변경합니다.
        self._original = termios.tcgetattr(fd)
        changed = list(self._original)
        changed[3] &= ~(termios.ICANON | termios.ECHO)  # lflag
        termios.tcsetattr(fd, termios.TCSANOW, changed)

    def restore(self):
        if not self.is_setup:
            raise RuntimeError("terminal was not set up")

        termios.tcsetattr(self.stdin.fileno(), termios.TCSANOW, self._original)
        self._original = None

    def clear_screen(self):
        self.stdout.write(ansi.clear_screen() + Cursor.POS(0, 0))

    def __enter__(self):
        self.setup()
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.restore()
        return False
