import logging
import signal
import sys

import config
from game.game_logic import Game2048
from ui.keys import QUIT, read_commands
from ui.renderer import BoardRenderer
from ui.terminal import Terminal

logger = logging.getLogger("2048-TERMINAL")


def _exit_on_signal(signum, frame):
    # SystemExit 로 바꿔 with 블록의 터미널 복구가 실행되게 합니다.
    raise SystemExit(128 + signum)


def play(terminal, stdin, rng=None):
    """종료 명령이나 입력 끝까지 한 판을 진행하고, 진행한 게임을 반환합니다.

    stdin 은 바이트 스트림입니다 (sys.stdin.buffer).
    """
    renderer = BoardRenderer(terminal)
    game = Game2048(config.BOARD_WIDTH, config.BOARD_HEIGHT, rng=rng, on_change=renderer.draw)
    game.start()

    for command in read_commands(stdin):
        if command == QUIT:
            logger.info("q 입력으로 게임을 종료합니다.")
            break
        game.turn(command)
    return game


def main():
    # --- 로깅 설정 ---
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
        filename=config.LOG_FILE
    )
    signal.signal(signal.SIGTERM, _exit_on_signal)
    signal.signal(signal.SIGHUP, _exit_on_signal)

    try:
        with Terminal() as terminal:
            play(terminal, terminal.stdin.buffer)
    except KeyboardInterrupt:
        logger.info("Ctrl-C 로 게임을 종료합니다.")
    except Exception:
        logger.exception("치명적 예외로 종료합니다.")
        raise
    return 0


if __name__ == '__main__':
    sys.exit(main())
