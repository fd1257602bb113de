from game.direction import Direction

ESCAPE = b'\x1b'
QUIT = 'quit'

# 화살표 키는 ESC [ A/B/C/D 세 바이트로 들어옵니다.
ARROW_KEYS = {
    b'A': Direction.UP,
    b'B': Direction.DOWN,
    b'C': Direction.RIGHT,
    b'D': Direction.LEFT,
}

# vim 키
KEY_ALIASES = {
    b'k': Direction.UP,
    b'j': Direction.DOWN,
    b'l': Direction.RIGHT,
    b'h': Direction.LEFT,
}


def read_commands(stream):
    """
    바이트 stream 에서 한 바이트씩 읽어 Direction 또는 QUIT 을 내보냅니다.
    디코딩하지 않으므로 UTF-8 이 아닌 바이트도 그냥 무시됩니다.
    입력이 끝나면 반복도 끝납니다.
    """
    while True:
        ch = stream.read(1)
        if not ch:
            return

        if ch == ESCAPE:
            # 이스케이프 시퀀스 안의 q 로 게임이 끝나지 않도록 두 바이트를 모두 소비합니다.
            if stream.read(1) != b'[':
                continue
            direction = ARROW_KEYS.get(stream.read(1))
            if direction is not None:
                yield direction
        elif ch == b'q':
            yield QUIT
            return
        elif ch in KEY_ALIASES:
            yield KEY_ALIASES[ch]
