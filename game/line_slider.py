def slide_line(board, line):
    """한 줄(line)의 타일을 0번 칸 쪽으로 밀고 합칩니다.

    line 은 이동 방향 순서로 나열된 (x, y) 좌표 튜플이며, 0번이 타일이
    몰려가는 가장자리입니다. 칸의 값이나 위치가 하나라도 바뀌면 True 를 반환합니다.

    합쳐진 칸은 merged 에 표시되어 같은 이동에서 다시 합쳐지지 않습니다.
    """
    changed = False
    merged = [False] * len(line)

    for i in range(1, len(line)):
        value = board.get(*line[i])
        if value == 0:
            continue

        # 뒤쪽으로 첫 번째 타일(없으면 0번 칸)을 찾습니다.
        j = i - 1
        while j > 0 and board.get(*line[j]) == 0:
            j -= 1
        target = board.get(*line[j])

        if target == 0:
            board.set(*line[j], value)
            board.set(*line[i], 0)
            changed = True
        elif target == value and not merged[j]:
            board.set(*line[j], value * 2)
            board.set(*line[i], 0)
            merged[j] = True
            changed = True
        elif j != i - 1:
            # 막는 타일 바로 뒤로 붙입니다.
            board.set(*line[j + 1], value)
            board.set(*line[i], 0)
            changed = True

    return changed
