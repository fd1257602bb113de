from colorama import Back, Fore, Style

# --- 게임 보드 설정 ---
BOARD_WIDTH = 4
BOARD_HEIGHT = 4

# --- 터미널 화면 설정 ---
# 타일 하나는 가로 6칸, 세로 3줄짜리 박스로 그립니다.
HORIZONTAL_OFFSET = 2
VERTICAL_OFFSET = 2
HORIZONTAL_STEP = 6
VERTICAL_STEP = 3

BLOCK_TOP = "┌────┐"
BLOCK_MID = "│    │"
BLOCK_BOTTOM = "└────┘"

HELP_LINES = (
    "Use arrow keys to move the blocks.",
    "Press q to exit the game.",
)

# --- 타일 색상 (터미널) ---
DEFAULT_COLORS = Fore.WHITE + Back.BLACK

TILE_COLORS = {
    2: Fore.RED + Back.BLACK,
    4: Fore.GREEN + Back.BLACK,
    8: Fore.YELLOW + Back.BLACK,
    16: Fore.BLUE + Back.BLACK,
    32: Fore.MAGENTA + Back.BLACK,
    64: Fore.CYAN + Back.BLACK,
    128: Fore.WHITE + Back.BLACK,
    256: Fore.RED + Style.BRIGHT + Back.BLACK,
    512: Fore.GREEN + Style.BRIGHT + Back.BLACK,
    1024: Fore.YELLOW + Style.BRIGHT + Back.BLACK,
    2048: Fore.BLUE + Style.BRIGHT + Back.BLACK,
    4096: Fore.MAGENTA + Style.BRIGHT + Back.BLACK,
    8192: Fore.CYAN + Style.BRIGHT + Back.BLACK,
}

# --- 창 모드(pygame) 설정 ---
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 400
BACKGROUND_COLOR = (250, 248, 239)
GRID_COLOR = (187, 173, 160) # 게임 보드 배경색
FPS = 30

TILE_SIZE = 80
TILE_PADDING = 8
TILE_FONT_SIZE = 36
# 폰트는 import 시점이 아니라 ui/window.py 에서 pygame 초기화 후 생성합니다.

WINDOW_TILE_COLORS = {
    0: (205, 193, 180),
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
    4096: (60, 58, 50),
    8192: (60, 58, 50),
}

WINDOW_TEXT_COLORS = {
    2: (119, 110, 101),
    4: (119, 110, 101),
}
DEFAULT_TEXT_COLOR = (249, 246, 242)

# --- 로깅 설정 ---
# 게임 화면 위에 로그가 섞이지 않도록 기본값은 WARNING 입니다.
# LOG_FILE 에 경로를 넣으면 파일로 기록합니다.
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LOG_FILE = None
