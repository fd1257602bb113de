import sys, os

# 테스트에서 최상위 모듈(game, ui, config, main)을 import 할 수 있게 합니다.
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# pygame 창 테스트는 화면 없이 실행합니다.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
