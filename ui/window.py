import logging
import sys

import numpy as np
import pygame

import config
from game.direction import Direction
from game.game_logic import Game2048

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_k: Direction.UP,
    pygame.K_j: Direction.DOWN,
    pygame.K_h: Direction.LEFT,
    pygame.K_l: Direction.RIGHT,
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def cell_rect(x, y):
    """보드 좌표 (x, y)를 보드 표면 위의 픽셀 사각형으로 변환"""
    left = config.TILE_PADDING + x * (config.TILE_SIZE + config.TILE_PADDING)
    top = config.TILE_PADDING + y * (config.TILE_SIZE + config.TILE_PADDING)
    return pygame.Rect(left, top, config.TILE_SIZE, config.TILE_SIZE)


class WindowRenderer:
    def __init__(self, screen):
        self.screen = screen
        self.tile_font = pygame.font.Font(None, config.TILE_FONT_SIZE)

    def board_size(self, board):
        width = board.width * config.TILE_SIZE + (board.width + 1) * config.TILE_PADDING
        height = board.height * config.TILE_SIZE + (board.height + 1) * config.TILE_PADDING
        return width, height

    def draw(self, board):
        self.screen.fill(config.BACKGROUND_COLOR)
        board_surface = pygame.Surface(self.board_size(board))
        board_surface.fill(config.GRID_COLOR)

        for (r, c), val in np.ndenumerate(board.view()):
            self.draw_tile(board_surface, int(val), cell_rect(c, r))

        x_offset = (self.screen.get_width() - board_surface.get_width()) // 2
        y_offset = (self.screen.get_height() - board_surface.get_height()) // 2
        self.screen.blit(board_surface, (x_offset, y_offset))

    def draw_tile(self, surface, value, rect):
        pygame.draw.rect(surface, config.WINDOW_TILE_COLORS.get(value, (0, 0, 0)), rect, border_radius=3)
        if value != 0:
            text_color = config.WINDOW_TEXT_COLORS.get(value, config.DEFAULT_TEXT_COLOR)
            text_surface = self.tile_font.render(str(value), True, text_color)
            text_rect = text_surface.get_rect(center=rect.center)
            surface.blit(text_surface, text_rect)


def run(rng=None):
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
        filename=config.LOG_FILE
    )
    pygame.init()
    try:
        screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
        pygame.display.set_caption("2048")
        clock = pygame.time.Clock()
        renderer = WindowRenderer(screen)

        def redraw(board):
            renderer.draw(board)
            pygame.display.flip()

        game = Game2048(config.BOARD_WIDTH, config.BOARD_HEIGHT, rng=rng, on_change=redraw)
        game.start()

        while True:
            clock.tick(config.FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key in QUIT_KEYS):
                    logger.info("창을 닫고 게임을 종료합니다.")
                    return 0
                if event.type == pygame.KEYDOWN and event.key in KEY_DIRECTIONS:
                    game.turn(KEY_DIRECTIONS[event.key])
    except KeyboardInterrupt:
        return 0
    finally:
        # 어떤 경로로 빠져나가든 pygame 을 정리합니다.
        pygame.quit()


if __name__ == '__main__':
    sys.exit(run())
