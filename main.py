
import argparse
import logging
import pygame
from blockfall_config import CONFIG
from blockfall_layout import compute_dims
from blockfall_game import GameState
from blockfall_input import action_for_key
from blockfall_overlay import Overlay
from blockfall_render import RenderAssets

log = logging.getLogger("blockfall")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Blockfall falling-block puzzle")
    parser.add_argument("--seed", type=int, default=CONFIG["BAG_SEED"], help="piece bag seed")
    parser.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"], help="cell size in pixels")
    parser.add_argument("--log-level", type=str.upper, default=CONFIG["LOG_LEVEL"],
                        choices=LOG_LEVELS, help="logging level")
    return parser.parse_args(argv)


def create_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def run(game: GameState):
    dims = compute_dims(game.cols, game.rows)
    screen = create_window(dims)
    pygame.display.set_caption("Blockfall")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, game.cols, game.rows)
    overlay = Overlay(big_font, font)
    clock = pygame.time.Clock()

    while True:
        dt = clock.tick(CONFIG["TARGET_FPS"])
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                return
            if e.type == pygame.KEYDOWN:
                action = action_for_key(e.key)
                if action is not None:
                    game.queue(action)
        game.advance(dt)

        snap = game.snapshot()
        render.draw(screen, snap)
        overlay.draw(screen, snap, render.board_rect)
        pygame.display.flip()


def main(argv=None):
    args = parse_args(argv)
    CONFIG["BAG_SEED"] = args.seed
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["LOG_LEVEL"] = args.log_level
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    try:
        run(GameState(seed=CONFIG["BAG_SEED"]))
    finally:
        pygame.quit()
    log.info("window closed")


if __name__ == '__main__':
    main()
