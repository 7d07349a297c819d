# main.py
from __future__ import annotations

import argparse
import dataclasses
import logging

import pygame  # type: ignore

from .config import CFG, HUD_HEIGHT
from .controller import GameController
from .grid import render_text
from .highscore import JsonFileStorage, default_path
from .keys import key_name
from .render import draw_frame
from .scheduler import Scheduler

log = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--high-score-file", default=str(default_path()), help="Where the high score is kept")
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size, help="Pixels per board cell")
    parser.add_argument(
        "--log-level", default="INFO", type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level",
    )
    parser.add_argument("--text", action="store_true", help="Log an ASCII frame on every tick")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(message)s")
    cfg = dataclasses.replace(CFG, seed=args.seed, cell_size=args.cell_size)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((cfg.board_px, cfg.board_px + HUD_HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    scheduler = Scheduler(pygame.time.get_ticks)
    controller = GameController(scheduler, JsonFileStorage(args.high_score_file), cfg=cfg)
    log.info("High score file: %s (best %d)", args.high_score_file, controller.high_score)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    continue
                name = key_name(event.key)
                if name is not None:
                    controller.handle_key(name)

        # 2) update (movement gated by the scheduler)
        if scheduler.run_pending() and args.text:
            log.info("score=%d\n%s", controller.state.score, render_text(controller.state, cfg.board_size))

        # 3) render
        draw_frame(screen, font, controller, cfg)
        pygame.display.flip()
        clock.tick(60)

    controller.stop()
    pygame.quit()


if __name__ == "__main__":
    main()
