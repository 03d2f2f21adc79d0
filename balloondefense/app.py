"""The game window: level menu keys, mouse handling and the frame loop."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

import pygame

from balloondefense.game import Game
from balloondefense.xmlnode import XmlError

FRAME_DURATION_MS = 30
WINDOW_SIZE = (1043, 900)

LEVEL_FILES = {
    0: "level0a.xml",
    1: "level1.xml",
    2: "level2.xml",
    3: "level3.xml",
}

_LEVEL_KEYS = {
    pygame.K_0: 0,
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
}


class GameView:
    """Connects window events and frames to a game."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.levels_directory = Path("levels")

    def load_level(self, level: int) -> None:
        """Load one of the numbered levels from the levels directory."""
        try:
            name = LEVEL_FILES[level]
        except KeyError:
            raise ValueError(f"no such level: {level}") from None
        self.game.load(self.levels_directory / name)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle one event; returns False when the window should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.game.on_left_button_down(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.game.on_mouse_move(*event.pos, left_button=False)
        elif event.type == pygame.MOUSEMOTION:
            self.game.on_mouse_move(*event.pos, left_button=bool(event.buttons[0]))
        elif event.type == pygame.KEYDOWN and event.key in _LEVEL_KEYS:
            self.load_level(_LEVEL_KEYS[event.key])
        return True

    def frame(self, surface: pygame.Surface, elapsed: float) -> None:
        """Update the game by the elapsed time and draw it."""
        self.game.update(elapsed)
        width, height = surface.get_size()
        self.game.draw(surface, width, height)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Balloon tower defense game.")
    parser.add_argument("--images", default="images", help="directory of images")
    parser.add_argument("--levels", default="levels", help="directory of level files")
    parser.add_argument("--level", type=int, default=1, choices=sorted(LEVEL_FILES),
                        help="level to start on")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game window until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        try:
            game = Game(args.images)
            view = GameView(game)
            view.levels_directory = Path(args.levels)
            view.load_level(args.level)
        except (XmlError, OSError, pygame.error) as exc:
            print(exc, file=sys.stderr)
            return 1

        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption("Balloon Defense")
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                try:
                    if not view.handle_event(event):
                        running = False
                except XmlError as exc:
                    print(exc, file=sys.stderr)
            elapsed = clock.tick(1000 // FRAME_DURATION_MS) / 1000.0
            view.frame(screen, elapsed)
            pygame.display.flip()
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())