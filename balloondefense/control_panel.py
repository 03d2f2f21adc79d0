"""The side panel: tower palette, score display and the Go button."""

from __future__ import annotations

from typing import Any

import pygame

from balloondefense.go_button import GoButton
from balloondefense.scoreboard import Scoreboard
from balloondefense.towers import Tower, Tower8Shot, TowerBomb, TowerSniper, TowerWave

_YELLOW = (255, 255, 0)
_FONT_SIZE = 40
_SCORE_LABEL_POS = (1049, 450)
_SCORE_RECT = pygame.Rect(1024, 470, 200, 140)

_PALETTE_X = 1124
_GO_POSITION = (1084, 875)


class ControlPanel:
    """Draws the tower palette and score, and hands out towers to drag."""

    def __init__(self, game: Any) -> None:
        self.game = game
        self.scoreboard = Scoreboard()
        self.go_button = GoButton(game, *_GO_POSITION)
        self.control_towers: list[Tower] = []
        self.bomb_count = 0
        self._font: pygame.font.Font | None = None
        self.reset()

    def reset(self) -> None:
        """Start a level afresh: new Go button, bomb count and tower palette."""
        self.go_button = GoButton(self.game, *_GO_POSITION)
        self.bomb_count = 0
        self.control_towers = [
            TowerWave(self.game, _PALETTE_X, 82),
            Tower8Shot(self.game, _PALETTE_X, 182),
            TowerBomb(self.game, _PALETTE_X, 282, 0),
            TowerSniper(self.game, _PALETTE_X, 382),
        ]

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        return self._font

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the palette, the score and, when active, the Go button."""
        for tower in self.control_towers:
            tower.draw(surface)

        font = self._get_font()
        surface.blit(font.render("Score", True, _YELLOW), _SCORE_LABEL_POS)
        score = font.render(str(self.scoreboard.score()), True, _YELLOW)
        surface.blit(score, score.get_rect(center=_SCORE_RECT.center))

        self.go_button.draw(surface)

    def hit_test(self, x: float, y: float) -> Tower | None:
        """Handle a click in the panel; return a new tower if one was picked up."""
        if self.go_button.hit_test(x, y):
            self.game.active = True

        # towers cannot be taken until the Go button is shown
        if not self.go_button.active:
            return None

        for palette_tower in reversed(self.control_towers):
            if not palette_tower.hit_test(x, y):
                continue
            tower: Tower | None
            if y < 132:
                tower = TowerWave(self.game, x, y)
            elif y < 232:
                tower = Tower8Shot(self.game, x, y)
            elif y < 332:
                self.bomb_count += 1
                tower = TowerBomb(self.game, x, y, self.bomb_count)
            elif y < 432:
                tower = TowerSniper(self.game, x, y)
            else:
                tower = None
            if tower is not None:
                self.game.add_item(tower)
            return tower
        return None

    def update(self, elapsed: float) -> None:
        """The Go button shows only while the game is not playing."""
        self.go_button.active = False
        if not self.game.active:
            self.go_button.update(elapsed)