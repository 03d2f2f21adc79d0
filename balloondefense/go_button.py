"""The button that starts a level."""

from __future__ import annotations

from typing import Any

import pygame

from balloondefense.item import Item
from balloondefense.visitors import ItemVisitor

LEVEL_TRANSITION_LENGTH = 2.0


class GoButton(Item):
    """A button that appears once the level transition is over."""

    def __init__(self, game: Any, x: float, y: float) -> None:
        super().__init__(game, x, y)
        self.total_elapsed = 0.0
        self.active = False
        self.set_image("button-go.png")

    def update(self, elapsed: float) -> None:
        """Count time; the button becomes active after the transition."""
        self.total_elapsed += elapsed
        if self.total_elapsed >= LEVEL_TRANSITION_LENGTH:
            self.active = True

    def hit_test(self, x: float, y: float) -> bool:
        """Only an active, visible button can be clicked."""
        if self.active:
            return super().hit_test(x, y)
        return False

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the button only while it is active."""
        if self.active:
            super().draw(surface)

    def accept(self, visitor: ItemVisitor) -> None:
        """The button is not visited."""