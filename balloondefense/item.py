"""Base class for game objects other than tiles."""

from __future__ import annotations

from typing import Any

import pygame

from balloondefense.visitors import ItemVisitor


class Item:
    """A game object with a position and an image: balloons, towers, projectiles."""

    OFFSET_LEFT = 32
    OFFSET_DOWN = 32

    def __init__(self, game: Any, x: float, y: float) -> None:
        self.game = game
        self.x = int(x)
        self.y = int(y)
        self.image: pygame.Surface | None = None
        self.file = ""

    def set_image(self, file: str) -> None:
        """Use the named image, loading it through the game once only."""
        image = self.game.get_declaration(file)
        if image is None:
            image = self.game.set_image(file, file)
        self.image = image
        self.file = file

    def set_location(self, x: float, y: float) -> None:
        """Move the item; positions are whole pixels, truncated toward zero."""
        self.x = int(x)
        self.y = int(y)

    def update(self, elapsed: float) -> None:
        """Advance the item by the elapsed time; the base item does not move."""

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the image with its bottom edge just below the item's centre."""
        if self.image is None:
            return
        height = self.image.get_height()
        surface.blit(
            self.image,
            (self.x - self.OFFSET_LEFT, self.y + self.OFFSET_DOWN - height),
        )

    def hit_test(self, x: float, y: float) -> bool:
        """Whether the point lies on a visible pixel of the image."""
        if self.image is None:
            return False
        width = self.image.get_width()
        height = self.image.get_height()
        test_x = x - self.x + width / 2
        test_y = y - self.y + height / 2
        if test_x < 0 or test_y < 0 or test_x >= width or test_y >= height:
            return False
        if self.image.get_flags() & pygame.SRCALPHA:
            return self.image.get_at((int(test_x), int(test_y))).a != 0
        return True

    def accept(self, visitor: ItemVisitor) -> None:
        """Accept a visitor; the base item is not visited."""