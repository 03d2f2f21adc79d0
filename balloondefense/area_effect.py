"""Area effects such as explosions."""

from __future__ import annotations

import pygame

_RED = (255, 0, 0)


class AreaEffect:
    """An effect centred at a point on the screen."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


class Explosive(AreaEffect):
    """An explosion of a given radius that takes some time to complete."""

    def __init__(self, x: float, y: float, time: float, radius: float) -> None:
        super().__init__(x, y)
        self.time = time
        self.radius = radius
        self.start_time = 0.0

    def draw(self, surface: pygame.Surface) -> None:
        """Outline the explosion in red, in a box from its point by its radius."""
        rect = pygame.Rect(int(self.x), int(self.y), int(self.radius), int(self.radius))
        pygame.draw.ellipse(surface, _RED, rect, 1)

    def explode(self, surface: pygame.Surface) -> None:
        """Show the explosion."""
        self.draw(surface)