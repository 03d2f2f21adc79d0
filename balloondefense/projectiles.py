"""Projectiles fired by towers: darts and sniper bullets."""

from __future__ import annotations

import math
from typing import Any

import pygame

from balloondefense.item import Item
from balloondefense.visitors import ItemVisitor

RADIANS_TO_DEGREES = 57.2957795


class Projectile(Item):
    """A moving, rotated projectile worth some points when it pops a balloon."""

    def __init__(self, game: Any, points: int, x: float, y: float,
                 angle: float, speed_x: float, speed_y: float) -> None:
        super().__init__(game, x, y)
        self.angle = angle
        self.speed_x = speed_x
        self.speed_y = speed_y
        self.points = points

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the image rotated by the angle about its top-left corner."""
        if self.image is None:
            return
        degrees = self.angle * RADIANS_TO_DEGREES
        rotated = pygame.transform.rotate(self.image, -degrees)
        half = pygame.math.Vector2(self.image.get_width() / 2,
                                   self.image.get_height() / 2)
        centre = half.rotate(degrees)
        rect = rotated.get_rect(center=(round(self.x + centre.x),
                                        round(self.y + centre.y)))
        surface.blit(rotated, rect)

    def update(self, elapsed: float) -> None:
        """Move by speed times the elapsed time."""
        self.set_location(self.x + self.speed_x * elapsed,
                          self.y + self.speed_y * elapsed)


class ProjectileDart(Projectile):
    """A dart; it disappears after travelling a short distance."""

    POINTS = 10
    MAX_DISTANCE = 90

    def __init__(self, game: Any, x: float, y: float, angle: float,
                 speed_x: float, speed_y: float) -> None:
        super().__init__(game, self.POINTS, x, y, angle, speed_x, speed_y)
        self.x_start = int(x)
        self.y_start = int(y)
        self.set_image("dart.png")

    def update(self, elapsed: float) -> None:
        super().update(elapsed)
        travelled = math.hypot(self.x - self.x_start, self.y - self.y_start)
        if travelled >= self.MAX_DISTANCE:
            self.game.delete_item(self)

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_projectile_dart(self)


class ProjectileSniper(Projectile):
    """A sniper bullet; it disappears at the edge of the playing area."""

    POINTS = 15
    EDGE = 1024

    def __init__(self, game: Any, x: float, y: float, angle: float,
                 speed_x: float, speed_y: float) -> None:
        super().__init__(game, self.POINTS, x, y, angle, speed_x, speed_y)
        self.set_image("bullet.png")

    def update(self, elapsed: float) -> None:
        super().update(elapsed)
        if (self.x <= 0 or self.x >= self.EDGE
                or self.y <= 0 or self.y >= self.EDGE):
            self.game.delete_item(self)

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_projectile_sniper(self)