"""Towers that the player places on the grid to pop balloons."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

import pygame

from balloondefense.item import Item
from balloondefense.projectiles import (
    RADIANS_TO_DEGREES,
    ProjectileDart,
    ProjectileSniper,
)
from balloondefense.visitors import ItemVisitor

_RED = (255, 0, 0)
_BOMB_COLOR = (128, 0, 0)


class Tower(Item, ABC):
    """Base class for towers; a tower may sit on one tile of the grid."""

    OFFSET_LEFT = 32
    OFFSET_DOWN = 32

    def __init__(self, game: Any, x: float, y: float) -> None:
        super().__init__(game, x, y)
        self.tile: Any = None

    def add(self, dx: int, dy: int) -> None:
        """Place the tower at the location (dx, dy)."""
        self.set_location(dx, dy)

    @abstractmethod
    def update(self, elapsed: float) -> None:
        """Advance the tower by the elapsed time."""

    def shoot(self) -> None:
        """Fire the tower's projectiles; the base tower fires nothing."""


_DIAGONAL = int(math.sqrt(50))

# (speed x, speed y, offset x, offset y) for each of the eight darts
_EIGHT_SHOT_PATTERN = (
    (141.42, 141.42, _DIAGONAL, _DIAGONAL),
    (0.0, 200.0, 0, 10),
    (-141.42, 141.42, -_DIAGONAL, _DIAGONAL),
    (-200.0, 0.0, -10, 0),
    (-141.42, -141.42, -_DIAGONAL, -_DIAGONAL),
    (0.0, -200.0, 0, -10),
    (141.42, -141.42, _DIAGONAL, -_DIAGONAL),
    (200.0, 0.0, 10, 0),
)


class Tower8Shot(Tower):
    """Fires eight darts in every direction at regular intervals."""

    TIME_BETWEEN_SHOTS = 5
    ANGLE_STEP = 0.78539816

    def __init__(self, game: Any, x: float, y: float) -> None:
        super().__init__(game, x, y)
        self.time_till_fire = float(self.TIME_BETWEEN_SHOTS)
        self.set_image("tower8.png")

    def shoot(self) -> None:
        """Add eight darts to the game, one every eighth of a turn."""
        for step, (speed_x, speed_y, offset_x, offset_y) in enumerate(
                _EIGHT_SHOT_PATTERN, start=1):
            dart = ProjectileDart(self.game, self.x + offset_x, self.y + offset_y,
                                  self.ANGLE_STEP * step, speed_x, speed_y)
            self.game.add_item(dart)

    def update(self, elapsed: float) -> None:
        self.time_till_fire -= elapsed
        if self.time_till_fire <= 0:
            self.time_till_fire += self.TIME_BETWEEN_SHOTS
            self.shoot()

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_tower_8shot(self)


class TowerBomb(Tower):
    """Explodes once after a delay, popping nearby balloons, then disappears."""

    POINTS = 7
    RADIUS = 100
    TIMER_CONST = 3
    FIRING_TIME = 0.25

    def __init__(self, game: Any, x: float, y: float, count: int) -> None:
        super().__init__(game, x, y)
        self.timer = float(count * self.TIMER_CONST)
        self.firing = False
        self.set_image("tower-bomb.png")

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the tower and, while it explodes, the blast."""
        super().draw(surface)
        if self.firing:
            rect = pygame.Rect(self.x - self.OFFSET_LEFT * 3,
                               self.y - self.OFFSET_DOWN * 3,
                               self.RADIUS * 2, self.RADIUS * 2)
            pygame.draw.ellipse(surface, _BOMB_COLOR, rect)

    def update(self, elapsed: float) -> None:
        self.timer -= elapsed
        if not self.firing and self.timer <= 0:
            self.timer = self.FIRING_TIME
            self.firing = True
            self.game.balloon_checker(self.x, self.y, self.RADIUS, self.POINTS)
        if self.firing and self.timer <= 0:
            self.firing = False
            self.game.delete_item(self)

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_tower_bomb(self)


def _atan_of_ratio(y: float, x: float) -> float:
    """atan(y / x), with division by zero giving an infinite or undefined ratio."""
    if x == 0:
        if y > 0:
            return math.pi / 2
        if y < 0:
            return -math.pi / 2
        return math.nan
    return math.atan(y / x)


class TowerSniper(Tower):
    """Turns toward the closest balloon and fires a fast bullet at it."""

    TIME_BETWEEN_SHOTS = 7
    OVERALL_SPEED = 1000

    def __init__(self, game: Any, x: float, y: float) -> None:
        super().__init__(game, x, y)
        self.time_till_fire = float(self.TIME_BETWEEN_SHOTS)
        self.angle = 0.0
        self.set_image("towersniper.png")

    def shoot(self) -> None:
        """Aim at the closest balloon, if any, and fire a bullet at it."""
        balloon = self.game.closest_balloon(self.x, self.y)
        if balloon is None:
            return
        x_diff = float(balloon.x - self.x)
        y_diff = float(balloon.y - self.y)
        base = _atan_of_ratio(y_diff, x_diff)
        if math.isnan(base):
            # the balloon sits on the tower: there is no direction to fire in
            return

        if x_diff >= 0 and y_diff >= 0:
            angle = base
        elif x_diff >= 0 and y_diff <= 0:
            angle = base + 270
            angle = (angle + base - 270) / 2
        else:
            angle = base + math.pi
        self.angle = angle

        speed_x = self.OVERALL_SPEED * math.cos(angle)
        speed_y = self.OVERALL_SPEED * math.sin(angle)
        bullet = ProjectileSniper(self.game, self.x, self.y, angle, speed_x, speed_y)
        self.game.add_item(bullet)

    def update(self, elapsed: float) -> None:
        self.time_till_fire -= elapsed
        if self.time_till_fire <= 0:
            self.time_till_fire += self.TIME_BETWEEN_SHOTS
            self.shoot()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the tower rotated by its angle about its centre point."""
        if self.image is None:
            return
        degrees = self.angle * RADIANS_TO_DEGREES
        rotated = pygame.transform.rotate(self.image, -degrees)
        offset = pygame.math.Vector2(
            -self.OFFSET_LEFT + self.image.get_width() / 2,
            -self.OFFSET_DOWN + self.image.get_height() / 2,
        ).rotate(degrees)
        rect = rotated.get_rect(center=(round(self.x + offset.x),
                                        round(self.y + offset.y)))
        surface.blit(rotated, rect)

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_tower_sniper(self)


class TowerWave(Tower):
    """Sends out a growing ring that pops the balloons it reaches."""

    POINTS = 3
    TIME_BETWEEN_SHOTS = 5
    START_DIAMETER = 20
    MAX_DIAMETER = 200
    SPEED = 200

    def __init__(self, game: Any, x: float, y: float) -> None:
        super().__init__(game, x, y)
        self.time_till_fire = float(self.TIME_BETWEEN_SHOTS)
        self.firing = False
        self.diameter = self.START_DIAMETER
        self.set_image("tower-rings.png")

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the tower and, while firing, the ring, popping balloons it reaches."""
        super().draw(surface)
        if not self.firing:
            return
        half = self.diameter // 2
        rect = pygame.Rect(self.x - half, self.y - half, self.diameter, self.diameter)
        pygame.draw.ellipse(surface, _RED, rect, 1)
        self.game.balloon_checker(self.x, self.y, half, self.POINTS)
        if self.diameter >= self.MAX_DIAMETER:
            self.firing = False
            self.diameter = self.START_DIAMETER

    def update(self, elapsed: float) -> None:
        self.time_till_fire -= elapsed
        if self.time_till_fire <= 0:
            self.firing = True
            self.time_till_fire += self.TIME_BETWEEN_SHOTS
        if self.firing:
            self.diameter = int(self.diameter + elapsed * self.SPEED)

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_tower_wave(self)