"""Balloons that travel along the road tiles."""

from __future__ import annotations

import random
from typing import Any

from balloondefense.item import Item
from balloondefense.visitors import ItemVisitor


class Balloon(Item):
    """A balloon that moves along road tiles, driven by a path scalar ``t``."""

    OFFSET_LEFT = 32
    OFFSET_DOWN = 32

    COLORS = ("black", "blue", "red")

    def __init__(self, game: Any, x: float, y: float) -> None:
        super().__init__(game, x, y)
        self.t = 0.0
        self.tile_on: Any = None
        self.forward = True
        color = random.choice(self.COLORS)
        self.set_image(f"{color}-balloon.png")

    def reset_t(self) -> None:
        """Carry the path scalar over when moving on to the next tile."""
        self.t -= 1.0

    def set_tile_on(self, tile: Any) -> None:
        """Record the first tile, or work out the direction of entry into a new one."""
        if self.tile_on is None:
            self.forward = True
            self.tile_on = tile
            return
        if tile.x < self.tile_on.x:
            # entering from the east
            self.forward = True
        elif tile.x > self.tile_on.x:
            # entering from the west
            self.forward = False
        elif tile.y > self.tile_on.y:
            # entering from the north
            self.forward = False

    def is_forward(self, t: float) -> bool:
        """Whether the balloon runs the tile's path in its forward direction."""
        return self.forward

    def update(self, elapsed: float) -> None:
        """Advance along the path."""
        self.t += 2.0 * elapsed

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_balloon(self)