"""Tiles that make up the playing grid."""

from __future__ import annotations

from typing import Any

import pygame

from balloondefense.visitors import ItemVisitor
from balloondefense.xmlnode import XmlNode


class Tile:
    """A square of the grid; may hold one tower when it is a valid spot."""

    OFFSET_LEFT = 32
    OFFSET_DOWN = 32

    def __init__(self, grid: Any) -> None:
        self.grid = grid
        self.x = 0
        self.y = 0
        self.image: pygame.Surface | None = None
        self.file = ""
        self.associated_tower: Any = None
        self.valid_spot = True

    def width(self) -> int:
        """Width of the tile image."""
        return self._require_image().get_width()

    def height(self) -> int:
        """Height of the tile image."""
        return self._require_image().get_height()

    def _require_image(self) -> pygame.Surface:
        if self.image is None:
            raise ValueError("tile has no image")
        return self.image

    def set_location(self, x: float, y: float) -> None:
        """Move the tile centre; positions are whole pixels."""
        self.x = int(x)
        self.y = int(y)

    def set_associated_tower(self, tower: Any) -> None:
        """Place a tower here if the spot is free; the spot is then taken."""
        if self.valid_spot:
            self.associated_tower = tower
            self.valid_spot = False

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the image one pixel larger than its size to hide seams."""
        if self.image is None:
            return
        size = (self.image.get_width() + 1, self.image.get_height() + 1)
        scaled = pygame.transform.scale(self.image, size)
        surface.blit(scaled, (self.x - self.OFFSET_LEFT, self.y - self.OFFSET_DOWN))

    def update(self, elapsed: float) -> None:
        """Advance the tile by the elapsed time; plain tiles do nothing."""

    def xml_load(self, node: XmlNode) -> None:
        """Read grid position and image id from a node and centre the tile."""
        column = node.attribute_int("x", 0)
        row = node.attribute_int("y", 0)
        ident = node.attribute_value("id", "")
        image = self.grid.get_declaration(ident)
        self.file = self.grid.get_file(ident)
        if image is None:
            raise LookupError(f"no image declared for id {ident!r}")
        self.image = image
        self.x = column * image.get_width() + self.OFFSET_LEFT
        self.y = row * image.get_height() + self.OFFSET_DOWN

    def accept(self, visitor: ItemVisitor) -> None:
        """Accept a visitor; a plain tile is not visited."""


class GrassTile(Tile):
    """Open grass, where towers may be placed."""

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_grass_tile(self)


class SceneryTile(Tile):
    """Houses and trees; towers cannot be placed here."""

    def __init__(self, grid: Any) -> None:
        super().__init__(grid)
        self.valid_spot = False

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_scenery_tile(self)