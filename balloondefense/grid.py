"""The playing grid: the tiles of a level and the road path through them."""

from __future__ import annotations

import os
from typing import Any, Iterator

import pygame

from balloondefense.road_tile import RoadTile
from balloondefense.tile import GrassTile, SceneryTile, Tile
from balloondefense.visitors import ItemVisitor, RoadCounter
from balloondefense.xmlnode import NodeType, XmlNode

_STEP = 64

_NORTH = (0, -_STEP)
_SOUTH = (0, _STEP)
_EAST = (_STEP, 0)
_WEST = (-_STEP, 0)

# The neighbours each kind of road connects to, in the order they are tried.
_CONNECTIONS: dict[str, tuple[tuple[int, int], ...]] = {
    "EW": (_EAST, _WEST),
    "NS": (_NORTH, _SOUTH),
    "NE": (_NORTH, _EAST),
    "NW": (_NORTH, _WEST),
    "SE": (_SOUTH, _EAST),
    "SW": (_SOUTH, _WEST),
}

_TILE_KINDS: dict[str, type[Tile]] = {
    "road": RoadTile,
    "open": GrassTile,
    "house": SceneryTile,
    "trees": SceneryTile,
}


def _required_int(node: XmlNode, name: str) -> int:
    attr = node.get_attribute(name)
    if attr is None:
        raise ValueError(f"missing required attribute {name!r}")
    return attr.int_value()


class Grid:
    """The tiles of a level, loaded from an XML file."""

    GRID_SPACING = 32

    def __init__(self, game: Any) -> None:
        self.game = game
        self.start_x = 0
        self.start_y = 0
        self.start_tile: RoadTile | None = None
        self.tiles: list[Tile] = []
        self.files: dict[str, str] = {}

    def add(self, tile: Tile) -> None:
        """Add a tile to the grid."""
        self.tiles.append(tile)

    def draw(self, surface: pygame.Surface) -> None:
        for tile in self.tiles:
            tile.draw(surface)

    def update(self, elapsed: float) -> None:
        for tile in self.tiles:
            tile.update(elapsed)

    def load(self, filename: str | os.PathLike[str]) -> None:
        """Load a level file, replacing the current tiles, and build the road path.

        Raises XmlError when the file cannot be read as XML.
        """
        root = XmlNode.open_document(str(filename))
        self.clear()

        self.start_x = _required_int(root, "start-x")
        self.start_y = _required_int(root, "start-y") * _STEP + self.GRID_SPACING

        declarations = root.child(0)
        items = root.child(1)

        for node in declarations:
            if node.node_type() != NodeType.ELEMENT:
                continue
            ident = node.attribute_value("id", "")
            # an image already known to the game is not loaded again
            if self.game.get_declaration(ident) is None:
                file = node.attribute_value("image", "")
                self.files.setdefault(ident, file)
                self.game.set_image(ident, file)

        for node in items:
            if node.node_type() == NodeType.ELEMENT:
                self._xml_tile(node)

        self.build_road_list()

    def _xml_tile(self, node: XmlNode) -> None:
        kind = _TILE_KINDS.get(node.name())
        if kind is None:
            return
        tile = kind(self)
        tile.xml_load(node)
        self.add(tile)

    def clear(self) -> None:
        """Remove every tile."""
        self.tiles.clear()

    def accept(self, visitor: ItemVisitor) -> None:
        for tile in self.tiles:
            tile.accept(visitor)

    def _covers(self, tile: Tile, x: float, y: float) -> bool:
        return (tile.x - self.GRID_SPACING <= x <= tile.x + self.GRID_SPACING
                and tile.y - self.GRID_SPACING <= y <= tile.y + self.GRID_SPACING)

    def tile_finder(self, x: float, y: float) -> Tile | None:
        """The first tile covering the point, or None."""
        return next((tile for tile in self.tiles if self._covers(tile, x, y)), None)

    def build_road_list(self) -> None:
        """Link the road tiles into the path balloons follow from the start tile."""
        start = self.tile_finder(self.start_x, self.start_y)
        if start is None:
            raise LookupError(
                f"no tile at the start position ({self.start_x}, {self.start_y})")
        start_visitor = RoadCounter()
        start.accept(start_visitor)
        self.start_tile = start_visitor.road

        road_visitor = RoadCounter()
        self.accept(road_visitor)
        if road_visitor.road_count and self.start_tile is None:
            raise LookupError("the start tile is not a road")

        visited: list[RoadTile] = []
        current = self.start_tile
        for _ in range(road_visitor.road_count):
            visited.append(current)
            adjacency = RoadCounter()
            for dx, dy in _CONNECTIONS.get(current.road_type, ()):
                neighbour = self.tile_finder(current.x + dx, current.y + dy)
                if neighbour is not None:
                    neighbour.accept(adjacency)
            for road in adjacency.adjacent:
                if all(road is not seen for seen in visited):
                    current.next_tile = road
                    current = road
                    break

    def get_declaration(self, ident: str) -> pygame.Surface | None:
        """The image the game holds for a declaration id."""
        return self.game.get_declaration(ident)

    def get_file(self, ident: str) -> str:
        """The image file name declared for an id; KeyError if unknown."""
        return self.files[ident]

    def tile_test(self, x: float, y: float) -> Tile | None:
        """The tile at the point if a tower may be placed there, else None."""
        found = None
        for tile in self.tiles:
            if self._covers(tile, x, y):
                found = tile
        if found is not None and found.valid_spot:
            return found
        return None

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)