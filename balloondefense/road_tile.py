"""Road tiles, which carry balloons along their path."""

from __future__ import annotations

from typing import Any, Callable

from balloondefense.tile import Tile
from balloondefense.visitors import ItemVisitor
from balloondefense.xmlnode import XmlNode


class RoadTile(Tile):
    """A road tile; its type ("EW", "NS", "NE", "NW", "SE", "SW") shapes the path."""

    def __init__(self, grid: Any) -> None:
        super().__init__(grid)
        self.valid_spot = False
        self.road_type = ""
        self.next_tile: RoadTile | None = None
        self.balloons: list[Any] = []

    def xml_load(self, node: XmlNode) -> None:
        """Load the tile and take its road type from the image file name."""
        super().xml_load(node)
        if len(self.file) < 4:
            raise ValueError(f"road image name too short: {self.file!r}")
        self.road_type = self.file[4:6]

    def add_balloon(self, balloon: Any) -> None:
        self.balloons.append(balloon)
        balloon.set_tile_on(self)

    def delete_balloon(self, balloon: Any) -> None:
        """Remove the balloon from this tile if it is here."""
        if balloon in self.balloons:
            self.balloons.remove(balloon)

    @staticmethod
    def _progress(balloon: Any) -> float:
        t = balloon.t
        if not balloon.is_forward(t):
            t = 1 - t
        return t

    def _left(self) -> int:
        return self.x - self.OFFSET_LEFT

    def _top(self) -> int:
        return self.y - self.OFFSET_DOWN

    def place_balloon_nw(self, balloon: Any) -> None:
        """North entrance to west exit."""
        t = self._progress(balloon)
        x, y = self.x, self.y
        if t < 0.5:
            y = self._top() + t * self.height()
        else:
            x = self._left() + (1 - t) * self.width()
        balloon.set_location(int(x), int(y))

    def place_balloon_sw(self, balloon: Any) -> None:
        """South entrance to west exit."""
        t = self._progress(balloon)
        x, y = self.x, self.y
        if t < 0.5:
            y = self._top() + (1 - t) * self.height()
        else:
            x = self._left() + (1 - t) * self.width()
        balloon.set_location(int(x), int(y))

    def place_balloon_ew(self, balloon: Any) -> None:
        """Straight across, east and west."""
        t = self._progress(balloon)
        x, y = self.x, self.y
        if t < 1.0:
            x = self._left() + t * self.width()
        balloon.set_location(int(x), int(y))

    def place_balloon_ns(self, balloon: Any) -> None:
        """Straight down, north to south."""
        t = self._progress(balloon)
        x, y = self.x, self.y
        if t < 1.0:
            y = self._top() + t * self.height()
        balloon.set_location(int(x), int(y))

    def place_balloon_ne(self, balloon: Any) -> None:
        """North entrance to east exit."""
        t = self._progress(balloon)
        x, y = self.x, self.y
        if t < 0.5:
            y = self._top() + t * self.height()
        else:
            x = self._left() + t * self.width()
        balloon.set_location(int(x), int(y))

    def place_balloon_se(self, balloon: Any) -> None:
        """South entrance to east exit."""
        t = self._progress(balloon)
        x, y = self.x, self.y
        if t < 0.5:
            y = self._top() + (1 - t) * self.height()
        else:
            x = self._left() + t * self.width()
        balloon.set_location(int(x), int(y))

    _PLACERS: dict[str, Callable[[RoadTile, Any], None]] = {
        "EW": place_balloon_ew,
        "NS": place_balloon_ns,
        "NE": place_balloon_ne,
        "NW": place_balloon_nw,
        "SE": place_balloon_se,
        "SW": place_balloon_sw,
    }

    def update(self, elapsed: float) -> None:
        """Move balloons along; hand finished ones to the next tile or drop them."""
        moved_on = []
        for balloon in list(self.balloons):
            balloon.update(elapsed)
            if balloon.t >= 1.0:
                if self.next_tile is not None:
                    balloon.reset_t()
                    self.next_tile.add_balloon(balloon)
                    moved_on.append(balloon)
                else:
                    self.delete_balloon(balloon)
            else:
                placer = self._PLACERS.get(self.road_type)
                if placer is not None:
                    placer(self, balloon)
        for balloon in moved_on:
            self.delete_balloon(balloon)

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_road_tile(self)