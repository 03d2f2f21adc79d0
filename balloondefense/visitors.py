"""Visitors over game items and tiles, and the counters built on them."""

from __future__ import annotations

from typing import Any


class ItemVisitor:
    """Base visitor over game items and tiles.

    A visit that a subclass does not override is recorded in ``skipped``
    and otherwise ignored.
    """

    def __init__(self) -> None:
        self.skipped: list[Any] = []

    def _skip(self, obj: Any) -> None:
        vars(self).setdefault("skipped", []).append(obj)

    def visit_tower(self, tower: Any) -> None:
        """Visit a generic tower."""
        self._skip(tower)

    def visit_tower_8shot(self, tower: Any) -> None:
        """Visit an eight-shot tower."""
        self._skip(tower)

    def visit_tower_bomb(self, tower: Any) -> None:
        """Visit a bomb tower."""
        self._skip(tower)

    def visit_tower_sniper(self, tower: Any) -> None:
        """Visit a sniper tower."""
        self._skip(tower)

    def visit_tower_wave(self, tower: Any) -> None:
        """Visit a wave tower."""
        self._skip(tower)

    def visit_balloon(self, balloon: Any) -> None:
        """Visit a balloon."""
        self._skip(balloon)

    def visit_projectile_dart(self, projectile: Any) -> None:
        """Visit a dart projectile."""
        self._skip(projectile)

    def visit_projectile_sniper(self, projectile: Any) -> None:
        """Visit a sniper bullet."""
        self._skip(projectile)

    def visit_road_tile(self, tile: Any) -> None:
        """Visit a road tile."""
        self._skip(tile)

    def visit_grass_tile(self, tile: Any) -> None:
        """Visit a grass tile."""
        self._skip(tile)

    def visit_scenery_tile(self, tile: Any) -> None:
        """Visit a scenery tile."""
        self._skip(tile)


class BalloonCounter(ItemVisitor):
    """Collects the balloons it visits."""

    def __init__(self) -> None:
        super().__init__()
        self.num_balloons = 0
        self.balloon: Any = None
        self.balloons: list[Any] = []

    def visit_balloon(self, balloon: Any) -> None:
        self.num_balloons += 1
        self.balloon = balloon
        self.balloons.append(balloon)


class ProjectileCounter(ItemVisitor):
    """Collects the projectiles (darts and bullets) it visits."""

    def __init__(self) -> None:
        super().__init__()
        self.num_projectiles = 0
        self.projectile: Any = None
        self.projectiles: list[Any] = []

    def _record(self, projectile: Any) -> None:
        self.num_projectiles += 1
        self.projectile = projectile
        self.projectiles.append(projectile)

    def visit_projectile_dart(self, projectile: Any) -> None:
        self._record(projectile)

    def visit_projectile_sniper(self, projectile: Any) -> None:
        self._record(projectile)


class RoadCounter(ItemVisitor):
    """Collects the road tiles it visits."""

    def __init__(self) -> None:
        super().__init__()
        self.road_count = 0
        self.road: Any = None
        self.adjacent: list[Any] = []

    def visit_road_tile(self, tile: Any) -> None:
        self.road_count += 1
        self.road = tile
        self.adjacent.append(tile)


class TowerCounter(ItemVisitor):
    """Collects the towers of every kind it visits."""

    def __init__(self) -> None:
        super().__init__()
        self.towers: list[Any] = []

    def visit_tower_8shot(self, tower: Any) -> None:
        self.towers.append(tower)

    def visit_tower_bomb(self, tower: Any) -> None:
        self.towers.append(tower)

    def visit_tower_sniper(self, tower: Any) -> None:
        self.towers.append(tower)

    def visit_tower_wave(self, tower: Any) -> None:
        self.towers.append(tower)