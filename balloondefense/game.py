"""The game: the grid, the control panel and every item in play."""

from __future__ import annotations

import math
import os
from pathlib import Path
from typing import Any

import pygame

from balloondefense.balloon import Balloon
from balloondefense.control_panel import ControlPanel
from balloondefense.grid import Grid
from balloondefense.item import Item
from balloondefense.tile import Tile
from balloondefense.towers import Tower
from balloondefense.visitors import (
    BalloonCounter,
    ItemVisitor,
    ProjectileCounter,
    TowerCounter,
)

_BLACK = (0, 0, 0)
_MAROON = (128, 0, 0)
_TRANSITION_FONT_SIZE = 100
_TRANSITION_TIME = 2
_BALLOONS_PER_LEVEL = 5
_BALLOON_RADIUS = 24
_CONTROL_PANEL_LEFT = 1024

_LEVEL_BY_NAME = {
    "level0a.xml": 0,
    "level0.xml": 0,
    "level1.xml": 1,
    "level2.xml": 2,
}


class Game:
    """Holds the whole game: grid, control panel, items, score and level."""

    WIDTH = 1224
    HEIGHT = 1024

    def __init__(self, images_directory: str | os.PathLike[str] = "images") -> None:
        self.images_directory = Path(images_directory)
        self._declarations: dict[str, pygame.Surface] = {}
        self.items: list[Item] = []
        self.active = True
        self.grabbed_item: Tower | None = None
        self.scale = 1.0
        self.x_offset = 0.0
        self.y_offset = 0.0
        self.level = 1
        self.level_file: Path | None = None
        self.balloon_count = _BALLOONS_PER_LEVEL
        self.level_timer = 0.0
        self._font: pygame.font.Font | None = None
        self.grid = Grid(self)
        self.control_panel = ControlPanel(self)

    # Drawing

    def draw(self, surface: pygame.Surface, width: int, height: int) -> None:
        """Draw the game scaled and centred in a window of the given size."""
        surface.fill(_BLACK)
        self.scale = min(width / self.WIDTH, height / self.HEIGHT)
        self.x_offset = (width - self.WIDTH * self.scale) / 2
        self.y_offset = (height - self.HEIGHT * self.scale) / 2

        virtual = pygame.Surface((self.WIDTH, self.HEIGHT))
        virtual.fill(_BLACK)
        self.grid.draw(virtual)
        self.control_panel.draw(virtual)

        balloons = BalloonCounter()
        self.accept(balloons)
        projectiles = ProjectileCounter()
        self.accept(projectiles)
        towers = TowerCounter()
        self.accept(towers)

        for balloon in balloons.balloons:
            balloon.draw(virtual)
        for projectile in projectiles.projectiles:
            projectile.draw(virtual)
        for tower in towers.towers:
            tower.draw(virtual)

        if self.level_timer <= _TRANSITION_TIME:
            self.transition(virtual, width, height)

        size = (max(0, int(self.WIDTH * self.scale)), max(0, int(self.HEIGHT * self.scale)))
        if size[0] and size[1]:
            scaled = pygame.transform.scale(virtual, size)
            surface.blit(scaled, (int(self.x_offset), int(self.y_offset)))

    def transition(self, surface: pygame.Surface, width: int, height: int) -> None:
        """Show the "Level N Begin" banner."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _TRANSITION_FONT_SIZE)
        shown = self.level if self.level in (0, 1, 2, 3) else 3
        text = self._font.render(f"Level {shown} Begin", True, _MAROON)
        surface.blit(text, (width // 4, height // 2))

    # Images

    def set_image(self, ident: str, file: str) -> pygame.Surface:
        """Load an image file under an id; an id already loaded is reused."""
        known = self._declarations.get(ident)
        if known is not None:
            return known
        image = pygame.image.load(str(self.images_directory / file))
        return self._declarations.setdefault(ident, image)

    def get_declaration(self, file: str) -> pygame.Surface | None:
        """The image stored under an id, or None."""
        return self._declarations.get(file)

    # Mouse handling

    def _to_virtual(self, x: float, y: float) -> tuple[float, float]:
        return (x - self.x_offset) / self.scale, (y - self.y_offset) / self.scale

    def on_left_button_down(self, x: float, y: float) -> None:
        """Pick up a tower from the panel or the grid while the game is not playing."""
        virtual_x, virtual_y = self._to_virtual(x, y)
        if self.active:
            return
        if virtual_x > _CONTROL_PANEL_LEFT:
            self.grabbed_item = self.control_panel.hit_test(int(virtual_x), int(virtual_y))
        else:
            self.grabbed_item = self.hit_test(int(virtual_x), int(virtual_y))

    def on_mouse_move(self, x: float, y: float, left_button: bool) -> None:
        """Drag the grabbed tower; on release, drop it on a free tile or discard it."""
        if self.grabbed_item is None:
            return
        virtual_x, virtual_y = self._to_virtual(x, y)
        if left_button:
            self.grabbed_item.set_location(virtual_x, virtual_y)
            return
        tile = self.tile_test(int(virtual_x), int(virtual_y))
        if tile is not None:
            self.grabbed_item.set_location(tile.x, tile.y)
            tile.set_associated_tower(self.grabbed_item)
            self.grabbed_item.tile = tile
        else:
            self.delete_item(self.grabbed_item)
        self.grabbed_item = None

    # Items

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def delete_item(self, item: Item) -> None:
        """Remove the item from the game if it is there."""
        for index, candidate in enumerate(self.items):
            if candidate is item:
                del self.items[index]
                return

    def move_to_front(self, item: Item) -> None:
        """Move the item to the end of the list so it is drawn last."""
        for index, candidate in enumerate(self.items):
            if candidate is item:
                del self.items[index]
                self.items.append(candidate)
                return

    def hit_test(self, x: float, y: float) -> Tower | None:
        """Take the topmost tower at the point off its tile and return it."""
        counter = TowerCounter()
        self.accept(counter)
        for tower in reversed(counter.towers):
            if not tower.hit_test(x, y):
                continue
            tile = tower.tile
            if tile is not None:
                tile.set_associated_tower(None)
                tile.valid_spot = True
            tower.tile = None
            self.move_to_front(tower)
            return tower
        return None

    def tile_test(self, x: float, y: float) -> Tile | None:
        """The tile at the point if a tower may be placed there."""
        return self.grid.tile_test(x, y)

    # Popping balloons

    def _pop(self, balloon: Any) -> None:
        if balloon.tile_on is not None:
            balloon.tile_on.delete_balloon(balloon)
        self.delete_item(balloon)

    def collision_check(self) -> None:
        """Pop every balloon a projectile touches, scoring the projectile's points."""
        projectiles = ProjectileCounter()
        balloons = BalloonCounter()
        self.accept(projectiles)
        self.accept(balloons)
        hit = []
        for projectile in projectiles.projectiles:
            for balloon in balloons.balloons:
                near_x = balloon.x - _BALLOON_RADIUS <= projectile.x <= balloon.x + _BALLOON_RADIUS
                near_y = balloon.y - _BALLOON_RADIUS <= projectile.y <= balloon.y + _BALLOON_RADIUS
                if near_x and near_y:
                    hit.append(balloon)
                    self.control_panel.scoreboard.update_score(projectile.points)
        for balloon in hit:
            self._pop(balloon)

    def balloon_checker(self, x: float, y: float, max_distance: float, score: int) -> None:
        """Pop every balloon within a distance of a point, scoring each."""
        counter = BalloonCounter()
        self.accept(counter)
        popped = [
            balloon for balloon in counter.balloons
            if math.hypot(x - balloon.x, y - balloon.y) - _BALLOON_RADIUS <= max_distance
        ]
        for balloon in popped:
            self._pop(balloon)
            self.control_panel.scoreboard.update_score(score)

    def closest_balloon(self, x: float, y: float) -> Balloon | None:
        """The balloon nearest the point, or None if there are none."""
        counter = BalloonCounter()
        self.accept(counter)
        closest = None
        best = math.inf
        for balloon in counter.balloons:
            distance = math.hypot(balloon.x - x, balloon.y - y)
            if distance < best:
                best = distance
                closest = balloon
        return closest

    # Levels

    def load(self, filename: str | os.PathLike[str]) -> None:
        """Clear the game and load a level file; raises XmlError if it is unreadable."""
        self.clear()
        path = Path(filename)
        self.level = _LEVEL_BY_NAME.get(path.name, 3)
        self.level_file = path
        self.grid.load(path)

    def clear(self) -> None:
        """Remove every item and tile and reset the level state."""
        self.grid.clear()
        self.active = False
        self.items.clear()
        self.control_panel.reset()
        self.balloon_count = _BALLOONS_PER_LEVEL
        self.level_timer = 0.0

    def _next_level_file(self) -> Path:
        name = {1: "level1.xml", 2: "level2.xml"}.get(self.level, "level3.xml")
        directory = self.level_file.parent if self.level_file is not None else Path("levels")
        return directory / name

    def update(self, elapsed: float) -> None:
        """Advance the game; when a level is cleared, load the next one."""
        self.control_panel.update(elapsed)
        self.level_timer += elapsed
        if not self.active:
            return

        start_tile = self.grid.start_tile
        if self.balloon_count != 0 and start_tile is not None:
            self.balloon_count -= 1
            balloon = Balloon(self, self.grid.start_x, self.grid.start_y)
            self.add_item(balloon)
            start_tile.add_balloon(balloon)

        self.grid.update(elapsed)

        projectiles = ProjectileCounter()
        self.accept(projectiles)
        towers = TowerCounter()
        self.accept(towers)

        for projectile in projectiles.projectiles:
            projectile.update(elapsed)
            self.collision_check()
        for tower in towers.towers:
            tower.update(elapsed)

        remaining = BalloonCounter()
        self.accept(remaining)
        if self.balloon_count == 0 and remaining.num_balloons == 0:
            self.level_timer = 0.0
            self.level += 1
            self.load(self._next_level_file())

    def accept(self, visitor: ItemVisitor) -> None:
        for item in list(self.items):
            item.accept(visitor)