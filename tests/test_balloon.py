from unittest import mock

import pygame
import pytest

from balloondefense.balloon import Balloon
from balloondefense.road_tile import RoadTile
from balloondefense.visitors import BalloonCounter, TowerCounter


class FakeGame:
    def __init__(self):
        self.images = {}
        self.loaded = []

    def get_declaration(self, file):
        return self.images.get(file)

    def set_image(self, ident, file):
        surface = pygame.Surface((16, 16))
        surface.fill((255, 255, 255))
        self.images[ident] = surface
        self.loaded.append(file)
        return surface


def make_tile(x, y):
    tile = RoadTile(None)
    tile.set_location(x, y)
    return tile


def test_balloon_uses_chosen_color_image():
    game = FakeGame()
    with mock.patch("random.choice", side_effect=lambda seq: seq[-1]):
        balloon = Balloon(game, 0, 0)
    assert balloon.file == "red-balloon.png"
    assert balloon.image is game.images["red-balloon.png"]


def test_balloon_color_is_one_of_the_known_colors():
    game = FakeGame()
    files = {Balloon(game, 0, 0).file for _ in range(20)}
    assert files <= {"black-balloon.png", "blue-balloon.png", "red-balloon.png"}


def test_image_loaded_only_once():
    game = FakeGame()
    with mock.patch("random.choice", side_effect=lambda seq: seq[0]):
        Balloon(game, 0, 0)
        Balloon(game, 5, 5)
    assert game.loaded == ["black-balloon.png"]


def test_update_increases_t():
    balloon = Balloon(FakeGame(), 0, 0)
    first = balloon.t
    balloon.update(0.1)
    second = balloon.t
    balloon.update(0.1)
    assert first < second < balloon.t


def test_reset_t_carries_over_a_whole_tile():
    balloon = Balloon(FakeGame(), 0, 0)
    start = balloon.t
    balloon.update(0.5)
    assert balloon.t >= 1.0
    balloon.reset_t()
    assert balloon.t == pytest.approx(start)


def test_first_tile_is_recorded_and_forward():
    balloon = Balloon(FakeGame(), 0, 0)
    tile = make_tile(96, 32)
    balloon.set_tile_on(tile)
    assert balloon.tile_on is tile
    assert balloon.is_forward(balloon.t) is True


@pytest.mark.parametrize(
    "position, forward",
    [((32, 32), True), ((160, 32), False), ((96, 96), False)],
)
def test_direction_from_next_tile(position, forward):
    balloon = Balloon(FakeGame(), 0, 0)
    first = make_tile(96, 32)
    balloon.set_tile_on(first)
    balloon.set_tile_on(make_tile(*position))
    assert balloon.is_forward(balloon.t) is forward
    assert balloon.tile_on is first


def test_accept_visits_balloon_only():
    balloon = Balloon(FakeGame(), 0, 0)
    counter = BalloonCounter()
    balloon.accept(counter)
    towers = TowerCounter()
    balloon.accept(towers)
    assert counter.num_balloons == 1
    assert counter.balloons == [balloon]
    assert towers.towers == []