import pygame
import pytest

from balloondefense.item import Item
from balloondefense.visitors import BalloonCounter, TowerCounter


class FakeGame:
    def __init__(self, size=(20, 20), alpha=True):
        self.declarations = {}
        self.loads = []
        self.size = size
        self.alpha = alpha

    def get_declaration(self, file):
        return self.declarations.get(file)

    def set_image(self, ident, file):
        self.loads.append((ident, file))
        flags = pygame.SRCALPHA if self.alpha else 0
        image = pygame.Surface(self.size, flags)
        image.fill((255, 0, 0, 255))
        self.declarations[ident] = image
        return image


def test_construct_stores_position_and_game():
    game = FakeGame()
    item = Item(game, 10, 20)
    assert item.game is game
    assert (item.x, item.y) == (10, 20)
    assert item.image is None
    assert item.file == ""


def test_set_image_loads_once_and_reuses():
    game = FakeGame()
    first = Item(game, 0, 0)
    second = Item(game, 0, 0)
    first.set_image("dart.png")
    second.set_image("dart.png")
    assert game.loads == [("dart.png", "dart.png")]
    assert first.image is second.image
    assert first.file == "dart.png"


def test_set_location_truncates_toward_zero():
    item = Item(FakeGame(), 0, 0)
    item.set_location(10.9, -3.7)
    assert (item.x, item.y) == (10, -3)


def test_hit_test_without_image_is_false():
    assert Item(FakeGame(), 0, 0).hit_test(0, 0) is False


def test_hit_test_on_opaque_image():
    item = Item(FakeGame(size=(20, 20)), 100, 100)
    item.set_image("tower.png")
    assert item.hit_test(100, 100) is True
    assert item.hit_test(110, 100) is False
    assert item.hit_test(89, 100) is False
    assert item.hit_test(100, 110) is False


def test_hit_test_respects_transparent_pixels():
    game = FakeGame(size=(20, 20))
    image = pygame.Surface((20, 20), pygame.SRCALPHA)
    image.fill((0, 0, 0, 0))
    image.fill((0, 255, 0, 255), pygame.Rect(10, 0, 10, 20))
    game.declarations["half.png"] = image
    item = Item(game, 100, 100)
    item.set_image("half.png")
    assert item.hit_test(95, 100) is False
    assert item.hit_test(105, 100) is True


def test_hit_test_without_alpha_counts_whole_rectangle():
    game = FakeGame(size=(20, 20), alpha=False)
    item = Item(game, 50, 50)
    item.set_image("plain.png")
    assert item.hit_test(41, 41) is True


def test_draw_places_bottom_edge_below_centre():
    game = FakeGame(size=(32, 32))
    item = Item(game, Item.OFFSET_LEFT, Item.OFFSET_DOWN)
    item.set_image("box.png")
    target = pygame.Surface((100, 100))
    target.fill((0, 0, 0))
    item.draw(target)
    assert target.get_at((0, 32))[:3] == (255, 0, 0)
    assert target.get_at((0, 31))[:3] == (0, 0, 0)


def test_draw_without_image_leaves_surface_unchanged():
    target = pygame.Surface((10, 10))
    target.fill((1, 2, 3))
    Item(FakeGame(), 5, 5).draw(target)
    assert target.get_at((5, 5))[:3] == (1, 2, 3)


@pytest.mark.parametrize("counter_type", [BalloonCounter, TowerCounter])
def test_base_item_is_not_visited(counter_type):
    counter = counter_type()
    Item(FakeGame(), 0, 0).accept(counter)
    visited = counter.balloons if counter_type is BalloonCounter else counter.towers
    assert visited == []


def test_update_does_not_move_base_item():
    item = Item(FakeGame(), 7, 8)
    item.update(1.5)
    assert (item.x, item.y) == (7, 8)