import math

import pygame

from balloondefense.projectiles import ProjectileDart, ProjectileSniper
from balloondefense.visitors import BalloonCounter, ProjectileCounter

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


class FakeGame:
    def __init__(self):
        self.images = {}
        self.deleted = []

    def get_declaration(self, file):
        return self.images.get(file)

    def set_image(self, ident, file):
        surface = pygame.Surface((16, 16))
        surface.fill((255, 255, 255))
        self.images[ident] = surface
        return surface

    def delete_item(self, item):
        self.deleted.append(item)


def test_dart_points_and_image():
    dart = ProjectileDart(FakeGame(), 50, 50, 0, 0, 0)
    assert dart.points == ProjectileDart.POINTS == 10
    assert dart.file == "dart.png"


def test_sniper_points_and_image():
    bullet = ProjectileSniper(FakeGame(), 50, 50, 0, 0, 0)
    assert bullet.points == ProjectileSniper.POINTS == 15
    assert bullet.file == "bullet.png"


def test_position_is_truncated():
    dart = ProjectileDart(FakeGame(), 10.7, 20.2, 0, 0, 0)
    assert (dart.x, dart.y) == (10, 20)


def test_dart_moves_along_speed_and_stays_close():
    game = FakeGame()
    dart = ProjectileDart(game, 100, 100, 0, 200, 0)
    dart.update(0.1)
    assert dart.x > 100
    assert dart.y == 100
    assert game.deleted == []


def test_dart_deleted_after_travelling_far():
    game = FakeGame()
    dart = ProjectileDart(game, 100, 100, 0, 200, 0)
    dart.update(0.5)
    assert game.deleted == [dart]


def test_still_dart_is_not_deleted():
    game = FakeGame()
    dart = ProjectileDart(game, 100, 100, 0, 0, 0)
    dart.update(1.0)
    assert (dart.x, dart.y) == (100, 100)
    assert game.deleted == []


def test_sniper_inside_area_survives():
    game = FakeGame()
    bullet = ProjectileSniper(game, 500, 500, 0, 1000, 0)
    bullet.update(0.1)
    assert bullet.x > 500
    assert game.deleted == []


def test_sniper_deleted_at_edge():
    game = FakeGame()
    bullet = ProjectileSniper(game, 500, 500, 0, 1000, 0)
    bullet.update(1.0)
    assert bullet.x >= ProjectileSniper.EDGE
    assert game.deleted == [bullet]


def test_sniper_deleted_at_top_edge():
    game = FakeGame()
    bullet = ProjectileSniper(game, 500, 500, 0, 0, -1000)
    bullet.update(1.0)
    assert game.deleted == [bullet]


def test_draw_unrotated_puts_image_below_right():
    surface = pygame.Surface((100, 100))
    dart = ProjectileDart(FakeGame(), 50, 50, 0, 0, 0)
    dart.draw(surface)
    assert surface.get_at((55, 55)) == WHITE
    assert surface.get_at((45, 45)) == BLACK


def test_draw_quarter_turn_rotates_clockwise():
    surface = pygame.Surface((100, 100))
    dart = ProjectileDart(FakeGame(), 50, 50, math.pi / 2, 0, 0)
    dart.draw(surface)
    assert surface.get_at((45, 55)) == WHITE
    assert surface.get_at((55, 55)) == BLACK


def test_accept_visits_the_right_kind():
    game = FakeGame()
    dart = ProjectileDart(game, 0, 0, 0, 0, 0)
    bullet = ProjectileSniper(game, 0, 0, 0, 0, 0)
    counter = ProjectileCounter()
    dart.accept(counter)
    bullet.accept(counter)
    balloons = BalloonCounter()
    dart.accept(balloons)
    assert counter.projectiles == [dart, bullet]
    assert counter.num_projectiles == 2
    assert balloons.num_balloons == 0