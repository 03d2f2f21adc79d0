import pygame
import pytest

from balloondefense.control_panel import ControlPanel
from balloondefense.towers import Tower8Shot, TowerBomb, TowerSniper, TowerWave

IMAGE_COLOR = (10, 20, 200)


class FakeGame:
    def __init__(self):
        self.declarations = {}
        self.items = []
        self.active = False

    def set_image(self, ident, file):
        surface = pygame.Surface((64, 64))
        surface.fill(IMAGE_COLOR)
        self.declarations[ident] = surface
        return surface

    def get_declaration(self, file):
        return self.declarations.get(file)

    def add_item(self, item):
        self.items.append(item)

    def delete_item(self, item):
        if item in self.items:
            self.items.remove(item)


@pytest.fixture
def game():
    return FakeGame()


@pytest.fixture
def panel(game):
    return ControlPanel(game)


def test_reset_restores_palette_and_button(panel):
    panel.go_button.active = True
    panel.bomb_count = 4
    panel.reset()
    assert panel.go_button.active is False
    assert panel.bomb_count == 0
    kinds = [type(tower) for tower in panel.control_towers]
    assert kinds == [TowerWave, Tower8Shot, TowerBomb, TowerSniper]
    assert [(t.x, t.y) for t in panel.control_towers] == [
        (1124, 82), (1124, 182), (1124, 282), (1124, 382)]


def test_hit_test_creates_towers(panel, game):
    panel.go_button.active = True
    wave = panel.hit_test(1124, 82)
    eight = panel.hit_test(1124, 182)
    bomb = panel.hit_test(1124, 282)
    sniper = panel.hit_test(1124, 382)
    assert isinstance(wave, TowerWave)
    assert isinstance(eight, Tower8Shot)
    assert isinstance(bomb, TowerBomb)
    assert isinstance(sniper, TowerSniper)
    assert game.items == [wave, eight, bomb, sniper]
    assert (wave.x, wave.y) == (1124, 82)
    assert panel.hit_test(100, 200) is None
    assert len(game.items) == 4


def test_bomb_towers_are_numbered(panel):
    panel.go_button.active = True
    first = panel.hit_test(1124, 282)
    second = panel.hit_test(1124, 282)
    assert panel.bomb_count == 2
    assert first.timer == pytest.approx(3.0)
    assert second.timer == pytest.approx(6.0)


def test_hit_test_blocked_before_go_button(panel, game):
    assert panel.hit_test(1124, 82) is None
    assert game.items == []


def test_go_button_click_starts_game(panel, game):
    panel.go_button.active = True
    assert panel.hit_test(1084, 875) is None
    assert game.active is True


def test_update_shows_go_button_after_transition(panel, game):
    panel.update(1.0)
    assert panel.go_button.active is False
    panel.update(1.5)
    assert panel.go_button.active is True
    game.active = True
    panel.update(1.0)
    assert panel.go_button.active is False


def test_scoreboard_from_control_panel(panel):
    assert panel.scoreboard.score() == 0
    panel.scoreboard.update_score(10)
    assert panel.scoreboard.score() == 10
    panel.scoreboard.update_score(100)
    assert panel.scoreboard.score() == 110
    panel.scoreboard.update_score(-10)
    assert panel.scoreboard.score() == 100


def test_draw_shows_towers_and_score(panel):
    surface = pygame.Surface((1224, 1024))
    surface.fill((0, 0, 0))
    panel.draw(surface)
    assert tuple(surface.get_at((1100, 60)))[:3] == IMAGE_COLOR
    yellow = sum(
        1
        for x in range(1024, 1224)
        for y in range(440, 610)
        if (lambda c: c.r > 200 and c.g > 200 and c.b < 60)(surface.get_at((x, y)))
    )
    assert yellow > 0
    # the Go button is hidden while inactive
    assert tuple(surface.get_at((1084, 870)))[:3] == (0, 0, 0)