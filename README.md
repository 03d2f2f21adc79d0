# balloondefense

A small tower defense game built on pygame. Balloons follow a road laid out
on a grid of 64-pixel tiles. Before a level starts, you drag towers from the
control panel on the right onto grass tiles. Then you press **Go**, and the
towers pop the balloons as they pass.

## Installing

```
pip install .
```

To install with the test suite's dependencies as well:

```
pip install ".[test]"
pytest
```

## Playing

```
balloondefense [--images DIR] [--levels DIR] [--level {0,1,2,3}]
```

- `--images` is the directory the tile and sprite images are loaded from.
  The default is `images`.
- `--levels` is the directory that holds `level0a.xml`, `level1.xml`,
  `level2.xml` and `level3.xml`. The default is `levels`.
- `--level` sets the level to start on. The default is 1.

If the starting level or an image cannot be read, the command prints the
error and exits with status 1.

The window opens at 1043×900 and can be resized. The game area is scaled and
centred to fit the window.

- Keys `0`–`3` load the matching level.
- While a level has not started, hold the left mouse button on a tower in the
  panel and drag it out. Let go over a free grass tile to place the tower
  there. Let go anywhere else and the tower is discarded.
- While a level has not started, you can also pick up a tower you have
  already placed and move it.
- The **Go** button appears two seconds after a level loads. Clicking it
  starts the level. Five balloons are then released from the start tile.
- When every balloon is gone, the next level is loaded from the same
  directory. After level 3, level 3 is loaded again.

### Towers

| Tower  | Behaviour                                                                  |
|--------|----------------------------------------------------------------------------|
| Wave   | Every 5 s, sends out a ring that grows to a diameter of 200 and pops the balloons it reaches; 3 points per pop |
| 8-Shot | Every 5 s, fires eight darts, one in each of eight directions. Darts vanish after about 90 pixels; 10 points per pop |
| Bomb   | Explodes once, 3 s × its order of placement after the level starts. It pops balloons within 100 pixels and then disappears; 7 points per pop |
| Sniper | Every 7 s, turns toward the closest balloon and fires a fast bullet at it; 15 points per pop |

## Level files

A level is an XML document.

- The root element carries `start-x`, a pixel x position, and `start-y`, a
  row number. Together they give the road tile where balloons enter.
- The first child of the root holds image declarations. Each has an `id` and
  an `image` file name, and the file is loaded from the images directory.
- The second child holds the tiles. A tile element is `road`, `open`, `house`
  or `trees`. It carries the grid column `x`, the grid row `y`, and the `id`
  of its image declaration. Towers may be placed only on `open` tiles.
- A road's type is taken from characters 5–6 of its image file name:
  `EW`, `NS`, `NE`, `NW`, `SE` or `SW`. Starting from the start tile, the
  road tiles are linked into one path by following these connections.

## Using the library

The game can also be driven without a window:

```python
from balloondefense.game import Game
from balloondefense.visitors import BalloonCounter

game = Game("images")
game.load("levels/level1.xml")
game.active = True          # as if Go had been pressed
game.update(0.03)

counter = BalloonCounter()
game.accept(counter)
print(counter.num_balloons, game.control_panel.scoreboard.score())
```

Modules:

- `balloondefense.game.Game` holds the grid, the control panel and the items,
  and runs the level. It provides `load`, `update`, `draw`,
  `on_left_button_down`, `on_mouse_move`, `balloon_checker`,
  `closest_balloon` and more.
- `balloondefense.grid.Grid` loads a level file and links the road path.
- `balloondefense.visitors` has the `ItemVisitor` base and the counters
  `BalloonCounter`, `ProjectileCounter`, `RoadCounter` and `TowerCounter`.
- `balloondefense.xmlnode.XmlNode` is a small XML document wrapper for
  opening, creating, reading and saving documents. It raises `XmlError`, with
  an `ErrorKind`, when a document cannot be opened, created or written.
- `balloondefense.scoreboard.Scoreboard` keeps the running score.
- `balloondefense.app` has `GameView`, which connects pygame events and
  frames to a game, and `main`, which is the `balloondefense` command.

## What it does not do

- No level files or images come with the package. You must supply the
  `levels` and `images` directories yourself.
- A balloon that reaches the end of the road just disappears. Nothing is lost
  and the score does not change, so a level cannot be failed.
- There is no menu bar, no saving of progress and no high-score table.