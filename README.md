# junkfield

A small turn-based game played in the terminal. You pilot a ship on a grid
littered with space junk. Collect every piece of junk to clear the level.
Avoid the asteroids that drift across the field, and do not run out of fuel.

## Installing

    pip install .

## Playing

    junkfield [--intro PATH] [--scores PATH] [--seed N]

Options:

- `--intro PATH`: text file shown before the game starts (default
  `gametxt.txt` in the current directory).
- `--scores PATH`: file holding the best score (default `bestScore.txt` in
  the current directory).
- `--seed N`: seed for the random number generator, for a repeatable field.

You first pick a difficulty. Answers that are not a number 1 to 3 are asked
again.

| Choice   | Grid  | Asteroids | HP  | Fuel |
|----------|-------|-----------|-----|------|
| 1 Easy   | 20x10 | 5         | 100 | 60   |
| 2 Normal | 30x15 | 10        | 100 | 80   |
| 3 Hard   | 40x20 | 15        | 100 | 100  |

The introduction file is then printed and the game waits for a key. If the
introduction file cannot be read, the command reports it and exits with
status 1.

Each turn, enter `w`, `a`, `s` or `d` to move, or `q` to quit; any other key
leaves the ship where it is. The ship cannot leave the grid. Every turn uses
one unit of fuel. The map uses these symbols:

- `&` your ship
- `#` junk
- `@` an asteroid
- `.` empty space

About 7% of the cells start with junk. Asteroids enter from the edges of the
grid, move one step per turn in a fixed direction, and are replaced by a new
one when they drift off the grid. A hit from an asteroid costs 100 HP.

When your HP or fuel reaches zero, the run ends. Your level is compared with
the number stored in the scores file, which must already exist and hold a
number; the file is rewritten with your level if it is higher. If the file
cannot be read or holds no number, the command reports it and exits with
status 1.

When a level is cleared you can spend the junk you collected on an upgrade.
You are then placed in the middle of a new field with a full tank.

1. No upgrade
2. +10 maximum fuel (10 junk)
3. +50 maximum HP (10 junk)
4. Heal 25 HP, up to the maximum (5 junk)

When you reach level 10 the game announces that you have won.

Reaching the end of input ends the game quietly.

## Using the game from Python

`junkfield.game` holds the rules without any terminal input or output:

```python
import random
from junkfield.game import Event, Game, difficulty_for

game = Game(difficulty_for("1"), random.Random(42))
print(game.render())
event = game.step("d")
if event is Event.LEVEL_UP:
    print(game.next_level("2"))
```

- `difficulty_for(choice)` returns `EASY`, `NORMAL` or `HARD` (instances of
  `Difficulty`) for `"1"`, `"2"` or `"3"`, and raises `ValueError` otherwise.
- `Game(difficulty, rng=None)` builds a field. Its state is held in
  `player` (a `Player` with `x`, `y`, `hp`, `max_hp`, `fuel`, `max_fuel`),
  `grid` (rows of `CellType`), `asteroids` (a list of `Asteroid`), `level`,
  `trash`, `event` and `message`.
- `Game.step(key)` moves the player, checks for pickups and collisions, moves
  the asteroids, checks again, spends one unit of fuel, and returns an
  `Event`: `NONE`, `DEAD`, `LEVEL_UP` or `WIN`. After `DEAD`, `message` says
  why.
- `Game.next_level(choice)` advances a level, applies the upgrade chosen by
  the menu answer and returns a message describing it; `Game.apply_upgrade`
  applies an upgrade alone.
- `Game.render()` returns the status line and the map as text.
- `type_check(variable, required)` classifies text as `"char"`, `"int"`,
  `"float"` or `"string"` the way the menus do.