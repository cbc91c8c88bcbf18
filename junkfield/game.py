"""Game state and rules for collecting space junk in an asteroid field."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

ASTEROID_DAMAGE = 100
WINNING_LEVEL = 10
TRASH_CHANCE = 7  # percent of cells that start with trash
UPGRADE_COST = 10
HEAL_COST = 5
HEAL_AMOUNT = 25
FUEL_UPGRADE = 10
HP_UPGRADE = 50


class CellType(enum.Enum):
    """What occupies a cell of the map."""

    EMPTY = "Empty"
    TRASH = "Trash"
    ASTEROID = "Astro"


class Event(enum.Enum):
    """Outcome of the last rules check."""

    NONE = ""
    DEAD = "DEAD"
    LEVEL_UP = "LEVEL_UP"
    WIN = "WIN"


@dataclass
class Player:
    """The player's ship."""

    x: int
    y: int
    hp: int
    max_hp: int
    fuel: int
    max_fuel: int


@dataclass
class Asteroid:
    """An asteroid with its position and velocity."""

    x: int
    y: int
    dx: int
    dy: int


@dataclass(frozen=True)
class Difficulty:
    """Map size, asteroid count and starting ship stats."""

    width: int
    height: int
    asteroids: int
    hp: int
    fuel: int


EASY = Difficulty(width=20, height=10, asteroids=5, hp=100, fuel=60)
NORMAL = Difficulty(width=30, height=15, asteroids=10, hp=100, fuel=80)
HARD = Difficulty(width=40, height=20, asteroids=15, hp=100, fuel=100)
DIFFICULTIES = {"1": EASY, "2": NORMAL, "3": HARD}


def _classify(variable: str) -> str | None:
    if len(variable) == 1:
        code = ord(variable)
        if 33 <= code <= 47 or 58 <= code <= 126:
            return "char"
    kind = None
    for ch in variable:
        if ch == ".":
            return "float"
        kind = "int" if "0" <= ch <= "9" else "string"
    return kind


def type_check(variable: str, required: str) -> bool:
    """Tell whether the text classifies as the required kind.

    Kinds are "char", "int", "float" and "string"; the last character
    decides between "int" and "string".
    """
    return _classify(variable) == required


def difficulty_for(choice: str) -> Difficulty:
    """Return the difficulty chosen by a menu answer such as "1"."""
    if not type_check(choice, "int"):
        raise ValueError(f"not a number: {choice!r}")
    try:
        return DIFFICULTIES[choice[0]]
    except KeyError:
        raise ValueError(f"no such difficulty: {choice!r}") from None


class Game:
    """The whole state of a running game."""

    def __init__(self, difficulty: Difficulty, rng: random.Random | None = None):
        self.difficulty = difficulty
        self.width = difficulty.width
        self.height = difficulty.height
        self.rng = rng if rng is not None else random.Random()
        self.player = Player(
            x=self.width // 2,
            y=self.height // 2,
            hp=difficulty.hp,
            max_hp=difficulty.hp,
            fuel=difficulty.fuel,
            max_fuel=difficulty.fuel,
        )
        self.level = 1
        self.trash = 0
        self.event = Event.NONE
        self.message = ""
        self.grid: list[list[CellType]] = []
        self.asteroids: list[Asteroid] = []
        self.generate_map()
        self.generate_asteroids()

    def generate_map(self) -> None:
        """Fill the map afresh, scattering trash over empty space."""
        self.grid = [
            [
                CellType.TRASH if self.rng.randrange(100) < TRASH_CHANCE else CellType.EMPTY
                for _ in range(self.width)
            ]
            for _ in range(self.height)
        ]

    def _spawn_asteroid(self) -> Asteroid:
        side = self.rng.randrange(4)
        if side == 0:
            x, y = self.rng.randrange(self.width), 0
        elif side == 1:
            x, y = self.width - 1, self.rng.randrange(self.height)
        elif side == 2:
            x, y = self.rng.randrange(self.width), self.height - 1
        else:
            x, y = 0, self.rng.randrange(self.height)
        dx = dy = 0
        while dx == 0 and dy == 0:
            dx = self.rng.randrange(3) - 1
            dy = self.rng.randrange(3) - 1
        return Asteroid(x, y, dx, dy)

    def generate_asteroids(self) -> None:
        """Place a fresh set of asteroids on the edges of the map."""
        self.asteroids = [self._spawn_asteroid() for _ in range(self.difficulty.asteroids)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def move_asteroids(self) -> None:
        """Advance every asteroid, respawning those that leave the map."""
        self.grid = [
            [CellType.EMPTY if cell is CellType.ASTEROID else cell for cell in row]
            for row in self.grid
        ]
        for index, asteroid in enumerate(self.asteroids):
            asteroid.x += asteroid.dx
            asteroid.y += asteroid.dy
            if not self._in_bounds(asteroid.x, asteroid.y):
                asteroid = self._spawn_asteroid()
                self.asteroids[index] = asteroid
            self.grid[asteroid.y][asteroid.x] = CellType.ASTEROID

    def move_player(self, key: str) -> None:
        """Move the ship one cell for w, a, s or d; ignore other keys."""
        dx, dy = {"w": (0, -1), "a": (-1, 0), "s": (0, 1), "d": (1, 0)}.get(key, (0, 0))
        self.player.x += dx
        self.player.y += dy

    def _flag(self, event: Event, message: str = "") -> Event:
        self.event = event
        self.message = message
        return event

    def check(self) -> Event:
        """Apply collisions and pickups, then decide what happens next."""
        p = self.player
        p.x = min(max(p.x, 0), self.width - 1)
        p.y = min(max(p.y, 0), self.height - 1)

        if self.level == WINNING_LEVEL:
            return self._flag(Event.WIN)

        cell = self.grid[p.y][p.x]
        if cell is CellType.TRASH:
            self.grid[p.y][p.x] = CellType.EMPTY
            self.trash += 1
        elif cell is CellType.ASTEROID:
            p.hp = max(p.hp - ASTEROID_DAMAGE, 0)

        if p.fuel <= 0:
            return self._flag(Event.DEAD, "You ran out of fuel!!")
        if p.hp <= 0:
            return self._flag(Event.DEAD, "You were destroyed by asteroids!")

        if any(cell is CellType.TRASH for row in self.grid for cell in row):
            return self._flag(Event.NONE)
        return self._flag(Event.LEVEL_UP)

    def apply_upgrade(self, choice: str) -> str:
        """Spend trash on the upgrade picked by the menu answer; describe the result."""
        option = choice[:1]
        if option == "1":
            return "No upgrade selected, prepare for the next level...."
        if option not in ("2", "3", "4"):
            return ""
        cost = HEAL_COST if option == "4" else UPGRADE_COST
        if self.trash < cost:
            return "You don't have enough trash, prepare for the next level...."
        self.trash -= cost
        p = self.player
        if option == "2":
            p.max_fuel += FUEL_UPGRADE
            return f"Fuel tank upgraded!! Max fuel is now {p.max_fuel}"
        if option == "3":
            p.max_hp += HP_UPGRADE
            return f"Max HP increased!! Max HP is now {p.max_hp}"
        p.hp = min(p.hp + HEAL_AMOUNT, p.max_hp)
        return f"You healed {HEAL_AMOUNT} HP!! Your HP is now {p.hp}"

    def next_level(self, choice: str) -> str:
        """Advance a level, apply the chosen upgrade and build a new field."""
        self.level += 1
        message = self.apply_upgrade(choice)
        self.generate_map()
        self.generate_asteroids()
        self.player.x = self.width // 2
        self.player.y = self.height // 2
        self.player.fuel = self.player.max_fuel
        return message

    def render(self) -> str:
        """Draw the status line and the map as text."""
        p = self.player
        symbols = {CellType.TRASH: "#", CellType.ASTEROID: "@", CellType.EMPTY: "."}
        lines = [
            f"fuel: {p.fuel}/{p.max_fuel} | Trash: {self.trash} | level: {self.level}"
        ]
        for y, row in enumerate(self.grid):
            lines.append(
                "".join(
                    "&" if (x, y) == (p.x, p.y) else symbols[cell]
                    for x, cell in enumerate(row)
                )
            )
        return "\n".join(lines)

    def step(self, key: str) -> Event:
        """Play one turn for the pressed key and return the resulting event."""
        self.move_player(key)
        self.check()
        self.move_asteroids()
        self.check()
        self.player.fuel -= 1
        return self.event