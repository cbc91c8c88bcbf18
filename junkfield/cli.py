"""Interactive terminal front end for the junk-collecting game."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import TextIO

from junkfield.game import Event, Game, difficulty_for, type_check

DIFFICULTY_MENU = (
    "Select Difficulty:\n"
    "1. Easy\n"
    "2. Normal\n"
    "3. Hard \n"
    "Enter 1-3: "
)


def read_intro(path) -> str:
    """Return the text of the introduction file."""
    return Path(path).read_text()


def update_best_score(path, score: int) -> int:
    """Record the score if it beats the stored best; return the previous best."""
    path = Path(path)
    words = path.read_text().split()
    if not words:
        raise ValueError(f"no score stored in {path}")
    best = int(words[0])
    if score > best:
        path.write_text(f"{score}\n")
    return best


class _Tokens:
    """Reads single characters and words from a stream, skipping whitespace."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._buffer = ""

    def _skip_space(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buffer = line

    def char(self) -> str:
        self._skip_space()
        ch, self._buffer = self._buffer[0], self._buffer[1:]
        return ch

    def word(self) -> str:
        self._skip_space()
        parts = self._buffer.split(maxsplit=1)
        self._buffer = parts[1] if len(parts) > 1 else ""
        return parts[0]


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _choose_difficulty(tokens: _Tokens):
    _prompt(DIFFICULTY_MENU)
    choice = tokens.word()
    while True:
        try:
            return difficulty_for(choice)
        except ValueError:
            _prompt("please enter your choice  1-2-3: ")
            choice = tokens.word()


def _level_up(game: Game, tokens: _Tokens) -> None:
    print(f"\n\n--- Level {game.level} Complete! ---")
    print(f"Use your collected trash ({game.trash}) to upgrade your ship:")
    print("1. No upgrade (Free)")
    print("2. Increase max fuel by +10 (Cost: 10 trash)")
    print("3. Increase max HP by +50 (Cost: 10 trash)")
    print("4. Heal +25 HP (Cost: 5 trash)")
    upgrade = tokens.word()
    while not type_check(upgrade, "int"):
        _prompt("please enter your choice  1-2-3-4: ")
        upgrade = tokens.word()
    message = game.next_level(upgrade)
    if message:
        print(message)


def _play(args: argparse.Namespace, tokens: _Tokens) -> int:
    difficulty = _choose_difficulty(tokens)

    try:
        intro = read_intro(args.intro)
    except OSError as exc:
        print(f"cannot read {args.intro}: {exc}", file=sys.stderr)
        return 1
    for line in intro.splitlines():
        print(line)
    _prompt("Press any key to load:  ")
    tokens.char()

    game = Game(difficulty, random.Random(args.seed))
    key = ""
    while key != "q":
        if game.event is Event.DEAD:
            print(f"\n{game.message}")
            try:
                best = update_best_score(args.scores, game.level)
            except (OSError, ValueError) as exc:
                print(f"cannot update {args.scores}: {exc}", file=sys.stderr)
                return 1
            print(f"the current highest score was {best}")
            print(f"you scored:  {game.level}")
            break
        if game.event is Event.LEVEL_UP:
            _level_up(game, tokens)
        elif game.event is Event.WIN:
            print("You won!!!!")
            _prompt("Press any key to continue:  ")
            tokens.char()
        game.event = Event.NONE

        print(game.render())
        _prompt("use w/a/s/d to move, press q to quit: ")
        key = tokens.char()
        game.step(key)
    return 0


def main(argv=None) -> int:
    """Run the game in the terminal, reading keys from standard input."""
    parser = argparse.ArgumentParser(
        prog="junkfield", description="Collect space junk while dodging asteroids."
    )
    parser.add_argument("--intro", type=Path, default=Path("gametxt.txt"),
                        help="introduction text shown before the game")
    parser.add_argument("--scores", type=Path, default=Path("bestScore.txt"),
                        help="file holding the best score")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random number generator")
    args = parser.parse_args(argv)
    tokens = _Tokens(sys.stdin)
    try:
        return _play(args, tokens)
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())