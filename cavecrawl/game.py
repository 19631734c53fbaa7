"""Reading maps and running a game session from text input."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable
from typing import Any, TextIO

from .characters import Drow, Goblin, Player, Shade, Troll, Vampire
from .floor import Floor

FLOOR_COUNT = 5
DEFAULT_MAP = "map.txt"

_RACES = {
    "Drow": Drow,
    "Goblin": Goblin,
    "Shade": Shade,
    "Troll": Troll,
    "Vampire": Vampire,
}


def read_map(path: str) -> list[list[str]]:
    """Read a map file into rows of characters.

    An empty path or a file that cannot be opened gives an empty map.
    """
    if not path:
        return []
    try:
        with open(path, encoding="utf-8") as handle:
            return [list(line.rstrip("\n")) for line in handle]
    except OSError:
        return []


def create_player(race: str) -> Player:
    """Return a new player of the named race."""
    try:
        return _RACES[race]()
    except KeyError:
        raise ValueError(f"unknown race: {race!r}") from None


def _clean(line: str) -> str:
    return line.rstrip("\r\n")


def _say(out: TextIO, text: str) -> None:
    out.write(text + "\n")


def _game_over(lines: Any, out: TextIO) -> bool:
    _say(out, "You lose")
    _say(out, "Enter 'r' to RESTART the game or enter 'q' to EXIT the game: ")
    for raw in lines:
        command = _clean(raw)
        if command == "q":
            return False
        if command == "r":
            return True
    return False


def play(map_given: bool, map_name: str, lines: Iterable[str], out: TextIO) -> bool:
    """Play one game from the given input lines, writing to ``out``.

    Returns True when the player asks for a restart.
    """
    lines = iter(lines)
    _say(out, "Hello, welcome to the cave crawl!")
    _say(out, "First, choose your race among Drow, Goblin, Shade, Troll and Vampire")

    player: Player | None = None
    for raw in lines:
        try:
            player = create_player(_clean(raw))
            break
        except ValueError:
            _say(out, "Invalid input, please choose again.")
    if player is None:
        return False

    for floor_num in range(1, FLOOR_COUNT + 1):
        player.reset()
        level = Floor(read_map(map_name), player, floor_num, map_given)
        out.write(level.render("New floor!"))
        for raw in lines:
            command = _clean(raw)
            if command == "q":
                return False
            if command == "r":
                return True
            action = level.pc_turn(command)
            if action == "?":
                _say(out, "Invalid input")
                continue
            if player.hp == 0:
                out.write(level.render(action))
                return _game_over(lines, out)
            if level.passed_floor():
                break
            action += "\n" + level.enemy_turn()
            if player.hp == 0:
                out.write(level.render(action))
                return _game_over(lines, out)
            out.write(level.render(action))

    _say(out, f"You win! Score :{player.gold}")
    return False


def main(argv: list[str] | None = None) -> int:
    """Run the game; a map file argument plays that fully drawn map once."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        play(True, args[0], sys.stdin, sys.stdout)
        return 0
    random.seed()
    while play(False, DEFAULT_MAP, sys.stdin, sys.stdout):
        print("Game restart!")
    return 0