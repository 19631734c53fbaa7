"""Finding the chambers of a map and populating them."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from typing import Any

from .cells import Cell
from .characters import Dragon, Dwarf, Elf, Halfling, Human, Merchant, Orc
from .items import (
    BoostAttack,
    BoostDefence,
    Gold,
    PoisonHealth,
    RestoreHealth,
    WoundAttack,
    WoundDefence,
)

_NON_CHAMBER = frozenset(" #+|-")
# Up, down, left, right: the order in which a chamber is explored.
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))

ENEMY_TYPES = {
    "Human": Human,
    "Dwarf": Dwarf,
    "Halfling": Halfling,
    "Elf": Elf,
    "Orc": Orc,
    "Merchant": Merchant,
}

POTION_TYPES = {
    "BA": BoostAttack,
    "BD": BoostDefence,
    "PH": PoisonHealth,
    "RH": RestoreHealth,
    "WA": WoundAttack,
    "WD": WoundDefence,
}


def find_chambers(grid_map: Sequence[Sequence[str]]) -> list[list[tuple[int, int]]]:
    """Group the chamber squares of a map into connected chambers.

    Chambers are listed in the order their first square appears scanning
    row by row; the squares of each chamber are in depth-first order.
    """
    visited = [[False] * len(row) for row in grid_map]

    def valid(x: int, y: int) -> bool:
        return (
            0 <= x < len(grid_map)
            and 0 <= y < len(grid_map[x])
            and not visited[x][y]
            and grid_map[x][y] not in _NON_CHAMBER
        )

    def flood(start: tuple[int, int]) -> list[tuple[int, int]]:
        visited[start[0]][start[1]] = True
        found = [start]
        stack = [(start, iter(_STEPS))]
        while stack:
            (x, y), steps = stack[-1]
            for dx, dy in steps:
                nx, ny = x + dx, y + dy
                if valid(nx, ny):
                    visited[nx][ny] = True
                    found.append((nx, ny))
                    stack.append(((nx, ny), iter(_STEPS)))
                    break
            else:
                stack.pop()
        return found

    chambers = []
    for x, row in enumerate(grid_map):
        for y in range(len(row)):
            if valid(x, y):
                chambers.append(flood((x, y)))
    return chambers


class Chamber:
    """A connected room of cells where things are spawned."""

    def __init__(self, rng: Any = None) -> None:
        self.cells: list[Cell] = []
        self.player_here = False
        self.rng = rng if rng is not None else random
        self._born: tuple[int, int] | None = None

    def add_cell(self, cell: Cell) -> None:
        self.cells.append(cell)

    def _random_empty_cell(self, accept: Callable[[Cell], bool] | None = None) -> Cell:
        candidates = [
            cell
            for cell in self.cells
            if cell.empty
            and (cell.row, cell.col) != self._born
            and (accept is None or accept(cell))
        ]
        if not candidates:
            raise RuntimeError("no free square left in this chamber")
        return self.rng.choice(candidates)

    def _put(self, new: Cell, old: Cell) -> Cell:
        for i, cell in enumerate(self.cells):
            if cell is old:
                self.cells[i] = new
                break
        new.replace(old)
        return new

    def create_stair(self) -> Cell:
        """Turn a free square into the staircase and return it."""
        cell = self._random_empty_cell()
        cell.set_stair()
        return cell

    def create_enemy(self, kind: str) -> Cell:
        """Spawn an enemy of the given race on a free square."""
        try:
            enemy_type = ENEMY_TYPES[kind]
        except KeyError:
            raise ValueError(f"unknown enemy kind: {kind!r}") from None
        return self._put(enemy_type(rng=self.rng), self._random_empty_cell())

    def create_dragon(self, treasure: Cell) -> Cell:
        """Spawn a dragon on a free square next to the treasure it guards."""
        free = [cell for cell in treasure.neighbours if cell.empty]
        if not free:
            raise RuntimeError("no free square next to the treasure")
        spot = self.rng.choice(free)
        return self._put(Dragon(treasure, rng=self.rng), spot)

    def create_potion(self, kind: str) -> Cell:
        """Place a potion of the given kind (BA, BD, PH, RH, WA, WD)."""
        try:
            potion_type = POTION_TYPES[kind]
        except KeyError:
            raise ValueError(f"unknown potion kind: {kind!r}") from None
        return self._put(potion_type(), self._random_empty_cell())

    def create_gold(self, amount: int) -> Cell:
        """Place a gold pile; a dragon hoard needs a free square beside it."""
        pile = Gold(amount)
        if amount == 6:
            spot = self._random_empty_cell(
                lambda cell: any(n.empty for n in cell.neighbours)
            )
        else:
            spot = self._random_empty_cell()
        return self._put(pile, spot)

    def place_player(self, player: Any) -> None:
        """Put the player on a free square, which stays reserved for it."""
        cell = self._random_empty_cell()
        self._born = (cell.row, cell.col)
        player.row = cell.row
        player.col = cell.col
        player.neighbours = list(cell.neighbours)
        self.player_here = True