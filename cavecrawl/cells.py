"""A single square of the dungeon grid."""

from __future__ import annotations

from typing import Any


class Cell:
    """A floor square; subclasses put items or characters on it."""

    is_character = False
    name = ""
    race = ""
    hp = 0
    atk = 0
    amount = 0
    guardian: Any = None
    guard: Any = None

    def __init__(self, row: int = 0, col: int = 0, display: str = ".") -> None:
        self.row = row
        self.col = col
        self.display = display
        self.stair = False
        self.empty = True
        self.neighbours: list[Cell] = []
        self.player: Any = None

    def set_stair(self) -> None:
        """Turn this square into the staircase to the next floor."""
        self.stair = True
        self.empty = False
        self.display = "\\"

    def add_neighbour(self, other: Cell) -> None:
        self.neighbours.append(other)

    def remove_neighbour(self, other: Cell) -> None:
        """Drop the first link to ``other``; nothing happens if absent."""
        for i, cell in enumerate(self.neighbours):
            if cell is other:
                del self.neighbours[i]
                return

    def replace(self, other: Cell) -> None:
        """Take ``other``'s place on the grid, inheriting its position and links."""
        self.row = other.row
        self.col = other.col
        self.player = other.player
        self.neighbours = list(other.neighbours)
        for cell in self.neighbours:
            cell.remove_neighbour(other)
            cell.add_neighbour(self)
        other.neighbours = []

    def defend(self, attacker: Cell) -> int:
        return 0

    def attack(self, defender: Cell) -> str:
        return ""