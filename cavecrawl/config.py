"""Board dimensions, spawn tables and compass directions."""

from __future__ import annotations

GRID_WIDTH = 79
GRID_HEIGHT = 25
CELL_SIZE = (1000 - 1) // GRID_WIDTH - 1
CHAMBER_NUM = 5
POTION_KINDS = 6
POTION_NUM = 10
GOLD_KINDS = 4
GOLD_NUM = 10
ENEMY_KINDS = 6  # dragons are spawned with their hoards, not from this table
ENEMY_NUM = 20

# Cumulative spawn weights out of P_TOTAL.
P_HUMAN = 4
P_DWARF = 7
P_HALFLING = 12
P_ELF = 14
P_ORC = 16
P_MERCHANT = 18
P_TOTAL = 18

FORMAL = ("North", "Northeast", "East", "Southeast", "South", "Southwest", "West", "Northwest")
DIRECTIONS = ("no", "ne", "ea", "se", "so", "sw", "we", "nw")
X_MOVE = (-1, -1, 0, 1, 1, 1, 0, -1)
Y_MOVE = (0, 1, 1, 1, 0, -1, -1, -1)
OFFSETS = tuple(zip(X_MOVE, Y_MOVE))


def dir_index(name: str) -> int:
    """Return the position of a direction code such as ``"ne"``."""
    try:
        return DIRECTIONS.index(name)
    except ValueError:
        raise ValueError(f"unknown direction: {name!r}") from None


def offset(name: str) -> tuple[int, int]:
    """Return the (row, column) step for a direction code."""
    return OFFSETS[dir_index(name)]