"""One dungeon level: the grid, its chambers and the turns played on it."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

from .cells import Cell
from .chambers import Chamber, find_chambers
from .characters import Dragon, Dwarf, Elf, Enemy, Halfling, Human, Merchant, Orc
from .config import (
    CHAMBER_NUM,
    DIRECTIONS,
    ENEMY_NUM,
    FORMAL,
    GOLD_KINDS,
    GOLD_NUM,
    GRID_HEIGHT,
    GRID_WIDTH,
    OFFSETS,
    P_DWARF,
    P_ELF,
    P_HALFLING,
    P_HUMAN,
    P_MERCHANT,
    P_ORC,
    P_TOTAL,
    POTION_KINDS,
    POTION_NUM,
    dir_index,
    offset,
)
from .items import (
    BoostAttack,
    BoostDefence,
    Gold,
    PoisonHealth,
    RestoreHealth,
    WoundAttack,
    WoundDefence,
)

_POTION_DIGITS = {
    "0": RestoreHealth,
    "1": BoostAttack,
    "2": BoostDefence,
    "3": PoisonHealth,
    "4": WoundAttack,
    "5": WoundDefence,
}
_GOLD_DIGITS = {"6": 2, "7": 1, "8": 4, "9": 6}
_ENEMY_LETTERS = {
    "H": Human,
    "W": Dwarf,
    "E": Elf,
    "O": Orc,
    "M": Merchant,
    "L": Halfling,
}
_POTION_ORDER = ("BA", "BD", "PH", "RH", "WA", "WD")
_GOLD_ORDER = (1, 2, 4)
_ENEMY_TABLE = (
    (P_HUMAN, "Human"),
    (P_DWARF, "Dwarf"),
    (P_HALFLING, "Halfling"),
    (P_ELF, "Elf"),
    (P_ORC, "Orc"),
    (P_MERCHANT, "Merchant"),
)
_WALLS = frozenset("-| ")
_WALKABLE = frozenset("+#.\\")
_NO_TARGET = frozenset("-|+ #")
# Right, down, down-right, down-left: each link made once while scanning.
_LINKS = ((0, 1), (1, 0), (1, 1), (1, -1))


def _in_grid(x: int, y: int) -> bool:
    return 0 <= x < GRID_HEIGHT and 0 <= y < GRID_WIDTH


def _normalise(grid_map: Sequence[Sequence[str]]) -> list[list[str]]:
    rows = ["".join(row)[:GRID_WIDTH].ljust(GRID_WIDTH) for row in grid_map[:GRID_HEIGHT]]
    rows.extend(" " * GRID_WIDTH for _ in range(GRID_HEIGHT - len(rows)))
    return [list(row) for row in rows]


class Floor:
    """A level of the dungeon with the player on it."""

    def __init__(
        self,
        grid_map: Sequence[Sequence[str]],
        player: Any,
        floor_num: int,
        map_given: bool = False,
        *,
        rng: Any = None,
    ) -> None:
        self.rng = rng if rng is not None else random
        self.player = player
        self.floor_num = floor_num
        self.map_given = map_given
        self.frozen = False
        self.map = _normalise(grid_map)
        self.grid: list[list[Cell | None]] = [[None] * GRID_WIDTH for _ in range(GRID_HEIGHT)]
        self.enemies: list[Cell] = []

        regions = find_chambers(self.map)
        if len(regions) < CHAMBER_NUM:
            raise ValueError(
                f"map has {len(regions)} chambers, at least {CHAMBER_NUM} are needed"
            )
        regions = regions[:CHAMBER_NUM]
        self._build_grid(regions)

        self.chambers: list[Chamber] = []
        for region in regions:
            chamber = Chamber(self.rng)
            for r, c in region:
                chamber.add_cell(self.grid[r][c])
            self.chambers.append(chamber)

        self._create_player()
        if not map_given:
            self._create_stair()
            self._create_potions()
            self._create_gold()
            self._create_enemies()

    # -- building ---------------------------------------------------------

    def _cell_for(self, ch: str) -> Cell:
        if ch in (".", "@"):
            return Cell()
        if ch == "\\":
            cell = Cell()
            cell.set_stair()
            return cell
        if ch in _POTION_DIGITS:
            return _POTION_DIGITS[ch]()
        if ch in _GOLD_DIGITS:
            return Gold(_GOLD_DIGITS[ch])
        if ch in _ENEMY_LETTERS:
            return _ENEMY_LETTERS[ch](rng=self.rng)
        raise ValueError(f"unexpected map symbol {ch!r}")

    def _build_grid(self, regions: list[list[tuple[int, int]]]) -> None:
        squares = [square for region in regions for square in region]
        dragons = []
        for r, c in squares:
            if self.map[r][c] == "D":
                dragons.append((r, c))
                continue
            cell = self._cell_for(self.map[r][c])
            cell.row, cell.col = r, c
            self.grid[r][c] = cell
            if isinstance(cell, Enemy):
                self.enemies.append(cell)

        for r, c in dragons:
            hoard = next(
                (
                    self.grid[r + dx][c + dy]
                    for dx, dy in OFFSETS
                    if _in_grid(r + dx, c + dy)
                    and isinstance(self.grid[r + dx][c + dy], Gold)
                    and self.grid[r + dx][c + dy].amount == 6
                ),
                None,
            )
            if hoard is None:
                raise ValueError(f"dragon at ({r}, {c}) has no hoard beside it")
            dragon = Dragon(hoard, rng=self.rng)
            dragon.row, dragon.col = r, c
            self.grid[r][c] = dragon
            self.enemies.append(dragon)

        for r, c in squares:
            cell = self.grid[r][c]
            self.map[r][c] = cell.display
            cell.player = self.player

        for i in range(GRID_HEIGHT):
            for j in range(GRID_WIDTH):
                cell = self.grid[i][j]
                if cell is None:
                    continue
                for di, dj in _LINKS:
                    if _in_grid(i + di, j + dj) and self.grid[i + di][j + dj] is not None:
                        other = self.grid[i + di][j + dj]
                        cell.add_neighbour(other)
                        other.add_neighbour(cell)

    def _show(self, cell: Cell) -> None:
        self.map[cell.row][cell.col] = cell.display
        self.grid[cell.row][cell.col] = cell

    def _create_player(self) -> None:
        self.chambers[self.rng.randrange(CHAMBER_NUM)].place_player(self.player)

    def _create_stair(self) -> None:
        n = self.rng.randrange(CHAMBER_NUM)
        while self.chambers[n].player_here:
            n = self.rng.randrange(CHAMBER_NUM)
        self._show(self.chambers[n].create_stair())

    def _create_potions(self) -> None:
        for _ in range(POTION_NUM):
            chamber = self.chambers[self.rng.randrange(CHAMBER_NUM)]
            kind = _POTION_ORDER[self.rng.randrange(POTION_KINDS)]
            self._show(chamber.create_potion(kind))

    def _create_gold(self) -> None:
        for _ in range(GOLD_NUM):
            chamber = self.chambers[self.rng.randrange(CHAMBER_NUM)]
            g = self.rng.randrange(GOLD_KINDS)
            if g < len(_GOLD_ORDER):
                pile = chamber.create_gold(_GOLD_ORDER[g])
            else:
                pile = chamber.create_gold(6)
                dragon = chamber.create_dragon(pile)
                self._show(dragon)
                self.enemies.append(dragon)
            self._show(pile)

    def _create_enemies(self) -> None:
        for _ in range(ENEMY_NUM):
            chamber = self.chambers[self.rng.randrange(CHAMBER_NUM)]
            roll = self.rng.randrange(P_TOTAL) + 1
            kind = next(name for limit, name in _ENEMY_TABLE if roll <= limit)
            enemy = chamber.create_enemy(kind)
            self._show(enemy)
            self.enemies.append(enemy)

    # -- player actions ---------------------------------------------------

    def passed_floor(self) -> bool:
        """True once the player stands on the staircase."""
        return self.map[self.player.row][self.player.col] == "\\"

    def _target(self, direction: str) -> tuple[int, int]:
        dx, dy = offset(direction)
        return self.player.row + dx, self.player.col + dy

    def _clear(self, x: int, y: int) -> Cell:
        fresh = Cell(x, y)
        fresh.replace(self.grid[x][y])
        self._show(fresh)
        return fresh

    def _drop_gold(self, x: int, y: int, amount: int) -> None:
        pile = Gold(amount)
        pile.replace(self.grid[x][y])
        self._show(pile)

    def _move(self, direction: str) -> str:
        x, y = self._target(direction)
        if not _in_grid(x, y):
            return "Invalid move!"
        symbol = self.map[x][y]
        if symbol in _WALLS:
            return "Way blocked by wall!"
        heading = FORMAL[dir_index(direction)]
        if symbol in _WALKABLE:
            action = f"PC moves {heading}"
        elif symbol == "G" and self.grid[x][y].guardian is None:
            pile = self.grid[x][y]
            action = f"PC moves {heading} and picked up gold worth {pile.amount}"
            pile.use()
            self._clear(x, y)
        elif symbol == "G":
            action = (
                f"PC moves {heading} but have to defeat the dragon guarding the gold to pick it up."
            )
        else:
            return "Way blocked!"
        self.player.row, self.player.col = x, y

        for dx, dy in OFFSETS:
            if _in_grid(x + dx, y + dy):
                seen = self.map[x + dx][y + dy]
                if seen == "P":
                    action += " and see an unknown potion"
                if seen == "G":
                    action += " and see some gold"
        return action + "!"

    def _use_potion(self, direction: str) -> str:
        x, y = self._target(direction)
        if not _in_grid(x, y):
            return "Invalid direction!"
        if self.map[x][y] != "P":
            return f"There is no potion in {FORMAL[dir_index(direction)]}"
        potion = self.grid[x][y]
        potion.use()
        self._clear(x, y)
        return f"PC uses {potion.name}"

    def _attack(self, direction: str) -> str:
        x, y = self._target(direction)
        if not _in_grid(x, y):
            return "Invalid direction!"
        target = self.grid[x][y]
        if self.map[x][y] in _NO_TARGET or target is None or not target.is_character:
            return f"There is no enemy in {FORMAL[dir_index(direction)]}"

        action = self.player.attack(target)
        if target.hp == 0:
            race = target.race
            target.die(self.player)
            action += " and killed it"
            for i, enemy in enumerate(self.enemies):
                if enemy is target:
                    del self.enemies[i]
                    break
            self._clear(x, y)
            if race == "Merchant":
                self._drop_gold(x, y, 4)
            elif race == "Human":
                self._drop_gold(x, y, 2)
                spots = [
                    self.grid[x + dx][y + dy]
                    for dx, dy in OFFSETS
                    if _in_grid(x + dx, y + dy)
                    and self.map[x + dx][y + dy] == "."
                    and self.grid[x + dx][y + dy] is not None
                    and (x + dx, y + dy) != (self.player.row, self.player.col)
                ]
                if spots:
                    spot = self.rng.choice(spots)
                    self._drop_gold(spot.row, spot.col, 2)
        return action + "!"

    def pc_turn(self, command: str) -> str:
        """Carry out one player command and describe what happened.

        Returns ``"?"`` for a command that is not understood.
        """
        if command == "f":
            action = "Enemies unfreezed!" if self.frozen else "Enemies freezed!"
            self.frozen = not self.frozen
            return action
        if command in DIRECTIONS:
            return self._move(command)
        parts = command.split()
        verb = parts[0] if parts else ""
        direction = parts[1] if len(parts) > 1 else ""
        if direction not in DIRECTIONS:
            return "?"
        if verb == "u":
            return self._use_potion(direction)
        if verb == "a":
            return self._attack(direction)
        return "?"

    # -- enemy actions ----------------------------------------------------

    def enemy_turn(self) -> str:
        """Let every enemy attack or wander, in reading order."""
        action = ""
        pc = self.player
        self.enemies.sort(key=lambda e: (e.row, e.col))
        for enemy in self.enemies:
            if abs(pc.row - enemy.row) <= 1 and abs(pc.col - enemy.col) <= 1:
                action += enemy.attack(pc)
            elif enemy.race == "Dragon":
                hoard = enemy.guard
                if abs(pc.row - hoard.row) <= 1 and abs(pc.col - hoard.col) <= 1:
                    action += enemy.attack(pc)
            elif not self.frozen:
                x, y = enemy.row, enemy.col
                spots = [
                    self.grid[x + dx][y + dy]
                    for dx, dy in OFFSETS
                    if _in_grid(x + dx, y + dy)
                    and self.map[x + dx][y + dy] == "."
                    and self.grid[x + dx][y + dy] is not None
                ]
                if spots:
                    spot = self.rng.choice(spots)
                    xx, yy = spot.row, spot.col
                    self.grid[xx][yy], self.grid[x][y] = enemy, spot
                    self.map[xx][yy], self.map[x][y] = self.map[x][y], self.map[xx][yy]
                    spot.row, spot.col = x, y
                    enemy.row, enemy.col = xx, yy
        return action

    # -- display ----------------------------------------------------------

    def render(self, action: str) -> str:
        """Return the text picture of the floor with the status lines."""
        pc = self.player
        lines = []
        for i, row in enumerate(self.map):
            chars = list(row)
            if i == pc.row:
                chars[pc.col] = "@"
            lines.append("".join(chars))
        lines.append(
            f"Race: {pc.race}   Gold: {pc.gold}                        Floor: {self.floor_num}"
        )
        lines.append(f"HP: {pc.hp}")
        lines.append(f"Atk: {pc.atk}")
        lines.append(f"Def: {pc.defence}")
        lines.append("Action:")
        lines.append(action)
        return "\n".join(lines) + "\n"