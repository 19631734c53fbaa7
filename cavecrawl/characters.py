"""The player races and the monsters they fight."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any

from .cells import Cell


class Character(Cell, ABC):
    """Anything with health that can attack and be attacked."""

    is_character = True

    def __init__(
        self, hp: int, atk: int, defence: int, race: str, display: str, *, rng: Any = None
    ) -> None:
        super().__init__(display=display)
        self.hp = self.hp_max = hp
        self.atk = self.std_atk = atk
        self.defence = self.std_def = defence
        self.race = race
        self.empty = False
        self.guard: Any = None
        self.rng = rng if rng is not None else random

    @property
    def name(self) -> str:
        return self.race

    def add_hp(self, inc: int) -> None:
        self.hp = max(0, min(self.hp_max, self.hp + inc))

    def add_atk(self, inc: int) -> None:
        self.atk = max(0, self.atk + inc)

    def add_def(self, inc: int) -> None:
        self.defence = max(0, self.defence + inc)

    def _coin(self) -> bool:
        return self.rng.randrange(2) == 1

    def _damage_from(self, attacker: Cell, scale: int = 100) -> int:
        return min(self.hp, scale * attacker.atk // (scale + self.defence))

    def _describe(self, defender: Cell, damage: int) -> str:
        action = f"{self.name} attacks {defender.name}"
        if damage:
            return action + f" and deals {damage} damage"
        return action + " but missed"

    def attack(self, defender: Cell) -> str:
        return self._describe(defender, defender.defend(self))

    def defend(self, attacker: Cell) -> int:
        damage = self._damage_from(attacker)
        self.add_hp(-damage)
        return damage

    @abstractmethod
    def die(self, killer: Any) -> None:
        """React to being killed by ``killer``."""


class Player(Character):
    """The hero, who collects gold."""

    def __init__(
        self, hp: int, atk: int, defence: int, race: str, display: str = "@", *, rng: Any = None
    ) -> None:
        super().__init__(hp, atk, defence, race, display, rng=rng)
        self.gold = 0

    def add_gold(self, amount: int) -> None:
        self.gold += amount

    def reset(self) -> None:
        """Drop the potion effects on attack and defence."""
        self.atk = self.std_atk
        self.defence = self.std_def

    def die(self, killer: Any) -> None:
        """The game ends elsewhere when the player dies."""


class Drow(Player):
    def __init__(self, *, rng: Any = None) -> None:
        super().__init__(150, 25, 15, "Drow", rng=rng)


class Goblin(Player):
    """Takes extra damage from orcs."""

    def __init__(self, *, rng: Any = None) -> None:
        super().__init__(110, 15, 20, "Drow", rng=rng)

    def defend(self, attacker: Cell) -> int:
        scale = 150 if attacker.race == "Orc" else 100
        damage = self._damage_from(attacker, scale)
        self.add_hp(-damage)
        return damage


class Shade(Player):
    def __init__(self, *, rng: Any = None) -> None:
        super().__init__(125, 25, 25, "Shade", rng=rng)


class Troll(Player):
    def __init__(self, *, rng: Any = None) -> None:
        super().__init__(120, 25, 15, "Troll", rng=rng)


class Vampire(Player):
    """Has no health cap and drains life on every hit."""

    def __init__(self, *, rng: Any = None) -> None:
        super().__init__(50, 25, 25, "Vampire", rng=rng)

    def add_hp(self, inc: int) -> None:
        self.hp += inc

    def attack(self, defender: Cell) -> str:
        damage = defender.defend(self) if self._coin() else 0
        if damage:
            self.add_hp(-5 if defender.race == "Dwarf" else 5)
        return self._describe(defender, damage)


class Enemy(Character):
    """A monster that hits half the time and drops a little gold."""

    def _strike(self, defender: Cell) -> int:
        return defender.defend(self) if self._coin() else 0

    def attack(self, defender: Cell) -> str:
        return self._describe(defender, self._strike(defender))

    def die(self, killer: Any) -> None:
        killer.add_gold(1 + self.rng.randrange(2))


class Human(Enemy):
    def __init__(self, *, rng: Any = None) -> None:
        super().__init__(140, 20, 20, "Human", "H", rng=rng)


class Dwarf(Enemy):
    def __init__(self, *, rng: Any = None) -> None:
        super().__init__(100, 20, 30, "Dwarf", "W", rng=rng)


class Elf(Enemy):
    """Attacks twice per turn."""

    def __init__(self, *, rng: Any = None) -> None:
        super().__init__(140, 30, 10, "Elf", "E", rng=rng)

    def attack(self, defender: Cell) -> str:
        action = self._describe(defender, self._strike(defender))
        if defender.hp:
            action += "!\n" + self._describe(defender, self._strike(defender))
        return action


class Orc(Enemy):
    def __init__(self, *, rng: Any = None) -> None:
        super().__init__(180, 30, 25, "Orc", "O", rng=rng)


class Merchant(Enemy):
    """Peaceful until attacked."""

    def __init__(self, *, rng: Any = None) -> None:
        super().__init__(30, 70, 5, "Merchant", "M", rng=rng)
        self.neutral = True

    def become_hostile(self) -> None:
        self.neutral = False

    def defend(self, attacker: Cell) -> int:
        self.become_hostile()
        return super().defend(attacker)

    def attack(self, defender: Cell) -> str:
        if self.neutral:
            return ""
        return super().attack(defender)

    def die(self, killer: Any) -> None:
        """Merchants leave a hoard on the floor rather than paying the killer."""


class Dragon(Enemy):
    """Guards a treasure and stays beside it."""

    def __init__(self, guard: Cell, *, rng: Any = None) -> None:
        super().__init__(150, 20, 20, "Dragon", "D", rng=rng)
        self.guard = guard
        guard.guardian = self

    def die(self, killer: Any) -> None:
        if self.guard is not None:
            self.guard.guardian = None
        self.guard = None


class Halfling(Enemy):
    """Dodges half of all blows."""

    def __init__(self, *, rng: Any = None) -> None:
        super().__init__(100, 15, 20, "Halfling", "L", rng=rng)

    def defend(self, attacker: Cell) -> int:
        if not self._coin():
            return 0
        damage = self._damage_from(attacker)
        self.add_hp(-damage)
        return damage