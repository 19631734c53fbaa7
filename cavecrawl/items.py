"""Things lying on the floor: gold piles and potions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .cells import Cell

_GOLD_NAMES = {1: "small", 2: "normal", 4: "merchant hoard", 6: "dragon hoard"}


def gold_name(amount: int) -> str:
    """Return the name of a gold pile of the given value."""
    try:
        return _GOLD_NAMES[amount]
    except KeyError:
        raise ValueError(f"no gold pile is worth {amount}") from None


class Item(Cell, ABC):
    """Something the player can pick up or drink."""

    def __init__(self, name: str, display: str, guardian: Any = None) -> None:
        super().__init__(display=display)
        self.name = name
        self.guardian = guardian
        self.empty = False

    @abstractmethod
    def use(self) -> None:
        """Apply the item's effect to the player in reach."""

    def _owner(self) -> Any:
        if self.player is None:
            raise RuntimeError(f"{self.name} has no player to affect")
        return self.player


class Potion(Item):
    """A potion changing one statistic; drow feel it half again as strongly."""

    def __init__(self, name: str, stat: str, amount: int, drow_amount: int) -> None:
        super().__init__(name, "P")
        self.stat = stat
        self.effect = amount
        self.drow_effect = drow_amount

    def use(self) -> None:
        player = self._owner()
        delta = self.drow_effect if player.race == "Drow" else self.effect
        getattr(player, f"add_{self.stat}")(delta)


class BoostAttack(Potion):
    def __init__(self) -> None:
        super().__init__("boostAttack", "atk", 5, 7)


class BoostDefence(Potion):
    def __init__(self) -> None:
        super().__init__("boostDefence", "def", 5, 7)


class PoisonHealth(Potion):
    def __init__(self) -> None:
        super().__init__("poisonHealth", "hp", -10, -15)


class RestoreHealth(Potion):
    def __init__(self) -> None:
        super().__init__("restoreHealth", "hp", 10, 15)


class WoundAttack(Potion):
    def __init__(self) -> None:
        super().__init__("woundAttack", "atk", -5, -7)


class WoundDefence(Potion):
    def __init__(self) -> None:
        super().__init__("woundDefence", "def", -5, -7)


class Gold(Item):
    """A pile of gold worth ``amount``."""

    def __init__(self, amount: int) -> None:
        super().__init__(gold_name(amount), "G")
        self.amount = amount

    def use(self) -> None:
        self._owner().add_gold(self.amount)