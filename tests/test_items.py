import pytest

from cavecrawl.characters import Drow, Shade
from cavecrawl.items import (
    BoostAttack,
    BoostDefence,
    Gold,
    Item,
    PoisonHealth,
    RestoreHealth,
    WoundAttack,
    WoundDefence,
    gold_name,
)


def _give(item, player):
    item.player = player
    return item


@pytest.mark.parametrize(
    "amount,name",
    [(1, "small"), (2, "normal"), (4, "merchant hoard"), (6, "dragon hoard")],
)
def test_gold_name(amount, name):
    assert gold_name(amount) == name
    assert Gold(amount).name == name


@pytest.mark.parametrize("amount", [0, 3, 5, 7])
def test_gold_name_unknown(amount):
    with pytest.raises(ValueError):
        gold_name(amount)


def test_gold_use_adds_amount():
    pc = Shade()
    _give(Gold(4), pc).use()
    _give(Gold(2), pc).use()
    assert pc.gold == 6


def test_item_without_player_raises():
    with pytest.raises(RuntimeError):
        Gold(1).use()
    with pytest.raises(RuntimeError):
        BoostAttack().use()


def test_item_is_abstract():
    with pytest.raises(TypeError):
        Item("thing", "?")


def test_displays_and_emptiness():
    assert Gold(1).display == "G"
    assert BoostAttack().display == "P"
    assert Gold(1).empty is False
    assert RestoreHealth().guardian is None


@pytest.mark.parametrize(
    "cls,name",
    [
        (BoostAttack, "boostAttack"),
        (BoostDefence, "boostDefence"),
        (PoisonHealth, "poisonHealth"),
        (RestoreHealth, "restoreHealth"),
        (WoundAttack, "woundAttack"),
        (WoundDefence, "woundDefence"),
    ],
)
def test_potion_names(cls, name):
    assert cls().name == name


def test_boost_attack_regular_and_drow():
    shade, drow = Shade(), Drow()
    before_s, before_d = shade.atk, drow.atk
    _give(BoostAttack(), shade).use()
    _give(BoostAttack(), drow).use()
    assert shade.atk == before_s + 5
    assert drow.atk == before_d + 7


def test_boost_and_wound_defence_cancel_for_same_race():
    pc = Shade()
    before = pc.defence
    _give(BoostDefence(), pc).use()
    _give(WoundDefence(), pc).use()
    assert pc.defence == before


def test_poison_health_drow():
    pc = Drow()
    _give(PoisonHealth(), pc).use()
    assert pc.hp == pc.hp_max - 15


def test_restore_health_capped_at_max():
    pc = Shade()
    _give(RestoreHealth(), pc).use()
    assert pc.hp == pc.hp_max


def test_restore_after_poison_returns_to_max():
    pc = Shade()
    _give(PoisonHealth(), pc).use()
    _give(RestoreHealth(), pc).use()
    assert pc.hp == pc.hp_max


def test_wound_attack_never_below_zero():
    pc = Shade()
    for _ in range(10):
        _give(WoundAttack(), pc).use()
    assert pc.atk == 0