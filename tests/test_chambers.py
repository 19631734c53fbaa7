import random

import pytest

from cavecrawl.cells import Cell
from cavecrawl.chambers import Chamber, find_chambers
from cavecrawl.characters import Dragon, Dwarf, Merchant, Shade
from cavecrawl.items import BoostAttack, Gold, WoundDefence


def _linked_cells(rows, cols):
    grid = [[Cell(r, c) for c in range(cols)] for r in range(rows)]
    for r in range(rows):
        for c in range(cols):
            for dr, dc in ((0, 1), (1, 0), (1, 1), (1, -1)):
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols:
                    grid[r][c].add_neighbour(grid[nr][nc])
                    grid[nr][nc].add_neighbour(grid[r][c])
    return grid


def _chamber(rows=3, cols=4, seed=1):
    grid = _linked_cells(rows, cols)
    chamber = Chamber(rng=random.Random(seed))
    for row in grid:
        for cell in row:
            chamber.add_cell(cell)
    return chamber, grid


def test_find_chambers_separates_rooms_by_walls():
    grid_map = [
        "|-----|",
        "|..|..|",
        "|..|..|",
        "|-----|",
    ]
    chambers = find_chambers(grid_map)
    assert len(chambers) == 2
    assert sorted(chambers[0]) == [(1, 1), (1, 2), (2, 1), (2, 2)]
    assert sorted(chambers[1]) == [(1, 4), (1, 5), (2, 4), (2, 5)]


def test_find_chambers_depth_first_order():
    grid_map = ["...", "..."]
    assert find_chambers(grid_map) == [[(0, 0), (1, 0), (1, 1), (0, 1), (0, 2), (1, 2)]]


def test_find_chambers_ignores_doors_and_passages():
    grid_map = ["|.+#+.|"]
    chambers = find_chambers(grid_map)
    assert chambers == [[(0, 1)], [(0, 5)]]


def test_find_chambers_counts_items_as_chamber_squares():
    grid_map = ["-----", "|.P9|", "-----"]
    assert find_chambers(grid_map) == [[(1, 1), (1, 2), (1, 3)]]


def test_find_chambers_empty_map():
    assert find_chambers([]) == []


def test_find_chambers_large_room_covers_every_square():
    grid_map = ["." * 79 for _ in range(25)]
    chambers = find_chambers(grid_map)
    assert len(chambers) == 1
    assert len(set(chambers[0])) == 25 * 79


def test_create_stair_marks_a_chamber_cell():
    chamber, _ = _chamber()
    stair = chamber.create_stair()
    assert stair.stair
    assert stair.display == "\\"
    assert not stair.empty
    assert stair in chamber.cells


def test_create_enemy_replaces_cell_and_links():
    chamber, grid = _chamber()
    before = list(chamber.cells)
    enemy = chamber.create_enemy("Dwarf")
    assert isinstance(enemy, Dwarf)
    assert enemy in chamber.cells
    assert len(chamber.cells) == len(before)
    old = grid[enemy.row][enemy.col]
    assert old not in chamber.cells
    for neighbour in enemy.neighbours:
        assert enemy in neighbour.neighbours
        assert old not in neighbour.neighbours


def test_create_enemy_unknown_kind():
    chamber, _ = _chamber()
    with pytest.raises(ValueError):
        chamber.create_enemy("Goblin")


def test_created_merchant_starts_neutral():
    chamber, _ = _chamber()
    merchant = chamber.create_enemy("Merchant")
    assert isinstance(merchant, Merchant)
    assert merchant.neutral


def test_create_potion_kinds():
    chamber, _ = _chamber()
    boost = chamber.create_potion("BA")
    wound = chamber.create_potion("WD")
    assert isinstance(boost, BoostAttack)
    assert isinstance(wound, WoundDefence)
    assert (boost.row, boost.col) != (wound.row, wound.col)
    assert boost.display == "P"


def test_create_potion_unknown_kind():
    chamber, _ = _chamber()
    with pytest.raises(ValueError):
        chamber.create_potion("XX")


def test_create_gold_amount_and_position():
    chamber, grid = _chamber()
    pile = chamber.create_gold(2)
    assert isinstance(pile, Gold)
    assert pile.amount == 2
    assert pile.name == "normal"
    assert 0 <= pile.row < len(grid) and 0 <= pile.col < len(grid[0])


def test_dragon_hoard_has_free_neighbour_and_dragon_guards_it():
    chamber, _ = _chamber()
    hoard = chamber.create_gold(6)
    assert any(n.empty for n in hoard.neighbours)
    dragon = chamber.create_dragon(hoard)
    assert isinstance(dragon, Dragon)
    assert dragon.guard is hoard
    assert hoard.guardian is dragon
    assert abs(dragon.row - hoard.row) <= 1 and abs(dragon.col - hoard.col) <= 1
    assert dragon in hoard.neighbours


def test_create_dragon_without_free_neighbour():
    chamber, _ = _chamber(rows=1, cols=2)
    hoard = chamber.create_gold(6)
    chamber.create_dragon(hoard)
    with pytest.raises(RuntimeError):
        chamber.create_dragon(hoard)


def test_place_player_sets_position_and_reserves_square():
    chamber, _ = _chamber(rows=1, cols=2)
    player = Shade()
    assert not chamber.player_here
    chamber.place_player(player)
    assert chamber.player_here
    stair = chamber.create_stair()
    assert (stair.row, stair.col) != (player.row, player.col)
    with pytest.raises(RuntimeError):
        chamber.create_enemy("Human")


def test_place_player_copies_neighbours():
    chamber, grid = _chamber()
    player = Shade()
    chamber.place_player(player)
    assert player.neighbours == grid[player.row][player.col].neighbours


def test_full_chamber_raises():
    chamber, _ = _chamber(rows=1, cols=3)
    for _ in range(3):
        chamber.create_potion("BA")
    assert all(not cell.empty for cell in chamber.cells)
    with pytest.raises(RuntimeError):
        chamber.create_gold(1)


def test_empty_chamber_raises():
    with pytest.raises(RuntimeError):
        Chamber(rng=random.Random(0)).create_stair()


def test_same_seed_same_layout():
    first, _ = _chamber(seed=7)
    second, _ = _chamber(seed=7)
    a = [first.create_enemy("Human"), first.create_potion("RH"), first.create_gold(1)]
    b = [second.create_enemy("Human"), second.create_potion("RH"), second.create_gold(1)]
    assert [(c.row, c.col) for c in a] == [(c.row, c.col) for c in b]