# cavecrawl

A turn-based dungeon crawler played in the terminal. Choose a hero,
descend through five floors of a cave, drink unknown potions, collect
gold and fight the creatures that live there. You win by reaching the
stairs on the fifth floor; your score is the gold you carry.

## Installing

```
pip install .
```

## Playing

Start a game with randomly populated floors:

```
cavecrawl
```

The layout of every floor is read from `map.txt` in the current
directory. Chambers, corridors and walls come from that file; the
player, stairs, potions, gold and enemies are placed at random. When a
game ends with `r`, a new one starts and `Game restart!` is printed.

To play a map whose contents are already laid out, pass its path:

```
cavecrawl mymap.txt
```

Such a map is played once; `r` and `q` both end it. The player is still
put on a random free square. In a laid-out map:

- `.` is floor and `\` the stairs;
- `0` to `5` are potions: restore health, boost attack, boost defence,
  poison health, wound attack, wound defence;
- `6` is normal gold (2), `7` small gold (1), `8` a merchant hoard (4)
  and `9` a dragon hoard (6);
- `H`, `W`, `E`, `O`, `M` and `L` are enemies (see below), and a `D`
  is a dragon, which must stand next to a dragon hoard.

`-` and `|` are walls, `+` doors, `#` corridors and spaces are solid
rock. A map needs at least five chambers; only the first five, in
reading order, are used. Rows are cut or padded to 79 columns and 25
rows.

### Races

At the start you choose one of `Drow`, `Goblin`, `Shade`, `Troll` or
`Vampire`:

| Race    | HP  | Atk | Def | Notes                                             |
|---------|-----|-----|-----|---------------------------------------------------|
| Drow    | 150 | 25  | 15  | potions act half again as strongly                |
| Goblin  | 110 | 15  | 20  | shown as race "Drow"; takes more damage from orcs |
| Shade   | 125 | 25  | 25  |                                                   |
| Troll   | 120 | 25  | 15  |                                                   |
| Vampire | 50  | 25  | 25  | no health cap; +5 HP per hit landed, −5 on dwarves |

Attack and defence boosts from potions wear off at each new floor.

### Commands

| Command    | Effect                                       |
|------------|----------------------------------------------|
| `no` `ne` `ea` `se` `so` `sw` `we` `nw` | move one step in that direction |
| `u <dir>`  | drink the potion in that direction           |
| `a <dir>`  | attack the enemy in that direction           |
| `f`        | freeze or unfreeze enemy movement            |
| `r`        | restart the game                             |
| `q`        | quit                                         |

Walking onto gold picks it up, unless a living dragon guards it.
After each turn the floor is printed, with `@` for you, `\` for the
stairs, `P` for potions, `G` for gold and a letter for each enemy:
`H` human, `W` dwarf, `E` elf, `O` orc, `M` merchant, `D` dragon and
`L` halfling. Enemies next to you attack; the others wander unless
frozen. Dragons stay by their hoard and attack when you are beside it.
Merchants stay neutral until you strike one. Elves attack twice,
halflings dodge half of all blows. A slain merchant leaves a merchant
hoard; a slain human leaves two piles of normal gold.

## Using it as a library

The pieces of the game can be driven from Python:

```python
from cavecrawl.game import read_map, create_player
from cavecrawl.floor import Floor

hero = create_player("Shade")
level = Floor(read_map("map.txt"), hero, 1)
print(level.pc_turn("no"))
print(level.enemy_turn())
print(level.render("look around"))
```

- `cavecrawl.game.read_map(path)` returns the map as rows of
  characters, or an empty list when the file cannot be read.
- `cavecrawl.game.create_player(race)` raises `ValueError` for an
  unknown race.
- `Floor(grid_map, player, floor_num, map_given=False, rng=None)`
  builds a level; it raises `ValueError` for a map with too few
  chambers. Pass a `random.Random` as `rng` for repeatable games.
- `Floor.pc_turn(command)` returns what happened, or `"?"` for a
  command it does not understand; `Floor.enemy_turn()` lets the enemies
  act; `Floor.passed_floor()` tells whether the hero is on the stairs;
  `Floor.render(action)` returns the floor and the hero's status as text.
- `cavecrawl.game.play(map_given, map_name, lines, out)` runs a whole
  game from an iterable of input lines, writing to a text stream, and
  returns `True` when a restart was asked for.

## What it does not do

The game is text only: there is no graphical window, and no saving or
loading of games in progress.