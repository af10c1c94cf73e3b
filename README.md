# mazmorra

A small turn-based dungeon crawler played in the terminal. The game's text
is in Spanish.

## Installation

```
pip install .
```

## Playing

```
mazmorra
mazmorra --seed 42 --scores my_scores.txt
```

Options:

- `--scores PATH`: the score file to append to (default `scores.txt` in the
  current directory).
- `--seed N`: seed for the random number generator, for repeatable runs.

The same entry point can be started with `python -m mazmorra.game`.

You enter an alias and choose three heroes, one at a time, from a pool of six
(Ayla, Tyr, Kira, Nash, Luna and Zorak), typing each hero's number. Every hero
starts with 60 HP, 6 attack, 3 defence, 4 speed and 1 luck.

The party then goes through nine rooms, each guarded by one enemy: soldiers,
then the Caballero Negro (a mini-boss), one more soldier, and finally the
Señor Oscuro (the great boss). In each room your heroes take turns dueling
the enemy, in the order you picked them; a hero fights until either the enemy
or the hero falls. Each turn you choose `1` to attack; any other answer
passes the turn. Whatever you choose, the enemy strikes back while it is
alive.

Damage is the attacker's attack plus a random 0–4, minus the target's
defence, and never less than 1. A character has a chance of twice its luck
percent to land a critical hit for double damage.

Two rooms hold events before the fight:

- room 3: a chest. Choose `1` for an amulet for one hero (it raises that
  hero's attack and defence by 2%, truncated), or anything else for three
  potions of +10 HP each, each given to a hero you pick (never above the
  hero's maximum HP);
- room 7: the Holy Grail, which heals every hero to full health.

The run ends when the party clears every room or an enemy survives all three
heroes. One line is then appended to the score file:

```
<alias> <rooms cleared> <health lost> <date and time>
```

where the health lost is the sum of `60 - HP` over the party. The first five
lines of the file are then printed under `=== TOP SCORES ===`. Ending input
(Ctrl-D) or pressing Ctrl-C stops the game with exit status 1.

## Using the pieces

The characters, rooms and score file can be used from Python:

```python
from mazmorra.heroe import HP_INICIAL, Heroe
from mazmorra.enemigo import Enemigo, TipoEnemigo
from mazmorra.sala import Sala
from mazmorra.scores import guardar_score, top_scores

party = [Heroe("Ayla"), Heroe("Tyr"), Heroe("Kira")]
won = Sala(Enemigo("Goblin", TipoEnemigo.SOLDADO)).iniciar_batalla(party)

lost = sum(HP_INICIAL - h.hp for h in party)
guardar_score("player", 1 if won else 0, lost, "scores.txt")
print(top_scores("scores.txt", 5))
```

- `mazmorra.personaje.Personaje`: base combatant with `atacar`,
  `calcular_danio`, `recibir_danio` and `esta_vivo`. Every character takes an
  optional `rng` (a `random.Random`) for repeatable rolls.
- `mazmorra.heroe.Heroe`: adds `hp_max`, `curar`, `equipar` and
  `subir_stats`.
- `mazmorra.enemigo.Enemigo` and `TipoEnemigo` (`SOLDADO`, `MINI_JEFE`,
  `GRAN_JEFE`): enemy stats are fixed by rank.
- `mazmorra.equipo.Equipo`: a piece of gear with HP, attack, defence and
  luck bonuses; `describir` returns a one-line summary and `mostrar` prints
  it.
- `mazmorra.item.Item`, `TipoItem` and `mazmorra.inventario.Inventario`: a
  pool of three loot items; `obtener_item` returns one at random.
- `mazmorra.sala.Sala`: `iniciar_batalla(heroes)` fights automatically until
  the enemy or the lead hero falls. Heroes are sorted in place by speed,
  fastest first, and all grow their stats by 2% on a victory. It returns
  `True` on victory and raises `ValueError` for an empty party.
- `mazmorra.scores`: `guardar_score`, `top_scores` (returns `[]` when the
  file does not exist) and `mostrar_top_scores`.
- `mazmorra.game`: the interactive steps (`mostrar_heroes`, `elegir_heroe`,
  `usar_cofre`, `combate_interactivo`, `evento_sala_especial`) and `main`.
  Functions that read input take an `entrada` callable in place of `input`.
  `evento_sala_especial` also offers a market (one weapon with +5 attack and
  +1 luck) and a rare treasure (+8 attack and +2 luck for every hero); the
  game started by `mazmorra` does not use these.
- `mazmorra.dungeon.Mazmorra`: an automatic run through ten rooms. It works
  on a copy of the heroes it is given, asks only for the alias, fights each
  room with `Sala.iniciar_batalla`, saves the score and returns a
  `Resultado` (alias, rooms cleared, health lost).

## Limitations

- The "top scores" are the first five lines of the score file in the order
  they were written; entries are not ranked.
- There is no saving or resuming of a run in progress.
- Loot items from `Inventario` are not handed out in the game.

## Running the tests

```
pip install .[test]
pytest
```