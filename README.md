# rpgclasses

A small role-playing character system. Five character classes (`Brute`,
`Wizard`, `Ranger`, `Thief` and `Warrior`, in `rpgclasses.characters`) share
the abstract `Character` base in `rpgclasses.base`.

Each character has a `name`, a `level` (starting at 1) and the statistics
`health`, `defense`, `attack`, `speed`, `stamina` and `mana`. Each class also
tracks one class resource, starting at 1:

| Class     | Default name | Resource attribute | Reported as   |
|-----------|--------------|--------------------|---------------|
| `Brute`   | Broly        | `rage`             | Rage          |
| `Wizard`  | Merlin       | `spell_slots`      | Spell Slots   |
| `Ranger`  | Achilles     | `lock_on`          | Lock On       |
| `Thief`   | Charybdis    | `cloak`            | Cloaking      |
| `Warrior` | Guts         | `negate`           | Negate        |

## Levelling up

`level_up(level=1)` adds `level` to the character's level. While the new
level is 55 or lower, health, attack, speed and stamina grow by the new level
times a per-class rate, mana is updated, and the class resource is
recalculated. Above level 55 only the level itself changes. Defense never
changes.

After every level-up the character prints a report with its name, level,
health, attack, speed, stamina, mana and class resource. The report is
written one character at a time, like a typewriter.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Command line

```
rpgclasses
```

This command creates a party of five characters: a `Brute` named Midas, a
`Wizard` named Frieren, and a `Ranger`, a `Thief` and a `Warrior` with their
default names. It raises each of them by 11 levels and prints every report.
It takes no options other than `--help`.

## Library use

```python
from rpgclasses.characters import Brute, Wizard

midas = Brute("Midas")
midas.level_up(11)
print(midas.level, midas.health, midas.rage)

frieren = Wizard("Frieren")
frieren.level_up(3)
```

Every class has a default name, so the name can be left out. You can pass the
keyword arguments `output` and `typing_delay` to any class. `output` is a text
stream that receives the reports and defaults to standard output.
`typing_delay` is the pause after each character, in milliseconds, and
defaults to 25. A delay of 0 writes the report at full speed:

```python
import io
from rpgclasses.characters import Ranger

buffer = io.StringIO()
achilles = Ranger(output=buffer, typing_delay=0)
achilles.level_up(1)
print(buffer.getvalue())
```

`Character.type_writer(text, delay=25)` writes any text in the same way. It
writes to the character's `output` and ends the text with a newline.

The reports use two helpers from `rpgclasses.formatting` to show statistics
to a fixed number of decimal places. Both default to three places.
`truncate_float` first rounds the value to single precision:

```python
from rpgclasses.formatting import truncate_double, truncate_float

truncate_double(55.0)     # '55.000'
truncate_float(0.1, 10)   # '0.1000000015'
```

## What it does not do

The package only models characters and how they grow with level. There is no
combat, no use of the class resources, no saving or loading of characters,
and no interactive play.

## Running the tests

```
pip install .[test]
pytest
```