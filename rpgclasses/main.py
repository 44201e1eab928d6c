"""Command that levels up a sample party and prints each report."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from rpgclasses.base import Character
from rpgclasses.characters import Brute, Ranger, Thief, Warrior, Wizard


def _party() -> list[Character]:
    return [Brute("Midas"), Wizard("Frieren"), Ranger(), Thief(), Warrior()]


def main(argv: Sequence[str] | None = None) -> int:
    """Level every member of the sample party up by eleven levels."""
    parser = argparse.ArgumentParser(
        prog="rpgclasses",
        description="Level up a sample party of characters and show their statistics.",
    )
    parser.parse_args(argv)
    for character in _party():
        character.level_up(11)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())