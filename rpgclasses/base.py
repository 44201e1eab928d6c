"""The common shape of every playable character class."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from typing import TextIO

from rpgclasses.formatting import truncate_double, truncate_float

MAX_GROWTH_LEVEL = 55
DEFAULT_TYPING_DELAY = 25


class Character(ABC):
    """A character with core statistics that grow as it levels up."""

    def __init__(
        self,
        name: str,
        *,
        health: float,
        defense: float,
        attack: float,
        speed: float,
        stamina: float,
        mana: float,
        output: TextIO | None = None,
        typing_delay: int = DEFAULT_TYPING_DELAY,
    ) -> None:
        self.name = name
        self.level = 1
        self.health = float(health)
        self.defense = float(defense)
        self.attack = float(attack)
        self.speed = float(speed)
        self.stamina = float(stamina)
        self.mana = float(mana)
        self.output = output
        self.typing_delay = typing_delay

    @abstractmethod
    def level_up(self, level: int = 1) -> None:
        """Gain ``level`` levels, grow statistics and report the result."""

    def type_writer(self, text: str, delay: int = DEFAULT_TYPING_DELAY) -> None:
        """Write ``text`` one character at a time, pausing ``delay`` ms after each."""
        stream = self.output if self.output is not None else sys.stdout
        pause = max(delay, 0) / 1000
        for char in text:
            stream.write(char)
            stream.flush()
            time.sleep(pause)
        stream.write("\n")
        stream.flush()

    def _grow(self, *, health: int, attack: int, speed: int, stamina: int) -> None:
        """Add each rate multiplied by the current level to its statistic."""
        self.health += self.level * health
        self.attack += self.level * attack
        self.speed += self.level * speed
        self.stamina += self.level * stamina

    def _announce(self, label: str, value: int) -> None:
        lines = (
            f"{self.name} Leveled Up!",
            f"Level = {self.level}",
            f"Health = {truncate_float(self.health)}",
            f"Attack = {truncate_double(self.attack)}",
            f"Speed = {truncate_double(self.speed)}",
            f"Stamina = {truncate_double(self.stamina)}",
            f"Mana = {truncate_double(self.mana)}",
            f"{label} = {value}\n",
        )
        for line in lines:
            self.type_writer(line, self.typing_delay)