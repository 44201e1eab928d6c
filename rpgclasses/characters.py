"""The playable character classes."""

from __future__ import annotations

from typing import Any

from rpgclasses.base import MAX_GROWTH_LEVEL, Character

_BAR_CEILING = 5


def _tiered(level: int, current: int, *, period: int, cap: int) -> int:
    """Return the bar count for ``level`` given the current count."""
    if 1 < level <= cap:
        if level % period == 0:
            return current + 1
        if level > 9:
            return level // period + 1
        return current
    if level >= cap:
        return _BAR_CEILING
    return current


_FIGHTER_STATS = dict(health=150.0, defense=90.0, attack=55.0, speed=110.0, stamina=65.0, mana=5.0)


class Brute(Character):
    """A heavy hitter that builds bars of rage."""

    def __init__(self, name: str = "Broly", **kwargs: Any) -> None:
        super().__init__(name, **_FIGHTER_STATS, **kwargs)
        self.rage = 1

    def level_up(self, level: int = 1) -> None:
        self.level += level
        if self.level <= MAX_GROWTH_LEVEL:
            self._grow(health=8, attack=5, speed=4, stamina=4)
            self.mana = float(self.level * 2)
            self.rage = _tiered(self.level, self.rage, period=10, cap=50)
        self._announce("Rage", self.rage)


class Wizard(Character):
    """A spell caster that gains spell slots every seventh level."""

    def __init__(self, name: str = "Merlin", **kwargs: Any) -> None:
        super().__init__(
            name, health=110.0, defense=55.0, attack=70.0, speed=40.0, stamina=40.0, mana=15.0, **kwargs
        )
        self.spell_slots = 1

    def level_up(self, level: int = 1) -> None:
        self.level += level
        if self.level <= MAX_GROWTH_LEVEL:
            self._grow(health=5, attack=3, speed=2, stamina=2)
            self.mana += self.level * 5
            if self.level <= 49 and self.spell_slots < 7:
                if self.level % 7 == 0:
                    self.spell_slots += 1
                elif self.level > 6:
                    self.spell_slots = self.level // 7 + 1
            elif self.level > 49:
                self.spell_slots = 8
        self._announce("Spell Slots", self.spell_slots)


class Ranger(Character):
    """A marksman that builds lock-on charges."""

    def __init__(self, name: str = "Achilles", **kwargs: Any) -> None:
        super().__init__(name, **_FIGHTER_STATS, **kwargs)
        self.lock_on = 1

    def level_up(self, level: int = 1) -> None:
        self.level += level
        if self.level <= MAX_GROWTH_LEVEL:
            self._grow(health=10, attack=5, speed=4, stamina=4)
            self.mana = float(self.level * 2)
            self.lock_on = _tiered(self.level, self.lock_on, period=10, cap=50)
        self._announce("Lock On", self.lock_on)


class Thief(Character):
    """A quick character that builds cloaking charges every eleventh level."""

    def __init__(self, name: str = "Charybdis", **kwargs: Any) -> None:
        super().__init__(name, **_FIGHTER_STATS, **kwargs)
        self.cloak = 1

    def level_up(self, level: int = 1) -> None:
        self.level += level
        if self.level <= MAX_GROWTH_LEVEL:
            self._grow(health=5, attack=5, speed=6, stamina=4)
            self.mana = float(self.level * 3)
            self.cloak = _tiered(self.level, self.cloak, period=11, cap=55)
        self._announce("Cloaking", self.cloak)


class Warrior(Character):
    """A sturdy fighter that builds negate charges."""

    def __init__(self, name: str = "Guts", **kwargs: Any) -> None:
        super().__init__(name, **_FIGHTER_STATS, **kwargs)
        self.negate = 1

    def level_up(self, level: int = 1) -> None:
        self.level += level
        if self.level <= MAX_GROWTH_LEVEL:
            self._grow(health=10, attack=5, speed=4, stamina=4)
            self.mana = float(self.level * 2)
            self.negate = _tiered(self.level, self.negate, period=10, cap=50)
        self._announce("Negate", self.negate)