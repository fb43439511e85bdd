"""
Effect Registry - Timed status effects and their fixed durations.

Durations are counted in half-turns: an effect cast on the player's
half-turn is ticked at the start of every following half-turn, both the
player's and the boss's.
"""

from __future__ import annotations
from enum import Enum


class EffectKind(Enum):
    """Kinds of timed effects a spell can start."""
    NONE = "none"
    SHIELD = "shield"
    POISON = "poison"
    RECHARGE = "recharge"

    @property
    def duration(self) -> int:
        return duration(self)


# Per-tick magnitudes
SHIELD_ARMOR = 7
POISON_DAMAGE = 3
RECHARGE_MANA = 101

_DURATIONS: dict[EffectKind, int] = {
    EffectKind.NONE: 0,
    EffectKind.SHIELD: 6,
    EffectKind.POISON: 6,
    EffectKind.RECHARGE: 5,
}


def duration(kind: EffectKind) -> int:
    """Get the full duration of an effect kind, in half-turns."""
    return _DURATIONS[kind]
