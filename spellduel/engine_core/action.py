"""
Spell Catalog - Castable spells, their costs and what they do.

Spells are plain records resolved by static lookup:
1. Immediate damage to the boss
2. Immediate healing for the caster
3. An optional timed effect (see effects.py)

The catalog order is significant. A spell's position is its identifier,
and the search branches over spells in that order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from .effects import EffectKind


class CatalogError(Exception):
    """Raised when a spell catalog is malformed."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Spell catalog invalid: {'; '.join(errors)}")


class UnknownSpellError(LookupError):
    """Raised when a spell id or name is not in the catalog."""


@dataclass(frozen=True)
class Spell:
    """
    A castable spell.

    Immutable - the catalog is a process-wide constant.
    """
    spell_id: int
    name: str
    mana_cost: int
    damage: int = 0
    heal: int = 0
    effect: EffectKind = EffectKind.NONE

    @property
    def has_effect(self) -> bool:
        return self.effect is not EffectKind.NONE


class SpellCatalog:
    """
    Ordered, immutable collection of spells.

    Usage:
        catalog = DEFAULT_CATALOG
        for spell_id in catalog.ids():
            spell = catalog.get(spell_id)
    """

    def __init__(self, spells: Iterable[Spell]):
        self._spells: tuple[Spell, ...] = tuple(spells)
        errors = _validate_spells(self._spells)
        if errors:
            raise CatalogError(errors)
        self._by_name = {_normalize(s.name): s for s in self._spells}

    def __iter__(self) -> Iterator[Spell]:
        return iter(self._spells)

    def __len__(self) -> int:
        return len(self._spells)

    def ids(self) -> range:
        """All spell ids, in branching order."""
        return range(len(self._spells))

    def get(self, spell_id: int) -> Spell:
        """Get a spell by id."""
        if not 0 <= spell_id < len(self._spells):
            raise UnknownSpellError(f"No spell with id {spell_id}")
        return self._spells[spell_id]

    def by_name(self, name: str) -> Spell:
        """Get a spell by name, ignoring case, spaces and underscores."""
        spell = self._by_name.get(_normalize(name))
        if spell is None:
            known = ", ".join(s.name for s in self._spells)
            raise UnknownSpellError(f"Unknown spell '{name}' (known: {known})")
        return spell

    @property
    def cheapest_cost(self) -> int:
        return min(s.mana_cost for s in self._spells)

    def total_cost(self, sequence: Sequence[int]) -> int:
        """Total mana spent casting the sequence."""
        return sum(self._spells[spell_id].mana_cost for spell_id in sequence)

    def names(self, sequence: Sequence[int]) -> list[str]:
        return [self._spells[spell_id].name for spell_id in sequence]

    def resolve(self, names: Iterable[str]) -> list[int]:
        """Translate spell names to ids."""
        return [self.by_name(name).spell_id for name in names]


def _normalize(name: str) -> str:
    return name.lower().replace(" ", "").replace("_", "").replace("-", "")


def _validate_spells(spells: tuple[Spell, ...]) -> list[str]:
    errors = []
    if not spells:
        errors.append("catalog has no spells")
    for position, spell in enumerate(spells):
        if spell.spell_id != position:
            errors.append(f"spell '{spell.name}' has id {spell.spell_id}, expected {position}")
        if spell.mana_cost < 0:
            errors.append(f"spell '{spell.name}' has negative cost")
    names = [_normalize(s.name) for s in spells]
    if len(set(names)) != len(names):
        errors.append("spell names are not unique")
    return errors


MAGIC_MISSILE = Spell(0, "Magic Missile", mana_cost=53, damage=4)
DRAIN = Spell(1, "Drain", mana_cost=73, damage=2, heal=2)
SHIELD = Spell(2, "Shield", mana_cost=113, effect=EffectKind.SHIELD)
POISON = Spell(3, "Poison", mana_cost=173, effect=EffectKind.POISON)
RECHARGE = Spell(4, "Recharge", mana_cost=229, effect=EffectKind.RECHARGE)

DEFAULT_CATALOG = SpellCatalog([MAGIC_MISSILE, DRAIN, SHIELD, POISON, RECHARGE])
