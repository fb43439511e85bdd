"""
Pytest fixtures for Spellduel tests.
"""

import pytest

from ..engine_core.action import DEFAULT_CATALOG, SpellCatalog
from ..engine_core.state import CombatState


# Spell ids in the default catalog
MISSILE, DRAIN, SHIELD, POISON, RECHARGE = range(5)


@pytest.fixture
def catalog() -> SpellCatalog:
    """The default five-spell catalog."""
    return DEFAULT_CATALOG


@pytest.fixture
def weak_boss_state() -> CombatState:
    """Small player against a 13 hp boss (cheapest win: Poison, Magic Missile)."""
    return CombatState.create(
        boss_hit_points=13, boss_damage=8, player_hit_points=10, player_mana=250
    )


@pytest.fixture
def tough_boss_state() -> CombatState:
    """Small player against a 14 hp boss (cheapest win needs five spells)."""
    return CombatState.create(
        boss_hit_points=14, boss_damage=8, player_hit_points=10, player_mana=250
    )


@pytest.fixture
def frail_boss_state() -> CombatState:
    """Small player against an 8 hp boss, winnable in hard mode."""
    return CombatState.create(
        boss_hit_points=8, boss_damage=8, player_hit_points=10, player_mana=250
    )


@pytest.fixture
def long_fight_state() -> CombatState:
    """Default player against a boss too strong to finish quickly."""
    return CombatState.create(boss_hit_points=100, boss_damage=8)


@pytest.fixture
def boss_input_file(tmp_path):
    """Write a boss stats file and return its path."""
    def _write(text: str = "Hit Points: 13\nDamage: 8\n"):
        path = tmp_path / "input"
        path.write_text(text, encoding="utf-8")
        return path
    return _write
