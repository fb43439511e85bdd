"""
Tests for the reducer (round resolution).

Tests:
- Round-by-round state for known fights
- Half-turn step order (ticks before casting, hard-mode drain first)
- Boss damage after armor
- Legality checks in Reducer.apply
"""

import pytest

from ..engine_core.effects import EffectKind
from ..engine_core.reducer import (
    HalfTurn,
    HALF_TURN_ORDER,
    Reducer,
    apply_effect_ticks,
    apply_spell,
    boss_hit,
    is_legal,
    play_round,
)
from ..engine_core.state import ActiveEffects, CombatState
from .conftest import MISSILE, DRAIN, SHIELD, POISON, RECHARGE


def _snapshot(state: CombatState) -> tuple[int, int, int]:
    return state.player.hit_points, state.player.mana, state.boss.hit_points


class TestRoundByRound:
    """Known fights, checked after every round."""

    def test_poison_then_missile(self, weak_boss_state, catalog):
        state = play_round(weak_boss_state, catalog.get(POISON))
        assert state.player.active_effects.is_active(EffectKind.POISON)
        assert _snapshot(state) == (2, 77, 10)

        state = play_round(state, catalog.get(MISSILE))
        assert state.player.active_effects.is_active(EffectKind.POISON)
        assert _snapshot(state) == (2, 24, 0)
        assert state.boss.damage == 8

    def test_five_spell_fight(self, tough_boss_state, catalog):
        state = play_round(tough_boss_state, catalog.get(RECHARGE))
        assert state.player.active_effects.is_active(EffectKind.RECHARGE)
        assert _snapshot(state) == (2, 122, 14)

        state = play_round(state, catalog.get(SHIELD))
        assert state.player.active_effects.is_active(EffectKind.RECHARGE)
        assert state.player.active_effects.is_active(EffectKind.SHIELD)
        assert _snapshot(state) == (1, 211, 14)

        state = play_round(state, catalog.get(DRAIN))
        assert state.player.active_effects.is_active(EffectKind.SHIELD)
        assert not state.player.active_effects.is_active(EffectKind.RECHARGE)
        assert _snapshot(state) == (2, 340, 12)

        state = play_round(state, catalog.get(POISON))
        assert state.player.active_effects.is_active(EffectKind.SHIELD)
        assert state.player.active_effects.is_active(EffectKind.POISON)
        assert _snapshot(state) == (1, 167, 9)

        state = play_round(state, catalog.get(MISSILE))
        assert state.player.active_effects.is_active(EffectKind.POISON)
        assert not state.player.active_effects.is_active(EffectKind.SHIELD)
        assert _snapshot(state) == (1, 114, -1)

    def test_input_state_untouched(self, weak_boss_state, catalog):
        """Playing a round never mutates the state it was given."""
        before = _snapshot(weak_boss_state)
        play_round(weak_boss_state, catalog.get(POISON))
        assert _snapshot(weak_boss_state) == before
        assert len(weak_boss_state.player.active_effects) == 0


class TestHalfTurnOrder:
    """Step order within a round."""

    def test_player_acts_first(self):
        assert HALF_TURN_ORDER == (HalfTurn.PLAYER, HalfTurn.BOSS)

    def test_effect_with_one_tick_left_still_fires(self, weak_boss_state):
        effects = ActiveEffects(timers={EffectKind.POISON: 1})
        state = weak_boss_state.with_player(weak_boss_state.player.with_effects(effects))
        state = apply_effect_ticks(state)
        assert state.boss.hit_points == 10
        assert not state.player.active_effects.is_active(EffectKind.POISON)

    def test_recharge_tick_grants_mana(self, weak_boss_state):
        effects = ActiveEffects(timers={EffectKind.RECHARGE: 3})
        state = weak_boss_state.with_player(weak_boss_state.player.with_effects(effects))
        state = apply_effect_ticks(state)
        assert state.player.mana == 351
        assert state.player.active_effects.remaining(EffectKind.RECHARGE) == 2

    def test_recast_on_last_tick(self, long_fight_state, catalog):
        """An effect with one half-turn left expires before the new cast lands."""
        state = long_fight_state
        for spell_id in (SHIELD, MISSILE, MISSILE):
            state = play_round(state, catalog.get(spell_id))
        assert state.player.active_effects.remaining(EffectKind.SHIELD) == 1
        assert is_legal(state, catalog.get(SHIELD))

        state = play_round(state, catalog.get(SHIELD))
        assert state.player.active_effects.remaining(EffectKind.SHIELD) == 5

    def test_recast_with_two_ticks_left_is_illegal(self, long_fight_state, catalog):
        state = long_fight_state
        for spell_id in (SHIELD, MISSILE):
            state = play_round(state, catalog.get(spell_id))
        assert state.player.active_effects.remaining(EffectKind.SHIELD) == 3
        assert not is_legal(state, catalog.get(SHIELD))


class TestHardMode:
    """Hard mode drains 1 hit point before anything else."""

    def test_drain_before_effects(self, weak_boss_state, catalog):
        state = play_round(weak_boss_state, catalog.get(POISON), hard_mode=True)
        assert _snapshot(state) == (1, 77, 10)

    def test_drain_death_ends_round(self, weak_boss_state, catalog):
        """Dying to the drain skips ticks, the cast and the boss attack."""
        state = play_round(weak_boss_state, catalog.get(POISON), hard_mode=True)
        state = play_round(state, catalog.get(MISSILE), hard_mode=True)
        assert state.player.hit_points == 0
        assert state.player.mana == 77
        assert state.boss.hit_points == 10
        assert state.player.active_effects.remaining(EffectKind.POISON) == 5


class TestBossAttack:
    """Boss damage after armor."""

    def test_unshielded_hit(self, weak_boss_state):
        assert boss_hit(weak_boss_state) == 8

    def test_shield_absorbs_seven(self, weak_boss_state):
        effects = ActiveEffects(timers={EffectKind.SHIELD: 2})
        state = weak_boss_state.with_player(weak_boss_state.player.with_effects(effects))
        assert boss_hit(state) == 1

    def test_minimum_one_damage(self):
        state = CombatState.create(boss_hit_points=10, boss_damage=3)
        effects = ActiveEffects(timers={EffectKind.SHIELD: 4})
        state = state.with_player(state.player.with_effects(effects))
        assert boss_hit(state) == 1

    def test_dead_boss_does_not_attack(self, weak_boss_state, catalog):
        state = weak_boss_state.with_boss(weak_boss_state.boss.with_hit_points(4))
        state = play_round(state, catalog.get(MISSILE))
        assert state.boss.hit_points == 0
        assert state.player.hit_points == 10


class TestReducerApply:
    """Tests for Reducer.apply legality and change log."""

    def test_not_enough_mana(self, catalog):
        state = CombatState.create(boss_hit_points=10, boss_damage=8, player_mana=100)
        outcome = Reducer(catalog).apply(state, SHIELD)
        assert not outcome.success
        assert outcome.error_code == "ILLEGAL"
        assert "mana" in outcome.error

    def test_effect_still_active(self, long_fight_state):
        outcome = apply_spell(long_fight_state, POISON)
        assert outcome.success
        outcome = apply_spell(outcome.new_state, POISON)
        assert not outcome.success
        assert outcome.error_code == "ILLEGAL"
        assert "still active" in outcome.error

    def test_unknown_spell(self, long_fight_state):
        outcome = apply_spell(long_fight_state, 42)
        assert not outcome.success
        assert outcome.error_code == "UNKNOWN_SPELL"

    def test_changes_logged(self, weak_boss_state):
        outcome = apply_spell(weak_boss_state, POISON)
        assert outcome.success
        assert any("casts Poison" in c for c in outcome.state_changes)
        assert any("Poison deals 3 damage" in c for c in outcome.state_changes)
        assert any("Boss attacks for 8" in c for c in outcome.state_changes)

    @pytest.mark.parametrize("hard_mode", [False, True])
    def test_apply_matches_play_round(self, weak_boss_state, catalog, hard_mode):
        outcome = Reducer(catalog, hard_mode=hard_mode).apply(weak_boss_state, POISON)
        assert outcome.new_state == play_round(weak_boss_state, catalog.get(POISON), hard_mode)
