"""
Reducer - Advances combat state by one full round.

A round is two half-turns, player then boss. Each half-turn runs the
same fixed steps, in this order:
1. Hard-mode self-damage (player half-turn only)
2. Effect ticks: poison, then recharge, then decrement timers
3. Half-turn resolution: cast the spell, or the boss attacks

Design principles:
- Pure function: (state, spell) -> new_state
- Legality is checked by the caller (see is_legal / Reducer.apply)
- Mana may go negative here; classification catches it
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .action import Spell, SpellCatalog, DEFAULT_CATALOG, UnknownSpellError
from .effects import EffectKind, SHIELD_ARMOR, POISON_DAMAGE, RECHARGE_MANA
from .state import CombatState


class HalfTurn(Enum):
    """Which side acts in a half-turn."""
    PLAYER = "player"
    BOSS = "boss"


HALF_TURN_ORDER = (HalfTurn.PLAYER, HalfTurn.BOSS)


def is_legal(state: CombatState, spell: Spell) -> bool:
    """Check the player can afford the spell and its effect is castable."""
    return (
        spell.mana_cost <= state.player.mana
        and state.player.active_effects.is_castable(spell.effect)
    )


def boss_hit(state: CombatState) -> int:
    """Damage the boss deals this half-turn, after armor."""
    armor = SHIELD_ARMOR if state.player.active_effects.is_active(EffectKind.SHIELD) else 0
    return max(1, state.boss.damage - armor)


def apply_effect_ticks(state: CombatState, changes: list[str] | None = None) -> CombatState:
    """
    Fire every running effect, then count its timer down.

    Effects fire before the decrement, so one with a single half-turn
    left still fires once more.
    """
    effects = state.player.active_effects
    player = state.player
    boss = state.boss

    if effects.is_active(EffectKind.POISON):
        boss = boss.with_hit_points(boss.hit_points - POISON_DAMAGE)
        _note(changes, f"Poison deals {POISON_DAMAGE} damage; boss at {boss.hit_points}")
    if effects.is_active(EffectKind.RECHARGE):
        player = player.with_mana(player.mana + RECHARGE_MANA)
        _note(changes, f"Recharge provides {RECHARGE_MANA} mana; player at {player.mana}")

    player = player.with_effects(effects.tick())
    return CombatState(player=player, boss=boss)


def play_round(
    state: CombatState,
    spell: Spell,
    hard_mode: bool = False,
    changes: list[str] | None = None,
) -> CombatState:
    """
    Play one full round: the player casts spell, then the boss attacks.

    In hard mode the player loses 1 hit point at the start of their
    half-turn; if that kills them the round stops there.
    """
    for half_turn in HALF_TURN_ORDER:
        if hard_mode and half_turn is HalfTurn.PLAYER:
            player = state.player.with_hit_points(state.player.hit_points - 1)
            state = state.with_player(player)
            _note(changes, f"Hard mode drains 1 hit point; player at {player.hit_points}")
            if state.player_defeated:
                break

        state = apply_effect_ticks(state, changes)

        if half_turn is HalfTurn.PLAYER:
            state = _resolve_player(state, spell, changes)
        else:
            state = _resolve_boss(state, changes)

    return state


def _resolve_player(state: CombatState, spell: Spell, changes: list[str] | None) -> CombatState:
    player = state.player
    player = player._copy_with(
        active_effects=player.active_effects.add_effect(spell.effect),
        hit_points=player.hit_points + spell.heal,
        mana=player.mana - spell.mana_cost,
    )
    boss = state.boss.with_hit_points(state.boss.hit_points - spell.damage)

    _note(changes, f"Player casts {spell.name} for {spell.mana_cost} mana")
    if spell.damage:
        _note(changes, f"{spell.name} deals {spell.damage} damage; boss at {boss.hit_points}")
    if spell.heal:
        _note(changes, f"{spell.name} heals {spell.heal}; player at {player.hit_points}")
    return CombatState(player=player, boss=boss)


def _resolve_boss(state: CombatState, changes: list[str] | None) -> CombatState:
    if state.boss_defeated:
        return state
    damage = boss_hit(state)
    player = state.player.with_hit_points(state.player.hit_points - damage)
    _note(changes, f"Boss attacks for {damage} damage; player at {player.hit_points}")
    return state.with_player(player)


def _note(changes: list[str] | None, message: str):
    if changes is not None:
        changes.append(message)


@dataclass
class RoundOutcome:
    """
    Result of applying one spell.

    Contains:
    - Whether the cast was legal
    - New state (if legal)
    - Human-readable log of what happened
    """
    success: bool
    new_state: CombatState | None = None
    error: str | None = None
    error_code: str | None = None
    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> RoundOutcome:
        return cls(success=False, error=error, error_code=error_code)


@dataclass
class Reducer:
    """
    Applies spells to combat state, one round at a time.

    Stateless - all state is in CombatState.
    """
    catalog: SpellCatalog = DEFAULT_CATALOG
    hard_mode: bool = False

    def apply(self, state: CombatState, spell_id: int) -> RoundOutcome:
        """Apply a spell by id, returning the new state or why it is illegal."""
        try:
            spell = self.catalog.get(spell_id)
        except UnknownSpellError as e:
            return RoundOutcome.failure(str(e), error_code="UNKNOWN_SPELL")

        if spell.mana_cost > state.player.mana:
            return RoundOutcome.failure(
                f"{spell.name} costs {spell.mana_cost} mana, player has {state.player.mana}",
                error_code="ILLEGAL",
            )
        if not state.player.active_effects.is_castable(spell.effect):
            left = state.player.active_effects.remaining(spell.effect)
            return RoundOutcome.failure(
                f"{spell.name} is still active for {left} half-turns",
                error_code="ILLEGAL",
            )

        changes: list[str] = []
        new_state = play_round(state, spell, self.hard_mode, changes)
        return RoundOutcome(success=True, new_state=new_state, state_changes=changes)


def apply_spell(
    state: CombatState,
    spell_id: int,
    hard_mode: bool = False,
    catalog: SpellCatalog = DEFAULT_CATALOG,
) -> RoundOutcome:
    """
    Convenience function to apply a spell.

    Creates a Reducer and applies the spell.
    """
    reducer = Reducer(catalog=catalog, hard_mode=hard_mode)
    return reducer.apply(state, spell_id)
