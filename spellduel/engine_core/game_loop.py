"""
Game Loop - Replays a spell sequence from the start and classifies it.

The loop, per spell:
1. Reject the whole sequence if the spell is not legal right now
2. Play one full round
3. Stop as soon as either side is down (player checked first)

A sequence that runs out with both sides standing is PENDING: a legal
prefix of some longer fight.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from .action import SpellCatalog, DEFAULT_CATALOG
from .reducer import Reducer, is_legal, play_round
from .state import CombatState


class GameResult(Enum):
    """Outcome of replaying a spell sequence."""
    PENDING = "pending"
    PLAYER_WINS = "player_wins"
    BOSS_WINS = "boss_wins"
    ILLEGAL = "illegal"

    @property
    def is_final(self) -> bool:
        return self is not GameResult.PENDING


def _outcome(state: CombatState) -> GameResult:
    if state.player_defeated:
        return GameResult.BOSS_WINS
    if state.boss_defeated:
        return GameResult.PLAYER_WINS
    return GameResult.PENDING


def classify(
    initial_state: CombatState,
    sequence: Sequence[int],
    hard_mode: bool = False,
    catalog: SpellCatalog = DEFAULT_CATALOG,
) -> GameResult:
    """
    Classify a spell sequence played from initial_state.

    This is the hot path of the search, so it skips change tracking.
    """
    state = initial_state
    for spell_id in sequence:
        spell = catalog.get(spell_id)
        if not is_legal(state, spell):
            return GameResult.ILLEGAL
        state = play_round(state, spell, hard_mode)
        result = _outcome(state)
        if result.is_final:
            return result
    return GameResult.PENDING


@dataclass
class RoundRecord:
    """One played (or rejected) round of a replay."""
    round_number: int
    spell_id: int
    spell_name: str
    state_before: CombatState
    state_after: CombatState | None
    changes: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass
class ReplayTrace:
    """
    Full record of a replay.

    Contains every round played, the final state and the result.
    Always agrees with classify() on the same inputs.
    """
    result: GameResult
    final_state: CombatState
    rounds: list[RoundRecord] = field(default_factory=list)
    mana_spent: int = 0

    @property
    def rounds_played(self) -> int:
        return sum(1 for r in self.rounds if r.state_after is not None)


def replay(
    initial_state: CombatState,
    sequence: Sequence[int],
    hard_mode: bool = False,
    catalog: SpellCatalog = DEFAULT_CATALOG,
) -> ReplayTrace:
    """Replay a sequence, recording what happened in each round."""
    reducer = Reducer(catalog=catalog, hard_mode=hard_mode)
    state = initial_state
    rounds: list[RoundRecord] = []
    mana_spent = 0

    for number, spell_id in enumerate(sequence, start=1):
        spell = catalog.get(spell_id)
        outcome = reducer.apply(state, spell_id)
        if not outcome.success:
            rounds.append(RoundRecord(
                round_number=number,
                spell_id=spell_id,
                spell_name=spell.name,
                state_before=state,
                state_after=None,
                error=outcome.error,
            ))
            return ReplayTrace(GameResult.ILLEGAL, state, rounds, mana_spent)

        mana_spent += spell.mana_cost
        rounds.append(RoundRecord(
            round_number=number,
            spell_id=spell_id,
            spell_name=spell.name,
            state_before=state,
            state_after=outcome.new_state,
            changes=outcome.state_changes,
        ))
        state = outcome.new_state
        result = _outcome(state)
        if result.is_final:
            return ReplayTrace(result, state, rounds, mana_spent)

    return ReplayTrace(GameResult.PENDING, state, rounds, mana_spent)
