"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Runs searches and replays
3. Formats responses

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    # Requests
    ParseRequest,
    SolveRequest,
    ReplayRequest,
    # Responses
    ParseResponse,
    SolveResponse,
    ReplayResponse,
    CatalogResponse,
    ErrorResponse,
    # Shared
    BossStats,
    PlayerStats,
    SpellInfo,
    CombatantsInfo,
    RoundInfo,
    # Enums
    ErrorCode,
    GameResultValue,
)
from ..config import Settings
from ..engine_core import (
    DEFAULT_CATALOG,
    CombatState,
    EffectKind,
    SpellCatalog,
    UnknownSpellError,
    replay,
)
from ..loader import InputParseError, parse_boss
from ..solver import SearchConfig, find_cheapest_game, find_cheapest_game_parallel


def _initial_state(boss: BossStats, player: PlayerStats) -> CombatState:
    return CombatState.create(
        boss_hit_points=boss.hit_points,
        boss_damage=boss.damage,
        player_hit_points=player.hit_points,
        player_mana=player.mana,
    )


def _combatants_info(state: CombatState) -> CombatantsInfo:
    return CombatantsInfo(
        player_hit_points=state.player.hit_points,
        player_mana=state.player.mana,
        active_effects={
            kind.value: left for kind, left in state.player.active_effects.timers.items()
        },
        boss_hit_points=state.boss.hit_points,
    )


@dataclass
class SolverService:
    """
    Main API service.

    Usage:
        service = SolverService()
        response = service.solve(SolveRequest(boss=BossStats(hit_points=13, damage=8)))
    """
    catalog: SpellCatalog = DEFAULT_CATALOG
    settings: Settings = field(default_factory=Settings)

    def parse(self, request: ParseRequest) -> ParseResponse | ErrorResponse:
        """Parse boss stats from puzzle input text."""
        try:
            boss = parse_boss(request.text)
        except InputParseError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.MALFORMED_INPUT)
        return ParseResponse(boss=BossStats(hit_points=boss.hit_points, damage=boss.damage))

    def solve(self, request: SolveRequest) -> SolveResponse:
        """Run the cheapest-win search."""
        state = _initial_state(request.boss, request.player)
        config = SearchConfig(
            max_depth=self.settings.max_depth, max_nodes=self.settings.max_nodes
        )

        if request.workers > 1:
            result = find_cheapest_game_parallel(
                state, request.hard_mode, self.catalog, config, workers=request.workers
            )
        else:
            result = find_cheapest_game(state, request.hard_mode, self.catalog, config)

        return SolveResponse(
            solved=result.solved,
            cost=int(result.cost) if result.solved else None,
            spells=self.catalog.names(result.sequence),
            nodes=result.nodes,
            pruned=result.pruned,
            depth_capped=result.depth_capped,
            budget_exhausted=result.budget_exhausted,
            hard_mode=request.hard_mode,
        )

    def replay(self, request: ReplayRequest) -> ReplayResponse | ErrorResponse:
        """Replay a spell sequence round by round."""
        try:
            sequence = self.catalog.resolve(request.spells)
        except UnknownSpellError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.UNKNOWN_SPELL)

        trace = replay(
            _initial_state(request.boss, request.player),
            sequence,
            hard_mode=request.hard_mode,
            catalog=self.catalog,
        )
        rounds = [
            RoundInfo(
                round_number=record.round_number,
                spell=record.spell_name,
                after=_combatants_info(record.state_after) if record.state_after else None,
                changes=record.changes,
                error=record.error,
            )
            for record in trace.rounds
        ]
        return ReplayResponse(
            result=GameResultValue(trace.result.value),
            mana_spent=trace.mana_spent,
            rounds=rounds,
            final=_combatants_info(trace.final_state),
        )

    def list_spells(self) -> CatalogResponse:
        """List the spell catalog."""
        return CatalogResponse(spells=[
            SpellInfo(
                spell_id=spell.spell_id,
                name=spell.name,
                mana_cost=spell.mana_cost,
                damage=spell.damage,
                heal=spell.heal,
                effect=spell.effect.value if spell.effect is not EffectKind.NONE else None,
            )
            for spell in self.catalog
        ])
