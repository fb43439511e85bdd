"""
Pydantic Schemas for API - Request/response models for OpenAPI.

Error Codes:
- MALFORMED_INPUT: Boss stats text could not be parsed
- UNKNOWN_SPELL: A spell name in a replay request is not in the catalog
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from ..engine_core.state import DEFAULT_PLAYER_HIT_POINTS, DEFAULT_PLAYER_MANA


# =============================================================================
# Enums
# =============================================================================

class GameResultValue(str, Enum):
    """Outcome of replaying a spell sequence."""
    PENDING = "pending"
    PLAYER_WINS = "player_wins"
    BOSS_WINS = "boss_wins"
    ILLEGAL = "illegal"


class ErrorCode(str, Enum):
    """Structured error codes."""
    MALFORMED_INPUT = "MALFORMED_INPUT"
    UNKNOWN_SPELL = "UNKNOWN_SPELL"


# =============================================================================
# Shared Models
# =============================================================================

class BossStats(BaseModel):
    """Boss starting stats."""
    hit_points: int = Field(..., gt=0, le=10_000, description="Boss starting hit points")
    damage: int = Field(..., ge=0, le=1_000, description="Damage per boss attack")


class PlayerStats(BaseModel):
    """Player starting stats."""
    hit_points: int = Field(DEFAULT_PLAYER_HIT_POINTS, gt=0, le=10_000)
    mana: int = Field(DEFAULT_PLAYER_MANA, ge=0, le=100_000)


class SpellInfo(BaseModel):
    """Spell catalog entry for display."""
    spell_id: int
    name: str
    mana_cost: int
    damage: int = 0
    heal: int = 0
    effect: Optional[str] = Field(None, description="shield, poison, recharge")

    model_config = {"from_attributes": True}


class CombatantsInfo(BaseModel):
    """Both combatants at a point in the fight."""
    player_hit_points: int
    player_mana: int
    active_effects: dict[str, int] = Field(
        default_factory=dict, description="Effect name to remaining half-turns"
    )
    boss_hit_points: int


class RoundInfo(BaseModel):
    """One round of a replay."""
    round_number: int
    spell: str
    after: Optional[CombatantsInfo] = None
    changes: list[str] = Field(default_factory=list)
    error: Optional[str] = None


# =============================================================================
# Request Models
# =============================================================================

class ParseRequest(BaseModel):
    """Request to parse boss stats from puzzle input text."""
    text: str = Field(..., description="'Hit Points: N' and 'Damage: N' lines")


class SolveRequest(BaseModel):
    """Request to find the cheapest winning fight."""
    boss: BossStats
    player: PlayerStats = Field(default_factory=PlayerStats)
    hard_mode: bool = Field(False, description="Lose 1 hit point at the start of each player turn")
    workers: int = Field(1, ge=1, le=16, description="Parallel search workers")


class ReplayRequest(BaseModel):
    """Request to replay a fixed spell sequence."""
    boss: BossStats
    player: PlayerStats = Field(default_factory=PlayerStats)
    hard_mode: bool = False
    spells: list[str] = Field(..., min_length=1, description="Spell names in casting order")


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    api_version: str = Field("v1", description="API version")


class ParseResponse(BaseModel):
    """Parsed boss stats."""
    boss: BossStats
    api_version: str = "v1"


class SolveResponse(BaseModel):
    """Cheapest winning fight, if any."""
    solved: bool
    cost: Optional[int] = Field(None, description="Minimum mana spent; null when nothing wins")
    spells: list[str] = Field(default_factory=list, description="One cheapest winning sequence")
    nodes: int = Field(0, description="Sequences classified during the search")
    pruned: int = 0
    depth_capped: int = Field(0, description="Branches abandoned at the depth cap")
    budget_exhausted: bool = Field(False, description="Node budget ran out; cost may not be optimal")
    hard_mode: bool = False
    api_version: str = "v1"


class ReplayResponse(BaseModel):
    """Round-by-round replay result."""
    result: GameResultValue
    mana_spent: int
    rounds: list[RoundInfo] = Field(default_factory=list)
    final: CombatantsInfo
    api_version: str = "v1"


class CatalogResponse(BaseModel):
    """All castable spells in branching order."""
    spells: list[SpellInfo]
    api_version: str = "v1"


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    version: str
