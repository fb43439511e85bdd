"""
API Module - HTTP interface to the solver.

Exposes the engine via REST API:
1. Parse puzzle input into boss stats
2. Solve for the cheapest winning fight
3. Replay a spell sequence round by round
"""

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
    HealthResponse,
    # Shared
    BossStats,
    PlayerStats,
    SpellInfo,
    CombatantsInfo,
    RoundInfo,
    ErrorCode,
    GameResultValue,
)
from .service import SolverService
from .app import create_app

__all__ = [
    # Requests
    "ParseRequest",
    "SolveRequest",
    "ReplayRequest",
    # Responses
    "ParseResponse",
    "SolveResponse",
    "ReplayResponse",
    "CatalogResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "BossStats",
    "PlayerStats",
    "SpellInfo",
    "CombatantsInfo",
    "RoundInfo",
    "ErrorCode",
    "GameResultValue",
    # Service
    "SolverService",
    "create_app",
]
