"""
Configuration - Environment-driven settings.

    SPELLDUEL_PLAYER_HP     Player starting hit points (default 50)
    SPELLDUEL_PLAYER_MANA   Player starting mana (default 500)
    SPELLDUEL_MAX_DEPTH     Search depth safety cap (default 64)
    SPELLDUEL_MAX_NODES     Search work budget in classified sequences (default 2000000)
    SPELLDUEL_WORKERS       Parallel search workers, 1 = sequential
    SPELLDUEL_LOG_LEVEL     Logging level name (default WARNING)
    ALLOWED_ORIGINS         Comma-separated CORS origins for the API
"""

from __future__ import annotations
from dataclasses import dataclass, field
import os

from .engine_core.state import DEFAULT_PLAYER_HIT_POINTS, DEFAULT_PLAYER_MANA


DEFAULT_MAX_DEPTH = 64
DEFAULT_MAX_NODES = 2_000_000


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass
class Settings:
    """Runtime settings, usually built with Settings.from_env()."""
    player_hit_points: int = DEFAULT_PLAYER_HIT_POINTS
    player_mana: int = DEFAULT_PLAYER_MANA
    max_depth: int = DEFAULT_MAX_DEPTH
    max_nodes: int = DEFAULT_MAX_NODES
    workers: int = 1
    log_level: str = "WARNING"
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            player_hit_points=_env_int("SPELLDUEL_PLAYER_HP", DEFAULT_PLAYER_HIT_POINTS),
            player_mana=_env_int("SPELLDUEL_PLAYER_MANA", DEFAULT_PLAYER_MANA),
            max_depth=_env_int("SPELLDUEL_MAX_DEPTH", DEFAULT_MAX_DEPTH),
            max_nodes=_env_int("SPELLDUEL_MAX_NODES", DEFAULT_MAX_NODES),
            workers=max(1, _env_int("SPELLDUEL_WORKERS", 1)),
            log_level=os.getenv("SPELLDUEL_LOG_LEVEL", "WARNING").upper(),
            allowed_origins=os.getenv("ALLOWED_ORIGINS", "*").split(","),
        )
