"""
Engine Core - Deterministic combat state and round resolution.

The engine is the runtime that:
1. Holds the spell and effect catalogs
2. Manages CombatState as immutable snapshots
3. Resolves one round at a time via the reducer
4. Replays and classifies whole spell sequences
"""

from .effects import EffectKind, duration, SHIELD_ARMOR, POISON_DAMAGE, RECHARGE_MANA
from .action import Spell, SpellCatalog, DEFAULT_CATALOG, CatalogError, UnknownSpellError
from .state import ActiveEffects, PlayerState, BossState, CombatState
from .reducer import HalfTurn, Reducer, RoundOutcome, apply_spell, is_legal, play_round
from .game_loop import GameResult, ReplayTrace, RoundRecord, classify, replay

__all__ = [
    "EffectKind",
    "duration",
    "SHIELD_ARMOR",
    "POISON_DAMAGE",
    "RECHARGE_MANA",
    "Spell",
    "SpellCatalog",
    "DEFAULT_CATALOG",
    "CatalogError",
    "UnknownSpellError",
    "ActiveEffects",
    "PlayerState",
    "BossState",
    "CombatState",
    "HalfTurn",
    "Reducer",
    "RoundOutcome",
    "apply_spell",
    "is_legal",
    "play_round",
    "GameResult",
    "ReplayTrace",
    "RoundRecord",
    "classify",
    "replay",
]
