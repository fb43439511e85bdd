"""
Solver module - Cheapest winning spell sequence.

Provides:
- find_cheapest_game: sequential branch-and-bound search
- find_cheapest_game_parallel: same search split over the first spell
- PruningBound implementations used to cut pending branches
"""

from .bounds import PruningBound, CheapestSpellBound, CostCutoffBound
from .search import (
    NO_SOLUTION,
    CheapestWinSearch,
    Incumbent,
    NodeBudget,
    SearchConfig,
    SearchResult,
    find_cheapest_game,
)
from .parallel import find_cheapest_game_parallel

__all__ = [
    "PruningBound",
    "CheapestSpellBound",
    "CostCutoffBound",
    "NO_SOLUTION",
    "CheapestWinSearch",
    "Incumbent",
    "NodeBudget",
    "SearchConfig",
    "SearchResult",
    "find_cheapest_game",
    "find_cheapest_game_parallel",
]
