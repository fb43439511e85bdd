"""
Cheapest-Win Search - Depth-first branch-and-bound over spell sequences.

At each depth every spell is tried in catalog order. The whole buffer is
replayed from the initial state (no shared mutable combat state), then:
- ILLEGAL or BOSS_WINS: drop the candidate, try the next spell
- PLAYER_WINS: record the cost if it beats the best, do not descend
- PENDING: descend only if the pruning bound admits the branch

The buffer is a stack: pushed on descent, popped on backtrack.

Pruning only starts once a first win is known, so two safety caps keep
the search finite: a depth cap on sequence length and a node budget on
the number of sequences classified.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
import threading
from typing import Sequence

from ..config import DEFAULT_MAX_DEPTH, DEFAULT_MAX_NODES
from ..engine_core.action import SpellCatalog, DEFAULT_CATALOG
from ..engine_core.game_loop import GameResult, classify
from ..engine_core.state import CombatState
from .bounds import PruningBound, CheapestSpellBound

logger = logging.getLogger(__name__)

# Reported cost when no sequence wins
NO_SOLUTION = math.inf


@dataclass
class SearchConfig:
    """
    Search tuning.

    max_depth caps the sequence length as a guard against catalogs
    that never resolve; max_nodes caps the total number of sequences
    classified; bound defaults to CheapestSpellBound.
    """
    max_depth: int = DEFAULT_MAX_DEPTH
    max_nodes: int = DEFAULT_MAX_NODES
    bound: PruningBound | None = None


@dataclass
class SearchResult:
    """
    Result of a cheapest-win search.

    cost is NO_SOLUTION when nothing wins; callers must check solved.
    When depth_capped or budget_exhausted is set, part of the space was
    left unexplored and cost is only an upper bound.
    """
    cost: float
    sequence: tuple[int, ...] = ()
    nodes: int = 0
    pruned: int = 0
    depth_capped: int = 0
    budget_exhausted: bool = False

    @property
    def solved(self) -> bool:
        return self.cost != NO_SOLUTION

    @property
    def complete(self) -> bool:
        return not self.depth_capped and not self.budget_exhausted


class Incumbent:
    """
    Best winning sequence found so far.

    offer() is a compare-and-set under a lock, so tasks searching in
    parallel can share one incumbent and it only ever decreases.
    """

    def __init__(self, cost: float = NO_SOLUTION):
        self._lock = threading.Lock()
        self._cost = cost
        self._sequence: tuple[int, ...] = ()

    @property
    def cost(self) -> float:
        return self._cost

    @property
    def sequence(self) -> tuple[int, ...]:
        return self._sequence

    def offer(self, cost: int, sequence: Sequence[int]) -> bool:
        """Record a win if strictly cheaper. Returns True if it was kept."""
        with self._lock:
            if cost < self._cost:
                self._cost = cost
                self._sequence = tuple(sequence)
                return True
            return False


class NodeBudget:
    """Sequences left to classify, shared by every task of one search."""

    def __init__(self, limit: int):
        self._lock = threading.Lock()
        self.limit = limit
        self._left = limit
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        """True once a classification was refused."""
        return self._exhausted

    def take(self) -> bool:
        with self._lock:
            if self._left <= 0:
                self._exhausted = True
                return False
            self._left -= 1
            return True


class CheapestWinSearch:
    """
    Depth-first search for the cheapest winning spell sequence.

    Usage:
        search = CheapestWinSearch(initial_state, hard_mode=False)
        result = search.run()
    """

    def __init__(
        self,
        initial_state: CombatState,
        hard_mode: bool = False,
        catalog: SpellCatalog = DEFAULT_CATALOG,
        config: SearchConfig | None = None,
        incumbent: Incumbent | None = None,
        budget: NodeBudget | None = None,
    ):
        self.initial_state = initial_state
        self.hard_mode = hard_mode
        self.catalog = catalog
        self.config = config or SearchConfig()
        self.bound = self.config.bound or CheapestSpellBound.for_catalog(catalog)
        self.incumbent = incumbent or Incumbent()
        self.budget = budget or NodeBudget(self.config.max_nodes)
        self.nodes = 0
        self.pruned = 0
        self.depth_capped = 0

    def run(self, prefix: Sequence[int] = ()) -> SearchResult:
        """
        Search every sequence that starts with prefix.

        An empty prefix searches the whole space. The prefix itself is
        assumed to be PENDING.
        """
        buffer = list(prefix)
        self._descend(buffer)
        return self.result()

    def result(self) -> SearchResult:
        return SearchResult(
            cost=self.incumbent.cost,
            sequence=self.incumbent.sequence,
            nodes=self.nodes,
            pruned=self.pruned,
            depth_capped=self.depth_capped,
            budget_exhausted=self.budget.exhausted,
        )

    def _descend(self, buffer: list[int]):
        buffer.append(0)
        for spell_id in self.catalog.ids():
            if not self.budget.take():
                break
            buffer[-1] = spell_id
            self.nodes += 1
            result = classify(self.initial_state, buffer, self.hard_mode, self.catalog)

            if result is GameResult.PLAYER_WINS:
                cost = self.catalog.total_cost(buffer)
                if self.incumbent.offer(cost, buffer):
                    logger.debug("New best cost %d: %s", cost, self.catalog.names(buffer))
            elif result is GameResult.PENDING:
                spent = self.catalog.total_cost(buffer)
                if not self.bound.admits(spent, self.incumbent.cost):
                    self.pruned += 1
                elif len(buffer) >= self.config.max_depth:
                    self.depth_capped += 1
                else:
                    self._descend(buffer)
        buffer.pop()


def log_search_caps(result: SearchResult, config: SearchConfig):
    """Warn when a safety cap cut the search short."""
    if result.depth_capped:
        logger.warning(
            "Depth cap %d reached on %d branch(es); result may not be optimal",
            config.max_depth, result.depth_capped,
        )
    if result.budget_exhausted:
        logger.warning(
            "Node budget of %d exhausted; result may not be optimal", config.max_nodes
        )


def find_cheapest_game(
    initial_state: CombatState,
    hard_mode: bool = False,
    catalog: SpellCatalog = DEFAULT_CATALOG,
    config: SearchConfig | None = None,
) -> SearchResult:
    """
    Find the minimum mana cost over all winning spell sequences.

    Returns a SearchResult whose cost is NO_SOLUTION if nothing wins.
    """
    config = config or SearchConfig()
    logger.info(
        "Searching cheapest win: boss %d hp / %d dmg, hard_mode=%s",
        initial_state.boss.hit_points, initial_state.boss.damage, hard_mode,
    )
    result = CheapestWinSearch(initial_state, hard_mode, catalog, config).run()
    log_search_caps(result, config)
    logger.info("Search done: cost=%s after %d nodes (%d pruned)", result.cost, result.nodes, result.pruned)
    return result
