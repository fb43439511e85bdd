"""
Parallel Search - Splits the search over the first spell cast.

Each task owns its own buffer, seeded with one first spell, and searches
that subtree. All tasks share one Incumbent and one NodeBudget, so a
cheap win found by one task tightens pruning in the others.

Tasks are threads. The search is pure Python and CPU-bound, so under
the GIL workers > 1 buys shared pruning across subtrees and no CPU
speedup. Processes would need the incumbent cost in shared memory and
could not share the Incumbent object as threads do.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor, as_completed
import logging

from ..engine_core.action import SpellCatalog, DEFAULT_CATALOG
from ..engine_core.game_loop import GameResult, classify
from ..engine_core.state import CombatState
from .search import (
    CheapestWinSearch,
    Incumbent,
    NodeBudget,
    SearchConfig,
    SearchResult,
    log_search_caps,
)

logger = logging.getLogger(__name__)


def _search_subtree(
    first_spell: int,
    initial_state: CombatState,
    hard_mode: bool,
    catalog: SpellCatalog,
    config: SearchConfig,
    incumbent: Incumbent,
    budget: NodeBudget,
) -> SearchResult:
    search = CheapestWinSearch(initial_state, hard_mode, catalog, config, incumbent, budget)
    if not budget.take():
        return search.result()

    search.nodes += 1
    prefix = [first_spell]
    result = classify(initial_state, prefix, hard_mode, catalog)

    if result is GameResult.PLAYER_WINS:
        incumbent.offer(catalog.total_cost(prefix), prefix)
    elif result is GameResult.PENDING:
        if not search.bound.admits(catalog.total_cost(prefix), incumbent.cost):
            search.pruned += 1
        elif config.max_depth <= 1:
            search.depth_capped += 1
        else:
            return search.run(prefix)

    return search.result()


def find_cheapest_game_parallel(
    initial_state: CombatState,
    hard_mode: bool = False,
    catalog: SpellCatalog = DEFAULT_CATALOG,
    config: SearchConfig | None = None,
    workers: int = 4,
) -> SearchResult:
    """
    Same contract as find_cheapest_game, with one task per first spell.

    The reported cost always matches the sequential search when no cap
    is hit. When several sequences tie for cheapest, which one is
    reported may vary.
    """
    config = config or SearchConfig()
    incumbent = Incumbent()
    budget = NodeBudget(config.max_nodes)
    nodes = pruned = depth_capped = 0

    logger.info("Parallel search with %d worker(s), hard_mode=%s", workers, hard_mode)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(
                _search_subtree,
                spell_id, initial_state, hard_mode, catalog, config, incumbent, budget,
            ): spell_id
            for spell_id in catalog.ids()
        }
        for future in as_completed(futures):
            partial = future.result()
            nodes += partial.nodes
            pruned += partial.pruned
            depth_capped += partial.depth_capped

    result = SearchResult(
        cost=incumbent.cost,
        sequence=incumbent.sequence,
        nodes=nodes,
        pruned=pruned,
        depth_capped=depth_capped,
        budget_exhausted=budget.exhausted,
    )
    log_search_caps(result, config)
    return result
