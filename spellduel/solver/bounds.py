"""
Pruning Bounds - Decide whether a pending branch is worth descending.

A bound gets the mana already spent on the branch and the best winning
cost known so far. It must never reject a branch that could still lead
to a strictly cheaper win, otherwise the search loses the optimum.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..engine_core.action import SpellCatalog


class PruningBound(ABC):
    """Interface for lower-bound pruning strategies."""

    @abstractmethod
    def admits(self, spent: int, best: float) -> bool:
        """Return True if the branch should be explored further."""
        pass

    def get_name(self) -> str:
        return self.__class__.__name__


class CostCutoffBound(PruningBound):
    """
    Descend while the branch is still cheaper than the best win.

    Any continuation casts at least one more spell and no spell has a
    negative cost, so this alone never prunes an optimum.
    """

    def admits(self, spent: int, best: float) -> bool:
        return spent < best


@dataclass
class CheapestSpellBound(PruningBound):
    """
    Descend only if one more of the cheapest spell still beats the best.

    The next spell costs at least cheapest_cost, so spent + cheapest_cost
    is a sound lower estimate for any continuation.
    """
    cheapest_cost: int

    @classmethod
    def for_catalog(cls, catalog: SpellCatalog) -> CheapestSpellBound:
        return cls(cheapest_cost=catalog.cheapest_cost)

    def admits(self, spent: int, best: float) -> bool:
        return spent + self.cheapest_cost < best
