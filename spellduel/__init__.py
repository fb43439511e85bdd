"""
Spellduel - Wizard vs. Boss Combat Solver

A deterministic, turn-based combat simulator with timed status effects.
The package provides:
- Spell and effect catalogs
- Round-by-round combat resolution (normal and hard mode)
- Replay and classification of spell sequences
- Branch-and-bound search for the cheapest winning sequence
"""

__version__ = "0.1.0"
