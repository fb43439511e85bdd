"""
Loader - Reads boss stats from the plain-text puzzle input.

Expected format, first two non-blank lines:

    Hit Points: 58
    Damage: 9
"""

from __future__ import annotations
from pathlib import Path

from .engine_core.state import BossState


class InputParseError(ValueError):
    """Raised when boss stats cannot be parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


_EXPECTED_KEYS = ("hit points", "damage")


def parse_boss(text: str) -> BossState:
    """Parse 'Hit Points: N' and 'Damage: N' into a BossState."""
    lines = [(n, line.strip()) for n, line in enumerate(text.splitlines(), start=1)]
    lines = [(n, line) for n, line in lines if line]
    if len(lines) < len(_EXPECTED_KEYS):
        raise InputParseError(
            f"expected {len(_EXPECTED_KEYS)} lines of boss stats, got {len(lines)}"
        )

    values = []
    for expected, (line_number, line) in zip(_EXPECTED_KEYS, lines):
        key, sep, raw_value = line.partition(":")
        if not sep:
            raise InputParseError(f"missing ':' in {line!r}", line_number)
        if key.strip().lower() != expected:
            raise InputParseError(
                f"expected key '{expected.title()}', got {key.strip()!r}", line_number
            )
        try:
            values.append(int(raw_value.strip()))
        except ValueError:
            raise InputParseError(f"not an integer: {raw_value.strip()!r}", line_number)

    hit_points, damage = values
    return BossState(hit_points=hit_points, damage=damage)


def load_boss(path: str | Path) -> BossState:
    """Read and parse a boss stats file."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_boss(text)
