"""
Combat State - Snapshot of both combatants at a point in time.

Design principles:
- Value semantics: all mutations return new state
- No shared references between snapshots, so search branches never
  interfere with each other
- Only the player carries timed effects
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .effects import EffectKind, duration


DEFAULT_PLAYER_HIT_POINTS = 50
DEFAULT_PLAYER_MANA = 500


@dataclass(frozen=True)
class ActiveEffects:
    """
    Timed effects currently running, with remaining half-turns.

    Invariant: every counter is positive and NONE is never a key.
    """
    timers: dict[EffectKind, int] = field(default_factory=dict)

    def is_active(self, kind: EffectKind) -> bool:
        return self.timers.get(kind, 0) > 0

    def remaining(self, kind: EffectKind) -> int:
        return self.timers.get(kind, 0)

    def is_castable(self, kind: EffectKind) -> bool:
        """
        Check whether a spell starting this effect may be cast.

        Allowed when the effect is not running, or has exactly one
        half-turn left (it expires on the tick before the cast lands).
        """
        left = self.timers.get(kind)
        return left is None or left == 1

    def add_effect(self, kind: EffectKind) -> ActiveEffects:
        """Return new effects with kind started at its full duration."""
        if kind is EffectKind.NONE:
            return self
        assert kind not in self.timers, f"{kind.value} is already active"
        new_timers = self.timers.copy()
        new_timers[kind] = duration(kind)
        return ActiveEffects(timers=new_timers)

    def tick(self) -> ActiveEffects:
        """Return new effects one half-turn later, expired ones dropped."""
        return ActiveEffects(
            timers={kind: left - 1 for kind, left in self.timers.items() if left > 1}
        )

    def __len__(self) -> int:
        return len(self.timers)

    def __hash__(self) -> int:
        return hash(frozenset(self.timers.items()))


@dataclass(frozen=True)
class PlayerState:
    """The wizard. Hit points and mana may go negative transiently."""
    hit_points: int = DEFAULT_PLAYER_HIT_POINTS
    mana: int = DEFAULT_PLAYER_MANA
    active_effects: ActiveEffects = field(default_factory=ActiveEffects)

    def _copy_with(self, **kwargs) -> PlayerState:
        return PlayerState(
            hit_points=kwargs.get("hit_points", self.hit_points),
            mana=kwargs.get("mana", self.mana),
            active_effects=kwargs.get("active_effects", self.active_effects),
        )

    def with_hit_points(self, hit_points: int) -> PlayerState:
        return self._copy_with(hit_points=hit_points)

    def with_mana(self, mana: int) -> PlayerState:
        return self._copy_with(mana=mana)

    def with_effects(self, active_effects: ActiveEffects) -> PlayerState:
        return self._copy_with(active_effects=active_effects)


@dataclass(frozen=True)
class BossState:
    """The adversary. Hits once per round for a fixed amount."""
    hit_points: int
    damage: int

    def with_hit_points(self, hit_points: int) -> BossState:
        return BossState(hit_points=hit_points, damage=self.damage)


@dataclass(frozen=True)
class CombatState:
    """
    Complete combat state at a point in time.

    Created fresh for every replay and discarded after classification.
    """
    player: PlayerState
    boss: BossState

    @classmethod
    def create(
        cls,
        boss_hit_points: int,
        boss_damage: int,
        player_hit_points: int = DEFAULT_PLAYER_HIT_POINTS,
        player_mana: int = DEFAULT_PLAYER_MANA,
    ) -> CombatState:
        """Factory for a fresh fight with no effects running."""
        return cls(
            player=PlayerState(hit_points=player_hit_points, mana=player_mana),
            boss=BossState(hit_points=boss_hit_points, damage=boss_damage),
        )

    @property
    def player_defeated(self) -> bool:
        return self.player.hit_points <= 0

    @property
    def boss_defeated(self) -> bool:
        return self.boss.hit_points <= 0

    def with_player(self, player: PlayerState) -> CombatState:
        return CombatState(player=player, boss=self.boss)

    def with_boss(self, boss: BossState) -> CombatState:
        return CombatState(player=self.player, boss=boss)
