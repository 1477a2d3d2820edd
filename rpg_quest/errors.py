"""Adventure engine errors.

Chat Service failures are not here; they are ChatServiceError in
rpg_quest.llm and pass through the engine unchanged.
"""

from __future__ import annotations


class AdventureError(Exception):
    """Base class for errors raised by the adventure engine."""


class InvalidIndexError(AdventureError, IndexError):
    """A caller-supplied dice roll falls outside its content pool."""

    def __init__(self, pool: str, index: int, size: int) -> None:
        super().__init__(f"{pool} roll {index} is out of range [0, {size})")
        self.pool = pool
        self.index = index
        self.size = size


class UnreachableCombatStateError(AdventureError):
    """No Chapter Two branch applies to the rolled encounter.

    Strength tied the enemy, speed did not beat the enemy's speed, and magic
    did not beat the enemy's strength.
    """

    def __init__(
        self,
        enemy_strength: int,
        enemy_speed: int,
        strength: int,
        speed: int,
        magic: int,
    ) -> None:
        super().__init__(
            "no combat branch applies: "
            f"strength {strength} vs {enemy_strength}, "
            f"speed {speed} vs {enemy_speed}, "
            f"magic {magic} vs {enemy_strength}"
        )
        self.enemy_strength = enemy_strength
        self.enemy_speed = enemy_speed
        self.strength = strength
        self.speed = speed
        self.magic = magic
