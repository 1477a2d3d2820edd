"""Encounter rules for Chapter Two (combat) and Chapter Three (climax).

Everything here is a pure function of the player's stats and the rolled enemy
levels. The engine rolls, calls these, then builds prompts from the branch.

Chapter Two compares strength first, as two strict checks. Speed and magic
only come into play when strength exactly ties the enemy's strength level:

    strength > enemy_strength                    → strength_victory
    strength < enemy_strength                    → costly_defeat (-4 HP shown)
    tie, speed > enemy_speed                     → speed_escape
    tie, magic > enemy_strength                  → magic_victory
    tie, neither                                 → UnreachableCombatStateError

Chapter Three has no rolls:

    luck >= 7      → lucky_triumph
    magic > 6      → magic_resolution
    otherwise      → leader_struggle
"""

from __future__ import annotations

import random
from enum import Enum

from pydantic import BaseModel

from rpg_quest.errors import UnreachableCombatStateError
from rpg_quest.models import PlayerStats

ENEMY_LEVEL_SIDES = 4
DEFEAT_HEALTH_PENALTY = 4
LUCKY_LUCK = 7
CLIMAX_MAGIC = 6


class CombatBranch(str, Enum):
    STRENGTH_VICTORY = "strength_victory"
    COSTLY_DEFEAT = "costly_defeat"
    SPEED_ESCAPE = "speed_escape"
    MAGIC_VICTORY = "magic_victory"


class ClimaxBranch(str, Enum):
    LUCKY_TRIUMPH = "lucky_triumph"
    MAGIC_RESOLUTION = "magic_resolution"
    LEADER_STRUGGLE = "leader_struggle"


class EncounterResult(BaseModel):
    branch: CombatBranch
    enemy_strength: int
    enemy_speed: int
    reported_health: int


def roll_enemy_levels(rng: random.Random) -> tuple[int, int]:
    """Roll (strength, speed) for one encounter, each uniform in [0, 4)."""
    strength = rng.randrange(ENEMY_LEVEL_SIDES)
    speed = rng.randrange(ENEMY_LEVEL_SIDES)
    return strength, speed


def resolve_encounter(
    player: PlayerStats, enemy_strength: int, enemy_speed: int
) -> EncounterResult:
    """Pick the Chapter Two branch for the given enemy levels.

    The returned health is what the player is shown; the caller's PlayerStats
    are left untouched.
    """
    health = player.health

    if player.strength > enemy_strength:
        branch = CombatBranch.STRENGTH_VICTORY
    elif player.strength < enemy_strength:
        branch = CombatBranch.COSTLY_DEFEAT
        health -= DEFEAT_HEALTH_PENALTY
    elif player.speed > enemy_speed:
        branch = CombatBranch.SPEED_ESCAPE
    elif player.magic > enemy_strength:
        branch = CombatBranch.MAGIC_VICTORY
    else:
        raise UnreachableCombatStateError(
            enemy_strength=enemy_strength,
            enemy_speed=enemy_speed,
            strength=player.strength,
            speed=player.speed,
            magic=player.magic,
        )

    return EncounterResult(
        branch=branch,
        enemy_strength=enemy_strength,
        enemy_speed=enemy_speed,
        reported_health=health,
    )


def resolve_climax(player: PlayerStats) -> ClimaxBranch:
    if player.luck >= LUCKY_LUCK:
        return ClimaxBranch.LUCKY_TRIUMPH
    if player.magic > CLIMAX_MAGIC:
        return ClimaxBranch.MAGIC_RESOLUTION
    return ClimaxBranch.LEADER_STRUGGLE
