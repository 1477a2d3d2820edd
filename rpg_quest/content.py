"""Content tables: the fixed vocabulary an adventure is assembled from.

Pools are plain tuples so nothing can mutate them at runtime. Selection goes
through two helpers:

    pick(pool_name, index)  caller-supplied dice roll, validated, never clamped
    draw(pool, rng)         uniform draw from an injected random source
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from rpg_quest.errors import InvalidIndexError

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Story pillars, chosen by dice roll
# ---------------------------------------------------------------------------

LOCATIONS: tuple[str, ...] = (
    "Castle",
    "Forest",
    "Desert",
    "Swamp",
    "Rainy Dungeon",
    "Grassy Village",
    "Mountain",
    "Volcano",
    "Ice Kingdom",
    "Jungle",
)

ENEMIES: tuple[str, ...] = (
    "Goblin Army",
    "Evil Elves",
    "Savage Wizards",
    "Barbarians",
    "Undead Knights",
    "Ghost Mercenaries",
    "Lava Lizards with swords",
    "Fire Dragon",
    "Corrupt Politicians",
)

OBJECTIVES: tuple[str, ...] = (
    "Save the princess",
    "Find the keys to the hidden kingdom",
    "Defeat the emperor",
    "find who killed your father",
    "solve the puzzle of the time treasure",
    "Heal the ancient tree",
    "uncover the corruption in the city",
    "help the rebels free their people",
    "Vanquish the wizard",
    "Destroy the magic orb",
)


# ---------------------------------------------------------------------------
# Story detail, drawn at random
# ---------------------------------------------------------------------------

ENEMY_LEADERS: tuple[str, ...] = (
    "Council of Elves",
    "Immortal Wizard",
    "Tribal Cheiftan",
    "The forgotten King",
    "The Dragon shapeshifter",
    "Prideful General",
    "The Mad King",
    "High Priests",
    "Ancient Pirate King",
)

ENEMY_MOTIVATIONS: tuple[str, ...] = (
    "Environmentalism: The enemy is an environmental extremist who believes that humans "
    "are destroying the planet and seeks to stop them at any cost.",
    "Religious fundamentalism: The enemy is mysteriously motivated by religious "
    "fundamentalism and seeks to establish a theocratic state based on their particular religion.",
    "Capitalism: The enemy is a greedy capitalist who believes that profit and economic growth "
    "are the most important goals, even if it means exploiting others and damaging the environment.",
    "Neo-colonialism: The enemy is a representative of a powerful foreign kingdom that seeks "
    "to exploit or dominate the world for their own benefit.",
    "Madness: The enemy is driven insane by dark magic, a curse, or a traumatic event, "
    "causing them to lash out against others.",
    "Redemption: The enemy seeks redemption for past misdeeds, but believes that the only "
    "way to achieve it is by committing a great act of evil.",
    "Survival: The enemy believes they are justified and is simply trying to survive in a "
    "dangerous world and views the players as a threat to their own existence.",
    "Honor: The enemy is fiercely motivated by a sense of honor or duty, and believes that "
    "their actions are justified by a higher moral code.",
    "Independence: The enemy is fighting for independence and autonomy from a larger, more "
    "powerful state or kingdom, motivated by a desire for self-determination and sovereignty.",
    "Love: The enemy believes they are the hero and is motivated by love for another person, "
    "whether it be a romantic partner, family member, or friend, and will do anything to protect them.",
)

FIGHT_VERBS: tuple[str, ...] = (
    "Attack", "Strike", "Assault", "Charge", "Pummel",
    "Smash", "Thrash", "Beat", "Conquer", "Vanquish",
)

DODGE_VERBS: tuple[str, ...] = (
    "Duck", "Dodge", "Evade", "Escape", "Flee",
    "Jump", "Roll", "Sprint", "Tumble", "Weave",
)

COMBAT_ADVERBS: tuple[str, ...] = (
    "Ferociously", "Savagely", "Brutally", "Viciously", "Relentlessly",
    "Mercilessly", "Fiercely", "Wildly", "Intensely", "Violently",
)

DODGE_ADVERBS: tuple[str, ...] = (
    "Swiftly", "Gracefully", "Effortlessly", "Nimbly", "Quickly",
    "Evasively", "Skillfully", "Agilely", "Dexterously", "Acrobatically",
)

ENEMY_ADJECTIVES: tuple[str, ...] = (
    "Fierce", "Savage", "Mysterious", "Brutal", "Hateful",
    "Cruel", "Malignant", "Wicked", "Cunning", "Diabolical",
)

MAGIC_ADVERBS: tuple[str, ...] = (
    "Mystically", "Enchantingly", "Eerily", "Magically", "Spellbindingly",
    "Charmingly", "Spiritedly", "Ethereally", "Supernaturally", "Enigmatically",
)

MAGIC_SPELLS: tuple[str, ...] = (
    "Fireball", "Ice Lance", "Thunderbolt", "Frost Nova", "Arcane Missile",
    "Shadow Bolt", "Divine Light", "Nature's Wrath", "Gravity Well", "Time Warp",
)

# Pool names used in error messages.
POOLS: dict[str, tuple[str, ...]] = {
    "location": LOCATIONS,
    "enemy": ENEMIES,
    "objective": OBJECTIVES,
    "enemy_leader": ENEMY_LEADERS,
    "enemy_motivation": ENEMY_MOTIVATIONS,
    "fight_verb": FIGHT_VERBS,
    "dodge_verb": DODGE_VERBS,
    "combat_adverb": COMBAT_ADVERBS,
    "dodge_adverb": DODGE_ADVERBS,
    "enemy_adjective": ENEMY_ADJECTIVES,
    "magic_adverb": MAGIC_ADVERBS,
    "magic_spell": MAGIC_SPELLS,
}


# ---------------------------------------------------------------------------
# Canonical kinds, reserved for structured selection
# ---------------------------------------------------------------------------

class EnemyKind(Enum):
    GOBLIN_ARMY = "Goblin Army"
    EVIL_ELVES = "Evil Elves"
    MAGIC_MUSHROOM_PEOPLE = "Magic Mushroom People"
    SWAMP_MONSTERS = "Swamp Monsters"
    DRAGONS = "Dragons"
    GIANT_TROLLS = "Giant Trolls"
    MAGIC_BIRDS = "Magic Birds"
    LAVA_LIZARDS_WITH_SWORDS = "Lava Lizards with swords"
    ORC = "Orc"
    KNIGHTS = "Knights"

    @property
    def label(self) -> str:
        return self.value


class ObjectiveKind(Enum):
    SAVE_THE_PRINCESS = "Save the princess"
    AVENGE_YOUR_FATHER = "Avenge your father"
    DESTROY_THE_MAGIC_ORB = "Destroy the magic orb"
    FIND_THE_ANCIENT_TREASURE = "Find the ancient treasure"
    THE_SACRED_SWORD = "The sacred sword"
    HEAL_THE_ANCIENT_TREE = "Heal the ancient tree"
    DEFEAT_THE_EMPEROR = "Defeat the emperor"
    DELIVER_THE_CHOSEN_ONE_TO_SAFETY = "Deliver the chosen one to safety"
    FIND_THE_KEYS_TO_THE_HIDDEN_KINGDOM = "Find the keys to the hidden kingdom"
    SLAY_THE_DRAGON = "Slay the dragon"

    @property
    def label(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def pick(pool_name: str, index: int) -> str:
    """Return the entry at `index` in the named pool.

    Out-of-range indices raise InvalidIndexError; they are never clamped or
    wrapped.
    """
    pool = POOLS[pool_name]
    if not 0 <= index < len(pool):
        raise InvalidIndexError(pool_name, index, len(pool))
    return pool[index]


def draw(pool: Sequence[T], rng: random.Random) -> T:
    """Uniform draw from `pool` using the injected random source."""
    return pool[rng.randrange(len(pool))]
