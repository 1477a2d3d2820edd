"""Adventure engine: the three-chapter state machine.

One engine drives one adventure for one player, one call at a time:

    engine = AdventureEngine(chat=HttpChatService.from_config(config))
    text = await engine.generate_adventure(player, location_roll=3, enemy_roll=1, objective_roll=7)
    text = await engine.generate_adventure(player, chapter_choice=2)   # combat
    text = await engine.generate_adventure(player, chapter_choice=3)   # climax

Each call is routed by the completion flags and the chapter choice:

    chapter_one_complete and choice == 2  → Chapter Two (combat)
    chapter_two_complete and choice == 3  → Chapter Three (climax)
    anything else                         → Chapter One (setting the scene)

Chapter methods take the state and player explicitly and return the outcome
together with an updated copy of the state. The engine only commits that copy
once the Chat Service has replied, so a failed call leaves the adventure
exactly as it was.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from rpg_quest import content, prompts
from rpg_quest.combat import (
    ClimaxBranch,
    CombatBranch,
    DEFEAT_HEALTH_PENALTY,
    resolve_climax,
    resolve_encounter,
    roll_enemy_levels,
)
from rpg_quest.llm import ChatService
from rpg_quest.models import AdventureState, ChapterOutcome, PlayerStats

logger = logging.getLogger(__name__)

TRANSITION_NOTICE = "on to chapter four..."

Narrator = Callable[[str], None]
Pillars = tuple[str, str, str]


class AdventureEngine:
    """Generates one adventure's narrative, chapter by chapter.

    Args:
        chat:    Chat Service used for every prose continuation.
        rng:     Random source for motivations, descriptors, enemy levels and
                 leaders. Defaults to a private random.Random().
        narrate: Optional sink for flavor lines (HP reports, chapter
                 transitions). Never part of the returned narrative,
                 and only emitted once the chapter's chat reply arrives.
    """

    def __init__(
        self,
        chat: ChatService,
        rng: random.Random | None = None,
        narrate: Narrator | None = None,
    ) -> None:
        self._chat = chat
        self._rng = rng if rng is not None else random.Random()
        self._narrate_sink = narrate
        self.state = AdventureState()
        self.last_outcome: ChapterOutcome | None = None

    async def generate_adventure(
        self,
        player: PlayerStats,
        location_roll: int | None = None,
        enemy_roll: int | None = None,
        objective_roll: int | None = None,
        chapter_choice: int | None = None,
    ) -> str:
        """Advance the adventure and return the generated narrative.

        Raises:
            InvalidIndexError: a supplied roll is outside its pool.
            UnreachableCombatStateError: Chapter Two has no branch for the roll.
            ChatServiceError: the Chat Service failed; state is unchanged.
        """
        pillars = _select_pillars(location_roll, enemy_roll, objective_roll)
        state = self.state

        if state.chapter_one_complete and chapter_choice == 2:
            outcome, updated = await self._chapter_two(state, player)
        elif state.chapter_two_complete and chapter_choice == 3:
            outcome, updated = await self._chapter_three(state, player)
        else:
            outcome, updated = await self._chapter_one(state, player, pillars)

        self.state = updated
        self.last_outcome = outcome
        logger.info(
            "chapter %d resolved branch=%s stage=%s",
            outcome.chapter, outcome.branch, updated.stage.value,
        )
        return outcome.text

    # ------------------------------------------------------------------
    # Chapter One: setting the scene
    # ------------------------------------------------------------------

    async def _chapter_one(
        self, state: AdventureState, player: PlayerStats, pillars: Pillars | None
    ) -> tuple[ChapterOutcome, AdventureState]:
        branch = "continue"
        updated = state
        if pillars is not None and not state.chapter_one_complete:
            setting, enemy, goal = pillars
            updated = state.model_copy(update={
                "setting": setting,
                "enemy": enemy,
                "goal": goal,
                "enemy_motivation": content.draw(content.ENEMY_MOTIVATIONS, self._rng),
                "combat_descriptor": content.draw(content.COMBAT_ADVERBS, self._rng),
                "chapter_one_complete": True,
            })
            branch = "setup"

        messages = prompts.chapter_one_messages(prompts.build_context(updated, player))
        text = await self._chat("chapter_one", messages)
        outcome = ChapterOutcome(
            chapter=1, branch=branch, text=text, reported_health=player.health,
        )
        return outcome, updated

    # ------------------------------------------------------------------
    # Chapter Two: combat
    # ------------------------------------------------------------------

    async def _chapter_two(
        self, state: AdventureState, player: PlayerStats
    ) -> tuple[ChapterOutcome, AdventureState]:
        enemy_strength, enemy_speed = roll_enemy_levels(self._rng)
        logger.debug(
            "chapter two rolls enemy_strength=%d enemy_speed=%d", enemy_strength, enemy_speed
        )
        encounter = resolve_encounter(player, enemy_strength, enemy_speed)

        # held back until the chat reply arrives
        lines = [
            "Chapter One complete...",
            f"An evil {state.enemy} approaches as the characters journey through "
            f"the {state.setting}... the characters fight!",
        ]
        if encounter.branch == CombatBranch.STRENGTH_VICTORY:
            lines += [
                f"You have HP: {encounter.reported_health} remaining",
                "Due to your strength... you may continue on your quest...",
            ]
        elif encounter.branch == CombatBranch.COSTLY_DEFEAT:
            lines += [
                f"Because the character has strength {player.strength}, "
                f"they were NOT able to defeat the {state.enemy}",
                f"You lost {DEFEAT_HEALTH_PENALTY} HP",
                f"You have HP: {encounter.reported_health} remaining",
                "You have almost died! But you survive and must march on...",
            ]

        ctx = prompts.build_context(state, player)
        messages = prompts.chapter_two_messages(encounter.branch, ctx)
        text = await self._chat("chapter_two", messages)
        self._narrate(*lines)

        outcome = ChapterOutcome(
            chapter=2,
            branch=encounter.branch.value,
            text=text,
            reported_health=encounter.reported_health,
        )
        return outcome, state.model_copy(update={"chapter_two_complete": True})

    # ------------------------------------------------------------------
    # Chapter Three: the climax
    # ------------------------------------------------------------------

    async def _chapter_three(
        self, state: AdventureState, player: PlayerStats
    ) -> tuple[ChapterOutcome, AdventureState]:
        branch = resolve_climax(player)
        leader = None
        if branch == ClimaxBranch.LEADER_STRUGGLE:
            leader = content.draw(content.ENEMY_LEADERS, self._rng)

        ctx = prompts.build_context(state, player, enemy_leader=leader)
        messages = prompts.chapter_three_messages(branch, ctx)
        text = await self._chat("chapter_three", messages)
        self._narrate("Chapter Two complete...")

        outcome = ChapterOutcome(
            chapter=3,
            branch=branch.value,
            text=f"{text}\n\n{TRANSITION_NOTICE}",
            reported_health=player.health,
            enemy_leader=leader,
        )
        return outcome, state.model_copy(update={"chapter_three_complete": True})

    def _narrate(self, *lines: str) -> None:
        for line in lines:
            logger.debug("narrate: %s", line)
            if self._narrate_sink is not None:
                self._narrate_sink(line)


def _select_pillars(
    location_roll: int | None, enemy_roll: int | None, objective_roll: int | None
) -> Pillars | None:
    """Validate every supplied roll; return the pillars only when all three are given."""
    picked = [
        content.pick(pool, roll) if roll is not None else None
        for pool, roll in (
            ("location", location_roll),
            ("enemy", enemy_roll),
            ("objective", objective_roll),
        )
    ]
    setting, enemy, goal = picked
    if setting is None or enemy is None or goal is None:
        return None
    return setting, enemy, goal
