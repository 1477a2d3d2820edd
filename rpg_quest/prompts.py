"""Handlebars prompt rendering for the three chapters.

Every chapter's prompt is a short list of (role, template) pairs rendered
against a context built from the adventure state and the player. Values are
inserted with triple-stash so names like "Nature's Wrath" are not HTML-escaped.
"""

from collections.abc import Callable
from typing import Any

import pybars

from rpg_quest.combat import ClimaxBranch, CombatBranch
from rpg_quest.models import AdventureState, ChatMessage, PlayerStats, Role


_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class PromptError(Exception):
    """Raised when a Handlebars template fails to compile or render."""


def render_prompt(template_str: str, context: dict[str, Any]) -> str:
    """Compile and render a Handlebars template with the given context.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return compiled(context)
    except Exception as e:
        raise PromptError(f"Template error: {e}") from e


def build_context(
    state: AdventureState,
    player: PlayerStats,
    enemy_leader: str | None = None,
) -> dict[str, Any]:
    """Assemble template variables from the adventure state and player."""
    ctx: dict[str, Any] = {
        "setting": state.setting,
        "enemy": state.enemy,
        "goal": state.goal,
        "motivation": state.enemy_motivation,
        "descriptor": state.combat_descriptor,
        "player": {
            "name": player.name,
            "health": player.health,
            "strength": player.strength,
            "speed": player.speed,
            "magic": player.magic,
            "luck": player.luck,
        },
    }
    if enemy_leader is not None:
        ctx["leader"] = enemy_leader
    return ctx


# ── Chapter One: setting the scene ───────────────────────

CHAPTER_ONE: list[tuple[Role, str]] = [
    ("system",
     "Generate an adventure for an RPG game. "
     "Create a story based on user input such as location, enemy, and objective. "
     "If the user tells you a location, an enemy and their motive "
     "({{{motivation}}}), you create the setting for the story based on that input. "
     "Limit 1 paragraph."),
    ("user", "location: {{{setting}}}"),
    ("user", "Enemy: {{{enemy}}}"),
    ("user", "Objective: {{{goal}}}"),
]

# Later chapters start a fresh conversation, so they restate the premise.
CONTINUATION_SYSTEM = (
    "You are continuing an RPG adventure. "
    "{{#if setting}}The story takes place in the {{{setting}}}. {{/if}}"
    "{{#if enemy}}The enemy is the {{{enemy}}}. {{/if}}"
    "{{#if goal}}The hero's objective: {{{goal}}}. {{/if}}"
    "The hero is {{{player.name}}}."
)


# ── Chapter Two: the encounter ───────────────────────────

CHAPTER_TWO_OPENING = (
    "The enemy objective is described more: {{{motivation}}} ...one sentence"
)

CHAPTER_TWO: dict[CombatBranch, list[str]] = {
    CombatBranch.STRENGTH_VICTORY: [
        "Characters encounter and must fight the enemy, "
        "they battle in the {{{setting}}} but the battle is {{{descriptor}}}.",
        "{{{player.name}}} has decided because of their motive to fight the {{{enemy}}} "
        "for the sake of their objective: {{{goal}}}. "
        "Continue the story, the player battles in the {{{setting}}} to defeat "
        "the {{{enemy}}} ...four sentences",
    ],
    CombatBranch.COSTLY_DEFEAT: [
        "The character has taken heavy damage in their battle against the {{{enemy}}}, "
        "a battle in which {{{player.name}}} must use their strength to defeat the {{{enemy}}}. "
        "The {{{enemy}}} has been strong, and the character has been injured ...four sentences",
    ],
    CombatBranch.SPEED_ESCAPE: [
        "Continue the story. Characters struggle to fight the {{{enemy}}}, "
        "they use their skills but the {{{enemy}}} proves to be a real challenge... but wait! "
        "Luckily, they use their speed to evade the enemy, they navigate the {{{setting}}} "
        "and get away! Speed has helped the character escape the evil {{{enemy}}}, "
        "the journey continues ...four sentences",
    ],
    CombatBranch.MAGIC_VICTORY: [
        "Continue the story. Characters encounter and must fight the {{{enemy}}}, "
        "they battle in the {{{setting}}} but the battle is {{{descriptor}}}, "
        "the character uses their magic to fight and win ...four sentences",
    ],
}


# ── Chapter Three: the climax ────────────────────────────

CHAPTER_THREE: dict[ClimaxBranch, list[str]] = {
    ClimaxBranch.LUCKY_TRIUMPH: [
        "They survive an attack against the {{{enemy}}} in the {{{setting}}}, "
        "where the player finds a lucky weapon. "
        "{{{player.name}}} miraculously achieves the objective ({{{goal}}}), with the help "
        "of a legendary warrior who happened to be in the {{{setting}}} ...one paragraph",
    ],
    ClimaxBranch.MAGIC_RESOLUTION: [
        "Continue the story. Characters feel emotion about the enemy's motive "
        "({{{motivation}}}), they navigate the {{{setting}}} and use their magic "
        "{{{descriptor}}}, the character uses their magic to fight and win ...four sentences",
    ],
    ClimaxBranch.LEADER_STRUGGLE: [
        "Continue the story from where it left off, the player continues to battle "
        "more of the enemy. The player has a strong emotional reaction to the enemy's "
        "motive ({{{motivation}}}). The player encounters the leader: {{{leader}}} "
        "...one paragraph",
    ],
}


def _render_all(pairs: list[tuple[Role, str]], ctx: dict[str, Any]) -> list[ChatMessage]:
    return [ChatMessage(role=role, content=render_prompt(tpl, ctx)) for role, tpl in pairs]


def chapter_one_messages(ctx: dict[str, Any]) -> list[ChatMessage]:
    return _render_all(CHAPTER_ONE, ctx)


def chapter_two_messages(branch: CombatBranch, ctx: dict[str, Any]) -> list[ChatMessage]:
    pairs: list[tuple[Role, str]] = [
        ("system", CONTINUATION_SYSTEM),
        ("user", CHAPTER_TWO_OPENING),
    ]
    pairs.extend(("user", tpl) for tpl in CHAPTER_TWO[branch])
    return _render_all(pairs, ctx)


def chapter_three_messages(branch: ClimaxBranch, ctx: dict[str, Any]) -> list[ChatMessage]:
    pairs: list[tuple[Role, str]] = [("system", CONTINUATION_SYSTEM)]
    pairs.extend(("user", tpl) for tpl in CHAPTER_THREE[branch])
    return _render_all(pairs, ctx)
