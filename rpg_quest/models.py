"""Core domain models.

The engine and the Chat Service exchange these types. Pydantic is used for
validation at every boundary the caller touches.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel

Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """One role-tagged entry in a prompt sent to the Chat Service."""

    role: Role
    content: str


class PlayerStats(BaseModel):
    """A player character. Owned by the caller; the engine only reads it."""

    name: str
    health: int
    strength: int
    speed: int
    magic: int
    luck: int = 0  # consulted only in Chapter Three


class Stage(str, Enum):
    NOT_STARTED = "not_started"
    CHAPTER_ONE = "chapter_one"
    CHAPTER_TWO = "chapter_two"
    CHAPTER_THREE = "chapter_three"


class AdventureState(BaseModel):
    """Narrative state for one adventure. Held by a single engine instance."""

    setting: str = ""
    enemy: str = ""
    goal: str = ""
    enemy_motivation: str = ""
    combat_descriptor: str = ""
    chapter_one_complete: bool = False
    chapter_two_complete: bool = False
    chapter_three_complete: bool = False

    @property
    def stage(self) -> Stage:
        """The most recent chapter the adventure has resolved."""
        if self.chapter_three_complete:
            return Stage.CHAPTER_THREE
        if self.chapter_two_complete:
            return Stage.CHAPTER_TWO
        if self.chapter_one_complete:
            return Stage.CHAPTER_ONE
        return Stage.NOT_STARTED


class ChapterOutcome(BaseModel):
    """What the last successful generation call resolved to."""

    chapter: int
    branch: str
    text: str
    reported_health: int
    enemy_leader: str | None = None
