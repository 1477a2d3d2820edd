"""Tests for rpg_quest.models."""

import pytest
from pydantic import ValidationError

from rpg_quest.models import AdventureState, ChapterOutcome, ChatMessage, PlayerStats, Stage


class TestChatMessage:
    def test_all_valid_roles_accepted(self) -> None:
        for role in ["system", "user", "assistant"]:
            m = ChatMessage(role=role, content="x")
            assert m.role == role

    def test_invalid_role_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChatMessage(role="narrator", content="x")

    def test_dump_is_wire_shape(self) -> None:
        m = ChatMessage(role="user", content="location: Castle")
        assert m.model_dump() == {"role": "user", "content": "location: Castle"}


class TestPlayerStats:
    def test_required_fields(self) -> None:
        p = PlayerStats(name="Aldric", health=20, strength=3, speed=2, magic=1, luck=5)
        assert p.name == "Aldric"
        assert p.health == 20
        assert p.luck == 5

    def test_luck_defaults_to_zero(self) -> None:
        p = PlayerStats(name="X", health=1, strength=1, speed=1, magic=1)
        assert p.luck == 0

    def test_missing_strength_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PlayerStats(name="X", health=1, speed=1, magic=1)


class TestAdventureState:
    def test_starts_empty(self) -> None:
        s = AdventureState()
        assert s.setting == ""
        assert s.enemy == ""
        assert s.goal == ""
        assert not s.chapter_one_complete
        assert not s.chapter_two_complete
        assert not s.chapter_three_complete
        assert s.stage == Stage.NOT_STARTED

    @pytest.mark.parametrize("flags,stage", [
        ({"chapter_one_complete": True}, Stage.CHAPTER_ONE),
        ({"chapter_one_complete": True, "chapter_two_complete": True}, Stage.CHAPTER_TWO),
        (
            {"chapter_one_complete": True, "chapter_two_complete": True,
             "chapter_three_complete": True},
            Stage.CHAPTER_THREE,
        ),
    ])
    def test_stage_follows_flags(self, flags: dict, stage: Stage) -> None:
        assert AdventureState(**flags).stage == stage

    def test_copy_with_update_leaves_original(self) -> None:
        s = AdventureState()
        updated = s.model_copy(update={"chapter_one_complete": True})
        assert updated.chapter_one_complete
        assert not s.chapter_one_complete


class TestChapterOutcome:
    def test_leader_defaults_to_none(self) -> None:
        o = ChapterOutcome(chapter=2, branch="strength_victory", text="x", reported_health=20)
        assert o.enemy_leader is None
