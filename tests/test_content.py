"""Tests for rpg_quest.content: pools, kinds and selection."""

import random

import pytest

from rpg_quest.content import (
    ENEMIES,
    ENEMY_LEADERS,
    LOCATIONS,
    OBJECTIVES,
    POOLS,
    EnemyKind,
    ObjectiveKind,
    draw,
    pick,
)
from rpg_quest.errors import AdventureError, InvalidIndexError


class TestPools:
    def test_pool_sizes(self) -> None:
        assert len(LOCATIONS) == 10
        assert len(ENEMIES) == 9
        assert len(OBJECTIVES) == 10
        assert len(ENEMY_LEADERS) == 9

    def test_every_pool_has_five_to_ten_entries(self) -> None:
        for name, pool in POOLS.items():
            assert 5 <= len(pool) <= 10, name

    def test_no_blank_entries(self) -> None:
        for name, pool in POOLS.items():
            assert all(entry.strip() for entry in pool), name


class TestKinds:
    def test_ten_of_each(self) -> None:
        assert len(EnemyKind) == 10
        assert len(ObjectiveKind) == 10

    def test_labels(self) -> None:
        assert EnemyKind.LAVA_LIZARDS_WITH_SWORDS.label == "Lava Lizards with swords"
        assert ObjectiveKind.SLAY_THE_DRAGON.label == "Slay the dragon"


class TestPick:
    def test_returns_entry_at_index(self) -> None:
        assert pick("location", 0) == "Castle"
        assert pick("location", 9) == "Jungle"
        assert pick("enemy", 8) == "Corrupt Politicians"

    @pytest.mark.parametrize("index", [-1, 9, 100])
    def test_out_of_range_not_clamped(self, index: int) -> None:
        with pytest.raises(InvalidIndexError) as exc:
            pick("enemy", index)
        assert exc.value.pool == "enemy"
        assert exc.value.size == 9

    def test_error_is_index_and_adventure_error(self) -> None:
        with pytest.raises(IndexError):
            pick("objective", 10)
        with pytest.raises(AdventureError):
            pick("objective", 10)


class TestDraw:
    def test_uses_injected_source(self) -> None:
        class Fixed:
            def randrange(self, stop: int) -> int:
                return stop - 1

        assert draw(ENEMY_LEADERS, Fixed()) == "Ancient Pirate King"

    def test_covers_whole_pool(self) -> None:
        rng = random.Random(7)
        seen = {draw(LOCATIONS, rng) for _ in range(500)}
        assert seen == set(LOCATIONS)
