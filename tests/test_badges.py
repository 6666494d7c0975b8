"""Property-based tests for badge evaluation and awarding.

**Feature: micro-diary**
"""

import tempfile
import threading
from datetime import datetime
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from microdiary.db.store import DataStore
from microdiary.engine.badges import (
    BADGE_CATALOG,
    award_badges,
    evaluate_badges,
    get_badge_definition,
    qualifying_badges,
)
from microdiary.models import Badge

ALL_TYPES = [definition.type for definition in BADGE_CATALOG]
NOW = datetime(2024, 3, 1, 21, 30)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "test.db"
        yield DataStore(db_path)


class TestBadgeCatalog:
    def test_catalog_thresholds(self):
        thresholds = {d.type: (d.metric, d.threshold) for d in BADGE_CATALOG}

        assert thresholds == {
            "7days": ("streak", 7),
            "30days": ("streak", 30),
            "100days": ("streak", 100),
            "total50": ("total", 50),
            "total100": ("total", 100),
            "total365": ("total", 365),
        }

    def test_lookup(self):
        assert get_badge_definition("30days").threshold == 30

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown badge type"):
            get_badge_definition("1000days")


class TestBadgeEvaluation:
    """
    **Feature: micro-diary, Property 7: Badge Award Set**

    *For any* streak, total and earned set, the evaluator awards exactly
    the qualifying types minus the earned ones.
    """

    def test_streak_35_total_10(self):
        assert evaluate_badges(35, 10, []) == ["7days", "30days"]

    def test_nothing_qualifies(self):
        assert evaluate_badges(6, 49, []) == []

    def test_boundaries_inclusive(self):
        assert evaluate_badges(100, 365, []) == ALL_TYPES

    @given(
        streak=st.integers(min_value=0, max_value=500),
        total=st.integers(min_value=0, max_value=500),
        earned=st.sets(st.sampled_from(ALL_TYPES)),
    )
    @settings(max_examples=200)
    def test_qualifying_minus_earned(self, streak: int, total: int, earned: set):
        result = evaluate_badges(streak, total, earned)

        expected = {
            d.type for d in BADGE_CATALOG
            if (streak if d.metric == "streak" else total) >= d.threshold
        } - earned
        assert set(result) == expected
        assert len(result) == len(set(result))

    @given(
        streak=st.integers(min_value=0, max_value=500),
        total=st.integers(min_value=0, max_value=500),
    )
    @settings(max_examples=100)
    def test_idempotent(self, streak: int, total: int):
        first = evaluate_badges(streak, total, [])
        second = evaluate_badges(streak, total, first)

        assert second == []
        assert first == qualifying_badges(streak, total)


class TestBadgeAwarding:
    """
    **Feature: micro-diary, Property 8: Idempotent Badge Awarding**

    *For any* repeated award with the same inputs, no badge type is
    ever stored twice.
    """

    def test_award_once(self, temp_db: DataStore):
        awarded = award_badges(temp_db, streak=35, total=10, now=NOW)

        assert [b.type for b in awarded] == ["7days", "30days"]
        assert all(b.earned_at == NOW for b in awarded)

        again = award_badges(temp_db, streak=35, total=10, now=NOW)
        assert again == []
        assert len(temp_db.query_badges()) == 2

    def test_award_only_new(self, temp_db: DataStore):
        award_badges(temp_db, streak=7, total=0, now=NOW)
        awarded = award_badges(temp_db, streak=30, total=50, now=NOW)

        assert sorted(b.type for b in awarded) == ["30days", "total50"]

    def test_earned_badges_survive_streak_loss(self, temp_db: DataStore):
        award_badges(temp_db, streak=7, total=7, now=NOW)
        award_badges(temp_db, streak=0, total=7, now=NOW)

        assert [b.type for b in temp_db.query_badges()] == ["7days"]

    @given(
        rounds=st.lists(
            st.tuples(
                st.integers(min_value=0, max_value=150),
                st.integers(min_value=0, max_value=400),
            ),
            min_size=1,
            max_size=5,
        )
    )
    @settings(max_examples=25, deadline=None)
    def test_no_duplicates_over_rounds(self, rounds: list[tuple[int, int]]):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = DataStore(Path(tmpdir) / "test.db")

            for streak, total in rounds:
                award_badges(store, streak, total, NOW)

            types = [b.type for b in store.query_badges()]
            assert len(types) == len(set(types))

    def test_concurrent_creates_store_one(self, temp_db: DataStore):
        results = []
        lock = threading.Lock()

        def create():
            created = temp_db.create_badge(Badge(type="7days", earned_at=NOW))
            with lock:
                results.append(created)

        threads = [threading.Thread(target=create) for _ in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count(True) == 1
        assert len(temp_db.query_badges()) == 1
