"""
Tests for the Supabase repository implementations.

The Supabase client is replaced with a MagicMock query builder, so these run
without a database. They check the query each repository builds and that
errors are logged and turned into the protocol's failure value.
"""
import pytest
from datetime import date
from unittest.mock import MagicMock

from infrastructure import (
    SupabaseExerciseLogRepository,
    SupabasePlanRepository,
    SupabaseUserProfileRepository,
)
from infrastructure.db.exercise_log_repository import MAX_LIMIT, best_completed_weight

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit


_BUILDER_METHODS = ("select", "eq", "gte", "lte", "order", "limit", "single", "insert", "update")


def make_client(data=None, error=None):
    """Supabase client whose query builder returns itself until execute()."""
    query = MagicMock()
    for name in _BUILDER_METHODS:
        getattr(query, name).return_value = query
    if error is not None:
        query.execute.side_effect = error
    else:
        query.execute.return_value = MagicMock(data=data)

    client = MagicMock()
    client.table.return_value = query
    return client, query


# ============================================================================
# SupabasePlanRepository
# ============================================================================


class TestSupabasePlanRepository:

    def test_get_scopes_to_user(self):
        client, query = make_client(data={"id": "w1", "user_id": "u1"})
        repo = SupabasePlanRepository(client)

        row = repo.get("w1", "u1")

        assert row == {"id": "w1", "user_id": "u1"}
        client.table.assert_called_with("workouts")
        query.eq.assert_any_call("id", "w1")
        query.eq.assert_any_call("user_id", "u1")

    def test_get_returns_none_on_error(self):
        client, _ = make_client(error=RuntimeError("no rows"))
        assert SupabasePlanRepository(client).get("w1", "u1") is None

    def test_list_between_uses_inclusive_dates(self):
        client, query = make_client(data=[{"id": "w1"}])
        repo = SupabasePlanRepository(client)

        rows = repo.list_between("u1", date(2024, 5, 13), date(2024, 5, 19))

        assert rows == [{"id": "w1"}]
        query.gte.assert_called_once_with("date", "2024-05-13")
        query.lte.assert_called_once_with("date", "2024-05-19")
        query.order.assert_called_once_with("date")

    def test_list_between_returns_empty_on_error(self):
        client, _ = make_client(error=RuntimeError("timeout"))
        assert SupabasePlanRepository(client).list_between("u1", date.today(), date.today()) == []

    def test_create_returns_inserted_row(self):
        client, query = make_client(data=[{"id": "new", "user_id": "u1"}])

        row = SupabasePlanRepository(client).create({"user_id": "u1", "title": "Leg Day"})

        assert row["id"] == "new"
        query.insert.assert_called_once_with({"user_id": "u1", "title": "Leg Day"})

    def test_create_logs_permission_hint(self, caplog):
        client, _ = make_client(error=RuntimeError("new row violates row-level security policy"))

        with caplog.at_level("ERROR"):
            row = SupabasePlanRepository(client).create({"user_id": "u1"})

        assert row is None
        assert "SUPABASE_SERVICE_ROLE_KEY" in caplog.text

    def test_mark_completed(self):
        client, query = make_client(data=[{"id": "w1", "completed": True}])

        assert SupabasePlanRepository(client).mark_completed("w1", "u1") is True
        query.update.assert_called_once_with({"completed": True})

    def test_mark_completed_no_matching_row(self):
        client, _ = make_client(data=[])
        assert SupabasePlanRepository(client).mark_completed("w1", "u1") is False

    def test_mark_completed_error(self):
        client, _ = make_client(error=RuntimeError("boom"))
        assert SupabasePlanRepository(client).mark_completed("w1", "u1") is False

    def test_update_exercises(self):
        exercises = [{"name": "Squats", "sets": 3}]
        client, query = make_client(data=[{"id": "w1", "exercises": exercises}])

        row = SupabasePlanRepository(client).update_exercises("w1", "u1", exercises)

        assert row["exercises"] == exercises
        query.update.assert_called_once_with({"exercises": exercises})

    def test_update_exercises_missing_plan(self):
        client, _ = make_client(data=[])
        assert SupabasePlanRepository(client).update_exercises("w1", "u1", []) is None


# ============================================================================
# SupabaseExerciseLogRepository
# ============================================================================


class TestSupabaseExerciseLogRepository:

    def test_bulk_insert_sends_one_request(self):
        rows = [{"user_id": "u1", "exercise_name": "Squats"}, {"user_id": "u1", "exercise_name": "Lunges"}]
        client, query = make_client(data=[{"id": "1"}, {"id": "2"}])

        inserted = SupabaseExerciseLogRepository(client).bulk_insert(rows)

        assert len(inserted) == 2
        client.table.assert_called_once_with("exercise_logs")
        query.insert.assert_called_once_with(rows)

    def test_bulk_insert_empty_skips_request(self):
        client, query = make_client(data=[])

        assert SupabaseExerciseLogRepository(client).bulk_insert([]) == []
        query.insert.assert_not_called()

    def test_bulk_insert_failure_returns_none(self):
        client, _ = make_client(error=RuntimeError("connection reset"))
        assert SupabaseExerciseLogRepository(client).bulk_insert([{"user_id": "u1"}]) is None

    def test_get_for_user_filters_and_orders(self):
        client, query = make_client(data=[{"id": "1"}])

        rows = SupabaseExerciseLogRepository(client).get_for_user("u1", exercise_name="Squats", limit=10)

        assert rows == [{"id": "1"}]
        query.eq.assert_any_call("exercise_name", "Squats")
        query.order.assert_called_once_with("created_at", desc=True)
        query.limit.assert_called_once_with(10)

    def test_get_for_user_clamps_limit(self):
        client, query = make_client(data=[])

        SupabaseExerciseLogRepository(client).get_for_user("u1", limit=MAX_LIMIT * 10)

        query.limit.assert_called_once_with(MAX_LIMIT)

    def test_get_best_weight(self):
        client, _ = make_client(data=[
            {"sets": [{"weight": 80, "completed": True}, {"weight": 100, "completed": False}]},
            {"sets": [{"weight": 90, "completed": True}]},
        ])

        assert SupabaseExerciseLogRepository(client).get_best_weight("u1", "Squats") == 90.0

    def test_get_best_weight_error(self):
        client, _ = make_client(error=RuntimeError("boom"))
        assert SupabaseExerciseLogRepository(client).get_best_weight("u1", "Squats") is None


class TestBestCompletedWeight:

    def test_no_rows(self):
        assert best_completed_weight([]) is None

    def test_ignores_incomplete_and_malformed_sets(self):
        rows = [
            {"sets": [{"weight": 200, "completed": False}, "bad", {"weight": "heavy", "completed": True}]},
            {"sets": None},
            {"sets": [{"weight": "42.5", "completed": True}]},
        ]
        assert best_completed_weight(rows) == 42.5


# ============================================================================
# SupabaseUserProfileRepository
# ============================================================================


class TestSupabaseUserProfileRepository:

    def test_get_profile(self):
        client, query = make_client(data={"id": "u1", "fitness_goal": "strength"})

        row = SupabaseUserProfileRepository(client).get("u1")

        assert row["fitness_goal"] == "strength"
        client.table.assert_called_once_with("users")
        query.eq.assert_called_once_with("id", "u1")

    def test_missing_profile(self):
        client, _ = make_client(error=RuntimeError("0 rows"))
        assert SupabaseUserProfileRepository(client).get("u1") is None
