"""
Supabase implementation of ExerciseLogRepository.

One `exercise_logs` row holds every set logged for one exercise of one
session; the set list is a JSON column.
"""
import logging
from typing import Optional, List, Dict, Any

from supabase import Client

logger = logging.getLogger(__name__)

TABLE = "exercise_logs"
MAX_LIMIT = 500


def best_completed_weight(rows: List[Dict[str, Any]]) -> Optional[float]:
    """Heaviest completed set across log rows, or None."""
    best = None
    for row in rows:
        for entry in row.get("sets") or []:
            if not isinstance(entry, dict) or not entry.get("completed"):
                continue
            try:
                weight = float(entry.get("weight") or 0)
            except (TypeError, ValueError):
                continue
            if best is None or weight > best:
                best = weight
    return best


class SupabaseExerciseLogRepository:
    """
    Supabase implementation of ExerciseLogRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def bulk_insert(
        self,
        rows: List[Dict[str, Any]],
    ) -> Optional[List[Dict[str, Any]]]:
        """Insert all rows in one request."""
        if not rows:
            return []
        try:
            result = self._client.table(TABLE).insert(rows).execute()
            if result.data is None:
                logger.error("Exercise log insert returned no data")
                return None
            logger.info(f"Inserted {len(result.data)} exercise log(s) for user {rows[0].get('user_id')}")
            return result.data
        except Exception as e:
            logger.error(f"Failed to insert exercise logs: {e}")
            return None

    def get_for_user(
        self,
        user_id: str,
        *,
        exercise_name: Optional[str] = None,
        limit: int = 50,
    ) -> List[Dict[str, Any]]:
        """Get a user's logs, newest first."""
        limit = max(1, min(limit, MAX_LIMIT))
        try:
            query = self._client.table(TABLE).select("*").eq("user_id", user_id)
            if exercise_name:
                query = query.eq("exercise_name", exercise_name)
            result = query.order("created_at", desc=True).limit(limit).execute()
            return result.data if result.data else []
        except Exception as e:
            logger.error(f"Failed to get exercise logs for {user_id}: {e}")
            return []

    def get_best_weight(
        self,
        user_id: str,
        exercise_name: str,
    ) -> Optional[float]:
        """Heaviest completed set ever logged for an exercise."""
        try:
            result = self._client.table(TABLE) \
                .select("sets") \
                .eq("user_id", user_id) \
                .eq("exercise_name", exercise_name) \
                .execute()
            return best_completed_weight(result.data or [])
        except Exception as e:
            logger.error(f"Failed to get best weight for {exercise_name}: {e}")
            return None
