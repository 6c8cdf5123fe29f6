"""
Supabase implementation of PlanRepository.

Plans live in the `workouts` table. Every query is scoped to the owning
user_id in addition to whatever row-level security the project defines.
"""
import logging
from datetime import date
from typing import Optional, List, Dict, Any

from supabase import Client

logger = logging.getLogger(__name__)

TABLE = "workouts"


def _log_permission_hint(error_msg: str) -> None:
    if "PGRST" in error_msg or "permission" in error_msg.lower() or "row-level security" in error_msg.lower():
        logger.error("RLS/Permissions error: Consider using SUPABASE_SERVICE_ROLE_KEY instead of SUPABASE_ANON_KEY for backend API")


class SupabasePlanRepository:
    """
    Supabase implementation of PlanRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get(
        self,
        plan_id: str,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        """Get a single plan by ID."""
        try:
            result = self._client.table(TABLE).select("*").eq("id", plan_id).eq("user_id", user_id).single().execute()
            return result.data if result.data else None
        except Exception as e:
            logger.error(f"Failed to get plan {plan_id}: {e}")
            return None

    def list_between(
        self,
        user_id: str,
        start: date,
        end: date,
    ) -> List[Dict[str, Any]]:
        """Get a user's plans dated between start and end (inclusive)."""
        try:
            result = self._client.table(TABLE) \
                .select("*") \
                .eq("user_id", user_id) \
                .gte("date", start.isoformat()) \
                .lte("date", end.isoformat()) \
                .order("date") \
                .execute()
            return result.data if result.data else []
        except Exception as e:
            logger.error(f"Failed to list plans for {user_id} between {start} and {end}: {e}")
            return []

    def create(
        self,
        row: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Insert a new plan."""
        try:
            result = self._client.table(TABLE).insert(row).execute()
            if result.data and len(result.data) > 0:
                logger.info(f"Plan saved for user {row.get('user_id')}: {result.data[0].get('id')}")
                return result.data[0]
            return None
        except Exception as e:
            logger.error(f"Failed to save plan: {e}")
            _log_permission_hint(str(e))
            return None

    def mark_completed(
        self,
        plan_id: str,
        user_id: str,
    ) -> bool:
        """Set the plan's completion flag."""
        try:
            result = self._client.table(TABLE) \
                .update({"completed": True}) \
                .eq("id", plan_id) \
                .eq("user_id", user_id) \
                .execute()

            if result.data and len(result.data) > 0:
                return True
            logger.warning(f"No plan {plan_id} for user {user_id} to mark completed")
            return False
        except Exception as e:
            logger.error(f"Failed to mark plan {plan_id} completed: {e}")
            _log_permission_hint(str(e))
            return False

    def update_exercises(
        self,
        plan_id: str,
        user_id: str,
        exercises: List[Dict[str, Any]],
    ) -> Optional[Dict[str, Any]]:
        """Replace a plan's exercise list."""
        try:
            result = self._client.table(TABLE) \
                .update({"exercises": exercises}) \
                .eq("id", plan_id) \
                .eq("user_id", user_id) \
                .execute()

            if result.data and len(result.data) > 0:
                return result.data[0]
            return None
        except Exception as e:
            logger.error(f"Failed to update exercises of plan {plan_id}: {e}")
            return None
