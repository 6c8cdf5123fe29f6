"""
Plan Repository Interface (Port).

This module defines the abstract interface for workout plan persistence.
The session controller uses it as its Plan Source collaborator (read once at
session start) and to set the completion flag when a session finishes.
"""
from datetime import date
from typing import Protocol, Optional, List, Dict, Any


class PlanRepository(Protocol):
    """
    Abstract interface for plan persistence operations.

    Rows are plain dicts shaped like the `workouts` table; conversion to the
    Plan domain model happens in domain.converters.
    """

    def get(
        self,
        plan_id: str,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        """
        Get a single plan by ID.

        Args:
            plan_id: Plan UUID
            user_id: Owning user ID (for authorization)

        Returns:
            Plan row or None if not found/unauthorized
        """
        ...

    def list_between(
        self,
        user_id: str,
        start: date,
        end: date,
    ) -> List[Dict[str, Any]]:
        """
        Get a user's plans scheduled between two dates (inclusive).

        Args:
            user_id: Owning user ID
            start: First day
            end: Last day

        Returns:
            Plan rows ordered by date ascending
        """
        ...

    def create(
        self,
        row: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Insert a new plan.

        Args:
            row: `workouts` insert payload (must include user_id)

        Returns:
            Saved row with its generated id, or None on failure
        """
        ...

    def mark_completed(
        self,
        plan_id: str,
        user_id: str,
    ) -> bool:
        """
        Set the plan's completion flag.

        Args:
            plan_id: Plan UUID
            user_id: Owning user ID

        Returns:
            True if the plan was updated, False on failure
        """
        ...

    def update_exercises(
        self,
        plan_id: str,
        user_id: str,
        exercises: List[Dict[str, Any]],
    ) -> Optional[Dict[str, Any]]:
        """
        Replace a plan's exercise list.

        Args:
            plan_id: Plan UUID
            user_id: Owning user ID
            exercises: Serialized exercises

        Returns:
            Updated row, or None on failure
        """
        ...
