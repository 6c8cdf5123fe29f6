"""
Exercise Log Repository Interface (Port).

This module defines the abstract interface for persisting the sets a user
logged during a workout session, and for reading them back for progress
charts and personal-record detection.
"""
from typing import Protocol, Optional, List, Dict, Any


class ExerciseLogRepository(Protocol):
    """
    Abstract interface for exercise log persistence.

    Rows are shaped like the `exercise_logs` table:
    {user_id, workout_id, exercise_name, sets, personal_record, created_at}.
    """

    def bulk_insert(
        self,
        rows: List[Dict[str, Any]],
    ) -> Optional[List[Dict[str, Any]]]:
        """
        Insert all rows in a single write.

        Args:
            rows: `exercise_logs` rows

        Returns:
            Inserted rows, or None if the write failed
        """
        ...

    def get_for_user(
        self,
        user_id: str,
        *,
        exercise_name: Optional[str] = None,
        limit: int = 50,
    ) -> List[Dict[str, Any]]:
        """
        Get a user's logged exercises, newest first.

        Args:
            user_id: User ID
            exercise_name: Optional exact exercise name filter
            limit: Maximum rows to return

        Returns:
            List of log rows
        """
        ...

    def get_best_weight(
        self,
        user_id: str,
        exercise_name: str,
    ) -> Optional[float]:
        """
        Get the heaviest completed set ever logged for an exercise.

        Args:
            user_id: User ID
            exercise_name: Exercise name (denormalized on the log row)

        Returns:
            Best weight, or None if there is no history
        """
        ...
