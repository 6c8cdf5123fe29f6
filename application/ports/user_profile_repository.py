"""
User Profile Repository Interface (Port).

Profiles are created by the sign-up flow; this service only reads them to
personalise generated plans.
"""
from typing import Protocol, Optional, Dict, Any


class UserProfileRepository(Protocol):
    """Abstract interface for reading user training profiles."""

    def get(
        self,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        """
        Get a user's profile row.

        Args:
            user_id: User ID

        Returns:
            `users` row or None if not found
        """
        ...
