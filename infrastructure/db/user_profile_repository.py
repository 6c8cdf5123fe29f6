"""
Supabase implementation of UserProfileRepository.

Reads the `users` table populated by the sign-up flow.
"""
import logging
from typing import Optional, Dict, Any

from supabase import Client

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = (
    "id, email, full_name, fitness_goal, experience_level, age, "
    "height_cm, target_weight_kg, gym_frequency, created_at"
)


class SupabaseUserProfileRepository:
    """Supabase implementation of UserProfileRepository protocol."""

    def __init__(self, client: Client):
        self._client = client

    def get(
        self,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        """Get user profile by ID."""
        try:
            result = self._client.table("users") \
                .select(PROFILE_COLUMNS) \
                .eq("id", user_id) \
                .single() \
                .execute()
            return result.data if result.data else None
        except Exception as e:
            logger.error(f"Error fetching profile for {user_id}: {e}")
            return None
