"""
Fake User Profile Repository for testing.
"""
from typing import Optional, List, Dict, Any
import copy


class FakeUserProfileRepository:
    """In-memory fake implementation of UserProfileRepository."""

    def __init__(self):
        self._profiles: Dict[str, Dict[str, Any]] = {}

    def reset(self) -> None:
        self._profiles.clear()

    def seed(self, profiles: List[Dict[str, Any]]) -> None:
        """Seed with `users` rows. Each must include 'id'."""
        for profile in profiles:
            self._profiles[profile["id"]] = copy.deepcopy(profile)

    def get(
        self,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        profile = self._profiles.get(user_id)
        return copy.deepcopy(profile) if profile else None
