"""Backend services for the RepCoach API."""

from backend.services.llm import OpenAIWorkoutGenerator

__all__ = [
    "OpenAIWorkoutGenerator",
]
