"""
LLM integration for workout plan generation.

This module provides the OpenAI-backed implementation of the
WorkoutPlanGenerator port plus the deterministic mock and fallback plans
it serves when the model is unavailable.
"""

from backend.services.llm.client import (
    OpenAIWorkoutGenerator,
    parse_alternatives_response,
    parse_workout_response,
)
from backend.services.llm.fallbacks import build_mock_plan, fallback_plan

__all__ = [
    "OpenAIWorkoutGenerator",
    "parse_workout_response",
    "parse_alternatives_response",
    "build_mock_plan",
    "fallback_plan",
]
