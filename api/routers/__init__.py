"""
Router package for the RepCoach API.

This package contains all API routers organized by domain:
- health: Health check
- plans: Plan generation, the weekly planner and exercise swaps
- sessions: Guided workout sessions
- exercise_logs: Saved sets and best weights
"""

from api.routers.health import router as health_router
from api.routers.plans import router as plans_router
from api.routers.sessions import router as sessions_router
from api.routers.exercise_logs import router as exercise_logs_router

__all__ = [
    "health_router",
    "plans_router",
    "sessions_router",
    "exercise_logs_router",
]
