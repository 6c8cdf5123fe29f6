"""
ListWeeklyPlans Use Case.

Backs the weekly planner: every plan dated in the Monday-Sunday week that
contains a given day, grouped by date.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from application.ports import PlanRepository
from domain.converters import row_to_plan
from domain.models import Plan

logger = logging.getLogger(__name__)


def week_bounds(day: date) -> Tuple[date, date]:
    """Monday and Sunday of the week containing `day`."""
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)


def plans_in_week(plan_repo: PlanRepository, user_id: str, day: date) -> List[Plan]:
    start, end = week_bounds(day)
    return [row_to_plan(row) for row in plan_repo.list_between(user_id, start, end)]


@dataclass
class WeeklyPlansResult:
    """Plans of one week, grouped by day."""

    week_start: date
    week_end: date
    days: Dict[date, List[Plan]] = field(default_factory=dict)
    muscle_groups: List[str] = field(default_factory=list)
    goals: List[str] = field(default_factory=list)

    @property
    def plans(self) -> List[Plan]:
        return [plan for day in sorted(self.days) for plan in self.days[day]]

    @property
    def total(self) -> int:
        return sum(len(plans) for plans in self.days.values())


class ListWeeklyPlansUseCase:
    """
    Use case for the weekly planner view.

    Usage:
        >>> use_case = ListWeeklyPlansUseCase(plan_repo)
        >>> result = use_case.execute("user-123", date(2024, 5, 15), muscle_group="legs")
        >>> result.days[date(2024, 5, 13)]
    """

    def __init__(self, plan_repo: PlanRepository) -> None:
        self._plan_repo = plan_repo

    def execute(
        self,
        user_id: str,
        day: date,
        *,
        muscle_group: Optional[str] = None,
        goal: Optional[str] = None,
    ) -> WeeklyPlansResult:
        """
        List the week's plans.

        Args:
            user_id: Owning user ID
            day: Any day of the wanted week
            muscle_group: Only plans tagged with this muscle group
            goal: Only plans with this goal

        Returns:
            WeeklyPlansResult with all seven days present. `muscle_groups`
            and `goals` list what the unfiltered week contains, for building
            filter menus.
        """
        start, end = week_bounds(day)
        plans = plans_in_week(self._plan_repo, user_id, day)

        muscle_groups = sorted({group for plan in plans for group in plan.muscle_groups})
        goals = sorted({plan.goal for plan in plans if plan.goal})

        if muscle_group:
            wanted = muscle_group.lower().strip()
            plans = [plan for plan in plans if wanted in plan.muscle_groups]
        if goal:
            plans = [plan for plan in plans if plan.goal == goal]

        days: Dict[date, List[Plan]] = {start + timedelta(days=i): [] for i in range(7)}
        for plan in plans:
            if plan.date is None or plan.date not in days:
                logger.warning(f"Plan {plan.id} has no date inside {start}..{end}; skipping")
                continue
            days[plan.date].append(plan)

        logger.debug(f"Week {start}..{end} for user {user_id}: {len(plans)} plan(s)")
        return WeeklyPlansResult(
            week_start=start,
            week_end=end,
            days=days,
            muscle_groups=muscle_groups,
            goals=goals,
        )
