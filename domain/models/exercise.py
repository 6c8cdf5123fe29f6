"""
Exercise value object for workout plans.

Exercises arrive from two loosely typed sources: the LLM response and the
JSON `exercises` column of the `workouts` table. Field validators coerce the
common shapes (numeric rep targets, a single muscle group string, missing
text fields) so that a validated Exercise is always safe to drive a session.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


DEFAULT_REST_SECONDS = 60


class Exercise(BaseModel):
    """
    Value object representing one exercise within a plan.

    The `reps` field is free text to preserve rep schemes like "8-12",
    "10-12 each leg" or "AMRAP".

    Examples:
        >>> exercise = Exercise(name="Push-ups", sets=3, reps="8-12", rest_seconds=60)
        >>> exercise.total_rest_seconds
        120

        >>> Exercise(name="Squat", sets="4", reps=5).reps
        '5'
    """

    name: str = Field(..., min_length=1, description="Exercise name")
    sets: int = Field(..., ge=1, le=20, description="Target number of sets")
    reps: str = Field(default="", description="Target rep scheme (e.g., '8-12')")
    rest_seconds: int = Field(
        default=DEFAULT_REST_SECONDS,
        ge=0,
        le=900,
        description="Rest between sets in seconds",
    )
    instructions: str = Field(default="", description="Step-by-step form instructions")
    tips: str = Field(default="", description="Safety tips and form cues")
    muscle_groups: List[str] = Field(
        default_factory=list, description="Muscle groups targeted"
    )
    difficulty: Optional[str] = Field(default=None, description="Difficulty tag")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Exercise name must not be blank")
        return stripped

    @field_validator("reps", mode="before")
    @classmethod
    def coerce_reps(cls, v: Any) -> str:
        """LLMs often return integer rep targets; keep them as text."""
        if v is None:
            return ""
        if isinstance(v, bool):
            raise ValueError("reps must be text or a number")
        if isinstance(v, (int, float)):
            return str(int(v)) if float(v).is_integer() else str(v)
        return v

    @field_validator("rest_seconds", mode="before")
    @classmethod
    def coerce_rest(cls, v: Any) -> Any:
        if v is None or v == "":
            return DEFAULT_REST_SECONDS
        return v

    @field_validator("instructions", "tips", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return "" if v is None else v

    @field_validator("muscle_groups", mode="before")
    @classmethod
    def coerce_muscle_groups(cls, v: Any) -> List[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @property
    def total_rest_seconds(self) -> int:
        """Rest taken between the sets of this exercise (none after the last set)."""
        return self.rest_seconds * (self.sets - 1)

    def __str__(self) -> str:
        if self.reps:
            return f"{self.name} {self.sets}x{self.reps}"
        return f"{self.name} {self.sets} sets"

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Bent-over Rows",
                    "sets": 3,
                    "reps": "8-12",
                    "rest_seconds": 90,
                    "instructions": "Hinge at hips, keep back straight. Pull weights to lower chest.",
                    "tips": "Squeeze shoulder blades together. Don't round your back.",
                    "muscle_groups": ["back", "biceps"],
                    "difficulty": "intermediate",
                }
            ]
        },
    }
