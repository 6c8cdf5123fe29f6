"""
Session-local set entries.

A WorkingSet holds what the user actually typed for one set while a session
is running. It is mutable and lives only as long as the session; the
persisted form is a SetLogRecord.
"""

from pydantic import BaseModel, Field


class WorkingSet(BaseModel):
    """What the user logged for one set of one exercise."""

    reps: str = Field(default="", description="Logged reps (free text)")
    weight: float = Field(default=0.0, ge=0, description="Logged weight (kg)")
    completed: bool = False

    def snapshot(self) -> "WorkingSet":
        return self.model_copy()
