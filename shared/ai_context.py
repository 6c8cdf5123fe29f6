"""
AI Request Context for tracking metadata in AI API calls.

This module provides the AIRequestContext dataclass that should be passed
to all AI API calls for observability.

Usage:
    from shared.ai_context import AIRequestContext

    context = AIRequestContext(
        user_id="user_123",
        feature_name="plan_generation",
        environment="production",
    )

    await generator.generate(request, context=context)
"""

from dataclasses import dataclass, field
from typing import Optional


VALID_ENVIRONMENTS = {"production", "staging", "development", "test"}


@dataclass
class AIRequestContext:
    """
    Context to attach to AI API calls for tracking and observability.

    This enables:
    - Per-user cost attribution (user_id, sent as the OpenAI `user` field)
    - Feature cost breakdown (feature_name)
    - Environment tracking (environment)

    Args:
        user_id: The user making the request
        feature_name: The feature triggering the AI call
        environment: Deployment environment
        extra: Additional metadata key-value pairs
    """
    user_id: Optional[str] = None
    feature_name: Optional[str] = None
    environment: str = "production"
    extra: dict = field(default_factory=dict)

    def __post_init__(self):
        """Validate context after initialization."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment '{self.environment}'. "
                f"Must be one of: {', '.join(sorted(VALID_ENVIRONMENTS))}"
            )

        if self.user_id is not None and not self.user_id:
            raise ValueError("user_id must be a non-empty string if provided")

        if self.feature_name is not None and not self.feature_name:
            raise ValueError("feature_name must be a non-empty string if provided")

    def to_dict(self) -> dict:
        """Convert context to a dictionary for structured log lines."""
        result = {
            "environment": self.environment,
        }
        if self.user_id:
            result["user_id"] = self.user_id
        if self.feature_name:
            result["feature_name"] = self.feature_name
        if self.extra:
            result.update({k: str(v) for k, v in self.extra.items()})
        return result

    def describe(self) -> str:
        """Short label for log messages."""
        feature = self.feature_name or "unknown"
        user = self.user_id or "anonymous"
        return f"{feature}/{user}@{self.environment}"
