"""
OpenAI-backed workout plan generator.

Implements the WorkoutPlanGenerator port. Calls never raise for upstream
failures: a missing key or a failed call yields a mock plan, and a response
without usable exercises yields the fallback plan.
"""

import json
import logging
from typing import Any, List, Optional

from openai import AsyncOpenAI

from backend.ai.retry import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_WAIT_SECONDS,
    DEFAULT_MIN_WAIT_SECONDS,
    retry_async_call,
)
from backend.services.llm.fallbacks import (
    build_mock_plan,
    fallback_alternatives,
    fallback_plan,
    mock_alternatives,
)
from backend.services.llm.prompts import (
    WORKOUT_SYSTEM_PROMPT,
    build_alternatives_prompt,
    build_workout_prompt,
)
from domain.converters import decode_exercises
from domain.models import GeneratedPlan, WorkoutRequest
from shared.ai_context import AIRequestContext

logger = logging.getLogger(__name__)

ALTERNATIVES_COUNT = 4


def _text_list(value: Any, default: List[str]) -> List[str]:
    if isinstance(value, list):
        items = [str(v).strip() for v in value if v is not None and str(v).strip()]
        return items or list(default)
    if isinstance(value, str) and value.strip():
        return [value.strip()]
    return list(default)


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def parse_workout_response(raw_response: Optional[str]) -> GeneratedPlan:
    """
    Parse an LLM JSON response into a GeneratedPlan.

    Missing top-level fields take GeneratedPlan defaults. A response that is
    not JSON, has no exercises list, or has no valid exercise yields the
    fallback plan.
    """
    try:
        data = json.loads((raw_response or "").strip())
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing OpenAI response: {e}")
        return fallback_plan()

    if not isinstance(data, dict) or not isinstance(data.get("exercises"), list):
        logger.error("Invalid workout structure: no exercises list")
        return fallback_plan()

    decoded = decode_exercises(data["exercises"])
    if not decoded.exercises:
        logger.error(f"Invalid workout structure: {decoded.error or 'empty exercises list'}")
        return fallback_plan()
    if decoded.skipped:
        logger.warning(f"Dropped {decoded.skipped} invalid exercise(s) from generated plan")

    defaults = GeneratedPlan()
    return GeneratedPlan(
        title=str(data.get("title") or defaults.title),
        description=str(data.get("description") or defaults.description),
        estimated_duration=_positive_int(data.get("estimated_duration"), defaults.estimated_duration),
        difficulty=str(data.get("difficulty") or defaults.difficulty),
        exercises=list(decoded.exercises),
        warm_up=_text_list(data.get("warm_up"), defaults.warm_up),
        cool_down=_text_list(data.get("cool_down"), defaults.cool_down),
        notes=str(data.get("notes") or defaults.notes),
        source="ai",
    )


def parse_alternatives_response(raw_response: Optional[str]) -> List[str]:
    """
    Parse a JSON array of exercise names.

    Raises:
        ValueError: If the response is not a list of names
    """
    data = json.loads((raw_response or "").strip())
    if isinstance(data, dict):
        data = data.get("alternatives") or data.get("exercises")
    if not isinstance(data, list):
        raise ValueError("Alternatives response is not a JSON array")
    names = [str(item).strip() for item in data if isinstance(item, str) and item.strip()]
    if not names:
        raise ValueError("Alternatives response has no names")
    return names[:ALTERNATIVES_COUNT]


class OpenAIWorkoutGenerator:
    """
    OpenAI-powered workout plan generator.

    Uses gpt-4o-mini in JSON mode by default. Transient errors (rate limits,
    timeouts, 5xx) are retried with exponential backoff through tenacity.

    Usage:
        client = AIClientFactory.create_openai_client(settings)
        generator = OpenAIWorkoutGenerator(client)
        plan = await generator.generate(request, context=AIRequestContext(user_id="u1"))
    """

    DEFAULT_MODEL = "gpt-4o-mini"
    DEFAULT_TEMPERATURE = 0.7
    DEFAULT_MAX_TOKENS = 2000
    ALTERNATIVES_TEMPERATURE = 0.3
    ALTERNATIVES_MAX_TOKENS = 200

    def __init__(
        self,
        client: Optional[AsyncOpenAI],
        *,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
        max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
    ):
        """
        Initialize the generator.

        Args:
            client: AsyncOpenAI client, or None to always serve mock plans
            model: Chat model
            temperature: Sampling temperature for plan generation
            max_tokens: Max completion tokens for plan generation
            max_attempts: Attempts per call before falling back
            min_wait_seconds: Minimum backoff between attempts
            max_wait_seconds: Maximum backoff between attempts
        """
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._retry_kwargs = {
            "max_attempts": max_attempts,
            "min_wait_seconds": min_wait_seconds,
            "max_wait_seconds": max_wait_seconds,
        }
        if client is None:
            logger.warning("OpenAI API key not found. Using mock workouts.")

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def generate(
        self,
        request: WorkoutRequest,
        context: Optional[AIRequestContext] = None,
    ) -> GeneratedPlan:
        """
        Generate a workout plan.

        Args:
            request: Generation parameters
            context: AI request context for observability

        Returns:
            GeneratedPlan (source "ai", "mock" or "fallback")
        """
        if self._client is None:
            return build_mock_plan(request)

        label = context.describe() if context else "plan_generation"
        messages = [
            {"role": "system", "content": WORKOUT_SYSTEM_PROMPT},
            {"role": "user", "content": build_workout_prompt(request)},
        ]
        try:
            content = await retry_async_call(
                self._call_llm,
                messages,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
                json_mode=True,
                context=context,
                **self._retry_kwargs,
            )
        except Exception as e:
            logger.error(f"OpenAI API error ({label}): {e}; using mock plan")
            return build_mock_plan(request)

        plan = parse_workout_response(content)
        logger.info(f"Generated plan '{plan.title}' ({len(plan.exercises)} exercises, source={plan.source}) [{label}]")
        return plan

    async def suggest_alternatives(
        self,
        exercise_name: str,
        target_muscle: str,
        context: Optional[AIRequestContext] = None,
    ) -> List[str]:
        """
        Suggest alternative exercises that target the same muscle group.

        Returns:
            Up to four exercise names, or a fixed fallback list
        """
        if self._client is None:
            return mock_alternatives()

        messages = [
            {
                "role": "user",
                "content": build_alternatives_prompt(exercise_name, target_muscle, ALTERNATIVES_COUNT),
            }
        ]
        try:
            content = await retry_async_call(
                self._call_llm,
                messages,
                temperature=self.ALTERNATIVES_TEMPERATURE,
                max_tokens=self.ALTERNATIVES_MAX_TOKENS,
                json_mode=False,
                context=context,
                **self._retry_kwargs,
            )
            return parse_alternatives_response(content)
        except Exception as e:
            logger.error(f"Error getting alternatives for {exercise_name}: {e}")
            return fallback_alternatives(exercise_name)

    async def _call_llm(
        self,
        messages: List[dict],
        *,
        temperature: float,
        max_tokens: int,
        json_mode: bool,
        context: Optional[AIRequestContext] = None,
    ) -> str:
        """
        Call the chat completions API.

        Returns:
            Raw response content ("" when the model returned nothing)
        """
        kwargs = {
            "model": self._model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        if context and context.user_id:
            kwargs["user"] = context.user_id

        response = await self._client.chat.completions.create(**kwargs)
        return response.choices[0].message.content or ""
