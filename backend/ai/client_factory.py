"""AI client factory."""
from __future__ import annotations

import logging
from typing import Optional

import httpx
from openai import AsyncOpenAI

from backend.settings import Settings, get_settings


logger = logging.getLogger(__name__)

# Default client timeout
DEFAULT_TIMEOUT = 60.0


def _create_httpx_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """
    Create the pooled httpx client shared by all OpenAI calls.

    Debug logging stays off so request headers (API key) never reach logs.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        limits=httpx.Limits(max_keepalive_connections=20, max_connections=100),
    )


class AIClientFactory:
    """Factory for creating AI clients."""

    @staticmethod
    def create_openai_client(
        settings: Optional[Settings] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> AsyncOpenAI:
        """
        Create an async OpenAI client.

        SDK-level retries are disabled; callers retry through backend.ai.retry.

        Args:
            settings: Settings to read the API key from (defaults to get_settings())
            timeout: Client timeout in seconds

        Returns:
            AsyncOpenAI client instance

        Raises:
            ValueError: If the API key is not configured
        """
        settings = settings or get_settings()
        api_key = settings.openai_api_key
        if not api_key:
            raise ValueError("OpenAI API key not configured. Set OPENAI_API_KEY environment variable.")

        logger.debug("Creating OpenAI client (direct)")
        return AsyncOpenAI(
            api_key=api_key,
            timeout=timeout,
            max_retries=0,
            http_client=_create_httpx_client(timeout),
        )
