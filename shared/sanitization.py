"""
Input sanitization utilities.

User-supplied text (muscle groups, equipment, exercise names) ends up inside
LLM prompts. This module has no dependencies on models or services to avoid
circular imports.
"""

import re

MAX_PROMPT_FIELD_LENGTH = 100


def sanitize_user_input(value: str, max_length: int = MAX_PROMPT_FIELD_LENGTH) -> str:
    """
    Sanitize user input by removing control characters and limiting length.

    - Removes newlines, carriage returns, tabs, and control characters
    - Collapses multiple spaces into one
    - Strips leading/trailing whitespace
    - Truncates to a maximum length

    Args:
        value: Raw user-provided string
        max_length: Maximum allowed length

    Returns:
        Sanitized string safe for prompt inclusion
    """
    sanitized = re.sub(r"[\n\r\t\x00-\x1f\x7f-\x9f]", " ", value)
    sanitized = re.sub(r" +", " ", sanitized)
    sanitized = sanitized.strip()
    return sanitized[:max_length]
