"""Prompt validation."""
from __future__ import annotations
from typing import Any

from gemini_relay.common.errors import ValidationError
from gemini_relay.common.schema import GenerationRequest

MAX_PROMPT_LENGTH = 1000

def validate_prompt(value: Any) -> GenerationRequest:
    """
    Check an inbound prompt and return it trimmed.

    Args:
        value: Raw ``prompt`` field from the request body, possibly missing.

    Returns:
        GenerationRequest holding the trimmed prompt.

    Raises:
        ValidationError: if the prompt is missing, not text, blank, or longer
            than MAX_PROMPT_LENGTH characters once trimmed.
    """
    if value is None:
        raise ValidationError("Prompt is required.")
    if not isinstance(value, str):
        raise ValidationError("Prompt must be a string.")
    prompt = value.strip()
    if not prompt:
        raise ValidationError("Prompt must not be empty.")
    if len(prompt) > MAX_PROMPT_LENGTH:
        raise ValidationError(
            f"Prompt must be at most {MAX_PROMPT_LENGTH} characters (got {len(prompt)})."
        )
    return GenerationRequest(prompt=prompt)
