"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

NO_RESPONSE_PLACEHOLDER = "No response from Gemini."

@dataclass(frozen=True)
class GenerationRequest:
    """A prompt that passed validation, already trimmed."""
    prompt: str

@dataclass(frozen=True)
class GenerationResult:
    """Text extracted from the generation API response."""
    content: str = NO_RESPONSE_PLACEHOLDER

class GenerateIn(BaseModel):
    # Any on purpose: type and presence are checked by validate_prompt so
    # they surface as 400s instead of framework-level 422s.
    prompt: Any = Field(
        default=None,
        description="Prompt text, 1 to 1000 characters after trimming.",
        examples=["Write a poem about spring"],
    )

class GenerateOut(BaseModel):
    content: str

class ErrorOut(BaseModel):
    error: str
