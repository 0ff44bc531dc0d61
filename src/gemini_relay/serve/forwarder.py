"""Forwarder for the Gemini generateContent endpoint.

One POST per prompt, API key sent in the ``x-goog-api-key`` header. No retries.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from gemini_relay.common.config import Settings
from gemini_relay.common.errors import UpstreamError
from gemini_relay.common.schema import GenerationResult, NO_RESPONSE_PLACEHOLDER

LOGGER = logging.getLogger("gemini_relay.serve.forwarder")

def build_payload(prompt: str) -> dict[str, Any]:
    return {"contents": [{"parts": [{"text": prompt}]}]}

def extract_text(data: dict[str, Any]) -> str:
    """Return candidates[0].content.parts[0].text, or the placeholder if absent."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return NO_RESPONSE_PLACEHOLDER
    if not isinstance(text, str):
        return NO_RESPONSE_PLACEHOLDER
    return text

@dataclass(frozen=True)
class Forwarder:
    api_key: str = field(repr=False)
    url: str
    timeout: float = 30.0
    # Tests inject httpx.MockTransport here
    transport: httpx.BaseTransport | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> Forwarder:
        return cls(api_key=settings.api_key, url=settings.generate_url, timeout=settings.timeout)

    def generate(self, prompt: str) -> GenerationResult:
        """
        Send a prompt upstream and extract the generated text.

        Args:
            prompt: Validated, trimmed prompt text.

        Raises:
            UpstreamError: on transport failure, timeout, non-2xx status, or a
                body that is not a JSON object.
        """
        headers = {"x-goog-api-key": self.api_key}
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.post(self.url, headers=headers, json=build_payload(prompt))
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            LOGGER.error("Gemini returned HTTP %s", status)
            raise UpstreamError(f"Gemini returned HTTP {status}", status_code=status) from e
        except httpx.HTTPError as e:
            LOGGER.error("Gemini request failed: %s", e.__class__.__name__)
            raise UpstreamError(f"Gemini request failed: {e.__class__.__name__}") from e
        except ValueError as e:
            LOGGER.error("Gemini returned a non-JSON body: %s", e)
            raise UpstreamError("Gemini returned a non-JSON body", status_code=r.status_code) from e

        if not isinstance(data, dict):
            LOGGER.error("Gemini returned JSON of type %s", type(data).__name__)
            raise UpstreamError("Gemini returned an unexpected body", status_code=r.status_code)

        text = extract_text(data)
        if text == NO_RESPONSE_PLACEHOLDER:
            LOGGER.warning("Gemini response had no candidate text")
        return GenerationResult(content=text)
