"""Thin adapter over the Anthropic Messages API.

Every SDK failure is re-raised as ModelCallError. The upstream text is kept
in the message (e.g. "Your credit balance is too low ...") so callers can
match on it and tell the user what to fix.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import anthropic

from blogwriter.config import (
    CLAUDE_MAX_TOKENS,
    CLAUDE_MODEL,
    MODEL_MAX_RETRIES,
    MODEL_TIMEOUT_SECONDS,
)
from blogwriter.errors import ModelCallError

logger = logging.getLogger(__name__)


class ModelClient:
    """Send a rendered prompt, get generated text back."""

    def __init__(
        self,
        api_key: str,
        model: str = CLAUDE_MODEL,
        max_tokens: int = CLAUDE_MAX_TOKENS,
        timeout: float = MODEL_TIMEOUT_SECONDS,
        client: Optional[anthropic.Anthropic] = None,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self.client = client or anthropic.Anthropic(
            api_key=api_key,
            timeout=timeout,
            max_retries=MODEL_MAX_RETRIES,
        )

    def complete(self, prompt: str) -> str:
        start = time.time()
        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            kind = type(e).__name__
            logger.error("Claude API %s: %s", kind, e)
            raise ModelCallError(f"Article generation failed ({kind}): {e}") from e

        if not message.content:
            raise ModelCallError("Article generation failed: empty response from model")
        block = message.content[0]
        if getattr(block, "type", None) != "text":
            raise ModelCallError(
                f"Article generation failed: unexpected response type {getattr(block, 'type', None)!r}"
            )

        usage = getattr(message, "usage", None)
        if usage is not None:
            logger.info(
                "Claude %s responded in %.1fs (%s in / %s out)",
                self.model, time.time() - start, usage.input_tokens, usage.output_tokens,
            )
        return block.text
