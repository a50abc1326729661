"""Error taxonomy shared by the pipeline, keyword sources and the HTTP API."""

from __future__ import annotations


class BlogWriterError(Exception):
    """Base error; carries the HTTP status and a short title for responses."""

    status_code = 500
    error = "Blog article generation failed"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BlogWriterError):
    status_code = 400
    error = "Keyword is required"


class AuthError(BlogWriterError):
    status_code = 401
    error = "Claude API key is not configured"


class UpstreamCallError(BlogWriterError):
    """A model or keyword-provider call failed; the message keeps upstream detail."""


class ModelCallError(UpstreamCallError):
    pass


class KeywordProviderError(UpstreamCallError):
    error = "Failed to fetch keyword data"


class GenerationCancelled(BlogWriterError):
    status_code = 499
    error = "Generation cancelled"


# Substrings of upstream messages mapped to something a user can act on
_GUIDANCE = (
    (("credit balance", "insufficient"),
     "Your Anthropic credit balance looks exhausted. Add credits in the "
     "Anthropic console (Plans & Billing) and try again."),
    (("rate limit", "rate_limit", "overloaded"),
     "The model API is rate limiting or overloaded. Wait a minute and retry."),
    (("authentication", "invalid x-api-key", "api key"),
     "The Claude API key was rejected. Check the key in your settings or .env."),
)


def guidance_for(message: str) -> str | None:
    """Return an actionable hint for a known upstream failure, else None."""
    lowered = (message or "").lower()
    for needles, hint in _GUIDANCE:
        if any(n in lowered for n in needles):
            return hint
    return None
