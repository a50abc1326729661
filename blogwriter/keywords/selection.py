"""Decide once, at the boundary, which keyword source a request uses."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from blogwriter.config import PLACEHOLDER_CREDENTIAL_MARKERS
from blogwriter.keywords.base import KeywordSource
from blogwriter.keywords.google_suggest import GoogleSuggestKeywordSource
from blogwriter.keywords.rakko import RakkoKeywordSource

logger = logging.getLogger(__name__)


class KeywordProvider(enum.Enum):
    PRIMARY = "rakko"
    FALLBACK = "google_suggest"


@dataclass(frozen=True)
class KeywordProviderChoice:
    provider: KeywordProvider
    credential: str = ""

    @classmethod
    def primary(cls, credential: str) -> "KeywordProviderChoice":
        return cls(KeywordProvider.PRIMARY, credential)

    @classmethod
    def fallback(cls) -> "KeywordProviderChoice":
        return cls(KeywordProvider.FALLBACK)


def looks_like_placeholder(credential: str) -> bool:
    """True for values copied unchanged from an example config."""
    lowered = credential.lower()
    return any(marker in lowered for marker in PLACEHOLDER_CREDENTIAL_MARKERS)


def choose_keyword_provider(credential: str | None) -> KeywordProviderChoice:
    credential = (credential or "").strip()
    if not credential:
        return KeywordProviderChoice.fallback()
    if looks_like_placeholder(credential):
        logger.warning(
            "Placeholder keyword API key detected (%s...); using Google Suggest",
            credential[:8],
        )
        return KeywordProviderChoice.fallback()
    return KeywordProviderChoice.primary(credential)


def build_keyword_source(choice: KeywordProviderChoice) -> KeywordSource:
    if choice.provider is KeywordProvider.PRIMARY:
        source: KeywordSource = RakkoKeywordSource(choice.credential)
    else:
        source = GoogleSuggestKeywordSource()
    logger.info("Keyword source: %s", source.name)
    return source
