"""Keyword sources: Rakko Keyword API (credentialed) and Google Suggest (free)."""

from blogwriter.keywords.base import KeywordSource, placeholder_suggestions, placeholder_titles
from blogwriter.keywords.google_suggest import GoogleSuggestKeywordSource
from blogwriter.keywords.rakko import RakkoKeywordSource
from blogwriter.keywords.selection import (
    KeywordProvider,
    KeywordProviderChoice,
    build_keyword_source,
    choose_keyword_provider,
)

__all__ = [
    "KeywordSource",
    "GoogleSuggestKeywordSource",
    "RakkoKeywordSource",
    "KeywordProvider",
    "KeywordProviderChoice",
    "build_keyword_source",
    "choose_keyword_provider",
    "placeholder_suggestions",
    "placeholder_titles",
]
