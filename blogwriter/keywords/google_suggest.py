"""Google Suggest keyword source (free, no credential).

The public endpoint only does autocomplete, so candidate titles are always
the placeholder list, and any failure degrades to placeholder suggestions.
"""

from __future__ import annotations

import logging

import requests

from blogwriter.config import GOOGLE_SUGGEST_URL, KEYWORD_HTTP_TIMEOUT, MAX_RELATED_KEYWORDS
from blogwriter.keywords.base import (
    KeywordSource,
    keyword_variants,
    placeholder_suggestions,
    placeholder_titles,
)

logger = logging.getLogger(__name__)


class GoogleSuggestKeywordSource(KeywordSource):
    def __init__(
        self,
        url: str = GOOGLE_SUGGEST_URL,
        timeout: float = KEYWORD_HTTP_TIMEOUT,
        session: requests.Session | None = None,
    ):
        super().__init__()
        self.url = url
        self.timeout = timeout
        self.session = session

    def fetch_candidate_titles(self, keyword: str) -> list[str]:
        return placeholder_titles(keyword)

    def fetch_suggestions(self, keyword: str) -> list[str]:
        try:
            http = self.session or requests
            resp = http.get(
                self.url,
                params={"client": "firefox", "q": keyword},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Google Suggest failed (%s); using placeholder suggestions", e)
            return placeholder_suggestions(keyword)

        # Response shape: [query, [suggestion, ...], ...]
        if isinstance(data, list) and len(data) > 1 and isinstance(data[1], list):
            return [str(s) for s in data[1]]
        return []

    def fetch_related_keywords(self, keyword: str) -> list[str]:
        suggestions = self.fetch_suggestions(keyword)
        if len(suggestions) < 5:
            suggestions = suggestions + keyword_variants(keyword)
        return suggestions[:MAX_RELATED_KEYWORDS]
