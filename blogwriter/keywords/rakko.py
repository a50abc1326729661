"""Rakko Keyword API client (credentialed keyword source)."""

from __future__ import annotations

import logging

import requests

from blogwriter.config import (
    KEYWORD_HTTP_TIMEOUT,
    MAX_CANDIDATE_TITLES,
    RAKKO_API_BASE_URL,
)
from blogwriter.errors import KeywordProviderError
from blogwriter.keywords.base import KeywordSource, placeholder_titles

logger = logging.getLogger(__name__)


class RakkoKeywordSource(KeywordSource):
    def __init__(
        self,
        api_key: str,
        base_url: str = RAKKO_API_BASE_URL,
        timeout: float = KEYWORD_HTTP_TIMEOUT,
        session: requests.Session | None = None,
    ):
        super().__init__()
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session

    def _get(self, path: str, keyword: str) -> dict:
        http = self.session or requests
        resp = http.get(
            f"{self.base_url}/{path}",
            params={"keyword": keyword},
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"unexpected response body from /{path}: {type(data).__name__}")
        return data

    def fetch_candidate_titles(self, keyword: str) -> list[str]:
        """Ranking titles for the keyword; placeholder titles if the API is unreachable."""
        try:
            data = self._get("serp", keyword)
        except (requests.RequestException, ValueError) as e:
            logger.warning("Rakko /serp failed (%s); using placeholder titles", e)
            return placeholder_titles(keyword)
        return list(data.get("titles") or [])[:MAX_CANDIDATE_TITLES]

    def fetch_suggestions(self, keyword: str) -> list[str]:
        try:
            data = self._get("suggest", keyword)
        except (requests.RequestException, ValueError) as e:
            logger.error("Rakko /suggest failed: %s", e)
            raise KeywordProviderError(
                f"Failed to fetch suggestions from the Rakko Keyword API: {e}"
            ) from e
        return list(data.get("suggestions") or [])

    def fetch_related_keywords(self, keyword: str) -> list[str]:
        try:
            data = self._get("related", keyword)
        except (requests.RequestException, ValueError) as e:
            logger.error("Rakko /related failed: %s", e)
            raise KeywordProviderError(
                f"Failed to fetch related keywords from the Rakko Keyword API: {e}"
            ) from e
        return list(data.get("related") or [])
