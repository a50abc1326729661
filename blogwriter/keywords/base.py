"""Keyword source interface and the deterministic placeholder data."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeywordSource(ABC):
    """Supplies candidate article titles and keyword suggestions."""

    def __init__(self):
        self.name = self.__class__.__name__

    @abstractmethod
    def fetch_candidate_titles(self, keyword: str) -> list[str]:
        """Titles of articles ranking for the keyword (input to search-intent analysis)."""

    @abstractmethod
    def fetch_suggestions(self, keyword: str) -> list[str]:
        """Autocomplete-style suggestions for the keyword."""

    @abstractmethod
    def fetch_related_keywords(self, keyword: str) -> list[str]:
        """Keywords related to the keyword."""


def placeholder_titles(keyword: str) -> list[str]:
    """Stand-in ranking titles used when no ranked-title data is available."""
    return [
        f"The Complete Guide to {keyword} | Easy Methods for Beginners",
        f"[Latest] Top 10 {keyword} Recommendations Ranked",
        f"What Is {keyword}? Pros and Cons Explained",
        f"How to Choose {keyword} Without Regret | Tips From the Pros",
        f"5 Steps to Succeed With {keyword}",
        f"{keyword} Basics | Key Points You Should Know",
        f"[Save This] How to Get Started With {keyword} | Full Manual",
        f"{keyword} Reviews and Reputation | Does It Really Work?",
        f"{keyword} Pitfalls and Risks | How to Deal With Them",
        f"{keyword} FAQ | Every Question Answered",
    ]


def placeholder_suggestions(keyword: str) -> list[str]:
    return [
        f"{keyword} meaning",
        f"{keyword} how to",
        f"{keyword} guide",
        f"{keyword} recommendations",
        f"{keyword} comparison",
        f"{keyword} ranking",
        f"{keyword} benefits",
        f"{keyword} drawbacks",
        f"{keyword} reviews",
        f"{keyword} reputation",
    ]


def keyword_variants(keyword: str) -> list[str]:
    """Padding for related-keyword lists that come back short."""
    return [
        f"{keyword} how to",
        f"{keyword} guide",
        f"{keyword} recommendations",
        f"{keyword} comparison",
        f"{keyword} ranking",
    ]
