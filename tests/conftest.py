from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest

from blogwriter.keywords.base import KeywordSource, placeholder_titles
from blogwriter.loaders.templates import TemplateStore

ROOT = Path(__file__).resolve().parent.parent

OUTLINE_RESPONSE = (
    "Here is the outline.\n"
    "h2：Why budget travel works\n"
    "  h3：Where the money goes\n"
    "  h3：Cheap seasons\n"
    "h2:Planning the trip\n"
    "h2：Booking tips\n"
    "  h3：Flights\n"
    "h2：Summary\n"
)

INTENT_RESPONSE = (
    "a: learn how to travel cheaply\n"
    "b: compare budget destinations\n"
    "c: find discount booking sites\n"
    "[a] article count: 6\n"
    "[b] article count: 3\n"
    "[c] article count: 1\n"
)

TITLES_RESPONSE = "\n".join(f"Title {i}" for i in range(1, 9))


# -----------------------------
# Test doubles
# -----------------------------
class FakeModelClient:
    """Records prompts; answers according to the first line of each prompt."""

    def __init__(self, responder: Optional[Callable[[str], str]] = None, fail_on: Optional[str] = None):
        self.prompts: list[str] = []
        self.responder = responder or default_responder
        self.fail_on = fail_on

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.fail_on and prompt.startswith(self.fail_on):
            from blogwriter.errors import ModelCallError
            raise ModelCallError("Error code: 400 - Your credit balance is too low to access the Anthropic API.")
        return self.responder(prompt)

    def prompts_starting(self, prefix: str) -> list[str]:
        return [p for p in self.prompts if p.startswith(prefix)]


def default_responder(prompt: str) -> str:
    kind = prompt.split(maxsplit=1)[0] if prompt else ""
    if kind == "INTENT":
        return INTENT_RESPONSE
    if kind == "OUTLINE":
        return OUTLINE_RESPONSE
    if kind == "TITLES":
        return TITLES_RESPONSE
    if kind == "LEAD":
        return "Lead paragraph."
    if kind == "BODY":
        target = prompt.split("\n")[0].removeprefix("BODY ")
        return f"Body for {target}"
    if kind == "SUMMARY":
        return "Summary paragraph."
    return ""


class FakeKeywordSource(KeywordSource):
    def __init__(self, titles: Optional[list[str]] = None, error: Optional[Exception] = None):
        super().__init__()
        self.titles = titles
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def fetch_candidate_titles(self, keyword: str) -> list[str]:
        self.calls.append(("titles", keyword))
        if self.error:
            raise self.error
        return self.titles if self.titles is not None else placeholder_titles(keyword)

    def fetch_suggestions(self, keyword: str) -> list[str]:
        self.calls.append(("suggestions", keyword))
        if self.error:
            raise self.error
        return [f"{keyword} tips", f"{keyword} cheap"]

    def fetch_related_keywords(self, keyword: str) -> list[str]:
        self.calls.append(("related", keyword))
        return [f"{keyword} ideas"]


# -----------------------------
# Fixtures
# -----------------------------
@pytest.fixture
def templates() -> TemplateStore:
    """Small templates whose first word tells the fake model which step is calling."""
    return TemplateStore({
        "search_intent": (
            "INTENT\n#Article titles\n"
            "- [Title of article 1 goes here]\n- [Title of article 2 goes here]\n"
            "#Output\n"
        ),
        "outline": "OUTLINE {genre} / {keyword}\n{searchIntent}",
        "titles": "TITLES {theme}",
        "lead": "LEAD {keyword} by {authority}\n{searchIntent}\n{outline}",
        "body": "BODY {targetSection}\n--\n{keyword}\n{searchIntent}\n{outline}",
        "summary": "SUMMARY {keyword} -> {callToAction}\n{searchIntent}\n{outline}",
    })


@pytest.fixture
def shipped_templates() -> TemplateStore:
    return TemplateStore.load(ROOT / "data" / "templates")


@pytest.fixture
def model_client() -> FakeModelClient:
    return FakeModelClient()


@pytest.fixture
def keyword_source() -> FakeKeywordSource:
    return FakeKeywordSource()
