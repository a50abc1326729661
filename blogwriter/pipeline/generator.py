"""Orchestrate the full article generation pipeline.

Seven-step process, each step feeding the next:
1. Keyword research: candidate titles from the keyword source
2. Search intent: model classifies the titles into intents a/b/c
3. Outline: h2/h3 structure built around the search intent
4. Title candidates: up to five titles for the theme
5. Lead text: opening paragraph for the outline
6. Body: one model call per outline section (closing section skipped)
7. Summary: closing section with the call to action

The first failure aborts the run; no partial article is returned.
"""

from __future__ import annotations

import enum
import logging
import threading
import time
from datetime import datetime, timezone
from typing import Callable, Optional, Protocol, Sequence

from blogwriter.config import CLOSING_SECTION_MARKER
from blogwriter.errors import GenerationCancelled
from blogwriter.keywords.base import KeywordSource
from blogwriter.loaders.templates import TemplateStore
from blogwriter.models import (
    GeneratedArticle,
    GenerationRequest,
    OutlineSection,
    SearchIntent,
)
from blogwriter.pipeline.parsers import (
    parse_outline,
    parse_search_intent,
    parse_title_candidates,
)
from blogwriter.pipeline.prompts import (
    build_body_prompt,
    build_lead_prompt,
    build_outline_prompt,
    build_search_intent_prompt,
    build_summary_prompt,
    build_titles_prompt,
)

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    def complete(self, prompt: str) -> str: ...


class GenerationStep(enum.Enum):
    KEYWORD_RESEARCH = ("keyword_research", 14)
    SEARCH_INTENT = ("search_intent", 28)
    OUTLINE = ("outline", 42)
    TITLES = ("titles", 56)
    LEAD = ("lead", 70)
    BODY = ("body", 85)
    SUMMARY = ("summary", 95)
    COMPLETE = ("complete", 100)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def progress(self) -> int:
        """Nominal percentage reached when this step starts."""
        return self.value[1]


StepCallback = Callable[[GenerationStep], None]


class StepRunner:
    """Per-call state: progress reporting and cancellation checks."""

    def __init__(
        self,
        model_client: CompletionClient,
        on_step: Optional[StepCallback],
        cancel_event: Optional[threading.Event],
    ):
        self.model_client = model_client
        self.on_step = on_step
        self.cancel_event = cancel_event

    def enter(self, step: GenerationStep) -> None:
        logger.info("Step %s (%d%%)", step.label, step.progress)
        if self.on_step:
            self.on_step(step)

    def complete(self, prompt: str) -> str:
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise GenerationCancelled("Generation was cancelled before the next model call.")
        return self.model_client.complete(prompt)


# ── Steps ─────────────────────────────────────────────────────────────────


def analyze_search_intent(
    run: StepRunner, templates: TemplateStore, titles: Sequence[str]
) -> SearchIntent:
    response = run.complete(build_search_intent_prompt(templates, titles))
    intent = parse_search_intent(response)
    if intent.is_empty():
        logger.warning("No search intent labels found in model response")
    return intent


def generate_outline(
    run: StepRunner, templates: TemplateStore, request: GenerationRequest, intent: SearchIntent
) -> list[OutlineSection]:
    response = run.complete(build_outline_prompt(templates, request, intent))
    logger.debug("Outline response:\n%s", response)
    outline = parse_outline(response)
    if not outline:
        logger.warning("No h2 headings found in outline response")
    logger.info("Parsed %d outline sections", len(outline))
    return outline


def generate_titles(run: StepRunner, templates: TemplateStore, request: GenerationRequest) -> list[str]:
    return parse_title_candidates(run.complete(build_titles_prompt(templates, request)))


def generate_lead_text(
    run: StepRunner,
    templates: TemplateStore,
    request: GenerationRequest,
    intent: SearchIntent,
    outline: Sequence[OutlineSection],
) -> str:
    return run.complete(build_lead_prompt(templates, request, intent, outline))


def is_closing_section(section: OutlineSection, marker: str = CLOSING_SECTION_MARKER) -> bool:
    return marker in section.heading


def generate_body(
    run: StepRunner,
    templates: TemplateStore,
    request: GenerationRequest,
    intent: SearchIntent,
    outline: Sequence[OutlineSection],
) -> str:
    """Write each section separately; the closing section belongs to the summary step."""
    parts: list[str] = []
    for section in outline:
        if is_closing_section(section):
            logger.info("Skipping closing section: %s", section.heading)
            continue
        logger.info("Writing section %d: %s", len(parts) + 1, section.heading)
        text = run.complete(build_body_prompt(templates, request, intent, outline, section))
        parts.append(text)

    body = "\n\n".join(parts)
    logger.info("Body complete (%d sections, %d chars)", len(parts), len(body))
    return body


def generate_summary(
    run: StepRunner,
    templates: TemplateStore,
    request: GenerationRequest,
    intent: SearchIntent,
    outline: Sequence[OutlineSection],
) -> str:
    return run.complete(build_summary_prompt(templates, request, intent, outline))


# ── Entry point ───────────────────────────────────────────────────────────


def generate_article(
    request: GenerationRequest,
    keyword_source: KeywordSource,
    model_client: CompletionClient,
    templates: TemplateStore,
    on_step: Optional[StepCallback] = None,
    cancel_event: Optional[threading.Event] = None,
) -> GeneratedArticle:
    """Run all seven steps for one request and assemble the article.

    Args:
        request: Validated generation request (defaults already applied).
        keyword_source: Supplies candidate titles for step 1.
        model_client: Anything with ``complete(prompt) -> str``.
        templates: Prompt templates loaded at startup.
        on_step: Optional callback invoked as each step starts and on completion.
        cancel_event: When set, no further model calls are issued and
            GenerationCancelled is raised.

    Returns:
        The finished GeneratedArticle.
    """
    run = StepRunner(model_client, on_step, cancel_event)
    start = time.time()
    logger.info("Generating article for %r", request.keyword)

    run.enter(GenerationStep.KEYWORD_RESEARCH)
    titles = list(keyword_source.fetch_candidate_titles(request.keyword))
    logger.info("Fetched %d candidate titles", len(titles))

    run.enter(GenerationStep.SEARCH_INTENT)
    intent = analyze_search_intent(run, templates, titles)

    run.enter(GenerationStep.OUTLINE)
    outline = generate_outline(run, templates, request, intent)

    run.enter(GenerationStep.TITLES)
    title_candidates = generate_titles(run, templates, request)

    run.enter(GenerationStep.LEAD)
    lead_text = generate_lead_text(run, templates, request, intent, outline)

    run.enter(GenerationStep.BODY)
    body = generate_body(run, templates, request, intent, outline)

    run.enter(GenerationStep.SUMMARY)
    summary = generate_summary(run, templates, request, intent, outline)

    article = GeneratedArticle(
        keyword=request.keyword,
        search_intent=intent,
        outline=tuple(outline),
        title_candidates=tuple(title_candidates),
        lead_text=lead_text,
        body=body,
        summary=summary,
        generated_at=datetime.now(timezone.utc),
    )
    run.enter(GenerationStep.COMPLETE)
    logger.info("Article for %r complete in %.1fs", request.keyword, time.time() - start)
    return article
