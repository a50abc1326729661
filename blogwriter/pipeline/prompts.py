"""Render each step's prompt from its template and the accumulated context."""

from __future__ import annotations

import logging
import re
from typing import Sequence

from blogwriter.config import (
    INTENT_RANKING_SENTENCE,
    TITLE_PLACEHOLDER_PATTERN,
    TITLE_SECTION_HEADER,
)
from blogwriter.loaders.templates import TemplateStore, render
from blogwriter.models import GenerationRequest, OutlineSection, SearchIntent

logger = logging.getLogger(__name__)

_TITLE_PLACEHOLDER_RE = re.compile(TITLE_PLACEHOLDER_PATTERN, re.MULTILINE)


# ── Context blocks ────────────────────────────────────────────────────────


def format_search_intent(intent: SearchIntent) -> str:
    return f"a:{intent.a}\nb:{intent.b}\nc:{intent.c}\n{INTENT_RANKING_SENTENCE}"


def format_section(section: OutlineSection) -> str:
    lines = [f"h2：{section.heading}"]
    lines.extend(f"  h3：{sub}" for sub in section.subheadings)
    return "\n".join(lines)


def format_outline(outline: Sequence[OutlineSection]) -> str:
    return "\n\n".join(format_section(s) for s in outline)


# ── Step prompts ──────────────────────────────────────────────────────────


def _template(templates: TemplateStore, name: str) -> str:
    text = templates.get(name)
    if not text:
        logger.warning("Template %r is empty; the %s prompt will be empty", name, name)
    return text


def build_search_intent_prompt(templates: TemplateStore, titles: Sequence[str]) -> str:
    """Drop the per-article placeholder lines and list the real titles instead."""
    template = _template(templates, "search_intent")
    if not template:
        return ""
    title_list = "\n".join(f"- {t}" for t in titles)
    prompt = _TITLE_PLACEHOLDER_RE.sub("", template)
    return prompt.replace(TITLE_SECTION_HEADER, f"{TITLE_SECTION_HEADER}\n{title_list}", 1)


def build_outline_prompt(
    templates: TemplateStore, request: GenerationRequest, intent: SearchIntent
) -> str:
    return render(_template(templates, "outline"), {
        "genre": request.genre,
        "keyword": request.keyword,
        "searchIntent": format_search_intent(intent),
    })


def build_titles_prompt(templates: TemplateStore, request: GenerationRequest) -> str:
    return render(_template(templates, "titles"), {"theme": request.theme})


def build_lead_prompt(
    templates: TemplateStore,
    request: GenerationRequest,
    intent: SearchIntent,
    outline: Sequence[OutlineSection],
) -> str:
    return render(_template(templates, "lead"), {
        "keyword": request.keyword,
        "searchIntent": format_search_intent(intent),
        "authority": request.authority,
        "outline": format_outline(outline),
    })


def build_body_prompt(
    templates: TemplateStore,
    request: GenerationRequest,
    intent: SearchIntent,
    outline: Sequence[OutlineSection],
    section: OutlineSection,
) -> str:
    return render(_template(templates, "body"), {
        "keyword": request.keyword,
        "searchIntent": format_search_intent(intent),
        "outline": format_outline(outline),
        "targetSection": format_section(section),
    })


def build_summary_prompt(
    templates: TemplateStore,
    request: GenerationRequest,
    intent: SearchIntent,
    outline: Sequence[OutlineSection],
) -> str:
    return render(_template(templates, "summary"), {
        "keyword": request.keyword,
        "searchIntent": format_search_intent(intent),
        "callToAction": request.call_to_action,
        "outline": format_outline(outline),
    })
