"""Render a generated article as Markdown or HTML."""

from __future__ import annotations

import markdown as md_lib

from blogwriter.models import GeneratedArticle


def to_markdown(article: GeneratedArticle) -> str:
    """Full article: chosen title as H1, then lead, body and summary."""
    title = article.title_candidates[0] if article.title_candidates else article.keyword
    sections = [f"# {title}", article.lead_text.strip(), article.body.strip(), article.summary.strip()]
    return "\n\n".join(s for s in sections if s) + "\n"


def ensure_html(text: str) -> str:
    """If the text already looks like HTML keep it, otherwise convert from markdown."""
    html_indicators = ["<h2>", "<h2 ", "<p>", "<p ", "<a href="]
    if any(indicator in text for indicator in html_indicators):
        return text.strip()

    return md_lib.markdown(text, extensions=["extra", "sane_lists", "smarty"])


def to_html(article: GeneratedArticle) -> str:
    return ensure_html(to_markdown(article))
