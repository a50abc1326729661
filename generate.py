#!/usr/bin/env python3
"""Generate a blog article for a keyword.

Usage:
    python generate.py "budget travel"                     # Generate (or reuse cached) article
    python generate.py "budget travel" --no-cache          # Regenerate even if cached
    python generate.py "budget travel" --genre travel --theme "about saving money on trips"
    python generate.py "budget travel" --authority "Travel writer for 10 years" --cta "Subscribe"
    python generate.py --show-last                         # Print the most recently cached article

Needs ANTHROPIC_API_KEY in .env. RAKKO_API_KEY is optional; without it the
free Google Suggest source is used.
"""

from __future__ import annotations

import argparse
import os
import sys

from blogwriter.cache import ArticleCache, keyword_slug
from blogwriter.config import (
    ANTHROPIC_API_KEY_ENV,
    ARTICLE_OUTPUT_DIR,
    CLAUDE_MODEL,
    CLAUDE_MODEL_ENV,
    RAKKO_API_KEY_ENV,
    configure_logging,
)
from blogwriter.errors import BlogWriterError, guidance_for
from blogwriter.export import to_html, to_markdown
from blogwriter.keywords import build_keyword_source, choose_keyword_provider
from blogwriter.loaders import TemplateStore
from blogwriter.models import GeneratedArticle, GenerationRequest
from blogwriter.pipeline import GenerationStep, ModelClient, generate_article


def print_step(step: GenerationStep):
    if step is GenerationStep.COMPLETE:
        print(f"  OK complete ({step.progress}%)")
    else:
        print(f"  -> {step.label.replace('_', ' ')} ({step.progress}%)...")


def save_outputs(article: GeneratedArticle) -> tuple[str, str]:
    """Write Markdown and HTML renderings next to each other."""
    os.makedirs(ARTICLE_OUTPUT_DIR, exist_ok=True)
    slug = keyword_slug(article.keyword)
    md_path = os.path.join(ARTICLE_OUTPUT_DIR, f"{slug}.md")
    html_path = os.path.join(ARTICLE_OUTPUT_DIR, f"{slug}.html")
    with open(md_path, "w", encoding="utf-8") as f:
        f.write(to_markdown(article))
    with open(html_path, "w", encoding="utf-8") as f:
        f.write(to_html(article))
    return md_path, html_path


def print_summary(article: GeneratedArticle):
    intent = article.search_intent
    print(f"\n{'='*60}")
    print(f"ARTICLE: {article.keyword}  (generated {article.generated_at:%Y-%m-%d %H:%M} UTC)")
    print(f"{'='*60}")
    print("Search intent:")
    print(f"  a: {intent.a}  [{intent.distribution.a} articles]")
    print(f"  b: {intent.b}  [{intent.distribution.b} articles]")
    print(f"  c: {intent.c}  [{intent.distribution.c} articles]")
    print(f"Outline ({len(article.outline)} sections):")
    for section in article.outline:
        print(f"  h2: {section.heading}")
        for sub in section.subheadings:
            print(f"    h3: {sub}")
    print("Title candidates:")
    for title in article.title_candidates:
        print(f"  - {title}")
    words = len(article.full_text().split())
    print(f"Length: {words} words")


def main():
    parser = argparse.ArgumentParser(description="Generate a blog article from a keyword")
    parser.add_argument("keyword", nargs="?", default="", help="Main keyword, e.g. 'budget travel'")
    parser.add_argument("--genre", default="", help="Genre (default: first word of keyword)")
    parser.add_argument("--theme", default="", help="Theme for title ideas (default: 'about <keyword>')")
    parser.add_argument("--authority", default="", help="Author credentials to mention in the lead")
    parser.add_argument("--cta", default="", help="Action the reader should take after reading")
    parser.add_argument("--no-cache", action="store_true", help="Regenerate even if a cached article exists")
    parser.add_argument("--show-last", action="store_true", help="Print the most recently cached article")
    parser.add_argument("--log-level", default="WARNING", help="Logging level for pipeline internals")
    args = parser.parse_args()

    configure_logging(args.log_level)
    cache = ArticleCache()

    if args.show_last:
        article = cache.load_latest()
        if not article:
            print("No cached articles yet.")
            sys.exit(1)
        print_summary(article)
        print(f"\n{to_markdown(article)}")
        return

    try:
        request = GenerationRequest.create(
            args.keyword,
            genre=args.genre,
            theme=args.theme,
            authority=args.authority,
            call_to_action=args.cta,
        )
    except BlogWriterError as e:
        print(f"Error: {e.message}")
        sys.exit(2)

    cached = None if args.no_cache else cache.load(request.keyword)
    if cached:
        print(f"Using cached article for '{request.keyword}' (use --no-cache to regenerate)")
        article = cached
    else:
        claude_key = os.getenv(ANTHROPIC_API_KEY_ENV, "")
        if not claude_key:
            print(f"Error: {ANTHROPIC_API_KEY_ENV} not set. Add it to your .env file.")
            sys.exit(1)
        model = os.getenv(CLAUDE_MODEL_ENV) or CLAUDE_MODEL
        choice = choose_keyword_provider(os.getenv(RAKKO_API_KEY_ENV, ""))

        print(f"Generating '{request.keyword}' ({model}, keywords: {choice.provider.value})")
        templates = TemplateStore.load()
        if templates.missing():
            print(f"  Warning: missing prompt templates: {', '.join(templates.missing())}")

        try:
            article = generate_article(
                request,
                build_keyword_source(choice),
                ModelClient(api_key=claude_key, model=model),
                templates,
                on_step=print_step,
            )
        except BlogWriterError as e:
            print(f"\nError: {e.message}")
            hint = guidance_for(e.message)
            if hint:
                print(f"Hint: {hint}")
            sys.exit(1)
        cache.save(article)

    print_summary(article)
    md_path, html_path = save_outputs(article)
    print(f"\nSaved to {md_path}")
    print(f"Saved to {html_path}")


if __name__ == "__main__":
    main()
