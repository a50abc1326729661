from __future__ import annotations

import os
import time
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

from blogwriter.cache import ArticleCache, keyword_slug
from blogwriter.export import ensure_html, to_html, to_markdown
from blogwriter.models import GeneratedArticle, IntentDistribution, OutlineSection, SearchIntent


def make_article(keyword: str = "budget travel") -> GeneratedArticle:
    return GeneratedArticle(
        keyword=keyword,
        search_intent=SearchIntent("learn", "compare", "buy", IntentDistribution(4, 2, 1)),
        outline=(OutlineSection("Basics", ("Costs",)), OutlineSection("Summary")),
        title_candidates=("Travel on a Budget", "Cheap Trips"),
        lead_text="Lead.",
        body="## Basics\n\nSpend less.",
        summary="## Summary\n\nGo now.",
        generated_at=datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )


def test_keyword_slug():
    assert keyword_slug("  Budget Travel ") == "budget-travel"
    assert keyword_slug("c++ / rust?") == "c-rust"
    assert keyword_slug("???") == "article"


def test_cache_save_then_load(tmp_path: Path):
    cache = ArticleCache(tmp_path)
    article = make_article()

    path = cache.save(article)

    assert path == tmp_path / "budget-travel.json"
    assert cache.load("Budget Travel") == article


def test_cache_load_ignores_other_keyword_with_same_slug(tmp_path: Path):
    cache = ArticleCache(tmp_path)
    cache.save(make_article("c tips"))

    assert keyword_slug("c++ tips") == keyword_slug("c tips")
    assert cache.load("c++ tips") is None
    assert cache.load("C Tips").keyword == "c tips"


def test_cache_load_missing_returns_none(tmp_path: Path):
    assert ArticleCache(tmp_path / "nothing").load("x") is None
    assert ArticleCache(tmp_path / "nothing").load_latest() is None


def test_cache_load_latest_picks_newest_file(tmp_path: Path):
    cache = ArticleCache(tmp_path)
    older = cache.save(make_article("older"))
    cache.save(make_article("newer"))
    t0 = time.time()
    os.utime(older, (t0 - 100, t0 - 100))

    assert cache.load_latest().keyword == "newer"


def test_cache_ignores_corrupt_file(tmp_path: Path):
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    assert ArticleCache(tmp_path).load("broken") is None


def test_to_markdown_puts_first_title_on_top():
    md = to_markdown(make_article())
    assert md.startswith("# Travel on a Budget\n\nLead.\n\n## Basics")
    assert md.rstrip().endswith("Go now.")


def test_to_markdown_without_titles_uses_keyword_heading():
    article = replace(make_article(), title_candidates=())
    md = to_markdown(article)
    assert md.startswith("# budget travel\n\nLead.")
    assert md.count("## ") == 2


def test_to_html_converts_markdown():
    html = to_html(make_article())
    assert "<h1>Travel on a Budget</h1>" in html
    assert "<h2>Basics</h2>" in html


def test_ensure_html_keeps_existing_html():
    assert ensure_html("  <p>Already html</p> ") == "<p>Already html</p>"
