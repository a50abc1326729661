from __future__ import annotations

from blogwriter.models import IntentDistribution, OutlineSection, SearchIntent
from blogwriter.pipeline.parsers import (
    parse_outline,
    parse_search_intent,
    parse_title_candidates,
)


# -----------------------------
# parse_outline
# -----------------------------
def test_parse_outline_empty_input_returns_empty_list():
    assert parse_outline("") == []


def test_parse_outline_drops_h3_lines_before_any_h2():
    assert parse_outline("h3:Orphan\n  h3：Another orphan") == []


def test_parse_outline_groups_subheadings_under_headings():
    got = parse_outline("h2:Intro\nh3:Sub1\nh2:Body")
    assert got == [
        OutlineSection("Intro", ("Sub1",)),
        OutlineSection("Body", ()),
    ]


def test_parse_outline_accepts_fullwidth_and_halfwidth_colons():
    assert parse_outline("h2：Intro\n  h3：Sub1\nh2:Body") == parse_outline("h2:Intro\nh3:Sub1\nh2：Body")


def test_parse_outline_ignores_prose_and_trims_text():
    text = "Sure! Here is the outline:\n\nh2：  Getting started  \n   h3:  Packing light \nSome note\nh2:Summary\n"
    got = parse_outline(text)
    assert got == [
        OutlineSection("Getting started", ("Packing light",)),
        OutlineSection("Summary", ()),
    ]


def test_parse_outline_does_not_treat_indented_h2_as_heading():
    assert parse_outline("  h2:Indented\nh3:Sub") == []


# -----------------------------
# parse_search_intent
# -----------------------------
def test_parse_search_intent_labels_without_counts():
    got = parse_search_intent("a: informational\nb: commercial\nc: navigational")
    assert got == SearchIntent(
        a="informational",
        b="commercial",
        c="navigational",
        distribution=IntentDistribution(0, 0, 0),
    )


def test_parse_search_intent_reads_counts_from_marker_lines():
    text = (
        "a: learn basics\n"
        "b: compare options\n"
        "c: buy now\n"
        "[a] article count: 5\n"
        "- [b] article count: 3 articles\n"
        "[c] article count: none\n"
    )
    got = parse_search_intent(text)
    assert got.distribution == IntentDistribution(a=5, b=3, c=0)


def test_parse_search_intent_counts_do_not_need_to_follow_label_ranking():
    got = parse_search_intent("[a] article count: 1\n[b] article count: 7\n[c] article count: 2")
    assert got.distribution == IntentDistribution(a=1, b=7, c=2)


def test_parse_search_intent_trims_leading_whitespace_and_last_write_wins():
    got = parse_search_intent("   a: first\nb：second\na: replaced")
    assert got.a == "replaced"
    assert got.b == "second"
    assert got.c == ""


def test_parse_search_intent_missing_everything_gives_defaults():
    got = parse_search_intent("I could not classify these titles.")
    assert got == SearchIntent()
    assert got.is_empty()


# -----------------------------
# parse_title_candidates
# -----------------------------
def test_parse_title_candidates_keeps_first_five_in_order():
    text = "\n".join(f"Title {i}" for i in range(1, 9))
    assert parse_title_candidates(text) == ["Title 1", "Title 2", "Title 3", "Title 4", "Title 5"]


def test_parse_title_candidates_skips_blank_and_heading_lines():
    text = "# Title ideas\n\nCheap flights guide\n   \n## More\nHostels ranked\n"
    assert parse_title_candidates(text) == ["Cheap flights guide", "Hostels ranked"]
