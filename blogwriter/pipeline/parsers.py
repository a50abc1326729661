"""Turn free-form model output into typed structures.

The model is asked for a fixed line format, but nothing guarantees it. These
parsers never raise: anything they cannot match is skipped and missing fields
fall back to empty strings, zero counts or an empty outline.
"""

from __future__ import annotations

import re

from blogwriter.config import MAX_TITLE_CANDIDATES
from blogwriter.models import IntentDistribution, OutlineSection, SearchIntent

# Half-width and full-width colons are used interchangeably by the model
_LABEL_RE = re.compile(r"^([abc])[:：](.*)$")
_COUNT_MARKERS = {label: f"[{label}] article count" for label in "abc"}
_DIGITS_RE = re.compile(r"\d+")

_H2_RE = re.compile(r"^h2[：:]\s*(.+)")
_H3_RE = re.compile(r"^\s*h3[：:]\s*(.+)")


def parse_search_intent(text: str) -> SearchIntent:
    """Extract the a/b/c intent labels and their article counts."""
    labels = {"a": "", "b": "", "c": ""}
    counts = {"a": 0, "b": 0, "c": 0}

    for line in (text or "").split("\n"):
        stripped = line.strip()
        m = _LABEL_RE.match(stripped)
        if m:
            labels[m.group(1)] = m.group(2).strip()
            continue
        for label, marker in _COUNT_MARKERS.items():
            if marker in line:
                digits = _DIGITS_RE.search(line)
                counts[label] = int(digits.group(0)) if digits else 0
                break

    return SearchIntent(
        a=labels["a"],
        b=labels["b"],
        c=labels["c"],
        distribution=IntentDistribution(**counts),
    )


def parse_outline(text: str) -> list[OutlineSection]:
    """Collect h2 headings and their h3 subheadings, in order.

    h3 lines that appear before the first h2 have no section to belong to
    and are dropped.
    """
    outline: list[OutlineSection] = []
    heading = None
    subheadings: list[str] = []

    for line in (text or "").split("\n"):
        h2 = _H2_RE.match(line)
        if h2:
            if heading is not None:
                outline.append(OutlineSection(heading, tuple(subheadings)))
            heading = h2.group(1).strip()
            subheadings = []
            continue
        h3 = _H3_RE.match(line)
        if h3 and heading is not None:
            subheadings.append(h3.group(1).strip())

    if heading is not None:
        outline.append(OutlineSection(heading, tuple(subheadings)))
    return outline


def parse_title_candidates(text: str, limit: int = MAX_TITLE_CANDIDATES) -> list[str]:
    """First `limit` non-blank lines that are not Markdown headings."""
    lines = [
        line for line in (text or "").split("\n")
        if line.strip() and not line.startswith("#")
    ]
    return lines[:limit]
