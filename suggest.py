#!/usr/bin/env python3
"""Print keyword suggestions and related keywords.

Usage:
    python suggest.py "budget travel"             # Suggestions
    python suggest.py "budget travel" --related   # Related keywords

Uses the Rakko Keyword API when RAKKO_API_KEY is set, Google Suggest otherwise.
"""

from __future__ import annotations

import argparse
import os
import sys

from blogwriter.config import RAKKO_API_KEY_ENV, configure_logging
from blogwriter.errors import KeywordProviderError
from blogwriter.keywords import build_keyword_source, choose_keyword_provider


def main():
    parser = argparse.ArgumentParser(description="Keyword suggestions for blog planning")
    parser.add_argument("keyword", help="Seed keyword")
    parser.add_argument("--related", action="store_true", help="Show related keywords instead of suggestions")
    args = parser.parse_args()

    configure_logging("WARNING")
    keyword = args.keyword.strip()
    if not keyword:
        print("Error: keyword is required")
        sys.exit(2)

    choice = choose_keyword_provider(os.getenv(RAKKO_API_KEY_ENV, ""))
    source = build_keyword_source(choice)

    try:
        results = source.fetch_related_keywords(keyword) if args.related else source.fetch_suggestions(keyword)
    except KeywordProviderError as e:
        print(f"Error: {e.message}")
        sys.exit(1)

    kind = "Related keywords" if args.related else "Suggestions"
    print(f"{kind} for '{keyword}' ({source.name}):")
    for r in results:
        print(f"  - {r}")


if __name__ == "__main__":
    main()
