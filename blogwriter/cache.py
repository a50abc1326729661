"""JSON file cache of generated articles, keyed by keyword.

Kept outside the pipeline: callers decide when to load or save.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Optional

from blogwriter.config import CACHE_DIR
from blogwriter.models import GeneratedArticle

logger = logging.getLogger(__name__)


def keyword_slug(keyword: str) -> str:
    """'Budget Travel' -> 'budget-travel'. Non-ASCII letters are kept."""
    slug = re.sub(r"[^\w]+", "-", keyword.strip().lower()).strip("-")
    return slug or "article"


def _same_keyword(a: str, b: str) -> bool:
    """Different keywords can share a slug ('c tips' and 'c++ tips')."""
    return a.strip().casefold() == b.strip().casefold()


class ArticleCache:
    def __init__(self, cache_dir: Optional[Path] = None):
        self.cache_dir = Path(cache_dir or CACHE_DIR)

    def path_for(self, keyword: str) -> Path:
        return self.cache_dir / f"{keyword_slug(keyword)}.json"

    def save(self, article: GeneratedArticle) -> Path:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(article.keyword)
        path.write_text(
            json.dumps(article.to_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        logger.info("Cached article for %r at %s", article.keyword, path)
        return path

    def load(self, keyword: str) -> Optional[GeneratedArticle]:
        path = self.path_for(keyword)
        if not path.exists():
            return None
        article = self._read(path)
        if article is not None and not _same_keyword(article.keyword, keyword):
            logger.info("Cache file %s holds %r, not %r; ignoring", path, article.keyword, keyword)
            return None
        return article

    def load_latest(self) -> Optional[GeneratedArticle]:
        if not self.cache_dir.exists():
            return None
        files = sorted(self.cache_dir.glob("*.json"), key=lambda p: p.stat().st_mtime)
        return self._read(files[-1]) if files else None

    def _read(self, path: Path) -> Optional[GeneratedArticle]:
        try:
            return GeneratedArticle.from_dict(json.loads(path.read_text(encoding="utf-8")))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Ignoring unreadable cache file %s: %s", path, e)
            return None
