"""Central configuration for the blog article generation pipeline."""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = ROOT_DIR / "data"
TEMPLATES_DIR = Path(os.getenv("BLOGWRITER_TEMPLATES_DIR", DATA_DIR / "templates"))
ARTICLE_OUTPUT_DIR = ROOT_DIR / "output" / "articles"
CACHE_DIR = DATA_DIR / "cache"

# Prompt template files, one per model-backed pipeline step
TEMPLATE_FILES = {
    "search_intent": "1_search_intent.txt",
    "outline": "2_outline.txt",
    "titles": "3_titles.txt",
    "lead": "4_lead.txt",
    "body": "5_body.txt",
    "summary": "6_summary.txt",
}

# ── API keys ───────────────────────────────────────────────────────────────
# Names only; values are resolved per request (header first, then env).
ANTHROPIC_API_KEY_ENV = "ANTHROPIC_API_KEY"
RAKKO_API_KEY_ENV = "RAKKO_API_KEY"
CLAUDE_MODEL_ENV = "CLAUDE_MODEL"

CLAUDE_KEY_HEADER = "X-Claude-API-Key"
RAKKO_KEY_HEADER = "X-Rakko-API-Key"
CLAUDE_MODEL_HEADER = "X-Claude-Model"

# Credential values containing any of these are treated as unset
PLACEHOLDER_CREDENTIAL_MARKERS = ("your_", "placeholder", "example")

# ── Claude settings ────────────────────────────────────────────────────────
CLAUDE_MODEL = "claude-haiku-4-5-20251001"
CLAUDE_MAX_TOKENS = 4096
MODEL_TIMEOUT_SECONDS = 300.0  # body sections take minutes on long outlines
MODEL_MAX_RETRIES = 0  # a failed step aborts the run; no automatic retries

# ── Keyword providers ──────────────────────────────────────────────────────
RAKKO_API_BASE_URL = "https://api.related-keywords.com"
GOOGLE_SUGGEST_URL = "http://suggestqueries.google.com/complete/search"
KEYWORD_HTTP_TIMEOUT = 15  # seconds
MAX_CANDIDATE_TITLES = 10
MAX_RELATED_KEYWORDS = 10

# ── Prompt markers ─────────────────────────────────────────────────────────
# Heading of the outline section that is written by the summary step
CLOSING_SECTION_MARKER = "Summary"
TITLE_SECTION_HEADER = "#Article titles"
TITLE_PLACEHOLDER_PATTERN = r"^- \[Title of article \d+ goes here\][ \t]*\n?"
INTENT_RANKING_SENTENCE = "The importance of the search intents is a > b > c."
MAX_TITLE_CANDIDATES = 5

# ── Web server ─────────────────────────────────────────────────────────────
HOST = os.getenv("BLOGWRITER_HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3001"))
DEBUG = os.getenv("BLOGWRITER_DEBUG", "").lower() in ("1", "true", "yes")
API_VERSION = "1.0.0"

# ── Logging ────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send package logs to stderr at the given level."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
