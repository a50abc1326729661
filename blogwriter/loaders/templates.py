"""Load the prompt templates and fill in their {placeholder} tokens."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Mapping, Optional

from blogwriter.config import TEMPLATE_FILES, TEMPLATES_DIR

logger = logging.getLogger(__name__)


class TemplateStore:
    """Read-only set of named prompt templates, loaded once at startup.

    A template whose file is missing or unreadable resolves to an empty string so the
    service keeps running; every prompt rendered from it is empty as well.
    """

    def __init__(self, templates: Mapping[str, str]):
        self._templates = dict(templates)

    @classmethod
    def load(
        cls,
        templates_dir: Optional[Path] = None,
        files: Mapping[str, str] = TEMPLATE_FILES,
    ) -> "TemplateStore":
        templates_dir = Path(templates_dir or TEMPLATES_DIR)
        logger.info("Loading prompt templates from %s", templates_dir)

        templates = {}
        for name, filename in files.items():
            path = templates_dir / filename
            try:
                templates[name] = path.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.warning("Prompt template not found: %s", path)
                templates[name] = ""
                continue
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Prompt template unreadable: %s (%s)", path, e)
                templates[name] = ""
                continue
            logger.info("Loaded %s (%d chars)", filename, len(templates[name]))

        loaded = sum(1 for t in templates.values() if t)
        logger.info("%d/%d prompt templates loaded", loaded, len(files))
        return cls(templates)

    def get(self, name: str) -> str:
        return self._templates.get(name, "")

    def missing(self) -> list[str]:
        """Names of templates that resolved to empty text."""
        return [name for name, text in self._templates.items() if not text]


def render(template: str, substitutions: Mapping[str, str]) -> str:
    """Replace every ``{name}`` occurrence for each key in ``substitutions``.

    Replacement is a single pass: values that happen to contain ``{...}``
    text are not expanded again.
    """
    if not template:
        return ""
    if not substitutions:
        return template

    pattern = re.compile(
        "|".join(re.escape("{" + name + "}") for name in substitutions)
    )
    return pattern.sub(lambda m: substitutions[m.group(0)[1:-1]], template)
