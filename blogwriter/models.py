"""Typed records passed between pipeline steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from blogwriter.errors import ValidationError


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


@dataclass(frozen=True)
class GenerationRequest:
    keyword: str
    genre: str
    theme: str
    authority: str = ""
    call_to_action: str = ""

    @classmethod
    def create(
        cls,
        keyword: str,
        genre: Optional[str] = None,
        theme: Optional[str] = None,
        authority: Optional[str] = None,
        call_to_action: Optional[str] = None,
    ) -> "GenerationRequest":
        """Validate the keyword and fill in defaults for the optional fields."""
        keyword = _text(keyword)
        if not keyword:
            raise ValidationError("A non-empty keyword is required.")
        return cls(
            keyword=keyword,
            genre=_text(genre) or keyword.split()[0],
            theme=_text(theme) or f"about {keyword}",
            authority=_text(authority),
            call_to_action=_text(call_to_action),
        )

    @classmethod
    def from_payload(cls, payload: Any) -> "GenerationRequest":
        """Build from a JSON request body (camelCase keys)."""
        if not isinstance(payload, dict):
            payload = {}
        return cls.create(
            keyword=payload.get("keyword"),
            genre=payload.get("genre"),
            theme=payload.get("theme"),
            authority=payload.get("authority"),
            call_to_action=payload.get("callToAction"),
        )


@dataclass(frozen=True)
class IntentDistribution:
    a: int = 0
    b: int = 0
    c: int = 0


@dataclass(frozen=True)
class SearchIntent:
    """Three intent labels ranked a > b > c by declared importance.

    The distribution counts are informational only: they are parsed
    independently and may disagree with the label ranking.
    """

    a: str = ""
    b: str = ""
    c: str = ""
    distribution: IntentDistribution = field(default_factory=IntentDistribution)

    def is_empty(self) -> bool:
        return not (self.a or self.b or self.c)

    def to_dict(self) -> dict:
        d = self.distribution
        return {
            "a": self.a,
            "b": self.b,
            "c": self.c,
            "distribution": {"a": d.a, "b": d.b, "c": d.c},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SearchIntent":
        dist = data.get("distribution") or {}
        return cls(
            a=data.get("a", ""),
            b=data.get("b", ""),
            c=data.get("c", ""),
            distribution=IntentDistribution(
                a=int(dist.get("a", 0)),
                b=int(dist.get("b", 0)),
                c=int(dist.get("c", 0)),
            ),
        )


@dataclass(frozen=True)
class OutlineSection:
    heading: str
    subheadings: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"heading": self.heading, "subheadings": list(self.subheadings)}


@dataclass(frozen=True)
class GeneratedArticle:
    keyword: str
    search_intent: SearchIntent
    outline: tuple[OutlineSection, ...]
    title_candidates: tuple[str, ...]
    lead_text: str
    body: str
    summary: str
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def full_text(self) -> str:
        """Lead title, lead text, body and summary as one copyable article."""
        title = self.title_candidates[0] if self.title_candidates else self.keyword
        return "\n\n".join([title, self.lead_text, self.body, self.summary])

    def to_dict(self) -> dict:
        return {
            "keyword": self.keyword,
            "searchIntent": self.search_intent.to_dict(),
            "outline": [s.to_dict() for s in self.outline],
            "titleCandidates": list(self.title_candidates),
            "leadText": self.lead_text,
            "body": self.body,
            "summary": self.summary,
            "generatedAt": self.generated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratedArticle":
        return cls(
            keyword=data["keyword"],
            search_intent=SearchIntent.from_dict(data.get("searchIntent") or {}),
            outline=tuple(
                OutlineSection(s["heading"], tuple(s.get("subheadings", [])))
                for s in data.get("outline", [])
            ),
            title_candidates=tuple(data.get("titleCandidates", [])),
            lead_text=data.get("leadText", ""),
            body=data.get("body", ""),
            summary=data.get("summary", ""),
            generated_at=datetime.fromisoformat(data["generatedAt"]),
        )
