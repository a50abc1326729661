"""HTTP endpoints for article generation, keyword suggestions and health."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Mapping

from flask import Blueprint, jsonify, request

from blogwriter.config import (
    ANTHROPIC_API_KEY_ENV,
    API_VERSION,
    CLAUDE_KEY_HEADER,
    CLAUDE_MODEL,
    CLAUDE_MODEL_ENV,
    CLAUDE_MODEL_HEADER,
    RAKKO_API_KEY_ENV,
    RAKKO_KEY_HEADER,
)
from blogwriter.errors import AuthError, BlogWriterError, ValidationError, guidance_for
from blogwriter.keywords import KeywordProviderChoice, KeywordSource, choose_keyword_provider
from blogwriter.loaders.templates import TemplateStore
from blogwriter.models import GenerationRequest
from blogwriter.pipeline.generator import CompletionClient, generate_article

logger = logging.getLogger(__name__)

ModelClientFactory = Callable[[str, str], CompletionClient]
KeywordSourceFactory = Callable[[KeywordProviderChoice], KeywordSource]


@dataclass(frozen=True)
class Credentials:
    claude_key: str
    claude_model: str
    keyword_provider: KeywordProviderChoice


def _first(*values: str | None) -> str:
    for v in values:
        if v and v.strip():
            return v.strip()
    return ""


def resolve_credentials(headers: Mapping[str, str], environ: Mapping[str, str] = os.environ) -> Credentials:
    """Header value wins, then the environment, then empty."""
    return Credentials(
        claude_key=_first(headers.get(CLAUDE_KEY_HEADER), environ.get(ANTHROPIC_API_KEY_ENV)),
        claude_model=_first(headers.get(CLAUDE_MODEL_HEADER), environ.get(CLAUDE_MODEL_ENV), CLAUDE_MODEL),
        keyword_provider=choose_keyword_provider(
            _first(headers.get(RAKKO_KEY_HEADER), environ.get(RAKKO_API_KEY_ENV))
        ),
    )


def _key_prefix(key: str) -> str:
    return f"{key[:8]}..." if key else "none"


def create_blueprint(
    templates: TemplateStore,
    model_client_factory: ModelClientFactory,
    keyword_source_factory: KeywordSourceFactory,
) -> Blueprint:
    bp = Blueprint("blog", __name__)

    @bp.errorhandler(BlogWriterError)
    def handle_blogwriter_error(e: BlogWriterError):
        body = {"error": e.error, "message": e.message}
        hint = guidance_for(e.message) if e.status_code >= 500 else None
        if hint:
            body["hint"] = hint
        return jsonify(body), e.status_code

    @bp.post("/generate")
    def generate():
        article_request = GenerationRequest.from_payload(request.get_json(silent=True))

        creds = resolve_credentials(request.headers)
        logger.info(
            "Claude key %s (model %s), keyword provider %s",
            _key_prefix(creds.claude_key), creds.claude_model, creds.keyword_provider.provider.value,
        )
        if not creds.claude_key:
            raise AuthError("A Claude API key is required. Register one in the settings screen.")

        keyword_source = keyword_source_factory(creds.keyword_provider)
        model_client = model_client_factory(creds.claude_key, creds.claude_model)

        try:
            article = generate_article(article_request, keyword_source, model_client, templates)
        except BlogWriterError:
            logger.exception("Article generation failed for %r", article_request.keyword)
            raise
        except Exception as e:
            logger.exception("Article generation failed for %r", article_request.keyword)
            raise BlogWriterError(str(e)) from e
        return jsonify(article.to_dict())

    @bp.get("/suggestions")
    def suggestions():
        keyword = (request.args.get("keyword") or "").strip()
        if not keyword:
            raise ValidationError("The keyword query parameter is required.")

        creds = resolve_credentials(request.headers)
        keyword_source = keyword_source_factory(creds.keyword_provider)
        return jsonify({"suggestions": keyword_source.fetch_suggestions(keyword)})

    @bp.get("/health")
    def health():
        return jsonify({"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()})

    return bp


def create_index_blueprint() -> Blueprint:
    bp = Blueprint("index", __name__)

    @bp.get("/")
    def index():
        return jsonify({
            "message": "Auto Blog Writing API",
            "version": API_VERSION,
            "endpoints": {
                "health": "/api/blog/health",
                "generate": "POST /api/blog/generate",
                "suggestions": "GET /api/blog/suggestions?keyword=xxx",
            },
        })

    return bp
