"""Flask application factory wiring templates, model client and keyword sources."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from blogwriter.config import DEBUG, HOST, PORT
from blogwriter.keywords import build_keyword_source
from blogwriter.loaders.templates import TemplateStore
from blogwriter.pipeline.model_client import ModelClient
from blogwriter.web.routes import (
    KeywordSourceFactory,
    ModelClientFactory,
    create_blueprint,
    create_index_blueprint,
)

logger = logging.getLogger(__name__)


def _default_model_client(api_key: str, model: str) -> ModelClient:
    return ModelClient(api_key=api_key, model=model)


def create_app(
    templates: Optional[TemplateStore] = None,
    model_client_factory: Optional[ModelClientFactory] = None,
    keyword_source_factory: Optional[KeywordSourceFactory] = None,
) -> Flask:
    templates = templates or TemplateStore.load()
    missing = templates.missing()
    if missing:
        logger.warning("Prompt templates missing: %s", ", ".join(missing))

    app = Flask(__name__)
    app.register_blueprint(create_index_blueprint())
    app.register_blueprint(
        create_blueprint(
            templates,
            model_client_factory or _default_model_client,
            keyword_source_factory or build_keyword_source,
        ),
        url_prefix="/api/blog",
    )

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error")
        return jsonify({"error": "Internal Server Error", "message": str(e)}), 500

    app.config["HOST"] = HOST
    app.config["PORT"] = PORT
    app.config["DEBUG"] = DEBUG

    return app
