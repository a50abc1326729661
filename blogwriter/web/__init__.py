"""HTTP API: generation, suggestion and health endpoints."""

from blogwriter.web.routes import create_blueprint, resolve_credentials

__all__ = ["create_blueprint", "resolve_credentials"]
