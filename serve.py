#!/usr/bin/env python3
"""Run the blog generation HTTP API.

Usage:
    python serve.py                 # http://127.0.0.1:3001/api/blog
    python serve.py --port 8080

API keys can be sent per request (X-Claude-API-Key, X-Rakko-API-Key,
X-Claude-Model headers) or set in .env.
"""

from __future__ import annotations

import argparse

from blogwriter.app_factory import create_app
from blogwriter.config import configure_logging


def main():
    parser = argparse.ArgumentParser(description="Serve the blog generation API")
    parser.add_argument("--host", default=None, help="Bind address (default from config)")
    parser.add_argument("--port", type=int, default=0, help="Port (default from config)")
    args = parser.parse_args()

    configure_logging()
    app = create_app()
    host = args.host or app.config["HOST"]
    port = args.port or app.config["PORT"]

    print(f"Server running at http://{host}:{port}")
    print(f"API endpoint: http://{host}:{port}/api/blog")
    app.run(host=host, port=port, debug=app.config["DEBUG"], threaded=True)


if __name__ == "__main__":
    main()
