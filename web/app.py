"""
Flask application serving the background image catalog and its images.

Routes:
- /config.json - Public catalog document (GET, OPTIONS)
- /<path>      - Image bytes for any catalog ``src`` or ``thumb_src``
"""

import argparse
import logging
import sys
from pathlib import Path
from urllib.parse import quote

from flask import Flask, Response, request, send_file
from werkzeug.exceptions import HTTPException

from catalog import Catalog, load_catalog
from config import (
    CATALOG_ALLOWED_METHODS,
    CATALOG_ENDPOINT,
    CONFIG_FILENAME,
    DEFAULT_ASSET_ROOT,
    DEFAULT_HOST,
    DEFAULT_PORT,
)
from logging_utils import add_logging_args, configure_logging, log_request
from .router import CatalogRouter, decode_request_path

logger = logging.getLogger(__name__)


def _raw_request_uri() -> str:
    """The request target as sent by the client, still percent-encoded."""
    raw = request.environ.get("RAW_URI") or request.environ.get("REQUEST_URI")
    if raw:
        return raw
    query = request.query_string.decode("latin-1")
    return quote(request.path) + (f"?{query}" if query else "")


def create_app(catalog: Catalog) -> Flask:
    """Create the Flask application for an already-built catalog."""
    app = Flask(__name__, static_folder=None)
    router = CatalogRouter(catalog)
    app.extensions["catalog_router"] = router

    @app.after_request
    def add_cors_header(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        log_request(
            logger, request.remote_addr, request.method, _raw_request_uri(), response.status_code
        )
        return response

    def serve_catalog():
        """Serve the catalog document built at startup."""
        if request.method == "OPTIONS":
            return Response(status=200, headers={"Allow": CATALOG_ALLOWED_METHODS})
        return Response(catalog.payload, status=200, mimetype="application/json")

    def serve_asset(path: str):
        """Serve the image registered under the decoded public path."""
        if request.method == "OPTIONS":
            return app.make_default_options_response()
        local_path = router.resolve_asset(path)
        if local_path is None:
            return Response("Not found", status=404, mimetype="text/plain")
        logger.info("Served: %s", local_path)
        return send_file(local_path, conditional=False, etag=False)

    @app.route("/", defaults={"path": ""}, methods=["GET", "OPTIONS"])
    @app.route("/<path:path>", methods=["GET", "OPTIONS"])
    def dispatch(path):
        """Route a request to the catalog document or to an asset."""
        decoded = decode_request_path(_raw_request_uri())
        if router.is_catalog_request(decoded):
            return serve_catalog()
        return serve_asset(decoded)

    @app.errorhandler(Exception)
    def handle_internal_error(exc):
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Failed to serve %s %s", request.method, request.path)
        return Response(f"Internal error: {exc}", status=503, mimetype="text/plain")

    return app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve the background image catalog and its images."
    )
    parser.add_argument(
        "host", nargs="?", default=DEFAULT_HOST,
        help=f"Interface to listen on (default: {DEFAULT_HOST})",
    )
    parser.add_argument(
        "port", nargs="?", type=int, default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--root", default=DEFAULT_ASSET_ROOT,
        help=f"Directory holding the config and images (default: {DEFAULT_ASSET_ROOT})",
    )
    parser.add_argument(
        "--config",
        help=f"Config file (default: <root>/{CONFIG_FILENAME})",
    )
    add_logging_args(parser)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Build the catalog, then run the web server."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.verbose, args.quiet)

    asset_root = Path(args.root).resolve()
    config_path = Path(args.config).resolve() if args.config else asset_root / CONFIG_FILENAME

    # The listener only starts once the catalog is complete
    try:
        catalog = load_catalog(config_path, asset_root)
    except (OSError, ValueError) as exc:
        logger.error("Cannot load config %s: %s", config_path, exc)
        return 1

    app = create_app(catalog)

    logger.info("Server is running on http://%s:%s", args.host, args.port)
    logger.info("Catalog at http://%s:%s%s", args.host, args.port, CATALOG_ENDPOINT)
    logger.info("Press Ctrl+C to stop")
    app.run(host=args.host, port=args.port, debug=False)
    return 0


if __name__ == '__main__':
    sys.exit(main())
