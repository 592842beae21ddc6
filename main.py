#!/usr/bin/env python3
"""
CompanyDB - Company import web application
==========================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.
"""

import logging

from flask import Flask, abort, jsonify, send_from_directory

import config
from db import init_db
from api import api_bp


def create_app(db_url: str | None = None) -> Flask:
    """Flask application factory."""

    app = Flask(__name__, static_folder=None)
    app.config["MAX_CONTENT_LENGTH"] = config.MAX_UPLOAD_BYTES

    # ── Initialise database ─────────────────────────────────────────
    init_db(db_url or config.DB_URL)

    # ── Register blueprints ─────────────────────────────────────────
    app.register_blueprint(api_bp)

    # ── Built UI (single-page app) ──────────────────────────────────
    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def serve_ui(path):
        """Serve the built frontend, falling back to index.html for client routes."""
        if path.startswith("api/"):
            abort(404)
        static_dir = config.STATIC_DIR
        if path and (static_dir / path).is_file():
            return send_from_directory(static_dir, path)
        if (static_dir / "index.html").is_file():
            return send_from_directory(static_dir, "index.html")
        if not path:
            return "API is running..."
        abort(404)

    # ── Error handlers ──────────────────────────────────────────────
    @app.errorhandler(404)
    def _404(e):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(500)
    def _500(e):
        return jsonify({"error": "internal server error"}), 500

    return app


def main():
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 56)
    print("  CompanyDB - Company Importer")
    print("=" * 56)

    app = create_app()
    print(f"  Database: {config.DB_URL}")

    print(f"\n  http://{config.HOST}:{config.PORT}")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
