"""
ORBIT1 Site - Landing page and live globe feed
Flask application serving the mission page, the satellite data its globe
plots, and a social card preview image.
"""

import traceback
from datetime import datetime, timezone
from typing import Optional

import structlog
from flask import Flask, Response, jsonify, render_template, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import SiteConfig
from orbit_site import __version__
from orbit_site.catalog import CatalogClient
from orbit_site.content import page_context
from orbit_site.models import GlobeData
from orbit_site.orbit_path import planned_orbit
from orbit_site.preview import render_preview
from orbit_site.tracker import compute_positions

logger = structlog.get_logger(__name__)


def build_globe_data(client: CatalogClient, when: Optional[datetime] = None) -> GlobeData:
    """Fetch the catalog, propagate to `when` (default now) and attach the planned path"""
    if when is None:
        when = datetime.now(timezone.utc)

    satellites = compute_positions(client.fetch_records(), when)
    return GlobeData(
        satellites=satellites,
        path=planned_orbit(),
        count=len(satellites),
        generated_at=when,
    )


def create_app(config: Optional[SiteConfig] = None, client: Optional[CatalogClient] = None) -> Flask:
    """
    Application factory.

    Args:
        config: Runtime settings (default: read from the environment)
        client: Catalog client (default: built from config)
    """
    config = config or SiteConfig()
    client = client or CatalogClient(
        config.TLE_URLS,
        timeout=config.HTTP_TIMEOUT,
        cache_ttl=config.CACHE_TTL,
    )

    app = Flask(__name__)
    app.config["SITE"] = config
    app.extensions["orbit1_catalog"] = client
    CORS(app, resources={r"/api/*": {"origins": "*"}}, send_wildcard=True)

    @app.route("/", methods=["GET"])
    def index():
        """Landing page"""
        return render_template(
            "index.html",
            planned_path=planned_orbit().model_dump(mode="json"),
            **page_context(config.REPO_URL),
        )

    @app.route("/api/globe", methods=["GET"])
    def globe_data():
        """Live satellite sub-points plus the planned mission path"""
        data = build_globe_data(client)
        logger.info("Served globe data", satellites=data.count)
        return jsonify(data.model_dump(mode="json"))

    @app.route("/og-image.png", methods=["GET"])
    def og_image():
        """Social card preview"""
        png = render_preview(build_globe_data(client))
        return Response(png, mimetype="image/png")

    @app.route("/health", methods=["GET"])
    def health_check():
        """Service status"""
        return jsonify({
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": __version__,
            "configuration": {
                "sources": client.urls,
                "cache_ttl": client.cache_ttl,
            },
        }), 200

    @app.errorhandler(404)
    def not_found(error):
        if request.path.startswith("/api/"):
            return jsonify({"error": "Not found", "path": request.path}), 404
        return error

    @app.errorhandler(Exception)
    def handle_error(error):
        """Global error handler"""
        if isinstance(error, HTTPException):
            return error
        logger.error("Unhandled error", error=str(error), traceback=traceback.format_exc())
        return jsonify({
            "error": "Internal server error",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }), 500

    return app
