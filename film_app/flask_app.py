"""
Flask application factory.

Responsibilities:
- Jinja2 SSR of the dashboard shell (tab buttons + empty panels).
- Static files (Chart.js tab controller).
- The browser fetches chart payloads from FastAPI.
"""

from flask import Flask, redirect, url_for

from film_app.core.config import settings
from film_app.core.logging_setup import setup_logging


def create_flask_app() -> Flask:
    """Application factory for Flask."""
    setup_logging()

    app = Flask(
        __name__,
        template_folder="templates",
        static_folder="static",
    )

    app.config["SECRET_KEY"] = settings.FLASK_SECRET_KEY
    app.config["DEBUG"] = settings.DEBUG
    app.config["API_BASE_URL"] = settings.API_BASE_URL

    # ── Blueprints ───────────────────────────────────────────
    from film_app.routes.dashboard import dashboard_bp

    app.register_blueprint(dashboard_bp)

    # ── Root redirect ────────────────────────────────────────
    @app.route("/")
    def index():
        return redirect(url_for("dashboard.index"))

    # ── Error handlers ───────────────────────────────────────
    @app.errorhandler(404)
    def not_found(e):
        return _render_error(404, "Page not found"), 404

    @app.errorhandler(500)
    def server_error(e):
        return _render_error(500, "Internal server error"), 500

    return app


def _render_error(code: int, message: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <title>Error {code}</title>
</head>
<body style="font-family:sans-serif;text-align:center;padding-top:4rem">
  <h1>{code}</h1>
  <p>{message}</p>
  <a href="/">Back to the dashboard</a>
</body>
</html>"""
