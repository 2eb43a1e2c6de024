# app/__init__.py
# This file contains the application factory. It sets up the core app,
# builds the language catalog, and registers all the blueprints.
from dotenv import load_dotenv
from flask import Flask, g, render_template, request
from werkzeug.exceptions import HTTPException
import os
import time

from app.catalog import LanguageCatalog

CATALOG_KEY = "language_catalog"

ENV_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env")


def _env_flag(name):
    """True when the variable is set to 1/true/yes/on (any case)."""
    return os.environ.get(name, "0").strip().lower() in ("1", "true", "yes", "on")


def load_config():
    """
    Read settings from the environment (and a project-level .env, if any).
    Variables already set in the environment win over the .env file.
    """
    load_dotenv(ENV_PATH, override=False)

    port = os.environ.get("LANGUAGES_PORT", "3000")
    try:
        port = int(port)
    except ValueError:
        raise ValueError(f"LANGUAGES_PORT must be an integer, got {port!r}") from None

    return {
        "HOST": os.environ.get("LANGUAGES_HOST", "127.0.0.1"),
        "PORT": port,
        "DEBUG": _env_flag("LANGUAGES_DEBUG"),
        "LOG_LEVEL": os.environ.get("LANGUAGES_LOG_LEVEL", "DEBUG").upper(),
    }


def _install_tracing(app):
    """Log every request with its status and how long it took."""

    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _trace_request(response):
        started = g.get("request_started")
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        app.logger.debug(
            f"[trace] {request.method} {request.full_path.rstrip('?')} "
            f"-> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response


def _install_error_pages(app):
    @app.errorhandler(HTTPException)
    def _http_error(e):
        if 400 <= e.code < 500:
            app.logger.warning(f"[errors] {e.code} {request.path}: {e.description}")
        else:
            app.logger.error(f"[errors] {e.code} {request.path}: {e.description}")
        # Keep the headers the exception carries (e.g. Allow on 405).
        response = e.get_response()
        response.data = render_template("error.html", error=e)
        response.content_type = "text/html; charset=utf-8"
        return response


def create_app(config=None, catalog=None):
    """
    Creates and configures an instance of the Flask application.
    This pattern is called the 'Application Factory'.

    `config` overrides values read from the environment; `catalog` replaces
    the default language catalog (handy in tests).
    """
    # Static files live in app/static but are served under /assets.
    app = Flask(__name__, static_url_path="/assets")

    app.config.update(load_config())
    if config:
        app.config.update(config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # --- Shared, read-only state ---
    # Built once here; handlers reach it through current_app.
    app.extensions[CATALOG_KEY] = catalog if catalog is not None else LanguageCatalog()
    app.logger.info(f"[create_app] Catalog ready with {len(app.extensions[CATALOG_KEY])} languages.")

    with app.app_context():
        # --- Import and Register Blueprints ---
        from .pages.routes import pages_bp
        app.register_blueprint(pages_bp)

        from .languages import languages_bp
        app.register_blueprint(languages_bp, url_prefix="/languages")

    _install_tracing(app)
    _install_error_pages(app)

    return app
