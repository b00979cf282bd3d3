from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask, g, jsonify, url_for

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_FANOUT_WORKERS, DEFAULT_REQUEST_TIMEOUT
from .core.exceptions import SessionExpiredError
from .employees.controller import register as register_employees
from .session.controller import register as register_session
from .session.store import FlaskSessionTokenStore


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_URL"] = getattr(settings, "API_URL")
    app.config["REQUEST_TIMEOUT"] = float(getattr(settings, "REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT))
    app.config["FANOUT_WORKERS"] = int(getattr(settings, "FANOUT_WORKERS", DEFAULT_FANOUT_WORKERS))
    app.config["TIMEZONE"] = getattr(settings, "TIMEZONE", "UTC")

    if app.config["DEBUG"]:
        print(
            "[hr-console] settings=", settings_module,
            " api=", app.config["API_URL"],
            " tz=", app.config["TIMEZONE"],
        )

    def get_container() -> Container:
        # One container per request: the token lives in the caller's session cookie.
        if "container" not in g:
            g.container = build_container(
                api_url=app.config["API_URL"],
                token_store=FlaskSessionTokenStore(),
                http=app.extensions.get("hr_console.http"),
                timeout=app.config["REQUEST_TIMEOUT"],
                timezone=app.config["TIMEZONE"],
                fanout_workers=app.config["FANOUT_WORKERS"],
                debug=app.config["DEBUG"],
            )
        return g.container

    @app.errorhandler(SessionExpiredError)
    def session_expired(e: SessionExpiredError):
        return jsonify({"message": "Session expired, please sign in again", "redirect": url_for("login")}), 401

    register_session(app, get_container)
    register_employees(app, get_container)
    register_attendance(app, get_container)

    return app
