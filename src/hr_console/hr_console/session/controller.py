from __future__ import annotations

import traceback
from typing import Callable

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ApiError, AuthenticationError


def register(app: Flask, get_container: Callable[[], Container]) -> None:
    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        container = get_container()
        if request.method == "GET":
            return jsonify({"authenticated": container.session.is_authenticated})

        username = request.form.get("username", "")
        password = request.form.get("password", "")
        if not username.strip() or not password:
            return jsonify({"ok": False, "message": "Username and password are required"}), 400

        try:
            container.session.login(username, password)
            return jsonify({"ok": True})
        except AuthenticationError as e:
            return jsonify({"ok": False, "message": str(e)}), 401
        except ApiError as e:
            return jsonify({"ok": False, "message": e.user_message("Login service unavailable")}), 503
        except Exception as e:
            traceback.print_exc()
            if bool(app.config.get("DEBUG", False)):
                return jsonify({"ok": False, "message": f"Login error: {e}"}), 500
            return jsonify({"ok": False, "message": "Login error"}), 500

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        get_container().session.logout()
        return jsonify({"ok": True})
