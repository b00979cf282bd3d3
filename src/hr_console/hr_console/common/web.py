from __future__ import annotations

from functools import wraps
from typing import Callable

from flask import jsonify, url_for

from ..container import Container


def login_required(get_container: Callable[[], Container]):
    """Reject anonymous requests with a pointer to the login endpoint."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not get_container().session.is_authenticated:
                return jsonify({"message": "Please sign in to continue", "redirect": url_for("login")}), 401
            return view(*args, **kwargs)

        return wrapper

    return decorator
