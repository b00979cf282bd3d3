from __future__ import annotations

from typing import Callable

from flask import Flask, jsonify, request

from ..common.web import login_required
from ..container import Container
from ..core.constants import CREATE_FAILED_MESSAGE
from ..core.exceptions import ApiError, SessionExpiredError, ValidationError


def register(app: Flask, get_container: Callable[[], Container]) -> None:
    requires_login = login_required(get_container)

    @app.route("/employees", methods=["GET"], endpoint="employees")
    @requires_login
    def employees():
        directory = get_container().directory
        directory.load()
        found = directory.filter(request.args.get("q", ""))
        return jsonify({
            "total": len(directory.employees),
            "employees": [e.to_dict() for e in found],
        })

    @app.route("/employees", methods=["POST"], endpoint="create_employee")
    @requires_login
    def create_employee():
        data = request.get_json(silent=True) or {}
        try:
            employee = get_container().directory.create(
                full_name=data.get("full_name", ""),
                email=data.get("email", ""),
                department=data.get("department", ""),
            )
            return jsonify(employee.to_dict()), 201
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except SessionExpiredError:
            raise
        except ApiError as e:
            return jsonify({"message": e.user_message(CREATE_FAILED_MESSAGE)}), e.status_code or 502

    @app.route("/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @requires_login
    def delete_employee(employee_id: int):
        try:
            get_container().directory.delete(employee_id)
            return "", 204
        except SessionExpiredError:
            raise
        except ApiError as e:
            return jsonify({"message": e.user_message("Failed to delete employee.")}), e.status_code or 502
