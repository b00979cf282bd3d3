from __future__ import annotations

from typing import Callable

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import login_required
from ..container import Container
from ..core.constants import MARK_FAILED_MESSAGE
from ..core.enums import AttendanceStatus
from ..core.exceptions import ApiError, SessionExpiredError, ValidationError


def register(app: Flask, get_container: Callable[[], Container]) -> None:
    requires_login = login_required(get_container)

    @app.route("/dashboard", endpoint="dashboard")
    @requires_login
    def dashboard():
        snapshot = get_container().attendance_service.load_dashboard()
        return jsonify(snapshot.to_dict())

    @app.route("/attendance", methods=["POST"], endpoint="mark_attendance")
    @requires_login
    def mark_attendance():
        service = get_container().attendance_service
        data = request.get_json(silent=True) or {}
        status = data.get("status") or AttendanceStatus.PRESENT.value
        try:
            raw_date = data.get("date")
            try:
                work_date = parse_iso_date(raw_date) if raw_date else None
            except ValueError:
                raise ValidationError("Date must be YYYY-MM-DD")

            record = service.mark(data.get("employee_id"), work_date=work_date, status=status)
            history = service.history(record.employee_id)
            return jsonify({
                "message": f'Attendance marked as "{record.status}" successfully!',
                "record": record.to_dict(),
                "history": history.to_dict(),
            }), 201
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except SessionExpiredError:
            raise
        except ApiError as e:
            return jsonify({"message": e.user_message(MARK_FAILED_MESSAGE)}), e.status_code or 502

    @app.route("/attendance/<int:employee_id>", endpoint="attendance_history")
    @requires_login
    def attendance_history(employee_id: int):
        history = get_container().attendance_service.history(employee_id)
        return jsonify(history.to_dict())
