from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, utc_today
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _date_arg(name: str, default: Optional[date]) -> Optional[date]:
    value = request.args.get(name)
    if not value:
        return default
    return parse_iso_date(value)


def _range_args() -> tuple[date, date]:
    today = utc_today()
    start = _date_arg("start", today - timedelta(days=DEFAULT_REPORT_DAYS - 1))
    end = _date_arg("end", today)
    return start, end


def register(app: Flask, container) -> None:
    service = container.report_service

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    def _fail(e: Exception):
        logger.exception("report request failed: %s", request.path)
        return jsonify({"success": False, "message": str(e)}), 500

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="api_attendance_summary")
    def api_attendance_summary():
        start, end = _range_args()
        try:
            name = request.args.get("name")
            if name:
                summaries = service.search_by_name(name, start=start, end=end)
            else:
                summaries = service.overview(start=start, end=end)
        except ValidationError:
            raise
        except Exception as e:
            return _fail(e)
        return jsonify({"success": True, "data": [s.to_dict() for s in summaries]})

    @app.route("/api/attendance/shifts", methods=["GET"], endpoint="api_attendance_shifts")
    def api_attendance_shifts():
        start, end = _range_args()
        try:
            summaries = service.shift_report(start=start, end=end, user_id=request.args.get("user_id") or None)
        except ValidationError:
            raise
        except Exception as e:
            return _fail(e)
        return jsonify({"success": True, "data": [s.to_dict() for s in summaries]})

    @app.route("/api/attendance/daily", methods=["GET"], endpoint="api_attendance_daily")
    def api_attendance_daily():
        start, end = _range_args()
        try:
            rows = service.daily_rows(user_id=request.args.get("user_id") or "", start=start, end=end)
        except ValidationError:
            raise
        except Exception as e:
            return _fail(e)
        return jsonify({"success": True, "data": [r.to_dict() for r in rows]})

    @app.route("/api/attendance/current", methods=["GET"], endpoint="api_attendance_current")
    def api_attendance_current():
        try:
            summaries = service.current_status()
        except Exception as e:
            return _fail(e)
        return jsonify(
            {
                "success": True,
                "data": [
                    {
                        "id_user": s.id_user,
                        "name": s.name,
                        "email": s.email,
                        "current_status": s.current_status.value,
                        "current_reason": s.current_reason,
                    }
                    for s in summaries
                ],
            }
        )

    @app.route("/api/attendants", methods=["GET"], endpoint="api_attendants")
    def api_attendants():
        start = _date_arg("start", None)
        end = _date_arg("end", None)
        try:
            attendants = service.attendants(start=start, end=end)
        except ValidationError:
            raise
        except Exception as e:
            return _fail(e)
        return jsonify(
            {
                "success": True,
                "data": [{"id_user": a.id_user, "name": a.name, "email": a.email} for a in attendants],
            }
        )
