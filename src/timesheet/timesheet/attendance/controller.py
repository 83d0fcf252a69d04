from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, to_json
from ..container import Container
from ..core.result import Err


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_range")
    def attendance_range():
        result = service.get_by_date_range(request.args.get("from", ""), request.args.get("to", ""))
        if isinstance(result, Err):
            return error_response(result.error)
        return jsonify(to_json(result.value))

    @app.route("/api/attendance/<date>", methods=["GET"], endpoint="attendance_by_date")
    def attendance_by_date(date: str):
        result = service.get_by_date(date)
        if isinstance(result, Err):
            return error_response(result.error)
        return jsonify({"record": to_json(result.value)})
