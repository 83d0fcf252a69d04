from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, to_json
from ..container import Container
from ..core.errors import Validation
from ..core.result import Err


def register(app: Flask, container: Container) -> None:
    service = container.stamp_service

    def respond(result, *, status: int = 200):
        if isinstance(result, Err):
            return error_response(result.error)
        return jsonify({"stamp": to_json(result.value)}), status

    @app.route("/api/stamps/status", methods=["GET"], endpoint="stamp_status")
    def stamp_status():
        result = service.get_status()
        if isinstance(result, Err):
            return error_response(result.error)
        return jsonify(to_json(result.value))

    @app.route("/api/stamps", methods=["POST"], endpoint="stamp_record")
    def stamp_record():
        """Record any action: body {"action": "clock_in" | "clock_out" | "break_start" | "break_end"}."""
        data = request.get_json(silent=True) or {}
        action = data.get("action") if isinstance(data, dict) else None
        if not isinstance(action, str):
            return error_response(Validation("action is required"))
        return respond(service.record(action.strip()))

    @app.route("/api/stamps/clock-in", methods=["POST"], endpoint="stamp_clock_in")
    def stamp_clock_in():
        return respond(service.clock_in(), status=201)

    @app.route("/api/stamps/clock-out", methods=["PUT"], endpoint="stamp_clock_out")
    def stamp_clock_out():
        return respond(service.clock_out())

    @app.route("/api/stamps/break-start", methods=["PUT"], endpoint="stamp_break_start")
    def stamp_break_start():
        return respond(service.break_start())

    @app.route("/api/stamps/break-end", methods=["PUT"], endpoint="stamp_break_end")
    def stamp_break_end():
        return respond(service.break_end())
