from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/calendar", methods=["GET"], endpoint="calendar")
    def calendar():
        return jsonify(container.calendar_service.get()), 200

    @app.route("/calendar/extra-classes", methods=["POST"], endpoint="add_extra_class")
    def add_extra_class():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Expected a JSON object"}), 400

        try:
            updated = container.calendar_service.add_extra_class(data.get("date", ""))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(updated), 200
