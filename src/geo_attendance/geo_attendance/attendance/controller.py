from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import RejectionReason
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

REJECTION_MESSAGES = {
    RejectionReason.INVALID_GEOLOCATION: "Coordinates out of range",
    RejectionReason.HOLIDAY_NO_EXTRA_CLASS: "Cannot mark attendance on a holiday without an extra class",
    RejectionReason.UNKNOWN_ROLE: "Invalid role",
    RejectionReason.MALFORMED_IDENTIFIER: "Malformed user identifier",
}


def register(app: Flask, container: Container) -> None:
    @app.route("/mark-attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Expected a JSON object"}), 400

        try:
            result = container.attendance_service.mark(
                user_id=data.get("userId"),
                role=data.get("role"),
                latitude=data.get("lat"),
                longitude=data.get("lon"),
                name=data.get("name"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        if not result.accepted:
            return jsonify({
                "success": False,
                "accepted": False,
                "reason": result.reason.value,
                "message": REJECTION_MESSAGES[result.reason],
            }), 400

        return jsonify({"success": True, **result.to_dict()}), 200

    @app.route("/sync", methods=["POST"], endpoint="sync_attendance")
    def sync_attendance():
        data = request.get_json(silent=True)
        if not isinstance(data, list):
            return jsonify({"success": False, "message": "Expected a JSON array"}), 400

        try:
            count = container.attendance_service.sync(data)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"status": "synced", "count": count}), 200

    @app.route("/reports", methods=["GET"], endpoint="reports")
    def reports():
        try:
            records = container.attendance_service.list_records()
        except Exception:
            logger.exception("Loading attendance reports failed")
            return jsonify({"success": False, "message": "Attendance store unavailable"}), 500
        return jsonify([r.to_dict() for r in records]), 200

    @app.route("/flush", methods=["POST"], endpoint="flush_attendance")
    def flush_attendance():
        try:
            flushed = container.attendance_service.flush()
        except Exception:
            logger.exception("Manual attendance flush failed")
            return jsonify({"success": False, "message": "Attendance store unavailable"}), 500
        return jsonify({"flushed": flushed}), 200
