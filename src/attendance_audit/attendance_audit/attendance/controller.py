from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from .model import ClassifiedAttendanceRecord
from .payload import parse_recalculate_payload


def classify_request_body(container: Container) -> list[ClassifiedAttendanceRecord]:
    """Parse the current JSON request and run one classification pass over it."""
    payload = parse_recalculate_payload(
        request.get_json(silent=True),
        default_weekly_offs=container.default_weekly_offs,
    )
    return container.classification_service.recalculate(
        employees=payload.employees,
        records=payload.records,
        shifts=payload.shifts,
        holidays=payload.holidays,
        weekly_offs=payload.weekly_offs,
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/recalculate", methods=["POST"], endpoint="api_attendance_recalculate")
    def api_attendance_recalculate():
        """Full recomputation of every record in the payload."""
        try:
            records = classify_request_body(container)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({"success": True, "count": len(records), "records": [r.to_dict() for r in records]})

    @app.route("/api/attendance/summary", methods=["POST"], endpoint="api_attendance_summary")
    def api_attendance_summary():
        try:
            records = classify_request_body(container)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        report = container.summary_service.build(records)
        return jsonify({"success": True, "rows": report.rows})
