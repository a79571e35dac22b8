from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.controller import classify_request_body
from ..container import Container
from ..core.enums import ReviewStatus
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    def _body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    @app.route("/api/audit-queue", methods=["POST"], endpoint="api_audit_queue_build")
    def api_audit_queue_build():
        """Rebuild the queue from a fresh classification of the payload."""
        try:
            records = classify_request_body(container)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        entries = container.review_service.build_queue(records)
        return jsonify({"success": True, "count": len(entries), "entries": [e.to_dict() for e in entries]})

    @app.route("/api/audit-queue", methods=["GET"], endpoint="api_audit_queue_list")
    def api_audit_queue_list():
        status_s = request.args.get("review_status")
        try:
            review_status = ReviewStatus(status_s) if status_s else None
        except ValueError:
            return jsonify({"success": False, "message": f"Unknown review status: {status_s}"}), 400

        entries = container.review_service.list_queue(review_status=review_status)
        return jsonify({"success": True, "count": len(entries), "entries": [e.to_dict() for e in entries]})

    @app.route("/api/audit-queue/<entry_id>/status", methods=["POST"], endpoint="api_audit_queue_status")
    def api_audit_queue_status(entry_id: str):
        data = _body()
        try:
            entry = container.review_service.update_status(
                entry_id=entry_id,
                new_status=data.get("status"),
                reviewer=str(data.get("reviewer") or ""),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "entry": entry.to_dict()})

    @app.route("/api/audit-queue/<entry_id>/approve", methods=["POST"], endpoint="api_audit_queue_approve")
    def api_audit_queue_approve(entry_id: str):
        try:
            entry = container.review_service.approve(entry_id=entry_id, reviewer=str(_body().get("reviewer") or ""))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "entry": entry.to_dict()})

    @app.route("/api/audit-queue/<entry_id>/reject", methods=["POST"], endpoint="api_audit_queue_reject")
    def api_audit_queue_reject(entry_id: str):
        try:
            entry = container.review_service.reject(entry_id=entry_id, reviewer=str(_body().get("reviewer") or ""))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "entry": entry.to_dict()})

    @app.route("/api/audit-queue/push", methods=["POST"], endpoint="api_audit_queue_push")
    def api_audit_queue_push():
        """Classify the payload, then apply approved overrides by employee and date."""
        try:
            records = classify_request_body(container)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        merged = container.review_service.push_to_monthly(records)
        return jsonify({"success": True, "count": len(merged), "records": [r.to_dict() for r in merged]})
