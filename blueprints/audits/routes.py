from __future__ import annotations

from flask import Blueprint, jsonify, request

from services import audit_service
from services.db import get_repository

bp = Blueprint("audits", __name__)


@bp.route("/api/audits", methods=["GET"])
def list_audits():
    employee_id = request.args.get("employee_id")
    audits = audit_service.list_audits(get_repository(), employee_id)
    return jsonify({"audits": [audit.to_dict() for audit in audits]})


@bp.route("/api/audits", methods=["POST"])
def create_audit():
    payload = request.get_json(force=True)
    record = audit_service.record_audit(get_repository(), payload)
    return jsonify(record.to_dict()), 201
