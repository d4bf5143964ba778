from __future__ import annotations

from flask import Blueprint, abort, jsonify, request

from dao import employees_dao
from services.db import get_repository

bp = Blueprint("employees", __name__)


@bp.route("/api/employees", methods=["GET"])
def list_employees():
    return jsonify({"employees": employees_dao.list_employees(get_repository())})


@bp.route("/api/employees/<emp_id>", methods=["GET"])
def get_employee(emp_id: str):
    employee = employees_dao.get_employee(get_repository(), emp_id)
    if employee is None:
        abort(404)
    return jsonify(employee)


@bp.route("/api/employees", methods=["POST"])
def create_employee():
    payload = request.get_json(force=True)
    emp_id = employees_dao.create_employee(get_repository(), payload)
    return jsonify({"id": emp_id}), 201


@bp.route("/api/employees/<emp_id>", methods=["PUT"])
def update_employee(emp_id: str):
    payload = request.get_json(force=True)
    updated = employees_dao.update_employee(get_repository(), emp_id, payload)
    return jsonify({"updated": updated})


@bp.route("/api/employees/<emp_id>", methods=["DELETE"])
def delete_employee(emp_id: str):
    deleted = employees_dao.delete_employee(get_repository(), emp_id)
    return jsonify({"deleted": deleted})


@bp.route("/api/employees/import", methods=["POST"])
def import_employees():
    payload = request.get_json(force=True)
    repo = get_repository()
    created = [employees_dao.create_employee(repo, emp) for emp in payload.get("employees", [])]
    return jsonify({"created": created})
