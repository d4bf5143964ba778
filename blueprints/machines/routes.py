from __future__ import annotations

from flask import Blueprint, abort, jsonify, request

from adapters.report import csv_writer
from dao import machines_dao
from services.db import get_repository

bp = Blueprint("machines", __name__)


@bp.route("/api/machines", methods=["GET"])
def list_machines():
    sector = request.args.get("sector")
    return jsonify({"machines": machines_dao.list_machines(get_repository(), sector)})


@bp.route("/api/machines/<machine_id>", methods=["GET"])
def get_machine(machine_id: str):
    machine = machines_dao.get_machine(get_repository(), machine_id)
    if machine is None:
        abort(404)
    return jsonify(machine)


@bp.route("/api/machines", methods=["POST"])
def create_machine():
    payload = request.get_json(force=True)
    return jsonify(machines_dao.create_machine(get_repository(), payload)), 201


@bp.route("/api/machines/<machine_id>", methods=["PUT"])
def update_machine(machine_id: str):
    payload = request.get_json(force=True)
    return jsonify({"updated": machines_dao.update_machine(get_repository(), machine_id, payload)})


@bp.route("/api/machines/<machine_id>", methods=["DELETE"])
def delete_machine(machine_id: str):
    return jsonify({"deleted": machines_dao.delete_machine(get_repository(), machine_id)})


@bp.route("/api/machines/export")
def export_machines():
    body = csv_writer.write_machines(machines_dao.load_machines(get_repository()))
    return (body.encode("utf-8"), 200, {
        "Content-Type": "text/csv; charset=utf-8",
        "Content-Disposition": "attachment; filename=maquinas.csv",
    })


@bp.route("/api/machines/import", methods=["POST"])
def import_machines():
    text = request.get_data(as_text=True)
    repo = get_repository()
    created = [machines_dao.create_machine(repo, machine.to_dict())["id"] for machine in csv_writer.read_machines(text)]
    return jsonify({"created": created})
