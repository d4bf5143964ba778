from __future__ import annotations

from flask import Blueprint, abort, jsonify, request

from dao import checklists_dao
from services.db import get_repository

bp = Blueprint("checklists", __name__)


@bp.route("/api/checklists", methods=["GET"])
def list_checklists():
    return jsonify({"checklists": checklists_dao.list_checklists(get_repository())})


@bp.route("/api/checklists/<checklist_id>", methods=["GET"])
def get_checklist(checklist_id: str):
    checklist = checklists_dao.get_checklist(get_repository(), checklist_id)
    if checklist is None:
        abort(404)
    return jsonify(checklist)


@bp.route("/api/checklists", methods=["POST"])
def create_checklist():
    payload = request.get_json(force=True)
    return jsonify(checklists_dao.create_checklist(get_repository(), payload)), 201


@bp.route("/api/checklists/<checklist_id>", methods=["PUT"])
def update_checklist(checklist_id: str):
    payload = request.get_json(force=True)
    return jsonify({"updated": checklists_dao.update_checklist(get_repository(), checklist_id, payload)})


@bp.route("/api/checklists/<checklist_id>", methods=["DELETE"])
def delete_checklist(checklist_id: str):
    return jsonify({"deleted": checklists_dao.delete_checklist(get_repository(), checklist_id)})
