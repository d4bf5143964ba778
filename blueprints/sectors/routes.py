from __future__ import annotations

from flask import Blueprint, abort, jsonify, request

from dao import sectors_dao
from services.db import get_repository

bp = Blueprint("sectors", __name__)


@bp.route("/api/sectors", methods=["GET"])
def list_sectors():
    return jsonify({"sectors": sectors_dao.list_sectors(get_repository())})


@bp.route("/api/sectors/<sector_id>", methods=["GET"])
def get_sector(sector_id: str):
    sector = sectors_dao.get_sector(get_repository(), sector_id)
    if sector is None:
        abort(404)
    return jsonify(sector)


@bp.route("/api/sectors", methods=["POST"])
def create_sector():
    payload = request.get_json(force=True)
    return jsonify(sectors_dao.create_sector(get_repository(), payload)), 201


@bp.route("/api/sectors/<sector_id>", methods=["PUT"])
def update_sector(sector_id: str):
    payload = request.get_json(force=True)
    return jsonify({"updated": sectors_dao.update_sector(get_repository(), sector_id, payload)})


@bp.route("/api/sectors/<sector_id>", methods=["DELETE"])
def delete_sector(sector_id: str):
    return jsonify({"deleted": sectors_dao.delete_sector(get_repository(), sector_id)})
