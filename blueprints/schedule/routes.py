from __future__ import annotations

from datetime import date
from typing import Optional, Tuple

from flask import Blueprint, jsonify, request

from adapters.report.xlsx_writer import write_schedule
from config import CONFIG
from dao import checklists_dao, employees_dao, sectors_dao
from rules import week_numbering
from services import schedule_service
from services.db import get_repository
from services.scheduler import SchedulerService

bp = Blueprint("schedule", __name__)


def _optional_int(value) -> Optional[int]:
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"expected an integer, got {value!r}") from exc


def _resolve_month(payload: dict | None = None) -> Tuple[int, int]:
    """Month (0-based) and year from the JSON body or query string, defaulting to today."""
    payload = payload or {}
    today = date.today()
    month = _optional_int(payload.get("month", request.args.get("month")))
    year = _optional_int(payload.get("year", request.args.get("year")))
    month = today.month - 1 if month is None else month
    year = today.year if year is None else year
    if not 0 <= month <= 11:
        raise ValueError(f"month must be within 0..11, got {month}")
    return month, year


@bp.route("/api/schedule")
def get_schedule():
    month, year = _resolve_month()
    repo = get_repository()
    entries = schedule_service.list_month(repo, month, year)
    return jsonify(
        {
            "month": month,
            "year": year,
            "entries": [entry.to_dict() for entry in entries],
            "weeks": schedule_service.week_matrix(repo, month, year),
        }
    )


@bp.route("/api/schedule/weeks")
def get_week_numbers():
    month, year = _resolve_month()
    first_week = _optional_int(request.args.get("first_week"))
    return jsonify(
        {
            "month": month,
            "year": year,
            "weeks": week_numbering.get_global_week_numbers_for_month(month, year, first_week),
        }
    )


@bp.route("/api/schedule/generate", methods=["POST"])
def generate_endpoint():
    payload = request.get_json(silent=True) or {}
    month, year = _resolve_month(payload)
    first_week = _optional_int(payload.get("first_week_number"))
    service = SchedulerService(get_repository())
    entries = service.generate_schedule(month, year, first_week)
    stats = service.last_stats
    body = {
        "ok": bool(entries),
        "count": len(entries),
        "weeks": stats.weeks if stats else [],
        "label": f"{CONFIG['months'][month]} {year}",
    }
    if stats and stats.warning:
        body["warning"] = stats.warning
    return jsonify(body)


@bp.route("/api/schedule/entries", methods=["POST"])
def create_entry():
    payload = request.get_json(force=True)
    entry = schedule_service.add_entry(get_repository(), payload)
    return jsonify(entry.to_dict()), 201


@bp.route("/api/schedule/entries/<entry_id>", methods=["PUT"])
def update_entry(entry_id: str):
    payload = request.get_json(force=True)
    entry = schedule_service.update_entry(get_repository(), entry_id, payload)
    return jsonify(entry.to_dict())


@bp.route("/api/schedule/entries/<entry_id>", methods=["DELETE"])
def delete_entry(entry_id: str):
    schedule_service.delete_entry(get_repository(), entry_id)
    return jsonify({"deleted": 1})


@bp.route("/api/schedule/entries/<entry_id>/missed", methods=["POST"])
def mark_missed(entry_id: str):
    entry = schedule_service.mark_missed(get_repository(), entry_id)
    return jsonify(entry.to_dict())


@bp.route("/api/schedule/clean", methods=["POST"])
def clean_entries():
    removed = schedule_service.clean_old_entries(get_repository())
    return jsonify({"removed": removed})


@bp.route("/api/schedule/missed")
def missed_entries():
    return jsonify(schedule_service.missed_analysis(get_repository()))


@bp.route("/api/export/xlsx")
def export_endpoint():
    month, year = _resolve_month()
    repo = get_repository()
    stream = write_schedule(
        schedule_service.list_month(repo, month, year),
        employees_dao.list_employees(repo),
        sectors_dao.list_sectors(repo),
        checklists_dao.list_checklists(repo),
        title=f"{CONFIG['months'][month]} {year}",
    )
    filename = f"cronograma_{year:04d}-{month + 1:02d}.xlsx"
    return (stream.getvalue(), 200, {
        "Content-Type": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "Content-Disposition": f"attachment; filename={filename}",
    })
