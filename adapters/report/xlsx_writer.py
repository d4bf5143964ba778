"""Excel export of a month's audit schedule."""
from __future__ import annotations

from io import BytesIO
from typing import Any, Dict, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

from config import CONFIG
from domain.models import ScheduleEntry, ScheduleStatus

HEADER_FONT = Font(bold=True)
CENTER = Alignment(horizontal="center", vertical="center")
STATUS_FILLS = {
    ScheduleStatus.COMPLETED: PatternFill("solid", fgColor="C6EFCE"),
    ScheduleStatus.MISSED: PatternFill("solid", fgColor="FFC7CE"),
}
STATUS_LABELS = {
    ScheduleStatus.PENDING: "Pendente",
    ScheduleStatus.COMPLETED: "Realizada",
    ScheduleStatus.MISSED: "Não realizada",
}
HEADERS = ("Semana", "Dia", "Setor", "Auditor", "Checklist", "Status")


def _names(records: Sequence[Dict[str, Any]]) -> Dict[str, str]:
    return {record["id"]: record.get("name", record["id"]) for record in records}


def write_schedule(
    entries: Sequence[ScheduleEntry],
    employees: Sequence[Dict[str, Any]],
    sectors: Sequence[Dict[str, Any]],
    checklists: Sequence[Dict[str, Any]],
    *,
    title: str | None = None,
) -> BytesIO:
    employee_names = _names(employees)
    sector_names = _names(sectors)
    checklist_names = _names(checklists)

    wb = Workbook()
    ws = wb.active
    ws.title = title or "Cronograma"

    for col, header in enumerate(HEADERS, start=1):
        cell = ws.cell(row=1, column=col, value=header)
        cell.font = HEADER_FONT
        cell.alignment = CENTER

    ordered = sorted(entries, key=lambda e: (e.week_number, e.day_of_week, e.sector_id))
    for row, entry in enumerate(ordered, start=2):
        values = (
            entry.week_number,
            CONFIG["week_days"].get(entry.day_of_week, "-"),
            sector_names.get(entry.sector_id, "N/A"),
            employee_names.get(entry.employee_id, "N/A"),
            checklist_names.get(entry.checklist_id, entry.checklist_id),
            STATUS_LABELS[entry.status],
        )
        for col, value in enumerate(values, start=1):
            cell = ws.cell(row=row, column=col, value=value)
            if col <= 2:
                cell.alignment = CENTER
        fill = STATUS_FILLS.get(entry.status)
        if fill is not None:
            ws.cell(row=row, column=len(HEADERS)).fill = fill

    ws.freeze_panes = "A2"
    stream = BytesIO()
    wb.save(stream)
    stream.seek(0)
    return stream
