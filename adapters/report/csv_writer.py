"""CSV export/import of the machine registry."""
from __future__ import annotations

import csv
import io
from typing import Iterable, List

from domain.models import Machine, generate_id

HEADER = ["Nome", "Código", "Setor", "Descrição"]
BOM = "\ufeff"


def write_machines(machines: Iterable[Machine]) -> str:
    handle = io.StringIO()
    writer = csv.writer(handle, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(HEADER)
    for machine in machines:
        writer.writerow([machine.name, machine.code, machine.sector, machine.description])
    return BOM + handle.getvalue()


def read_machines(text: str) -> List[Machine]:
    """Parse rows written by :func:`write_machines`. Rows without name or code are skipped."""
    reader = csv.reader(io.StringIO(text.lstrip(BOM)))
    rows = list(reader)
    if rows and [cell.strip() for cell in rows[0]] == HEADER:
        rows = rows[1:]
    machines: List[Machine] = []
    for row in rows:
        cells = [cell.strip() for cell in row] + [""] * (len(HEADER) - len(row))
        name, code, sector, description = cells[:4]
        if not name or not code:
            continue
        machines.append(Machine(id=generate_id(), name=name, code=code, sector=sector, description=description))
    return machines
