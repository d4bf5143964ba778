from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import click
from flask import Flask, current_app, g

from adapters.repository import (
    CHECKLISTS,
    DatabaseError,
    EMPLOYEES,
    MACHINES,
    SECTORS,
    Repository,
    SqliteRepository,
)
from config import CONFIG

logger = logging.getLogger(__name__)


def get_repository() -> Repository:
    if "repository" not in g:
        g.repository = SqliteRepository(current_app.config["DATABASE"])
    return g.repository  # type: ignore[return-value]


def close_repository(_: Any = None) -> None:
    g.pop("repository", None)


def _sector_checklists() -> List[Dict[str, Any]]:
    checklists: List[Dict[str, Any]] = []
    for seed in CONFIG["sector_checklists"]:
        prefix = seed["id"].removeprefix("ck-")
        items = [
            {"id": f"{prefix}-{idx}", "question": question, "type": "ok_nok"}
            for idx, question in enumerate(seed["questions"], start=1)
        ]
        items.append({"id": f"{prefix}-{len(items) + 1}", "question": "Observações", "type": "text"})
        checklists.append(
            {
                "id": seed["id"],
                "name": seed["name"],
                "category": seed["category"],
                "created_at": "2024-01-10",
                "items": items,
            }
        )
    return checklists


def seed_repository(repo: Repository) -> bool:
    """Fill the default catalogs into an empty store. Returns True when seeded."""
    if repo.has(EMPLOYEES) or repo.has(SECTORS):
        return False
    repo.save(EMPLOYEES, CONFIG["default_employees"])
    repo.save(SECTORS, CONFIG["default_sectors"])
    repo.save(MACHINES, CONFIG["default_machines"])
    repo.save(CHECKLISTS, _sector_checklists())
    logger.info("Seeded default catalogs")
    return True


def initialize_database(app: Flask, *, drop_existing: bool) -> None:
    database_path = Path(app.config["DATABASE"])
    if drop_existing and database_path.exists():
        database_path.unlink()
    seed_repository(SqliteRepository(database_path))


def init_app(app: Flask) -> None:
    app.teardown_appcontext(close_repository)
    app.cli.add_command(init_db_command)


@click.command("init-db")
@click.option("--force", is_flag=True, help="Recreate the database from scratch.")
def init_db_command(force: bool) -> None:
    """Initialize the SQLite store and seed the default catalogs."""
    app = current_app._get_current_object()  # type: ignore[attr-defined]
    initialize_database(app, drop_existing=force)
    click.echo("Database initialized.")
