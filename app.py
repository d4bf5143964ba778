from __future__ import annotations

import logging
import os
from pathlib import Path

import click
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from adapters.config_loader import load_config, merge_catalogs
from config import CONFIG
from services import db as db_service
from services.schedule_service import EntryNotFound


BLUEPRINTS = [
    ("blueprints.schedule.routes", "bp"),
    ("blueprints.employees.routes", "bp"),
    ("blueprints.sectors.routes", "bp"),
    ("blueprints.machines.routes", "bp"),
    ("blueprints.checklists.routes", "bp"),
    ("blueprints.audits.routes", "bp"),
]

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValueError)
    def bad_request(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(EntryNotFound)
    def entry_not_found(exc: EntryNotFound):
        return jsonify({"error": f"schedule entry not found: {exc}"}), 404

    @app.errorhandler(db_service.DatabaseError)
    def database_error(exc: db_service.DatabaseError):
        logger.exception("Storage failure")
        return jsonify({"error": "storage failure"}), 500

    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException):
        return jsonify({"error": exc.description}), exc.code


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_mapping(
        DATABASE=os.path.join(app.instance_path, "lpa.sqlite"),
        JSON_SORT_KEYS=False,
        LOG_LEVEL="INFO",
        LPA_CONFIG=os.environ.get("LPA_CONFIG"),
    )

    if test_config:
        app.config.update(test_config)

    _configure_logging(app.config["LOG_LEVEL"])
    Path(app.instance_path).mkdir(parents=True, exist_ok=True)

    if app.config.get("LPA_CONFIG"):
        keys = merge_catalogs(CONFIG, load_config(app.config["LPA_CONFIG"]))
        logger.info("Catalog overrides loaded from %s: %s", app.config["LPA_CONFIG"], ", ".join(keys))

    for import_path, attr in BLUEPRINTS:
        module = __import__(import_path, fromlist=[attr])
        blueprint = getattr(module, attr)
        app.register_blueprint(blueprint)

    @app.route("/healthz")
    def healthcheck() -> tuple[str, int]:
        return "OK", 200

    _register_error_handlers(app)
    db_service.init_app(app)

    @app.cli.command("generate-schedule")
    @click.option("--month", type=click.IntRange(1, 12), required=True, help="Calendar month, 1-12.")
    @click.option("--year", type=int, required=True)
    @click.option("--first-week", type=click.IntRange(min=1), default=None, help="Global number of the month's first week.")
    def generate_schedule_command(month: int, year: int, first_week: int | None) -> None:
        """Generate and store the audit schedule of one month."""
        from services.scheduler import SchedulerService

        service = SchedulerService(db_service.get_repository())
        entries = service.generate_schedule(month - 1, year, first_week)
        stats = service.last_stats
        click.echo(f"{len(entries)} entries, weeks {stats.weeks if stats else []}")
        if stats and stats.warning:
            click.echo(stats.warning, err=True)

    if app.config.get("AUTO_INIT_DB", True):
        db_service.initialize_database(app, drop_existing=False)

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
