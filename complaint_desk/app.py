"""Application factory for the complaint desk API."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
from flask import Flask, jsonify

from .adapters.report import csv_writer, xlsx_writer
from .blueprints.analytics.routes import bp as analytics_bp
from .blueprints.portal.routes import bp as portal_bp
from .blueprints.queue.routes import bp as queue_bp
from .blueprints.session import BOARDS_EXTENSION
from .config import DEFAULT_CONFIG, configure_logging, settings_from_env
from .dao import db as db_module
from .services.triage_service import BoardRegistry, TriageBoard, load_snapshot, persist_complaint


def create_app(config: dict[str, Any] | None = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.update(settings_from_env())

    if config:
        app.config.update(config)

    database_path = app.config.get("DATABASE", Path(app.instance_path) / "complaint_desk.sqlite")
    app.config["DATABASE"] = str(database_path)

    Path(app.instance_path).mkdir(parents=True, exist_ok=True)
    configure_logging(app.config)

    db_module.init_app(app)
    if app.config.get("AUTO_INIT_DB", True):
        db_module.initialize_database(app, seed=app.config.get("SEED_DB", True))

    workload_limit = int(app.config["TECHNICIAN_WORKLOAD_LIMIT"])
    app.extensions[BOARDS_EXTENSION] = BoardRegistry(
        lambda: TriageBoard(load_snapshot, persist_complaint, workload_limit=workload_limit),
        max_boards=int(app.config["MAX_BOARDS"]),
    )

    app.register_blueprint(queue_bp)
    app.register_blueprint(analytics_bp)
    app.register_blueprint(portal_bp)

    @app.errorhandler(db_module.DatabaseError)
    def database_error(exc: db_module.DatabaseError) -> tuple[Any, int]:
        app.logger.error("Database error: %s", exc)
        return jsonify({"error": str(exc)}), 500

    @app.get("/healthz")
    def healthcheck() -> tuple[str, int]:
        return "OK", 200

    @app.cli.command("export-analytics")
    @click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
    def export_analytics_command(path: Path) -> None:
        """Write the analytics dashboard to PATH (.csv or .xlsx)."""
        board = TriageBoard(load_snapshot, persist_complaint, workload_limit=workload_limit)
        dashboard = board.dashboard()
        if path.suffix.lower() == ".xlsx":
            xlsx_writer.write_dashboard(path, dashboard)
        else:
            with path.open("w", newline="", encoding="utf-8") as handle:
                csv_writer.write_dashboard(handle, dashboard)
        click.echo(f"Analytics written to {path}")

    app.logger.debug("Complaint desk configured with database %s", app.config["DATABASE"])
    return app
