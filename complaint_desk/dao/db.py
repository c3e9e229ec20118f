"""SQLite helpers for the web application."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any, Iterable, Sequence

import click
from flask import Flask, current_app, g

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"
SEEDS_DIR = Path(__file__).resolve().parent.parent / "seeds"
SCHEMA_VERSION = "0001_init"


class DatabaseError(RuntimeError):
    """Raised when the SQLite layer encounters an unexpected error."""


def get_db() -> sqlite3.Connection:
    """Return a connection for the current request context."""
    if "db" not in g:
        g.db = sqlite3.connect(current_app.config["DATABASE"])
        g.db.row_factory = sqlite3.Row
    return g.db  # type: ignore[return-value]


def close_db(_: object | None = None) -> None:
    """Close the connection stored in the application context."""
    db = g.pop("db", None)
    if db is not None:
        db.close()


def init_app(app: Flask) -> None:
    """Attach teardown handlers and CLI commands to the app."""
    app.teardown_appcontext(close_db)
    app.cli.add_command(init_db_command)


def initialize_database(app: Flask, *, drop_existing: bool = False, seed: bool = True) -> None:
    database_path = Path(app.config["DATABASE"])
    if drop_existing and database_path.exists():
        database_path.unlink()

    with app.app_context():
        db = get_db()
        try:
            if not _has_version(db, SCHEMA_VERSION):
                scripts = [MIGRATIONS_DIR / "0001_init.sql"]
                if seed:
                    scripts.append(SEEDS_DIR / "seed.sql")
                _apply_scripts(db, scripts)
                db.commit()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        finally:
            close_db(None)


def query_one(sql: str, params: Sequence[Any] | None = None) -> sqlite3.Row | None:
    try:
        cur = get_db().execute(sql, params or [])
        try:
            return cur.fetchone()
        finally:
            cur.close()
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc


def query_all(sql: str, params: Sequence[Any] | None = None) -> list[sqlite3.Row]:
    try:
        cur = get_db().execute(sql, params or [])
        try:
            return cur.fetchall()
        finally:
            cur.close()
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc


def execute(sql: str, params: Sequence[Any] | None = None) -> int:
    db = get_db()
    try:
        cur = db.execute(sql, params or [])
        db.commit()
    except sqlite3.Error as exc:
        db.rollback()
        raise DatabaseError(str(exc)) from exc
    return cur.rowcount


def _apply_scripts(db: sqlite3.Connection, scripts: Iterable[Path]) -> None:
    for script in scripts:
        db.executescript(script.read_text(encoding="utf-8"))


def _has_version(db: sqlite3.Connection, version: str) -> bool:
    cursor = db.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_migrations'"
    )
    if cursor.fetchone() is None:
        return False
    version_cursor = db.execute("SELECT 1 FROM schema_migrations WHERE version = ?", (version,))
    return version_cursor.fetchone() is not None


@click.command("init-db")
@click.option("--force", is_flag=True, help="Recreate the database from scratch.")
def init_db_command(force: bool) -> None:
    """Initialize the database using the bundled migrations and seeds."""
    app = current_app._get_current_object()  # type: ignore[attr-defined]
    initialize_database(app, drop_existing=force)
    click.echo("Database initialized.")
