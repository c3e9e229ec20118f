from __future__ import annotations

from datetime import datetime, timezone

from flask import Blueprint, Response, jsonify

from ...adapters.report import csv_writer, xlsx_writer
from ...domain.models import ROLE_ADMIN
from ..session import current_board, require_role

bp = Blueprint("analytics", __name__, url_prefix="/api/admin/analytics")

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _filename(suffix: str) -> str:
    return f"analytics_{datetime.now(timezone.utc).strftime('%Y-%m-%d')}.{suffix}"


@bp.get("")
@require_role(ROLE_ADMIN)
def dashboard():
    return jsonify(current_board().dashboard().to_dict())


@bp.get("/export.csv")
@require_role(ROLE_ADMIN)
def export_csv():
    content = csv_writer.dashboard_csv(current_board().dashboard())
    return Response(
        content,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={_filename('csv')}"},
    )


@bp.get("/export.xlsx")
@require_role(ROLE_ADMIN)
def export_xlsx():
    stream = xlsx_writer.dashboard_xlsx(current_board().dashboard())
    return (stream.getvalue(), 200, {
        "Content-Type": XLSX_MIMETYPE,
        "Content-Disposition": f"attachment; filename={_filename('xlsx')}",
    })
