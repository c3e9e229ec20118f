"""CSV analytics export."""
from __future__ import annotations

import csv
from io import StringIO
from typing import Iterable, Sequence, TextIO

from ...services.statistics import Dashboard


def sections(dashboard: Dashboard) -> Iterable[tuple[str, Sequence[str], list[list]]]:
    """Yield (title, header, rows) for every derivation on the dashboard."""
    summary = dashboard.summary
    yield "Summary", ["metric", "value"], [
        ["total", summary.total],
        ["pending", summary.pending],
        ["in_progress", summary.in_progress],
        ["resolved", summary.resolved],
        ["high_priority", summary.high_priority],
        ["resolution_rate", summary.resolution_rate],
        ["active_staff", summary.active_staff],
    ]
    yield "Status", ["status", "count"], [[row.name, row.value] for row in dashboard.status]
    yield "Categories", ["category", "count"], [[row.name, row.count] for row in dashboard.categories]
    yield "Workload", ["technician", "active"], [[row.name, row.active] for row in dashboard.workload]
    yield "Priority", ["priority", "count"], [[row.name, row.value] for row in dashboard.priorities]


def write_dashboard(handle: TextIO, dashboard: Dashboard) -> None:
    writer = csv.writer(handle)
    for index, (title, header, rows) in enumerate(sections(dashboard)):
        if index:
            writer.writerow([])
        writer.writerow([f"# {title}"])
        writer.writerow(header)
        writer.writerows(rows)


def dashboard_csv(dashboard: Dashboard) -> str:
    buffer = StringIO()
    write_dashboard(buffer, dashboard)
    return buffer.getvalue()
