"""Table rendering for aggregated workspace metadata.

Two independent tables are produced: one row per workspace with the fixed
display counters, and the totals across all workspaces with a trailing
``Workspaces`` row.
"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from kong_meta.models.meta_models import DISPLAY_FIELDS, AggregateReport, MetaView

WORKSPACE_HEADERS = ["Workspace"] + [field.capitalize() for field in DISPLAY_FIELDS]
COUNT_HEADERS = ["Meta Field", "Count"]
WORKSPACES_ROW = "Workspaces"


def workspace_rows(report: AggregateReport) -> List[List[str]]:
    """Rows for the per-workspace table, in processing order."""
    rows = []
    for entry in report.workspaces:
        counts = entry.meta.flat_counts()
        rows.append([entry.workspace] + [str(counts.get(field, 0)) for field in DISPLAY_FIELDS])
    return rows


def count_rows(report: AggregateReport, sort_by_count: bool = False) -> List[List[str]]:
    """Rows for the totals table.

    Without ``sort_by_count`` the counters keep the order they were first seen
    in and the ``Workspaces`` row comes last. With it, every row including
    ``Workspaces`` is ordered by ascending count; ties keep that same order.
    """
    entries = list(report.totals.items())
    entries.append((WORKSPACES_ROW, report.workspace_count))

    if sort_by_count:
        entries.sort(key=lambda entry: entry[1])

    return [[field, str(count)] for field, count in entries]


def _build_table(headers: List[str], rows: List[List[str]]) -> Table:
    table = Table(box=box.ASCII, show_header=True, header_style="bold")
    for index, header in enumerate(headers):
        table.add_column(header, justify="left" if index == 0 else "right")
    for row in rows:
        table.add_row(*row)
    return table


def build_workspace_table(report: AggregateReport) -> Table:
    return _build_table(WORKSPACE_HEADERS, workspace_rows(report))


def build_counts_table(report: AggregateReport, sort_by_count: bool = False) -> Table:
    return _build_table(COUNT_HEADERS, count_rows(report, sort_by_count))


def render_report(
    report: AggregateReport,
    view: MetaView = MetaView.COUNTS,
    sort_by_count: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print the tables selected by ``view`` to ``console`` (stdout by default)."""
    console = console or Console()

    if view in (MetaView.WORKSPACE, MetaView.ALL):
        console.print("Individual Workspace Metadata:")
        console.print(build_workspace_table(report))

    if view in (MetaView.COUNTS, MetaView.ALL):
        console.print("Total Entity Counts:")
        console.print(build_counts_table(report, sort_by_count))
