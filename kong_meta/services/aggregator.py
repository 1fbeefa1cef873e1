import logging
from typing import Dict, Iterable, Mapping

from kong_meta.models.meta_models import (
    AggregateReport, Workspace, WorkspaceCounts, flatten_counts
)
from kong_meta.services.kong_service import KongAdminError, KongAdminService

logger = logging.getLogger(__name__)

__all__ = ["aggregate_workspaces", "flatten_counts", "merge_counts"]


def merge_counts(into: Dict[str, int], counts: Mapping[str, int]) -> Dict[str, int]:
    """Add every counter in ``counts`` to ``into``, starting absent keys at 0."""
    for field, value in counts.items():
        into[field] = into.get(field, 0) + value
    return into


def aggregate_workspaces(
    service: KongAdminService, workspaces: Iterable[Workspace]
) -> AggregateReport:
    """
    Fetch metadata for each workspace in order and sum the counters.

    A workspace whose metadata cannot be fetched is logged, recorded in
    ``failed`` and left out of both the rows and the totals.
    """
    report = AggregateReport()

    for workspace in workspaces:
        try:
            meta = service.get_workspace_meta(workspace.name)
        except KongAdminError as e:
            logger.error(f"Failed to get metadata for workspace {workspace.name}: {e}")
            report.failed.append(workspace.name)
            continue

        merge_counts(report.totals, meta.flat_counts())
        report.workspaces.append(WorkspaceCounts(workspace=workspace.name, meta=meta))

    logger.info(
        f"Collected metadata for {report.workspace_count} workspaces"
        f" ({len(report.failed)} failed)"
    )
    return report
