from pydantic import BaseModel, Field
from typing import Any, Dict, List, Mapping
from enum import Enum


# Counters shown in the per-workspace table. The totals table shows every
# counter the admin API reports.
DISPLAY_FIELDS = ("plugins", "targets", "services", "routes", "upstreams")


class MetaView(str, Enum):
    WORKSPACE = "workspace"
    COUNTS = "counts"
    ALL = "all"


class Workspace(BaseModel):
    name: str
    id: str = ""


class WorkspaceList(BaseModel):
    data: List[Workspace] = []


def flatten_counts(counts: Mapping[str, Any]) -> Dict[str, int]:
    """
    Flatten a counts object into {field: count}.

    Nested objects are walked and their numeric fields keyed by their own
    name. Zero values, booleans and anything that is not an integer are
    skipped.
    """
    flat: Dict[str, int] = {}
    for field, value in counts.items():
        if isinstance(value, Mapping):
            for nested_field, nested_value in flatten_counts(value).items():
                flat[nested_field] = flat.get(nested_field, 0) + nested_value
        elif isinstance(value, int) and not isinstance(value, bool):
            if value != 0:
                flat[field] = flat.get(field, 0) + value
    return flat


class WorkspaceMeta(BaseModel):
    counts: Dict[str, Any] = Field(default_factory=dict)

    def flat_counts(self) -> Dict[str, int]:
        return flatten_counts(self.counts)

    def count(self, field: str) -> int:
        return self.flat_counts().get(field, 0)


class WorkspaceCounts(BaseModel):
    workspace: str
    meta: WorkspaceMeta


class AggregateReport(BaseModel):
    workspaces: List[WorkspaceCounts] = []
    totals: Dict[str, int] = Field(default_factory=dict)
    failed: List[str] = []

    @property
    def workspace_count(self) -> int:
        """Number of rows in the per-workspace table"""
        return len(self.workspaces)
