"""Pydantic models for Bugzilla data structures and derived report records.

The raw models map to the Bugzilla REST API bug object.
API Reference: https://bmo.readthedocs.io/en/latest/api/core/v1/bug.html
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

IssueId = int


class BugRecord(BaseModel):
    """Bugzilla bug as returned by the REST search endpoint.

    Only the fields requested through ``include_fields`` are modelled. The
    rank value is kept raw here; it is validated when the graph is built.
    """

    id: IssueId = Field(..., description="Unique bug identifier (integer)")
    alias: str | None = Field(None, description="First alias, used for display")
    aliases: list[str] = Field(
        default_factory=list, description="Every alias carried by the bug"
    )
    summary: str = Field("", description="One-line bug summary (string)")
    blocks: list[IssueId] = Field(
        default_factory=list, description="Ids of bugs this bug blocks"
    )
    rank: Any = Field(
        None, description="Raw rank value from the configured rank field"
    )

    @model_validator(mode="before")
    @classmethod
    def _split_aliases(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        alias = data.get("alias")
        # Bugzilla 5 returns aliases as a list
        if isinstance(alias, list):
            data.setdefault("aliases", alias)
            data["alias"] = alias[0] if alias else None
        elif isinstance(alias, str):
            data.setdefault("aliases", [alias])
        return data

    @classmethod
    def from_api(
        cls, data: dict[str, Any], rank_field: str | None = None
    ) -> "BugRecord":
        """Build a record from a raw API dict, picking rank from ``rank_field``."""
        payload = {
            key: data[key]
            for key in ("id", "alias", "aliases", "summary", "blocks")
            if key in data
        }
        if rank_field and rank_field in data:
            payload["rank"] = data[rank_field]
        elif "rank" in data:
            payload["rank"] = data["rank"]
        return cls(**payload)


class Issue(BaseModel):
    """Validated issue held by the graph."""

    model_config = ConfigDict(frozen=True)

    id: IssueId
    alias: str | None = None
    aliases: tuple[str, ...] = ()
    rank: int = -1
    summary: str = ""
    blocks: tuple[IssueId, ...] = ()


class UnreachableIssue(BaseModel):
    """Issue that does not transitively block the root tracker."""

    model_config = ConfigDict(frozen=True)

    id: IssueId
    url: str
    summary: str


class ProjectSummary(BaseModel):
    """Project issue with the number of bugs attributed to it."""

    id: IssueId
    severity: int = Field(
        -1, description="Rank of the project issue, -1 if unranked"
    )
    url: str
    summary: str = Field(..., description="Summary with leading tags removed")
    bug_count: int = 0


class Report(BaseModel):
    """Result of one analysis run, ready for rendering."""

    unreachable_issues: list[UnreachableIssue] = Field(default_factory=list)
    project_summaries: list[ProjectSummary] = Field(default_factory=list)

    @property
    def unreachable_count(self) -> int:
        return len(self.unreachable_issues)

    @property
    def project_count(self) -> int:
        return len(self.project_summaries)

    @property
    def total_bugs_in_projects(self) -> int:
        return sum(project.bug_count for project in self.project_summaries)


class StoredSnapshot(BaseModel):
    """Raw records saved to disk so a report can be rerun offline."""

    query: dict[str, Any] = Field(
        ..., description="Query parameters used for the fetch"
    )
    bugs: list[BugRecord] = Field(..., description="Fetched bug records")
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Storage metadata (timestamp, tool_version)"
    )
