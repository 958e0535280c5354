"""Test configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from bz_analysis.analysis.graph import ROOT_ALIAS, IssueGraph
from bz_analysis.bugzilla_client.models import BugRecord

GraphFactory = Callable[..., IssueGraph]


def make_record(
    issue_id: int,
    blocks: list[int] | None = None,
    alias: str | None = None,
    summary: str | None = None,
    rank: str | int | None = None,
) -> BugRecord:
    """Build a raw record with sensible defaults."""
    return BugRecord(
        id=issue_id,
        alias=alias,
        summary=summary if summary is not None else f"Bug {issue_id}",
        blocks=blocks or [],
        rank=rank,
    )


@pytest.fixture
def record_factory() -> Callable[..., BugRecord]:
    """Factory for raw records."""
    return make_record


@pytest.fixture
def graph_factory() -> GraphFactory:
    """Build a graph from an adjacency dict; the root carries ROOT_ALIAS."""

    def _build(
        edges: dict[int, list[int]],
        root: int = 1,
        summaries: dict[int, str] | None = None,
        ranks: dict[int, str | int | None] | None = None,
    ) -> IssueGraph:
        summaries = summaries or {}
        ranks = ranks or {}
        ids = list(edges)
        if root not in edges:
            ids.insert(0, root)
        records = [
            make_record(
                issue_id,
                blocks=edges.get(issue_id, []),
                alias=ROOT_ALIAS if issue_id == root else None,
                summary=summaries.get(issue_id),
                rank=ranks.get(issue_id),
            )
            for issue_id in ids
        ]
        return IssueGraph.build(records)

    return _build


@pytest.fixture
def bugzilla_payload() -> dict:
    """Raw /rest/bug response for a small WebRender-like tree."""
    return {
        "bugs": [
            {
                "id": 1,
                "alias": "wr-projects",
                "summary": "[meta] WebRender projects",
                "blocks": [],
                "cf_rank": None,
            },
            {
                "id": 10,
                "alias": None,
                "summary": "[meta] [project] Picture caching",
                "blocks": [1],
                "cf_rank": "2",
            },
            {
                "id": 11,
                "alias": None,
                "summary": "[project] Compositor <surfaces>",
                "blocks": [1],
                "cf_rank": "",
            },
            {
                "id": 20,
                "alias": None,
                "summary": "Tile invalidation is too eager",
                "blocks": [10],
                "cf_rank": None,
            },
            {
                "id": 21,
                "alias": None,
                "summary": "Crash in surface allocation",
                "blocks": [11, 10],
                "cf_rank": None,
            },
            {
                "id": 30,
                "alias": None,
                "summary": "Orphaned shader bug",
                "blocks": [999999],
                "cf_rank": None,
            },
        ]
    }


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Create temporary data directory structure."""
    data_dir = tmp_path / "data"
    (data_dir / "snapshots").mkdir(parents=True)
    (data_dir / "reports").mkdir(parents=True)
    return data_dir
