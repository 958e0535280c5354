"""Tests for Bugzilla models."""

import pytest
from pydantic import ValidationError

from bz_analysis.bugzilla_client.models import (
    BugRecord,
    Issue,
    ProjectSummary,
    Report,
    UnreachableIssue,
)


class TestBugRecord:
    """Test BugRecord model."""

    def test_valid_record(self) -> None:
        """Test creating a record with every field."""
        record = BugRecord(id=42, alias="wr-projects", summary="Meta", blocks=[1, 2])
        assert record.id == 42
        assert record.alias == "wr-projects"
        assert record.blocks == [1, 2]
        assert record.rank is None

    def test_defaults(self) -> None:
        """Test optional fields default to empty values."""
        record = BugRecord(id=7)
        assert record.alias is None
        assert record.summary == ""
        assert record.blocks == []

    def test_missing_id(self) -> None:
        """Test validation with missing id."""
        with pytest.raises(ValidationError):
            BugRecord(summary="No id")  # type: ignore[call-arg]

    def test_alias_list_takes_first_entry(self) -> None:
        """Test Bugzilla 5 style alias lists."""
        assert BugRecord(id=1, alias=["wr-projects", "other"]).alias == "wr-projects"
        assert BugRecord(id=1, alias=[]).alias is None

    def test_every_alias_is_kept(self) -> None:
        """Test all aliases survive while the first is used for display."""
        record = BugRecord.from_api({"id": 1, "alias": ["gfx-meta", "wr-projects"]})
        assert record.alias == "gfx-meta"
        assert record.aliases == ["gfx-meta", "wr-projects"]

    def test_single_alias_listed(self) -> None:
        assert BugRecord(id=1, alias="wr-projects").aliases == ["wr-projects"]
        assert BugRecord(id=1).aliases == []

    def test_raw_rank_is_not_coerced(self) -> None:
        """Test the rank reaches graph construction unchanged."""
        record = BugRecord.from_api({"id": 1, "cf_rank": True}, "cf_rank")
        assert record.rank is True

    def test_from_api_reads_rank_field(self) -> None:
        """Test the rank is picked from the configured field."""
        data = {"id": 5, "summary": "S", "blocks": [1], "cf_rank": "3", "extra": 1}
        record = BugRecord.from_api(data, rank_field="cf_rank")
        assert record.rank == "3"
        assert record.blocks == [1]

    def test_from_api_without_rank_field(self) -> None:
        """Test records without a rank field leave rank unset."""
        record = BugRecord.from_api({"id": 5, "summary": "S", "blocks": []}, "cf_rank")
        assert record.rank is None

    def test_from_api_falls_back_to_rank_key(self) -> None:
        """Test snapshots written by this tool store the rank as 'rank'."""
        record = BugRecord.from_api({"id": 5, "rank": 4}, rank_field="cf_rank")
        assert record.rank == 4


class TestIssue:
    """Test Issue model."""

    def test_issue_is_frozen(self) -> None:
        """Test issues cannot be mutated after construction."""
        issue = Issue(id=1, summary="Root", blocks=(2,))
        with pytest.raises(ValidationError):
            issue.summary = "Changed"  # type: ignore[misc]

    def test_rank_default(self) -> None:
        """Test unranked issues use the -1 sentinel."""
        assert Issue(id=1).rank == -1


class TestReport:
    """Test Report aggregates."""

    def test_counts(self) -> None:
        """Test counts derive from the result lists."""
        report = Report(
            unreachable_issues=[
                UnreachableIssue(id=3, url="u3", summary="s3"),
                UnreachableIssue(id=4, url="u4", summary="s4"),
            ],
            project_summaries=[
                ProjectSummary(id=10, url="u10", summary="A", bug_count=3),
                ProjectSummary(id=11, url="u11", summary="B", bug_count=2),
            ],
        )
        assert report.unreachable_count == 2
        assert report.project_count == 2
        assert report.total_bugs_in_projects == 5

    def test_empty_report(self) -> None:
        """Test an empty report has zero totals."""
        report = Report()
        assert report.unreachable_count == 0
        assert report.project_count == 0
        assert report.total_bugs_in_projects == 0
