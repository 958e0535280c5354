"""Bugzilla client package for API interaction."""

from .client import BugzillaClient, BugzillaError
from .models import (
    BugRecord,
    Issue,
    IssueId,
    ProjectSummary,
    Report,
    StoredSnapshot,
    UnreachableIssue,
)
from .query import BugQuery, bug_url, build_query_params

__all__ = [
    "BugzillaClient",
    "BugzillaError",
    "BugQuery",
    "BugRecord",
    "Issue",
    "IssueId",
    "ProjectSummary",
    "Report",
    "StoredSnapshot",
    "UnreachableIssue",
    "bug_url",
    "build_query_params",
]
