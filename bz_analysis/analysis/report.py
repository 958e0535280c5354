"""Assembly of the unreachable-bug and project-summary report."""

import logging

from ..bugzilla_client.models import IssueId, ProjectSummary, Report, UnreachableIssue
from ..bugzilla_client.query import bug_url
from .attribution import is_project, propagate, strip_tags
from .graph import IssueGraph
from .reachability import partition

logger = logging.getLogger(__name__)


def collect_projects(graph: IssueGraph, base_url: str) -> dict[IssueId, ProjectSummary]:
    """Create an empty summary for every project-tagged issue."""
    return {
        issue.id: ProjectSummary(
            id=issue.id,
            severity=issue.rank,
            url=bug_url(base_url, issue.id),
            summary=strip_tags(issue.summary),
        )
        for issue in graph.issues.values()
        if is_project(issue.summary)
    }


def assemble_report(graph: IssueGraph, base_url: str) -> Report:
    """Classify every issue and attribute reachable bugs to projects.

    Project summaries are sorted by ascending severity, so unranked (-1)
    projects come first.
    """
    reachable, unreachable = partition(graph)
    logger.info(
        "%d bugs reach the root tracker, %d do not", len(reachable), len(unreachable)
    )

    unreachable_issues = [
        UnreachableIssue(
            id=issue_id,
            url=bug_url(base_url, issue_id),
            summary=graph.issues[issue_id].summary,
        )
        for issue_id in unreachable
    ]

    projects = collect_projects(graph, base_url)
    for issue_id in reachable:
        propagate(graph, issue_id, projects)

    return Report(
        unreachable_issues=unreachable_issues,
        project_summaries=sorted(projects.values(), key=lambda p: p.severity),
    )
