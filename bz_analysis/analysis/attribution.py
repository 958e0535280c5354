"""Attribution of bugs to the project issues they transitively block."""

import re
from collections.abc import Mapping

from ..bugzilla_client.models import IssueId, ProjectSummary
from .graph import IssueGraph

PROJECT_TAG = "[project]"

_LEADING_TAGS = re.compile(r"^\s*(?:\[[^\]]*\]\s*)+")
_PROJECT_TAG = re.compile(r"\s*\[project\]\s*", re.IGNORECASE)


def is_project(summary: str) -> bool:
    """Check whether a summary carries the project tag."""
    return PROJECT_TAG in summary.lower()


def strip_tags(summary: str) -> str:
    """Remove leading ``[tag]`` markers and any project tag from a summary.

    Example:
        >>> strip_tags("[meta] [project] Foo")
        "Foo"
        >>> strip_tags("Foo [project] bar")
        "Foo bar"
    """
    summary = _LEADING_TAGS.sub("", summary)
    return _PROJECT_TAG.sub(" ", summary).strip()


def propagate(
    graph: IssueGraph,
    start_id: IssueId,
    project_summaries: Mapping[IssueId, ProjectSummary],
) -> set[IssueId]:
    """Credit ``start_id`` to every project it transitively blocks.

    Each project reached is incremented once for this call, however many
    paths lead to it. The start issue is never credited to itself.

    Args:
        graph: Issue graph
        start_id: Bug whose blocked projects are credited
        project_summaries: Project accumulator, mutated in place

    Returns:
        Ids of the projects credited by this call
    """
    visited: set[IssueId] = {start_id}
    credited: set[IssueId] = set()

    start = graph.get(start_id)
    if start is None:
        return credited
    stack = list(reversed(start.blocks))

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)

        project = project_summaries.get(current)
        if project is not None and current not in credited:
            project.bug_count += 1
            credited.add(current)

        issue = graph.get(current)
        if issue is not None:
            stack.extend(reversed(issue.blocks))

    return credited
