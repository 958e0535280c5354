"""Reachability of the root tracker through "blocks" edges."""

import logging

from ..bugzilla_client.models import IssueId
from .graph import IssueGraph

logger = logging.getLogger(__name__)


def blocks_root(graph: IssueGraph, issue_id: IssueId) -> bool:
    """Return True if ``issue_id`` transitively blocks the root tracker.

    Depth-first over ``blocks`` edges with a visited set, so dependency
    cycles that never reach the root terminate with False. Ids missing from
    the graph are dead ends. The graph is not modified.
    """
    visited: set[IssueId] = set()
    stack = [issue_id]

    while stack:
        current = stack.pop()
        if current == graph.root_id:
            return True
        if current in visited:
            continue
        visited.add(current)

        issue = graph.get(current)
        if issue is None:
            # Security bug or outside the fetched component
            logger.debug("Bug %d is not in the fetched set", current)
            continue

        # Reversed so edges are explored in their listed order
        stack.extend(reversed(issue.blocks))

    return False


def partition(graph: IssueGraph) -> tuple[list[IssueId], list[IssueId]]:
    """Split every issue id into (reachable, unreachable), keeping graph order."""
    reachable: list[IssueId] = []
    unreachable: list[IssueId] = []
    for issue_id in graph.issues:
        if blocks_root(graph, issue_id):
            reachable.append(issue_id)
        else:
            unreachable.append(issue_id)
    return reachable, unreachable
