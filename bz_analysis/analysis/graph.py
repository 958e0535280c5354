"""In-memory issue graph built from flat Bugzilla records."""

import logging
from collections.abc import Iterable
from typing import Any

from ..bugzilla_client.models import BugRecord, Issue, IssueId
from .errors import MalformedIssueError, RootAliasError

logger = logging.getLogger(__name__)

ROOT_ALIAS = "wr-projects"
UNRANKED = -1


def parse_rank(issue_id: IssueId, raw: Any) -> int:
    """Parse a raw rank value.

    Args:
        issue_id: Id of the bug the value belongs to, for error reporting
        raw: Value from the rank field; None or an empty string means unset

    Returns:
        The integer rank, or -1 when the field is unset

    Raises:
        MalformedIssueError: If the value is set but is not an integer
    """
    if raw is None:
        return UNRANKED
    if isinstance(raw, bool) or not isinstance(raw, int | str):
        raise MalformedIssueError(issue_id, f"rank {raw!r} is not an integer")
    if isinstance(raw, int):
        return raw

    text = raw.strip()
    if not text:
        return UNRANKED
    try:
        return int(text)
    except ValueError:
        raise MalformedIssueError(issue_id, f"rank {raw!r} is not an integer")


class IssueGraph:
    """All fetched issues keyed by id, plus the root tracker id.

    ``blocks`` edges may point at ids that are not in ``issues`` (bugs outside
    the fetched product/component, or security-restricted bugs). Those are
    dead ends, not errors.
    """

    def __init__(self, issues: dict[IssueId, Issue], root_id: IssueId):
        self.issues = issues
        self.root_id = root_id

    def __len__(self) -> int:
        return len(self.issues)

    def __contains__(self, issue_id: object) -> bool:
        return issue_id in self.issues

    def get(self, issue_id: IssueId) -> Issue | None:
        return self.issues.get(issue_id)

    @classmethod
    def build(
        cls, records: Iterable[BugRecord], root_alias: str = ROOT_ALIAS
    ) -> "IssueGraph":
        """Build the graph from raw records.

        Args:
            records: Fetched bug records
            root_alias: Alias identifying the root tracker bug

        Returns:
            Populated IssueGraph

        Raises:
            MalformedIssueError: If a record has an unparseable rank
            RootAliasError: If zero or several records carry ``root_alias``
        """
        issues: dict[IssueId, Issue] = {}
        root_matches: list[IssueId] = []

        for record in records:
            if root_alias in record.aliases:
                root_matches.append(record.id)

            if record.id in issues:
                # Last write wins
                logger.debug("Duplicate bug id %d in input, replacing", record.id)

            issues[record.id] = Issue(
                id=record.id,
                alias=record.alias,
                aliases=tuple(record.aliases),
                rank=parse_rank(record.id, record.rank),
                summary=record.summary,
                blocks=tuple(record.blocks),
            )

        if len(root_matches) != 1:
            raise RootAliasError(root_alias, root_matches)

        root_id = root_matches[0]
        logger.info("Built graph of %d bugs, root tracker is %d", len(issues), root_id)
        return cls(issues, root_id)
