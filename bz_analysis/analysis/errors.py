"""Errors raised while building or analyzing the issue graph."""


class AnalysisError(ValueError):
    """Base class for fatal analysis errors."""


class RootAliasError(AnalysisError):
    """The root tracker alias is missing from, or duplicated in, the input."""

    def __init__(self, alias: str, matches: list[int]):
        self.alias = alias
        self.matches = matches
        if matches:
            detail = f"found on {len(matches)} bugs: " + ", ".join(map(str, matches))
        else:
            detail = "not found on any bug"
        super().__init__(f"Root alias '{alias}' {detail}")


class MalformedIssueError(AnalysisError):
    """An input record carries a value that cannot be parsed."""

    def __init__(self, issue_id: int, message: str):
        self.issue_id = issue_id
        super().__init__(f"Bug {issue_id}: {message}")
