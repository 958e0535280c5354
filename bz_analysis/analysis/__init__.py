"""Issue graph construction and traversal."""

from .attribution import PROJECT_TAG, is_project, propagate, strip_tags
from .errors import AnalysisError, MalformedIssueError, RootAliasError
from .graph import ROOT_ALIAS, IssueGraph, parse_rank
from .reachability import blocks_root, partition
from .report import assemble_report, collect_projects

__all__ = [
    "AnalysisError",
    "IssueGraph",
    "MalformedIssueError",
    "PROJECT_TAG",
    "ROOT_ALIAS",
    "RootAliasError",
    "assemble_report",
    "blocks_root",
    "collect_projects",
    "is_project",
    "parse_rank",
    "partition",
    "propagate",
    "strip_tags",
]
