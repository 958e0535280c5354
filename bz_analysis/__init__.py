"""Bugzilla tracker reachability and project attribution analysis."""

__version__ = "0.1.0"
