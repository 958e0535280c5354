"""Storage of fetched Bugzilla records as JSON snapshots."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.console import Console

from .. import __version__
from ..bugzilla_client.models import BugRecord, StoredSnapshot

console = Console()


class StorageManager:
    """Manages snapshot files of raw bug records."""

    def __init__(self, base_path: str = "data/snapshots"):
        """Initialize storage manager.

        Args:
            base_path: Base directory for snapshot files
        """
        self.base_path = Path(base_path)

    def _generate_filename(self, product: str, component: str | None) -> str:
        """Generate a filesystem-safe snapshot filename.

        Args:
            product: Bugzilla product
            component: Bugzilla component, if any

        Returns:
            Filename string
        """
        parts = [product] + ([component] if component else [])
        slug = "_".join(parts)
        safe = "".join(c if c.isalnum() or c in "-_" else "-" for c in slug)
        return f"{safe}_bugs.json"

    def default_path(self, product: str, component: str | None) -> Path:
        return self.base_path / self._generate_filename(product, component)

    def save_snapshot(
        self,
        records: list[BugRecord],
        query: dict[str, Any],
        path: Path | None = None,
    ) -> Path:
        """Save fetched records to a JSON file.

        Args:
            records: Records to save
            query: Query parameters the records were fetched with
            path: Target file; defaults to a name derived from the query

        Returns:
            Path to the saved file
        """
        if path is None:
            path = self.default_path(
                query.get("product", "bugs"), query.get("component")
            )
        path.parent.mkdir(parents=True, exist_ok=True)

        snapshot = StoredSnapshot(
            query=query,
            bugs=records,
            metadata={
                "collection_timestamp": datetime.now().isoformat(),
                "tool_version": __version__,
            },
        )

        with open(path, "w", encoding="utf-8") as f:
            json.dump(snapshot.model_dump(), f, indent=2, ensure_ascii=False)

        console.print(f"Saved {len(records)} bugs to {path}")
        return path

    def load_snapshot(
        self, path: Path, rank_field: str | None = None
    ) -> list[BugRecord]:
        """Load records from a snapshot file.

        Accepts both files written by ``save_snapshot`` and raw Bugzilla
        ``/rest/bug`` responses, which share the top-level ``bugs`` list. For
        raw responses the rank is read from ``rank_field``.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a valid snapshot
        """
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Snapshot {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("bugs"), list):
            raise ValueError(f"Snapshot {path} has no 'bugs' list")

        try:
            return [BugRecord.from_api(bug, rank_field) for bug in data["bugs"]]
        except (ValidationError, TypeError) as e:
            raise ValueError(f"Snapshot {path} contains a malformed bug: {e}") from e
