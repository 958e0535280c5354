"""HTML rendering of analysis reports with Jinja2."""

from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape
from rich.console import Console

from ..bugzilla_client.models import Report

console = Console()

UNREACHABLE_TEMPLATE = "unreachable.html"
PROJECTS_TEMPLATE = "projects.html"
UNREACHABLE_OUTPUT = "bugs.html"
PROJECTS_OUTPUT = "projects.html"


class ReportRenderer:
    """Renders the unreachable-bug and project-summary documents."""

    def __init__(self, environment: Environment | None = None):
        self.environment = environment or Environment(
            loader=PackageLoader("bz_analysis.output", "templates"),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def _context(self, report: Report, title: str | None) -> dict[str, Any]:
        return {
            "title": title,
            "bugs": [issue.model_dump() for issue in report.unreachable_issues],
            "unreachable_count": report.unreachable_count,
            "projects": [project.model_dump() for project in report.project_summaries],
            "project_count": report.project_count,
            "total_bugs_in_projects": report.total_bugs_in_projects,
        }

    def render_unreachable(self, report: Report, title: str | None = None) -> str:
        template = self.environment.get_template(UNREACHABLE_TEMPLATE)
        return template.render(self._context(report, title))

    def render_projects(self, report: Report, title: str | None = None) -> str:
        template = self.environment.get_template(PROJECTS_TEMPLATE)
        return template.render(self._context(report, title))

    def write(
        self, report: Report, output_dir: Path, title: str | None = None
    ) -> list[Path]:
        """Render both documents into ``output_dir``.

        Returns:
            Paths of the written files, unreachable report first
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        documents = [
            (UNREACHABLE_OUTPUT, self.render_unreachable(report, title)),
            (PROJECTS_OUTPUT, self.render_projects(report, title)),
        ]

        written = []
        for filename, content in documents:
            path = output_dir / filename
            path.write_text(content, encoding="utf-8")
            console.print(f"Wrote {path}")
            written.append(path)
        return written
