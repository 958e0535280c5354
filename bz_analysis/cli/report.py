"""CLI commands for fetching bugs and generating the reachability report."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..analysis.graph import IssueGraph
from ..analysis.report import assemble_report
from ..bugzilla_client.client import BugzillaClient, BugzillaError
from ..bugzilla_client.models import BugRecord, Report
from ..bugzilla_client.query import build_query_params
from ..config import AnalysisConfig
from ..output.renderer import ReportRenderer
from ..storage.manager import StorageManager
from .options import (
    API_KEY_OPTION,
    COMPONENT_OPTION,
    INPUT_OPTION,
    OUTPUT_DIR_OPTION,
    PRODUCT_OPTION,
    RANK_FIELD_OPTION,
    RENDER_OPTION,
    ROOT_ALIAS_OPTION,
    SNAPSHOT_OUTPUT_OPTION,
    URL_OPTION,
    VERBOSE_OPTION,
)

console = Console()


def configure_logging(verbose: bool) -> None:
    """Send library logging to stderr when verbose output is requested."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def load_records(config: AnalysisConfig, input_path: Path | None) -> list[BugRecord]:
    """Load bugs from a snapshot file, or fetch them from Bugzilla."""
    if input_path is not None:
        console.print(f"📂 Loading bugs from {input_path}")
        return StorageManager().load_snapshot(input_path, config.rank_field)

    client = BugzillaClient(
        base_url=config.base_url, api_key=config.api_key, timeout=config.timeout
    )
    return client.fetch_bugs(config.to_query())


def print_summary(report: Report) -> None:
    """Print the report totals and the project table."""
    if report.project_summaries:
        table = Table(title="Projects")
        table.add_column("Rank", justify="right", style="cyan")
        table.add_column("Bug", style="magenta")
        table.add_column("Summary", style="white")
        table.add_column("Bugs", justify="right", style="yellow")
        for project in report.project_summaries:
            table.add_row(
                str(project.severity),
                str(project.id),
                escape(
                    project.summary[:60] + "..."
                    if len(project.summary) > 60
                    else project.summary
                ),
                str(project.bug_count),
            )
        console.print(table)

    console.print(f"Found {report.unreachable_count} unreachable bugs")
    console.print(f"Found {report.project_count} projects")
    console.print(f"Found {report.total_bugs_in_projects} bugs in projects")


def report(
    url: str | None = URL_OPTION,
    product: str | None = PRODUCT_OPTION,
    component: str | None = COMPONENT_OPTION,
    root_alias: str | None = ROOT_ALIAS_OPTION,
    rank_field: str | None = RANK_FIELD_OPTION,
    api_key: str | None = API_KEY_OPTION,
    input: Path | None = INPUT_OPTION,
    output_dir: Path = OUTPUT_DIR_OPTION,
    render: bool = RENDER_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Report bugs that do not block the root tracker, and bugs per project.

    Examples:
        bugzilla-analysis report
        bugzilla-analysis report --product Core --component "Graphics: WebRender"
        bugzilla-analysis report --input data/snapshots/Core_bugs.json --no-render
    """
    configure_logging(verbose)

    try:
        config = AnalysisConfig.from_env(
            base_url=url,
            product=product,
            component=component,
            root_alias=root_alias,
            rank_field=rank_field,
            api_key=api_key,
        )
        records = load_records(config, input)
        console.print(f"✅ Loaded {len(records)} bugs")

        graph = IssueGraph.build(records, root_alias=config.root_alias)
        result = assemble_report(graph, config.base_url)

        if render:
            ReportRenderer().write(result, output_dir)

        print_summary(result)

    except (BugzillaError, ValueError, OSError) as e:
        console.print(f"❌ Error: {escape(str(e))}")
        raise typer.Exit(1)


def fetch(
    url: str | None = URL_OPTION,
    product: str | None = PRODUCT_OPTION,
    component: str | None = COMPONENT_OPTION,
    rank_field: str | None = RANK_FIELD_OPTION,
    api_key: str | None = API_KEY_OPTION,
    output: Path | None = SNAPSHOT_OUTPUT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Fetch open bugs and save them as a snapshot for offline reports.

    Examples:
        bugzilla-analysis fetch --output webrender.json
        bugzilla-analysis report --input webrender.json
    """
    configure_logging(verbose)

    try:
        config = AnalysisConfig.from_env(
            base_url=url,
            product=product,
            component=component,
            rank_field=rank_field,
            api_key=api_key,
        )
        query = config.to_query()
        client = BugzillaClient(
            base_url=config.base_url, api_key=config.api_key, timeout=config.timeout
        )
        records = client.fetch_bugs(query)
        console.print(f"✅ Fetched {len(records)} bugs")

        path = StorageManager().save_snapshot(
            records, build_query_params(query), path=output
        )
        console.print(f"💾 Snapshot saved to {path}")

    except (BugzillaError, ValueError, OSError) as e:
        console.print(f"❌ Error: {escape(str(e))}")
        raise typer.Exit(1)
