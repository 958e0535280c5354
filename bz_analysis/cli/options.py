"""Standardized CLI option definitions shared by the commands.

Options left at None fall back to environment variables, then to the
defaults in ``bz_analysis.config``.
"""

import typer

# Source options - where bugs come from
URL_OPTION = typer.Option(
    None, "--url", "-u", help="Bugzilla base URL (env: BUGZILLA_URL)"
)

PRODUCT_OPTION = typer.Option(
    None, "--product", "-p", help="Bugzilla product (env: BUGZILLA_PRODUCT)"
)

COMPONENT_OPTION = typer.Option(
    None, "--component", "-c", help="Bugzilla component (env: BUGZILLA_COMPONENT)"
)

RANK_FIELD_OPTION = typer.Option(
    None,
    "--rank-field",
    help="Bug field holding the project rank (env: BUGZILLA_RANK_FIELD)",
)

API_KEY_OPTION = typer.Option(
    None, "--api-key", "-k", help="Bugzilla API key (env: BUGZILLA_API_KEY)"
)

INPUT_OPTION = typer.Option(
    None,
    "--input",
    "-i",
    help="Read bugs from a saved snapshot instead of fetching them",
)

# Analysis options
ROOT_ALIAS_OPTION = typer.Option(
    None,
    "--root-alias",
    "-a",
    help="Alias of the root tracker bug (env: BUGZILLA_ROOT_ALIAS)",
)

# Output options
OUTPUT_DIR_OPTION = typer.Option(
    ".", "--output-dir", "-o", help="Directory for the rendered HTML reports"
)

SNAPSHOT_OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    "-o",
    help="Snapshot file path (defaults to data/snapshots/<product>_<component>)",
)

RENDER_OPTION = typer.Option(
    True, "--render/--no-render", help="Write the HTML reports"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
