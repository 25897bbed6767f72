"""Command-line interface for netvis."""

import logging
import sys

import click

from .output.errors import NetworkWriteError
from .output.formatter import format_check_result
from .schema.errors import GraphLoadError, GraphValidationError


def _report_load_error(error: Exception) -> None:
    """Print a load or schema error and exit with status 2."""
    if isinstance(error, GraphValidationError):
        click.echo(f"Schema validation error: {error}", err=True)
        for err in error.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
    else:
        click.echo(f"Error loading file: {error}", err=True)
    sys.exit(2)


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """netvis: render small graphs as vis-network HTML pages."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
            force=True,
        )


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the HTML document here instead of stdout",
)
@click.option("--cdn-url", default=None, help="URL of the vis-network script")
@click.option("--shape", default=None, help="Default node shape (vis-network name)")
def render(graph_file: str, output_path: str | None, cdn_url: str | None, shape: str | None):
    """Render a graph file as an HTML page.

    GRAPH_FILE is the path to a YAML graph file.

    Exit codes:
      0 - Success
      2 - File, schema or write error
    """
    from .graph.builder import build_network
    from .output.config import RenderConfig
    from .output.renderer import render_html, write_html
    from .schema.loader import parse_graph

    try:
        document = parse_graph(graph_file)
    except (GraphLoadError, GraphValidationError) as e:
        _report_load_error(e)

    network = build_network(document)

    overrides = {}
    if cdn_url is not None:
        overrides["cdn_url"] = cdn_url
    if shape is not None:
        overrides["default_shape"] = shape
    config = RenderConfig(**overrides)

    if output_path is None:
        click.echo(render_html(network, config))
        sys.exit(0)

    try:
        written = write_html(network, output_path, config)
    except NetworkWriteError as e:
        click.echo(f"Error writing file: {e}", err=True)
        sys.exit(2)

    click.echo(f"Wrote {written} ({network.node_count} nodes, {network.edge_count} edges)")
    sys.exit(0)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 1 when any warning is found",
)
def check(graph_file: str, output_format: str, strict: bool):
    """Check a graph file for dangling edges and repeated declarations.

    GRAPH_FILE is the path to a YAML graph file.

    Exit codes:
      0 - No warnings, or warnings without --strict
      1 - Warnings found and --strict given
      2 - File or schema error
    """
    from .validators.runner import check_graph_file

    try:
        result = check_graph_file(graph_file)
    except (GraphLoadError, GraphValidationError) as e:
        _report_load_error(e)

    output = format_check_result(result, output_format)  # type: ignore
    click.echo(output)

    if strict and result.has_warnings:
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
