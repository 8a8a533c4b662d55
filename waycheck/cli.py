"""Command-line interface for waycheck."""

import sys

import click
from loguru import logger

from .checks.config import ConfigurationError, load_configuration
from .checks.runner import check_graph_file
from .checks.short_segment import CHECK_NAME
from .output.formatter import format_check_result
from .schema.errors import SchemaLoadError, SchemaValidationError


def setup_logging(verbose: bool = False):
    """Configure logging"""
    logger.remove()
    level = "DEBUG" if verbose else "WARNING"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level,
    )


@click.group()
@click.version_option(package_name="waycheck")
def main():
    """waycheck: data-quality checks for road-network graphs."""
    pass


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="YAML or JSON file with check settings",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--max-length",
    type=float,
    default=None,
    help="Maximum edge length in meters (edge.length.maximum.meters)",
)
@click.option(
    "--min-valence",
    type=int,
    default=None,
    help="Minimum main edges per node (node.valence.minimum)",
)
@click.option(
    "--min-priority",
    default=None,
    help="Least important highway class checked (highway.priority.minimum)",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose output")
def check(
    graph_file: str,
    config_file: str | None,
    output_format: str,
    max_length: float | None,
    min_valence: int | None,
    min_priority: str | None,
    verbose: bool,
):
    """Check a road-network file for short, poorly connected segments.

    GRAPH_FILE is the path to a YAML or JSON road-network document.

    Exit codes:
      0 - No flags
      1 - Short segments flagged
      2 - File, schema or configuration error
    """
    setup_logging(verbose)

    try:
        settings = load_configuration(config_file, CHECK_NAME) if config_file else {}
    except SchemaLoadError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(2)

    # Command-line options win over the configuration file
    overrides = {
        "edge.length.maximum.meters": max_length,
        "node.valence.minimum": min_valence,
        "highway.priority.minimum": min_priority,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})

    try:
        result = check_graph_file(graph_file, settings)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)

    # Output the result
    output = format_check_result(result, output_format)  # type: ignore
    click.echo(output)

    sys.exit(1 if result.has_flags else 0)


if __name__ == "__main__":
    main()
