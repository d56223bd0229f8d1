"""Command-line interface for bazelgen."""

from pathlib import Path

import click

from bazelgen.config import DEFAULT_RULES_SCALA_VERSION, DEFAULT_WIDTH, __version__
from bazelgen.console import file_header, success
from bazelgen.generators import render_file, workspace_preamble
from bazelgen.loader import ProjectLoadError, example_project, load_project
from bazelgen.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

width_option = click.option(
    "-w",
    "--width",
    type=click.IntRange(min=1),
    default=DEFAULT_WIDTH,
    show_default=True,
    help="Maximum line width of generated text",
)


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output (DEBUG level)",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Show only warnings and errors",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Explicit log level (overrides -v/-q)",
)
@click.version_option(version=__version__, prog_name="bazelgen")
def cli(verbose, quiet, log_level):
    """Generate Bazel build files for Scala projects."""
    if sum([verbose, quiet, log_level is not None]) > 1:
        raise click.UsageError("--verbose, --quiet, and --log-level are mutually exclusive")

    setup_logging(verbose=verbose, quiet=quiet, log_level=log_level)


@cli.command(name="workspace")
@click.option(
    "-r",
    "--rules-version",
    default=DEFAULT_RULES_SCALA_VERSION,
    show_default=True,
    help="rules_scala version (commit or tag) to fetch",
)
@width_option
def workspace(rules_version, width):
    """Print the WORKSPACE preamble that sets up rules_scala."""
    click.echo(render_file(workspace_preamble(rules_version), width), nl=False)


@cli.command(name="render")
@click.argument("project_file", type=click.Path(path_type=Path))  # type: ignore[type-var]
@click.option(
    "-f",
    "--file",
    "only",
    default=None,
    help="Print only this generated file (e.g. WORKSPACE or core/BUILD)",
)
@width_option
def render(project_file, only, width):
    """Render every build file described by PROJECT_FILE.

    Output goes to stdout; each file is preceded by a header unless
    --file selects a single one, in which case the raw content is printed.

    Example:
        bazelgen render project.toml --file WORKSPACE > WORKSPACE
    """
    from bazelgen.renderers import render_project

    try:
        project = load_project(project_file)
    except ProjectLoadError as e:
        raise click.ClickException(str(e)) from e

    files = render_project(project, width=width)

    if only is not None:
        for result in files:
            if result["filename"] == only:
                click.echo(result["content"], nl=False)
                return
        available = ", ".join(r["filename"] for r in files) or "none"
        raise click.ClickException(f"No generated file named {only}. Available: {available}")

    for result in files:
        file_header(result["filename"])
        click.echo(result["content"], nl=False)

    logger.info(f"Rendered {len(files)} file(s) from {project_file}")


@cli.command(name="example")
def example():
    """Print a starter project file."""
    click.echo(example_project(), nl=False)


@cli.command(name="list-plugins")
def list_plugins():
    """List loaded build file renderer plugins."""
    from bazelgen.plugins import get_plugins

    plugins = get_plugins()

    if not plugins:
        click.echo("No renderer plugins registered.")
        raise SystemExit(1)

    click.echo("Renderer plugins:")
    for plugin in plugins:
        click.echo(f"  {click.style(plugin['name'], bold=True)}")
        if plugin["module"] != plugin["name"]:
            click.echo(f"    Module: {plugin['module']}")

    success(f"{len(plugins)} plugin(s) loaded")


def main():
    """Entry point for bazelgen command."""
    cli()


if __name__ == "__main__":
    main()
