"""CLI interface for GitHub Stats Factory."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from github_stats_factory import __version__, constants
from github_stats_factory.config import Config
from github_stats_factory.exceptions import ConfigError
from github_stats_factory.generator import StatsGenerator
from github_stats_factory.output.console import Console as OutputConsole

app = typer.Typer(
    name="github-stats-factory",
    help="Generate GitHub profile stat cards, README and HTML page",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"github-stats-factory version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=verbose, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """GitHub Stats Factory - Generate GitHub profile statistics."""
    pass


@app.command()
def generate(
    username: Optional[str] = typer.Option(
        None,
        "--username",
        "-u",
        help="GitHub username (overrides GITHUB_USERNAME)",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the SVG cards (overrides GENERATED_DIR)",
    ),
    readme: Optional[Path] = typer.Option(
        None,
        "--readme",
        help="README output path (overrides README_PATH)",
    ),
    index: Optional[Path] = typer.Option(
        None,
        "--index",
        help="HTML output path (overrides INDEX_PATH)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Minimal output",
    ),
):
    """Fetch GitHub data and write the stat cards, README and HTML page.

    Examples:
        github-stats-factory generate
        github-stats-factory generate --username octocat --output-dir public/generated
    """
    setup_logging(verbose)

    config = Config.from_env()
    if username:
        config.github_username = username
    if output_dir:
        config.generated_dir = output_dir
    if readme:
        config.readme_path = readme
    if index:
        config.index_path = index

    output = OutputConsole(verbose=verbose, quiet=quiet, console=console)
    generator = StatsGenerator(config, console=output)

    try:
        asyncio.run(generator.run())
    except ConfigError as e:
        output.print_error(str(e))
        console.print(f"   {constants.MSG_CONFIG_EXAMPLE}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print()
        output.print_warning("Generation cancelled")
        raise typer.Exit(1)
    except Exception as e:
        output.print_error(f"Could not generate stats: {e}")
        output.print_exception()
        raise typer.Exit(1)


@app.command()
def check_token():
    """Check GitHub token configuration."""
    config = Config.from_env()

    if config.is_authenticated:
        console.print("[green]GitHub token is configured[/green]")
        console.print("Rate limit: 5,000 requests/hour")
        console.print("GraphQL API: Available")
        console.print(f"Username: {config.github_username}")
    else:
        console.print("[yellow]No GitHub token configured[/yellow]")
        console.print("GraphQL API: Not available (contribution calendar needs a token)")
        console.print()
        console.print("To configure a token:")
        console.print("  export GITHUB_TOKEN=your_token_here")
        console.print()
        console.print("Create a token at: https://github.com/settings/tokens")
        console.print("Grant the 'repo' scope to include private repositories.")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
