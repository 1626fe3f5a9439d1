"""Rich console output for generation progress and the final summary."""

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table

from github_stats_factory import constants
from github_stats_factory.models.stats import GitHubStats
from github_stats_factory.utils.formatting import format_number


class Console:
    """Wrapper for rich console output."""

    def __init__(self, verbose: bool = False, quiet: bool = False, console: RichConsole | None = None):
        self.console = console or RichConsole()
        self.verbose = verbose
        self.quiet = quiet

    def print(self, *args, **kwargs):
        """Print to console (respects quiet mode)."""
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"[red]Error:[/red] {message}")

    def print_exception(self):
        """Print the active traceback in verbose mode."""
        if self.verbose:
            self.console.print_exception()

    def print_warning(self, message: str):
        """Print warning message."""
        self.console.print(f"[yellow]Warning:[/yellow] {message}")

    def print_success(self, message: str):
        """Print success message."""
        if not self.quiet:
            self.console.print(f"[green]{message}[/green]")

    def print_step(self, message: str):
        """Print a pipeline step heading."""
        if not self.quiet:
            self.console.print(f"[bold blue]{message}[/bold blue]")

    def print_written(self, path: str):
        """Print a generated file path."""
        if not self.quiet:
            self.console.print(f"  [green]✓[/green] Generated {path}")

    def print_header(self, username: str):
        """Print run header."""
        if self.quiet:
            return

        self.console.print()
        self.console.print(
            Panel(
                f"[bold blue]GitHub Stats Factory[/bold blue]\n[dim]User: {username}[/dim]",
                expand=False,
            )
        )
        self.console.print()

    def print_summary(self, stats: GitHubStats):
        """Print the totals, streaks and top language of a finished run."""
        if self.quiet:
            return

        table = Table(title="Summary", show_header=False, expand=False)
        table.add_column("Metric", style="dim")
        table.add_column("Value")

        table.add_row("Total Contributions", format_number(stats.streak.total_contributions))
        table.add_row("Total Commits", format_number(stats.total_commits))
        table.add_row("Total PRs", format_number(stats.total_prs))
        table.add_row("Total Reviews", format_number(stats.total_reviews))
        table.add_row("Total Issues", format_number(stats.total_issues))
        table.add_row("Total Repos", format_number(stats.total_repos))
        table.add_row("Total Stars", format_number(stats.total_stars))
        table.add_row("Total Forks", format_number(stats.total_forks))
        table.add_row("Followers", format_number(stats.followers))
        table.add_row("Current Streak", f"{stats.streak.current_streak} days")
        table.add_row("Longest Streak", f"{stats.streak.longest_streak} days")
        table.add_row("Avg Commits/Day", str(stats.avg_commits_per_day))

        top = stats.top_language
        table.add_row("Top Language", f"{top.name} ({top.percentage:.1f}%)" if top else "N/A")

        self.console.print()
        self.print_success(constants.MSG_COMPLETED)
        self.console.print(table)

        if stats.repo_activity:
            repo_table = Table(title="Most Active Repositories", expand=False)
            repo_table.add_column("Repository")
            repo_table.add_column("Commits", justify="right")

            for repo in stats.repo_activity:
                repo_table.add_row(repo.name, str(repo.commits))

            self.console.print()
            self.console.print(repo_table)

        self.console.print()
        self.console.print(f"[dim]{constants.MSG_STATS_UPDATED}[/dim]")
