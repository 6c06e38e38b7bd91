"""
CourseRank CLI

Command-line interface for ranking courses by how foundational they are.
"""

from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from courserank.common.exceptions import CourseRankError
from courserank.infra.config import RankingConfig, get_settings
from courserank.infra.observability import LogPerformance, get_logger, setup_logging
from courserank.importer import (
    ParseResult,
    export_prerequisites_csv,
    export_rankings_csv,
    load_courses,
    load_prerequisites,
    merge_course_details,
    sample_data,
    save_csv,
)
from courserank.ranking import (
    PageRankEngine,
    RankingRun,
    compute_stats,
    score_bar_width,
)

app = typer.Typer(
    name="courserank",
    help="CourseRank - find the most foundational courses with PageRank",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


class ViewMode(str, Enum):
    TABLE = "table"
    CARDS = "cards"


@app.callback()
def main_callback(
    log_level: str | None = typer.Option(None, "--log-level", help="Override COURSERANK_LOG_LEVEL"),
):
    """CourseRank - find the most foundational courses with PageRank."""
    try:
        logging_config = get_settings().logging
    except CourseRankError as e:
        console.print(f"\n[bold red]❌ Invalid configuration:[/bold red] {e}")
        raise typer.Exit(code=1)

    setup_logging(level=log_level or logging_config.level, format=logging_config.format)


@app.command()
def rank(
    prerequisites_csv: Path = typer.Argument(..., help="CSV with prerequisite,course rows"),
    courses_csv: Path | None = typer.Option(None, "--courses", "-c", help="CSV with id,name,description,credits"),
    top_n: int | None = typer.Option(None, "--top", "-n", help="Number of courses to show"),
    damping: float | None = typer.Option(None, "--damping", "-d", help="Damping factor (0-1)"),
    max_iterations: int | None = typer.Option(None, "--max-iterations", help="Power iteration cap"),
    tolerance: float | None = typer.Option(None, "--tolerance", help="Convergence threshold"),
    export: Path | None = typer.Option(None, "--export", "-o", help="Write the full ranking as CSV"),
    view: ViewMode = typer.Option(ViewMode.TABLE, "--view", help="Display mode (table/cards)"),
):
    """
    Rank courses from a prerequisite CSV.

    Shows the top courses, score statistics and convergence details.
    """
    ranking_config = _ranking_config()

    try:
        data = _load_data(prerequisites_csv, courses_csv)
        engine = PageRankEngine(
            damping_factor=damping or ranking_config.damping_factor,
            max_iterations=max_iterations or ranking_config.max_iterations,
            tolerance=tolerance or ranking_config.tolerance,
        )

        with LogPerformance(logger, "pagerank", courses=len(data.courses)):
            run = engine.run(data.courses, data.prerequisites)
            top = engine.foundational_view(data.courses, run.results, top_n or ranking_config.default_top_n)

    except CourseRankError as e:
        console.print(f"\n[bold red]❌ Ranking failed:[/bold red] {e}")
        raise typer.Exit(code=1)

    console.print(
        f"\n[bold cyan]📚 {len(data.courses)} courses, "
        f"{len(data.prerequisites)} prerequisites[/bold cyan]\n"
    )

    if not top:
        console.print("[dim]No courses found[/dim]")
    elif view == ViewMode.CARDS:
        _display_cards(top, run)
    else:
        _display_table(top, run)

    _display_run(run, engine)

    if export:
        try:
            save_csv(export, export_rankings_csv(run.results, data.courses))
        except CourseRankError as e:
            console.print(f"\n[bold red]❌ Export failed:[/bold red] {e}")
            raise typer.Exit(code=1)
        console.print(f"\n[green]Ranking written to {export}[/green]")


@app.command()
def inspect(
    prerequisites_csv: Path = typer.Argument(..., help="CSV with prerequisite,course rows"),
    course_id: str = typer.Argument(..., help="Course ID to inspect"),
    courses_csv: Path | None = typer.Option(None, "--courses", "-c", help="CSV with id,name,description,credits"),
):
    """
    Show prerequisites, dependents and score of one course.
    """
    try:
        data = _load_data(prerequisites_csv, courses_csv)
    except CourseRankError as e:
        console.print(f"\n[bold red]❌ Loading failed:[/bold red] {e}")
        raise typer.Exit(code=1)

    engine = PageRankEngine.from_config(_ranking_config())
    nodes = engine.build_nodes(data.courses, data.prerequisites)
    node = nodes.get(course_id)
    if node is None:
        console.print(f"\n[bold red]❌ Unknown course:[/bold red] {course_id}")
        raise typer.Exit(code=1)

    table = Table(title=f"{node.id} - {node.name}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Description", node.description)
    table.add_row("Credits", str(node.weight))
    table.add_row("Score", f"{node.score:.6f}")
    table.add_row("Dependents", str(node.in_degree))
    table.add_row("Prerequisites", str(node.out_degree))
    table.add_row("Requires", ", ".join(node.prerequisites) or "-")
    table.add_row("Required by", ", ".join(node.dependents) or "-")

    console.print(table)


@app.command()
def sample(
    output: Path | None = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),
):
    """
    Print the sample curriculum as a prerequisite CSV.
    """
    content = export_prerequisites_csv(sample_data().prerequisites)
    if output:
        try:
            save_csv(output, content)
        except CourseRankError as e:
            console.print(f"\n[bold red]❌ Export failed:[/bold red] {e}")
            raise typer.Exit(code=1)
        console.print(f"[green]Sample data written to {output}[/green]")
    else:
        typer.echo(content, nl=False)


def _ranking_config() -> RankingConfig:
    """Ranking settings; exits with a red message when they are invalid."""
    try:
        return get_settings().ranking
    except CourseRankError as e:
        console.print(f"\n[bold red]❌ Invalid configuration:[/bold red] {e}")
        raise typer.Exit(code=1)


def _load_data(prerequisites_csv: Path, courses_csv: Path | None) -> ParseResult:
    """Load prerequisites, optionally overriding generated course records."""
    data = load_prerequisites(prerequisites_csv)
    if courses_csv:
        data = merge_course_details(data, load_courses(courses_csv))
    return data


def _display_table(top, run: RankingRun):
    """Display the top courses as a table."""
    max_score = run.results[0].score if run.results else 0.0

    table = Table(title="Most Foundational Courses")
    table.add_column("Rank", style="bold", justify="right")
    table.add_column("Course", style="cyan")
    table.add_column("Name")
    table.add_column("Credits", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("", style="green")

    for course in top:
        bar = "█" * max(1, round(score_bar_width(course.score, max_score) / 10))
        table.add_row(
            str(course.rank),
            course.id,
            course.name,
            str(course.weight),
            f"{course.score:.6f}",
            bar,
        )

    console.print(table)


def _display_cards(top, run: RankingRun):
    """Display the top courses as cards."""
    max_score = run.results[0].score if run.results else 0.0

    for course in top:
        width = score_bar_width(course.score, max_score)
        console.print(
            Panel(
                f"{course.description}\n"
                f"[dim]Credits:[/dim] {course.weight}   "
                f"[dim]Score:[/dim] {course.score:.6f} ({width:.0f}%)",
                title=f"#{course.rank} {course.id} - {course.name}",
                title_align="left",
            )
        )


def _display_run(run: RankingRun, engine: PageRankEngine):
    """Display score statistics and convergence details."""
    stats = compute_stats(run.results)

    table = Table(title="Statistics", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Courses", str(stats.count))
    table.add_row("Average Score", f"{stats.avg_score:.6f}")
    table.add_row("Max Score", f"{stats.max_score:.6f}")
    table.add_row("Min Score", f"{stats.min_score:.6f}")
    table.add_row("Damping Factor", str(engine.damping_factor))
    table.add_row("Iterations", str(run.iterations))

    console.print(table)

    if not run.converged:
        console.print(
            f"\n[yellow]⚠️  Did not converge within {engine.max_iterations} iterations "
            f"(max delta {run.max_delta:.2e})[/yellow]"
        )


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
