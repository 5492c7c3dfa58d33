"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from resume_analyzer.clients.factory import create_client
from resume_analyzer.config import load_config
from resume_analyzer.errors import AnalysisError, TransportFailure, ValidationFailure
from resume_analyzer.models.report import AnalysisReport
from resume_analyzer.models.request import ExperienceLevel
from resume_analyzer.parsers.resume_parser import clean_text, read_resume
from resume_analyzer.pipeline.analyzer import ResumeAnalyzer, check_inputs
from resume_analyzer.pipeline.request_builder import OUTPUT_SCHEMA
from resume_analyzer.usage.cost_calculator import calculate_cost

app = typer.Typer(
    name="resume-analyzer",
    help="AI resume analysis: ATS fit, grammar, skill gaps and a 7-day plan",
    no_args_is_help=True,
)
console = Console()
logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


async def _run_with_attempts(
    analyzer: ResumeAnalyzer,
    resume_text: str,
    role: str,
    level: ExperienceLevel,
    attempts: int,
) -> AnalysisReport:
    """Re-invoke the whole pipeline on transport failure, up to ``attempts`` runs.

    This is the caller's explicit policy; the pipeline itself never retries.
    """
    retrying = AsyncRetrying(
        retry=retry_if_exception_type(TransportFailure),
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(min=1, max=10),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    return await retrying(analyzer.run, resume_text, role, level)


def _print_report(report: AnalysisReport) -> None:
    score = report.overall_score
    score_color = "green" if score >= 75 else "yellow" if score >= 50 else "red"
    console.print(
        Panel(f"[bold {score_color}]{score}[/bold {score_color}] / 100", title="Overall Score")
    )

    grammar = report.grammar_improvements
    if grammar.mistakes:
        console.print("\n[bold]Grammar mistakes:[/bold]")
        for mistake in grammar.mistakes:
            console.print(f"  - {escape(mistake)}")
    if grammar.corrections:
        table = Table(title="Corrections", show_lines=True)
        table.add_column("Original", style="red")
        table.add_column("Improved", style="green")
        for correction in grammar.corrections:
            table.add_row(escape(correction.original), escape(correction.improved))
        console.print(table)

    ats = report.ats_optimization
    console.print(
        Panel(
            f"Missing keywords: {escape(', '.join(ats.missing_keywords)) or '-'}\n"
            "Formatting issues:\n"
            + "".join(f"  - {escape(issue)}\n" for issue in ats.formatting_issues)
            + f"Section order: {escape(ats.section_order_improvements)}",
            title="ATS Optimization",
        )
    )

    gaps = report.skill_gap_analysis
    console.print(
        Panel(
            f"Missing or weak: {escape(', '.join(gaps.missing_or_weak_skills)) or '-'}\n"
            + "\n".join(f"  - {escape(s)}" for s in gaps.suggestions),
            title="Skill Gap Analysis",
        )
    )

    feedback = report.section_feedback
    table = Table(title="Section Feedback", show_header=False, show_lines=True)
    table.add_column("Section", style="bold")
    table.add_column("Feedback")
    table.add_row("Professional summary", escape(feedback.professional_summary))
    table.add_row("Skills", escape(feedback.skills))
    table.add_row("Experience", escape(feedback.experience))
    table.add_row("Education", escape(feedback.education))
    console.print(table)

    console.print(Panel(escape(report.improved_summary), title="Improved Summary"))

    table = Table(title="7-Day Action Plan")
    table.add_column("Day", justify="right")
    table.add_column("Task")
    for item in report.seven_day_action_plan:
        table.add_row(str(item.day), escape(item.task))
    console.print(table)


@app.command()
def analyze(
    resume: Path = typer.Argument(None, help="Resume file (.txt/.md; other files are read as raw text)"),
    role: str = typer.Option(..., "--role", "-r", help="Target job role"),
    level: ExperienceLevel = typer.Option(
        ExperienceLevel.JUNIOR, "--level", "-l", case_sensitive=False, help="Experience level"
    ),
    text: str = typer.Option(None, "--text", help="Resume text given inline instead of a file"),
    output: Path = typer.Option(None, "--output", "-o", help="Also write the report as JSON"),
    attempts: int = typer.Option(1, "--attempts", min=1, max=5, help="Runs to try on network failure"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and token usage"),
) -> None:
    """Analyze a resume against a target role and experience level."""
    config = load_config(config_path)
    _setup_logging("DEBUG" if verbose else config.logging.level)

    if text is None:
        if resume is None:
            console.print("[red]Provide a resume file or --text.[/red]")
            raise typer.Exit(1)
        if not resume.exists():
            console.print(f"[red]Resume file not found: {resume}[/red]")
            raise typer.Exit(1)
        text = read_resume(resume)
    else:
        # Inline text gets the same cleanup a text file does.
        text = clean_text(text)

    try:
        check_inputs(text, role)
    except ValidationFailure as exc:
        console.print(f"[red]{exc.user_message}[/red]")
        raise typer.Exit(1)

    if verbose:
        console.print(f"[dim]Provider: {config.llm.provider} ({config.llm.model})[/dim]")
        console.print(f"[dim]Resume: {len(text)} chars, role: {role}, level: {level}[/dim]")

    try:
        client = create_client(config.llm)
    except ValueError as exc:
        console.print(f"[red]Could not set up {config.llm.provider} client: {exc}[/red]")
        raise typer.Exit(1)
    analyzer = ResumeAnalyzer(client.generate_structured)

    try:
        with console.status("Analyzing resume..."):
            report = asyncio.run(_run_with_attempts(analyzer, text, role, level, attempts))
    except AnalysisError as exc:
        logger.debug("Analysis failed: %s (%s)", exc.kind, exc)
        console.print(f"[red]{exc.user_message}[/red]")
        raise typer.Exit(1)

    _print_report(report)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report.to_json(), encoding="utf-8")
        console.print(f"\n[green]Report saved: {output}[/green]")

    if verbose:
        usage = client.get_token_summary()
        cost = calculate_cost(usage["calls"])
        console.print(
            f"[dim]Tokens: {usage['input']} in / {usage['output']} out, "
            f"est. ${cost:.4f}[/dim]"
        )


@app.command()
def schema() -> None:
    """Print the JSON schema the backend must follow."""
    console.print_json(json.dumps(OUTPUT_SCHEMA))


@app.command()
def levels() -> None:
    """List the accepted experience levels."""
    for lvl in ExperienceLevel:
        console.print(f"  [bold]{lvl.value}[/bold]")


if __name__ == "__main__":
    app()
