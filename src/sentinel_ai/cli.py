from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .client import AnalysisClient
from .config import load_settings
from .errors import MissingFileError, NetworkFailure
from .explain import explain as explain_issue
from .logger_config import setup_logger
from .models import AnalysisResult, Lens
from .report import build_reports, render_json, render_markdown
from .sanitize import coerce_score

app = typer.Typer(add_completion=False, help="SentinelAI: lens-based view of code analysis results")


def _resolve_lens(value: Optional[str]) -> Optional[Lens]:
    if value is None:
        return None
    lens = Lens.parse(value.strip().lower())
    if lens is None:
        valid = ", ".join(m.value for m in Lens)
        typer.echo(f"Unknown lens '{value}'. Expected one of: {valid}", err=True)
        raise typer.Exit(code=1)
    return lens


def _emit(result: AnalysisResult, lens: Optional[Lens], as_json: bool) -> None:
    reports = build_reports(result, [lens] if lens else None)
    if as_json:
        typer.echo(render_json(result, reports))
    else:
        typer.echo(render_markdown(result, reports).rstrip())


@app.command()
def analyze(
    file: Optional[Path] = typer.Argument(None, help="Python source file to analyze"),
    lens: Optional[str] = typer.Option(None, "--lens", help="Only show this lens (security|complexity|dependency|refactor)"),
    endpoint: Optional[str] = typer.Option(None, "--endpoint", help="Analysis backend URL"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of Markdown"),
):
    """
    Submit FILE to the analysis backend and print the score and lens report.
    """
    settings = load_settings()
    setup_logger(level=settings.log_level)
    selected = _resolve_lens(lens)
    try:
        client = AnalysisClient(endpoint=endpoint, timeout=timeout, settings=settings)
        result = client.analyze(file)
    except (MissingFileError, OSError) as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=2)
    except NetworkFailure as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=1)

    _emit(result, selected, as_json)


@app.command()
def classify(
    lens: str = typer.Option(..., "--lens", help="Lens to classify through"),
    score: Optional[int] = typer.Option(None, "--score", help="Overall score (0-100)"),
    issue: list[str] = typer.Option([], "--issue", help="Issue text (repeatable)"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of Markdown"),
):
    """
    Classify issue strings offline, without contacting the backend.
    """
    selected = _resolve_lens(lens)
    result = AnalysisResult(score=coerce_score(score), issues=tuple(issue))
    _emit(result, selected, as_json)


@app.command()
def explain(text: str = typer.Argument(..., help="Issue text to explain")):
    """
    Print the rationale attached to an issue.
    """
    typer.echo(explain_issue(text))


@app.command()
def lenses():
    """
    List the available lenses.
    """
    for lens in Lens:
        typer.echo(f"{lens.value}\t{lens.display_title}")
