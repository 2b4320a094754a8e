import sys
from pathlib import Path
from typing import Optional

import typer

from .analyzer import analyze as analyze_text
from .common.settings import settings as S
from .common.structured_logging import get_logger, log_error_with_context, route_logs_to
from .errors import SimplifierError
from .models import ProficiencyLevel, ReadabilityMetrics
from .pipeline import Simplifier
from .tools.readability_formula_estimator import readability_formula_estimator
from .vocabulary import BuiltinVocabularySource, JsonVocabularySource

app = typer.Typer(help="Estimate reading difficulty and simplify articles for beginner readers")

logger = get_logger(__name__)


@app.callback()
def main(ctx: typer.Context):
    """Estimate reading difficulty and simplify articles for beginner readers."""
    # stdout carries the report; JSON logs go to stderr while a command runs
    ctx.call_on_close(route_logs_to(sys.stderr))


def _read_text(file: Optional[Path]) -> str:
    if file is None:
        return sys.stdin.read()
    return file.read_text(encoding="utf-8")


def _show_metrics(title: str, m: ReadabilityMetrics) -> None:
    typer.echo(f"{title}:")
    typer.echo(f"  flesch score:       {round(m.flesch_score)}")
    typer.echo(f"  avg words/sentence: {round(m.avg_words_per_sentence)}")
    typer.echo(f"  estimated level:    {m.cefr_label}")
    typer.echo("")


def _fail(error: SimplifierError, operation: str) -> None:
    log_error_with_context(logger, error, operation, error_code=error.error_code)
    typer.secho(f"error: {error.message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=2)


def _progress(done: int, total: int) -> None:
    typer.echo(f"\r  processing... {done}/{total}", nl=False, err=True)
    if done == total:
        typer.echo("", err=True)


# ---------------------------------------------------------------------
# analyze
# ---------------------------------------------------------------------
@app.command()
def analyze(
    file: Optional[Path] = typer.Argument(None, help="Text file to read (stdin when omitted)"),
    formulas: bool = typer.Option(False, "--formulas", help="Also print textstat formula scores"),
):
    """Print readability metrics for a text."""
    text = _read_text(file)
    if not text.strip():
        typer.echo("No text given.")
        return

    metrics = analyze_text(text)
    _show_metrics("metrics", metrics)

    if formulas:
        report = readability_formula_estimator(text, metrics=metrics)
        typer.echo("formulas:")
        if not report["estimated_level"]:
            typer.echo("  text too short for formula scores")
            return
        for name, value in report["scores"].items():
            typer.echo(f"  {name + ':':<30} {value:.2f}")
        typer.echo(f"  {'average grade:':<30} {report['average_grade_level']:.2f}")
        typer.echo(f"  {'formula level:':<30} {report['cefr_label']}")
        typer.echo(f"  {'heuristic level:':<30} {report['heuristic_label']}")


# ---------------------------------------------------------------------
# simplify
# ---------------------------------------------------------------------
@app.command()
def simplify(
    file: Optional[Path] = typer.Argument(None, help="Text file to read (stdin when omitted)"),
    level: Optional[str] = typer.Option(
        None, "--level", "-l", help="beginner|elementary (or A1|A2); defaults to DEFAULT_LEVEL"
    ),
    vocabulary: Optional[Path] = typer.Option(
        None, "--vocabulary", help="JSON file of hard->simple word pairs"
    ),
):
    """Rewrite a text for the chosen level and compare before/after metrics."""
    text = _read_text(file)
    if not text.strip():
        typer.echo("No text given.")
        return

    try:
        target = ProficiencyLevel.parse(level) if level else S.default_level
        source = None
        if vocabulary is not None:
            source = JsonVocabularySource(vocabulary, base=BuiltinVocabularySource(target))
        simplifier = Simplifier(target, progress=_progress, vocabulary_source=source)
    except SimplifierError as e:
        _fail(e, "simplify")

    _show_metrics("original metrics", analyze_text(text))

    result = simplifier.run(text)

    _show_metrics("simplified metrics", analyze_text(result.simplified))

    typer.echo("[original]")
    typer.echo(result.original.rstrip("\n"))
    typer.echo("")
    typer.echo(f"[simplified - {result.level.cefr}]")
    typer.echo(result.simplified)


# ---------------------------------------------------------------------
# levels
# ---------------------------------------------------------------------
@app.command()
def levels():
    """List the available target levels."""
    for lvl in ProficiencyLevel:
        marker = " (default)" if lvl == S.default_level else ""
        typer.echo(f"{lvl.value:<11} {lvl.cefr}  max {lvl.max_sentence_words} words/sentence{marker}")


if __name__ == "__main__":
    app()
