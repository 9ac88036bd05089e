"""
pyprimer Main module - command line interface
"""

import logging
import sys
import time
from typing import Any, List, Optional

import typer
from pydantic import BaseModel

from pyprimer.features import FeatureRegistry, OperationResult
from pyprimer.runner import RunResult, RunSummary
from pyprimer.version import get_version

# Module-level logger
logger = logging.getLogger("pyprimer.main")

EXIT_FAILED = 1
EXIT_NOT_FOUND = 2


class RunResultModel(BaseModel):
    """JSON view of a single example run"""

    unit_id: str
    passed: bool
    actual_output: List[str]
    error: Optional[str] = None
    duration: float

    @classmethod
    def from_result(cls, result: RunResult) -> "RunResultModel":
        return cls(
            unit_id=result.unit_id,
            passed=result.passed,
            actual_output=list(result.actual_output),
            error=result.error_message,
            duration=result.duration,
        )


class RunReport(BaseModel):
    """JSON report for a batch of example runs"""

    version: str
    total: int
    passed: int
    failed: int
    results: List[RunResultModel]

    @classmethod
    def from_summary(cls, summary: RunSummary) -> "RunReport":
        return cls(
            version=get_version(),
            total=summary.total,
            passed=summary.passed,
            failed=summary.failed,
            results=[RunResultModel.from_result(result) for result in summary.results],
        )


# Create CLI app with Typer
app = typer.Typer(
    name="pyprimer",
    help="pyprimer - runnable Python teaching examples",
    add_completion=False,
)


# ----------------- Helper Functions -----------------


class ElapsedMsFormatter(logging.Formatter):
    """Formatter that shows milliseconds since program start, right-aligned for up to 9999 seconds."""
    def __init__(self, fmt=None, datefmt=None, *args, **kwargs):
        super().__init__(fmt, datefmt, *args, **kwargs)
        self.start_time = time.monotonic()
        self.width = 8

    def format(self, record):
        elapsed_ms = int((time.monotonic() - self.start_time) * 1000)
        if elapsed_ms < 10**7:
            elapsed = f"[{elapsed_ms:>{self.width}}ms]"
        else:
            elapsed = f"[{elapsed_ms}ms]"
        record.elapsed = elapsed
        return super().format(record)


VERBOSE_LEVEL = 15  # Between INFO (20) and DEBUG (10)
logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")


def setup_logging(debug: bool = False, verbose: bool = False) -> None:
    """Set up logging configuration"""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = VERBOSE_LEVEL
    else:
        log_level = logging.WARNING
    formatter = ElapsedMsFormatter('%(elapsed)s %(levelname)s %(message)s')
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers = []  # Remove any existing handlers
    root.addHandler(handler)
    root.setLevel(log_level)


def _feature_or_exit(feature_name: str):
    feature = FeatureRegistry.get_feature(feature_name)
    if not feature:
        logger.error("Unknown feature: %s", feature_name)
        raise typer.Exit(code=EXIT_FAILED)
    return feature


def _exit_for_failure(result: OperationResult) -> None:
    """Log a failed operation and exit with the matching code"""
    logger.error("Error: %s", result.error)
    if isinstance(result.data, dict) and "not_found" in result.data:
        raise typer.Exit(code=EXIT_NOT_FOUND)
    raise typer.Exit(code=EXIT_FAILED)


def _call_feature(feature_name: str, **kwargs: Any) -> OperationResult:
    feature = _feature_or_exit(feature_name)
    try:
        result = feature.handler(**kwargs)
    except Exception:
        logger.exception("Unexpected error")
        raise typer.Exit(code=EXIT_FAILED)
    if not result.success:
        _exit_for_failure(result)
    return result


def _print_summary(summary: RunSummary) -> None:
    for result in summary.results:
        typer.echo(f"[{result.status}] {result.unit_id}")
        if result.error is not None:
            for line in str(result.error).splitlines():
                typer.echo(f"       {line}")
    typer.echo(
        f"{summary.total} examples, {summary.passed} passed, {summary.failed} failed"
    )


# ----------------- CLI Commands -----------------


@app.command()
def version(
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Show the pyprimer version"""
    setup_logging(debug)
    result = _call_feature("version")
    typer.echo(f"pyprimer version: {result.data.get('version', 'unknown')}")


@app.command("list")
def list_examples(
    topic: Optional[str] = typer.Option(None, "--topic", "-t", help="Only list examples of this topic"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """List available examples"""
    setup_logging(debug, verbose)
    data = _call_feature("list", topic=topic).data

    if data.get("topic_filter"):
        typer.echo(f"Examples in topic '{data['topic_filter']}':")
    else:
        typer.echo("All available examples:")

    examples = data.get("examples", [])
    if not examples:
        typer.echo("  No examples found.")
    for item in examples:
        typer.echo(f"  {item['id']:<40} {item['title']}")

    if not data.get("topic_filter"):
        topics = data.get("topics", [])
        if topics:
            typer.echo(f"\nAvailable topics: {', '.join(topics)}")
            typer.echo("Use 'pyprimer list --topic <name>' to filter by topic.")


@app.command()
def show(
    unit_id: str = typer.Argument(..., help="Example id"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """Show an example's source code and expected output"""
    setup_logging(debug, verbose)
    data = _call_feature("show", unit_id=unit_id).data

    typer.echo(f"{data['id']}: {data['title']} [{data['topic']}]")
    if data.get("description"):
        typer.echo(f"\n{data['description']}")
    if data.get("source"):
        typer.echo(f"\n{data['source'].rstrip()}")
    expected = data.get("expected_output")
    if expected is None:
        typer.echo("\nNo expected output declared.")
    else:
        typer.echo("\nExpected output:")
        for line in expected:
            typer.echo(f"  {line}")


@app.command()
def run(
    unit_id: Optional[str] = typer.Argument(None, help="Example id to run"),
    run_all: bool = typer.Option(False, "--all", help="Run every registered example"),
    topic: Optional[str] = typer.Option(None, "--topic", "-t", help="Run every example of a topic"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report instead of text"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """Run one example, a topic, or the whole catalog"""
    setup_logging(debug, verbose)
    logger.log(VERBOSE_LEVEL, "pyprimer version: %s", get_version())

    single = unit_id is not None
    sink = sys.stdout if single and not as_json else None
    result = _call_feature(
        "run",
        unit_id=unit_id,
        run_all=run_all,
        topic=topic,
        sink=sink,
    )
    summary: RunSummary = result.data["summary"]

    if as_json:
        typer.echo(RunReport.from_summary(summary).model_dump_json(indent=2))
    elif single:
        outcome = summary.results[0]
        if outcome.error is not None:
            typer.echo(str(outcome.error), err=True)
    else:
        _print_summary(summary)

    raise typer.Exit(code=0 if summary.success else EXIT_FAILED)


if __name__ == "__main__":
    app()
