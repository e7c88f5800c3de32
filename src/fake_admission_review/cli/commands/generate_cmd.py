"""far --file <manifest> - Generate a fake AdmissionReview."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from fake_admission_review.cli.options import (
    FileOption,
    HighlightOption,
    OperationOption,
    OutputOption,
    ResourceOption,
    VerboseOption,
)
from fake_admission_review.config.settings import ReviewParams
from fake_admission_review.core.generator import run
from fake_admission_review.errors import ReviewError
from fake_admission_review.output.formatters import render_review

err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def generate(
    file: str = FileOption,
    operation: str = OperationOption,
    output: str = OutputOption,
    resource: Optional[str] = ResourceOption,
    highlight: bool = HighlightOption,
    verbose: bool = VerboseOption,
) -> None:
    """Build a dry-run AdmissionReview request from a Kubernetes manifest."""
    _configure_logging(verbose)

    params = ReviewParams(file=file, operation=operation, output=output, resource=resource)
    try:
        text = run(params)
    except ReviewError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1)

    render_review(text, params.resolved_output, highlight=highlight)
