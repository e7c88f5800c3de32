"""JSON / YAML output dispatch."""

from __future__ import annotations

import json

import typer
import yaml
from rich.console import Console
from rich.syntax import Syntax

from fake_admission_review.errors import SerializationError
from fake_admission_review.models import OutputFormat
from fake_admission_review.models.review import AdmissionReview

console = Console()


def format_review(review: AdmissionReview, fmt: OutputFormat | str) -> str:
    """Serialize a review as YAML or as JSON indented by four spaces."""
    fmt = fmt if isinstance(fmt, OutputFormat) else OutputFormat.from_str(fmt)
    data = review.to_dict()

    if fmt is OutputFormat.JSON:
        try:
            return json.dumps(data, indent=4, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"failed to marshal to JSON: {exc}") from exc

    try:
        return yaml.dump(data, default_flow_style=False, allow_unicode=True)
    except yaml.YAMLError as exc:
        raise SerializationError(f"failed to marshal to YAML: {exc}") from exc


def render_review(text: str, fmt: OutputFormat, highlight: bool = False) -> None:
    """Write formatted output to stdout, optionally syntax-highlighted."""
    if not highlight:
        typer.echo(text.rstrip("\n"))
        return
    console.print(Syntax(text, fmt.value, theme="monokai", line_numbers=False))
