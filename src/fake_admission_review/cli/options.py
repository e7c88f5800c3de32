"""Shared CLI options."""

from __future__ import annotations

import typer

from fake_admission_review.config.settings import settings

FileOption = typer.Option("", "--file", "-f", help="Path to the input YAML file")
OperationOption = typer.Option(
    settings.default_operation, "--operation", help="Operation type: create, update, delete"
)
OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: yaml, json")
ResourceOption = typer.Option(
    None, "--resource", "-r", help="Plural resource name to use instead of the guessed one"
)
HighlightOption = typer.Option(False, "--highlight", help="Syntax-highlight the output")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr")
