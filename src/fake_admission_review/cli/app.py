"""Root Typer application."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="far",
    help="Fake Admission Review - Generate AdmissionReview requests from Kubernetes manifests.",
)


def _register_commands() -> None:
    from fake_admission_review.cli.commands.generate_cmd import generate

    # generation is the only action, so its flags live on the root command
    app.callback(invoke_without_command=True)(generate)


_register_commands()


def main() -> None:
    app()
