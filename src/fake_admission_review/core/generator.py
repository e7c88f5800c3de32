"""End-to-end generation: manifest file in, formatted review out."""

from __future__ import annotations

import logging

from fake_admission_review.config.settings import ReviewParams, Settings, settings as default_settings
from fake_admission_review.core.request_builder import build_admission_review
from fake_admission_review.errors import ReviewError
from fake_admission_review.output.formatters import format_review
from fake_admission_review.utils.manifest_parser import read_manifest

logger = logging.getLogger(__name__)


def run(params: ReviewParams, settings: Settings = default_settings) -> str:
    """Generate an AdmissionReview for ``params.file`` and return it as text."""
    params.validate(settings)

    try:
        manifest = read_manifest(params.file)
    except ReviewError as exc:
        exc.add_context("failed to read YAML file")
        raise
    logger.debug("Parsed %s %r from %s", manifest.kind, manifest.name, params.file)

    overrides = {manifest.kind: params.resource} if params.resource else None
    try:
        review = build_admission_review(
            manifest,
            params.resolved_operation,
            resource_overrides=overrides,
            settings=settings,
        )
    except ReviewError as exc:
        exc.add_context("failed to create admission review")
        raise

    try:
        return format_review(review, params.resolved_output)
    except ReviewError as exc:
        exc.add_context("failed to format output")
        raise
