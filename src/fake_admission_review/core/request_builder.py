"""Assemble an AdmissionReview request from a parsed manifest."""

from __future__ import annotations

import logging
import uuid
from typing import Mapping

from fake_admission_review.config.settings import Settings, settings as default_settings
from fake_admission_review.core.old_object import synthesize_old_object
from fake_admission_review.core.resource_resolver import resolve_identity
from fake_admission_review.models import Operation
from fake_admission_review.models.review import AdmissionRequest, AdmissionReview, UserInfo
from fake_admission_review.utils.encoding import dump_json, yaml_to_json
from fake_admission_review.utils.manifest_parser import ParsedManifest

logger = logging.getLogger(__name__)


def build_admission_review(
    manifest: ParsedManifest,
    operation: Operation | str,
    resource_overrides: Mapping[str, str] | None = None,
    settings: Settings = default_settings,
) -> AdmissionReview:
    """Build a dry-run AdmissionReview for ``manifest``.

    ``object`` is the manifest itself for creates and updates and is left out
    for deletes. ``oldObject`` is only set for updates and deletes.
    """
    op = operation if isinstance(operation, Operation) else Operation.from_str(operation)
    identity = resolve_identity(manifest.api_version, manifest.kind, overrides=resource_overrides)
    logger.debug(
        "Building %s review for %s (resource=%s)", op.value, identity.api_version, identity.resource
    )

    obj = None
    if op is not Operation.DELETE:
        obj = yaml_to_json(manifest.raw)

    old_obj = None
    old_fields = synthesize_old_object(manifest.fields, op, suffix=settings.old_object_suffix)
    if old_fields is not None:
        old_obj = dump_json(old_fields)

    request = AdmissionRequest(
        uid=str(uuid.uuid4()),
        identity=identity,
        operation=op,
        user_info=UserInfo(username=settings.fake_username, uid=str(uuid.uuid4())),
        object=obj,
        old_object=old_obj,
        dry_run=True,
        name=manifest.name,
        namespace=manifest.namespace,
    )
    return AdmissionReview(request=request, api_version=settings.review_api_version)
