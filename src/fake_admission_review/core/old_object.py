"""Synthesize the prior state of an object for update/delete reviews."""

from __future__ import annotations

from typing import Any

from fake_admission_review.config.settings import settings
from fake_admission_review.models import Operation


def synthesize_old_object(
    fields: dict[str, Any],
    operation: Operation,
    suffix: str = settings.old_object_suffix,
) -> dict[str, Any] | None:
    """Return the "before" object for ``operation``, or None for creates.

    Deletes see the object unchanged. Updates see it with ``metadata.name``
    suffixed so a webhook can tell old from new. Only the top level and
    ``metadata`` are copied; ``fields`` is never modified.
    """
    if not operation.needs_old_object:
        return None

    old = dict(fields)
    if operation is Operation.DELETE:
        return old

    metadata = old.get("metadata")
    if not isinstance(metadata, dict):
        return old
    name = metadata.get("name")
    if not isinstance(name, str):
        return old

    old["metadata"] = {**metadata, "name": name + suffix}
    return old
