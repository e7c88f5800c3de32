"""Map apiVersion/kind to a group, version and plural resource name.

Pluralization is a heuristic. It does not consult API discovery, so callers
that know the real resource name pass it in through ``overrides``.
"""

from __future__ import annotations

import logging
from typing import Mapping

from fake_admission_review.models.identity import ResourceIdentity

logger = logging.getLogger(__name__)

IRREGULAR_PLURALS: dict[str, str] = {
    "policy": "policies",
    "networkpolicy": "networkpolicies",
    "ingress": "ingresses",
}


def parse_group_version(api_version: str) -> tuple[str, str]:
    """Split ``group/version``; core resources (``v1``) have an empty group."""
    if "/" in api_version:
        group, version = api_version.split("/", 1)
        return group, version
    return "", api_version


def pluralize(kind: str) -> str:
    """Guess the plural resource name of a kind.

    ``Gateway`` becomes ``gatewaies``: a trailing ``y`` is always replaced,
    vowel or not.
    """
    resource = kind.lower()
    if resource in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[resource]
    if resource.endswith("s"):
        return resource + "es"
    if resource.endswith("y"):
        return resource[:-1] + "ies"
    return resource + "s"


def resolve_identity(
    api_version: str,
    kind: str,
    overrides: Mapping[str, str] | None = None,
) -> ResourceIdentity:
    group, version = parse_group_version(api_version)

    resource = None
    if overrides:
        lowered = {k.lower(): v for k, v in overrides.items()}
        resource = lowered.get(kind.lower())
    if resource is None:
        resource = pluralize(kind)
    else:
        logger.debug("Using supplied resource name %r for kind %s", resource, kind)

    return ResourceIdentity(group=group, version=version, kind=kind, resource=resource)
