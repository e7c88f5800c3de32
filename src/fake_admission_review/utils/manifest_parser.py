"""Parse a single-document Kubernetes manifest."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from fake_admission_review.errors import ManifestError
from fake_admission_review.utils.encoding import load_yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedManifest:
    api_version: str
    kind: str
    fields: dict[str, Any]
    raw: bytes

    @property
    def metadata(self) -> dict[str, Any]:
        meta = self.fields.get("metadata")
        return meta if isinstance(meta, dict) else {}

    @property
    def name(self) -> str:
        name = self.metadata.get("name")
        return name if isinstance(name, str) else ""

    @property
    def namespace(self) -> str:
        namespace = self.metadata.get("namespace")
        return namespace if isinstance(namespace, str) else ""


def parse_manifest(data: bytes) -> ParsedManifest:
    """Decode YAML bytes into a ParsedManifest.

    The document must be a mapping with string ``apiVersion`` and ``kind``.
    """
    try:
        doc = load_yaml(data)
    except yaml.YAMLError as exc:
        raise ManifestError(f"failed to unmarshal YAML: {exc}") from exc

    if doc is None:
        raise ManifestError("manifest is empty")
    if not isinstance(doc, dict):
        raise ManifestError(f"expected a YAML mapping, got {type(doc).__name__}")

    api_version = doc.get("apiVersion")
    if not isinstance(api_version, str):
        raise ManifestError("failed to retrieve `apiVersion` from object or it's not a string")

    kind = doc.get("kind")
    if not isinstance(kind, str):
        raise ManifestError("failed to retrieve `kind` from object or it's not a string")

    return ParsedManifest(api_version=api_version, kind=kind, fields=doc, raw=data)


def read_manifest(path: str | Path) -> ParsedManifest:
    """Read a manifest file in full and parse it."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ManifestError(f"cannot read {path}: {exc.strerror or exc}") from exc
    logger.debug("Read %d bytes from %s", len(data), path)
    return parse_manifest(data)
