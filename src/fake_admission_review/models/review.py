"""AdmissionReview request models.

Only the request half of the ``admission.k8s.io/v1`` AdmissionReview is
modelled. Field names in ``to_dict`` follow the Kubernetes wire format.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from fake_admission_review.models import Operation
from fake_admission_review.models.identity import ResourceIdentity

REVIEW_KIND = "AdmissionReview"
OPTIONS_API_VERSION = "meta.k8s.io/v1"


@dataclass(frozen=True)
class UserInfo:
    username: str
    uid: str

    def to_dict(self) -> dict[str, str]:
        return {"username": self.username, "uid": self.uid}


@dataclass(frozen=True)
class AdmissionRequest:
    uid: str
    identity: ResourceIdentity
    operation: Operation
    user_info: UserInfo
    object: bytes | None = None
    old_object: bytes | None = None
    dry_run: bool = True
    name: str = ""
    namespace: str = ""

    def to_dict(self) -> dict[str, Any]:
        # object/oldObject are raw JSON, embedded the way a RawExtension marshals
        d: dict[str, Any] = {
            "uid": self.uid,
            "kind": self.identity.gvk(),
            "resource": self.identity.gvr(),
            "requestKind": self.identity.gvk(),
            "requestResource": self.identity.gvr(),
        }
        if self.name:
            d["name"] = self.name
        if self.namespace:
            d["namespace"] = self.namespace
        d["operation"] = self.operation.value
        d["userInfo"] = self.user_info.to_dict()
        if self.object is not None:
            d["object"] = json.loads(self.object)
        if self.old_object is not None:
            d["oldObject"] = json.loads(self.old_object)
        d["dryRun"] = self.dry_run
        d["options"] = {
            "apiVersion": OPTIONS_API_VERSION,
            "kind": self.operation.options_kind,
        }
        return d


@dataclass(frozen=True)
class AdmissionReview:
    request: AdmissionRequest
    api_version: str = "admission.k8s.io/v1"
    kind: str = REVIEW_KIND

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "request": self.request.to_dict(),
        }
