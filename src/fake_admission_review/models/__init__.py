"""Data models for fake admission reviews."""

from __future__ import annotations

import enum

from fake_admission_review.errors import ParamsError

OPERATION_USAGE = "--operation=create or --operation=update or --operation=delete"
OUTPUT_USAGE = "--output=yaml or --output=json"


class Operation(enum.Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"

    @classmethod
    def from_str(cls, s: str) -> Operation:
        """Map a lowercase CLI spelling (``create``, ...) to an Operation.

        Matching is exact: ``Create`` or ``CREATE`` are rejected.
        """
        for member in cls:
            if member.value.lower() == s:
                return member
        raise ParamsError(f"invalid operation: {s}", user_action=OPERATION_USAGE)

    @property
    def needs_old_object(self) -> bool:
        return self in (Operation.UPDATE, Operation.DELETE)

    @property
    def options_kind(self) -> str:
        return f"{self.value.capitalize()}Options"


class OutputFormat(enum.Enum):
    YAML = "yaml"
    JSON = "json"

    @classmethod
    def from_str(cls, s: str) -> OutputFormat:
        for member in cls:
            if member.value == s:
                return member
        raise ParamsError(f"unsupported output format: {s}", user_action=OUTPUT_USAGE)
