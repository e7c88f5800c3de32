"""Application configuration and defaults."""

from __future__ import annotations

from dataclasses import dataclass

from fake_admission_review.errors import ParamsError
from fake_admission_review.models import OPERATION_USAGE, OUTPUT_USAGE, Operation, OutputFormat

FILE_USAGE = "--file=<path/to/yaml/file>"


@dataclass(frozen=True)
class Settings:
    default_operation: str = "create"
    default_output: str = "yaml"
    fake_username: str = "fake-k8s-admin-review"
    old_object_suffix: str = "-old"
    review_api_version: str = "admission.k8s.io/v1"


# Global singleton
settings = Settings()


@dataclass
class ReviewParams:
    """Parameters of a single generation run.

    ``validate`` fills in defaults for an empty operation or output and
    rejects anything else it does not recognise.
    """

    file: str = ""
    operation: str = ""
    output: str = ""
    resource: str | None = None

    def validate(self, defaults: Settings = settings) -> None:
        if not self.file:
            raise ParamsError("`file` parameter is mandatory", user_action=FILE_USAGE)

        if not self.operation:
            self.operation = defaults.default_operation
        try:
            Operation.from_str(self.operation)
        except ParamsError:
            raise ParamsError(
                f"invalid `operation` parameter: {self.operation}",
                user_action=OPERATION_USAGE,
            ) from None

        if not self.output:
            self.output = defaults.default_output
        try:
            OutputFormat.from_str(self.output)
        except ParamsError:
            raise ParamsError(
                f"invalid `output` parameter: {self.output}",
                user_action=OUTPUT_USAGE,
            ) from None

    @property
    def resolved_operation(self) -> Operation:
        return Operation.from_str(self.operation)

    @property
    def resolved_output(self) -> OutputFormat:
        return OutputFormat.from_str(self.output)
