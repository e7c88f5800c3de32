"""Error hierarchy for admission review generation.

Every failure is terminal for an invocation. Errors carry a category
(input, validation, serialization) and, where it helps, a usage hint that
is appended to the message.
"""

from __future__ import annotations


class ReviewError(Exception):
    """Base class for all errors raised while generating a review."""

    def __init__(
        self,
        message: str,
        category: str = "general",
        user_action: str | None = None,
    ):
        super().__init__(message)
        self.category = category
        self.user_action = user_action

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.user_action:
            return f"{base_msg}, usage: {self.user_action}"
        return base_msg

    def add_context(self, context: str) -> None:
        """Prefix the message with the stage that failed."""
        self.args = (f"{context}: {self.args[0]}",) + self.args[1:]


class ManifestError(ReviewError):
    """The manifest could not be read or is not a usable Kubernetes object."""

    def __init__(self, message: str):
        super().__init__(message, category="input")


class ParamsError(ReviewError):
    """A parameter (file, operation, output) is missing or not recognised."""

    def __init__(self, message: str, user_action: str | None = None):
        super().__init__(message, category="validation", user_action=user_action)


class SerializationError(ReviewError):
    """A payload or the review itself could not be marshalled."""

    def __init__(self, message: str):
        super().__init__(message, category="serialization")
