"""
Outcome envelope for pipeline steps.

Every component operation reports its result through an `Outcome` instead of
raising: either a value, or a classified failure. Callers decide explicitly
whether to continue. The pipeline runner always does.

Failure kinds:
- METADATA_UNAVAILABLE: cards or art variants could not be fetched or parsed
- UNRECOGNIZED_CARD: a requested card is not in the card list
- DOWNLOAD_FAILED: one artwork variant could not be fetched or written
- WRITE_FAILED: an index, label or classes file could not be written
- READ_FAILED: a file or directory needed as input could not be read
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    METADATA_UNAVAILABLE = "metadata_unavailable"
    UNRECOGNIZED_CARD = "unrecognized_card"
    DOWNLOAD_FAILED = "download_failed"
    WRITE_FAILED = "write_failed"
    READ_FAILED = "read_failed"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    subject: str | None = Field(
        default=None,
        description="Card, variant or path the failure concerns",
    )


class Outcome(BaseModel, Generic[T]):
    """Result of one pipeline step: a value on success, a failure otherwise."""

    value: T | None = Field(
        default=None,
        description="Result value (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on failure)",
    )

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        """Create a successful outcome."""
        return cls(value=value)

    @classmethod
    def failed(
        cls,
        kind: FailureKind,
        message: str,
        subject: str | None = None,
    ) -> "Outcome[Any]":
        """Create a failed outcome."""
        return cls(failure=FailureDetail(kind=kind, message=message, subject=subject))

    def unwrap_or(self, default: Any) -> Any:
        """Return the value, or `default` when the step failed."""
        if self.ok:
            return self.value
        return default


def describe_exception(exc: BaseException) -> str:
    """Short `Type: message` form used in failure messages."""
    return f"{type(exc).__name__}: {exc}"
