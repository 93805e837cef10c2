"""
Invocation result models.

Standardizes the output of a (possibly retried) Lambda invocation.
"""

from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class InvocationType(str, Enum):
    """Lambda `InvocationType` values accepted by the Invoke API."""

    EVENT = "Event"
    REQUEST_RESPONSE = "RequestResponse"
    DRY_RUN = "DryRun"


class InvocationResult(BaseModel, Generic[T]):
    """
    Tagged result of a single invocation attempt.

    When has_error is True, content holds the exception raised by the attempt.
    Otherwise it holds the decoded value (possibly None).
    """

    has_error: bool = False
    content: Optional[Any] = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @classmethod
    def ok(cls, content: Optional[T] = None) -> "InvocationResult[T]":
        return cls(has_error=False, content=content)

    @classmethod
    def err(cls, error: BaseException) -> "InvocationResult[T]":
        return cls(has_error=True, content=error)

    @property
    def error(self) -> Optional[BaseException]:
        """The carried exception, if this result is a failure."""
        if self.has_error and isinstance(self.content, BaseException):
            return self.content
        return None


class RetryPolicy(BaseModel):
    """Number of attempts and the initial wait (seconds) between them."""

    attempts: int = Field(default=5, ge=1, description="Maximum number of attempts")
    delay: float = Field(default=4.0, ge=0, description="Initial wait between attempts (seconds)")

    model_config = ConfigDict(frozen=True)
