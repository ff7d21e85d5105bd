"""Exception hierarchy for the billing vertical.

- SubscriberError (base, raised only while constructing a Subscriber)
  - MalformedFieldError: a required field is empty or not a known value
  - OutOfRangeError: a numeric field is negative
- MissingSubscriberError: a billing call received no subscriber

Validation failures are not exceptions; they come back from validate()
as ``(False, reason)``.
"""

from __future__ import annotations

from typing import Any


class SubscriberError(ValueError):
    """A Subscriber could not be constructed from the given fields."""

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class MalformedFieldError(SubscriberError):
    """A required field is empty or holds an unknown value."""


class OutOfRangeError(SubscriberError):
    """A numeric field is outside its allowed range."""


class MissingSubscriberError(TypeError):
    """Pricing or billing was called without a subscriber.

    This is a caller bug, not a data-quality problem.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires a subscriber, got None")
