"""Result types for railway-oriented programming.

Handlers return a Result instead of raising for expected business failures
(duplicate review, wrong password, unknown game). The presentation layer
pattern-matches on the two variants.

Usage:
    result = await handler.handle(CreateReview(...))
    match result:
        case Success(value=review):
            ...
        case Failure(error=message):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: Payload produced by the operation.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error value (usually a message constant from an ``*Error`` class).
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
