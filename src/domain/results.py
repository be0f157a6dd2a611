"""Two-variant outcome type returned by every fallible operation."""

from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, Iterable, TypeVar, Union

from src.domain.errors import AppError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome holding a value."""

    value: T
    is_success: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure:
    """Failed outcome holding a classified error."""

    error: AppError
    is_success: ClassVar[bool] = False


Outcome = Union[Success[T], Failure]


def and_then(
    outcome: "Outcome[T]",
    binder: Callable[[T], "Outcome[U]"],
) -> "Outcome[U]":
    """Run ``binder`` on a success value; pass failures through unchanged."""
    if isinstance(outcome, Failure):
        return outcome
    return binder(outcome.value)


def map_success(
    outcome: "Outcome[T]",
    transform: Callable[[T], U],
) -> "Outcome[U]":
    """Transform a success value; pass failures through unchanged."""
    if isinstance(outcome, Failure):
        return outcome
    return Success(transform(outcome.value))


def collect(outcomes: Iterable["Outcome[T]"]) -> "Outcome[list[T]]":
    """Gather success values, stopping at the first failure."""
    values: list[T] = []
    for outcome in outcomes:
        if isinstance(outcome, Failure):
            return outcome
        values.append(outcome.value)
    return Success(values)


def pipe_validators(
    *validators: Callable[[T], "Outcome[T]"],
) -> Callable[[T], "Outcome[T]"]:
    """Chain validators railway-style; the first failure wins.

    Each validator receives the value normalized by the previous one.
    """

    def _run(value: T) -> "Outcome[T]":
        current: Outcome[T] = Success(value)
        for validator in validators:
            current = and_then(current, validator)
            if isinstance(current, Failure):
                break
        return current

    return _run


__all__ = [
    "Outcome",
    "Success",
    "Failure",
    "and_then",
    "map_success",
    "collect",
    "pipe_validators",
]
