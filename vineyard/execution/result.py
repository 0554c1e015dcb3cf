"""Outcome of a remapping engine invocation.

A ``Result`` carries either a value, an exception, or both when the engine
recovered from an error with a usable default. Callers can inspect the outcome
without the run interrupting their control flow.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

R = TypeVar("R")
E = TypeVar("E", bound=Exception)


class Result(Generic[R, E]):
    """Base class for Success, Failure and Recover."""

    @staticmethod
    def success(result: R) -> "Success[R, E]":
        return Success(result)

    @staticmethod
    def failure(exception: E) -> "Failure[R, E]":
        return Failure(exception)

    @staticmethod
    def recover(result: R, exception: E) -> "Recover[R, E]":
        return Recover(result, exception)

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def value_or(self, default: R) -> R:
        """Return the carried value, or ``default`` for a failure."""
        if isinstance(self, (Success, Recover)):
            return self.result
        return default

    def unwrap(self) -> R:
        """Return the carried value or raise the stored exception."""
        if isinstance(self, (Success, Recover)):
            return self.result
        if isinstance(self, Failure):
            raise self.exception
        raise TypeError(f"Unknown result type {type(self).__name__}")


def _require(value: object, name: str) -> None:
    if value is None:
        raise TypeError(f"{name} must not be None")


@dataclass(frozen=True)
class Success(Result[R, E]):
    """The run produced a value."""

    result: R

    def __post_init__(self) -> None:
        _require(self.result, "result")


@dataclass(frozen=True)
class Failure(Result[R, E]):
    """The run failed with an exception."""

    exception: E

    def __post_init__(self) -> None:
        _require(self.exception, "exception")


@dataclass(frozen=True)
class Recover(Result[R, E]):
    """The run hit an error but recovered with a default value."""

    result: R
    exception: E

    def __post_init__(self) -> None:
        _require(self.result, "result")
        _require(self.exception, "exception")
