# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Result objects for functional error handling in classbook.

This module implements the Result pattern (also known as the Either pattern)
so callers can handle parse failures without relying on exceptions.
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
U = TypeVar("U")


class Result(Generic[T, E], ABC):
    """Abstract base class for Result monad."""

    @property
    @abstractmethod
    def is_success(self) -> bool: ...

    @property
    @abstractmethod
    def is_failure(self) -> bool: ...

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> Result[U, E]: ...

    @abstractmethod
    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]: ...

    @abstractmethod
    def unwrap(self) -> T: ...

    @abstractmethod
    def unwrap_or(self, default: T) -> T: ...

    @abstractmethod
    def unwrap_or_else(self, func: Callable[[E], T]) -> T: ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    def ensure(self, predicate: Callable[[T], bool], error: E) -> Result[T, E]:
        """
        Return Failure if predicate is False for a Success value, else self.
        """
        if self.is_success and not predicate(self.unwrap()):
            return Failure(error)
        return self

    def recover(self, func: Callable[[E], T]) -> Result[T, E]:
        """
        Transform a Failure into a Success by applying func to the error.
        """
        if self.is_failure:
            return Success(func(self.error))  # type: ignore[attr-defined]
        return self


@dataclass(frozen=True)
class Success(Result[T, E], Generic[T, E]):
    """
    Represents a successful result with a value.

    Attributes:
        value: The successful result value
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        """
        Map the value of a successful result.

        Exceptions raised by ``func`` propagate; mapping is not a place to
        hide programming errors.
        """
        return Success(func(self.value))

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the value."""
        return func(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        data = self.value
        if hasattr(data, "model_dump"):
            data = data.model_dump()
        return {"status": "success", "data": data}

    def __str__(self) -> str:
        return f"Success({self.value})"

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Result[T, E], Generic[T, E]):
    """
    Represents a failed result with an error.

    Attributes:
        error: The error that caused the failure
    """

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        return cast("Failure[U, E]", self)

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return cast("Failure[U, E]", self)

    def unwrap(self) -> T:
        """
        Unwrap a failed result.

        Raises:
            E: The carried error, re-raised as is
        """
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        return func(self.error)

    def to_dict(self) -> dict[str, Any]:
        to_dict = getattr(self.error, "to_dict", None)
        if callable(to_dict):
            return {"status": "error", "error": to_dict()}
        return {
            "status": "error",
            "error": {"message": str(self.error), "type": type(self.error).__name__},
        }

    def __str__(self) -> str:
        return f"Failure({self.error})"

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


def of(value: T) -> Success[T, Any]:
    """Create a successful result with a value."""
    return Success(value)


def failure(error: E) -> Failure[Any, E]:
    """Create a failed result with an error."""
    return Failure(error)


def from_exception(
    *exc_types: type[Exception],
) -> Callable[[Callable[..., T]], Callable[..., Result[T, Exception]]]:
    """
    Decorator factory converting the listed exceptions into a Failure.

    Exceptions outside ``exc_types`` propagate unchanged.

    Args:
        *exc_types: The exception types to capture (defaults to Exception)

    Returns:
        A decorator producing functions that return a Result
    """
    captured = exc_types or (Exception,)

    def decorator(func: Callable[..., T]) -> Callable[..., Result[T, Exception]]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Result[T, Exception]:
            try:
                return Success(func(*args, **kwargs))
            except captured as e:
                return Failure(e)

        return wrapper

    return decorator


def combine(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Combine multiple Results into a single Result.

    Args:
        results: The Results to combine

    Returns:
        A Success with a list of values if all Results are successful,
        otherwise the first Failure encountered
    """
    values: list[T] = []
    for result in results:
        if result.is_failure:
            return cast("Failure[list[T], E]", result)
        values.append(result.unwrap())
    return Success(values)
