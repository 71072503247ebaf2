# result.py
"""
Result type for failure-explicit composition.

A Result is exactly one of Ok(value) or Err(error). Steps return Results
instead of raising; from_awaitable is the one place where a raised failure
from an external call is turned into an Err.
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class UnwrapError(RuntimeError):
    """unwrap/unwrap_err called on the wrong variant."""


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def __post_init__(self):
        if self.value is None:
            raise TypeError("Ok value must not be None")


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def __post_init__(self):
        if self.error is None:
            raise TypeError("Err error must not be None")


Result = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    return Ok(value)


def err(error: E) -> Err[E]:
    return Err(error)


def is_ok(result: Any) -> bool:
    return isinstance(result, Ok)


def is_err(result: Any) -> bool:
    return isinstance(result, Err)


def map_ok(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    """Apply fn to the value of an Ok; an Err passes through untouched."""
    if isinstance(result, Ok):
        return Ok(fn(result.value))
    return result


def map_err(result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Apply fn to the error of an Err; an Ok passes through untouched."""
    if isinstance(result, Err):
        return Err(fn(result.error))
    return result


def and_then(result: Result[T, E], fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """
    Chain a step that itself returns a Result.
    Stops at the first Err: fn is never called for an Err input.
    """
    if isinstance(result, Ok):
        return fn(result.value)
    return result


async def and_then_async(
    result: Result[T, E], fn: Callable[[T], Awaitable[Result[U, E]]]
) -> Result[U, E]:
    """Same as and_then for a coroutine step; awaited only for an Ok input."""
    if isinstance(result, Ok):
        return await fn(result.value)
    return result


async def from_awaitable(
    awaitable: Awaitable[T], map_error: Callable[[Exception], E]
) -> Result[T, E]:
    """
    Await an operation that may raise and capture the outcome as a Result.
    Only Exception subclasses are captured; cancellation still propagates.
    """
    try:
        # a None value fails Ok construction and is mapped like any other failure
        return Ok(await awaitable)
    except Exception as e:
        return Err(map_error(e))


def unwrap(result: Result[T, E]) -> T:
    if isinstance(result, Ok):
        return result.value
    raise UnwrapError(f"Called unwrap on Err value: {result.error!r}")


def unwrap_err(result: Result[T, E]) -> E:
    if isinstance(result, Err):
        return result.error
    raise UnwrapError("Called unwrap_err on Ok value")


def unwrap_or(result: Result[T, E], default: T) -> T:
    if isinstance(result, Ok):
        return result.value
    return default
