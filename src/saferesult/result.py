"""Result type for explicit success/failure values.

Inspired by Rust's Result<T, E>. Use pattern matching to handle results:

    match some_operation():
        case Ok(value):
            # handle success
        case Err(error):
            # handle error

The variant class is the discriminant, so Ok(None) is a perfectly good success.
Err always holds an Exception: `err` wraps any other payload in a ResultError
(see saferesult.errors).
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import wraps
from types import TracebackType
from typing import Generic, ParamSpec, TypeIs, TypeVar, overload

from saferesult.errors import ResultError, to_exception

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)
P = ParamSpec("P")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success case containing a value."""

    value: T

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error case containing an error.

    Equality compares the stored error, and exceptions compare by identity, so
    err("boom") != err("boom") while err(e) == err(e).
    """

    error: E
    _traceback: TracebackType | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Err("boom") gets the same normalization as err("boom")
        error = to_exception(self.error)
        object.__setattr__(self, "error", error)
        object.__setattr__(self, "_traceback", error.__traceback__)

    @property
    def value(self) -> None:
        return None


# Type alias for Result
type Result[T, E: Exception = Exception] = Ok[T] | Err[E]


def ok(value: T) -> Ok[T]:
    """Create an Ok result."""
    return Ok(value)


@overload
def err(error: E) -> Err[E]: ...
@overload
def err(error: object) -> Err[ResultError]: ...
def err(error: object) -> Err[Exception]:
    """Create an Err result.

    Exceptions are stored as-is. Anything else is wrapped in a ResultError whose
    `cause` is the original payload.
    """
    return Err(error)


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Check if result is Ok."""
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    """Check if result is Err."""
    return isinstance(result, Err)


def map_ok(result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Apply f to the value if Ok, otherwise return the Err unchanged.

    Exceptions raised by f are not caught; wrap f with make_safe for that.
    """
    match result:
        case Ok(value):
            return Ok(f(value))
        case Err() as e:
            return e


def map_err(result: Result[T, E], f: Callable[[E], object]) -> Result[T, Exception]:
    """Apply f to the error if Err, otherwise return the Ok unchanged.

    The new error goes through `err`, so a non-exception return value is wrapped.
    """
    match result:
        case Ok() as o:
            return o
        case Err(error):
            return err(f(error))


def unwrap(result: Result[T, E]) -> T:
    """Extract the value from Ok, or raise the stored error if Err.

    The error keeps the traceback and __context__ it had when the Err was built,
    so repeated unwraps leave it unchanged. Use sparingly - prefer pattern matching
    or unwrap_or.
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            context = error.__context__
            try:
                raise error.with_traceback(result._traceback)
            finally:
                # raising inside an except block rewrites __context__
                error.__context__ = context


def unwrap_or(result: Result[T, E], default: T) -> T:
    """Extract the value from Ok, or return default if Err."""
    match result:
        case Ok(value):
            return value
        case Err():
            return default


def unwrap_err(result: Result[T, E]) -> E:
    """Extract the error from Err, or raise ResultError if Ok."""
    match result:
        case Ok(value):
            raise ResultError(f"Called unwrap_err on Ok: {value!r}", cause=value)
        case Err(error):
            return error


def make_safe(fn: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
    """Wrap fn so that it returns a Result instead of raising.

    Each call runs fn exactly once. A normal return becomes Ok, an Exception
    becomes Err. KeyboardInterrupt, SystemExit and other non-Exception
    BaseExceptions still propagate. Works as a decorator:

        @make_safe
        def parse(text: str) -> int:
            return int(text)

        parse("nope")  # Err(ValueError(...))
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        try:
            value = fn(*args, **kwargs)
        except Exception as exc:
            name = getattr(fn, "__qualname__", repr(fn))
            logger.debug(f"{name} raised {type(exc).__name__}, returning Err", exc_info=exc)
            return err(exc)
        return ok(value)

    return wrapper
