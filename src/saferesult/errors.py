"""Canonical error type for Err payloads.

Every Err carries an Exception so that `unwrap` can raise it as-is. Payloads that
are not exceptions (strings, error codes, dataclasses) get wrapped in a ResultError
that keeps the original on `cause`.
"""


class ResultError(Exception):
    """Failure payload that was not an exception to begin with."""

    def __init__(self, message: str, *, cause: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        # KeyboardInterrupt and friends can still be chained
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"ResultError({self.message!r}, cause={self.cause!r})"


def to_exception(error: object) -> Exception:
    """Normalize a failure payload into an Exception.

    Exceptions (ResultError included) are returned unchanged, anything else is
    wrapped with the original kept on `cause`.
    """
    if isinstance(error, Exception):
        return error
    try:
        message = str(error)
    except Exception:
        message = object.__repr__(error)
    return ResultError(message, cause=error)
