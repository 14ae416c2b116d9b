"""saferesult - explicit success/failure values for Python."""

import logging
from importlib.metadata import PackageNotFoundError, version

from saferesult.errors import ResultError, to_exception
from saferesult.result import (
    Err,
    Ok,
    Result,
    err,
    is_err,
    is_ok,
    make_safe,
    map_err,
    map_ok,
    ok,
    unwrap,
    unwrap_err,
    unwrap_or,
)

try:
    __version__ = version("saferesult")
except PackageNotFoundError:
    # running from a source tree that was never installed
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Err",
    "Ok",
    "Result",
    "ResultError",
    "err",
    "is_err",
    "is_ok",
    "make_safe",
    "map_err",
    "map_ok",
    "ok",
    "to_exception",
    "unwrap",
    "unwrap_err",
    "unwrap_or",
]
