"""okerr (explicit success/failure values)

Public surface:
- Result, Ok, Err, and the factories ok / err
- inspection: is_ok, is_err, destructure (or ``value, error = result``)
- mapping combinators: map, map_error, map_both, map_either
- side-effect combinators: on_success, on_failure (effect only), tee, tee_error (chainable)
- run_catching: optional adapter from raising code to Result (``of`` is its deprecated alias)
- configure_logging / get_settings for the ambient logging setup
"""

from loguru import logger

from .result import Result, Ok, Err, ok, err, is_ok, is_err, destructure
from .transform import map, map_error, map_both, map_either
from .effects import on_success, on_failure, tee, tee_error
from .catching import run_catching, of
from .config import OkerrSettings, get_settings
from .errors import OkerrException, NotAResultError, InvalidConfigurationError
from .log import configure_logging

logger.disable(__name__)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "ok",
    "err",
    "is_ok",
    "is_err",
    "destructure",
    "map",
    "map_error",
    "map_both",
    "map_either",
    "on_success",
    "on_failure",
    "tee",
    "tee_error",
    "run_catching",
    "of",
    "OkerrSettings",
    "get_settings",
    "OkerrException",
    "NotAResultError",
    "InvalidConfigurationError",
    "configure_logging",
]
