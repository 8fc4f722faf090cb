"""Core domain types and logic."""

from .config import Config, ConfigError, load_config
from .dispatcher import Dispatcher, Handler
from .errors import ErrorCode, HandlerError, UsageError
from .operation import InvocationArguments, Operation
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    # dispatch
    "Dispatcher",
    "Handler",
    "InvocationArguments",
    "Operation",
    # errors
    "ErrorCode",
    "HandlerError",
    "UsageError",
    # result
    "Err",
    "Ok",
    "Result",
]
