from .errors import (
    FluentError,
    FluentExecutionStopped,
    FluentTimeoutError,
    ElementNotFoundError,
    FluentAssertionError,
    wrap_execution_error,
)
from .handle import ElementHandle, Point, Dimension

__all__ = [
    "FluentError",
    "FluentExecutionStopped",
    "FluentTimeoutError",
    "ElementNotFoundError",
    "FluentAssertionError",
    "wrap_execution_error",
    "ElementHandle",
    "Point",
    "Dimension",
]
