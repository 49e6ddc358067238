"""Fluent, self-describing wrappers around browser element handles."""

from .browser import (
    ElementHandle,
    Point,
    Dimension,
    FluentError,
    FluentExecutionStopped,
    FluentTimeoutError,
    ElementNotFoundError,
    FluentAssertionError,
)
from .config import Config, ConfigManager, configure_logging
from .core import (
    Context,
    Period,
    TimeUnit,
    decorate_execution,
    CheckableValue,
    ElementValue,
    FluentHandle,
    FluentHandles,
)
from .monitoring import Monitor, LoggingMonitor, create_monitor

__version__ = "0.1.0"

__all__ = [
    "ElementHandle",
    "Point",
    "Dimension",
    "FluentError",
    "FluentExecutionStopped",
    "FluentTimeoutError",
    "ElementNotFoundError",
    "FluentAssertionError",
    "Config",
    "ConfigManager",
    "configure_logging",
    "Context",
    "Period",
    "TimeUnit",
    "decorate_execution",
    "CheckableValue",
    "ElementValue",
    "FluentHandle",
    "FluentHandles",
    "Monitor",
    "LoggingMonitor",
    "create_monitor",
]
