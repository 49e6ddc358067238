from .context import Context, render_args
from .period import Period, TimeUnit
from .execution import Execution, decorate_execution, scoped_timeout
from .values import CheckableValue, ElementValue
from .fluent import FluentHandle, FluentHandles

__all__ = [
    "Context",
    "render_args",
    "Period",
    "TimeUnit",
    "Execution",
    "decorate_execution",
    "scoped_timeout",
    "CheckableValue",
    "ElementValue",
    "FluentHandle",
    "FluentHandles",
]
