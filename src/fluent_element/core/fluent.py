"""
The fluent element API.

Every call derives a new context and runs the primitive through
decorate_execution. Mutators return a new FluentHandle bound to the same
element, readers return a value or a value wrapper. A handle is never
changed by calls made on it.
"""

import logging
from typing import Any, List, Optional, Union

from ..browser.errors import wrap_execution_error
from ..browser.handle import Dimension, ElementHandle, Point
from ..config.config_manager import Config
from ..monitoring.monitor import Monitor
from .context import Context
from .execution import Execution, decorate_execution
from .period import Period
from .values import CheckableValue, ElementValue

logger = logging.getLogger(__name__)


def _read_now(read: Execution, context: Context) -> ElementValue:
    """Read once without touching the wait; failures still name the chain"""
    try:
        value = read()
    except Exception as e:
        error = wrap_execution_error(e, str(context))
        if error is e:
            raise
        raise error from e
    return ElementValue(value, context)


class FluentHandle:
    """Chainable wrapper around one ElementHandle"""

    def __init__(
        self,
        element: ElementHandle,
        context: Union[Context, str],
        period: Optional[Period] = None,
        monitor: Optional[Monitor] = None,
        config: Optional[Config] = None,
    ):
        self.current_element = element
        self.context = Context.root(context)
        self.period = period
        self.monitor = monitor
        self.config = config or Config()

    def _derive(self, context: Context, element: Optional[ElementHandle] = None) -> "FluentHandle":
        return FluentHandle(
            element if element is not None else self.current_element,
            context,
            self.period,
            self.monitor,
            self.config,
        )

    def _decorate(self, execution: Execution, context: Context) -> Any:
        return decorate_execution(self.current_element, execution, context, self.period, self.monitor)

    def _checkable(self, execution: Execution, context: Context) -> CheckableValue:
        return CheckableValue(execution, context, self.current_element, self.period, self.monitor, self.config)

    def _mutate(self, operation: str, primitive, *args: Any) -> "FluentHandle":
        ctx = self.context.derive(operation, *args)

        def execution() -> bool:
            primitive(*args)
            return True

        self._decorate(execution, ctx)
        return self._derive(ctx)

    # Locating

    def element(self, locator: Any) -> "FluentHandle":
        """Locate one sub-element under the current period"""
        ctx = self.context.derive("element", locator)
        found = self._decorate(lambda: self.current_element.find_element(locator), ctx)
        return self._derive(ctx, found)

    def elements(self, locator: Any) -> "FluentHandles":
        """Locate every matching sub-element under the current period"""
        ctx = self.context.derive("elements", locator)
        found = self._decorate(lambda: self.current_element.find_elements(locator), ctx)
        logger.debug(f"{ctx} matched {len(found)} element(s)")
        return FluentHandles(
            [self._derive(ctx.index(i), child) for i, child in enumerate(found)],
            ctx,
        )

    # Mutators

    def click(self) -> "FluentHandle":
        return self._mutate("click", self.current_element.click)

    def clear(self) -> "FluentHandle":
        return self._mutate("clear", self.current_element.clear)

    def clear_field(self) -> "FluentHandle":
        """Clear the element, recorded as .clear_field() in the context"""
        return self._mutate("clear_field", self.current_element.clear)

    def submit(self) -> "FluentHandle":
        return self._mutate("submit", self.current_element.submit)

    def send_keys(self, *values: Any) -> "FluentHandle":
        return self._mutate("send_keys", self.current_element.send_input, *values)

    # Decorated readers

    def get_tag_name(self) -> CheckableValue[str]:
        return self._checkable(self.current_element.get_tag_name, self.context.derive("get_tag_name"))

    def is_selected(self) -> bool:
        return self._decorate(self.current_element.is_selected, self.context.derive("is_selected"))

    def is_enabled(self) -> bool:
        return self._decorate(self.current_element.is_enabled, self.context.derive("is_enabled"))

    def is_displayed(self) -> bool:
        return self._decorate(self.current_element.is_displayed, self.context.derive("is_displayed"))

    def get_location(self) -> Point:
        return self._decorate(self.current_element.get_location, self.context.derive("get_location"))

    def get_size(self) -> Dimension:
        return self._decorate(self.current_element.get_size, self.context.derive("get_size"))

    def get_css_value(self, name: str) -> CheckableValue[str]:
        return self._checkable(
            lambda: self.current_element.get_css_value(name),
            self.context.derive("get_css_value", name),
        )

    def get_attribute(self, name: str) -> CheckableValue[str]:
        return self._checkable(
            lambda: self.current_element.get_attribute(name),
            self.context.derive("get_attribute", name),
        )

    def get_text(self) -> CheckableValue[str]:
        return self._checkable(self.current_element.get_text, self.context.derive("get_text"))

    # Eager readers: read right now, outside any period

    def location(self) -> ElementValue[Point]:
        return _read_now(self.current_element.get_location, self.context.derive("location"))

    def size(self) -> ElementValue[Dimension]:
        return _read_now(self.current_element.get_size, self.context.derive("size"))

    def css_value(self, name: str) -> ElementValue[str]:
        return _read_now(
            lambda: self.current_element.get_css_value(name),
            self.context.derive("css_value", name),
        )

    def attribute(self, name: str) -> ElementValue[str]:
        return _read_now(
            lambda: self.current_element.get_attribute(name),
            self.context.derive("attribute", name),
        )

    def tag_name(self) -> ElementValue[str]:
        return _read_now(self.current_element.get_tag_name, self.context.derive("tag_name"))

    def selected(self) -> ElementValue[bool]:
        return _read_now(self.current_element.is_selected, self.context.derive("selected"))

    def enabled(self) -> ElementValue[bool]:
        return _read_now(self.current_element.is_enabled, self.context.derive("enabled"))

    def displayed(self) -> ElementValue[bool]:
        return _read_now(self.current_element.is_displayed, self.context.derive("displayed"))

    def text(self) -> ElementValue[str]:
        return _read_now(self.current_element.get_text, self.context.derive("text"))

    # Scoping

    def within(self, period: Period) -> "FluentHandle":
        """A handle whose calls, and those of handles chained from it, wait up to period"""
        if period is None:
            raise ValueError("within() needs a Period")
        if not isinstance(period, Period):
            raise TypeError(f"within() needs a Period, got {type(period).__name__}")
        return FluentHandle(
            self.current_element,
            self.context.derive("within", period),
            period,
            self.monitor,
            self.config,
        )

    def __repr__(self) -> str:
        return f"FluentHandle({str(self.context)!r})"


class FluentHandles(list):
    """Handles located together, plus the context that located them"""

    def __init__(self, handles: List[FluentHandle], context: Union[Context, str]):
        super().__init__(handles)
        self.context = Context.root(context)

    def first(self) -> FluentHandle:
        if not self:
            raise IndexError(f"{self.context} matched no elements")
        return self[0]

    def last(self) -> FluentHandle:
        if not self:
            raise IndexError(f"{self.context} matched no elements")
        return self[-1]

    def text(self) -> ElementValue[List[str]]:
        """Text of every member, read right now"""
        return _read_now(
            lambda: [handle.current_element.get_text() for handle in self],
            self.context.derive("text"),
        )
