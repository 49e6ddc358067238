"""
Values read from an element, tagged with the call chain that produced them.

CheckableValue is lazy: every evaluation runs through decorate_execution
under the owning handle's period. ElementValue is a snapshot taken when the
reader was called. Both compare equal on payload alone.
"""

import re
import time
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from ..browser.errors import FluentAssertionError
from ..browser.handle import ElementHandle
from ..config.config_manager import Config
from ..monitoring.monitor import Monitor
from .context import Context
from .execution import Execution, decorate_execution
from .period import Period

T = TypeVar("T")


def _payload(value: Any) -> Any:
    if isinstance(value, _Checkable):
        return value.value
    return value


class _Checkable(Generic[T]):
    """Assertions shared by both value wrappers"""

    context: Context

    @property
    def value(self) -> T:
        raise NotImplementedError

    def _retry_period(self) -> Optional[Period]:
        return None

    def _poll_interval(self) -> float:
        return 0.1

    def _check(self, assertion: Context, predicate: Callable[[Any], bool], expectation: str):
        period = self._retry_period()
        deadline = time.monotonic() + period.to_seconds() if period is not None else None
        while True:
            actual = self.value
            if predicate(actual):
                return self
            if deadline is None or time.monotonic() >= deadline:
                raise FluentAssertionError(
                    f"{assertion}\nExpected: {expectation}\n     but: was {actual!r}",
                    context=str(assertion),
                )
            time.sleep(self._poll_interval())

    def should_be(self, expected: Any):
        expected = _payload(expected)
        return self._check(
            self.context.derive("should_be", repr(expected)),
            lambda actual: actual == expected,
            repr(expected),
        )

    def should_not_be(self, unexpected: Any):
        unexpected = _payload(unexpected)
        return self._check(
            self.context.derive("should_not_be", repr(unexpected)),
            lambda actual: actual != unexpected,
            f"not {unexpected!r}",
        )

    def should_contain(self, fragment: str):
        return self._check(
            self.context.derive("should_contain", repr(fragment)),
            lambda actual: actual is not None and fragment in str(actual),
            f"a string containing {fragment!r}",
        )

    def should_not_contain(self, fragment: str):
        return self._check(
            self.context.derive("should_not_contain", repr(fragment)),
            lambda actual: actual is None or fragment not in str(actual),
            f"a string not containing {fragment!r}",
        )

    def should_match(self, pattern: Union[str, "re.Pattern"]):
        regex = re.compile(pattern)
        return self._check(
            self.context.derive("should_match", repr(regex.pattern)),
            lambda actual: actual is not None and regex.search(str(actual)) is not None,
            f"a string matching {regex.pattern!r}",
        )

    def should_not_match(self, pattern: Union[str, "re.Pattern"]):
        regex = re.compile(pattern)
        return self._check(
            self.context.derive("should_not_match", repr(regex.pattern)),
            lambda actual: actual is None or regex.search(str(actual)) is None,
            f"a string not matching {regex.pattern!r}",
        )

    def __eq__(self, other: object) -> bool:
        return self.value == _payload(other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __str__(self) -> str:
        return str(self.value)


class ElementValue(_Checkable[T]):
    """A value read eagerly from an element"""

    def __init__(self, value: T, context: Union[Context, str]):
        self._value = value
        self.context = Context.root(context)

    @property
    def value(self) -> T:
        return self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"ElementValue({self._value!r}, context={str(self.context)!r})"


class CheckableValue(_Checkable[T]):
    """A value read lazily, under the period of the handle that produced it"""

    __hash__ = None

    def __init__(
        self,
        execution: Execution,
        context: Union[Context, str],
        element: ElementHandle,
        period: Optional[Period] = None,
        monitor: Optional[Monitor] = None,
        config: Optional[Config] = None,
    ):
        self.execution = execution
        self.context = Context.root(context)
        self.element = element
        self.period = period
        self.monitor = monitor
        self.config = config or Config()

    @property
    def value(self) -> T:
        """Evaluate now, through the decorated-execution engine"""
        return decorate_execution(self.element, self.execution, self.context, self.period, self.monitor)

    def within(self, period: Period) -> "CheckableValue[T]":
        """Keep retrying assertions on this value until the period elapses"""
        if period is None:
            raise ValueError("within() needs a Period")
        if not isinstance(period, Period):
            raise TypeError(f"within() needs a Period, got {type(period).__name__}")
        return CheckableValue(
            self.execution,
            self.context.derive("within", period),
            self.element,
            period,
            self.monitor,
            self.config,
        )

    def _retry_period(self) -> Optional[Period]:
        return self.period

    def _poll_interval(self) -> float:
        return self.config.assertions.poll_interval_ms / 1000

    def __repr__(self) -> str:
        return f"CheckableValue(context={str(self.context)!r})"
