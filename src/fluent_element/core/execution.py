"""
Decorated execution: every primitive interaction goes through here.

    apply period -> run the execution once -> reset the ambient wait -> report

An execution is any zero-argument callable. The engine never retries it;
a longer period only widens the window the driver itself polls in.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar, Union

from ..browser.errors import wrap_execution_error
from ..browser.handle import ElementHandle
from ..monitoring.monitor import Monitor, Timer
from .context import Context
from .period import Period, TimeUnit

T = TypeVar("T")

Execution = Callable[[], T]

logger = logging.getLogger(__name__)

_NULL_MONITOR = Monitor()


@contextmanager
def scoped_timeout(element: ElementHandle, period: Optional[Period]) -> Iterator[None]:
    """Apply a period to the driver's ambient wait and always reset it to zero afterwards"""
    if period is None:
        yield
        return
    element.set_implicit_wait(period.how_long, period.time_unit)
    try:
        yield
    finally:
        element.set_implicit_wait(0, TimeUnit.SECONDS)


def decorate_execution(
    element: ElementHandle,
    execution: Execution,
    context: Union[Context, str],
    period: Optional[Period] = None,
    monitor: Optional[Monitor] = None,
) -> T:
    """Run one execution against an element under an optional period.

    Raises:
        FluentExecutionStopped: the execution (or the timeout change) failed;
            the message names the full call chain and ``cause`` holds the
            original exception.
    """
    ctx = Context.root(context)
    monitor = monitor or _NULL_MONITOR
    timer = _start_timer(monitor, ctx)
    success = False
    try:
        with scoped_timeout(element, period):
            result = execution()
        success = True
        return result
    except Exception as e:
        error = wrap_execution_error(e, str(ctx))
        try:
            monitor.exception_during_execution(error, ctx)
        except Exception as report_error:
            logger.error(f"Monitor failed to report {ctx}: {str(report_error)}")
        if error is e:
            raise
        raise error from e
    finally:
        try:
            timer.end(success)
        except Exception as report_error:
            logger.error(f"Monitor failed to close timer for {ctx}: {str(report_error)}")


def _start_timer(monitor: Monitor, context: Context) -> Timer:
    try:
        return monitor.start(context)
    except Exception as e:
        logger.error(f"Monitor failed to start {context}: {str(e)}")
        return Timer()
