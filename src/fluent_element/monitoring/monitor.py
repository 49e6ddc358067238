import logging
import time
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class Timer:
    """Handle returned by Monitor.start, closed once the call finishes"""

    def end(self, success: bool) -> None:
        pass


class Monitor:
    """Observability sink for decorated calls. The base class does nothing.

    context is the call chain; render it with str() only when it is needed.
    """

    def start(self, context: Any) -> Timer:
        return Timer()

    def exception_during_execution(self, error: BaseException, context: Any) -> None:
        pass


class _LoggingTimer(Timer):
    def __init__(self, context: Any, level: int):
        self.context = context
        self.level = level
        self.started = time.time()

    def end(self, success: bool) -> None:
        duration = time.time() - self.started
        if success:
            if logger.isEnabledFor(self.level):
                logger.log(self.level, f"{self.context} completed in {duration:.3f}s")
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"{self.context} failed after {duration:.3f}s")


class LoggingMonitor(Monitor):
    """Reports every decorated call through the logging module"""

    def __init__(self, log_success: bool = False):
        self.level = logging.INFO if log_success else logging.DEBUG

    def start(self, context: Any) -> Timer:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Starting {context}")
        return _LoggingTimer(context, self.level)

    def exception_during_execution(self, error: BaseException, context: Any) -> None:
        logger.error(f"{context} failed: {error}")


class _CompositeTimer(Timer):
    def __init__(self, timers: List[Timer]):
        self.timers = timers

    def end(self, success: bool) -> None:
        for timer in self.timers:
            timer.end(success)


class CompositeMonitor(Monitor):
    """Fans every notification out to several monitors"""

    def __init__(self, *monitors: Monitor):
        self.monitors = list(monitors)

    def start(self, context: Any) -> Timer:
        return _CompositeTimer([monitor.start(context) for monitor in self.monitors])

    def exception_during_execution(self, error: BaseException, context: Any) -> None:
        for monitor in self.monitors:
            monitor.exception_during_execution(error, context)


def find_monitor(monitor: Optional[Monitor], kind: type) -> Optional[Monitor]:
    """Return the first monitor of the given type, looking inside composites"""
    if monitor is None:
        return None
    if isinstance(monitor, kind):
        return monitor
    if isinstance(monitor, CompositeMonitor):
        for child in monitor.monitors:
            found = find_monitor(child, kind)
            if found is not None:
                return found
    return None
