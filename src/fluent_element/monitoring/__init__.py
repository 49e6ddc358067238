from typing import List

from .monitor import Monitor, Timer, LoggingMonitor, CompositeMonitor, find_monitor
from .metrics import MetricsMonitor, OperationMetrics, operation_name
from .error_reporting import ErrorReporter, ErrorContext
from ..config.config_manager import Config


def create_monitor(config: Config = None) -> Monitor:
    """Build the monitor described by a Config"""
    config = config or Config()
    monitors: List[Monitor] = [LoggingMonitor(log_success=config.monitor.log_success)]
    if config.monitor.metrics_enabled:
        monitors.append(MetricsMonitor())
    if config.monitor.error_reporting_enabled:
        monitors.append(ErrorReporter(
            max_stored_errors=config.monitor.max_stored_errors,
            repeated_error_threshold=config.monitor.repeated_error_threshold,
        ))
    return CompositeMonitor(*monitors)


__all__ = [
    "Monitor",
    "Timer",
    "LoggingMonitor",
    "CompositeMonitor",
    "MetricsMonitor",
    "OperationMetrics",
    "ErrorReporter",
    "ErrorContext",
    "create_monitor",
    "find_monitor",
    "operation_name",
]
