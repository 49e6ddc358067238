from typing import Dict, Any, Optional
import time
from dataclasses import dataclass, field, asdict
from datetime import datetime

from .monitor import Monitor, Timer


def operation_name(context: Any) -> str:
    """Name of the last call in a context, e.g. 'click' for 'elt.element(#a).click()'"""
    operation = getattr(context, "operation", None)
    if isinstance(operation, str):
        return operation
    context = str(context)
    text = context.rstrip()
    while text.endswith("]") and "[" in text:
        text = text[:text.rindex("[")]
    if not text.endswith(")"):
        return context
    depth = 0
    for position in range(len(text) - 1, -1, -1):
        if text[position] == ")":
            depth += 1
        elif text[position] == "(":
            depth -= 1
            if depth == 0:
                head = text[:position]
                dot = head.rfind(".")
                return head[dot + 1:] if dot >= 0 else head
    return context


@dataclass
class OperationMetrics:
    """Metrics for one kind of fluent operation"""
    calls: int = 0
    failures: int = 0
    avg_duration: float = 0.0
    max_duration: float = 0.0
    error_count: Dict[str, int] = field(default_factory=dict)


class _MetricsTimer(Timer):
    def __init__(self, collector: "MetricsMonitor", operation: str):
        self.collector = collector
        self.operation = operation
        self.started = time.time()

    def end(self, success: bool) -> None:
        self.collector.track_call(self.operation, success, time.time() - self.started)


class MetricsMonitor(Monitor):
    """Collect and aggregate per-operation metrics"""

    def __init__(self):
        self.operations: Dict[str, OperationMetrics] = {}
        self.start_time = datetime.now()

    def start(self, context: Any) -> Timer:
        return _MetricsTimer(self, operation_name(context))

    def exception_during_execution(self, error: BaseException, context: Any) -> None:
        metrics = self._metrics_for(operation_name(context))
        cause = getattr(error, "cause", None) or error
        error_type = type(cause).__name__
        metrics.error_count[error_type] = metrics.error_count.get(error_type, 0) + 1

    def track_call(self, operation: str, success: bool, duration: float):
        """Track one decorated call"""
        metrics = self._metrics_for(operation)
        metrics.calls += 1
        if not success:
            metrics.failures += 1

        # Update average duration
        metrics.avg_duration = (
            metrics.avg_duration * (metrics.calls - 1) + duration
        ) / metrics.calls
        metrics.max_duration = max(metrics.max_duration, duration)

    def get_metrics(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """Get metrics for one operation, or all of them"""
        if operation:
            if operation not in self.operations:
                return {}
            return asdict(self.operations[operation])

        total = sum(m.calls for m in self.operations.values())
        failures = sum(m.failures for m in self.operations.values())
        return {
            'timestamp': datetime.now().isoformat(),
            'uptime': (datetime.now() - self.start_time).total_seconds(),
            'total_calls': total,
            'failed_calls': failures,
            'operations': {name: asdict(m) for name, m in self.operations.items()}
        }

    def clear(self):
        self.operations = {}

    def _metrics_for(self, operation: str) -> OperationMetrics:
        if operation not in self.operations:
            self.operations[operation] = OperationMetrics()
        return self.operations[operation]
