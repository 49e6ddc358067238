import logging
import json
from datetime import datetime
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, asdict

from .monitor import Monitor

logger = logging.getLogger(__name__)


@dataclass
class ErrorContext:
    """Context information for a failed fluent call"""
    timestamp: str
    error_type: str
    cause_type: Optional[str]
    message: str
    context: str


class ErrorReporter(Monitor):
    """Keeps a bounded history of failed calls and watches for patterns"""

    def __init__(self, max_stored_errors: int = 100, repeated_error_threshold: int = 5):
        self.error_counts: Dict[str, Dict] = {}
        self.last_errors: List[ErrorContext] = []
        self.max_stored_errors = max_stored_errors
        self.repeated_error_threshold = repeated_error_threshold

    def exception_during_execution(self, error: BaseException, context: Any) -> None:
        cause = getattr(error, "cause", None)
        report = ErrorContext(
            timestamp=datetime.now().isoformat(),
            error_type=type(error).__name__,
            cause_type=type(cause).__name__ if cause is not None else None,
            message=str(error),
            context=str(context),
        )
        logger.error(json.dumps(asdict(report)))
        self._update_stats(report)
        self._store_error(report)
        self._check_patterns()

    def get_error_stats(self) -> Dict:
        """Get error statistics"""
        return {
            "error_counts": self.error_counts,
            "recent_errors": [asdict(e) for e in self.last_errors[-10:]]
        }

    def _update_stats(self, report: ErrorContext):
        key = report.cause_type or report.error_type
        if key not in self.error_counts:
            self.error_counts[key] = {
                "count": 0,
                "first_seen": report.timestamp,
                "last_seen": report.timestamp
            }
        self.error_counts[key]["count"] += 1
        self.error_counts[key]["last_seen"] = report.timestamp

    def _store_error(self, report: ErrorContext):
        self.last_errors.append(report)
        if len(self.last_errors) > self.max_stored_errors:
            self.last_errors.pop(0)

    def _check_patterns(self) -> bool:
        """Warn when the most recent failures all share one cause"""
        threshold = self.repeated_error_threshold
        if len(self.last_errors) < threshold:
            return False
        recent = self.last_errors[-threshold:]
        first = recent[0].cause_type or recent[0].error_type
        if all((e.cause_type or e.error_type) == first for e in recent):
            logger.warning(f"Detected repeated errors of type: {first}")
            return True
        return False
