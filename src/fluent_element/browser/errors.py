from typing import Optional


class FluentError(Exception):
    """Base class for fluent element errors"""
    def __init__(self, message: str, context: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.context = context
        self.cause = cause


class FluentExecutionStopped(FluentError):
    """Raised when a decorated call fails against the underlying element"""
    pass


class FluentTimeoutError(FluentExecutionStopped):
    """Raised when the underlying driver gave up waiting"""
    pass


class ElementNotFoundError(FluentError):
    """Raised when a locator matches no element"""
    pass


class FluentAssertionError(AssertionError):
    """Raised when a value wrapper assertion does not hold"""
    def __init__(self, message: str, context: Optional[str] = None):
        super().__init__(message)
        self.context = context


def _is_timeout(error: BaseException) -> bool:
    # Driver bindings ship their own TimeoutError types that don't subclass the builtin
    return isinstance(error, TimeoutError) or "Timeout" in type(error).__name__


def wrap_execution_error(error: BaseException, context: str) -> FluentError:
    """Wrap a failure raised by the underlying element so it names the call chain"""
    if isinstance(error, FluentError):
        return error
    message = f"{type(error).__name__} during invocation of: {context}"
    detail = str(error).strip()
    if detail:
        message = f"{message}\n{detail}"
    if _is_timeout(error):
        return FluentTimeoutError(message, context=context, cause=error)
    return FluentExecutionStopped(message, context=context, cause=error)
