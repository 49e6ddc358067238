import pytest

from fluent_element.browser.errors import FluentExecutionStopped, FluentTimeoutError
from fluent_element.core.context import Context
from fluent_element.core.execution import decorate_execution, scoped_timeout
from fluent_element.core.period import Period, TimeUnit
from fluent_element.monitoring.monitor import Monitor, Timer

from conftest import NotInteractableError


def test_runs_execution_once_and_returns_result(fake_element):
    calls = []

    def execution():
        calls.append(1)
        return "done"

    assert decorate_execution(fake_element, execution, "elt.click()") == "done"
    assert calls == [1]


def test_no_period_leaves_ambient_wait_alone(fake_element):
    decorate_execution(fake_element, fake_element.get_text, "elt.get_text()")
    assert fake_element.names() == ["get_text"]


def test_period_brackets_execution(fake_element):
    decorate_execution(fake_element, fake_element.click, "elt.click()", Period.secs(5))
    assert fake_element.calls == [
        ("set_implicit_wait", 5, TimeUnit.SECONDS),
        ("click",),
        ("set_implicit_wait", 0, TimeUnit.SECONDS),
    ]


def test_period_reset_after_failure(fake_element):
    fake_element.fail_on("click", NotInteractableError("element not interactable"))

    with pytest.raises(FluentExecutionStopped):
        decorate_execution(fake_element, fake_element.click, "elt.click()", Period.millis(300))

    assert fake_element.calls == [
        ("set_implicit_wait", 300, TimeUnit.MILLISECONDS),
        ("click",),
        ("set_implicit_wait", 0, TimeUnit.SECONDS),
    ]


def test_failure_names_context_and_keeps_cause(fake_element):
    cause = NotInteractableError("element not interactable")
    fake_element.fail_on("click", cause)

    with pytest.raises(FluentExecutionStopped) as excinfo:
        decorate_execution(fake_element, fake_element.click, Context("elt").derive("click"))

    error = excinfo.value
    assert "elt.click()" in str(error)
    assert "NotInteractableError" in str(error)
    assert error.context == "elt.click()"
    assert error.cause is cause
    assert error.__cause__ is cause


def test_timeouts_keep_their_kind(fake_element):
    fake_element.fail_on("click", TimeoutError("waited too long"))

    with pytest.raises(FluentTimeoutError):
        decorate_execution(fake_element, fake_element.click, "elt.click()")


def test_nested_fluent_errors_propagate_unchanged(fake_element):
    inner = FluentExecutionStopped("inner", context="elt.element(#a)")

    def execution():
        raise inner

    with pytest.raises(FluentExecutionStopped) as excinfo:
        decorate_execution(fake_element, execution, "elt.element(#a).click()")
    assert excinfo.value is inner


def test_monitor_notified_on_success(fake_element, mock_monitor):
    decorate_execution(fake_element, lambda: True, "elt.click()", monitor=mock_monitor)

    mock_monitor.start.assert_called_once_with("elt.click()")
    mock_monitor.timer.end.assert_called_once_with(True)
    mock_monitor.exception_during_execution.assert_not_called()


def test_monitor_notified_on_failure(fake_element, mock_monitor):
    fake_element.fail_on("click", NotInteractableError("nope"))

    with pytest.raises(FluentExecutionStopped):
        decorate_execution(fake_element, fake_element.click, "elt.click()", monitor=mock_monitor)

    mock_monitor.timer.end.assert_called_once_with(False)
    error, context = mock_monitor.exception_during_execution.call_args[0]
    assert isinstance(error, FluentExecutionStopped)
    assert context == "elt.click()"


def test_failure_while_applying_timeout_is_not_suppressed(fake_element):
    fake_element.fail_on("set_implicit_wait", RuntimeError("session gone"))

    with pytest.raises(FluentExecutionStopped) as excinfo:
        decorate_execution(fake_element, fake_element.click, "elt.click()", Period.secs(1))

    assert isinstance(excinfo.value.cause, RuntimeError)
    assert "click" not in fake_element.names()


def test_scoped_timeout_without_period_is_a_no_op(fake_element):
    with scoped_timeout(fake_element, None):
        pass
    assert fake_element.calls == []


class BrokenTimer(Timer):
    def end(self, success: bool) -> None:
        raise RuntimeError("sink down")


class BrokenMonitor(Monitor):
    """Monitor whose every hook fails"""

    def __init__(self, fail_start: bool = False):
        self.fail_start = fail_start

    def start(self, context) -> Timer:
        if self.fail_start:
            raise RuntimeError("sink down")
        return BrokenTimer()

    def exception_during_execution(self, error, context) -> None:
        raise RuntimeError("sink down")


def test_failing_monitor_does_not_mask_execution_error(fake_element, caplog):
    fake_element.fail_on("click", NotInteractableError("element not interactable"))

    with pytest.raises(FluentExecutionStopped) as excinfo:
        decorate_execution(
            fake_element, fake_element.click, "elt.click()", Period.secs(2), BrokenMonitor()
        )

    assert "elt.click()" in str(excinfo.value)
    assert isinstance(excinfo.value.cause, NotInteractableError)
    assert fake_element.calls[-1] == ("set_implicit_wait", 0, TimeUnit.SECONDS)
    assert "Monitor failed to report elt.click()" in caplog.text
    assert "Monitor failed to close timer for elt.click()" in caplog.text


@pytest.mark.parametrize("fail_start", [False, True])
def test_failing_monitor_does_not_fail_successful_call(fake_element, caplog, fail_start):
    result = decorate_execution(
        fake_element, lambda: "done", "elt.click()", monitor=BrokenMonitor(fail_start)
    )

    assert result == "done"
    assert "sink down" in caplog.text
