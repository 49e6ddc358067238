import pytest
from typing import Any, Dict, List, Optional

from fluent_element.browser.handle import Dimension, ElementHandle, Point
from fluent_element.config.config_manager import Config


class FakeElement(ElementHandle):
    """ElementHandle double that records every call in order"""

    def __init__(self, text: str = "hello", attributes: Optional[Dict[str, str]] = None,
                 children: Optional[Dict[str, List["FakeElement"]]] = None, tag: str = "input",
                 calls: Optional[List[tuple]] = None):
        self.text = text
        self.attributes = attributes if attributes is not None else {"class": "btn primary", "id": "go"}
        self.children = children or {}
        self.tag = tag
        self.calls = calls if calls is not None else []
        self.failures: Dict[str, Exception] = {}
        self.typed: List[Any] = []

    def _record(self, name: str, *args):
        self.calls.append((name,) + args)
        if name in self.failures:
            raise self.failures[name]

    def fail_on(self, name: str, error: Exception) -> "FakeElement":
        self.failures[name] = error
        return self

    def names(self) -> List[str]:
        return [call[0] for call in self.calls]

    def find_element(self, locator):
        self._record("find_element", locator)
        matches = self.children.get(locator)
        if not matches:
            raise LookupError(f"no such element: {locator}")
        return matches[0]

    def find_elements(self, locator):
        self._record("find_elements", locator)
        return list(self.children.get(locator, []))

    def click(self):
        self._record("click")

    def clear(self):
        self._record("clear")
        self.text = ""

    def submit(self):
        self._record("submit")

    def send_input(self, *values):
        self._record("send_input", *values)
        self.typed.extend(values)

    def get_tag_name(self):
        self._record("get_tag_name")
        return self.tag

    def is_selected(self):
        self._record("is_selected")
        return False

    def is_enabled(self):
        self._record("is_enabled")
        return True

    def is_displayed(self):
        self._record("is_displayed")
        return True

    def get_location(self):
        self._record("get_location")
        return Point(10, 20)

    def get_size(self):
        self._record("get_size")
        return Dimension(100, 30)

    def get_css_value(self, name):
        self._record("get_css_value", name)
        return "rgb(0, 0, 0)" if name == "color" else ""

    def get_attribute(self, name):
        self._record("get_attribute", name)
        return self.attributes.get(name)

    def get_text(self):
        self._record("get_text")
        return self.text

    def set_implicit_wait(self, duration, unit):
        self._record("set_implicit_wait", duration, unit)


class NotInteractableError(Exception):
    """Stands in for a driver's 'element not interactable' failure"""
    pass


@pytest.fixture
def fake_element():
    """A recording fake element"""
    return FakeElement()


@pytest.fixture
def fast_config():
    """Config with a short assertion poll interval"""
    return Config.model_validate({"assertions": {"poll_interval_ms": 1}})


@pytest.fixture
def mock_monitor(mocker):
    """Monitor double whose timer records end() calls"""
    monitor = mocker.MagicMock()
    monitor.timer = mocker.MagicMock()
    monitor.start.return_value = monitor.timer
    return monitor
