"""
ElementHandle binding for Playwright's sync API.

Playwright has no implicit wait; the closest ambient setting is the page's
default timeout, which element actions and wait_for_selector honour. A zero
wait restores the configured default instead, because Playwright reads a
zero timeout as "wait forever".

The reset after every decorated call is itself a zero wait, so this binding
cannot tell it apart from a caller asking for none. within(Period.secs(0))
therefore runs under timeouts.driver_default_ms, not under a zero timeout.
Use Period.millis(1) for the shortest wait Playwright will honour.
"""

import logging
from typing import Any, List, Optional

from playwright.sync_api import ElementHandle as PlaywrightElement
from playwright.sync_api import Page

from ..config.config_manager import Config
from ..core.period import TimeUnit
from .errors import ElementNotFoundError
from .handle import Dimension, ElementHandle, Point

logger = logging.getLogger(__name__)

_SUBMIT_SCRIPT = """el => {
    const form = el.tagName === 'FORM' ? el : (el.form || el.closest('form'));
    if (!form) {
        throw new Error('Element is not inside a form');
    }
    if (form.requestSubmit) {
        form.requestSubmit();
    } else {
        form.submit();
    }
}"""

_SELECTED_SCRIPT = "el => !!(el.checked || el.selected)"

_CSS_SCRIPT = "(el, name) => window.getComputedStyle(el).getPropertyValue(name)"


class PlaywrightElementHandle(ElementHandle):
    """Wraps a playwright.sync_api.ElementHandle and the page it lives on"""

    def __init__(self, element: PlaywrightElement, page: Page, config: Optional[Config] = None):
        self.element = element
        self.page = page
        self.config = config or Config()

    @classmethod
    def query(cls, page: Page, selector: str, config: Optional[Config] = None) -> "PlaywrightElementHandle":
        """Locate a root element on a page"""
        element = page.wait_for_selector(selector, state="attached")
        if element is None:
            raise ElementNotFoundError(f"No element matches {selector}", context=selector)
        return cls(element, page, config)

    def _wrap(self, element: PlaywrightElement) -> "PlaywrightElementHandle":
        return PlaywrightElementHandle(element, self.page, self.config)

    def find_element(self, locator: Any) -> "PlaywrightElementHandle":
        found = self.element.wait_for_selector(str(locator), state="attached")
        if found is None:
            raise ElementNotFoundError(f"No element matches {locator}", context=str(locator))
        return self._wrap(found)

    def find_elements(self, locator: Any) -> List["PlaywrightElementHandle"]:
        return [self._wrap(found) for found in self.element.query_selector_all(str(locator))]

    def click(self) -> None:
        self.element.click()

    def clear(self) -> None:
        self.element.fill("")

    def submit(self) -> None:
        self.element.evaluate(_SUBMIT_SCRIPT)

    def send_input(self, *values: Any) -> None:
        for value in values:
            self.element.type(str(value))

    def get_tag_name(self) -> str:
        return self.element.evaluate("el => el.tagName.toLowerCase()")

    def is_selected(self) -> bool:
        return self.element.evaluate(_SELECTED_SCRIPT)

    def is_enabled(self) -> bool:
        return self.element.is_enabled()

    def is_displayed(self) -> bool:
        return self.element.is_visible()

    def get_location(self) -> Point:
        box = self.element.bounding_box()
        if not box:
            return Point(0, 0)
        return Point(box["x"], box["y"])

    def get_size(self) -> Dimension:
        box = self.element.bounding_box()
        if not box:
            return Dimension(0, 0)
        return Dimension(box["width"], box["height"])

    def get_css_value(self, name: str) -> str:
        return self.element.evaluate(_CSS_SCRIPT, name)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.element.get_attribute(name)

    def get_text(self) -> str:
        return self.element.inner_text()

    def set_implicit_wait(self, duration: float, unit: TimeUnit) -> None:
        timeout_ms = unit.to_millis(duration)
        if timeout_ms <= 0:
            timeout_ms = self.config.timeouts.driver_default_ms
        logger.debug(f"Setting page default timeout to {timeout_ms}ms")
        self.page.set_default_timeout(timeout_ms)
