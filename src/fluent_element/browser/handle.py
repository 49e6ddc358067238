"""
Boundary between the fluent layer and the host driver binding
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List


@dataclass(frozen=True)
class Point:
    """Location of an element's top-left corner on the page"""
    x: float
    y: float


@dataclass(frozen=True)
class Dimension:
    """Rendered size of an element"""
    width: float
    height: float


class ElementHandle(ABC):
    """One located element plus the session-level wait setting of its driver.

    Locators are opaque to the fluent layer and are passed through as-is.
    """

    @abstractmethod
    def find_element(self, locator: Any) -> "ElementHandle":
        """Locate a single sub-element, honouring the ambient wait"""
        pass

    @abstractmethod
    def find_elements(self, locator: Any) -> List["ElementHandle"]:
        """Locate all matching sub-elements"""
        pass

    @abstractmethod
    def click(self) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def submit(self) -> None:
        pass

    @abstractmethod
    def send_input(self, *values: Any) -> None:
        pass

    @abstractmethod
    def get_tag_name(self) -> str:
        pass

    @abstractmethod
    def is_selected(self) -> bool:
        pass

    @abstractmethod
    def is_enabled(self) -> bool:
        pass

    @abstractmethod
    def is_displayed(self) -> bool:
        pass

    @abstractmethod
    def get_location(self) -> Point:
        pass

    @abstractmethod
    def get_size(self) -> Dimension:
        pass

    @abstractmethod
    def get_css_value(self, name: str) -> str:
        pass

    @abstractmethod
    def get_attribute(self, name: str) -> Any:
        pass

    @abstractmethod
    def get_text(self) -> str:
        pass

    @abstractmethod
    def set_implicit_wait(self, duration: float, unit: Any) -> None:
        """Change how long the driver polls before giving up on an interaction"""
        pass
