"""
Human-readable description of a fluent call chain.

A Context is a node in a persistent rope: it keeps a reference to its parent
and the suffix its own call added. Siblings share the parent chain but never
each other's suffixes. Nodes hold only their own suffix; the full text is
assembled on demand, so a chain of n calls keeps n suffixes and nothing more.
"""

from typing import Any, Iterable, List, Optional, Union


def render_args(args: Iterable[Any]) -> str:
    """Render call arguments the way they appear inside a context suffix"""
    return ", ".join(str(arg) for arg in args)


class Context:
    __slots__ = ("_parent", "_suffix", "_operation")

    def __init__(self, suffix: str, parent: Optional["Context"] = None, operation: Optional[str] = None):
        if not isinstance(suffix, str):
            raise TypeError(f"Context text must be a string, got {type(suffix).__name__}")
        self._parent = parent
        self._suffix = suffix
        self._operation = operation

    @classmethod
    def root(cls, text: Union[str, "Context"]) -> "Context":
        """Start a chain, or pass an existing chain through untouched"""
        if isinstance(text, Context):
            return text
        return cls(text)

    @property
    def parent(self) -> Optional["Context"]:
        return self._parent

    @property
    def operation(self) -> str:
        """Name of the last call in the chain, or the root text"""
        node: Optional[Context] = self
        while node is not None:
            if node._operation is not None:
                return node._operation
            if node._parent is None:
                return node._suffix
            node = node._parent
        return ""

    def derive(self, operation: str, *args: Any) -> "Context":
        return Context(f".{operation}({render_args(args)})", self, operation)

    def index(self, position: int) -> "Context":
        return Context(f"[{position}]", self)

    def __str__(self) -> str:
        parts: List[str] = []
        node: Optional[Context] = self
        while node is not None:
            parts.append(node._suffix)
            node = node._parent
        return "".join(reversed(parts))

    def __repr__(self) -> str:
        return f"Context({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Context, str)):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))
