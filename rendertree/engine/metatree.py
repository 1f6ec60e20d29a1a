"""Meta tree - parent back-references for rendered nodes.

Each RenderedNode carries its MetaNode as a sidecar. Consumers walk
``parent`` upward to find their enclosing declaration; there are no
downward links.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator


@dataclass(eq=False)
class MetaNode:
    """Structural record for one rendered node."""

    parent: MetaNode | None = None
    # Function handle that produced the node, if any
    component: Callable[..., Any] | None = None


class RenderedNode(list):
    """Ordered, append-only sequence of text and nested nodes.

    Compares equal to a plain list with the same contents.
    """

    __slots__ = ("meta",)

    def __init__(
        self,
        items: Any = (),
        parent: MetaNode | None = None,
        component: Callable[..., Any] | None = None,
    ):
        super().__init__(items)
        self.meta = MetaNode(parent=parent, component=component)

    def __repr__(self) -> str:
        return f"RenderedNode({list.__repr__(self)})"


class _Pending:
    """Placeholder for a slot whose deferred value has not settled."""

    _instance: _Pending | None = None

    def __new__(cls) -> _Pending:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<pending>"


PENDING = _Pending()


def is_pending(value: Any) -> bool:
    return value is PENDING


def get_meta(node: RenderedNode) -> MetaNode:
    """Return the meta node owned by ``node`` (always the same instance)."""
    if not isinstance(node, RenderedNode):
        raise TypeError(f"Expected RenderedNode, got {type(node).__name__}")
    return node.meta


def ancestors(meta: MetaNode) -> Iterator[MetaNode]:
    """Yield the enclosing meta nodes, nearest first."""
    current = meta.parent
    while current is not None:
        yield current
        current = current.parent


def find_enclosing(meta: MetaNode, component: Callable[..., Any]) -> MetaNode | None:
    """Find the nearest enclosing meta node produced by ``component``."""
    for candidate in ancestors(meta):
        if candidate.component is component:
            return candidate
    return None
