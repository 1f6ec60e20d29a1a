"""Context store - ambient, stack-scoped bindings.

Like React's context: a component reads the value provided by its nearest
enclosing provider. The active RenderContext lives in a ContextVar and is
pushed/popped with set/reset tokens, so bindings never outlive the subtree
that made them. asyncio tasks copy the ContextVar state when they are
created, which pins a deferred continuation to the frame it came from.
"""

from __future__ import annotations

from collections import ChainMap
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from rendertree.engine.metatree import MetaNode, RenderedNode
from rendertree.exceptions import RenderError

T = TypeVar("T")


@dataclass
class RenderContext:
    """The active (node, meta) pair plus the bindings visible from it."""

    node: RenderedNode | None = None
    meta: MetaNode | None = None
    bindings: ChainMap = field(default_factory=ChainMap)


_current: ContextVar[RenderContext | None] = ContextVar("rendertree_context", default=None)


def current_context() -> RenderContext | None:
    """Return the active render context, or None outside any render."""
    return _current.get()


@contextmanager
def enter_context(
    node: RenderedNode | None = None,
    bindings: dict[Any, Any] | None = None,
) -> Iterator[RenderContext]:
    """Install a new render context for the duration of the block.

    With no node, the enclosing node and meta stay active (a pure binding
    frame). The previous context is restored even if the block raises.
    """
    parent = _current.get()
    if parent is None:
        parent = RenderContext()
    if node is None:
        node, meta = parent.node, parent.meta
    else:
        meta = node.meta

    ctx = RenderContext(
        node=node,
        meta=meta,
        bindings=parent.bindings.new_child(dict(bindings or {})),
    )
    token = _current.set(ctx)
    try:
        yield ctx
    finally:
        _current.reset(token)


class Context(Generic[T]):
    """Handle for one independently keyed ambient value."""

    def __init__(self, default: T, name: str | None = None):
        self.default = default
        self.name = name or f"context-{id(self):x}"

    def provide(self, value: T):
        """Bind ``value`` for everything rendered inside the ``with`` block.

        Usage:
            with TaskQueueContext.provide(queue):
                tree = render(root)
        """
        return enter_context(bindings={self: value})

    def __repr__(self) -> str:
        return f"Context({self.name!r})"


def create_context(default: Any = None, name: str | None = None) -> Context:
    return Context(default, name)


def use_context(context: Context[T]) -> T:
    """Read the nearest provided value for ``context``, or its default."""
    ctx = _current.get()
    if ctx is None:
        return context.default
    try:
        return ctx.bindings[context]
    except KeyError:
        return context.default


def provide(context: Context[T], value: T) -> None:
    """Bind ``value`` for the subtree of the component currently rendering.

    Must be called from inside a component body; siblings and ancestors
    never see the binding.
    """
    ctx = _current.get()
    if ctx is None or ctx.node is None:
        raise RenderError("provide() called outside of a component render")
    ctx.bindings[context] = value


def Provider(context: Context[T], value: T, children: Any = None) -> Any:
    """Function component: provide ``value`` to ``children``."""
    provide(context, value)
    return children
