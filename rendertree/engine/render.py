"""Render - evaluate a component tree into a rendered tree.

Like ReactDOM.render(), but the output is nested lists of text. Function
components may return awaitables; their nodes are returned immediately and
filled in later by tasks on the ambient TaskQueue.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Coroutine, Iterator
from types import GeneratorType
from typing import Any

from rendertree.engine.context import current_context, enter_context, use_context
from rendertree.engine.intrinsics import IntrinsicTable, IntrinsicsContext
from rendertree.engine.metatree import PENDING, RenderedNode, is_pending
from rendertree.engine.node import Function, Intrinsic
from rendertree.engine.tasks import TaskQueue, TaskQueueContext, current_queue
from rendertree.exceptions import InvalidComponent, RenderError

log = logging.getLogger(__name__)

_SEQUENCE_TYPES = (list, tuple, GeneratorType)


def render(root: Any) -> RenderedNode:
    """Render one component node.

    Intrinsics become a one-element literal node. Function components get a
    fresh node whose meta parent is the enclosing component's meta; their
    children are processed inside a new render context which is restored
    before returning.

    Raises:
        InvalidComponent: Unknown intrinsic tag, or root is not a component
        MissingContext: A deferred value appeared but no TaskQueue was provided
    """
    ctx = current_context()
    parent = ctx.meta if ctx is not None else None

    if isinstance(root, Intrinsic):
        literal = use_context(IntrinsicsContext).lookup(root.tag)
        return RenderedNode([literal], parent=parent)

    if not isinstance(root, Function):
        raise InvalidComponent(root)
    if not callable(root.handle):
        raise InvalidComponent(root.handle)

    node = RenderedNode(parent=parent, component=root.handle)
    with enter_context(node):
        children = root.handle(**root.props)
        if inspect.isawaitable(children):
            log.debug("Component %s returned a deferred value", root.name)
            _schedule(_settle_component(node, children), children)
        else:
            _process_children(node, children)

    return node


async def render_async(root: Any, intrinsics: IntrinsicTable | None = None) -> RenderedNode:
    """Render ``root`` and wait until every deferred value has settled.

    If rendering or settling fails, every outstanding task is cancelled
    before the error propagates.

    Args:
        root: Component node to render
        intrinsics: Intrinsic table to use instead of the default

    Returns:
        Fully resolved rendered tree
    """
    queue = TaskQueue()
    bindings: dict[Any, Any] = {TaskQueueContext: queue}
    if intrinsics is not None:
        bindings[IntrinsicsContext] = intrinsics

    try:
        with enter_context(bindings=bindings):
            tree = render(root)
        await queue.settle()
    except BaseException:
        cancelled = await queue.cancel()
        log.debug("Render failed, cancelled %d outstanding task(s)", cancelled)
        raise
    return tree


def flatten(children: Any) -> Iterator[Any]:
    """Flatten nested lists/tuples/generators to any depth.

    A non-sequence value yields itself. Strings are never split.
    """
    stack = [iter((children,))]
    while stack:
        try:
            item = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        if isinstance(item, _SEQUENCE_TYPES):
            stack.append(iter(item))
        else:
            yield item


def _process_children(node: RenderedNode, children: Any) -> None:
    for child in flatten(children):
        if isinstance(child, (Intrinsic, Function)):
            node.append(render(child))
        elif inspect.isawaitable(child):
            # Reserve the slot now so declaration order wins
            index = len(node)
            node.append(PENDING)
            _schedule(_fill_slot(node, index, child), child)
        elif child is None or isinstance(child, bool):
            continue
        else:
            node.append(str(child))


def _schedule(task: Coroutine[Any, Any, None], deferred: Awaitable[Any]) -> None:
    try:
        current_queue().enqueue(task)
    except RenderError:
        task.close()
        if inspect.iscoroutine(deferred):
            deferred.close()
        raise


async def _settle_component(node: RenderedNode, deferred: Awaitable[Any]) -> None:
    children = await deferred
    _process_children(node, children)


async def _fill_slot(node: RenderedNode, index: int, deferred: Awaitable[Any]) -> None:
    value = await deferred
    # Chained awaitables settle into the same slot
    while inspect.isawaitable(value):
        value = await value
    resolved = RenderedNode(parent=node.meta)
    _process_children(resolved, value)

    if len(resolved) == 1 and not is_pending(resolved[0]):
        node[index] = resolved[0]
    else:
        node[index] = resolved
