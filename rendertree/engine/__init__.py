"""rendertree.engine - Core rendering engine.

This is like React's core - just the rendering engine, no components.
"""

from rendertree.engine.context import (
    Context,
    Provider,
    RenderContext,
    create_context,
    current_context,
    provide,
    use_context,
)
from rendertree.engine.intrinsics import (
    IntrinsicTable,
    IntrinsicsContext,
    load_intrinsics,
    load_intrinsics_from_string,
)
from rendertree.engine.metatree import (
    PENDING,
    MetaNode,
    RenderedNode,
    ancestors,
    find_enclosing,
    get_meta,
    is_pending,
)
from rendertree.engine.node import Component, Function, Intrinsic, h
from rendertree.engine.printer import dump_json, print_tree
from rendertree.engine.render import render, render_async
from rendertree.engine.tasks import TaskQueue, TaskQueueContext, current_queue

__all__ = [
    "Component",
    "Context",
    "Function",
    "Intrinsic",
    "IntrinsicTable",
    "IntrinsicsContext",
    "MetaNode",
    "PENDING",
    "Provider",
    "RenderContext",
    "RenderedNode",
    "TaskQueue",
    "TaskQueueContext",
    "ancestors",
    "create_context",
    "current_context",
    "current_queue",
    "dump_json",
    "find_enclosing",
    "get_meta",
    "h",
    "is_pending",
    "load_intrinsics",
    "load_intrinsics_from_string",
    "print_tree",
    "provide",
    "render",
    "render_async",
    "use_context",
]
