"""rendertree - async component-tree renderer

Evaluates a declarative tree of components into nested text fragments.
"React for code emitters."
"""

__version__ = "0.1.0"

# Engine (core abstractions)
from rendertree.engine import (
    Context,
    Function,
    Intrinsic,
    IntrinsicTable,
    MetaNode,
    Provider,
    RenderedNode,
    TaskQueue,
    TaskQueueContext,
    create_context,
    get_meta,
    h,
    print_tree,
    provide,
    render,
    render_async,
    use_context,
)

# Components
from rendertree.components import GLOBAL_SCOPE, Scope, ScopeContext, ScopeRecord

from rendertree.exceptions import (
    DeferredRenderError,
    InvalidComponent,
    ConfigError,
    MissingContext,
    RenderError,
    UnresolvedSlotError,
)

__all__ = [
    "__version__",
    # Core classes
    "Context",
    "Function",
    "Intrinsic",
    "IntrinsicTable",
    "MetaNode",
    "RenderedNode",
    "TaskQueue",
    "TaskQueueContext",
    # Factory functions
    "h",
    "create_context",
    # Hooks
    "use_context",
    "provide",
    "get_meta",
    # Rendering
    "render",
    "render_async",
    "print_tree",
    # Components
    "Provider",
    "Scope",
    "ScopeContext",
    "ScopeRecord",
    "GLOBAL_SCOPE",
    # Errors
    "RenderError",
    "InvalidComponent",
    "MissingContext",
    "DeferredRenderError",
    "UnresolvedSlotError",
    "ConfigError",
]
