"""Built-in components."""

from rendertree.components.scope import GLOBAL_SCOPE, Scope, ScopeContext, ScopeRecord, use_scope

__all__ = ["GLOBAL_SCOPE", "Scope", "ScopeContext", "ScopeRecord", "use_scope"]
