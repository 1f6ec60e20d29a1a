"""Scope component - named lexical scopes that follow component nesting."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from rendertree.engine.context import Context, create_context, provide, use_context


@dataclass(frozen=True, eq=False)
class ScopeRecord:
    """A named scope linked to its enclosing scope."""

    name: str
    parent: ScopeRecord | None = None

    def chain(self) -> Iterator[ScopeRecord]:
        """Yield this scope, then each enclosing scope up to the root."""
        scope: ScopeRecord | None = self
        while scope is not None:
            yield scope
            scope = scope.parent

    @property
    def path(self) -> list[str]:
        """Scope names from outermost to innermost, global scope excluded."""
        names = [s.name for s in self.chain() if s is not GLOBAL_SCOPE]
        return names[::-1]


GLOBAL_SCOPE = ScopeRecord("<global>")

ScopeContext: Context[ScopeRecord] = create_context(GLOBAL_SCOPE, name="scope")


def use_scope() -> ScopeRecord:
    return use_context(ScopeContext)


def Scope(name: str, children: Any = None) -> Any:
    """Open a scope named ``name`` for ``children`` only."""
    provide(ScopeContext, ScopeRecord(name, parent=use_scope()))
    return children
