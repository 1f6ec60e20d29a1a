"""Rendertree Exceptions

Errors raised while rendering a component tree.
"""

from __future__ import annotations

from typing import Any


class RenderError(Exception):
    """Base exception for all rendering errors."""

    pass


class InvalidComponent(RenderError):
    """Raised when a node is neither a known intrinsic nor a callable component."""

    def __init__(self, value: Any, reason: str | None = None):
        self.value = value
        super().__init__(reason or f"Invalid component: {value!r}")


class MissingContext(RenderError):
    """Raised when a required ambient binding was never provided."""

    def __init__(self, context: Any):
        self.context = context
        super().__init__(f"No value provided for context: {context!r}")


class DeferredRenderError(RenderError):
    """Raised when deferred work failed while draining the task queue."""

    def __init__(self, errors: list[BaseException]):
        self.errors = errors
        first = errors[0]
        super().__init__(
            f"{len(errors)} deferred render task(s) failed; first: {first!r}"
        )


class UnresolvedSlotError(RenderError):
    """Raised when printing a tree that still holds a pending slot."""

    pass


class ConfigError(RenderError):
    """Raised when an intrinsic table document is malformed."""

    pass
