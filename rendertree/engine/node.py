"""Component nodes - the input tree.

Like React elements: either an intrinsic tag (``<br />``) or a function
component with props. The variant is fixed when the node is built.
"""

from __future__ import annotations

from typing import Any, Callable, Union

import msgspec

from rendertree.exceptions import InvalidComponent


class Intrinsic(msgspec.Struct, frozen=True):
    """A fixed literal marker, looked up in the intrinsic table at render time."""

    tag: str


class Function(msgspec.Struct, frozen=True):
    """A user-supplied callable invoked as ``handle(**props)``."""

    handle: Callable[..., Any]
    props: dict[str, Any] = msgspec.field(default_factory=dict)

    @property
    def name(self) -> str:
        return getattr(self.handle, "__name__", repr(self.handle))


Component = Union[Intrinsic, Function]


def is_component(value: Any) -> bool:
    return isinstance(value, (Intrinsic, Function))


# Factory (like React.createElement)


def h(type_: str | Callable[..., Any], props: dict[str, Any] | None = None, *children: Any) -> Component:
    """Create a component node.

    Args:
        type_: Intrinsic tag name, or a callable function component
        props: Props passed to the component as keyword arguments
        *children: Stored under the ``children`` prop

    Examples:
        h("br")
        h(Scope, {"name": "outer"}, h(Probe))
    """
    if isinstance(type_, str):
        if props or children:
            raise InvalidComponent(type_, f"Intrinsic '{type_}' takes no props or children")
        return Intrinsic(type_)

    if not callable(type_):
        raise InvalidComponent(type_)

    merged = dict(props or {})
    if children:
        merged["children"] = list(children)
    return Function(type_, merged)
