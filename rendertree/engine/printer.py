"""Printer - turns a rendered tree into text."""

from __future__ import annotations

from typing import Any

import msgspec

from rendertree.engine.metatree import is_pending
from rendertree.exceptions import UnresolvedSlotError


def print_tree(node: list) -> str:
    """Concatenate every text slot depth-first, left to right.

    Raises:
        UnresolvedSlotError: If a deferred slot has not settled
    """
    parts: list[str] = []
    stack = [iter(node)]
    while stack:
        try:
            item = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        if isinstance(item, list):
            stack.append(iter(item))
        elif is_pending(item):
            raise UnresolvedSlotError("Rendered tree still has a pending slot")
        else:
            parts.append(item)
    return "".join(parts)


def _enc_hook(obj: Any) -> Any:
    if isinstance(obj, list):
        return list(obj)
    if is_pending(obj):
        raise UnresolvedSlotError("Rendered tree still has a pending slot")
    raise NotImplementedError(f"Cannot encode {type(obj).__name__}")


def dump_json(node: list) -> bytes:
    """Encode the rendered tree as nested JSON arrays."""
    return msgspec.json.encode(node, enc_hook=_enc_hook)
