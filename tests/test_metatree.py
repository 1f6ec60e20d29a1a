"""Tests for the meta tree."""

import asyncio

import pytest

from rendertree import get_meta, h, render, render_async
from rendertree.engine import (
    PENDING,
    MetaNode,
    RenderedNode,
    ancestors,
    current_context,
    find_enclosing,
    is_pending,
)


def test_get_meta_is_idempotent():
    node = RenderedNode()
    assert get_meta(node) is get_meta(node)
    assert isinstance(get_meta(node), MetaNode)


def test_meta_keyed_by_identity_not_contents():
    a = RenderedNode(["x"])
    b = RenderedNode(["x"])
    assert a == b
    assert get_meta(a) is not get_meta(b)


def test_get_meta_rejects_plain_list():
    with pytest.raises(TypeError):
        get_meta(["x"])


def test_rendered_node_equals_plain_list():
    node = RenderedNode(["a", RenderedNode(["b"])])
    assert node == ["a", ["b"]]
    assert repr(node) == "RenderedNode(['a', RenderedNode(['b'])])"


def test_root_has_no_parent():
    def Test():
        return "x"

    assert get_meta(render(h(Test))).parent is None


def test_parent_links_follow_component_nesting():
    def Inner():
        return [h("br")]

    def Outer():
        return h(Inner)

    outer = render(h(Outer))
    inner = outer[0]
    br = inner[0]

    assert get_meta(inner).parent is get_meta(outer)
    assert get_meta(br).parent is get_meta(inner)
    assert get_meta(outer).component is Outer
    assert get_meta(inner).component is Inner
    assert get_meta(br).component is None


def test_find_enclosing_declaration():
    captured = {}

    def Leaf():
        captured["meta"] = current_context().meta
        return "leaf"

    def Body(children=None):
        return children

    def Declaration(children=None):
        return children

    tree = render(h(Declaration, None, h(Body, None, h(Leaf))))
    meta = captured["meta"]

    assert find_enclosing(meta, Declaration) is get_meta(tree)
    assert find_enclosing(meta, Body) is get_meta(tree[0])
    assert find_enclosing(meta, Leaf) is None
    assert [m.component for m in ancestors(meta)] == [Body, Declaration]


def test_pending_sentinel():
    assert is_pending(PENDING)
    assert not is_pending("x")
    assert repr(PENDING) == "<pending>"


@pytest.mark.asyncio
async def test_parent_links_survive_suspension():
    async def later(value):
        await asyncio.sleep(0.01)
        return value

    def Child():
        return "child"

    def LateChild():
        return "late"

    async def Parent():
        await asyncio.sleep(0)
        return [h(Child), later(h(LateChild))]

    def Sibling():
        return "sibling"

    def Root():
        return [h(Parent), h(Sibling)]

    root = await render_async(h(Root))
    parent, sibling = root

    assert root == [[["child"], ["late"]], ["sibling"]]
    assert get_meta(parent).parent is get_meta(root)
    assert get_meta(parent[0]).parent is get_meta(parent)
    assert get_meta(parent[1]).parent is get_meta(parent)
    assert get_meta(parent[1]).component is LateChild
    assert get_meta(sibling).parent is get_meta(root)
