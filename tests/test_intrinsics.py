"""Tests for the intrinsic table."""

import pytest

from rendertree import ConfigError, IntrinsicTable, InvalidComponent, h, render, render_async
from rendertree.engine import IntrinsicsContext, load_intrinsics, load_intrinsics_from_string


def test_default_literals():
    table = IntrinsicTable()
    assert table.lookup("br") == "\n"
    assert table.lookup("lb") == "{"
    assert table.lookup("rb") == "}"


def test_unknown_tag_raises():
    with pytest.raises(InvalidComponent, match="Unknown intrinsic tag"):
        IntrinsicTable().lookup("semi")


def test_extend_returns_new_table():
    base = IntrinsicTable()
    extended = base.extend(semi=";", br="\r\n")

    assert extended.lookup("semi") == ";"
    assert extended.lookup("br") == "\r\n"
    assert "semi" not in base
    assert base.lookup("br") == "\n"


def test_load_from_string_merges_defaults():
    table = load_intrinsics_from_string(
        """
literals:
  semi: ";"
  indent: "  "
"""
    )
    assert table.lookup("semi") == ";"
    assert table.lookup("indent") == "  "
    assert table.lookup("br") == "\n"


def test_load_empty_document():
    assert load_intrinsics_from_string("") == IntrinsicTable()


def test_load_from_file(tmp_path):
    path = tmp_path / "intrinsics.yaml"
    path.write_text('literals:\n  comma: ", "\n')

    table = load_intrinsics(path)
    assert table.lookup("comma") == ", "


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "literals:\n  semi: [1, 2]\n",
        "literals: [unclosed\n",
    ],
)
def test_malformed_documents(content):
    with pytest.raises(ConfigError):
        load_intrinsics_from_string(content)


def test_render_with_provided_table():
    def Statement():
        return ["x = 1", h("semi")]

    with IntrinsicsContext.provide(IntrinsicTable().extend(semi=";")):
        assert render(h(Statement)) == ["x = 1", [";"]]

    with pytest.raises(InvalidComponent):
        render(h(Statement))


@pytest.mark.asyncio
async def test_render_async_with_table():
    def Statement():
        return ["x = 1", h("semi")]

    tree = await render_async(h(Statement), intrinsics=IntrinsicTable().extend(semi=";"))
    assert tree == ["x = 1", [";"]]
