"""Integration tests that run the actual CLI."""

import subprocess
import sys
import textwrap

import pytest

from rendertree import __version__

COMPONENTS = textwrap.dedent(
    """
    import asyncio

    from rendertree import Scope, h


    async def later(value):
        await asyncio.sleep(0)
        return value


    def Root():
        return h(Scope, {"name": "main"}, "hello", later(" world"), h("br"))


    def Semi():
        return ["x", h("semi")]


    ROOT_NODE = h(Root)
    """
)


@pytest.fixture
def project(tmp_path):
    (tmp_path / "components.py").write_text(COMPONENTS)
    return tmp_path


def run_cli(cwd, *args):
    return subprocess.run(
        [sys.executable, "-m", "rendertree.cli", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
    )


def test_render_prints_text(project):
    result = run_cli(project, "render", "components:Root")
    assert result.returncode == 0, result.stderr
    assert result.stdout == "hello world\n"


def test_render_component_node_target(project):
    result = run_cli(project, "render", "components:ROOT_NODE")
    assert result.returncode == 0, result.stderr
    assert result.stdout == "hello world\n"


def test_render_json(project):
    result = run_cli(project, "render", "components:Root", "--json")
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == '[["hello"," world",["\\n"]]]'


def test_render_with_intrinsics_file(project):
    (project / "tags.yaml").write_text('literals:\n  semi: ";"\n')

    result = run_cli(project, "render", "components:Semi", "-i", "tags.yaml")
    assert result.returncode == 0, result.stderr
    assert result.stdout == "x;"


def test_unknown_intrinsic_fails(project):
    result = run_cli(project, "render", "components:Semi")
    assert result.returncode == 1
    assert "Error:" in result.stderr
    assert "semi" in result.stderr


def test_bad_target_fails(project):
    result = run_cli(project, "render", "components")
    assert result.returncode == 1
    assert "module:attr" in result.stderr


def test_missing_attribute_fails(project):
    result = run_cli(project, "render", "components:Nope")
    assert result.returncode == 1
    assert "no attribute" in result.stderr


def test_version():
    result = run_cli(None, "version")
    assert result.returncode == 0
    assert result.stdout.strip() == __version__
