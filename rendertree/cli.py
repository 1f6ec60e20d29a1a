"""Rendertree CLI

Usage:
    rendertree render pkg.module:Root            # print rendered text
    rendertree render pkg.module:Root --json     # print the rendered tree
    rendertree render pkg.module:Root -i tags.yaml
    rendertree version
"""

from __future__ import annotations

import asyncio
import importlib
import logging
import os
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from rendertree import __version__
from rendertree.engine import h, load_intrinsics, render_async
from rendertree.engine.node import is_component
from rendertree.engine.printer import dump_json, print_tree
from rendertree.exceptions import RenderError

log = logging.getLogger(__name__)

console = Console(stderr=True)

app = typer.Typer(help="Render component trees to text.")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the rendertree CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level
    - Debug (RENDERTREE_DEBUG=1): DEBUG level - shows task scheduling
    """
    if os.environ.get("RENDERTREE_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=bool(os.environ.get("RENDERTREE_DEBUG")),
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("rendertree")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def load_target(target: str) -> Any:
    """Resolve ``module:attr`` to a component node.

    A callable is wrapped with h(); a component node is used as-is.
    """
    if ":" not in target:
        raise RenderError(f"Target must look like 'module:attr', got '{target}'")

    module_name, attr = target.split(":", 1)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise RenderError(f"Cannot import '{module_name}': {e}") from e

    try:
        obj = getattr(module, attr)
    except AttributeError:
        raise RenderError(f"Module '{module_name}' has no attribute '{attr}'") from None

    if is_component(obj):
        return obj
    return h(obj)


@app.command("render")
def render_cmd(
    target: str = typer.Argument(..., help="Root component as module:attr"),
    as_json: bool = typer.Option(False, "--json", help="Print the rendered tree as JSON."),
    intrinsics: Optional[Path] = typer.Option(
        None, "-i", "--intrinsics", help="YAML file with extra intrinsic literals."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Render a root component and print the result."""
    setup_logging(verbose)

    try:
        table = load_intrinsics(intrinsics) if intrinsics else None
        root = load_target(target)
        log.info("Rendering %s", target)
        tree = asyncio.run(render_async(root, intrinsics=table))
        if as_json:
            typer.echo(dump_json(tree).decode())
        else:
            typer.echo(print_tree(tree), nl=False)
    except RenderError as e:
        exit_with_error(str(e))
    except OSError as e:
        exit_with_error(str(e))


@app.command("version")
def version_cmd() -> None:
    """Show version and exit."""
    typer.echo(__version__)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
