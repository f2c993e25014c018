# src/blockcanvas/cli.py
"""
blockcanvas Command Line Interface (CLI).

A small inspection surface over the block model, built with `typer` and
`rich`. Input files are JSON documents holding either one block or a list of
blocks, in the block models' own shape, e.g.::

    {"kind": "complex", "id": "0",
     "bottomLeft": [0, 0], "topRight": [10, 10],
     "subBlocks": [
        {"kind": "simple", "id": "0.0", "bottomLeft": [0, 0], "topRight": [5, 10],
         "color": [255, 0, 0, 255]},
        {"kind": "simple", "id": "0.1", "bottomLeft": [5, 0], "topRight": [10, 10],
         "color": [0, 0, 255, 255]}]}

Usage
-----
    # Validate geometry, id uniqueness and tiling
    $ blockcanvas check canvas.json

    # Report tiling problems without failing
    $ blockcanvas check canvas.json --lenient

    # List every leaf with its rectangle and color
    $ blockcanvas show canvas.json
"""

from __future__ import annotations

import json
import traceback
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from blockcanvas.core.checks.identity import check_unique_ids
from blockcanvas.core.checks.tiling import TilingIssue, find_tiling_issues
from blockcanvas.core.contracts.block import (
    BlockError,
    ComplexBlock,
    SimpleBlock,
    iter_leaves,
    parse_block,
)
from blockcanvas.core.settings import get_logger, load_settings

load_dotenv()

app = typer.Typer(
    help="blockcanvas: inspect and validate canvas block trees.",
    rich_markup_mode="markdown",
)
console = Console()
logger = get_logger(__name__)

AnyBlock = SimpleBlock | ComplexBlock


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _load_blocks(path: Path) -> list[AnyBlock]:
    """Read ``path`` and build the blocks it describes.

    Raises whatever reading or construction raises: ``UnicodeDecodeError``,
    ``json.JSONDecodeError``, ``InvalidBlockGeometry`` or
    ``pydantic.ValidationError``.
    """
    with open(path, encoding="utf-8") as f:
        payload: Any = json.load(f)

    items = payload if isinstance(payload, list) else [payload]
    blocks = [parse_block(item) for item in items]
    logger.debug("loaded %d block(s) from %s", len(blocks), path)
    return blocks


def _fail(title: str, message: str, verbose: bool = False) -> typer.Exit:
    console.print(f"[bold red]❌ {title}:[/bold red] {escape(message)}")
    if verbose:
        traceback.print_exc()
    return typer.Exit(code=1)


def _read_or_exit(path: Path, verbose: bool) -> list[AnyBlock]:
    try:
        return _load_blocks(path)
    except json.JSONDecodeError as e:
        raise _fail("Invalid JSON", str(e), verbose) from e
    except UnicodeDecodeError as e:
        raise _fail("Invalid JSON", f"file is not valid UTF-8 ({e.reason})", verbose) from e
    except BlockError as e:
        raise _fail("Invalid block", str(e), verbose) from e
    except ValidationError as e:
        raise _fail("Malformed block", str(e), verbose) from e


def _render_issues(issues: list[TilingIssue]) -> None:
    table = Table(title="Tiling issues", title_style="bold yellow")
    table.add_column("Kind", style="yellow")
    table.add_column("Blocks", style="cyan")
    table.add_column("Detail")
    for issue in issues:
        table.add_row(issue.kind, escape(", ".join(issue.block_ids)), escape(issue.detail))
    console.print(table)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def check(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="JSON file holding a block or a list of blocks.",
        ),
    ],
    lenient: Annotated[
        bool,
        typer.Option(
            "--lenient",
            "-l",
            help="Report tiling issues without failing.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks."),
    ] = False,
) -> None:
    """
    Validate a block file: corner ordering, id uniqueness and tiling.

    Exits with code 1 when a block cannot be constructed, ids collide, or
    (unless lenient) a composite block is not tiled by its leaves.
    """
    blocks = _read_or_exit(file, verbose)

    ids = check_unique_ids(blocks)
    if ids.is_err():
        dupes = ", ".join(f"{bid} (x{n})" for bid, n in ids.unwrap_err().items())
        raise _fail("Duplicate ids", dupes)

    issues = [issue for block in blocks for issue in find_tiling_issues(block)]
    strict = load_settings().strict_tiling and not lenient

    if issues:
        _render_issues(issues)
        if strict:
            raise _fail("Tiling check failed", f"{len(issues)} issue(s) found")
        console.print(f"[yellow]⚠️ {len(issues)} tiling issue(s) ignored (lenient).[/yellow]")

    leaves = sum(1 for _ in iter_leaves(blocks))
    console.print(
        Panel(
            f"{len(blocks)} block(s), {leaves} leaf block(s)",
            title="✅ Valid",
            border_style="green",
        )
    )


@app.command()  # type: ignore[misc]
def show(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="JSON file holding a block or a list of blocks.",
        ),
    ],
) -> None:
    """List every leaf block with its rectangle, size and color."""
    blocks = _read_or_exit(file, verbose=False)

    table = Table(title=f"Leaves in {file.name}")
    table.add_column("Id", style="cyan")
    table.add_column("Bottom-left")
    table.add_column("Top-right")
    table.add_column("Size")
    table.add_column("Color", style="magenta")
    for leaf in iter_leaves(blocks):
        table.add_row(
            escape(leaf.id),
            str(leaf.bottom_left),
            str(leaf.top_right),
            f"{leaf.size.px}x{leaf.size.py}",
            str(leaf.color),
        )
    console.print(table)


if __name__ == "__main__":
    app()
