"""Shared utility functions for Kaboomer.

Provides Rich-based console reporting, idempotent directory creation,
deterministic JSON serialisation, file writing, identifier helpers and a
line-streaming subprocess runner used for ``git init``.
"""

from __future__ import annotations

import asyncio
import json
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def stream_command(
    cmd: list[str],
    cwd: str | Path | None = None,
) -> int:
    """Run *cmd* and relay its output to the console line by line.

    Stderr is merged into stdout so lines appear in the order the child
    wrote them.  The call waits for the process to exit; there is no
    timeout.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.

    Returns:
        The child's exit code.

    Raises:
        OSError: If the program cannot be spawned (e.g. not installed).
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.STDOUT,
        cwd=str(cwd) if cwd else None,
    )

    assert process.stdout is not None  # guaranteed by PIPE
    while True:
        line_bytes = await process.stdout.readline()
        if not line_bytes:
            # EOF
            break
        console.print(
            escape(line_bytes.decode("utf-8", errors="replace").rstrip("\n")),
            style="dim",
        )

    return await process.wait()


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def to_identifier(name: str) -> str:
    """Turn a hyphenated unit name into a camel-cased identifier.

    Every ``-x`` sequence becomes ``X``; the rest is left untouched.

    Examples::

        to_identifier("boss-fight")    -> "bossFight"
        to_identifier("level-1-intro") -> "level1Intro"
        to_identifier("player")        -> "player"
    """
    return re.sub(r"-(\w)", lambda m: m.group(1).upper(), name)


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


def dump_json(data: Any) -> str:
    """Serialise *data* deterministically.

    Keys keep their declaration order, indentation is fixed at two spaces
    and the output always ends with a newline, so identical input always
    produces byte-identical text.
    """
    return json.dumps(data, indent=2, ensure_ascii=False, default=_plain) + "\n"


def _plain(obj: Any) -> Any:
    """Convert read-only mappings (e.g. ``MappingProxyType``) for ``json``."""
    if isinstance(obj, Mapping):
        return dict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Calling it again on an existing directory is a no-op.

    Returns:
        The directory as a ``Path``.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_info(message: str) -> None:
    """Print an ``info``-prefixed progress line."""
    console.print(f"[bold cyan]info[/bold cyan] {message}")


def print_created(path: str | Path) -> None:
    """Report a file that was just written."""
    print_info(f"[green]created[/green] {escape(str(path))}")


def print_running(command: str) -> None:
    """Report an external command that is about to run."""
    print_info(f"[green]running[/green] {escape(command)}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_next_steps(project_dir: str, commands: list[str]) -> None:
    """Print the final summary with the commands to get started."""
    console.print()
    console.print(
        f"[bold green]done[/bold green] scaffolded project in "
        f"[cyan]{escape(project_dir)}[/cyan], get started by running:"
    )
    for command in commands:
        name, _, args = command.partition(" ")
        console.print(f"    [green]{escape(name)}[/green] {escape(args)}")
