"""Shared utility functions for ff-project.

Provides async command execution, path display helpers and Rich-based console
output.  All user-facing output goes through the module-level ``console`` so
that the CLI, the installer and the scaffolder share one rendering surface.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: float = 10,
) -> tuple[int, str, str]:
    """Run a command asynchronously and capture its output.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A timed-out command returns
        ``-1`` with an explanatory stderr string.

    Raises:
        OSError: If the executable cannot be started.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def display_path(path: str | Path, root: str | Path | None = None) -> str:
    """Return *path* relative to *root* for display, falling back to the full path.

    Examples::

        display_path("/work/proj/.ff/spec", "/work/proj") -> ".ff/spec"
        display_path("/elsewhere/file", "/work/proj")     -> "/elsewhere/file"
    """
    target = Path(path)
    if root is None:
        return str(target)
    try:
        return target.relative_to(Path(root)).as_posix() or "."
    except ValueError:
        return str(target)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step_header(title: str) -> None:
    """Print a one-line banner announcing an install step."""
    console.print(f"[bold cyan]>[/bold cyan] [bold]{escape(title)}[/bold]")


def print_action(marker: str, label: str, path: str) -> None:
    """Print a single indented per-item notice such as ``+ Created: AGENTS.md``."""
    console.print(f"  {marker} {label}: {escape(path)}", highlight=False, emoji=False)


def print_rule(title: str, style: str = "bright_cyan") -> None:
    """Print a full-width titled rule."""
    console.print()
    console.print(Rule(f"[bold {style}]{escape(title)}[/bold {style}]", style=style))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
