"""Shared utility functions for hexagen.

Provides blocking external command execution, plugin lookup, logging setup
and Rich-based console output.  Nothing in here touches the generated tree;
the scaffolder core never shells out.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

PLUGIN_PREFIX = "hexagen-"

# ---------------------------------------------------------------------------
# External command execution
# ---------------------------------------------------------------------------


def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int | None = 300,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run an external command and wait for it.

    Args:
        cmd: Program and arguments.  Never passed through a shell.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits forever.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.  A missing executable yields
        return code 127, a timeout yields -1.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    try:
        completed = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            env=merged_env,
            capture_output=capture,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError:
        return (127, "", f"Command not found: {cmd[0]}")
    except subprocess.TimeoutExpired:
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (completed.stdout or "").strip() if capture else ""
    stderr_str = (completed.stderr or "").strip() if capture else ""
    return (completed.returncode, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Plugins
# ---------------------------------------------------------------------------


def find_plugin(name: str) -> str | None:
    """Return the path of the ``hexagen-<name>`` executable on ``PATH``."""
    if not name or name.startswith("-") or os.sep in name:
        return None
    return shutil.which(PLUGIN_PREFIX + name)


def run_plugin(executable: str, args: list[str]) -> int:
    """Run a plugin with inherited stdio and return its exit status."""
    returncode, _, _ = run_command([executable, *args], timeout=None, capture=False)
    return returncode


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once for the whole process.

    Levels resolve as: *level* argument, then ``HEXAGEN_LOG_LEVEL``, then
    WARNING.  Records go to stderr through a ``RichHandler``.
    """
    name = level or os.environ.get("HEXAGEN_LOG_LEVEL") or "WARNING"
    numeric = getattr(logging, name.upper(), None)
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary(rows: dict[str, str], title: str) -> None:
    """Print *rows* as a right-aligned label column beside its values."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold cyan", justify="right", no_wrap=True)
    grid.add_column(overflow="fold")
    for label, value in rows.items():
        grid.add_row(escape(label), escape(value))

    console.print(f"[bold]{escape(title)}[/bold]")
    console.print(grid)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]", highlight=False, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(f"[bold yellow]{escape(message)}[/bold yellow]", highlight=False, soft_wrap=True)
