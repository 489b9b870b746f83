"""Configuration resolution.

Merges command-line values, ``HEXAGEN_*`` environment defaults and, in
interactive mode, typed answers into one :class:`GenerationConfig`.

Precedence (highest first): interactive answer, command-line flag,
environment variable, built-in default.  An empty module name after merging
falls back to ``service.com/service``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TextIO

from rich.console import Console
from rich.prompt import Prompt

from hexagen.config import DEFAULT_MODULE, GenerationConfig


def resolve_config(
    root: str | Path | None = None,
    module_name: str | None = None,
    port: str | None = None,
    gitkeep: bool = False,
    clean: bool = False,
    *,
    interactive: bool = False,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> GenerationConfig:
    """Build the configuration for one run.

    Args:
        root: ``-r`` value, or ``None`` when the flag was not given.
        module_name: ``-m`` value, or ``None``.
        port: ``-p`` value, or ``None``.
        gitkeep: ``-g`` flag.
        clean: ``-c`` flag.
        interactive: Ask for every field, using the merged values as defaults.
        console: Console the prompts are printed on.
        stream: Where answers are read from (defaults to stdin).
    """
    base = GenerationConfig.from_env(
        root=Path(root) if root is not None else None,
        module_name=module_name,
        port=port,
    )
    values: dict[str, Any] = base.model_dump()
    values["gitkeep"] = gitkeep
    values["clean"] = clean

    if interactive:
        values.update(_prompt_values(values, console or Console(), stream))

    if not values["module_name"]:
        values["module_name"] = DEFAULT_MODULE

    return GenerationConfig(**values)


# ---------------------------------------------------------------------------
# Interactive prompts
# ---------------------------------------------------------------------------


def _prompt_values(
    current: dict[str, Any], console: Console, stream: TextIO | None
) -> dict[str, Any]:
    """Ask for each field in turn; a blank answer keeps the current value."""
    answers: dict[str, Any] = {}

    root = _ask(console, stream, f"Project directory (default: {current['root']})")
    if root:
        answers["root"] = Path(root)

    module_name = _ask(console, stream, "Go module name (github.com/user/project)")
    if module_name:
        answers["module_name"] = module_name

    port = _ask(console, stream, f"Server port (default: {current['port']})")
    if port:
        answers["port"] = port

    if _ask(console, stream, "Add .gitkeep files? (y/N)").lower() == "y":
        answers["gitkeep"] = True

    if _ask(console, stream, "Clean target directory first? (y/N)").lower() == "y":
        answers["clean"] = True

    return answers


def _ask(console: Console, stream: TextIO | None, question: str) -> str:
    """Read one stripped answer; end of input counts as a blank answer."""
    try:
        answer = Prompt.ask(
            question, console=console, default="", show_default=False, stream=stream
        )
    except EOFError:
        return ""
    return answer.strip()
