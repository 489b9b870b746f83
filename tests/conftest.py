"""Shared pytest fixtures for the hexagen test suite.

Provides reusable fixtures for:
- Temporary project roots
- Ready-made generation configs
- Snapshotting a generated tree for byte-level comparison
- A scratch template directory for renderer tests
"""

from __future__ import annotations

from pathlib import Path

import pytest

from hexagen.config import GenerationConfig


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Not-yet-existing root directory for a generated project."""
    return tmp_path / "widget"


@pytest.fixture(autouse=True)
def _clear_hexagen_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep HEXAGEN_* variables from the developer shell out of the tests."""
    for name in ("HEXAGEN_ROOT", "HEXAGEN_MODULE", "HEXAGEN_PORT", "HEXAGEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------


@pytest.fixture
def widget_config(project_root: Path) -> GenerationConfig:
    """Config for github.com/acme/widget on port 9090."""
    return GenerationConfig(
        root=project_root,
        module_name="github.com/acme/widget",
        port="9090",
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def snapshot_tree(root: Path) -> dict[str, bytes | None]:
    """Map every path under *root* to its bytes (``None`` for directories)."""
    return {
        p.relative_to(root).as_posix(): (None if p.is_dir() else p.read_bytes())
        for p in sorted(root.rglob("*"))
    }


@pytest.fixture
def snapshot():
    """Expose :func:`snapshot_tree` to tests."""
    return snapshot_tree


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Scratch template store with a few small templates."""
    store = tmp_path / "templates"
    store.mkdir()
    (store / "greeting.txt.j2").write_text(
        "module {{ MODULE }}\nport={{ PORT }}\n", encoding="utf-8"
    )
    (store / "unknown.txt.j2").write_text(
        "db={{ DATABASE }} port={{ PORT }}\n", encoding="utf-8"
    )
    (store / "broken.txt.j2").write_text("value={{ MODULE \n", encoding="utf-8")
    (store / "layout.txt.j2").write_text(
        "\tPORT ?= {{ PORT }}  \n\n    keep   spacing\n\n", encoding="utf-8"
    )
    return store
