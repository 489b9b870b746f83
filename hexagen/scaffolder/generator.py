"""Main scaffolding orchestrator.

Takes a ``GenerationConfig`` plus the static directory and template manifests
and materializes a Go service skeleton under the configured root:

1. create the root (fatal on failure)
2. optionally purge its contents (best effort)
3. create the manifest directories, optionally with ``.gitkeep`` markers
   (best effort)
4. write ``go.mod`` and ``Makefile`` (fatal on failure)
5. render every template entry in manifest order (fatal on failure)

Best-effort failures are not raised; they are returned to the caller in
``GenerationResult.skipped``.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from pydantic import BaseModel, Field

from hexagen.config import GenerationConfig

from .errors import RootCreationError, StaticFileWriteError
from .manifest import (
    DEFAULT_DIRECTORIES,
    DEFAULT_TEMPLATES,
    GO_MOD_FILENAME,
    MAKEFILE_FILENAME,
    MARKER_FILENAME,
    DirectoryManifest,
    TemplateManifest,
)
from .templates import TemplateRenderer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Static file contents
# ---------------------------------------------------------------------------

GO_VERSION = "1.22.0"

GO_MOD_TEMPLATE = """\
module {module}

go {go_version}
"""

MAKEFILE_TEMPLATE = """\
PORT ?= {port}

run:
\tgo run ./cmd/main.go

build:
\tgo build -o bin/app ./cmd/main.go

test:
\tgo test ./...

setup:
\tgo mod tidy
"""


def render_go_mod(module_name: str) -> str:
    """Return the ``go.mod`` body for *module_name*."""
    return GO_MOD_TEMPLATE.format(module=module_name, go_version=GO_VERSION)


def render_makefile(port: str) -> str:
    """Return the ``Makefile`` body defaulting ``PORT`` to *port*."""
    return MAKEFILE_TEMPLATE.format(port=port)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class SkippedEntry(BaseModel):
    """A best-effort operation that failed and was not retried."""

    path: Path
    reason: str


class GenerationResult(BaseModel):
    """What a generation run produced."""

    root: Path
    directories: list[Path] = Field(default_factory=list)
    files: list[Path] = Field(default_factory=list)
    skipped: list[SkippedEntry] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """``True`` when no best-effort step had to skip anything."""
        return not self.skipped


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Materializes a project tree from a config and two manifests."""

    def __init__(
        self,
        config: GenerationConfig,
        directories: DirectoryManifest = DEFAULT_DIRECTORIES,
        templates: TemplateManifest = DEFAULT_TEMPLATES,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.directories = directories
        self.templates = templates
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self) -> GenerationResult:
        """Generate the complete project structure.

        Returns:
            A ``GenerationResult`` listing created directories, written files
            and skipped best-effort entries.

        Raises:
            GenerationError: On the first fatal failure; nothing after it runs.
        """
        root = self._prepare_root()
        result = GenerationResult(root=root)

        if self.config.clean:
            self._clean(root, result)

        self._create_directories(root, result)
        self._write_static_files(root, result)
        self._render_templates(root, result)

        for entry in result.skipped:
            logger.debug("skipped %s: %s", entry.path, entry.reason)
        return result

    # -- Steps -------------------------------------------------------------

    def _prepare_root(self) -> Path:
        root = self.config.root_path
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RootCreationError(
                f"cannot create project root {root}: {exc.strerror or exc}", root
            ) from exc
        if not os.access(root, os.W_OK | os.X_OK):
            raise RootCreationError(f"project root {root} is not writable", root)
        logger.debug("project root: %s", root)
        return root

    def _clean(self, root: Path, result: GenerationResult) -> None:
        """Remove every child of *root*, recording failures instead of raising."""
        try:
            children = sorted(root.iterdir())
        except OSError as exc:
            result.skipped.append(SkippedEntry(path=root, reason=str(exc)))
            return

        for child in children:
            try:
                if child.is_dir() and not child.is_symlink():
                    shutil.rmtree(child)
                else:
                    child.unlink()
            except OSError as exc:
                result.skipped.append(SkippedEntry(path=child, reason=str(exc)))

    def _create_directories(self, root: Path, result: GenerationResult) -> None:
        for rel in self.directories.paths:
            path = root / rel
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                result.skipped.append(SkippedEntry(path=path, reason=str(exc)))
                continue
            result.directories.append(path)

            if self.config.gitkeep:
                marker = path / MARKER_FILENAME
                try:
                    marker.write_bytes(b"")
                except OSError as exc:
                    result.skipped.append(SkippedEntry(path=marker, reason=str(exc)))

    def _write_static_files(self, root: Path, result: GenerationResult) -> None:
        static_files = (
            (GO_MOD_FILENAME, render_go_mod(self.config.module_name)),
            (MAKEFILE_FILENAME, render_makefile(self.config.port)),
        )
        for name, content in static_files:
            path = root / name
            try:
                with path.open("w", encoding="utf-8", newline="") as fh:
                    fh.write(content)
            except OSError as exc:
                raise StaticFileWriteError(
                    f"cannot write {name}: {exc.strerror or exc}", path
                ) from exc
            result.files.append(path)

    def _render_templates(self, root: Path, result: GenerationResult) -> None:
        context = self.config.substitution_context()
        for entry in self.templates.entries:
            path = self.renderer.render_to_file(
                entry.template, root / entry.output_path, context
            )
            result.files.append(path)


def materialize(
    config: GenerationConfig,
    directories: DirectoryManifest = DEFAULT_DIRECTORIES,
    templates: TemplateManifest = DEFAULT_TEMPLATES,
) -> GenerationResult:
    """Generate a project in one call.  See :class:`ProjectGenerator`."""
    return ProjectGenerator(config, directories, templates).generate()
