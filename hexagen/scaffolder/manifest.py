"""Static manifests describing the generated project layout.

The directory and template manifests are fixed data, validated once at import
time.  Paths are POSIX-style and relative to the project root.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, field_validator


def _check_relative(value: str) -> str:
    """Reject paths that are empty, absolute or climb out of the root."""
    path = PurePosixPath(value)
    if not value or value in (".", "/"):
        raise ValueError("path must not be empty")
    if path.is_absolute():
        raise ValueError(f"path must be relative: {value!r}")
    if ".." in path.parts:
        raise ValueError(f"path must not escape the project root: {value!r}")
    return path.as_posix()


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class DirectoryManifest(BaseModel):
    """Ordered set of directories to create under the root."""

    model_config = ConfigDict(frozen=True)

    paths: tuple[str, ...]

    @field_validator("paths")
    @classmethod
    def _validate_paths(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        checked = tuple(_check_relative(p) for p in value)
        if len(set(checked)) != len(checked):
            raise ValueError("directory manifest contains duplicate paths")
        return checked


class TemplateEntry(BaseModel):
    """A single rendered file: where it goes and which template produces it."""

    model_config = ConfigDict(frozen=True)

    output_path: str
    template: str

    @field_validator("output_path")
    @classmethod
    def _validate_output(cls, value: str) -> str:
        return _check_relative(value)


class TemplateManifest(BaseModel):
    """Ordered set of template entries to render."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[TemplateEntry, ...]

    @field_validator("entries")
    @classmethod
    def _validate_entries(
        cls, value: tuple[TemplateEntry, ...]
    ) -> tuple[TemplateEntry, ...]:
        outputs = [e.output_path for e in value]
        if len(set(outputs)) != len(outputs):
            raise ValueError("template manifest writes the same output twice")
        return value

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, str]]) -> "TemplateManifest":
        """Build a manifest from ``(output_path, template)`` tuples."""
        return cls(
            entries=tuple(TemplateEntry(output_path=o, template=t) for o, t in pairs)
        )


# ---------------------------------------------------------------------------
# Default layout
# ---------------------------------------------------------------------------

DEFAULT_DIRECTORIES = DirectoryManifest(
    paths=(
        "cmd",
        "commons/constants",
        "commons/error",
        "commons/utils",
        "config/constants",
        "config/env",
        "config/init",
        "recievers",
        "services/serviceName/service_init",
        "services/serviceName/data",
        "services/serviceName/internal",
        "services/serviceName/routes",
        "services/serviceName/utils",
    )
)

DEFAULT_TEMPLATES = TemplateManifest.from_pairs(
    [
        ("cmd/main.go", "app.go.j2"),
        ("services/serviceName/routes/router.go", "router.go.j2"),
        ("config/init/serverConfig.go", "serverConfig.go.j2"),
        ("commons/utils/logger.go", "logger.go.j2"),
    ]
)

GO_MOD_FILENAME = "go.mod"
MAKEFILE_FILENAME = "Makefile"
MARKER_FILENAME = ".gitkeep"
