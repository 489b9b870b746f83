"""Exceptions raised by the scaffolder.

Every fatal condition surfaces as a :class:`GenerationError` subclass with the
underlying ``OSError`` or Jinja2 exception chained as ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Raised when project generation cannot continue."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class RootCreationError(GenerationError):
    """The target root directory could not be created."""


class TemplateNotFoundError(GenerationError):
    """A manifest entry names a template missing from the template store."""


class TemplateSyntaxError(GenerationError):
    """A bundled template failed to compile."""


class RenderError(GenerationError):
    """Rendering or writing a template output failed."""


class StaticFileWriteError(GenerationError):
    """``go.mod`` or ``Makefile`` could not be written."""
