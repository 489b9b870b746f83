"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``hexagen/scaffolder/templates/`` directory and renders them with the flat
``{"MODULE": ..., "PORT": ...}`` substitution context.

Placeholders are plain Jinja2 expressions (``{{ MODULE }}``).  Only
expressions rooted at a known placeholder name are evaluated; every other
``{{ ... }}`` is copied to the output byte for byte, so ``{{DATABASE|upper}}``
renders as ``{{DATABASE|upper}}``.  Malformed template syntax is still an
error.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import jinja2
from jinja2.ext import Extension

from hexagen.config import PLACEHOLDER_NAMES

from .errors import RenderError, TemplateNotFoundError, TemplateSyntaxError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Unknown placeholder pass-through
# ---------------------------------------------------------------------------

# A complete ``{{ ... }}`` that does not contain another ``{{``.
_EXPRESSION_RE = re.compile(
    r"\{\{-?\s*(?P<name>[A-Za-z_][A-Za-z0-9_]*)?(?:(?!\{\{).)*?\}\}",
    re.DOTALL,
)


class LiteralUnknownPlaceholders(Extension):
    """Wrap expressions not rooted at a known name in ``{% raw %}`` blocks.

    Runs as a source preprocessor, so the wrapped text never reaches the
    Jinja2 parser.  The known names live on ``environment.placeholder_names``.
    """

    def __init__(self, environment: jinja2.Environment) -> None:
        super().__init__(environment)
        environment.extend(placeholder_names=frozenset(PLACEHOLDER_NAMES))

    def preprocess(
        self, source: str, name: str | None, filename: str | None = None
    ) -> str:
        known = self.environment.placeholder_names  # type: ignore[attr-defined]

        def _wrap(match: re.Match[str]) -> str:
            if match.group("name") in known:
                return match.group(0)
            return "{% raw %}" + match.group(0) + "{% endraw %}"

        return _EXPRESSION_RE.sub(_wrap, source)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders bundled Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Templates are rendered with a context dictionary that
    holds the module path and port of the project being generated.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        placeholder_names: Iterable[str] = PLACEHOLDER_NAMES,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
            extensions=[LiteralUnknownPlaceholders],
        )
        self.env.placeholder_names = frozenset(placeholder_names)  # type: ignore[attr-defined]

    # -- Loading -----------------------------------------------------------

    def get_template(self, template_name: str) -> jinja2.Template:
        """Load and compile *template_name*, translating Jinja2 errors.

        Raises:
            TemplateNotFoundError: The template store has no such entry.
            TemplateSyntaxError: The template does not compile.
        """
        try:
            return self.env.get_template(template_name)
        except jinja2.TemplateNotFound as exc:
            raise TemplateNotFoundError(
                f"template not found: {template_name}", template_name
            ) from exc
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateSyntaxError(
                f"template {template_name} line {exc.lineno}: {exc.message}",
                template_name,
            ) from exc

    # -- Single template rendering -----------------------------------------

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_name: Path relative to the template directory (e.g.
                ``"app.go.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.get_template(template_name)
        try:
            return template.render(**context)
        except jinja2.TemplateError as exc:
            raise RenderError(f"failed to render {template_name}: {exc}") from exc

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        try:
            template = self.env.from_string(template_string)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateSyntaxError(
                f"inline template line {exc.lineno}: {exc.message}"
            ) from exc
        try:
            return template.render(**context)
        except jinja2.TemplateError as exc:
            raise RenderError(f"failed to render inline template: {exc}") from exc

    # -- File-based rendering ----------------------------------------------

    def render_to_file(
        self,
        template_name: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and stream the result into *output_path*.

        The template is loaded and compiled before anything touches the
        output.  Parent directories are created automatically and an existing
        file is truncated.  Returns the output path.
        """
        template = self.get_template(template_name)
        out = Path(output_path)
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            with out.open("w", encoding="utf-8", newline="") as fh:
                template.stream(**context).dump(fh)
        except (OSError, jinja2.TemplateError) as exc:
            raise RenderError(
                f"failed to render {template_name} to {out}: {exc}", out
            ) from exc
        return out

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template names."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in self.template_dir.rglob("*.j2")
        )
