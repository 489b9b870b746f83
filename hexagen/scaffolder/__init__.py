"""hexagen scaffolder -- materializes a Go service skeleton on disk.

Quick usage::

    from hexagen.config import GenerationConfig
    from hexagen.scaffolder import ProjectGenerator

    config = GenerationConfig(
        root="./widget",
        module_name="github.com/acme/widget",
        port="9090",
        gitkeep=True,
    )
    result = ProjectGenerator(config).generate()
"""

from hexagen.scaffolder.errors import (
    GenerationError,
    RenderError,
    RootCreationError,
    StaticFileWriteError,
    TemplateNotFoundError,
    TemplateSyntaxError,
)
from hexagen.scaffolder.generator import (
    GenerationResult,
    ProjectGenerator,
    SkippedEntry,
    materialize,
)
from hexagen.scaffolder.manifest import (
    DEFAULT_DIRECTORIES,
    DEFAULT_TEMPLATES,
    DirectoryManifest,
    TemplateEntry,
    TemplateManifest,
)
from hexagen.scaffolder.templates import TemplateRenderer

__all__ = [
    "DEFAULT_DIRECTORIES",
    "DEFAULT_TEMPLATES",
    "DirectoryManifest",
    "GenerationError",
    "GenerationResult",
    "ProjectGenerator",
    "RenderError",
    "RootCreationError",
    "SkippedEntry",
    "StaticFileWriteError",
    "TemplateEntry",
    "TemplateManifest",
    "TemplateNotFoundError",
    "TemplateRenderer",
    "TemplateSyntaxError",
    "materialize",
]
