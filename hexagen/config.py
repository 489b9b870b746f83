"""hexagen configuration.

A single immutable record describes one scaffolding run.  It is built by the
resolver from command-line flags, ``HEXAGEN_*`` environment defaults and the
interactive prompts, then handed to the materializer and discarded.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_ROOT = "."
DEFAULT_MODULE = "service.com/service"
DEFAULT_PORT = "8080"

# Names a template may substitute; anything else in {{ }} is left as text.
PLACEHOLDER_NAMES = ("MODULE", "PORT")


class GenerationConfig(BaseModel):
    """Everything the materializer needs to know about one run."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(default=Path(DEFAULT_ROOT), description="Target directory")
    module_name: str = Field(default=DEFAULT_MODULE, description="Go module path")
    port: str = Field(default=DEFAULT_PORT, description="Default server port")
    gitkeep: bool = Field(default=False, description="Write .gitkeep markers")
    clean: bool = Field(default=False, description="Purge the root before generating")

    @property
    def root_path(self) -> Path:
        """Absolute form of :attr:`root`."""
        return self.root.expanduser().resolve()

    def substitution_context(self) -> dict[str, str]:
        """Return the placeholder mapping used by every rendered template."""
        return {
            "MODULE": self.module_name,
            "PORT": self.port,
        }

    @classmethod
    def from_env(cls, **overrides: Any) -> "GenerationConfig":
        """Build a config from environment variables.

        Recognised variables (all optional):
            HEXAGEN_ROOT, HEXAGEN_MODULE, HEXAGEN_PORT.

        Keyword *overrides* whose value is not ``None`` take precedence over
        the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("HEXAGEN_ROOT"):
            kwargs["root"] = Path(os.environ["HEXAGEN_ROOT"])
        if os.environ.get("HEXAGEN_MODULE"):
            kwargs["module_name"] = os.environ["HEXAGEN_MODULE"]
        if os.environ.get("HEXAGEN_PORT"):
            kwargs["port"] = os.environ["HEXAGEN_PORT"]

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
