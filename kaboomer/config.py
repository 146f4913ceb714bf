"""Kaboomer configuration.

Typed options for a single ``init`` run plus the constants shared by the
materializer and the unit adder.  Options are Pydantic v2 models so invalid
values (an unknown template name, for instance) are rejected at construction
time, before anything touches the filesystem.
"""

from __future__ import annotations

import os
import re
from typing import Any, Literal

from pydantic import BaseModel, Field

__version__ = "0.1.0"

TemplateName = Literal["empty", "basic"]

DEFAULT_TEMPLATE: TemplateName = "basic"

# npm package-name rules, optionally scoped (``@scope/pkg``).
PACKAGE_NAME_REGEX = re.compile(r"^(@[a-z0-9-~][a-z0-9-._~]*/)?[a-z0-9-~][a-z0-9-._~]*$")

FALLBACK_PACKAGE_NAME = "unnamed-game"

SOURCE_EXT = ".ts"

# Directory whose presence marks a scaffolded project.
PROJECT_MARKER_DIR = ("src", "scenes")

UNIT_DIRS: dict[str, tuple[str, ...]] = {
    "scene": ("src", "scenes"),
    "object": ("src", "objects"),
    "component": ("src", "components"),
}

GITIGNORE_ENTRIES: tuple[str, ...] = ("node_modules", "dist", "package-lock.json")

_TRUTHY = ("1", "true", "yes", "on")


class GenerationOptions(BaseModel):
    """Options recognised by ``kaboomer init``."""

    force: bool = Field(default=False, description="Remove an existing project root first")
    template: TemplateName = Field(default=DEFAULT_TEMPLATE, description="Template to expand")
    nogit: bool = Field(default=False, description="Skip .gitignore and git init")

    @classmethod
    def from_env(cls, **overrides: Any) -> "GenerationOptions":
        """Build options from environment variables, then apply *overrides*.

        Recognised variables (all optional):
            KABOOMER_TEMPLATE, KABOOMER_NOGIT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("KABOOMER_TEMPLATE"):
            kwargs["template"] = os.environ["KABOOMER_TEMPLATE"].strip()
        if os.environ.get("KABOOMER_NOGIT"):
            kwargs["nogit"] = os.environ["KABOOMER_NOGIT"].strip().lower() in _TRUTHY
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)


def package_name_for(project_name: str) -> str:
    """Return *project_name* if it is a valid npm package name, else the fallback.

    Examples::

        package_name_for("my-game")    -> "my-game"
        package_name_for("@scope/pkg") -> "@scope/pkg"
        package_name_for("My Game")    -> "unnamed-game"
    """
    if PACKAGE_NAME_REGEX.fullmatch(project_name):
        return project_name
    return FALLBACK_PACKAGE_NAME
