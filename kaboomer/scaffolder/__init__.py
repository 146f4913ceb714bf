"""Kaboomer scaffolder -- materializes Kaboom game projects.

Quick usage::

    from kaboomer.config import GenerationOptions
    from kaboomer.scaffolder import ProjectGenerator, add_unit

    generator = ProjectGenerator("/tmp/my-game", GenerationOptions(template="empty"))
    project_path = await generator.generate()

    await add_unit("scene", "boss-fight", cwd=project_path)
"""

from kaboomer.scaffolder.generator import (
    ProjectExistsError,
    ProjectGenerator,
    generate_project,
)
from kaboomer.scaffolder.git import GitError, init_repository
from kaboomer.scaffolder.registry import TEMPLATE_NAMES, lookup
from kaboomer.scaffolder.templates import TemplateRenderer
from kaboomer.scaffolder.units import (
    UNIT_KINDS,
    InvalidUnitKindError,
    InvalidUnitNameError,
    NotAProjectError,
    add_unit,
)

__all__ = [
    "GitError",
    "InvalidUnitKindError",
    "InvalidUnitNameError",
    "NotAProjectError",
    "ProjectExistsError",
    "ProjectGenerator",
    "TEMPLATE_NAMES",
    "TemplateRenderer",
    "UNIT_KINDS",
    "add_unit",
    "generate_project",
    "init_repository",
    "lookup",
]
