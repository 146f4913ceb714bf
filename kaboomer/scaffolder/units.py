"""Adding single scenes, objects and components to an existing project."""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..config import PROJECT_MARKER_DIR, SOURCE_EXT, UNIT_DIRS
from ..utils import print_created
from .templates import TemplateRenderer

UNIT_KINDS: tuple[str, ...] = tuple(UNIT_DIRS)


class NotAProjectError(Exception):
    """Raised when ``add`` runs outside a scaffolded project."""

    def __init__(self, cwd: Path) -> None:
        self.cwd = cwd
        marker = "/".join(PROJECT_MARKER_DIR)
        super().__init__(
            f"No {marker} directory in {cwd}, run this inside a Kaboomer project."
        )


class InvalidUnitKindError(Exception):
    """Raised for a unit kind other than scene, object or component."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(
            f"Invalid type {kind!r}, expected one of: {', '.join(UNIT_KINDS)}."
        )


class InvalidUnitNameError(Exception):
    """Raised for a unit name that is empty or contains a path separator."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid name {name!r}, use a plain file name such as boss-fight.")


def is_project_dir(path: str | Path) -> bool:
    """Return ``True`` if *path* looks like a scaffolded project."""
    return Path(path).joinpath(*PROJECT_MARKER_DIR).is_dir()


def unit_path(root: str | Path, kind: str, name: str) -> Path:
    """Return where a unit of *kind* called *name* lives inside *root*."""
    return Path(root).joinpath(*UNIT_DIRS[kind], f"{name}{SOURCE_EXT}")


async def add_unit(
    kind: str,
    name: str,
    cwd: str | Path | None = None,
    renderer: TemplateRenderer | None = None,
) -> Path:
    """Write one scene/object/component stub into the project at *cwd*.

    The stub's default export is named after *name* with every ``-x``
    turned into ``X`` (``boss-fight`` -> ``bossFight``) and any character not
    allowed in an identifier replaced by ``_``.  An existing file
    at the target path is overwritten.

    Raises:
        InvalidUnitKindError: *kind* is not a known unit kind.
        InvalidUnitNameError: *name* is empty or not a plain file name.
        NotAProjectError: *cwd* has no scenes directory.
    """
    if kind not in UNIT_DIRS:
        raise InvalidUnitKindError(kind)
    if not name or name in (".", "..") or Path(name).name != name or "\\" in name:
        raise InvalidUnitNameError(name)

    root = Path(cwd) if cwd is not None else Path.cwd()
    if not await asyncio.to_thread(is_project_dir, root):
        raise NotAProjectError(root)

    renderer = renderer or TemplateRenderer()
    path = unit_path(root, kind, name)
    await renderer.render_to_file(f"units/{kind}.ts.j2", path, {"name": name})
    print_created(path.relative_to(root).as_posix())
    return path
