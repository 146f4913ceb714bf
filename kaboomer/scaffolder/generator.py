"""Main scaffolding orchestrator.

Takes a project root and ``GenerationOptions`` and materializes a Kaboom game
project: the chosen template's tree, the fixed auxiliary files every project
gets (manifest, HTML entry, build and formatting config, package descriptor)
and, unless disabled, a git repository.
"""

from __future__ import annotations

import asyncio
import os
import shutil
from pathlib import Path
from typing import Any

from rich.markup import escape

from ..config import (
    GITIGNORE_ENTRIES,
    GenerationOptions,
    __version__,
    package_name_for,
)
from ..utils import (
    dump_json,
    ensure_dir,
    print_created,
    print_info,
    print_warning,
    write_file,
)
from .git import init_repository
from .registry import lookup
from .templates import TemplateRenderer


# Directories every project gets, whatever the template.
FIXED_DIRS: tuple[str, ...] = ("public", "src")

MANIFEST_FILE = "kaboomer.json"


class ProjectExistsError(Exception):
    """Raised when the project root already exists and ``force`` is off."""

    def __init__(self, root: Path) -> None:
        self.root = root
        super().__init__(
            f"Project root {root} already exists, run with --force to overwrite."
        )


class ProjectGenerator:
    """Materializes one project root.

    The steps run strictly in order and each write is awaited before the next
    one starts:

    1. collision check (refuse, or wipe the root when ``force`` is set),
    2. fixed directories,
    3. template entries from the registry,
    4. auxiliary files,
    5. ``.gitignore`` and ``git init`` unless ``nogit`` is set.

    Nothing is rolled back: a failure after step 1 leaves whatever was
    already written on disk.
    """

    def __init__(
        self,
        root: str | Path,
        options: GenerationOptions | None = None,
        name: str | None = None,
    ) -> None:
        self.root = Path(os.path.normpath(Path(root).absolute()))
        self.options = options or GenerationOptions()
        self.name = name if name is not None else self.root.name
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self) -> Path:
        """Generate the project and return its root."""
        await self._check_collision()

        print_info(f"scaffolding inside {escape(self.name)}")

        await self._create_directory_structure()
        await self._expand_template()
        await self._write_auxiliary_files()

        if not self.options.nogit:
            await self._write(".gitignore", "\n".join(GITIGNORE_ENTRIES) + "\n")
            await init_repository(self.root)

        return self.root

    @property
    def package_name(self) -> str:
        return package_name_for(self.name)

    # -- Steps -------------------------------------------------------------

    async def _check_collision(self) -> None:
        exists = await asyncio.to_thread(os.path.lexists, self.root)
        if not exists:
            return
        if not self.options.force:
            raise ProjectExistsError(self.root)
        print_warning(f"removing existing {escape(str(self.root))}")
        await asyncio.to_thread(_remove_tree, self.root)

    async def _create_directory_structure(self) -> None:
        """Create the root and the directories every project has."""
        await asyncio.to_thread(ensure_dir, self.root)
        for d in FIXED_DIRS:
            await asyncio.to_thread(ensure_dir, self._resolve(d))

    async def _expand_template(self) -> None:
        """Write every entry of the selected template."""
        for rel, payload in lookup(self.options.template).items():
            if payload is None:
                await asyncio.to_thread(ensure_dir, self._resolve(rel))
            elif isinstance(payload, str):
                await self._write(rel, payload)
            else:
                await self._write(rel, dump_json(payload))

    async def _write_auxiliary_files(self) -> None:
        for rel, content in self.auxiliary_files().items():
            await self._write(rel, content)

    # -- Auxiliary file contents -------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the project name and options."""
        return {
            "project_name": self.name,
            "package_name": self.package_name,
            "template": self.options.template,
        }

    def auxiliary_files(self) -> dict[str, str]:
        """Return the fixed files as ``{relative path: content}``.

        The content depends only on the project name and the options, never
        on the template's entries.
        """
        ctx = self._build_context()
        return {
            MANIFEST_FILE: dump_json({
                "name": self.name,
                "template": self.options.template,
                "kaboomer": __version__,
                "entry": "src/main.ts",
                "scenes": "src/scenes",
                "objects": "src/objects",
                "components": "src/components",
            }),
            "index.html": self.renderer.render("project/index.html.j2", ctx),
            "src/main.ts": self.renderer.render("project/src/main.ts.j2", ctx),
            "src/constants.ts": self.renderer.render("project/src/constants.ts.j2", ctx),
            ".prettierrc": dump_json({
                "tabWidth": 4,
                "printWidth": 120,
            }),
            "tsconfig.json": dump_json({
                "compilerOptions": {
                    "strict": True,
                    "target": "ESNext",
                    "lib": ["DOM", "ESNext"],
                    "module": "ESNext",
                    "moduleResolution": "node",
                    "resolveJsonModule": True,
                    "typeRoots": ["./node_modules"],
                    "types": ["kaboom/dist/global.d.ts", "vite/client"],
                },
                "include": ["src"],
            }),
            "vite.config.ts": self.renderer.render("project/vite.config.ts.j2", ctx),
            "package.json": dump_json({
                "name": self.package_name,
                "version": "0.0.1",
                "description": "A project scaffolded by Kaboomer.",
                "private": True,
                "type": "module",
                "scripts": {
                    "dev": "vite",
                    "build": "vite build",
                    "preview": "vite preview",
                    "format": "prettier -w src/**",
                },
                "dependencies": {"kaboom": "latest"},
                "devDependencies": {
                    "prettier": "latest",
                    "typescript": "latest",
                    "vite": "latest",
                },
                "keywords": [],
                "author": "",
                "license": "ISC",
            }),
        }

    # -- Helpers -----------------------------------------------------------

    def _resolve(self, rel: str) -> Path:
        """Resolve *rel* against the root, refusing anything outside it."""
        path = Path(os.path.normpath(self.root / rel))
        if path != self.root and self.root not in path.parents:
            raise ValueError(f"Path {rel!r} escapes project root {self.root}")
        return path

    async def _write(self, rel: str, content: str) -> Path:
        path = self._resolve(rel)
        print_created(path.relative_to(self.root).as_posix())
        await asyncio.to_thread(write_file, path, content)
        return path


async def generate_project(
    root: str | Path,
    options: GenerationOptions | None = None,
    name: str | None = None,
) -> Path:
    """Convenience wrapper around :meth:`ProjectGenerator.generate`."""
    return await ProjectGenerator(root, options, name=name).generate()


def _remove_tree(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
