"""Static template registry.

Each template maps a POSIX relative path to its payload:

- ``None``: create the directory only,
- ``str``: literal file content,
- ``dict``/``list``: structured data, serialised to JSON on write.

The table is built once at import time and exposed through read-only
mappings; nothing mutates it afterwards.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, get_args

from ..config import TemplateName

TemplateEntries = Mapping[str, Any]


# ---------------------------------------------------------------------------
# Shared source stubs
# ---------------------------------------------------------------------------

_GREET_COMPONENT = """\
export function addGreetText(name: string = "World") {
    return add([
        text(`Hello, ${name}!`),
        pos(width() / 2, height() / 2),
        anchor("center"),
    ]);
}
"""

_PLAYER_OBJECT = """\
import sprites from "../../assets/sprites.json";

loadSprite("bean", sprites.bean);

export default function player(x: number = 0, y: number = 0) {
    const SPEED = 320;

    const obj = add([
        sprite("bean"),
        pos(x, y),
        area(),
        "player",
    ]);

    onKeyDown("left", () => obj.move(-SPEED, 0));
    onKeyDown("right", () => obj.move(SPEED, 0));
    onKeyDown("up", () => obj.move(0, -SPEED));
    onKeyDown("down", () => obj.move(0, SPEED));

    return obj;
}
"""

_EMPTY_MAIN_SCENE = """\
export default function main() {
    console.log("SCENE main");
}
"""

_BASIC_MAIN_SCENE = """\
import { addGreetText } from "../components/greet";
import player from "../objects/player";

export default function main() {
    console.log("SCENE main");
    addGreetText("Kaboomer");
    player(width() / 2, height() / 2 + 64);

    onClick(() => {
        go("other");
    });
}
"""

_BASIC_OTHER_SCENE = """\
import { addGreetText } from "../components/greet";

export default function other() {
    console.log("SCENE other");
    addGreetText("Other");

    onClick(() => {
        go("main");
    });
}
"""

_SPRITES = MappingProxyType({
    "bean": "https://kaboomjs.com/sprites/bean.png",
})


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_TEMPLATES: dict[str, TemplateEntries] = {
    "empty": MappingProxyType({
        "assets": None,
        "src/components": None,
        "src/objects": None,
        "src/scenes/main.ts": _EMPTY_MAIN_SCENE,
    }),
    "basic": MappingProxyType({
        "assets": None,
        "assets/sprites.json": _SPRITES,
        "src/components/greet.ts": _GREET_COMPONENT,
        "src/objects/player.ts": _PLAYER_OBJECT,
        "src/scenes/main.ts": _BASIC_MAIN_SCENE,
        "src/scenes/other.ts": _BASIC_OTHER_SCENE,
    }),
}

TEMPLATE_NAMES: tuple[str, ...] = get_args(TemplateName)


def lookup(name: TemplateName) -> TemplateEntries:
    """Return the ordered entry set for template *name*.

    The name is expected to come from ``TEMPLATE_NAMES`` (the CLI and
    ``GenerationOptions`` both enforce that), so there is no error path.
    """
    return _TEMPLATES[name]
