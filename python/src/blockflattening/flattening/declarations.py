"""Flattening table declarations and the packaged data asset they are read from.

Each declaration ties one legacy state id to its canonical descriptor and to
the legacy descriptors that should resolve to that id:

    {"id": 32,
     "state": "{Name:'minecraft:grass_block',Properties:{snowy:'false'}}",
     "variants": ["{Name:'minecraft:grass',Properties:{snowy:'false'}}", ...]}

The asset is a JSON array of such objects, in declaration order.
"""

import json
from importlib import resources
from pathlib import Path

from pydantic import Field, TypeAdapter

from blockflattening.base_config import Config
from blockflattening.legacy_id import STATE_COUNT

DEFAULT_TABLE = "legacy_block_states.json"


class Declaration(Config):
    id: int = Field(ge=0, lt=STATE_COUNT, description="Legacy state id, (block_id << 4) | metadata")
    state: str = Field(description="Canonical post-flattening descriptor")
    variants: list[str] = Field(default_factory=list, description="Legacy descriptors resolving to this id")


_DECLARATIONS = TypeAdapter(list[Declaration])


def read_table_text(path: Path | str | None = None) -> str:
    if path is None:
        return resources.files("blockflattening.data").joinpath(DEFAULT_TABLE).read_text(encoding="utf-8")
    return Path(path).read_text(encoding="utf-8")


def load_declarations(path: Path | str | None = None) -> list[Declaration]:
    """Load declarations from the packaged table, or from a JSON file at ``path``."""
    return _DECLARATIONS.validate_python(json.loads(read_table_text(path)))
