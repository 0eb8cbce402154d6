"""Block state value type: a namespaced block name plus a property map."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from blockflattening.base_config import Config

AIR_NAME = "minecraft:air"


class BlockState(Config):
    """A post-flattening block state, e.g. minecraft:grass_block[snowy=false].

    Used both for canonical states and for the legacy variant encodings that
    resolve to them. Equality and hashing are structural; property order is
    irrelevant.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    properties: dict[str, str] = Field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.name, frozenset(self.properties.items())))

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.properties.get(key, default)


def block_state(name: str, **properties: str) -> BlockState:
    return BlockState(name=name, properties=properties)


AIR = BlockState(name=AIR_NAME)
