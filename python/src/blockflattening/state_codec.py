"""Textual block state descriptors.

Descriptors are SNBT compounds written with single quotes, as in the
flattening table:

    {Name:'minecraft:stone'}
    {Name:'minecraft:grass_block',Properties:{snowy:'false'}}

Parsing goes through nbtlib; ``from_nbt``/``to_nbt`` convert between nbtlib
compounds and BlockState for callers that already hold parsed NBT.
"""

import logging
from collections.abc import Mapping

from nbtlib import Compound, String, parse_nbt

from blockflattening.block_state import BlockState

logger = logging.getLogger(__name__)


class StateParseError(ValueError):
    """A block state descriptor could not be parsed."""


def parse_state(text: str) -> BlockState:
    """Parse a single-quoted descriptor into a BlockState.

    Only meant for trusted literal input. Failures are logged and raised as
    StateParseError; there is no recovery path.
    """
    try:
        tag = parse_nbt(text.replace("'", '"'))
        return from_nbt(tag)
    except ValueError as e:
        logger.error(f"Failed to parse block state descriptor: {text}")
        raise StateParseError(f"Invalid block state descriptor {text!r}: {e}") from e


def _plain_str(value: object) -> str:
    # nbtlib tags stringify to SNBT; go through the builtin types for the bare value
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, int):
        return str(int(value))
    return str(value)


def from_nbt(tag: Mapping) -> BlockState:
    if not isinstance(tag, Mapping):
        raise ValueError(f"Block state must be a compound, got {type(tag).__name__}")
    name = tag.get("Name")
    if not isinstance(name, str) or not name:
        raise ValueError("Block state is missing a Name")
    properties = tag.get("Properties", {})
    if not isinstance(properties, Mapping):
        raise ValueError(f"Block state Properties must be a compound, got {type(properties).__name__}")
    return BlockState(
        name=_plain_str(name),
        properties={_plain_str(key): _plain_str(value) for key, value in properties.items()},
    )


def to_nbt(state: BlockState) -> Compound:
    tag = Compound({"Name": String(state.name)})
    if state.properties:
        tag["Properties"] = Compound({key: String(value) for key, value in state.properties.items()})
    return tag


def format_state(state: BlockState) -> str:
    """Serialize a BlockState back to the single-quoted descriptor form."""
    if not state.properties:
        return f"{{Name:'{state.name}'}}"
    properties = ",".join(f"{key}:'{value}'" for key, value in state.properties.items())
    return f"{{Name:'{state.name}',Properties:{{{properties}}}}}"
