"""Pre-flattening (numeric id + metadata) to post-flattening (name + properties) block state migration."""

from blockflattening.block_state import AIR, AIR_NAME, BlockState, block_state
from blockflattening.flattening import default_registry, lookup_block, lookup_state, lookup_state_block
from blockflattening.legacy_id import legacy_state_id, split_legacy_state_id
from blockflattening.state_codec import StateParseError, format_state, parse_state

__all__ = [
    "AIR",
    "AIR_NAME",
    "BlockState",
    "StateParseError",
    "block_state",
    "default_registry",
    "format_state",
    "legacy_state_id",
    "lookup_block",
    "lookup_state",
    "lookup_state_block",
    "parse_state",
    "split_legacy_state_id",
]
