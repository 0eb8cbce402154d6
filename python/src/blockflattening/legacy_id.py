"""Pre-flattening numeric ids: ``(block_id << 4) | metadata``."""

from numbers import Integral

METADATA_BITS = 4
METADATA_MASK = (1 << METADATA_BITS) - 1

BLOCK_COUNT = 256
STATE_COUNT = BLOCK_COUNT << METADATA_BITS  # 4096


def legacy_state_id(block_id: int, metadata: int = 0) -> int:
    """Compose a legacy state id from an 8-bit block id and a 4-bit metadata value."""
    if not 0 <= block_id < BLOCK_COUNT:
        raise ValueError(f"Legacy block id {block_id} out of range [0, {BLOCK_COUNT - 1}]")
    if not 0 <= metadata <= METADATA_MASK:
        raise ValueError(f"Legacy metadata {metadata} out of range [0, {METADATA_MASK}]")
    return (block_id << METADATA_BITS) | metadata


def legacy_block_id(state_id: int) -> int:
    return state_id >> METADATA_BITS


def split_legacy_state_id(state_id: int) -> tuple[int, int]:
    if not is_legacy_state_id(state_id):
        raise ValueError(f"Legacy state id {state_id} out of range [0, {STATE_COUNT - 1}]")
    return state_id >> METADATA_BITS, state_id & METADATA_MASK


def is_legacy_state_id(value: object) -> bool:
    # numpy integer scalars register as Integral; bool is excluded
    return isinstance(value, Integral) and not isinstance(value, bool) and 0 <= value < STATE_COUNT
