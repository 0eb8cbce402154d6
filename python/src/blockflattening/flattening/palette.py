"""Convert whole legacy chunk sections into a block state palette."""

import numpy as np

from blockflattening.block_state import BlockState
from blockflattening.flattening import default_registry
from blockflattening.flattening.registry import Registry
from blockflattening.legacy_id import METADATA_BITS, METADATA_MASK


def legacy_state_ids(blocks: np.ndarray, data: np.ndarray, add: np.ndarray | None = None) -> np.ndarray:
    """Combine a section's Blocks, Data (and optional Add) arrays into legacy state ids.

    Each array holds one unpacked value per block. Ids from the Add nibble land
    above 4095 and resolve to air on lookup.
    """
    blocks = np.asarray(blocks)
    data = np.asarray(data)
    if blocks.shape != data.shape:
        raise ValueError(f"Blocks shape {blocks.shape} does not match Data shape {data.shape}")

    block_ids = blocks.astype(np.int32) & 0xFF
    if add is not None:
        add = np.asarray(add)
        if add.shape != blocks.shape:
            raise ValueError(f"Add shape {add.shape} does not match Blocks shape {blocks.shape}")
        block_ids |= (add.astype(np.int32) & METADATA_MASK) << 8

    return (block_ids << METADATA_BITS) | (data.astype(np.int32) & METADATA_MASK)


def flatten_section(state_ids: np.ndarray, registry: Registry | None = None) -> tuple[list[BlockState], np.ndarray]:
    """Map legacy state ids to (palette, indices).

    The palette lists each distinct canonical state once, in first-seen order;
    ``indices`` has the shape of ``state_ids`` and points into the palette.
    """
    if registry is None:
        registry = default_registry()

    state_ids = np.asarray(state_ids)
    flat_ids = state_ids.ravel()

    # np.unique sorts; first-occurrence positions restore encounter order
    unique_ids, first_seen, inverse = np.unique(flat_ids, return_index=True, return_inverse=True)
    encounter_order = np.argsort(first_seen, kind="stable")

    palette: list[BlockState] = []
    palette_index: dict[BlockState, int] = {}
    id_to_palette = np.empty(len(unique_ids), dtype=np.uint16)
    for unique_pos in encounter_order:
        state = registry.lookup_state(int(unique_ids[unique_pos]))
        index = palette_index.get(state)
        if index is None:
            index = len(palette)
            palette_index[state] = index
            palette.append(state)
        id_to_palette[unique_pos] = index

    indices = id_to_palette[inverse.ravel()].reshape(state_ids.shape)
    return palette, indices
