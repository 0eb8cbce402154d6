"""Legacy id -> block state lookup tables.

A Registry is built once by a RegistryBuilder from an ordered sequence of
declarations and is read-only afterwards, so it can be shared between threads
without locking.

Index structures:
    states            4096 slots, legacy state id -> canonical state
    blocks            256 slots, legacy block id -> first declared state of that block
    variant_to_id     legacy variant state -> legacy state id (last declaration wins)
    block_name_to_id  legacy block name -> legacy block id (first declaration wins)
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from blockflattening.base_config import Config
from blockflattening.block_state import AIR, AIR_NAME, BlockState
from blockflattening.flattening.declarations import Declaration, load_declarations
from blockflattening.legacy_id import BLOCK_COUNT, STATE_COUNT, is_legacy_state_id, legacy_block_id
from blockflattening.state_codec import parse_state

logger = logging.getLogger(__name__)


class RegistryConfig(Config):
    """Where to read the flattening table from. ``None`` means the packaged asset."""

    table: Path | None = None


@dataclass(frozen=True)
class Registry:
    states: tuple[BlockState, ...]
    blocks: tuple[BlockState | None, ...]
    variant_to_id: Mapping[BlockState, int]
    block_name_to_id: Mapping[str, int]
    declared_ids: frozenset[int]

    def lookup_state(self, key: BlockState | int) -> BlockState:
        """Resolve a legacy variant or a legacy state id to its canonical state.

        Variants that are not in the table come back unchanged. Ids that are out
        of range resolve to the state at slot 0 (air).
        """
        if isinstance(key, BlockState):
            state_id = self.variant_to_id.get(key)
            if state_id is None:
                return key
            return self.states[state_id]
        if is_legacy_state_id(key):
            return self.states[int(key)]
        return self.states[0]

    def lookup_block(self, name: str) -> str:
        """Map a legacy block name to the canonical name of its legacy block id."""
        block_id = self.block_name_to_id.get(name)
        if block_id is None:
            return name
        state = self.blocks[block_id]
        return name if state is None else state.name

    def lookup_state_block(self, state_id: int) -> str:
        """Name of the canonical state at ``state_id``.

        Out-of-range ids, and ids of blocks with no declarations at all, give
        the literal air name whatever the table put at slot 0.
        """
        if not is_legacy_state_id(state_id):
            return AIR_NAME
        state_id = int(state_id)
        if self.blocks[legacy_block_id(state_id)] is None:
            return AIR_NAME
        return self.states[state_id].name

    def legacy_id_of(self, variant: BlockState) -> int | None:
        return self.variant_to_id.get(variant)

    @property
    def fallback_ids(self) -> frozenset[int]:
        """State ids whose slot was filled by the fallback pass rather than a declaration."""
        return frozenset(range(STATE_COUNT)) - self.declared_ids

    @property
    def declared_block_ids(self) -> frozenset[int]:
        return frozenset(block_id for block_id, state in enumerate(self.blocks) if state is not None)


class RegistryBuilder:
    """Single-use builder: declare everything, then call build() once."""

    def __init__(self):
        self._states: list[BlockState | None] = [None] * STATE_COUNT
        self._blocks: list[BlockState | None] = [None] * BLOCK_COUNT
        self._variant_to_id: dict[BlockState, int] = {}
        self._block_name_to_id: dict[str, int] = {}
        self._built = False

    def declare(self, state_id: int, state: str, *variants: str) -> None:
        """Register ``state`` as the canonical state for ``state_id``.

        Each variant also resolves to ``state_id``. A repeated variant is
        re-pointed to the latest id, while a legacy block name keeps the first
        block id it was seen with.
        """
        if self._built:
            raise RuntimeError("RegistryBuilder.declare() called after build()")
        if not is_legacy_state_id(state_id):
            raise ValueError(f"Legacy state id {state_id} out of range [0, {STATE_COUNT - 1}]")
        state_id = int(state_id)

        canonical = parse_state(state)
        self._states[state_id] = canonical
        block_id = legacy_block_id(state_id)
        if self._blocks[block_id] is None:
            self._blocks[block_id] = canonical

        for text in variants:
            variant = parse_state(text)
            self._block_name_to_id.setdefault(variant.name, block_id)
            self._variant_to_id[variant] = state_id

    def declare_all(self, declarations: Iterable[Declaration]) -> None:
        for declaration in declarations:
            self.declare(declaration.id, declaration.state, *declaration.variants)

    def _fill_fallbacks(self) -> None:
        # Must run after every declaration, or blockwise defaults would shadow real states.
        air = self._states[0] or AIR
        for state_id, state in enumerate(self._states):
            if state is None:
                self._states[state_id] = self._blocks[legacy_block_id(state_id)] or air

    def build(self) -> Registry:
        if self._built:
            raise RuntimeError("RegistryBuilder.build() called twice")
        self._built = True

        declared_ids = frozenset(i for i, state in enumerate(self._states) if state is not None)
        self._fill_fallbacks()
        return Registry(
            states=tuple(self._states),
            blocks=tuple(self._blocks),
            variant_to_id=MappingProxyType(self._variant_to_id),
            block_name_to_id=MappingProxyType(self._block_name_to_id),
            declared_ids=declared_ids,
        )


def build_registry(config: RegistryConfig | None = None) -> Registry:
    config = config or RegistryConfig()
    declarations = load_declarations(config.table)

    builder = RegistryBuilder()
    builder.declare_all(declarations)
    registry = builder.build()

    logger.debug(
        f"Built flattening registry from {config.table or 'packaged table'}: "
        f"{len(declarations)} declarations, {len(registry.variant_to_id)} variants, "
        f"{len(registry.fallback_ids)} slots filled by fallback"
    )
    return registry
