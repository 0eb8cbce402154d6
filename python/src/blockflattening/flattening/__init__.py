"""The legacy block id flattening table.

Most callers only need the module-level lookups, which use a registry built
from the packaged table on first use:

    lookup_state(32)                                    # grass_block[snowy=false]
    lookup_state(parse_state("{Name:'minecraft:grass'}"))
    lookup_block("minecraft:grass")                     # "minecraft:grass_block"
    lookup_state_block(16)                              # "minecraft:stone"
"""

import threading

from blockflattening.block_state import BlockState
from blockflattening.flattening.declarations import Declaration, load_declarations
from blockflattening.flattening.registry import Registry, RegistryBuilder, RegistryConfig, build_registry

__all__ = [
    "Declaration",
    "Registry",
    "RegistryBuilder",
    "RegistryConfig",
    "build_registry",
    "default_registry",
    "load_declarations",
    "lookup_block",
    "lookup_state",
    "lookup_state_block",
]

_default_registry: Registry | None = None
_default_registry_lock = threading.Lock()


def default_registry() -> Registry:
    """Return the process-wide registry, building it from the packaged table once."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = build_registry()
    return _default_registry


def lookup_state(key: BlockState | int) -> BlockState:
    return default_registry().lookup_state(key)


def lookup_block(name: str) -> str:
    return default_registry().lookup_block(name)


def lookup_state_block(state_id: int) -> str:
    return default_registry().lookup_state_block(state_id)
