"""Block catalog loaded from TOML.

The catalog holds the static metadata of every block type and maps state ids
back to their block type. A catalog file has one table per block::

    [blocks.oak_slab]
    id = 3
    base_state_id = 18
    behavior = "slab"
    properties = [
        { name = "type", values = ["top", "bottom", "double"] },
        { name = "waterlogged", values = ["true", "false"] },
    ]
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Union

import numpy as np
import tomli

from .core.errors import ConfigurationError, InvalidStateError
from .core.properties import BlockType, Property
from .core.registry import BehaviorRegistry
from .core.state_table import StateTable

logger = logging.getLogger("mcstate.catalog")

DEFAULT_CATALOG = "blocks.toml"


def _parse_block(name: str, data: Dict[str, Any]) -> BlockType:
    try:
        block_id = int(data["id"])
        base_state_id = int(data["base_state_id"])
    except KeyError as e:
        raise ConfigurationError(f"Block '{name}' is missing {e}") from None
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Block '{name}' has an invalid id: {e}") from None

    properties = []
    for entry in data.get("properties", []):
        if not isinstance(entry, dict) or "name" not in entry or "values" not in entry:
            raise ConfigurationError(
                f"Block '{name}' has a malformed property entry: {entry!r}"
            )
        properties.append(Property(entry["name"], tuple(str(v) for v in entry["values"])))

    return BlockType(
        id=block_id,
        name=name,
        base_state_id=base_state_id,
        properties=tuple(properties),
        behavior=data.get("behavior"),
    )


class BlockCatalog:
    """Block types indexed by name, id and state id range."""

    def __init__(self, blocks: Iterable[BlockType]):
        self._blocks: List[BlockType] = sorted(blocks, key=lambda b: b.base_state_id)
        self._by_name: Dict[str, BlockType] = {}
        self._by_id: Dict[int, BlockType] = {}

        previous = None
        for block in self._blocks:
            if block.name in self._by_name:
                raise ConfigurationError(f"Duplicate block name '{block.name}'")
            if block.id in self._by_id:
                raise ConfigurationError(f"Duplicate block id {block.id}")
            if previous is not None and block.base_state_id <= previous.max_state_id:
                raise ConfigurationError(
                    f"State ids of '{block.name}' overlap '{previous.name}'"
                )
            self._by_name[block.name] = block
            self._by_id[block.id] = block
            previous = block

        self._bases = np.array([b.base_state_id for b in self._blocks], dtype=np.int64)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "BlockCatalog":
        blocks = config.get("blocks")
        if not isinstance(blocks, dict):
            raise ConfigurationError("Catalog has no [blocks] table")
        return cls(_parse_block(name, data) for name, data in blocks.items())

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "BlockCatalog":
        """Load a catalog from a TOML file."""
        try:
            with open(path, "rb") as f:
                config = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid catalog file {path}: {e}") from e
        catalog = cls.from_dict(config)
        logger.info(f"Loaded {len(catalog)} block types from {path}")
        return catalog

    @classmethod
    def load_default(cls) -> "BlockCatalog":
        """Load the catalog bundled with the package."""
        data = resources.files("mcstate.data").joinpath(DEFAULT_CATALOG).read_text()
        return cls.from_dict(tomli.loads(data))

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[BlockType]:
        return iter(self._blocks)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> BlockType:
        try:
            return self._by_name[name]
        except KeyError:
            raise ConfigurationError(f"Unknown block '{name}'") from None

    def get_by_id(self, block_id: int) -> BlockType:
        try:
            return self._by_id[block_id]
        except KeyError:
            raise ConfigurationError(f"Unknown block id {block_id}") from None

    def block_for_state(self, state_id: int) -> BlockType:
        """Find the block type whose state range contains ``state_id``."""
        index = int(np.searchsorted(self._bases, state_id, side="right")) - 1
        if index >= 0:
            block = self._blocks[index]
            if block.has_state(state_id):
                return block
        raise InvalidStateError(f"No block type owns state id {state_id}")

    def initialize_behaviors(self, registry: BehaviorRegistry) -> int:
        """Build every behavior the catalog uses before traffic starts.

        Returns:
            int: Number of blocks with a placement behavior
        """
        count = 0
        for block in self._blocks:
            if block.behavior is not None:
                registry.for_block(block)
                count += 1
        logger.info(
            f"Initialized behaviors for {count} of {len(self._blocks)} block types"
        )
        return count

    def palette(self) -> Dict[str, Any]:
        """Every state of every block as ``{name: {id, base_state_id, states}}``."""
        palette = {}
        tables: Dict[tuple, StateTable] = {}
        for block in self._blocks:
            table = tables.get(block.properties)
            if table is None:
                table = tables[block.properties] = StateTable.build(block.properties)
            palette[block.name] = {
                "id": block.id,
                "base_state_id": block.base_state_id,
                "states": [
                    {
                        "id": block.base_state_id + offset,
                        "properties": table.values_at(offset),
                    }
                    for offset, _ in table
                ],
            }
        return palette
