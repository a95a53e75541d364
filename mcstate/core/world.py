"""World collaborator interface and an in-memory implementation."""

from typing import TYPE_CHECKING, Dict, Optional, Protocol

from .errors import WorldLookupError
from .properties import BlockPos, BlockType

if TYPE_CHECKING:
    from ..catalog import BlockCatalog


class World(Protocol):
    """Block lookups the placement behaviors depend on."""

    async def get_block(self, position: BlockPos) -> Optional[BlockType]:
        ...

    async def get_block_state_id(self, position: BlockPos) -> Optional[int]:
        ...


async def require_block(world: World, position: BlockPos) -> BlockType:
    """Fetch the block at ``position`` or raise WorldLookupError."""
    block = await world.get_block(position)
    if block is None:
        raise WorldLookupError(position)
    return block


async def require_state_id(world: World, position: BlockPos) -> int:
    """Fetch the state id at ``position`` or raise WorldLookupError."""
    state_id = await world.get_block_state_id(position)
    if state_id is None:
        raise WorldLookupError(position, f"No block state at {position}")
    return state_id


class InMemoryWorld:
    """Dict-backed world that resolves block types through a catalog.

    Positions that were never set are air when the catalog defines ``air``;
    positions outside ``min_y``/``max_y`` cannot be resolved.
    """

    def __init__(self, catalog: "BlockCatalog", min_y: int = -64, max_y: int = 319):
        self.catalog = catalog
        self.min_y = min_y
        self.max_y = max_y
        self.states: Dict[BlockPos, int] = {}

    def _in_bounds(self, position: BlockPos) -> bool:
        return self.min_y <= position.y <= self.max_y

    def set_block_state(self, position: BlockPos, state_id: int) -> None:
        if not self._in_bounds(position):
            raise WorldLookupError(position, f"Position {position} is out of bounds")
        # Fail on unknown state ids before storing them
        self.catalog.block_for_state(state_id)
        self.states[position] = state_id

    def set_block(self, position: BlockPos, block_name: str) -> None:
        """Place the default (first) state of a block type."""
        self.set_block_state(position, self.catalog.get(block_name).base_state_id)

    async def get_block_state_id(self, position: BlockPos) -> Optional[int]:
        if not self._in_bounds(position):
            return None
        state_id = self.states.get(position)
        if state_id is None and "air" in self.catalog:
            state_id = self.catalog.get("air").base_state_id
        return state_id

    async def get_block(self, position: BlockPos) -> Optional[BlockType]:
        state_id = await self.get_block_state_id(position)
        if state_id is None:
            return None
        return self.catalog.block_for_state(state_id)
