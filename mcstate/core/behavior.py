"""Placement behaviors for block families.

A behavior owns the state table of its family and turns a placement event
(block being placed, clicked face, target position) into a state id. Slabs
are the reference family: placing a slab onto the top face of a bottom slab
of the same type merges the two into a double slab.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, NamedTuple, Sequence, Type

from ..metrics import MERGE_DECISIONS, PLACEMENTS_RESOLVED
from .errors import ConfigurationError
from .evaluators import PropertyKind, evaluate, get_property_kind
from .properties import BlockFace, BlockPos, BlockType, Property
from .state_table import Assignment, StateTable
from .world import World, require_block, require_state_id

logger = logging.getLogger("mcstate.core.behavior")

# Slab type value that merges into a double slab
BOTTOM = "bottom"


class Placement(NamedTuple):
    """Outcome of a placement: the new state id and whether it merged."""

    state_id: int
    merged: bool


class BlockBehavior(ABC):
    """Per-family placement logic backed by a shared state table."""

    family: str = ""

    def __init__(self, table: StateTable):
        self.table = table

    @classmethod
    def create(cls, properties: Sequence[Property]) -> "BlockBehavior":
        return cls(StateTable.build(properties))

    def _check_block(self, block: BlockType) -> None:
        if block.properties != self.table.properties:
            raise ConfigurationError(
                f"Block '{block.name}' properties do not match the "
                f"'{self.family}' state table"
            )

    def evaluate_assignment(
        self,
        block: BlockType,
        clicked_block: BlockType,
        position: BlockPos,
        face: BlockFace,
    ) -> Assignment:
        """Evaluate every property of ``block`` in declaration order."""
        self._check_block(block)
        digits = []
        for prop in block.properties:
            kind = get_property_kind(prop.name)
            value = evaluate(kind, block, clicked_block, position, face)
            digits.append(prop.index(value.value))
        return tuple(digits)

    async def map_state_id(
        self, world: World, block: BlockType, face: BlockFace, position: BlockPos
    ) -> int:
        """Compute the state id ``block`` takes when placed at ``position``."""
        clicked_block = await require_block(world, position)
        assignment = self.evaluate_assignment(block, clicked_block, position, face)
        offset = self.table.offset_of(assignment)
        PLACEMENTS_RESOLVED.labels(block=block.name).inc()
        return block.base_state_id + offset

    @abstractmethod
    async def is_updateable(
        self, world: World, block: BlockType, face: BlockFace, position: BlockPos
    ) -> bool:
        """Whether the block at ``position`` merges with ``block`` in place."""

    async def place(
        self, world: World, block: BlockType, face: BlockFace, position: BlockPos
    ) -> Placement:
        """Resolve a click on ``face`` of the block at ``position``.

        A mergeable block is updated in place. Otherwise the new block goes
        into the neighbouring position across ``face``.
        """
        merged = await self.is_updateable(world, block, face, position)
        target = position if merged else position.offset(face)
        state_id = await self.map_state_id(world, block, face, target)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Placed {block.name} at {target} on {face.name}: "
                f"{self.table.tokens_at(state_id - block.base_state_id)}"
                f"{' (merged)' if merged else ''}"
            )
        return Placement(state_id, merged)


class SlabBehavior(BlockBehavior):
    """Slabs: a bottom slab clicked on top upgrades to a double slab."""

    family = "slab"

    def _type_property(self) -> str:
        for prop in self.table.properties:
            if get_property_kind(prop.name) is PropertyKind.SLAB_TYPE:
                if BOTTOM not in prop.values:
                    raise ConfigurationError(
                        f"Property '{prop.name}' of the '{self.family}' table "
                        f"has no '{BOTTOM}' value"
                    )
                return prop.name
        raise ConfigurationError(f"The '{self.family}' table has no slab type property")

    async def is_updateable(
        self, world: World, block: BlockType, face: BlockFace, position: BlockPos
    ) -> bool:
        type_name = self._type_property()
        clicked_block = await require_block(world, position)
        if clicked_block.id != block.id or face != BlockFace.TOP:
            MERGE_DECISIONS.labels(outcome="replace").inc()
            return False

        state_id = await require_state_id(world, position)
        values = self.table.values_at(state_id - clicked_block.base_state_id)
        logger.debug(f"Existing {clicked_block.name} at {position}: {values}")

        updateable = values[type_name] == BOTTOM
        MERGE_DECISIONS.labels(outcome="merge" if updateable else "replace").inc()
        return updateable


class WaterloggableBehavior(BlockBehavior):
    """Blocks whose state only depends on the surrounding fluid; never merge."""

    family = "waterloggable"

    async def is_updateable(
        self, world: World, block: BlockType, face: BlockFace, position: BlockPos
    ) -> bool:
        await require_block(world, position)
        MERGE_DECISIONS.labels(outcome="replace").inc()
        return False


BEHAVIOR_FAMILIES: Dict[str, Type[BlockBehavior]] = {
    SlabBehavior.family: SlabBehavior,
    WaterloggableBehavior.family: WaterloggableBehavior,
}
