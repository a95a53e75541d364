"""Property evaluators.

Each recognized property kind has exactly one evaluator. An evaluator reads
the placement context and returns the value the property takes in the state
being placed. Evaluators never mutate anything.
"""

from enum import Enum
from typing import Callable, Dict, NamedTuple

from .errors import UnknownPropertyError
from .properties import BlockFace, BlockPos, BlockType

# Name of the fluid block that waterlogs a placed block
WATER = "water"


class PropertyKind(Enum):
    """Recognized property semantics."""

    SLAB_TYPE = "type"
    WATERLOGGED = "waterlogged"


class PropertyValue(NamedTuple):
    """A property name paired with the value chosen for it."""

    name: str
    value: str

    @property
    def token(self) -> str:
        return f"{self.name}{self.value}"


Evaluator = Callable[[BlockType, BlockType, BlockPos, BlockFace], PropertyValue]

# Property name -> kind
PROPERTY_KINDS: Dict[str, PropertyKind] = {kind.value: kind for kind in PropertyKind}

EVALUATORS: Dict[PropertyKind, Evaluator] = {}


def get_property_kind(name: str) -> PropertyKind:
    """Resolve a property name to its kind.

    Raises:
        UnknownPropertyError: If no kind is registered under ``name``
    """
    try:
        return PROPERTY_KINDS[name]
    except KeyError:
        raise UnknownPropertyError(name) from None


def evaluator(kind: PropertyKind) -> Callable[[Evaluator], Evaluator]:
    """Register the decorated function as the evaluator for ``kind``."""

    def register(func: Evaluator) -> Evaluator:
        if kind in EVALUATORS:
            raise ValueError(f"Evaluator for {kind.name} already registered")
        EVALUATORS[kind] = func
        return func

    return register


def evaluate(
    kind: PropertyKind,
    block: BlockType,
    clicked_block: BlockType,
    position: BlockPos,
    face: BlockFace,
) -> PropertyValue:
    """Run the evaluator registered for ``kind``."""
    try:
        func = EVALUATORS[kind]
    except KeyError:
        raise UnknownPropertyError(kind.value) from None
    return func(block, clicked_block, position, face)


@evaluator(PropertyKind.SLAB_TYPE)
def evaluate_slab_type(
    block: BlockType, clicked_block: BlockType, position: BlockPos, face: BlockFace
) -> PropertyValue:
    """Double when a slab is placed onto the top of the same slab type."""
    if block.id == clicked_block.id and face == BlockFace.TOP:
        return PropertyValue("type", "double")
    return PropertyValue("type", "bottom")


@evaluator(PropertyKind.WATERLOGGED)
def evaluate_waterlogged(
    block: BlockType, clicked_block: BlockType, position: BlockPos, face: BlockFace
) -> PropertyValue:
    if clicked_block.name == WATER:
        return PropertyValue("waterlogged", "true")
    return PropertyValue("waterlogged", "false")
