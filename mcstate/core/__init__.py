"""Core modules for block state encoding and placement.

- properties: block metadata types (Property, BlockType, BlockFace, BlockPos)
- state_table: mixed-radix enumeration of property assignments
- evaluators: per-property value functions for placement context
- behavior: per-family placement behaviors
- registry: process-wide one-time initialization of behaviors
- world: world collaborator interface
"""

from .errors import (
    BlockStateError, ConfigurationError, UnknownPropertyError,
    InvalidStateError, UninitializedAccessError, WorldLookupError,
)
from .properties import BlockFace, BlockPos, BlockType, Property
from .state_table import Assignment, StateTable
from .evaluators import (
    PropertyKind, PropertyValue, evaluate, get_property_kind,
)
from .behavior import (
    BEHAVIOR_FAMILIES, BlockBehavior, Placement,
    SlabBehavior, WaterloggableBehavior,
)
from .registry import (
    BehaviorRegistry, get_registry, initialize_registry, reset_registry,
)
from .world import InMemoryWorld, World

__all__ = [
    # Errors
    'BlockStateError', 'ConfigurationError', 'UnknownPropertyError',
    'InvalidStateError', 'UninitializedAccessError', 'WorldLookupError',

    # Metadata
    'BlockFace', 'BlockPos', 'BlockType', 'Property',

    # Encoding
    'Assignment', 'StateTable',

    # Evaluation
    'PropertyKind', 'PropertyValue', 'evaluate', 'get_property_kind',

    # Behaviors
    'BEHAVIOR_FAMILIES', 'BlockBehavior', 'Placement',
    'SlabBehavior', 'WaterloggableBehavior',
    'BehaviorRegistry', 'get_registry', 'initialize_registry', 'reset_registry',

    # World
    'InMemoryWorld', 'World',
]
