"""mcstate: block state encoding and placement behaviors.

Assigns dense state ids to every combination of a block type's properties
and computes the state a block takes when it is placed in the world.

Key Components:
- core: state tables, property evaluators, behaviors and their registry
- catalog: block type metadata loaded from TOML
- protocol: inbound pick-item request schemas
- cli: command line entry point
"""

__version__ = "0.1.0"

# Package metadata
__author__ = "MCPy Team"
__email__ = "mcpy@example.com"
__license__ = "MIT"
__url__ = "https://github.com/mcpy/mcstate"

from .core import (
    BlockFace, BlockPos, BlockType, Property, StateTable,
    BlockBehavior, SlabBehavior, BehaviorRegistry,
    get_registry, initialize_registry,
)
from .catalog import BlockCatalog
