"""Exception hierarchy for the block state core."""

from typing import Any, Optional


class BlockStateError(Exception):
    """Base class for all block state errors."""


class ConfigurationError(BlockStateError):
    """Static block metadata is inconsistent with the registered evaluators."""


class UnknownPropertyError(ConfigurationError):
    """A property name has no registered evaluator kind."""

    def __init__(self, name: str):
        super().__init__(f"No evaluator registered for property '{name}'")
        self.name = name


class InvalidStateError(ConfigurationError):
    """An assignment or offset is missing from a state table."""


class UninitializedAccessError(BlockStateError):
    """A behavior, table or registry was used before initialization."""


class WorldLookupError(BlockStateError):
    """The world could not resolve a block at a position."""

    def __init__(self, position: Any, message: Optional[str] = None):
        super().__init__(message or f"No block at {position}")
        self.position = position
