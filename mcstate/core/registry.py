"""Process-wide registry of behavior families and their state tables."""

import logging
import threading
import time
from typing import Dict, Mapping, Optional, Sequence, Type

from ..metrics import STATE_TABLE_BUILD_SECONDS, STATE_TABLES_BUILT
from .behavior import BEHAVIOR_FAMILIES, BlockBehavior
from .errors import ConfigurationError, UninitializedAccessError
from .properties import BlockType, Property
from .state_table import StateTable

logger = logging.getLogger("mcstate.core.registry")

# Global registry to be initialized
_registry: Optional["BehaviorRegistry"] = None
_registry_lock = threading.Lock()


class BehaviorRegistry:
    """Initialize-once, read-many holder of one behavior per family.

    The first caller for a family builds its state table under a per-family
    lock; everyone else, including callers that raced the first one, gets the
    same fully built instance. Reads after initialization take no lock.
    """

    def __init__(self, families: Optional[Mapping[str, Type[BlockBehavior]]] = None):
        self._families: Dict[str, Type[BlockBehavior]] = dict(
            BEHAVIOR_FAMILIES if families is None else families
        )
        self._behaviors: Dict[str, BlockBehavior] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _family_lock(self, family: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(family)
            if lock is None:
                lock = self._locks[family] = threading.Lock()
            return lock

    def _build(self, family: str, properties: Sequence[Property]) -> BlockBehavior:
        try:
            behavior_cls = self._families[family]
        except KeyError:
            raise ConfigurationError(f"Unknown behavior family '{family}'") from None

        start = time.perf_counter()
        behavior = behavior_cls(StateTable.build(properties))
        duration = time.perf_counter() - start

        STATE_TABLE_BUILD_SECONDS.observe(duration)
        STATE_TABLES_BUILT.labels(family=family).inc()
        logger.info(
            f"Initialized '{family}' behavior: {behavior.table.total} states "
            f"in {duration * 1000:.2f}ms"
        )
        return behavior

    def get_or_init(self, family: str, properties: Sequence[Property]) -> BlockBehavior:
        """Return the family's behavior, building its table on first use.

        Raises:
            ConfigurationError: If the family is unknown, or was initialized
                with a structurally different property list
        """
        behavior = self._behaviors.get(family)
        if behavior is None:
            with self._family_lock(family):
                behavior = self._behaviors.get(family)
                if behavior is None:
                    behavior = self._build(family, properties)
                    # Publish only the fully built behavior
                    self._behaviors[family] = behavior

        if behavior.table.properties != tuple(properties):
            raise ConfigurationError(
                f"Family '{family}' was initialized with properties "
                f"{[p.name for p in behavior.table.properties]}, "
                f"got {[p.name for p in properties]}"
            )
        return behavior

    def get(self, family: str) -> BlockBehavior:
        """Return an already initialized behavior.

        Raises:
            UninitializedAccessError: If ``family`` has not been initialized
        """
        behavior = self._behaviors.get(family)
        if behavior is None:
            raise UninitializedAccessError(f"Behavior '{family}' is not initialized")
        return behavior

    def table(self, family: str) -> StateTable:
        return self.get(family).table

    def for_block(self, block: BlockType) -> BlockBehavior:
        """Return the behavior for ``block``, initializing its family if needed."""
        if block.behavior is None:
            raise ConfigurationError(f"Block '{block.name}' has no placement behavior")
        return self.get_or_init(block.behavior, block.properties)

    def is_initialized(self, family: str) -> bool:
        return family in self._behaviors

    def register_family(self, behavior_cls: Type[BlockBehavior]) -> None:
        if not behavior_cls.family:
            raise ConfigurationError(f"{behavior_cls.__name__} has no family name")
        if behavior_cls.family in self._families:
            raise ConfigurationError(
                f"Behavior family '{behavior_cls.family}' is already registered"
            )
        self._families[behavior_cls.family] = behavior_cls

    @property
    def families(self) -> Sequence[str]:
        return sorted(self._families)

    def __contains__(self, family: str) -> bool:
        return self.is_initialized(family)


def initialize_registry(
    families: Optional[Mapping[str, Type[BlockBehavior]]] = None,
) -> BehaviorRegistry:
    """Create the process-wide registry, or return it if it already exists."""
    global _registry

    with _registry_lock:
        if _registry is None:
            _registry = BehaviorRegistry(families)
            logger.debug("Behavior registry created")
        return _registry


def get_registry() -> BehaviorRegistry:
    """Get the process-wide registry.

    Raises:
        UninitializedAccessError: If initialize_registry has not been called
    """
    if _registry is None:
        raise UninitializedAccessError(
            "Behavior registry not initialized. Call initialize_registry first."
        )
    return _registry


def reset_registry() -> None:
    """Drop the process-wide registry (used by tests)."""
    global _registry

    with _registry_lock:
        _registry = None
