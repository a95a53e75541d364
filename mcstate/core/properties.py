"""Block metadata types: properties, block types, faces and positions."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from .errors import ConfigurationError

# Bit layout of a packed protocol position
_XZ_BITS = 26
_Y_BITS = 12


def _signed(value: int, bits: int) -> int:
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


class BlockFace(IntEnum):
    """Face of a block, in protocol ordinal order."""

    BOTTOM = 0
    TOP = 1
    NORTH = 2
    SOUTH = 3
    WEST = 4
    EAST = 5

    @classmethod
    def from_name(cls, name: str) -> "BlockFace":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown block face: {name}") from None

    @property
    def offset(self) -> Tuple[int, int, int]:
        """Unit (dx, dy, dz) pointing out of this face."""
        return _FACE_OFFSETS[self]


_FACE_OFFSETS = {
    BlockFace.BOTTOM: (0, -1, 0),
    BlockFace.TOP: (0, 1, 0),
    BlockFace.NORTH: (0, 0, -1),
    BlockFace.SOUTH: (0, 0, 1),
    BlockFace.WEST: (-1, 0, 0),
    BlockFace.EAST: (1, 0, 0),
}


@dataclass(frozen=True)
class BlockPos:
    """Integer block coordinates in the world."""

    x: int
    y: int
    z: int

    def as_long(self) -> int:
        """Pack into the unsigned 64-bit protocol position."""
        xz_mask = (1 << _XZ_BITS) - 1
        y_mask = (1 << _Y_BITS) - 1
        return (
            ((self.x & xz_mask) << (_XZ_BITS + _Y_BITS))
            | ((self.z & xz_mask) << _Y_BITS)
            | (self.y & y_mask)
        )

    @classmethod
    def from_long(cls, value: int) -> "BlockPos":
        """Unpack a 64-bit protocol position (signed or unsigned)."""
        value &= (1 << 64) - 1
        x = _signed(value >> (_XZ_BITS + _Y_BITS), _XZ_BITS)
        z = _signed((value >> _Y_BITS) & ((1 << _XZ_BITS) - 1), _XZ_BITS)
        y = _signed(value & ((1 << _Y_BITS) - 1), _Y_BITS)
        return cls(x, y, z)

    def offset(self, face: BlockFace) -> "BlockPos":
        """The neighbouring position across ``face``."""
        dx, dy, dz = face.offset
        return BlockPos(self.x + dx, self.y + dy, self.z + dz)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True)
class Property:
    """A named block property with an ordered value domain.

    The position of a value in ``values`` is its digit in the state encoding,
    so the order must never change once state ids have been handed out.
    """

    name: str
    values: Tuple[str, ...]

    def __post_init__(self):
        # Accept lists from config files but store an immutable tuple
        object.__setattr__(self, "values", tuple(self.values))
        if not self.values:
            raise ConfigurationError(f"Property '{self.name}' has an empty domain")
        if len(set(self.values)) != len(self.values):
            raise ConfigurationError(f"Property '{self.name}' has duplicate values")

    def __len__(self) -> int:
        return len(self.values)

    def index(self, value: str) -> int:
        """Return the digit of ``value`` within this property's domain."""
        try:
            return self.values.index(value)
        except ValueError:
            raise ConfigurationError(
                f"'{value}' is not a value of property '{self.name}'"
            ) from None

    def token(self, index: int) -> str:
        """Render the value at ``index`` as a ``name + value`` token."""
        return f"{self.name}{self.values[index]}"


@dataclass(frozen=True)
class BlockType:
    """Static metadata of one block type."""

    id: int
    name: str
    base_state_id: int
    properties: Tuple[Property, ...] = ()
    behavior: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "properties", tuple(self.properties))

    @property
    def state_count(self) -> int:
        count = 1
        for prop in self.properties:
            count *= len(prop)
        return count

    @property
    def max_state_id(self) -> int:
        return self.base_state_id + self.state_count - 1

    def has_state(self, state_id: int) -> bool:
        return self.base_state_id <= state_id <= self.max_state_id
