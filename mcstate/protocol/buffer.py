"""Byte buffer for fixed-layout protocol fields."""

import struct

from ..core.errors import BlockStateError
from ..core.properties import BlockPos


class PacketDecodeError(BlockStateError):
    """An inbound payload does not match its packet schema."""


_BOOL = struct.Struct(">?")
_INT = struct.Struct(">i")
_LONG = struct.Struct(">q")


class NetworkBuffer:
    """Big-endian reader/writer over a packet payload."""

    def __init__(self, data: bytes = b""):
        self.data = bytearray(data)
        self.position = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.position

    def _read(self, codec: struct.Struct, name: str):
        if self.remaining < codec.size:
            raise PacketDecodeError(
                f"Truncated {name}: need {codec.size} bytes, have {self.remaining}"
            )
        (value,) = codec.unpack_from(self.data, self.position)
        self.position += codec.size
        return value

    def read_bool(self) -> bool:
        if self.remaining < 1:
            raise PacketDecodeError("Truncated bool: no bytes left")
        byte = self.data[self.position]
        if byte > 1:
            raise PacketDecodeError(f"Invalid bool byte: {byte:#04x}")
        self.position += 1
        return byte == 1

    def read_int(self) -> int:
        return self._read(_INT, "int")

    def read_long(self) -> int:
        return self._read(_LONG, "long")

    def read_position(self) -> BlockPos:
        return BlockPos.from_long(self.read_long())

    def write_bool(self, value: bool) -> "NetworkBuffer":
        self.data += _BOOL.pack(bool(value))
        return self

    def write_int(self, value: int) -> "NetworkBuffer":
        self.data += _INT.pack(value)
        return self

    def write_long(self, value: int) -> "NetworkBuffer":
        self.data += _LONG.pack(value)
        return self

    def write_position(self, position: BlockPos) -> "NetworkBuffer":
        packed = position.as_long()
        # Store the unsigned packing as a signed long
        if packed >= 1 << 63:
            packed -= 1 << 64
        return self.write_long(packed)

    def expect_end(self) -> None:
        if self.remaining:
            raise PacketDecodeError(f"{self.remaining} trailing bytes in payload")

    def to_bytes(self) -> bytes:
        return bytes(self.data)
