"""Serverbound pick-item request schemas.

Only the payload layout is defined here; length framing and compression are
handled by the transport before a payload reaches ``decode_packet``.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar, Dict, Type, TypeVar

from ..core.properties import BlockPos
from .buffer import NetworkBuffer, PacketDecodeError

logger = logging.getLogger("mcstate.protocol")

# Serverbound play packet ids
PLAY_PICK_ITEM_FROM_BLOCK = 0x22
PLAY_PICK_ITEM_FROM_ENTITY = 0x23

P = TypeVar("P", bound="Packet")


class Packet:
    """Base class for fixed-layout serverbound packets."""

    PACKET_ID: ClassVar[int]

    @classmethod
    def read(cls: Type[P], buffer: NetworkBuffer) -> P:
        raise NotImplementedError

    def write(self, buffer: NetworkBuffer) -> None:
        raise NotImplementedError

    @classmethod
    def decode(cls: Type[P], payload: bytes) -> P:
        buffer = NetworkBuffer(payload)
        packet = cls.read(buffer)
        buffer.expect_end()
        return packet

    def encode(self) -> bytes:
        buffer = NetworkBuffer()
        self.write(buffer)
        return buffer.to_bytes()


@dataclass(frozen=True)
class PickItemFromBlock(Packet):
    """Pick the block at ``position``; ``include_data`` copies its block data."""

    PACKET_ID: ClassVar[int] = PLAY_PICK_ITEM_FROM_BLOCK

    position: BlockPos
    include_data: bool

    @classmethod
    def read(cls, buffer: NetworkBuffer) -> "PickItemFromBlock":
        return cls(buffer.read_position(), buffer.read_bool())

    def write(self, buffer: NetworkBuffer) -> None:
        buffer.write_position(self.position).write_bool(self.include_data)


@dataclass(frozen=True)
class PickItemFromEntity(Packet):
    """Pick the item representing entity ``id``."""

    PACKET_ID: ClassVar[int] = PLAY_PICK_ITEM_FROM_ENTITY

    id: int
    include_data: bool

    @classmethod
    def read(cls, buffer: NetworkBuffer) -> "PickItemFromEntity":
        return cls(buffer.read_int(), buffer.read_bool())

    def write(self, buffer: NetworkBuffer) -> None:
        buffer.write_int(self.id).write_bool(self.include_data)


SERVERBOUND_PACKETS: Dict[int, Type[Packet]] = {
    PickItemFromBlock.PACKET_ID: PickItemFromBlock,
    PickItemFromEntity.PACKET_ID: PickItemFromEntity,
}


def decode_packet(packet_id: int, payload: bytes) -> Packet:
    """Decode an unframed payload by packet id.

    Raises:
        PacketDecodeError: If the id is unknown or the payload is malformed
    """
    packet_cls = SERVERBOUND_PACKETS.get(packet_id)
    if packet_cls is None:
        raise PacketDecodeError(f"Unknown serverbound packet id {packet_id:#04x}")
    packet = packet_cls.decode(payload)
    logger.debug(f"Decoded {packet}")
    return packet
