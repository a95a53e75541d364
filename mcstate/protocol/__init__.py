"""Inbound request schemas consumed by the network layer."""

from .buffer import NetworkBuffer, PacketDecodeError
from .packets import (
    Packet, PickItemFromBlock, PickItemFromEntity,
    SERVERBOUND_PACKETS, decode_packet,
)

__all__ = [
    'NetworkBuffer', 'PacketDecodeError',
    'Packet', 'PickItemFromBlock', 'PickItemFromEntity',
    'SERVERBOUND_PACKETS', 'decode_packet',
]
