"""
Tests for the pick-item request schemas.
"""

import struct
import unittest

from mcstate.core.properties import BlockPos
from mcstate.protocol import (
    NetworkBuffer, PacketDecodeError, PickItemFromBlock, PickItemFromEntity,
    decode_packet,
)


class TestBlockPos(unittest.TestCase):
    """Test packed protocol positions."""

    def test_pack(self):
        """Test the bit layout of a packed position."""
        self.assertEqual(BlockPos(1, 2, 3).as_long(), (1 << 38) | (3 << 12) | 2)

    def test_negative_coordinates(self):
        """Test that negative coordinates survive packing."""
        for position in (
            BlockPos(-5, -64, -7),
            BlockPos(-33554432, -2048, 33554431),
            BlockPos(0, 319, -1),
        ):
            self.assertEqual(BlockPos.from_long(position.as_long()), position)

        # Signed longs as read off the wire
        self.assertEqual(BlockPos.from_long(-1), BlockPos(-1, -1, -1))


class TestNetworkBuffer(unittest.TestCase):
    """Test the NetworkBuffer class."""

    def test_read(self):
        """Test reading fixed-layout fields in order."""
        buffer = NetworkBuffer(struct.pack(">i?q", -7, True, 12345))
        self.assertEqual(buffer.read_int(), -7)
        self.assertTrue(buffer.read_bool())
        self.assertEqual(buffer.read_long(), 12345)
        self.assertEqual(buffer.remaining, 0)

    def test_truncated(self):
        """Test that short payloads fail."""
        with self.assertRaises(PacketDecodeError):
            NetworkBuffer(b"\x00\x01").read_int()
        with self.assertRaises(PacketDecodeError):
            NetworkBuffer(b"").read_bool()

    def test_invalid_bool(self):
        """Test that bool bytes other than 0 and 1 fail."""
        with self.assertRaises(PacketDecodeError):
            NetworkBuffer(b"\x02").read_bool()


class TestPickItemPackets(unittest.TestCase):
    """Test the pick-item packets."""

    def test_decode_from_block(self):
        """Test decoding a pick-from-block payload."""
        position = BlockPos(-12, 70, 4096)
        packed = position.as_long()
        if packed >= 1 << 63:
            packed -= 1 << 64
        payload = struct.pack(">q?", packed, True)

        packet = decode_packet(0x22, payload)
        self.assertIsInstance(packet, PickItemFromBlock)
        self.assertEqual(packet.position, position)
        self.assertTrue(packet.include_data)
        self.assertEqual(packet.encode(), payload)

    def test_decode_from_entity(self):
        """Test decoding a pick-from-entity payload."""
        payload = struct.pack(">i?", 42, False)

        packet = decode_packet(0x23, payload)
        self.assertEqual(packet, PickItemFromEntity(42, False))
        self.assertEqual(packet.encode(), payload)

    def test_malformed(self):
        """Test malformed payloads and unknown ids."""
        with self.assertRaises(PacketDecodeError):
            decode_packet(0x23, struct.pack(">i", 42))
        with self.assertRaises(PacketDecodeError):
            decode_packet(0x23, struct.pack(">i?B", 42, True, 0))
        with self.assertRaises(PacketDecodeError):
            decode_packet(0x22, b"\x00" * 8 + b"\x05")
        with self.assertRaises(PacketDecodeError):
            decode_packet(0x7F, b"")


if __name__ == '__main__':
    unittest.main()
