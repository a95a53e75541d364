"""
Tests for property evaluators.
"""

import unittest

from mcstate.core.errors import ConfigurationError, UnknownPropertyError
from mcstate.core.evaluators import (
    EVALUATORS, PropertyKind, PropertyValue,
    evaluate, evaluate_slab_type, evaluate_waterlogged, get_property_kind,
)
from mcstate.core.properties import BlockFace, BlockPos, BlockType, Property


SLAB_PROPERTIES = (
    Property("type", ("bottom", "top", "double")),
    Property("waterlogged", ("false", "true")),
)

OAK_SLAB = BlockType(3, "oak_slab", 100, SLAB_PROPERTIES, "slab")
STONE_SLAB = BlockType(4, "stone_slab", 106, SLAB_PROPERTIES, "slab")
WATER = BlockType(2, "water", 2, (Property("level", tuple(str(i) for i in range(16))),))
STONE = BlockType(1, "stone", 1)
POSITION = BlockPos(0, 64, 0)


class TestPropertyKinds(unittest.TestCase):
    """Test property name lookup."""

    def test_known_kinds(self):
        """Test that property names resolve to their kinds."""
        self.assertIs(get_property_kind("type"), PropertyKind.SLAB_TYPE)
        self.assertIs(get_property_kind("waterlogged"), PropertyKind.WATERLOGGED)

    def test_unknown_kind(self):
        """Test that unknown names fail with a configuration error."""
        with self.assertRaises(UnknownPropertyError) as ctx:
            get_property_kind("facing")
        self.assertIsInstance(ctx.exception, ConfigurationError)
        self.assertEqual(ctx.exception.name, "facing")

    def test_every_kind_has_an_evaluator(self):
        """Test that each recognized kind has exactly one evaluator."""
        self.assertEqual(set(EVALUATORS), set(PropertyKind))

    def test_token(self):
        """Test token rendering of property values."""
        self.assertEqual(PropertyValue("type", "double").token, "typedouble")


class TestSlabTypeEvaluator(unittest.TestCase):
    """Test the slab type evaluator."""

    def test_same_block_top_face(self):
        """Test that a slab on top of the same slab doubles."""
        value = evaluate_slab_type(OAK_SLAB, OAK_SLAB, POSITION, BlockFace.TOP)
        self.assertEqual(value.token, "typedouble")

    def test_other_cases(self):
        """Test that every other combination yields bottom."""
        for clicked, face in [
            (OAK_SLAB, BlockFace.BOTTOM),
            (OAK_SLAB, BlockFace.NORTH),
            (STONE_SLAB, BlockFace.TOP),
            (STONE, BlockFace.TOP),
            (WATER, BlockFace.EAST),
        ]:
            value = evaluate_slab_type(OAK_SLAB, clicked, POSITION, face)
            self.assertEqual(value, PropertyValue("type", "bottom"))

    def test_dispatch(self):
        """Test dispatch through the evaluator table."""
        value = evaluate(PropertyKind.SLAB_TYPE, OAK_SLAB, OAK_SLAB, POSITION, BlockFace.TOP)
        self.assertEqual(value.value, "double")


class TestWaterloggedEvaluator(unittest.TestCase):
    """Test the waterlogged evaluator."""

    def test_water(self):
        """Test that placing into water waterlogs the block."""
        value = evaluate_waterlogged(OAK_SLAB, WATER, POSITION, BlockFace.TOP)
        self.assertEqual(value.token, "waterloggedtrue")

    def test_not_water(self):
        """Test that anything other than water leaves the block dry."""
        for clicked in (STONE, OAK_SLAB, BlockType(9, "lava", 50)):
            value = evaluate(PropertyKind.WATERLOGGED, OAK_SLAB, clicked, POSITION, BlockFace.TOP)
            self.assertEqual(value.token, "waterloggedfalse")


if __name__ == '__main__':
    unittest.main()
