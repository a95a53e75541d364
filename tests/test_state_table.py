"""
Tests for mixed-radix state tables.
"""

import unittest

from mcstate.core.errors import ConfigurationError, InvalidStateError
from mcstate.core.properties import Property
from mcstate.core.state_table import StateTable


SLAB_PROPERTIES = (
    Property("type", ("bottom", "top", "double")),
    Property("waterlogged", ("false", "true")),
)


class TestProperty(unittest.TestCase):
    """Test the Property class."""

    def test_values_become_tuple(self):
        """Test that list domains are stored as tuples."""
        prop = Property("facing", ["north", "south"])
        self.assertEqual(prop.values, ("north", "south"))
        self.assertEqual(len(prop), 2)

    def test_empty_domain(self):
        """Test that empty domains are rejected."""
        with self.assertRaises(ConfigurationError):
            Property("type", ())

    def test_duplicate_values(self):
        """Test that duplicate values are rejected."""
        with self.assertRaises(ConfigurationError):
            Property("type", ("top", "top"))

    def test_index_and_token(self):
        """Test value digits and token rendering."""
        prop = SLAB_PROPERTIES[0]
        self.assertEqual(prop.index("double"), 2)
        self.assertEqual(prop.token(0), "typebottom")

        with self.assertRaises(ConfigurationError):
            prop.index("sideways")


class TestStateTable(unittest.TestCase):
    """Test the StateTable class."""

    def setUp(self):
        """Set up test environment."""
        self.table = StateTable.build(SLAB_PROPERTIES)

    def test_sizes(self):
        """Test that both maps hold the product of the domain sizes."""
        for properties, expected in [
            ((), 1),
            ((Property("a", ("x",)),), 1),
            ((Property("a", ("x", "y", "z")),), 3),
            (SLAB_PROPERTIES, 6),
            ((
                Property("a", ("0", "1")),
                Property("b", ("0", "1", "2")),
                Property("c", ("0", "1", "2", "3", "4")),
            ), 30),
        ]:
            table = StateTable.build(properties)
            self.assertEqual(len(table), expected)
            self.assertEqual(table.total, expected)
            self.assertEqual(len(table._forward), expected)
            self.assertEqual(len(table._reverse), expected)

    def test_round_trip(self):
        """Test that forward and reverse lookups are inverses."""
        properties = (
            Property("a", ("0", "1", "2")),
            Property("b", ("0", "1")),
            Property("c", ("0", "1", "2", "3")),
        )
        table = StateTable.build(properties)
        seen = set()
        for offset, assignment in table:
            self.assertEqual(table.offset_of(assignment), offset)
            self.assertEqual(len(assignment), len(properties))
            seen.add(assignment)
        self.assertEqual(len(seen), 24)

    def test_last_property_varies_fastest(self):
        """Test mixed-radix ordering for [A(2), B(3)]."""
        table = StateTable.build([
            Property("a", ("a0", "a1")),
            Property("b", ("b0", "b1", "b2")),
        ])
        self.assertEqual(
            [table.tokens_at(offset) for offset in range(6)],
            [
                ["aa0", "bb0"], ["aa0", "bb1"], ["aa0", "bb2"],
                ["aa1", "bb0"], ["aa1", "bb1"], ["aa1", "bb2"],
            ],
        )

    def test_tokens_follow_property_order(self):
        """Test that tokens appear in declared property order."""
        for offset, _ in self.table:
            tokens = self.table.tokens_at(offset)
            self.assertTrue(tokens[0].startswith("type"))
            self.assertTrue(tokens[1].startswith("waterlogged"))

    def test_empty_property_list(self):
        """Test the single empty assignment of a block without properties."""
        table = StateTable.build([])
        self.assertEqual(table.assignment_at(0), ())
        self.assertEqual(table.offset_of(()), 0)
        self.assertEqual(table.tokens_at(0), [])

    def test_deterministic(self):
        """Test that rebuilding yields an equal table."""
        self.assertEqual(StateTable.build(SLAB_PROPERTIES), self.table)
        self.assertNotEqual(StateTable.build(SLAB_PROPERTIES[:1]), self.table)

    def test_values_at(self):
        """Test decoding an offset into named values."""
        self.assertEqual(self.table.values_at(0), {"type": "bottom", "waterlogged": "false"})
        self.assertEqual(self.table.values_at(5), {"type": "double", "waterlogged": "true"})

    def test_assignment_of(self):
        """Test building an assignment from named values."""
        assignment = self.table.assignment_of({"type": "double", "waterlogged": "false"})
        self.assertEqual(assignment, (2, 0))
        self.assertEqual(self.table.offset_of(assignment), 4)

        with self.assertRaises(ConfigurationError):
            self.table.assignment_of({"type": "double"})

    def test_offset_of_tokens(self):
        """Test resolving token sequences."""
        self.assertEqual(self.table.offset_of_tokens(["typetop", "waterloggedtrue"]), 3)

        with self.assertRaises(InvalidStateError):
            self.table.offset_of_tokens(["typetop"])
        with self.assertRaises(InvalidStateError):
            self.table.offset_of_tokens(["typesideways", "waterloggedtrue"])

    def test_missing_entries(self):
        """Test that absent keys raise instead of defaulting."""
        with self.assertRaises(InvalidStateError):
            self.table.assignment_at(6)
        with self.assertRaises(InvalidStateError):
            self.table.assignment_at(-1)
        with self.assertRaises(InvalidStateError):
            self.table.offset_of((3, 0))
        with self.assertRaises(InvalidStateError):
            self.table.offset_of((0,))


if __name__ == '__main__':
    unittest.main()
