"""Mixed-radix state tables.

A state table enumerates every combination of a property list's values and
maps each one to a dense offset. The first property is the most significant
digit and the last property varies fastest, so for ``[A(2), B(3)]`` offsets
0..2 share A's first value and offsets 3..5 share its second.

Assignments are tuples of value indices, one per property, in property order.
Token strings (``name + value``) are only produced for logging and debugging.
"""

import logging
from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np

from .errors import ConfigurationError, InvalidStateError
from .properties import Property

logger = logging.getLogger("mcstate.core.state_table")

Assignment = Tuple[int, ...]


class StateTable:
    """Immutable bijection between assignments and state offsets."""

    __slots__ = ("_properties", "_forward", "_reverse", "_token_digits")

    def __init__(
        self,
        properties: Tuple[Property, ...],
        forward: Dict[Assignment, int],
        reverse: Dict[int, Assignment],
    ):
        self._properties = properties
        self._forward = forward
        self._reverse = reverse
        self._token_digits = [
            {prop.token(i): i for i in range(len(prop))} for prop in properties
        ]

    @classmethod
    def build(cls, properties: Sequence[Property]) -> "StateTable":
        """Enumerate all assignments of ``properties``."""
        properties = tuple(properties)
        sizes = tuple(len(prop) for prop in properties)
        total = 1
        for size in sizes:
            total *= size

        forward: Dict[Assignment, int] = {}
        reverse: Dict[int, Assignment] = {}

        if not properties:
            forward[()] = 0
            reverse[0] = ()
            return cls(properties, forward, reverse)

        # C order: the last axis varies fastest
        digits = np.unravel_index(np.arange(total, dtype=np.int64), sizes)
        rows = np.column_stack(digits).tolist()

        for offset, row in enumerate(rows):
            assignment = tuple(row)
            forward[assignment] = offset
            reverse[offset] = assignment

        logger.debug(
            f"Built state table for {[prop.name for prop in properties]} "
            f"with {total} states"
        )
        return cls(properties, forward, reverse)

    @property
    def properties(self) -> Tuple[Property, ...]:
        return self._properties

    @property
    def total(self) -> int:
        return len(self._reverse)

    def __len__(self) -> int:
        return len(self._reverse)

    def __iter__(self) -> Iterator[Tuple[int, Assignment]]:
        for offset in range(len(self._reverse)):
            yield offset, self._reverse[offset]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateTable):
            return NotImplemented
        return (
            self._properties == other._properties
            and self._forward == other._forward
            and self._reverse == other._reverse
        )

    def offset_of(self, assignment: Sequence[int]) -> int:
        """Forward lookup: assignment -> offset."""
        try:
            return self._forward[tuple(assignment)]
        except KeyError:
            raise InvalidStateError(
                f"Assignment {tuple(assignment)} is not in the state table"
            ) from None

    def assignment_at(self, offset: int) -> Assignment:
        """Reverse lookup: offset -> assignment."""
        try:
            return self._reverse[offset]
        except KeyError:
            raise InvalidStateError(
                f"Offset {offset} is not in the state table (total {self.total})"
            ) from None

    def assignment_of(self, values: Dict[str, str]) -> Assignment:
        """Build an assignment from a ``{property name: value}`` mapping."""
        missing = [prop.name for prop in self._properties if prop.name not in values]
        if missing:
            raise ConfigurationError(f"Missing values for properties: {missing}")
        return tuple(prop.index(values[prop.name]) for prop in self._properties)

    def tokens_at(self, offset: int) -> List[str]:
        assignment = self.assignment_at(offset)
        return [
            prop.token(digit) for prop, digit in zip(self._properties, assignment)
        ]

    def values_at(self, offset: int) -> Dict[str, str]:
        assignment = self.assignment_at(offset)
        return {
            prop.name: prop.values[digit]
            for prop, digit in zip(self._properties, assignment)
        }

    def offset_of_tokens(self, tokens: Sequence[str]) -> int:
        """Resolve a ``name + value`` token sequence to its offset."""
        if len(tokens) != len(self._properties):
            raise InvalidStateError(
                f"Expected {len(self._properties)} tokens, got {len(tokens)}"
            )
        assignment = []
        for lookup, token in zip(self._token_digits, tokens):
            if token not in lookup:
                raise InvalidStateError(f"Unknown token '{token}'")
            assignment.append(lookup[token])
        return self.offset_of(assignment)
