"""16-way neighbor classification for autotiling.

A tile that uses terrain variants is drawn with one of 16 pieces of art,
picked by which of its four orthogonal neighbors (up, right, down, left) hold
the same symbol. The pieces are stored in a fixed slot order shared by every
tile set:

    0       center (all four neighbors match)
    1-8     neighbor-presence variants clockwise from the top:
            upper edge, upper-right corner, right edge, bottom-right corner,
            bottom edge, bottom-left corner, left edge, upper-left corner
    9, 10   horizontal run, vertical run
    11-14   end caps clockwise from the top: upper, right, bottom, left
    15      isolated (no neighbor matches)

Neighbors outside the grid never match.
"""

from __future__ import annotations

import itertools

import numpy as np

SLOT_COUNT = 16

# Slot indices, named for readability at call sites and in tests.
CENTER = 0
UPPER_EDGE = 1
UPPER_RIGHT_CORNER = 2
RIGHT_EDGE = 3
BOTTOM_RIGHT_CORNER = 4
BOTTOM_EDGE = 5
BOTTOM_LEFT_CORNER = 6
LEFT_EDGE = 7
UPPER_LEFT_CORNER = 8
HORIZONTAL = 9
VERTICAL = 10
UPPER_END = 11
RIGHT_END = 12
BOTTOM_END = 13
LEFT_END = 14
ISOLATED = 15

# (up, right, down, left) -> slot
NEIGHBOR_SLOTS: dict[tuple[bool, bool, bool, bool], int] = {
    (True, True, True, True): CENTER,
    (False, True, True, True): UPPER_EDGE,
    (False, False, True, True): UPPER_RIGHT_CORNER,
    (True, False, True, True): RIGHT_EDGE,
    (True, False, False, True): BOTTOM_RIGHT_CORNER,
    (True, True, False, True): BOTTOM_EDGE,
    (True, True, False, False): BOTTOM_LEFT_CORNER,
    (True, True, True, False): LEFT_EDGE,
    (False, True, True, False): UPPER_LEFT_CORNER,
    (False, True, False, True): HORIZONTAL,
    (True, False, True, False): VERTICAL,
    (False, False, True, False): UPPER_END,
    (False, False, False, True): RIGHT_END,
    (True, False, False, False): BOTTOM_END,
    (False, True, False, False): LEFT_END,
    (False, False, False, False): ISOLATED,
}


class ExportError(Exception):
    """Base class for errors raised while exporting a map."""


class UnmappedClassification(ExportError):
    """Raised when the neighbor table doesn't give every pattern its own slot.

    Every combination of four booleans is in the table, so this signals a
    broken table rather than bad input.
    """

    def __init__(
        self,
        pattern: tuple[bool, bool, bool, bool],
        problem: str = "has no autotile slot",
    ) -> None:
        up, right, down, left = pattern
        super().__init__(
            f"Neighbor pattern up={up} right={right} down={down} left={left} "
            f"{problem}"
        )
        self.pattern = pattern


def classify(up: bool, right: bool, down: bool, left: bool) -> int:
    """Return the autotile slot for a set of matching neighbors."""
    pattern = (bool(up), bool(right), bool(down), bool(left))
    slot = NEIGHBOR_SLOTS.get(pattern)
    if slot is None:
        raise UnmappedClassification(pattern)
    return slot


def pattern_code(up, right, down, left):
    """Pack neighbor patterns into 4 bits: up=8, right=4, down=2, left=1.

    Takes booleans or boolean arrays of one shape.
    """
    return (
        (np.asarray(up, dtype=np.uint8) << 3)
        | (np.asarray(right, dtype=np.uint8) << 2)
        | (np.asarray(down, dtype=np.uint8) << 1)
        | np.asarray(left, dtype=np.uint8)
    )


def _build_slot_lookup() -> np.ndarray:
    """Slot for every 4-bit pattern code, checking the table is a bijection."""
    lookup = np.full(SLOT_COUNT, -1, dtype=np.int8)
    claimed: dict[int, tuple[bool, bool, bool, bool]] = {}
    for up, right, down, left in itertools.product((False, True), repeat=4):
        pattern = (up, right, down, left)
        slot = classify(*pattern)
        if slot in claimed:
            raise UnmappedClassification(
                pattern, f"reuses slot {slot} of {claimed[slot]}"
            )
        claimed[slot] = pattern
        lookup[int(pattern_code(*pattern))] = slot
    return lookup


# Indexed by pattern_code(). Built at import so a broken table fails fast.
SLOT_BY_CODE = _build_slot_lookup()


def same_neighbor_codes(tiles: np.ndarray) -> np.ndarray:
    """Pattern code of every cell in a (width, height) tile array.

    Each cell is compared with its four orthogonal neighbors; cells past the
    edge of the array never match.
    """
    width, height = tiles.shape
    up = np.zeros(tiles.shape, dtype=bool)
    right = np.zeros(tiles.shape, dtype=bool)
    down = np.zeros(tiles.shape, dtype=bool)
    left = np.zeros(tiles.shape, dtype=bool)
    if height > 1:
        up[:, 1:] = tiles[:, 1:] == tiles[:, :-1]
        down[:, :-1] = up[:, 1:]
    if width > 1:
        left[1:, :] = tiles[1:, :] == tiles[:-1, :]
        right[:-1, :] = left[1:, :]
    return pattern_code(up, right, down, left)


def neighbor_slots(tiles: np.ndarray) -> np.ndarray:
    """Autotile slot of every cell in a (width, height) tile array."""
    return SLOT_BY_CODE[same_neighbor_codes(tiles)]
