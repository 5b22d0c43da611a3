# -*- coding: utf-8 -*-
"""
Matrix Generator Module

Turns an arbitrary string into a fixed 21x21 pseudo-matrix code. Structural
regions (finders, timing lines) are the same for every input; the remaining
cells are derived from a simple checksum of the string.

Functions:
    checksum: Sum of the character codes of a string
    data_modules_coords: Cell visiting order of the data pass
    generate_matrix: Build the matrix for a string
"""

import logging
from typing import List, Tuple

from .functional_areas import (
    MATRIX_SIZE,
    FINDER_SIZE,
    TIMING_INDEX,
    finder_pattern,
    is_reserved,
)

logger = logging.getLogger(__name__)

Matrix = Tuple[Tuple[bool, ...], ...]


def checksum(value: str) -> int:
    """
    Sum the character codes of ``value``.

    Characters are counted as UTF-16 code units, so a character outside the
    BMP contributes both halves of its surrogate pair. For every other
    character this is its code point. The empty string sums to 0.

    Args:
        value (str): Encoded value

    Returns:
        int: Non-negative checksum
    """
    units = value.encode('utf-16-le', 'surrogatepass')
    return sum(int.from_bytes(units[i:i + 2], 'little') for i in range(0, len(units), 2))


def data_modules_coords(size: int = MATRIX_SIZE) -> List[Tuple[int, int]]:
    """
    Get coordinates of non-reserved modules in data placement order.

    Column pairs are swept from the right edge to the left, top to bottom in
    every pair, right column first. Column 6 holds the timing line, so the pair
    that would start on it starts on column 5 instead.

    Args:
        size (int): Matrix dimension

    Returns:
        List[Tuple[int, int]]: (row, col) coordinates in placement order
    """
    coords = []
    col = size - 1

    while col > 0:
        if col == TIMING_INDEX:
            col -= 1

        for r in range(size):
            for c in (col, col - 1):
                if not is_reserved(c, r, size):
                    coords.append((r, c))

        col -= 2

    return coords


def generate_matrix(value: str) -> Matrix:
    """
    Generate the pseudo-matrix code for ``value``.

    The result depends only on the checksum of ``value``: strings whose
    character codes sum to the same number produce the same matrix.

    Args:
        value (str): Any string, including the empty string

    Returns:
        Matrix: 21 rows of 21 booleans (True=dark)

    Example:
        >>> matrix = generate_matrix("XJO-1")
        >>> len(matrix), len(matrix[0])
        (21, 21)
    """
    size = MATRIX_SIZE
    grid = [[False] * size for _ in range(size)]

    # 1. FINDER PATTERNS, one block mirrored into three corners
    block = finder_pattern()
    for i in range(FINDER_SIZE):
        for j in range(FINDER_SIZE):
            grid[i][j] = block[i][j]
            grid[i][size - 1 - j] = block[i][j]
            grid[size - 1 - i][j] = block[i][j]

    # 2. TIMING PATTERNS on row 6 and column 6
    for i in range(8, size - 8):
        grid[TIMING_INDEX][i] = i % 2 == 0
        grid[i][TIMING_INDEX] = i % 2 == 0

    # 3. DATA, one shared sequence index over the whole sweep
    data_hash = checksum(value)
    for index, (r, c) in enumerate(data_modules_coords(size)):
        grid[r][c] = ((data_hash + index) * 7) % 3 == 0

    matrix = tuple(tuple(row) for row in grid)
    logger.debug("Generated matrix: checksum=%d, dark=%d",
                 data_hash, sum(sum(row) for row in matrix))
    return matrix
