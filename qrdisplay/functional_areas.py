# -*- coding: utf-8 -*-
"""
Functional Areas Module

This module owns the structural layout of the pseudo-matrix code: the three
corner finder patterns, the two timing lines and the reserved-region predicate
that keeps the data pass away from them.

Functions:
    finder_pattern: Build the 7x7 nested-ring finder block
    is_reserved: Tell whether a cell belongs to a structural region
    build_reserved_mask: Reserved predicate evaluated over a whole matrix
    matrix_metrics: Module counts for a generated matrix
"""

from typing import Dict, List, Sequence, Tuple

# Fixed dimension of every generated matrix
MATRIX_SIZE = 21

# Finder block side and the side of the reserved box around it
FINDER_SIZE = 7
RESERVED_BOX = 8

# Row and column carrying the timing lines
TIMING_INDEX = 6


def finder_pattern() -> List[List[bool]]:
    """
    Build the 7x7 finder block.

    Pattern: 1111111
             1000001
             1011101
             1011101
             1011101
             1000001
             1111111

    Returns:
        List[List[bool]]: block[i][j] = True if the module is dark
    """
    last = FINDER_SIZE - 1
    block = []
    for i in range(FINDER_SIZE):
        row = []
        for j in range(FINDER_SIZE):
            border = i in (0, last) or j in (0, last)
            core = 2 <= i <= 4 and 2 <= j <= 4
            row.append(border or core)
        block.append(row)
    return block


def finder_origins(size: int = MATRIX_SIZE) -> List[Tuple[int, int]]:
    """Top-left (row, col) of the three finder blocks."""
    return [(0, 0), (0, size - FINDER_SIZE), (size - FINDER_SIZE, 0)]


def is_reserved(x: int, y: int, size: int = MATRIX_SIZE) -> bool:
    """
    Tell whether the cell at column ``x``, row ``y`` is structural.

    The three 8x8 corner boxes are reserved in full, not just the 7x7 finder
    blocks, together with the whole of row 6 and column 6.

    Args:
        x (int): Column index
        y (int): Row index
        size (int): Matrix dimension

    Returns:
        bool: True if the data pass must leave the cell alone
    """
    if x < RESERVED_BOX and y < RESERVED_BOX:
        return True
    if x < RESERVED_BOX and y >= size - RESERVED_BOX:
        return True
    if x >= size - RESERVED_BOX and y < RESERVED_BOX:
        return True
    return x == TIMING_INDEX or y == TIMING_INDEX


def build_reserved_mask(size: int = MATRIX_SIZE) -> List[List[bool]]:
    """Return mask[r][c] = True for every reserved cell."""
    return [[is_reserved(c, r, size) for c in range(size)] for r in range(size)]


def matrix_metrics(matrix: Sequence[Sequence[bool]]) -> Dict[str, int]:
    """
    Count modules of a generated matrix.

    Args:
        matrix (Sequence[Sequence[bool]]): Matrix rows (True=dark)

    Returns:
        Dict[str, int]: size, modules, dark_modules, reserved_modules,
            data_modules
    """
    rows = list(matrix)
    size = len(rows)
    reserved = sum(sum(1 for c in row if c) for row in build_reserved_mask(size))

    return {
        'size': size,
        'modules': size * size,
        'dark_modules': sum(sum(1 for c in row if c) for row in rows),
        'reserved_modules': reserved,
        'data_modules': size * size - reserved,
    }


# Layout of the 21x21 matrix (for documentation)
"""
   0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0
 0 F F F F F F F R D D D D D R F F F F F F F
 1 F F F F F F F R D D D D D R F F F F F F F
 ...
 6 F F F F F F F R T T T T T R F F F F F F F
 7 R R R R R R R R D D D D D R R R R R R R R
 8 D D D D D D T D D D D D D D D D D D D D D
 ...
12 D D D D D D T D D D D D D D D D D D D D D
13 R R R R R R R R D D D D D D D D D D D D D
14 F F F F F F F R D D D D D D D D D D D D D
 ...
20 F F F F F F F R D D D D D D D D D D D D D

Legend:
F = Finder pattern (7x7)
R = Reserved, never written by the data pass
T = Timing pattern (row/col 6, indices 8..12)
D = Data
"""
