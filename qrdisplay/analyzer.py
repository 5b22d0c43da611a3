# -*- coding: utf-8 -*-
"""
Image Sampler Module

Reads a rasterized render plan back into a boolean matrix by sampling every
cell around its center. Used to check that what was drawn matches what was
generated.
"""

import logging
from typing import Iterable, List, Sequence, Set, Tuple

import numpy as np
from PIL import Image

from .functional_areas import MATRIX_SIZE
from .renderer import RenderPlan

logger = logging.getLogger(__name__)


def sample_module(gray: np.ndarray, r: int, c: int, cell: float) -> bool:
    """Average the middle half of cell (r, c); dark if below mid-gray."""
    h, w = gray.shape
    y0 = int(r * cell + cell * 0.25)
    x0 = int(c * cell + cell * 0.25)
    y1 = max(y0 + 1, int((r + 1) * cell - cell * 0.25))
    x1 = max(x0 + 1, int((c + 1) * cell - cell * 0.25))
    patch = gray[max(0, y0):min(h, y1), max(0, x0):min(w, x1)]
    return bool(patch.mean() < 128)


def sample_matrix(image: Image.Image, size: int = MATRIX_SIZE) -> List[List[bool]]:
    """
    Sample an image of a square grid back into a matrix.

    Args:
        image (Image.Image): Rendered grid without quiet zone
        size (int): Number of cells per side

    Returns:
        List[List[bool]]: matrix[r][c] = True if the cell is dark
    """
    gray = np.asarray(image.convert('L'), dtype=np.float32)
    cell = gray.shape[1] / size
    return [[sample_module(gray, r, c, cell) for c in range(size)] for r in range(size)]


def occluded_cells(plan: RenderPlan, size: int = MATRIX_SIZE) -> Set[Tuple[int, int]]:
    """(row, col) of every cell whose center lies under the logo patch."""
    logo = plan.logo
    hidden = set()
    for r in range(size):
        for c in range(size):
            cx = (c + 0.5) * plan.cell_size
            cy = (r + 0.5) * plan.cell_size
            if logo.x <= cx <= logo.x + logo.width and logo.y <= cy <= logo.y + logo.height:
                hidden.add((r, c))
    return hidden


def find_mismatches(
    sampled: Sequence[Sequence[bool]],
    expected: Sequence[Sequence[bool]],
    ignore: Iterable[Tuple[int, int]] = ()
) -> List[Tuple[int, int]]:
    """
    Compare a sampled matrix with the expected one.

    Args:
        sampled: Matrix read from an image
        expected: Matrix from generate_matrix
        ignore: (row, col) cells to skip, typically occluded_cells(plan)

    Returns:
        List[Tuple[int, int]]: Sorted (row, col) of differing cells
    """
    skip = set(ignore)
    diffs = [
        (r, c)
        for r, row in enumerate(expected)
        for c, value in enumerate(row)
        if (r, c) not in skip and bool(sampled[r][c]) != bool(value)
    ]
    if diffs:
        logger.info("Sampled matrix differs in %d cells", len(diffs))
    return diffs
