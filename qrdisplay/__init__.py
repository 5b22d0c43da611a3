# -*- coding: utf-8 -*-
"""
QR Display - Core Module

Deterministic pseudo-matrix code generator and renderer. A string is turned
into a fixed 21x21 matrix that looks like a 2D barcode, then into a render plan
of rectangles that any 2D backend can draw. The codes are decorative: there is
no error correction and they are not meant to be scanned.

Modules:
    functional_areas: Finder/timing layout and the reserved-cell predicate
    qr_generator: Matrix generation from a string
    renderer: Render plans and their SVG/PNG backends
    analyzer: Sampling rendered images back into matrices
    payload: Payment request values
"""

__version__ = "1.0.0"

from .functional_areas import MATRIX_SIZE, is_reserved, build_reserved_mask, matrix_metrics
from .qr_generator import checksum, data_modules_coords, generate_matrix
from .renderer import (
    InvalidCanvasSizeError,
    RenderPlan,
    build_render_plan,
    plan_to_dict,
    render_plan,
    render_png_from_plan,
    render_svg_from_plan,
)
from .payload import payment_payload

__all__ = [
    'MATRIX_SIZE',
    'is_reserved',
    'build_reserved_mask',
    'matrix_metrics',
    'checksum',
    'data_modules_coords',
    'generate_matrix',
    'InvalidCanvasSizeError',
    'RenderPlan',
    'build_render_plan',
    'plan_to_dict',
    'render_plan',
    'render_png_from_plan',
    'render_svg_from_plan',
    'payment_payload',
]
