# -*- coding: utf-8 -*-
"""
Grid Renderer Module

Turns a boolean matrix into a render plan: one background rectangle, one
rectangle per dark cell and a centered logo patch drawn on top. The plan is
plain data and can be drawn by any backend; SVG and PNG backends are provided.

Functions:
    render_plan: Build the render plan for a matrix
    build_render_plan: Generate and render a string in one call
    plan_to_dict: JSON-serialisable view of a plan
    render_svg_from_plan: Draw a plan as SVG
    rasterize_plan: Draw a plan onto a Pillow image
    render_png_from_plan: Draw a plan as PNG bytes
"""

import logging
import math
from io import BytesIO
from numbers import Real
from typing import Any, Dict, NamedTuple, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from .qr_generator import generate_matrix

logger = logging.getLogger(__name__)

# Color palette
PALETTE = {
    'background': '#FFFFFF',
    'foreground': '#1B3A2F',
}

DEFAULT_SIZE = 180

# Logo patch side, fixed regardless of canvas size
LOGO_SIZE = 44.0
LOGO_LABEL = 'XJO'


class InvalidCanvasSizeError(ValueError):
    """Raised when a canvas size is not a positive finite number."""


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float
    fill: str


class LogoPatch(NamedTuple):
    x: float
    y: float
    width: float
    height: float
    fill: str
    label: str
    label_color: str


class RenderPlan(NamedTuple):
    size: float
    cell_size: float
    background: Rect
    cells: Tuple[Rect, ...]
    logo: LogoPatch


def _check_canvas_size(canvas_size: Any) -> float:
    if isinstance(canvas_size, bool) or not isinstance(canvas_size, Real):
        raise InvalidCanvasSizeError(f"Canvas size must be a number, got {canvas_size!r}")
    if not math.isfinite(canvas_size) or canvas_size <= 0:
        raise InvalidCanvasSizeError(f"Canvas size must be positive and finite, got {canvas_size!r}")
    return canvas_size


def render_plan(matrix: Sequence[Sequence[bool]], canvas_size: float) -> RenderPlan:
    """
    Build the render plan for ``matrix`` on a square canvas.

    Cell geometry uses exact real division, so canvas sizes that are not a
    multiple of the matrix dimension give fractional cell sizes.

    Args:
        matrix (Sequence[Sequence[bool]]): Square matrix (True=dark)
        canvas_size (float): Canvas side, must be positive

    Returns:
        RenderPlan: background, dark cells in row-major order, logo patch

    Raises:
        InvalidCanvasSizeError: If canvas_size is not a positive finite number
        ValueError: If the matrix is empty or not square

    Example:
        >>> plan = render_plan(generate_matrix("XJO-1"), 180)
        >>> plan.background.width
        180
    """
    size = _check_canvas_size(canvas_size)
    rows = list(matrix)
    n = len(rows)
    if n == 0 or any(len(row) != n for row in rows):
        raise ValueError("Matrix must be square and non-empty")

    cell_size = size / n
    fg = PALETTE['foreground']
    bg = PALETTE['background']

    cells = tuple(
        Rect(c * cell_size, r * cell_size, cell_size, cell_size, fg)
        for r in range(n)
        for c in range(n)
        if rows[r][c]
    )

    offset = (size - LOGO_SIZE) / 2
    logo = LogoPatch(offset, offset, LOGO_SIZE, LOGO_SIZE, bg, LOGO_LABEL, fg)

    return RenderPlan(size, cell_size, Rect(0, 0, size, size, bg), cells, logo)


def build_render_plan(value: str, size: float = DEFAULT_SIZE) -> RenderPlan:
    """Generate the matrix for ``value`` and render it on a ``size`` canvas."""
    plan = render_plan(generate_matrix(value), size)
    logger.debug("Render plan: size=%s, cells=%d", size, len(plan.cells))
    return plan


def plan_to_dict(plan: RenderPlan) -> Dict[str, Any]:
    return {
        'size': plan.size,
        'cell_size': plan.cell_size,
        'background': plan.background._asdict(),
        'cells': [cell._asdict() for cell in plan.cells],
        'logo': plan.logo._asdict(),
    }


def _fmt(v: float) -> str:
    return ('%.4f' % v).rstrip('0').rstrip('.')


def render_svg_from_plan(plan: RenderPlan) -> bytes:
    """
    Draw a render plan as SVG.

    Args:
        plan (RenderPlan): Plan from render_plan

    Returns:
        bytes: UTF-8 encoded SVG content
    """
    px = _fmt(plan.size)
    bg = plan.background
    logo = plan.logo

    out = []
    out.append('<?xml version="1.0" encoding="UTF-8"?>')
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{px}" height="{px}" viewBox="0 0 {px} {px}">')
    out.append(f'<rect x="0" y="0" width="{_fmt(bg.width)}" height="{_fmt(bg.height)}" fill="{bg.fill}"/>')

    for cell in plan.cells:
        out.append(f'<rect x="{_fmt(cell.x)}" y="{_fmt(cell.y)}" width="{_fmt(cell.width)}" '
                   f'height="{_fmt(cell.height)}" fill="{cell.fill}"/>')

    out.append(f'<rect x="{_fmt(logo.x)}" y="{_fmt(logo.y)}" width="{_fmt(logo.width)}" '
               f'height="{_fmt(logo.height)}" rx="8" fill="{logo.fill}"/>')
    cx = _fmt(logo.x + logo.width / 2)
    cy = _fmt(logo.y + logo.height / 2)
    out.append(f'<text x="{cx}" y="{cy}" text-anchor="middle" dominant-baseline="central" '
               f'font-family="sans-serif" font-size="14" font-weight="800" letter-spacing="1" '
               f'fill="{logo.label_color}">{logo.label}</text>')
    out.append('</svg>')
    return "\n".join(out).encode("utf-8")


def _box(x: float, y: float, width: float, height: float, scale: float) -> list:
    # Edges rounded independently so neighbouring cells share their border
    x0, y0 = round(x * scale), round(y * scale)
    x1, y1 = round((x + width) * scale), round((y + height) * scale)
    return [x0, y0, max(x0, x1 - 1), max(y0, y1 - 1)]


def rasterize_plan(plan: RenderPlan, scale: float = 1) -> Image.Image:
    """
    Draw a render plan onto a new RGB image.

    Args:
        plan (RenderPlan): Plan from render_plan
        scale (float): Pixels per plan unit

    Returns:
        Image.Image: Image of round(plan.size * scale) pixels square
    """
    if scale <= 0:
        raise ValueError(f"Scale must be positive, got {scale!r}")

    img_px = max(1, round(plan.size * scale))
    img = Image.new('RGB', (img_px, img_px), plan.background.fill)
    draw = ImageDraw.Draw(img)

    for cell in plan.cells:
        draw.rectangle(_box(cell.x, cell.y, cell.width, cell.height, scale), fill=cell.fill)

    logo = plan.logo
    draw.rectangle(_box(logo.x, logo.y, logo.width, logo.height, scale), fill=logo.fill)

    font = ImageFont.load_default()
    left, top, right, bottom = draw.textbbox((0, 0), logo.label, font=font)
    tx = (logo.x + logo.width / 2) * scale - (left + right) / 2
    ty = (logo.y + logo.height / 2) * scale - (top + bottom) / 2
    draw.text((tx, ty), logo.label, fill=logo.label_color, font=font)

    return img


def render_png_from_plan(plan: RenderPlan, scale: float = 1) -> bytes:
    """Draw a render plan as PNG and return the encoded bytes."""
    buf = BytesIO()
    rasterize_plan(plan, scale).save(buf, format='PNG')
    return buf.getvalue()
