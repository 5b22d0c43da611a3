#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Display - Flask Web Application
"""

import base64
import logging
from io import BytesIO
from typing import Tuple

from flask import Flask, jsonify, render_template_string, request, send_file

from qrdisplay.functional_areas import matrix_metrics
from qrdisplay.qr_generator import checksum, generate_matrix
from qrdisplay.renderer import (
    DEFAULT_SIZE,
    plan_to_dict,
    render_plan,
    render_png_from_plan,
    render_svg_from_plan,
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MAX_SIZE = 2048
MAX_SCALE = 8

app = Flask(__name__)
app.config.update(DEFAULT_SIZE=DEFAULT_SIZE, MAX_SIZE=MAX_SIZE)
app.config.from_prefixed_env("QRDISPLAY")

INDEX_HTML = """<!doctype html>
<html>
<head><meta charset="utf-8"><title>QR Display</title></head>
<body>
  <h1>QR Display</h1>
  <form method="post">
    <label>Value <input name="value" value="{{ value }}"></label>
    <label>Size <input name="size" value="{{ size }}"></label>
    <button type="submit">Render</button>
  </form>
  {% if error %}<p class="error">{{ error }}</p>{% endif %}
  {% if qr %}
  <img alt="code" src="data:image/svg+xml;base64,{{ qr.img_b64 }}" width="{{ qr.size }}" height="{{ qr.size }}">
  <ul>
    <li>Checksum: {{ qr.checksum }}</li>
    <li>Modules: {{ qr.modules }} ({{ qr.dark_modules }} dark)</li>
    <li>Reserved modules: {{ qr.reserved_modules }}</li>
    <li>Data modules: {{ qr.data_modules }}</li>
    <li>Cell size: {{ "%.4f"|format(qr.cell_size) }}</li>
  </ul>
  <p>
    <a href="{{ url_for('export_svg', value=value, size=size) }}">SVG</a>
    <a href="{{ url_for('export_png', value=value, size=size) }}">PNG</a>
    <a href="{{ url_for('api_plan', value=value, size=size) }}">JSON</a>
  </p>
  {% endif %}
</body>
</html>
"""


def _read_params(req) -> Tuple[str, float, int]:
    """Extract and validate render parameters from a Flask request."""
    value = req.values.get('value') or ""
    raw_size = req.values.get('size') or app.config['DEFAULT_SIZE']

    try:
        size = float(raw_size)
    except (ValueError, TypeError):
        raise ValueError(f"Invalid size: {raw_size!r}")
    if size > app.config['MAX_SIZE']:
        raise ValueError(f"Size must not exceed {app.config['MAX_SIZE']}")
    if size.is_integer():
        size = int(size)

    try:
        scale = int(req.values.get('scale') or 1)
        if scale < 1 or scale > MAX_SCALE:
            scale = 1
    except (ValueError, TypeError):
        scale = 1

    return value, size, scale


@app.route('/', methods=['GET', 'POST'])
def index():
    value = ""
    size = app.config['DEFAULT_SIZE']
    qr_view = None
    error = None

    if request.method == 'POST':
        try:
            value, size, _ = _read_params(request)
            logger.info(f"Rendering code: len={len(value)}, size={size}")
            matrix = generate_matrix(value)
            plan = render_plan(matrix, size)
        except ValueError as ex:
            error = f"Could not render the code: {ex}"
            logger.warning(f"Render rejected: {ex}")
            plan = None

        if plan:
            metrics = matrix_metrics(matrix)
            qr_view = {
                'img_b64': base64.b64encode(render_svg_from_plan(plan)).decode(),
                'size': size,
                'cell_size': plan.cell_size,
                'checksum': checksum(value),
                'modules': metrics['modules'],
                'dark_modules': metrics['dark_modules'],
                'reserved_modules': metrics['reserved_modules'],
                'data_modules': metrics['data_modules'],
            }

    return render_template_string(INDEX_HTML, value=value, size=size, qr=qr_view, error=error)


@app.route('/export/svg', methods=['GET'])
def export_svg():
    try:
        value, size, _ = _read_params(request)
        plan = render_plan(generate_matrix(value), size)
    except ValueError as ex:
        logger.warning(f"SVG export rejected: {ex}")
        return str(ex), 400
    return send_file(BytesIO(render_svg_from_plan(plan)), as_attachment=True,
                     download_name='qr_display.svg', mimetype='image/svg+xml')


@app.route('/export/png', methods=['GET'])
def export_png():
    try:
        value, size, scale = _read_params(request)
        plan = render_plan(generate_matrix(value), size)
    except ValueError as ex:
        logger.warning(f"PNG export rejected: {ex}")
        return str(ex), 400
    return send_file(BytesIO(render_png_from_plan(plan, scale=scale)), as_attachment=True,
                     download_name='qr_display.png', mimetype='image/png')


@app.route('/api/plan', methods=['GET'])
def api_plan():
    try:
        value, size, _ = _read_params(request)
        plan = render_plan(generate_matrix(value), size)
    except ValueError as ex:
        logger.warning(f"Plan request rejected: {ex}")
        return jsonify({'error': str(ex)}), 400
    return jsonify(plan_to_dict(plan))


if __name__ == "__main__":
    app.run(debug=True)
