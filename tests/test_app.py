"""Tests for the Flask front end."""

from __future__ import annotations

from io import BytesIO

import pytest
from PIL import Image


class TestIndex:
    def test_get_shows_form(self, client) -> None:
        resp = client.get('/')
        assert resp.status_code == 200
        assert b'<form method="post">' in resp.data

    def test_post_renders_preview(self, client) -> None:
        resp = client.post('/', data={'value': 'XJO-1', 'size': '180'})
        assert resp.status_code == 200
        assert b'data:image/svg+xml;base64,' in resp.data
        assert b'Checksum: 335' in resp.data
        assert b'Modules: 441 (185 dark)' in resp.data

    def test_post_invalid_size_shows_error(self, client) -> None:
        resp = client.post('/', data={'value': 'XJO-1', 'size': '-3'})
        assert resp.status_code == 200
        assert b'Could not render the code' in resp.data


class TestApiPlan:
    def test_plan_json(self, client) -> None:
        resp = client.get('/api/plan', query_string={'value': 'XJO-1', 'size': '180'})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['size'] == 180
        assert len(data['cells']) == 185
        assert data['logo']['x'] + data['logo']['width'] / 2 == 90

    def test_default_size(self, client) -> None:
        data = client.get('/api/plan', query_string={'value': 'XJO-1'}).get_json()
        assert data['size'] == 180

    @pytest.mark.parametrize("size", ['0', '-10', 'abc', 'nan', '99999'])
    def test_invalid_size(self, client, size: str) -> None:
        resp = client.get('/api/plan', query_string={'value': 'XJO-1', 'size': size})
        assert resp.status_code == 400
        assert 'error' in resp.get_json()


class TestExports:
    def test_svg(self, client) -> None:
        resp = client.get('/export/svg', query_string={'value': 'XJO-1', 'size': '210'})
        assert resp.status_code == 200
        assert resp.mimetype == 'image/svg+xml'
        assert b'viewBox="0 0 210 210"' in resp.data

    def test_png(self, client) -> None:
        resp = client.get('/export/png', query_string={'value': 'XJO-1', 'size': '180', 'scale': '2'})
        assert resp.status_code == 200
        assert resp.mimetype == 'image/png'
        assert Image.open(BytesIO(resp.data)).size == (360, 360)

    def test_png_invalid_size(self, client) -> None:
        resp = client.get('/export/png', query_string={'value': 'XJO-1', 'size': '0'})
        assert resp.status_code == 400
