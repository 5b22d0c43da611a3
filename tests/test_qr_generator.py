"""Tests for qrdisplay.qr_generator: deterministic matrix generation."""

from __future__ import annotations

import pytest

from qrdisplay.functional_areas import build_reserved_mask
from qrdisplay.qr_generator import checksum, data_modules_coords, generate_matrix


SAMPLES = ["", "a", "XJO-1", "a very long arbitrary string" * 20, "ñandú €", "😀"]


def _reserved_values(matrix):
    mask = build_reserved_mask()
    return [matrix[r][c] for r in range(21) for c in range(21) if mask[r][c]]


# ── checksum ────────────────────────────────────────────────────────


class TestChecksum:
    def test_empty_string(self) -> None:
        assert checksum("") == 0

    def test_sums_character_codes(self) -> None:
        assert checksum("XJO-1") == 88 + 74 + 79 + 45 + 49

    def test_order_insensitive(self) -> None:
        assert checksum("ab") == checksum("ba") == 195

    def test_non_bmp_counts_surrogate_pair(self) -> None:
        assert checksum("😀") == 0xD83D + 0xDE00


# ── data_modules_coords ─────────────────────────────────────────────


class TestDataModulesCoords:
    def test_visits_every_data_cell_once(self) -> None:
        coords = data_modules_coords()
        mask = build_reserved_mask()
        expected = {(r, c) for r in range(21) for c in range(21) if not mask[r][c]}
        assert len(coords) == 239
        assert len(set(coords)) == len(coords)
        assert set(coords) == expected

    def test_starts_top_of_rightmost_pair(self) -> None:
        assert data_modules_coords()[:4] == [(8, 20), (8, 19), (9, 20), (9, 19)]

    def test_ends_in_leftmost_pair(self) -> None:
        assert data_modules_coords()[-2:] == [(12, 1), (12, 0)]

    def test_skips_timing_column(self) -> None:
        coords = data_modules_coords()
        assert all(c != 6 for _, c in coords)
        i = coords.index((8, 5))
        assert coords[i + 1] == (8, 4)
        # column 7 is the left half of the (8, 7) pair
        j = coords.index((8, 8))
        assert coords[j + 1] == (8, 7)


# ── generate_matrix ─────────────────────────────────────────────────


class TestGenerateMatrix:
    @pytest.mark.parametrize("value", SAMPLES)
    def test_fixed_dimension(self, value: str) -> None:
        matrix = generate_matrix(value)
        assert len(matrix) == 21
        assert all(len(row) == 21 for row in matrix)

    @pytest.mark.parametrize("value", SAMPLES)
    def test_deterministic(self, value: str) -> None:
        assert generate_matrix(value) == generate_matrix(value)

    def test_immutable(self) -> None:
        matrix = generate_matrix("XJO-1")
        assert isinstance(matrix, tuple)
        assert all(isinstance(row, tuple) for row in matrix)

    def test_structural_cells_do_not_depend_on_input(self) -> None:
        base = _reserved_values(generate_matrix(""))
        assert _reserved_values(generate_matrix("a")) == base
        assert _reserved_values(generate_matrix("a very long arbitrary string")) == base

    @pytest.mark.parametrize("value", SAMPLES)
    def test_finder_symmetry(self, value: str) -> None:
        m = generate_matrix(value)
        for i in range(7):
            for j in range(7):
                assert m[i][j] == m[i][20 - j] == m[20 - i][j]

    def test_timing_lines(self) -> None:
        m = generate_matrix("timing")
        for i in range(8, 13):
            assert m[6][i] == (i % 2 == 0)
            assert m[i][6] == (i % 2 == 0)

    def test_separator_cells_stay_light(self) -> None:
        m = generate_matrix("XJO-1")
        assert not any(m[7][c] for c in range(8))
        assert not any(m[r][7] for r in range(8))
        assert not m[6][7] and not m[6][13]

    def test_checksum_collision_gives_same_matrix(self) -> None:
        assert generate_matrix("ab") == generate_matrix("ba")

    def test_data_cells_follow_checksum(self) -> None:
        empty = generate_matrix("")
        assert empty[8][20] is True
        assert empty[8][19] is False
        assert empty[9][20] is False
        assert empty[9][19] is True

        a = generate_matrix("a")  # checksum 97, 97 % 3 == 1
        assert a[8][20] is False
        assert a[9][20] is True

    def test_dark_module_count(self) -> None:
        assert sum(map(sum, generate_matrix(""))) == 185
        assert sum(map(sum, generate_matrix("XJO-1"))) == 185

    def test_different_checksums_differ(self) -> None:
        assert generate_matrix("a") != generate_matrix("b")
