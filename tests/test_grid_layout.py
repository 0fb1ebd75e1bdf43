from __future__ import annotations

import unittest

from multipage_layout.contracts import Grid, SheetSize
from multipage_layout.errors import InvalidParameter, TransformError
from multipage_layout.grid import (
    compute_grid,
    fit_scale,
    place_page,
    sheet_count,
    validate_pages_per_sheet,
)


class TestPagesPerSheetValidation(unittest.TestCase):
    def test_accepts_two_three_and_perfect_squares(self) -> None:
        for n in (1, 2, 3, 4, 9, 16, 25, 36):
            with self.subTest(n=n):
                validate_pages_per_sheet(n)

    def test_rejects_everything_else(self) -> None:
        for n in (5, 6, 7, 8, 10, 15, 0, -1, -4):
            with self.subTest(n=n):
                with self.assertRaises(InvalidParameter):
                    validate_pages_per_sheet(n)

    def test_rejects_non_integers(self) -> None:
        for n in (4.0, "4", None, True):
            with self.subTest(n=n):
                with self.assertRaises(InvalidParameter):
                    validate_pages_per_sheet(n)  # type: ignore[arg-type]

    def test_invalid_parameter_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            validate_pages_per_sheet(5)


class TestComputeGrid(unittest.TestCase):
    def test_two_and_three_are_a_single_row(self) -> None:
        self.assertEqual(compute_grid(2), Grid(columns=2, rows=1))
        self.assertEqual(compute_grid(3), Grid(columns=3, rows=1))

    def test_perfect_squares_are_square(self) -> None:
        self.assertEqual(compute_grid(4), Grid(columns=2, rows=2))
        self.assertEqual(compute_grid(9), Grid(columns=3, rows=3))
        self.assertEqual(compute_grid(16), Grid(columns=4, rows=4))

    def test_capacity_matches_pages_per_sheet(self) -> None:
        for n in (2, 3, 4, 9, 16):
            with self.subTest(n=n):
                self.assertEqual(compute_grid(n).capacity, n)

    def test_sheet_count(self) -> None:
        grid = compute_grid(4)
        self.assertEqual(sheet_count(0, grid), 1)
        self.assertEqual(sheet_count(3, grid), 1)
        self.assertEqual(sheet_count(4, grid), 1)
        self.assertEqual(sheet_count(5, grid), 2)
        self.assertEqual(sheet_count(9, grid), 3)


class TestFitScale(unittest.TestCase):
    def test_exact_fit_is_one(self) -> None:
        self.assertEqual(fit_scale(300.0, 400.0, 300.0, 400.0), 1.0)

    def test_double_width_page_is_width_bound(self) -> None:
        self.assertEqual(fit_scale(300.0, 400.0, 600.0, 400.0), 0.5)

    def test_small_pages_are_upscaled(self) -> None:
        self.assertEqual(fit_scale(300.0, 400.0, 100.0, 100.0), 3.0)

    def test_non_positive_page_size_fails(self) -> None:
        with self.assertRaises(TransformError):
            fit_scale(300.0, 400.0, 0.0, 400.0)


class TestPlacePage(unittest.TestCase):
    W = 600.0
    H = 800.0

    def _place(self, index: int, grid: Grid, page_width: float = 300.0, page_height: float = 400.0):
        return place_page(
            index=index,
            page_width=page_width,
            page_height=page_height,
            grid=grid,
            sheet_width=self.W,
            sheet_height=self.H,
        )

    def test_two_by_two_first_page_is_top_left(self) -> None:
        p = self._place(0, compute_grid(4))
        self.assertEqual((p.column, p.row, p.sheet_index), (0, 0, 0))
        self.assertEqual(p.scale, 1.0)
        self.assertAlmostEqual(p.x, 0.0)
        self.assertAlmostEqual(p.y, 400.0)

    def test_two_by_two_last_page_is_bottom_right(self) -> None:
        p = self._place(3, compute_grid(4))
        self.assertEqual((p.column, p.row, p.sheet_index), (1, 1, 0))
        self.assertAlmostEqual(p.x, 300.0)
        self.assertAlmostEqual(p.y, 0.0)

    def test_row_major_assignment(self) -> None:
        grid = compute_grid(9)
        cells = [(p.column, p.row) for p in (self._place(i, grid) for i in range(9))]
        self.assertEqual(
            cells,
            [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1), (0, 2), (1, 2), (2, 2)],
        )

    def test_scaled_page_is_centered_in_its_cell(self) -> None:
        # 2-up on 600x800: cells are 300x800; a 300x400 page fits exactly in width.
        p = self._place(1, compute_grid(2))
        self.assertEqual(p.scale, 1.0)
        self.assertAlmostEqual(p.x, 300.0)
        self.assertAlmostEqual(p.y, 200.0)

        # Wide page: 600x400 into a 300x800 cell -> scale 0.5, centered vertically.
        p = self._place(0, compute_grid(2), page_width=600.0, page_height=400.0)
        self.assertEqual(p.scale, 0.5)
        self.assertAlmostEqual(p.x, 0.0)
        self.assertAlmostEqual(p.y, 300.0)

    def test_pages_beyond_capacity_start_a_new_sheet(self) -> None:
        grid = compute_grid(2)
        placed = [self._place(i, grid) for i in range(4)]
        self.assertEqual([p.sheet_index for p in placed], [0, 0, 1, 1])
        self.assertEqual([p.column for p in placed], [0, 1, 0, 1])
        for p in placed:
            with self.subTest(index=p.source_index):
                self.assertGreaterEqual(p.x, 0.0)
                self.assertGreaterEqual(p.y, 0.0)
                self.assertLessEqual(p.x + p.width * p.scale, self.W + 1e-9)
                self.assertLessEqual(p.y + p.height * p.scale, self.H + 1e-9)

    def test_a4_dimensions(self) -> None:
        width, height = SheetSize.A4.dimensions
        self.assertAlmostEqual(width, 595.2756, places=3)
        self.assertAlmostEqual(height, 841.8898, places=3)


if __name__ == "__main__":
    unittest.main()
