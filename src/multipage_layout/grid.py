from __future__ import annotations

import math

from .contracts import Grid, PlacedForm
from .errors import InvalidParameter, TransformError


def validate_pages_per_sheet(pages_per_sheet: int) -> None:
    """
    Accept 2, 3 or any perfect square (1, 4, 9, 16, 25, ...).

    Those are the only counts that give a rectangular grid with no empty
    row or column: 2 and 3 lay out as a single row, squares as k x k.
    """

    n = pages_per_sheet
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidParameter(
            "pagesPerSheet must be an integer",
            detail={"pages_per_sheet": repr(n)},
        )
    if n in (2, 3):
        return
    if n >= 1 and math.isqrt(n) ** 2 == n:
        return
    raise InvalidParameter(
        "pagesPerSheet must be 2, 3 or a perfect square (e.g. 4, 9, 16)",
        detail={"pages_per_sheet": n},
    )


def compute_grid(pages_per_sheet: int) -> Grid:
    validate_pages_per_sheet(pages_per_sheet)
    if pages_per_sheet in (2, 3):
        return Grid(columns=pages_per_sheet, rows=1)
    k = math.isqrt(pages_per_sheet)
    return Grid(columns=k, rows=k)


def sheet_count(page_count: int, grid: Grid) -> int:
    """Number of output sheets; an empty source still gets one blank sheet."""
    return max(1, -(-page_count // grid.capacity))


def fit_scale(cell_width: float, cell_height: float, page_width: float, page_height: float) -> float:
    """
    Largest uniform scale that fits the page into the cell.

    Not clamped to 1: pages smaller than the cell are scaled up.
    """

    if page_width <= 0 or page_height <= 0:
        raise TransformError(
            "Source page has a non-positive size",
            detail={"width": page_width, "height": page_height},
        )
    return min(cell_width / page_width, cell_height / page_height)


def place_page(
    *,
    index: int,
    page_width: float,
    page_height: float,
    grid: Grid,
    sheet_width: float,
    sheet_height: float,
) -> PlacedForm:
    """
    Place source page `index` (0-indexed) into its cell, row-major.

    Every `grid.capacity` pages start a new sheet. The scaled page is
    centered in its cell; `y` is measured from the bottom of the sheet.
    """

    cell_width = sheet_width / grid.columns
    cell_height = sheet_height / grid.rows

    sheet_index, slot = divmod(index, grid.capacity)
    row, column = divmod(slot, grid.columns)

    scale = fit_scale(cell_width, cell_height, page_width, page_height)

    x = column * cell_width + (cell_width - page_width * scale) / 2
    y = sheet_height - ((row + 1) * cell_height - (cell_height - page_height * scale) / 2)

    return PlacedForm(
        source_index=index,
        sheet_index=sheet_index,
        column=column,
        row=row,
        x=x,
        y=y,
        scale=scale,
        width=page_width,
        height=page_height,
    )
