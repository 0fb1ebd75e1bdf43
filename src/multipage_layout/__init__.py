"""
Multi-page layout (N-up): tile N pages of a PDF onto each output sheet.

- Grid: 2 and 3 pages per sheet lay out as one row; perfect squares as k x k.
- Each source page is imported as a form object, fit-to-cell scaled and centered.
- Every N source pages start a new sheet; no page is dropped.

The PDF engine itself (parsing, form import, drawing, serialization) is
pypdfium2; this package only computes placements and drives the engine.
"""

from .contracts import (
    Grid,
    LayoutConfig,
    LayoutEngineName,
    LayoutError,
    LayoutResult,
    LayoutSheet,
    PlacedForm,
    SheetSize,
)
from .errors import DocumentParseError, InvalidParameter, MultiPageLayoutError, TransformError
from .grid import compute_grid, fit_scale, place_page, validate_pages_per_sheet
from .module import derive_output_filename, layout_pdf_bytes, run_multi_page_layout

__all__ = [
    "DocumentParseError",
    "Grid",
    "InvalidParameter",
    "LayoutConfig",
    "LayoutEngineName",
    "LayoutError",
    "LayoutResult",
    "LayoutSheet",
    "MultiPageLayoutError",
    "PlacedForm",
    "SheetSize",
    "TransformError",
    "compute_grid",
    "derive_output_filename",
    "fit_scale",
    "layout_pdf_bytes",
    "place_page",
    "run_multi_page_layout",
    "validate_pages_per_sheet",
]
