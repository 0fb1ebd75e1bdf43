from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from .errors import InvalidParameter

_MM = 72.0 / 25.4  # PDF points per millimeter


class SheetSize(str, Enum):
    """
    Standard output canvases (portrait).
    """

    A3 = "a3"
    A4 = "a4"
    A5 = "a5"
    LETTER = "letter"
    LEGAL = "legal"

    @property
    def dimensions(self) -> tuple[float, float]:
        """(width, height) in PDF points."""
        return _SHEET_DIMENSIONS[self]


_SHEET_DIMENSIONS: dict[SheetSize, tuple[float, float]] = {
    SheetSize.A3: (297 * _MM, 420 * _MM),
    SheetSize.A4: (210 * _MM, 297 * _MM),
    SheetSize.A5: (148 * _MM, 210 * _MM),
    SheetSize.LETTER: (612.0, 792.0),
    SheetSize.LEGAL: (612.0, 1008.0),
}


class LayoutEngineName(str, Enum):
    """
    PDF composition backend identifiers.
    """

    PYPDFIUM2 = "pypdfium2"


@dataclass(frozen=True, slots=True)
class Grid:
    columns: int
    rows: int

    @property
    def capacity(self) -> int:
        return self.columns * self.rows

    def to_dict(self) -> dict[str, int]:
        return {"columns": self.columns, "rows": self.rows}


@dataclass(frozen=True, slots=True)
class PlacedForm:
    source_index: int  # 0-indexed, document order
    sheet_index: int  # 0-indexed output sheet
    column: int
    row: int  # 0 is the top row
    x: float  # bottom-left origin of the scaled page on the sheet, in points
    y: float
    scale: float
    width: float  # unscaled source page size, in points
    height: float


@dataclass(frozen=True, slots=True)
class LayoutSheet:
    sheet_index: int
    placements: list[PlacedForm]


@dataclass(frozen=True, slots=True)
class LayoutError:
    code: str
    message: str
    detail: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class LayoutResult:
    ok: bool
    engine: LayoutEngineName
    source_name: str | None
    output_name: str
    pages_per_sheet: int
    grid: Grid | None
    sheet_size: SheetSize
    source_page_count: int
    sheets: list[LayoutSheet]
    errors: list[LayoutError]
    meta: dict[str, Any]
    # Serialized output document; never part of the JSON manifest.
    output_pdf: bytes | None = field(default=None, repr=False)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d.pop("output_pdf", None)
        return d


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """
    Per-request layout parameters.

    Everything is passed explicitly; no environment variable reads.
    `pages_per_sheet` is validated here so that a bad value is rejected
    before any PDF parsing happens.
    """

    pages_per_sheet: int
    sheet_size: SheetSize = SheetSize.A4
    engine: LayoutEngineName = LayoutEngineName.PYPDFIUM2
    filename_suffix: str = "_layoutChanged"
    compute_source_sha256: bool = False

    def __post_init__(self) -> None:
        # Local import: grid depends on contracts.
        from .grid import validate_pages_per_sheet

        validate_pages_per_sheet(self.pages_per_sheet)
        if not isinstance(self.sheet_size, SheetSize):
            raise InvalidParameter(
                f"sheet_size must be one of {[s.value for s in SheetSize]}",
                detail={"sheet_size": str(self.sheet_size)},
            )
