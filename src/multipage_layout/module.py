from __future__ import annotations

import logging
import re
from typing import Any

from .contracts import (
    LayoutConfig,
    LayoutEngineName,
    LayoutError,
    LayoutResult,
    LayoutSheet,
    SheetSize,
)
from .data_access import sha256_bytes
from .engines import PdfLayoutEngine, Pypdfium2Engine
from .errors import MultiPageLayoutError
from .grid import compute_grid

logger = logging.getLogger(__name__)

_EXTENSION_RE = re.compile(r"[.][^.]+$")


def derive_output_filename(source_name: str | None, suffix: str = "_layoutChanged") -> str:
    """
    "report.pdf" -> "report_layoutChanged.pdf".

    Only the final extension is stripped; a name without one is kept whole.
    """

    base = (source_name or "").replace("\\", "/").split("/")[-1]
    base = _EXTENSION_RE.sub("", base, count=1) or "document"
    return f"{base}{suffix}.pdf"


def _get_engine(engine: LayoutEngineName) -> PdfLayoutEngine:
    if engine == LayoutEngineName.PYPDFIUM2:
        return Pypdfium2Engine()
    raise ValueError(f"Unsupported layout engine: {engine}")


def layout_pdf_bytes(
    pdf_bytes: bytes,
    pages_per_sheet: int,
    *,
    sheet_size: SheetSize = SheetSize.A4,
    engine: LayoutEngineName = LayoutEngineName.PYPDFIUM2,
) -> tuple[bytes, list[LayoutSheet]]:
    """
    Tile `pages_per_sheet` source pages onto each output sheet.

    Returns the serialized output PDF and the placements per sheet.

    Raises:
        InvalidParameter: before the input is parsed.
        DocumentParseError: the input is not a readable PDF.
        TransformError: composing or serializing failed; no output is produced.
    """

    grid = compute_grid(pages_per_sheet)
    composed = _get_engine(engine).compose(pdf_bytes=pdf_bytes, grid=grid, sheet_size=sheet_size)
    return composed.pdf_bytes, composed.sheets


def run_multi_page_layout(
    *, config: LayoutConfig, pdf_bytes: bytes, source_name: str | None = None
) -> LayoutResult:
    """
    Programmatic entrypoint with a manifest-style result.

    Failures are reported as `LayoutError` records (ok=False) instead of
    raised; `output_pdf` is only set when the whole document was composed.
    """

    meta: dict[str, Any] = {}
    engine = _get_engine(config.engine)
    grid = compute_grid(config.pages_per_sheet)
    output_name = derive_output_filename(source_name, config.filename_suffix)

    meta["backend"] = engine.backend_id()
    meta["backend_version"] = engine.backend_version()
    if config.compute_source_sha256:
        meta["source_sha256"] = sha256_bytes(pdf_bytes)

    def _failed(err: MultiPageLayoutError) -> LayoutResult:
        logger.warning("Layout of %r failed: %s (%s)", source_name, err.message, err.code)
        return LayoutResult(
            ok=False,
            engine=config.engine,
            source_name=source_name,
            output_name=output_name,
            pages_per_sheet=config.pages_per_sheet,
            grid=grid,
            sheet_size=config.sheet_size,
            source_page_count=0,
            sheets=[],
            errors=[LayoutError(code=err.code, message=err.message, detail=err.detail)],
            meta=meta,
        )

    try:
        composed = engine.compose(pdf_bytes=pdf_bytes, grid=grid, sheet_size=config.sheet_size)
    except MultiPageLayoutError as e:
        return _failed(e)

    width, height = config.sheet_size.dimensions
    meta["sheet_width_pt"] = width
    meta["sheet_height_pt"] = height

    return LayoutResult(
        ok=True,
        engine=config.engine,
        source_name=source_name,
        output_name=output_name,
        pages_per_sheet=config.pages_per_sheet,
        grid=grid,
        sheet_size=config.sheet_size,
        source_page_count=composed.source_page_count,
        sheets=composed.sheets,
        errors=[],
        meta=meta,
        output_pdf=composed.pdf_bytes,
    )
