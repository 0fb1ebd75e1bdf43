from __future__ import annotations

import io
import logging

from ..contracts import Grid, LayoutSheet, PlacedForm, SheetSize
from ..errors import DocumentParseError, MultiPageLayoutError, TransformError
from ..grid import place_page, sheet_count
from .base import ComposedDocument, PdfLayoutEngine

logger = logging.getLogger(__name__)


class Pypdfium2Engine(PdfLayoutEngine):
    def backend_id(self) -> str:
        return "pypdfium2"

    def backend_version(self) -> str | None:
        try:
            import pypdfium2 as pdfium  # type: ignore

            return getattr(pdfium, "__version__", None)
        except Exception:
            return None

    def _require_pdfium(self):
        try:
            import pypdfium2 as pdfium  # type: ignore

            return pdfium
        except ImportError as e:
            raise RuntimeError(
                "Missing dependency: pypdfium2 is required for page composition."
            ) from e

    def compose(self, *, pdf_bytes: bytes, grid: Grid, sheet_size: SheetSize) -> ComposedDocument:
        pdfium = self._require_pdfium()

        if not pdf_bytes:
            raise DocumentParseError("Input PDF is empty")
        try:
            src = pdfium.PdfDocument(pdf_bytes)
        except Exception as e:
            raise DocumentParseError("Failed to open input PDF", detail={"error": repr(e)}) from e

        dest = None
        out_pages: list = []
        xobjects: list = []
        try:
            dest = pdfium.PdfDocument.new()
            page_count = len(src)
            sheet_width, sheet_height = sheet_size.dimensions

            for _ in range(sheet_count(page_count, grid)):
                out_pages.append(dest.new_page(sheet_width, sheet_height))
            placements: list[list[PlacedForm]] = [[] for _ in out_pages]

            for index in range(page_count):
                placed = self._draw_page(
                    pdfium,
                    src=src,
                    dest=dest,
                    out_pages=out_pages,
                    xobjects=xobjects,
                    index=index,
                    grid=grid,
                    sheet_width=sheet_width,
                    sheet_height=sheet_height,
                )
                placements[placed.sheet_index].append(placed)

            for page in out_pages:
                page.gen_content()

            buf = io.BytesIO()
            dest.save(buf)
            pdf_out = buf.getvalue()
        except MultiPageLayoutError:
            raise
        except Exception as e:
            raise TransformError("Page composition failed", detail={"error": repr(e)}) from e
        finally:
            for xobject in xobjects:
                xobject.close()
            for page in out_pages:
                page.close()
            if dest is not None:
                dest.close()
            src.close()

        logger.info(
            "Composed %d source page(s) onto %d sheet(s) (%dx%d grid)",
            page_count,
            len(placements),
            grid.columns,
            grid.rows,
        )
        return ComposedDocument(
            pdf_bytes=pdf_out,
            sheets=[LayoutSheet(sheet_index=i, placements=p) for i, p in enumerate(placements)],
            source_page_count=page_count,
        )

    def _draw_page(
        self,
        pdfium,
        *,
        src,
        dest,
        out_pages: list,
        xobjects: list,
        index: int,
        grid: Grid,
        sheet_width: float,
        sheet_height: float,
    ) -> PlacedForm:
        logger.debug("Reading page %d", index + 1)
        src_page = src[index]
        try:
            left, bottom, right, top = src_page.get_mediabox()
        finally:
            src_page.close()

        placed = place_page(
            index=index,
            page_width=right - left,
            page_height=top - bottom,
            grid=grid,
            sheet_width=sheet_width,
            sheet_height=sheet_height,
        )
        logger.debug(
            "Page %d -> sheet %d cell (%d, %d), scale %.4f",
            index + 1,
            placed.sheet_index + 1,
            placed.column,
            placed.row,
            placed.scale,
        )

        xobject = src.page_as_xobject(index, dest)
        xobjects.append(xobject)
        form = xobject.as_pageobject()

        # page_as_xobject already maps the mediabox origin to the form origin.
        matrix = pdfium.PdfMatrix().scale(placed.scale, placed.scale).translate(placed.x, placed.y)
        form.transform(matrix)
        out_pages[placed.sheet_index].insert_obj(form)
        return placed
