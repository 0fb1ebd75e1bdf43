from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from .contracts import SheetSize
from .errors import DocumentParseError, InvalidParameter, TransformError
from .grid import validate_pages_per_sheet
from .module import derive_output_filename, layout_pdf_bytes

logger = logging.getLogger(__name__)

app = FastAPI(title="multipage-layout")


@app.get("/healthz")
def health():
    return {"ok": True}


@app.post("/multi-page-layout")
async def multi_page_layout(
    fileInput: UploadFile = File(..., description="The input PDF file"),
    pagesPerSheet: int = Form(
        ...,
        description="The number of pages to fit onto a single sheet. Acceptable values are 2, 3, 4, 9, 16.",
    ),
    sheetSize: SheetSize = Form(SheetSize.A4, description="Output sheet size"),
):
    """Merge multiple pages of a PDF document into a single sheet."""

    try:
        # Rejected before reading or parsing the upload.
        validate_pages_per_sheet(pagesPerSheet)
        pdf_bytes = await fileInput.read()
        out_bytes, sheets = layout_pdf_bytes(pdf_bytes, pagesPerSheet, sheet_size=sheetSize)
    except (InvalidParameter, DocumentParseError) as e:
        raise HTTPException(status_code=400, detail={"code": e.code, "message": e.message}) from e
    except TransformError as e:
        logger.warning("Layout of %r failed: %s", fileInput.filename, e.detail)
        raise HTTPException(status_code=422, detail={"code": e.code, "message": e.message}) from e
    finally:
        await fileInput.close()

    filename = derive_output_filename(fileInput.filename)
    logger.info("Laid out %r onto %d sheet(s)", fileInput.filename, len(sheets))
    return Response(
        content=out_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=\"{filename}\"; filename*=UTF-8''{quote(filename)}"
        },
    )
