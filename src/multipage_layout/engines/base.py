from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..contracts import Grid, LayoutSheet, SheetSize


@dataclass(frozen=True, slots=True)
class ComposedDocument:
    pdf_bytes: bytes  # serialized output document
    sheets: list[LayoutSheet]  # in output order
    source_page_count: int


class PdfLayoutEngine(ABC):
    """
    PDF composition engine abstraction.

    Engines must:
    - Parse the source document from bytes
    - Import every source page as a form object, in document order
    - Draw each form on an output sheet at the placement computed by `grid.place_page`
    - Serialize the output document and release every handle, on all exit paths

    Errors: `DocumentParseError` when the source cannot be opened,
    `TransformError` for anything that fails afterwards.
    """

    @abstractmethod
    def backend_id(self) -> str:
        raise NotImplementedError

    def backend_version(self) -> str | None:
        return None

    @abstractmethod
    def compose(self, *, pdf_bytes: bytes, grid: Grid, sheet_size: SheetSize) -> ComposedDocument:
        raise NotImplementedError
