from .base import ComposedDocument, PdfLayoutEngine
from .pypdfium2_engine import Pypdfium2Engine

__all__ = ["ComposedDocument", "PdfLayoutEngine", "Pypdfium2Engine"]
