from __future__ import annotations

from typing import Any


class MultiPageLayoutError(Exception):
    """
    Base class for layout failures.

    `code` is stable and ends up verbatim in result manifests.
    """

    code = "LAYOUT_FAILED"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidParameter(MultiPageLayoutError, ValueError):
    code = "LAYOUT_INVALID_PAGES_PER_SHEET"


class DocumentParseError(MultiPageLayoutError):
    code = "LAYOUT_DOCUMENT_PARSE_FAILED"


class TransformError(MultiPageLayoutError):
    code = "LAYOUT_TRANSFORM_FAILED"
