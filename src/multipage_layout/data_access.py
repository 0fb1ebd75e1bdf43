from __future__ import annotations

import hashlib
from pathlib import Path


class DataAccessError(Exception):
    pass


def read_pdf_file(path: Path) -> bytes:
    """
    Read an input PDF from an explicitly passed path.

    Only `.pdf` files are accepted; the caller decides where inputs live.
    """

    if path.suffix.lower() != ".pdf":
        raise DataAccessError(f"Expected a .pdf input, got: {str(path)!r}")
    if not path.is_file():
        raise DataAccessError(f"Input PDF not found: {str(path)!r}")
    return path.read_bytes()


def sha256_bytes(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()
