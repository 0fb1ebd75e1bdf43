from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .contracts import LayoutResult


def serialize_layout_result(result: LayoutResult) -> str:
    payload: dict[str, Any] = result.to_dict()
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def write_layout_outputs(
    *, result: LayoutResult, out_dir: Path, out_manifest: Path | None = None
) -> Path | None:
    """
    Write the output PDF (only when the layout succeeded) and the optional manifest.

    Returns the written PDF path, or None.
    """

    out_pdf: Path | None = None
    if result.ok and result.output_pdf is not None:
        out_dir.mkdir(parents=True, exist_ok=True)
        out_pdf = out_dir / result.output_name
        out_pdf.write_bytes(result.output_pdf)

    if out_manifest is not None:
        out_manifest.parent.mkdir(parents=True, exist_ok=True)
        out_manifest.write_text(serialize_layout_result(result), encoding="utf-8")

    return out_pdf
