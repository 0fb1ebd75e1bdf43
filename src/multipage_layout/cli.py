from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .artifacts import write_layout_outputs
from .contracts import LayoutConfig, SheetSize
from .data_access import DataAccessError, read_pdf_file
from .errors import InvalidParameter
from .module import run_multi_page_layout


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="multipage-layout",
        description="Tile N pages of a PDF onto each output sheet (N-up).",
    )
    p.add_argument("--input", required=True, type=Path, help="Input PDF file.")
    p.add_argument(
        "--pages-per-sheet",
        required=True,
        type=int,
        help="Pages per output sheet: 2, 3 or a perfect square (4, 9, 16, ...).",
    )
    p.add_argument("--out-dir", required=True, type=Path, help="Directory for the output PDF.")
    p.add_argument(
        "--out-manifest",
        type=Path,
        default=None,
        help="Optional JSON manifest describing the placements.",
    )
    p.add_argument(
        "--sheet-size",
        choices=[s.value for s in SheetSize],
        default=SheetSize.A4.value,
        help="Output sheet size (default: a4).",
    )
    p.add_argument(
        "--compute-source-sha256",
        action="store_true",
        help="Include SHA-256 of the source PDF in the manifest meta.",
    )
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (default: WARNING).",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = LayoutConfig(
            pages_per_sheet=args.pages_per_sheet,
            sheet_size=SheetSize(args.sheet_size),
            compute_source_sha256=args.compute_source_sha256,
        )
        pdf_bytes = read_pdf_file(args.input)
    except (InvalidParameter, DataAccessError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = run_multi_page_layout(config=config, pdf_bytes=pdf_bytes, source_name=args.input.name)
    out_pdf = write_layout_outputs(result=result, out_dir=args.out_dir, out_manifest=args.out_manifest)

    if not result.ok:
        for err in result.errors:
            print(f"error: {err.code}: {err.message}", file=sys.stderr)
        return 2

    print(f"output={out_pdf} pages={result.source_page_count} sheets={len(result.sheets)} ok={result.ok}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
