# luhncheck/extractors.py

from __future__ import annotations

import csv  # Keep lightweight imports here
from pathlib import Path

# ---------------------------------------------------------
# TEXT Extractor: one candidate code per non-blank line
# ---------------------------------------------------------


def _codes_from_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def from_txt(path: Path) -> tuple[str, list[str]]:
    """Read candidate codes from a text file."""
    return "text", _codes_from_lines(path.read_text(encoding="utf-8"))


# ---------------------------------------------------------
# CSV Extractor: one candidate code per non-empty cell
# ---------------------------------------------------------


def _is_header(row: list[str]) -> bool:
    return not any(ch.isdigit() for cell in row for ch in cell)


def from_csv(path: Path) -> tuple[str, list[str]]:
    """Read candidate codes from a CSV file, skipping a digit-free header row."""
    codes: list[str] = []
    with path.open("r", newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        for row_number, row in enumerate(reader):
            if row_number == 0 and _is_header(row):
                continue
            codes.extend(cell.strip() for cell in row if cell.strip())
    return "csv", codes


# ---------------------------------------------------------
# PDF Extractor (lazy import, pdfminer is heavy)
# ---------------------------------------------------------


def from_pdf(path: Path) -> tuple[str, list[str]]:
    """Read candidate codes from the text layer of a PDF file."""
    from io import StringIO

    from pdfminer.high_level import extract_text_to_fp

    output_string = StringIO()
    with path.open("rb") as input_file:
        extract_text_to_fp(input_file, output_string)

    return "pdf", _codes_from_lines(output_string.getvalue())
