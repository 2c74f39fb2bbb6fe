"""High-level orchestration: extractor selection + checksum checks."""

from __future__ import annotations

import mimetypes
from collections.abc import Callable
from pathlib import Path

from .checks import CodeCheck, check_codes
from .utils import get_logger

SUPPORTED_SUFFIXES = {".txt", ".csv", ".pdf"}

ExtractorFunc = Callable[[Path], tuple[str, list[str]]]

log = get_logger(__name__)


class UnsupportedFileType(ValueError):
    """Raised when no extractor handles a file."""


def _pick_extractor(path: Path) -> ExtractorFunc | None:
    """Return the extractor for a file by suffix, then by MIME type."""
    from .extractors import from_csv, from_pdf, from_txt

    by_suffix: dict[str, ExtractorFunc] = {
        ".txt": from_txt,
        ".csv": from_csv,
        ".pdf": from_pdf,
    }
    extractor = by_suffix.get(path.suffix.lower())
    if extractor is not None:
        return extractor

    by_mime: dict[str, ExtractorFunc] = {
        "text/plain": from_txt,
        "text/csv": from_csv,
        "application/pdf": from_pdf,
    }
    mime_type, _ = mimetypes.guess_type(str(path))
    return by_mime.get(mime_type or "")


def read_codes(path: Path) -> list[str]:
    """Return the candidate codes held in a supported file."""
    extractor = _pick_extractor(path)
    if extractor is None:
        raise UnsupportedFileType(f"Unsupported or unknown file type: {path}")

    _kind, codes = extractor(path)
    return codes


def check_file(input_path: str | Path) -> tuple[list[CodeCheck], list[str]]:
    """Check every candidate code in a file.

    Returns the per-code results together with the codes as read. Files of an
    unsupported type yield no results; read and decode errors propagate.
    """
    path = Path(input_path)

    try:
        codes = read_codes(path)
    except UnsupportedFileType:
        log.warning("Skipping unsupported file %s", path.name)
        return [], []

    checks = check_codes(codes)
    valid_count = sum(1 for c in checks if c.valid)
    # Counts only; raw codes never reach the log
    log.info("Checked %d codes from %s: %d valid", len(checks), path.name, valid_count)
    return checks, codes
