"""Utility helpers for logging, masking and filename safety.

Security:
    - We never log raw codes; use mask_code for anything shown to a user.
    - Filenames are sanitized before writing reports.
"""

from __future__ import annotations

import logging
import re

from .validators import ASCII_DIGITS

SAFE_NAME_RE = re.compile(r"[^A-Za-z0-9_.-]+")
VISIBLE_TAIL_DIGITS = 4


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger that avoids duplicate handlers."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def safe_filename(name: str) -> str:
    """Return a filesystem-friendly filename with dangerous characters removed."""
    cleaned = SAFE_NAME_RE.sub("_", name)
    return cleaned.strip("_") or "upload"


def mask_code(code: str) -> str:
    """Replace all but the last four digits of code with '*'.

    Non-digit characters (spaces, separators) are kept so the layout of the
    code stays recognisable.
    """
    digit_total = sum(1 for ch in code if ch in ASCII_DIGITS)
    to_hide = max(0, digit_total - VISIBLE_TAIL_DIGITS)

    masked = []
    for ch in code:
        if ch in ASCII_DIGITS and to_hide > 0:
            masked.append("*")
            to_hide -= 1
        else:
            masked.append(ch)
    return "".join(masked)
