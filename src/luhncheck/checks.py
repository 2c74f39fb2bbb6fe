"""Explainable per-code results for batch checks and reports."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass

from .validators import (
    MIN_CODE_LENGTH,
    checksum_total,
    is_structurally_valid,
    normalize,
)

REASON_OK = "ok"
REASON_TOO_SHORT = "too_short"
REASON_NON_DIGIT = "non_digit"
REASON_CHECKSUM_MISMATCH = "checksum_mismatch"

REASON_TEXT: dict[str, str] = {
    REASON_OK: "Verified: checksum total is a multiple of 10.",
    REASON_TOO_SHORT: (
        f"Rejected: fewer than {MIN_CODE_LENGTH} characters once spaces are removed."
    ),
    REASON_NON_DIGIT: "Rejected: contains a character other than 0-9 or space.",
    REASON_CHECKSUM_MISMATCH: "Failed: checksum total is not a multiple of 10.",
}


@dataclass(slots=True)
class CodeCheck:
    """Outcome of checking one candidate code."""

    index: int
    code: str
    valid: bool
    reason: str
    checksum: int | None
    why: str

    def to_dict(self) -> dict[str, object]:
        """Return a stable, serializable representation of this check."""
        return asdict(self)


def _diagnose(code: str) -> tuple[str, int | None]:
    """Return (reason, checksum total) for code."""
    normalized = normalize(code)
    if len(normalized) < MIN_CODE_LENGTH:
        return REASON_TOO_SHORT, None
    if not is_structurally_valid(normalized):
        return REASON_NON_DIGIT, None

    total = checksum_total(normalized)
    if total % 10 == 0:
        return REASON_OK, total
    return REASON_CHECKSUM_MISMATCH, total


def check_code(code: str, *, index: int = 0) -> CodeCheck:
    """Check a single code and explain the outcome."""
    reason, total = _diagnose(code)
    return CodeCheck(
        index=index,
        code=code,
        valid=reason == REASON_OK,
        reason=reason,
        checksum=total,
        why=REASON_TEXT[reason],
    )


def check_codes(codes: Iterable[str]) -> list[CodeCheck]:
    """Check every code in order and return one CodeCheck per input."""
    return [check_code(code, index=i) for i, code in enumerate(codes)]
