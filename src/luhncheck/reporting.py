"""Report generation utilities."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path

import pandas as pd

from .checks import CodeCheck
from .utils import mask_code


def to_json(checks: list[CodeCheck], outfile: Path, return_as_string: bool = False) -> str | None:
    payload = [c.to_dict() for c in checks]
    json_str = json.dumps(payload, indent=2)

    if return_as_string:
        return json_str

    outfile.parent.mkdir(parents=True, exist_ok=True)
    outfile.write_text(json_str, encoding="utf-8")
    return None


def human_summary(checks: list[CodeCheck]) -> str:
    if not checks:
        return "Checksum Summary:\n- No codes checked"

    valid_count = sum(1 for c in checks if c.valid)
    lines = [
        f"- valid: {valid_count}",
        f"- invalid: {len(checks) - valid_count}",
    ]
    reasons = Counter(c.reason for c in checks if not c.valid)
    lines.extend(f"  - {reason}: {count}" for reason, count in sorted(reasons.items()))
    return "Checksum Summary:\n" + "\n".join(lines)


def to_frame(checks: list[CodeCheck]) -> pd.DataFrame:
    """Return checks as a DataFrame with masked codes, for tables and charts."""
    rows = [
        {
            "Index": c.index,
            "Code": mask_code(c.code),
            "Valid": c.valid,
            "Reason": c.reason,
            "Checksum": c.checksum,
        }
        for c in checks
    ]
    return pd.DataFrame(rows, columns=["Index", "Code", "Valid", "Reason", "Checksum"])
