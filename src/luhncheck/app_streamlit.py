"""Luhncheck Streamlit App (locally run checksum validator UI)."""

from __future__ import annotations

import gc
import time
from contextlib import suppress
from pathlib import Path
from tempfile import NamedTemporaryFile

import altair as alt
import pandas as pd
import streamlit as stream

from luhncheck.checks import (
    REASON_CHECKSUM_MISMATCH,
    REASON_NON_DIGIT,
    REASON_OK,
    REASON_TOO_SHORT,
    CodeCheck,
    check_code,
)
from luhncheck.reporting import human_summary, to_frame, to_json
from luhncheck.scanner import SUPPORTED_SUFFIXES, check_file
from luhncheck.utils import get_logger, mask_code, safe_filename

MAX_UPLOAD_BYTES = 5 * 1024 * 1024
REPORTS_DIR = Path("data/reports")
RECENT_LIMIT = 10

REASON_LABELS = {
    REASON_OK: "✅ Valid",
    REASON_TOO_SHORT: "✂️ Too Short",
    REASON_NON_DIGIT: "🔤 Non-digit Characters",
    REASON_CHECKSUM_MISMATCH: "❌ Checksum Mismatch",
}


@stream.cache_resource
def get_cached_logger(name: str):
    """Initializes and caches the logger."""
    return get_logger(name)


def outcome_chart(checks: list[CodeCheck]) -> alt.LayerChart:
    """Return a donut chart of outcomes with the valid count in the centre."""
    counts = to_frame(checks)["Reason"].value_counts()
    df = pd.DataFrame(
        {
            "Outcome": [REASON_LABELS.get(r, r) for r in counts.index],
            "Count": counts.to_numpy(),
        }
    )

    base = alt.Chart(df).encode(theta=alt.Theta("Count", stack=True))
    pie = base.mark_arc(outerRadius=120, innerRadius=80).encode(
        color=alt.Color(
            "Outcome",
            scale=alt.Scale(scheme="tableau10"),
            legend=alt.Legend(title="Outcome", orient="right"),
        ),
        order=alt.Order("Count", sort="descending"),
        tooltip=["Outcome", "Count"],
    )

    valid_count = sum(1 for c in checks if c.valid)
    text = (
        alt.Chart(pd.DataFrame({"text": [f"{valid_count}/{len(checks)}"]}))
        .mark_text(align="center", fontSize=28, fontWeight="bold")
        .encode(text="text")
    )
    subtext = (
        alt.Chart(pd.DataFrame({"text": ["Valid"]}))
        .mark_text(align="center", dy=22, fontSize=14, color="gray")
        .encode(text="text")
    )
    return pie + text + subtext


def single_code_panel() -> None:
    with stream.container(border=True):
        stream.markdown("### Check a Code")
        code = stream.text_input(
            "Code",
            placeholder="e.g. 4539 3195 0343 6467",
            key="single_code",
        )
        if not code:
            return

        result = check_code(code)
        if result.valid:
            stream.success(f"`{mask_code(code)}` is valid.")
        else:
            stream.error(f"`{mask_code(code)}` is not valid.")
        stream.caption(result.why)


def batch_panel(log) -> None:
    with stream.container(border=True):
        stream.markdown("### Batch Check")
        stream.caption("One code per line (.txt, .pdf) or per cell (.csv). Files stay local.")

        uploaded_file = stream.file_uploader(
            "Drag and drop your file here",
            type=[s.lstrip(".") for s in sorted(SUPPORTED_SUFFIXES)],
            key=f"uploader_{stream.session_state.uploader_key}",
            label_visibility="collapsed",
        )

        options = stream.session_state.options
        options["only_invalid"] = stream.toggle(
            "List invalid codes only", value=options["only_invalid"], key="opt_only_invalid"
        )

        col1, col2 = stream.columns([1, 1])
        with col1:
            check_clicked = stream.button(
                "Check File", type="primary", use_container_width=True, key="btn_check"
            )
        with col2:
            clear_clicked = stream.button("Clear File", use_container_width=True, key="btn_clear")

    if clear_clicked:
        stream.session_state.uploader_key += 1
        stream.toast("Cleared.", icon="🧹")
        gc.collect()
        stream.rerun()

    if not (uploaded_file and check_clicked):
        return

    file_bytes = uploaded_file.getvalue()
    if len(file_bytes) > MAX_UPLOAD_BYTES:
        stream.error("File too large (>5MB).")
        return

    report_name = safe_filename(uploaded_file.name)
    checks: list[CodeCheck] = []

    with stream.status("Checking...", expanded=False):
        start_time = time.perf_counter()
        tmp_path = None
        try:
            with NamedTemporaryFile(delete=False, suffix=Path(uploaded_file.name).suffix) as tmp:
                tmp.write(file_bytes)
                tmp_path = Path(tmp.name)
            checks, _codes = check_file(tmp_path)
        except Exception as e:
            log.exception("Batch check failed")
            stream.error(f"Check failed: {e}")
        finally:
            if tmp_path:
                with suppress(OSError):
                    tmp_path.unlink()
            gc.collect()
        elapsed = time.perf_counter() - start_time

    report_path = REPORTS_DIR / f"{report_name}.json"
    to_json(checks, report_path)

    recent = stream.session_state.setdefault("recent_checks", [])
    recent.append(
        {
            "name": report_name,
            "elapsed": elapsed,
            "count": len(checks),
            "valid": sum(1 for c in checks if c.valid),
        }
    )
    if len(recent) > RECENT_LIMIT:
        del recent[:-RECENT_LIMIT]

    tab_overview, tab_results, tab_report = stream.tabs(
        ["Overview 📊", "Results 🔍", "JSON Report 📥"]
    )

    with tab_overview:
        col_m1, col_m2 = stream.columns(2)
        col_m1.metric("Codes Checked", len(checks))
        col_m2.metric("Check Time", f"{elapsed:.2f}s")
        stream.divider()
        if checks:
            stream.altair_chart(outcome_chart(checks), use_container_width=True)
            stream.text(human_summary(checks))
        else:
            stream.info("No codes found in this file.")

    with tab_results:
        if checks:
            frame = to_frame(checks)
            if stream.session_state.options["only_invalid"]:
                frame = frame[~frame["Valid"]]
            stream.dataframe(frame, hide_index=True, use_container_width=True)
        else:
            stream.info("No results to list.")

    with tab_report:
        if checks:
            stream.download_button(
                "⬇️ Download Full JSON Report",
                data=report_path.read_bytes(),
                file_name=f"{report_name}.json",
                mime="application/json",
                use_container_width=True,
            )
        else:
            stream.info("No report generated.")


def main():
    stream.set_page_config(page_title="Luhncheck", page_icon="🔢", layout="wide")

    log = get_cached_logger("luhncheck")

    stream.title("Luhncheck 🔢 — Luhn Checksum Validator")
    stream.caption("Everything runs locally. Codes are masked on screen and never logged.")

    if "uploader_key" not in stream.session_state:
        stream.session_state.uploader_key = 0
    stream.session_state.setdefault("options", {"only_invalid": False})

    with stream.sidebar:
        stream.header("Your Session")
        recent_items = stream.session_state.get("recent_checks", [])
        if not recent_items:
            stream.caption("No files checked yet.")
        for entry in recent_items[-5:][::-1]:
            with stream.container(border=True):
                stream.markdown(f"**{entry['name']}**")
                stream.markdown(
                    f"⏱️ {entry['elapsed']:.2f}s | ✅ {entry['valid']}/{entry['count']} valid"
                )

    single_code_panel()
    batch_panel(log)


if __name__ == "__main__":
    main()
