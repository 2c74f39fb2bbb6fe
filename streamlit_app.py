"""
Wrapper file for Streamlit deployment without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add /src to PATH so Streamlit can import luhncheck/*
ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from luhncheck import app_streamlit as _app  # noqa: E402


def main() -> None:
    """Entry point for `streamlit run streamlit_app.py`."""
    _app.main()


if __name__ == "__main__":
    main()
