# mansi_translator/ui/styles.py
"""
Styles for the translator page.

CSS is loaded from an external file for better editor support.
"""

from pathlib import Path

_CSS_FILE = Path(__file__).parent / "styles.css"


def _load_css() -> str:
    """Load CSS from the external file (empty if missing)."""
    if _CSS_FILE.exists():
        return _CSS_FILE.read_text(encoding="utf-8")
    return ""


COMPLETE_CSS = _load_css()
