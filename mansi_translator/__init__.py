# mansi_translator/__init__.py
"""
Mansi Translator - Russian <-> Mansi text translation front-end

A NiceGUI page that debounces typing and calls a remote translation endpoint.
"""

from pathlib import Path


def _get_version() -> str:
    """Read the version from pyproject.toml, falling back to a hard-coded value."""
    try:
        import tomllib  # Python 3.11+ standard library

        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
            return data.get("project", {}).get("version", "0.0.0")
    except (ImportError, OSError, ValueError):
        pass

    return "0.1.0"


__version__ = _get_version()
__app_name__ = "Mansi Translator"
