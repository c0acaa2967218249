# mansi_translator/ui/components/__init__.py
"""
UI components for the Mansi Translator.

Component imports are lazy-loaded so that NiceGUI is imported only when a page is built.
Use explicit imports like:
    from mansi_translator.ui.components.text_panel import create_text_panel
"""

# Lazy-loaded components via __getattr__
_LAZY_IMPORTS = {
    "create_text_panel": "text_panel",
}


def __getattr__(name: str):
    """Lazy-load component modules on first access."""
    if name in _LAZY_IMPORTS:
        module_name = _LAZY_IMPORTS[name]
        import importlib

        module = importlib.import_module(f".{module_name}", __package__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "create_text_panel",
]
