# mansi_translator/services/__init__.py
"""
Service layer for the Mansi Translator.

The HTTP client is lazy-loaded so that importing exceptions does not pull in httpx.
Use explicit imports like:
    from mansi_translator.services.translation_client import TranslationClient
"""

from .exceptions import TranslationError, MalformedResponseError, TranslationTransportError

# Lazy-loaded services via __getattr__
_LAZY_IMPORTS = {
    'TranslationClient': 'translation_client',
    'parse_translation_payload': 'translation_client',
}

# Submodules that can be accessed via __getattr__ (for patching support)
_SUBMODULES = {'translation_client', 'exceptions'}


def __getattr__(name: str):
    """Lazy-load heavy service modules on first access."""
    import importlib
    if name in _SUBMODULES:
        return importlib.import_module(f'.{name}', __package__)
    if name in _LAZY_IMPORTS:
        module_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(f'.{module_name}', __package__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'TranslationClient',
    'parse_translation_payload',
    'TranslationError',
    'MalformedResponseError',
    'TranslationTransportError',
]
