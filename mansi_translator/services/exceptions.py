# mansi_translator/services/exceptions.py
"""
Exception types raised by the translation client.

The session controller catches TranslationError at the call site and turns it
into a displayed marker, so none of these ever reach the UI event loop.
"""


class TranslationError(Exception):
    """Base class for failed translation calls."""

    pass


class MalformedResponseError(TranslationError):
    """The endpoint answered, but the payload has no usable translatedText."""

    pass


class TranslationTransportError(TranslationError):
    """Connection error, timeout or non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
