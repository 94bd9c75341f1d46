"""Exceptions raised by `webstrings`.

Functions that look for an optional shape in their input (an i18n call, a
data URI header, a file extension) return None instead of raising. The
exceptions below are reserved for input that cannot be processed at all.
"""

__docformat__ = 'google'

__all__ = [
    'WebStringsError',
    'Base64EncodeError',
    'Base64DecodeError',
    'MimeTypeParseError'
]

class WebStringsError(Exception):
    """Base class for all `webstrings` errors."""

class Base64EncodeError(WebStringsError, ValueError):
    """Text could not be encoded, e.g. because it contains lone surrogates."""

class Base64DecodeError(WebStringsError, ValueError):
    """Input is not valid base64, or does not decode to UTF-8 text."""

class MimeTypeParseError(WebStringsError, ValueError):
    """A data URI header does not have the `data:<mimetype>;...` shape."""
