"""
String and base64 helpers: case conversion, file-name parsing, template
substitution, i18n key extraction and data URI handling.

See individual module documentation for detailed information.
"""
from . import case
from . import paths
from . import text
from . import encoding
from . import sinks
from . import lookups
from . import catalog
from . import errors
from . import patterns

__all__ = [
    'case',
    'paths',
    'text',
    'encoding',
    'sinks',
    'lookups',
    'catalog',
    'errors',
    'patterns'
]
