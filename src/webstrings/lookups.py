"""Lookup table between file extensions and mimetypes."""

__docformat__ = 'google'

__all__ = [
    'MimeTypeData',
    'guess_mime_type',
    'guess_extension'
]

import pandas as pd
from functools import cache, cached_property
from typing import Dict, Optional
from webstrings.connections import MimeTypeDataSource
from webstrings.paths import path_to_file_type

class MimeTypeData(MimeTypeDataSource):
    """Extension and mimetype columns of the packaged `mimetypes.csv`.
    
    An extension maps to exactly one mimetype. A mimetype listed under
    several extensions maps back to the first one.
    """
    def __init__(self):
        with self.csv_path.open('r') as f:
            data = pd.read_csv(f, dtype=str)
        self.extension = data['extension'].str.lower()
        self.mime_type = data['mime_type'].str.lower()

    @cached_property
    def extension_to_mime(self) -> Dict[str, str]:
        return dict(zip(self.extension, self.mime_type))

    @cached_property
    def mime_to_extension(self) -> Dict[str, str]:
        first = ~self.mime_type.duplicated(keep='first')
        return dict(zip(self.mime_type[first], self.extension[first]))

@cache
def _table() -> MimeTypeData:
    return MimeTypeData()

def guess_mime_type(file_name: str) -> Optional[str]:
    """
    Guess a mimetype from the extension of a file name or path.

    Example:
        >>> guess_mime_type('photos/cat.PNG')
        'image/png'
        >>> guess_mime_type('README') is None
        True
    """
    extension = path_to_file_type(file_name).extension
    if extension is None:
        return None
    return _table().extension_to_mime.get(extension.lower())

def guess_extension(mime_type: Optional[str]) -> Optional[str]:
    """
    Get the usual file extension for a mimetype.

    Example:
        >>> guess_extension('image/jpeg')
        'jpg'
        >>> guess_extension('application/x-unknown') is None
        True
    """
    if not mime_type:
        return None
    return _table().mime_to_extension.get(mime_type.strip().lower())
