"""File name and extension parsing for paths and URLs."""

__docformat__ = 'google'

__all__ = [
    'FileType',
    'path_to_file_type'
]

import re
from dataclasses import dataclass
from typing import Optional
from webstrings.patterns import EXTENSION_PATTERN, PATH_SEGMENT

@dataclass(frozen=True)
class FileType:
    """
    The name and extension of the file a path points to.

    Args:
        name: File name without the extension. Empty for names like '.bashrc'.
        extension: Extension without the leading dot, or None if the path has
            no valid extension
    """
    name: str
    extension: Optional[str] = None

    @property
    def full_name(self) -> str:
        """File name including the extension, if there is one."""
        if self.extension is None:
            return self.name
        return f'{self.name}.{self.extension}'

def _extension(path: str) -> Optional[str]:
    segments = path.split('.')
    if len(segments) > 1 and EXTENSION_PATTERN.fullmatch(segments[-1]):
        return segments[-1]
    return None

def path_to_file_type(path: str) -> FileType:
    """
    Get the file name and extension from a path or URL.

    The extension is the text after the last '.', and is only recognized if it
    consists entirely of ASCII letters and digits. Paths without a recognized
    extension keep their whole last segment as the name.

    Args:
        path: File system path or URL

    Returns:
        `FileType` describing the last segment of the path
        
    Example:
        >>> path_to_file_type('http://domain.com/path/to/document.pdf')
        FileType(name='document', extension='pdf')
        >>> path_to_file_type('archive.tar.gz').full_name
        'archive.tar.gz'
        >>> path_to_file_type('/path/to/README')
        FileType(name='README', extension=None)
    """
    extension = _extension(path)

    if extension is None:
        return FileType(name=path.rsplit('/', 1)[-1])

    match = re.search(f'{PATH_SEGMENT}(?=\\.{re.escape(extension)}$)', path)
    name = match.group(0) if match else ''
    return FileType(name=name, extension=extension)
