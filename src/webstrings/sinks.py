"""Destinations for files decoded by `webstrings.encoding.save_base64_to_file`."""

__docformat__ = 'google'

__all__ = [
    'DownloadSink',
    'SavedFile',
    'DirectorySink',
    'MemorySink'
]

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol, Union
from webstrings.lookups import guess_extension
from webstrings.paths import path_to_file_type

logger = logging.getLogger(__name__)

class DownloadSink(Protocol):
    """Anything that can store decoded file contents under a name."""
    def save(self, data: bytes, file_name: str, mime_type: Optional[str]) -> None:
        ...

@dataclass(frozen=True)
class SavedFile:
    file_name: str
    mime_type: Optional[str]
    data: bytes

@dataclass
class MemorySink:
    """Keeps saved files in a list, in the order they were saved."""
    files: List[SavedFile] = field(default_factory=list)

    def save(self, data: bytes, file_name: str, mime_type: Optional[str]) -> None:
        self.files.append(SavedFile(file_name, mime_type, data))

class DirectorySink:
    """
    Writes saved files into a directory.

    Only the last segment of the file name is used, so files cannot be
    written outside the directory. A name without an extension gets the
    usual extension of the mimetype, if it is known.

    Args:
        directory: Target directory
        create: Create the directory if it does not exist
    """
    def __init__(self, directory: Union[str, Path], create: bool = True):
        self.directory = Path(directory)
        self.create = create
        self.saved: List[Path] = []

    def target_path(self, file_name: str, mime_type: Optional[str] = None) -> Path:
        name = Path(file_name.replace('\\', '/')).name
        if name in ('', '.', '..'):
            raise ValueError(f'Not a file name: {file_name!r}')

        if path_to_file_type(name).extension is None:
            extension = guess_extension(mime_type)
            if extension:
                name = f'{name}.{extension}'
        return self.directory / name

    def save(self, data: bytes, file_name: str, mime_type: Optional[str]) -> None:
        path = self.target_path(file_name, mime_type)
        if self.create:
            self.directory.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        self.saved.append(path)
        logger.debug(f'Wrote {len(data)} bytes to {path}')
