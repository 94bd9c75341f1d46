"""Base64 encoding of text, and conversion between files and base64 data URIs.

A data URI has the form `data:<mimetype>;base64,<payload>`. Functions that
accept one also accept a bare payload with no header.
"""

__docformat__ = 'google'

__all__ = [
    'base64_encode',
    'base64_decode',
    'decode_base64_bytes',
    'file_to_base64',
    'save_base64_to_file',
    'get_base64_mime_type',
    'parse_data_uri_header'
]

import asyncio
import base64
import logging
import os
from typing import BinaryIO, Optional, Union
from webstrings.errors import Base64EncodeError, Base64DecodeError, MimeTypeParseError
from webstrings.lookups import guess_mime_type
from webstrings.patterns import TEXT_ENCODING, DEFAULT_MIME_TYPE, DATA_URI_TEMPLATE
from webstrings.sinks import DownloadSink

logger = logging.getLogger(__name__)

ASCII_WHITESPACE = ' \t\n\f\r'

def base64_encode(string: str) -> str:
    """
    Encode text as base64, using its UTF-8 bytes.

    Args:
        string: Any text
        
    Returns:
        Base64 text
        
    Raises:
        Base64EncodeError: If the text cannot be encoded as UTF-8
        
    Example:
        >>> base64_encode('12')
        'MTI='
    """
    try:
        data = string.encode(TEXT_ENCODING)
    except UnicodeEncodeError as err:
        raise Base64EncodeError(f'Text is not encodable as {TEXT_ENCODING}: {err.reason}') from err
    return base64.b64encode(data).decode('ascii')

def decode_base64_bytes(payload: str) -> bytes:
    """
    Decode base64 text to bytes.

    ASCII whitespace is ignored and '=' padding may be omitted. Any other
    character outside the base64 alphabet is an error.

    Raises:
        Base64DecodeError: If the payload is not valid base64
    """
    payload = payload.translate({ord(c): None for c in ASCII_WHITESPACE})

    if len(payload) % 4 == 0 and payload.endswith('='):
        payload = payload[:-2] if payload.endswith('==') else payload[:-1]
    if len(payload) % 4 == 1:
        raise Base64DecodeError('Invalid base64 length')
    if '=' in payload:
        raise Base64DecodeError('Misplaced base64 padding')

    payload += '=' * (-len(payload) % 4)
    try:
        return base64.b64decode(payload, validate=True)
    except ValueError as err:
        raise Base64DecodeError(f'Invalid base64 payload: {err}') from err

def base64_decode(string: str) -> str:
    """
    Decode base64 text produced by `base64_encode`.

    Raises:
        Base64DecodeError: If the input is not valid base64 or the decoded
            bytes are not UTF-8
        
    Example:
        >>> base64_decode('MTI=')
        '12'
    """
    data = decode_base64_bytes(string)
    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError as err:
        raise Base64DecodeError(f'Decoded data is not {TEXT_ENCODING} text: {err.reason}') from err

def _read(file: Union[str, os.PathLike, BinaryIO]) -> bytes:
    if isinstance(file, (str, os.PathLike)):
        with open(file, 'rb') as f:
            return f.read()
    return file.read()

def _file_name(file) -> Optional[str]:
    if isinstance(file, (str, os.PathLike)):
        return os.fspath(file)
    name = getattr(file, 'name', None)
    return name if isinstance(name, str) else None

async def file_to_base64(file: Union[str, os.PathLike, BinaryIO], mime_type: Optional[str] = None) -> str:
    """
    Read a whole file and return it as a base64 data URI.

    The file is read in a worker thread. Read errors are raised to the caller.

    Args:
        file: Path, or a file object opened in binary mode
        mime_type: Mimetype for the header. Guessed from the file name when
            omitted, falling back to 'application/octet-stream'.

    Returns:
        Data URI holding the complete file contents
    """
    data = await asyncio.to_thread(_read, file)

    if mime_type is None:
        name = _file_name(file)
        mime_type = (guess_mime_type(name) if name else None) or DEFAULT_MIME_TYPE

    payload = base64.b64encode(data).decode('ascii')
    return DATA_URI_TEMPLATE.format(mime_type=mime_type, payload=payload)

def parse_data_uri_header(header: str) -> str:
    """
    Get the mimetype from the header of a data URI.

    The mimetype is the text between the first ':' and the following ';'.

    Raises:
        MimeTypeParseError: If the header has no ':'
        
    Example:
        >>> parse_data_uri_header('data:image/png;base64')
        'image/png'
    """
    _, colon, rest = header.partition(':')
    if not colon:
        raise MimeTypeParseError(f'Not a data URI header: {header[:40]!r}')
    return rest.split(';', 1)[0]

def get_base64_mime_type(base64_data: str) -> Optional[str]:
    """
    Get the mimetype of a base64 data URI.

    Args:
        base64_data: Data URI, e.g. 'data:image/png;base64,AAAA'

    Returns:
        The mimetype, or None if the input has no data URI header
        
    Example:
        >>> get_base64_mime_type('data:image/png;base64,AAAA')
        'image/png'
        >>> get_base64_mime_type('AAAA') is None
        True
    """
    try:
        return parse_data_uri_header(base64_data.split(',', 1)[0])
    except MimeTypeParseError:
        return None

def save_base64_to_file(base64_data: str, file_name: str, sink: DownloadSink) -> None:
    """
    Decode a base64 data URI or bare payload and hand the bytes to a sink.

    Args:
        base64_data: Data URI or bare base64 payload
        file_name: Name to save the file under
        sink: Destination for the decoded file

    Raises:
        Base64DecodeError: If the payload is not valid base64
    """
    header, comma, payload = base64_data.partition(',')
    if not comma:
        header, payload = None, header

    data = decode_base64_bytes(payload)

    mime_type = None
    if header is not None:
        try:
            mime_type = parse_data_uri_header(header)
        except MimeTypeParseError as err:
            logger.warning(f'Saving {file_name} without a mimetype: {err}')

    sink.save(data, file_name, mime_type)
