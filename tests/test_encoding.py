import io
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from webstrings import encoding
from webstrings.errors import Base64DecodeError, Base64EncodeError, MimeTypeParseError
from webstrings.sinks import MemorySink

class TestBase64Encode(unittest.TestCase):
    def test_base64_encode(self):
        self.assertEqual(encoding.base64_encode('12'), 'MTI=')

    def test_unicode(self):
        self.assertEqual(encoding.base64_encode('中文'), '5Lit5paH')

    def test_lone_surrogate(self):
        with self.assertRaises(Base64EncodeError):
            encoding.base64_encode('\ud800')

class TestBase64Decode(unittest.TestCase):
    def test_base64_decode(self):
        self.assertEqual(encoding.base64_decode('MTI='), '12')

    def test_round_trip(self):
        for value in ['', '12', 'héllo wörld', '中文 ✓ 😀', 'line\nbreak']:
            self.assertEqual(encoding.base64_decode(encoding.base64_encode(value)), value)

    def test_forgiving_input(self):
        self.assertEqual(encoding.base64_decode('MTI'), '12')
        self.assertEqual(encoding.base64_decode(' MT\nI= '), '12')

    def test_malformed(self):
        for value in ['M', 'MT!=', 'M===', 'MTé=', 'AB=', 'ABCDEF=', 'MT=I']:
            with self.assertRaises(Base64DecodeError):
                encoding.base64_decode(value)

    def test_not_utf8(self):
        with self.assertRaises(Base64DecodeError):
            encoding.base64_decode('/w==')

class TestGetBase64MimeType(unittest.TestCase):
    def test_get_base64_mime_type(self):
        self.assertEqual(encoding.get_base64_mime_type('data:image/png;base64,AAAA'), 'image/png')

    def test_without_parameters(self):
        self.assertEqual(encoding.get_base64_mime_type('data:text/plain,hello'), 'text/plain')

    def test_no_header(self):
        self.assertIsNone(encoding.get_base64_mime_type('AAAA'))
        self.assertIsNone(encoding.get_base64_mime_type(''))

class TestParseDataUriHeader(unittest.TestCase):
    def test_parse_data_uri_header(self):
        self.assertEqual(encoding.parse_data_uri_header('data:application/pdf;base64'), 'application/pdf')

    def test_malformed(self):
        with self.assertRaises(MimeTypeParseError):
            encoding.parse_data_uri_header('image/png;base64')

class TestFileToBase64(unittest.IsolatedAsyncioTestCase):
    async def test_file_object(self):
        result = await encoding.file_to_base64(io.BytesIO(b'12'), 'text/plain')
        self.assertEqual(result, 'data:text/plain;base64,MTI=')

    async def test_unknown_type(self):
        result = await encoding.file_to_base64(io.BytesIO(b'\x00\x01'))
        self.assertEqual(result, 'data:application/octet-stream;base64,AAE=')

    async def test_path_guesses_mime_type(self):
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / 'image.png'
            path.write_bytes(b'\x89PNG')
            result = await encoding.file_to_base64(path)
        self.assertEqual(result, 'data:image/png;base64,iVBORw==')

    async def test_missing_file(self):
        with TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                await encoding.file_to_base64(Path(tmp) / 'missing.txt')

class TestSaveBase64ToFile(unittest.TestCase):
    def test_data_uri(self):
        sink = MemorySink()
        encoding.save_base64_to_file('data:text/plain;base64,MTI=', 'numbers.txt', sink)
        self.assertEqual(len(sink.files), 1)
        saved = sink.files[0]
        self.assertEqual(saved.file_name, 'numbers.txt')
        self.assertEqual(saved.mime_type, 'text/plain')
        self.assertEqual(saved.data, b'12')

    def test_bare_payload(self):
        sink = MemorySink()
        encoding.save_base64_to_file('AAE=', 'blob.bin', sink)
        self.assertIsNone(sink.files[0].mime_type)
        self.assertEqual(sink.files[0].data, b'\x00\x01')

    def test_unparseable_header(self):
        sink = MemorySink()
        with self.assertLogs('webstrings.encoding', level='WARNING'):
            encoding.save_base64_to_file('garbage,MTI=', 'out.txt', sink)
        self.assertIsNone(sink.files[0].mime_type)
        self.assertEqual(sink.files[0].data, b'12')

    def test_malformed_payload(self):
        sink = MemorySink()
        with self.assertRaises(Base64DecodeError):
            encoding.save_base64_to_file('data:text/plain;base64,M', 'out.txt', sink)
        self.assertEqual(sink.files, [])
