import io
import struct
import zlib
from pathlib import Path

import pytest
from PIL import Image

from pngstruct.png import PNG_SIGNATURE


def make_raw_chunk(chunk_type: bytes, data: bytes, crc=None) -> bytes:
    '''Build the binary representation of a chunk independently from the library.'''
    if crc is None:
        crc = zlib.crc32(chunk_type + data)
    return struct.pack('>I', len(data)) + chunk_type + data + struct.pack('>I', crc)


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def red_png_bytes():
    """A real 5x5 red image encoded by Pillow."""
    buffer = io.BytesIO()
    Image.new('RGB', (5, 5), 'red').save(buffer, format='PNG')
    return buffer.getvalue()


@pytest.fixture
def red_png_path(tmp_path, red_png_bytes):
    path = tmp_path / 'red.png'
    path.write_bytes(red_png_bytes)
    return path


@pytest.fixture
def minimal_png_bytes():
    """Signature followed by a single chunk of type teSt containing 'hello'."""
    return PNG_SIGNATURE + make_raw_chunk(b'teSt', b'hello')
