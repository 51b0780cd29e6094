import pytest

from pngstruct.chunk_type import ChunkType
from pngstruct.enum import ChunkTypeFlag
from pngstruct.exceptions import ChunkTypeException, FormatException


def test_chunk_type_from_bytes():
    chunk_type = ChunkType(bytes([82, 117, 83, 116]))

    assert chunk_type.raw == b'RuSt'
    assert bytes(chunk_type) == b'RuSt'


def test_chunk_type_from_str():
    assert ChunkType.from_str('RuSt') == ChunkType(b'RuSt')
    assert ChunkType.from_str('RuSt') != ChunkType(b'RUSt')
    assert hash(ChunkType.from_str('RuSt')) == hash(ChunkType(b'RuSt'))


def test_chunk_type_properties():
    chunk_type = ChunkType.from_str('RuSt')

    assert chunk_type.is_valid()
    assert chunk_type.is_critical()
    assert not chunk_type.is_public()
    assert chunk_type.is_reserved_bit_valid()
    assert chunk_type.is_safe_to_copy()
    assert chunk_type.flags == ChunkTypeFlag.PRIVATE | ChunkTypeFlag.SAFE_TO_COPY


@pytest.mark.parametrize('text,critical,public,reserved_valid,safe_to_copy', [
    ('ruSt', False, False, True, True),
    ('RUSt', True, True, True, True),
    ('RuST', True, False, True, False),
    ('IHDR', True, True, True, False),
    ('tEXt', False, True, True, True),
])
def test_chunk_type_bits(text, critical, public, reserved_valid, safe_to_copy):
    chunk_type = ChunkType.from_str(text)

    assert chunk_type.is_critical() == critical
    assert chunk_type.is_public() == public
    assert chunk_type.is_reserved_bit_valid() == reserved_valid
    assert chunk_type.is_safe_to_copy() == safe_to_copy


def test_chunk_type_reserved_bit_invalid():
    """It's possible to build it but it's not valid."""
    chunk_type = ChunkType.from_str('Rust')

    assert not chunk_type.is_reserved_bit_valid()
    assert not chunk_type.is_valid()
    assert ChunkTypeFlag.RESERVED in chunk_type.flags


@pytest.mark.parametrize('text', [
    'Ru1t',
    'RuS',
    'RuStt',
    '',
    'Ru t',
    'Rüst',  # 5 bytes when encoded
    'Rü',    # 3 bytes when encoded
    'Rüs',   # 4 bytes when encoded but not letters
])
def test_chunk_type_from_invalid_str(text):
    with pytest.raises(ChunkTypeException) as e:
        ChunkType.from_str(text)

    assert isinstance(e.value, FormatException)
    assert 'invalid chunk type' in str(e.value)


def test_chunk_type_from_raw_is_unchecked():
    chunk_type = ChunkType(b'1234')

    assert not chunk_type.is_letters()
    assert not chunk_type.is_valid()


def test_chunk_type_raw_wrong_size():
    with pytest.raises(ValueError):
        ChunkType(b'IHDRx')


def test_chunk_type_string():
    assert str(ChunkType.from_str('RuSt')) == 'RuSt'
    assert repr(ChunkType.from_str('RuSt')) == "<ChunkType(b'RuSt')>"


def test_chunk_type_string_not_ascii():
    """Not ASCII bytes are replaced when rendering."""
    assert str(ChunkType(b'Ru\xffT')) == 'Ru�T'
