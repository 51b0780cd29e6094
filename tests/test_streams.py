import pytest

from pngstruct.streams import Stream


def test_bytes_stream_read_all():
    data = b'\x01\x02\x03\x04\x05'

    stream = Stream(data)

    assert stream.size == 5
    assert stream.read(1) == b'\x01'
    assert stream.read(1) == b'\x02'
    assert not stream.eof()
    assert stream.read_all() == b'\x03\x04\x05'
    assert stream.tell() == 5
    assert stream.eof()


def test_file_stream_read_all(tmp_path):
    data = b'\x01\x02\x03\x04\x05'
    path_data = tmp_path / 'auaua'
    path_data.write_bytes(data)

    for path in (path_data, str(path_data)):
        with Stream(path) as stream:
            assert stream.read(1) == b'\x01'
            assert stream.read(1) == b'\x02'
            assert stream.read_all() == b'\x03\x04\x05'
            assert stream.tell() == 5

        assert stream.closed


def test_save_restore():
    stream = Stream(bytearray(b'abcdef'))

    stream.read(2)
    stream.save()
    assert stream.read(3) == b'cde'
    stream.restore()

    assert stream.tell() == 2
    assert stream.read(1) == b'c'


def test_wrong_kind():
    with pytest.raises(ValueError):
        Stream(42)
