'''
This is the main data structure of the format: the 4 fields represent
a chunk into the file. Each integer field is intended big-endian.

    +--------+------+--------------+-----+
    | length | type | data         | crc |
    +--------+------+--------------+-----+
        4       4     length bytes    4

The length counts only the data field, the crc field is network-byte-order
CRC-32 computed over the chunk type and chunk data, but not the length.
'''
import logging

from . import fields
from .chunk_type import ChunkType, SIZE as TYPE_SIZE
from .common.crc import CRC32
from .exceptions import (
    ChunkTypeException,
    ReservedBitException,
    TruncatedException,
    LengthMismatchException,
    CRCException,
    TextDecodeException,
)


logger = logging.getLogger(__name__)

LENGTH = fields.StructField('I', endianess=fields.Endianess.BIG_ENDIAN, name='length')
CRC = fields.StructField('I', endianess=fields.Endianess.NETWORK, name='crc')

MAX_LENGTH = 2 ** 32 - 1
# length + type + crc
OVERHEAD = LENGTH.size + TYPE_SIZE + CRC.size


def calculate_crc(chunk_type: ChunkType, data: bytes) -> int:
    crc = CRC32(chunk_type.raw)
    crc.update(data)
    return crc.value


class Chunk(object):
    '''A chunk owns its data, the length and the crc are derived from it
    at construction time and can not be changed afterwards.'''

    def __init__(self, chunk_type: ChunkType, data: bytes):
        if not isinstance(chunk_type, ChunkType):
            raise TypeError(f'chunk_type must be a ChunkType, not {chunk_type.__class__.__name__}')
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f'data must be a bytes-like object, not {data.__class__.__name__}')

        data = bytes(data)
        if len(data) > MAX_LENGTH:
            raise ValueError(f'data of {len(data)} bytes does not fit the length field')

        self._chunk_type = chunk_type
        self._data = data
        self._crc = calculate_crc(chunk_type, data)

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def size(self) -> int:
        '''Number of bytes occupied into the stream.'''
        return OVERHEAD + self.length

    def is_critical(self) -> bool:
        return self._chunk_type.is_critical()

    def data_as_string(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise TextDecodeException(chain=['data'], msg=f'data is not valid UTF-8: {e.reason}')

    @classmethod
    def unpack(cls, raw: bytes) -> 'Chunk':
        '''Build a chunk from a window containing exactly one chunk.

        Every inconsistency between the fields is an error: we don't try to
        recover a chunk with a wrong length or a wrong checksum.'''
        raw = bytes(raw)

        length = LENGTH.unpack(raw)
        offset = LENGTH.size

        type_raw = raw[offset:offset + TYPE_SIZE]
        if len(type_raw) < TYPE_SIZE:
            raise TruncatedException(chain=['type'])
        chunk_type = ChunkType(type_raw)
        offset += TYPE_SIZE

        logger.debug('unpacking chunk %r with declared length %d' % (chunk_type, length))

        if not chunk_type.is_letters():
            raise ChunkTypeException(chain=['type'], msg=f'invalid chunk type {type_raw!r}')
        if not chunk_type.is_reserved_bit_valid():
            raise ReservedBitException(chain=['type'], msg=f'reserved bit set in chunk type {type_raw!r}')

        rest = raw[offset:]
        if len(rest) < CRC.size:
            raise TruncatedException(chain=['crc'], msg='missing the trailing checksum')

        data, crc_raw = rest[:-CRC.size], rest[-CRC.size:]
        if len(data) != length:
            logger.warning('chunk %s declares %d bytes but contains %d' % (chunk_type, length, len(data)))
            raise LengthMismatchException(chain=['length'])

        chunk = cls(chunk_type, data)

        crc = CRC.unpack(crc_raw)
        if chunk.crc != crc:
            logger.warning('chunk %s has crc 0x%08x, expected 0x%08x' % (chunk_type, crc, chunk.crc))
            raise CRCException(chain=['crc'])

        return chunk

    def pack(self) -> bytes:
        return LENGTH.pack(self.length) + self._chunk_type.raw + self._data + CRC.pack(self._crc)

    def __bytes__(self):
        return self.pack()

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._chunk_type == other._chunk_type and self._data == other._data

    def __hash__(self):
        return hash((self._chunk_type, self._data))

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=0x%08x)>' % (
            self.__class__.__name__,
            self._chunk_type,
            self.length,
            self._crc,
        )

    def __str__(self):
        return f'Length {self.length} Type {self._chunk_type} CRC {self._crc}'
