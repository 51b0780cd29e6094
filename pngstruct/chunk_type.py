'''
The chunk type is a 4-byte code whose bytes are restricted to the ASCII letters
A-Z and a-z; bit 5 of each byte (the case of the letter) carries a property of
the chunk:

 1. ancillary bit (first byte): 0 (uppercase) = critical, 1 (lowercase) = ancillary
 2. private bit (second byte): 0 = public, 1 = private
 3. reserved bit (third byte): must be 0 in files conforming to this version of PNG
 4. safe-to-copy bit (fourth byte): 0 = unsafe to copy, 1 = safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
from bitstring import Bits

from .enum import ChunkTypeFlag
from .exceptions import ChunkTypeException


SIZE = 4
# flag for the property bit of each byte, in order
PROPERTY_FLAGS = (
    ChunkTypeFlag.ANCILLARY,
    ChunkTypeFlag.PRIVATE,
    ChunkTypeFlag.RESERVED,
    ChunkTypeFlag.SAFE_TO_COPY,
)
# position of bit 5 (value 32) inside each byte, counting from the MSB
PROPERTY_BIT = 2


def is_letter(b: int) -> bool:
    return 0x41 <= b <= 0x5a or 0x61 <= b <= 0x7a


class ChunkType(object):
    '''Immutable 4-byte tag.

    The constructor takes the raw bytes without checking them, since we need
    to represent whatever is found into a stream; use from_str() to build one
    from user supplied text.'''

    def __init__(self, raw):
        raw = bytes(raw)
        if len(raw) != SIZE:
            raise ValueError(f'a chunk type is exactly {SIZE} bytes, got {len(raw)}')

        self._raw = raw
        self._bits = Bits(bytes=raw)

    @classmethod
    def from_str(cls, text: str) -> 'ChunkType':
        if not isinstance(text, str):
            raise TypeError(f'expected str, got {text.__class__.__name__}')

        raw = text.encode('utf-8')
        if len(raw) != SIZE or not all(is_letter(_) for _ in raw):
            raise ChunkTypeException(msg=f'invalid chunk type {text!r}')

        return cls(raw)

    @property
    def raw(self) -> bytes:
        return self._raw

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self._raw.decode('ascii', errors='replace')

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self._raw)

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def _is_property_bit_set(self, index: int) -> bool:
        return self._bits[index * 8 + PROPERTY_BIT]

    def is_letters(self) -> bool:
        return all(is_letter(_) for _ in self._raw)

    def is_valid(self) -> bool:
        return self.is_letters() and self.is_reserved_bit_valid()

    def is_critical(self) -> bool:
        return not self._is_property_bit_set(0)

    def is_public(self) -> bool:
        return not self._is_property_bit_set(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._is_property_bit_set(2)

    def is_safe_to_copy(self) -> bool:
        return self._is_property_bit_set(3)

    @property
    def flags(self) -> ChunkTypeFlag:
        flags = ChunkTypeFlag.NONE
        for index, flag in enumerate(PROPERTY_FLAGS):
            if self._is_property_bit_set(index):
                flags |= flag

        return flags
