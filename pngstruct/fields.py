"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable without need of knowing anything about the surrounding data.
"""
import logging
import struct

from .enum import Endianess
from .exceptions import TruncatedException


logger = logging.getLogger(__name__)


class StructField(object):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """
    PREFIXES = {
        Endianess.LITTLE_ENDIAN: '<',
        Endianess.BIG_ENDIAN: '>',
        Endianess.NETWORK: '!',
        Endianess.NATIVE: '=',
    }

    def __init__(self, format, endianess=Endianess.LITTLE_ENDIAN, name=None):
        self.format = format
        self.endianess = endianess
        self.name = name

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.get_format())

    def get_format(self):
        return '%s%s' % (self.PREFIXES[self.endianess], self.format)

    @property
    def size(self):
        return struct.calcsize(self.get_format())

    def pack(self, value: int) -> bytes:
        try:
            return struct.pack(self.get_format(), value)
        except struct.error as e:
            raise ValueError(f'value {value!r} cannot be packed as {self.get_format()!r}: {e}')

    def unpack(self, raw: bytes) -> int:
        if len(raw) < self.size:
            logger.debug('field %s needs %d bytes, got %d' % (self.name, self.size, len(raw)))
            raise TruncatedException(chain=[self.name] if self.name else [])

        return struct.unpack(self.get_format(), raw[:self.size])[0]
