'''
CRC-32 as used by the PNG chunks to detect corruption of the type and data fields.

Standard CRC methods with pre and post conditioning, as defined by ISO 3309 [ISO-3309]
or ITU-T V.42 [ITU-V42]. The CRC polynomial employed is

  x^32+x^26+x^23+x^22+x^16+x^12+x^11+x^10+x^8+x^7+x^5+x^4+x^2+x+1

The 32-bit CRC register is initialized to all 1's, and then the data from each byte is processed
from the least significant bit (1) to the most significant bit (128). After all the data bytes are processed,
the CRC register is inverted (its ones complement is taken). This value is transmitted (stored in the file)
MSB first.

See <https://www.w3.org/TR/PNG-Structure.html#CRC-algorithm>.
'''
from typing import Tuple

from .. import fields


POLYNOMIAL = 0xedb88320
MASK = 0xffffffff


def make_crc_table() -> Tuple[int, ...]:
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            if c & 1:
                c = POLYNOMIAL ^ (c >> 1)
            else:
                c = c >> 1
        table.append(c)

    return tuple(table)


CRC_TABLE = make_crc_table()


def update_crc(crc: int, data: bytes) -> int:
    '''Update a running (not inverted) CRC register with the bytes in data.'''
    for byte in data:
        crc = CRC_TABLE[(crc ^ byte) & 0xff] ^ (crc >> 8)

    return crc


def crc32(data: bytes, value: int = 0) -> int:
    '''Same calling convention of zlib.crc32(): pass the previous result as value
    to continue the checksum over consecutive buffers.'''
    return update_crc(value ^ MASK, data) ^ MASK


class CRC32:
    '''hashlib-like interface, e.g.

        crc = CRC32(b'IEND')
        crc.update(b'')
        crc.value  # 0xae426082
    '''
    name = 'crc32'
    digest_size = 4

    _field = fields.StructField('I', endianess=fields.Endianess.NETWORK)

    def __init__(self, data: bytes = b''):
        self._register = MASK
        self.update(data)

    def update(self, data: bytes) -> None:
        self._register = update_crc(self._register, data)

    @property
    def value(self) -> int:
        return self._register ^ MASK

    def digest(self) -> bytes:
        return self._field.pack(self.value)

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> 'CRC32':
        other = CRC32()
        other._register = self._register
        return other
