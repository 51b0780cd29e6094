"""
# pngstruct: the chunk layer of PNG files.

A PNG file is a fixed 8 bytes signature followed by a sequence of chunks,
each one made of

 1. length: 4 bytes big-endian, the size of the data field
 2. type: 4 ASCII letters whose case encodes the properties of the chunk
 3. data: length bytes, opaque at this level
 4. crc: 4 bytes big-endian, CRC-32 of type and data

Three operations are defined for the format and its sub components:

 1. unpack(): read the binary data and build a high-level representation of that;
    every inconsistency (wrong signature, invalid type, wrong length, wrong checksum)
    aborts the whole operation.

 2. pack(): encode the high-level representation into binary data.

 3. mutation: chunks can be appended to and removed from a PNGFile, the
    chunks themselves are immutable.

"""
from .chunk import Chunk
from .chunk_type import ChunkType
from .png import PNGFile, PNG_SIGNATURE
from .exceptions import (
    PNGStructException,
    FormatException,
    MagicException,
    ChunkTypeException,
    ReservedBitException,
    TruncatedException,
    LengthMismatchException,
    CRCException,
    NotFoundException,
    TextDecodeException,
)
