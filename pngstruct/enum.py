from enum import Enum, Flag, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()
    NETWORK       = auto()
    NATIVE        = auto()


class ChunkTypeFlag(Flag):
    '''The properties encoded by bit 5 of each byte of a chunk type (i.e. the
    case of the letter): a set bit means lowercase.'''
    NONE         = 0
    ANCILLARY    = 1 << 0
    PRIVATE      = 1 << 1
    RESERVED     = 1 << 2
    SAFE_TO_COPY = 1 << 3
