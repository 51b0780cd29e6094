'''The operations available from the command line: each one reads a PNG file,
eventually modifies it and writes it back.'''
import logging
from pathlib import Path

from .chunk import Chunk
from .chunk_type import ChunkType
from .exceptions import NotFoundException
from .png import PNGFile


logger = logging.getLogger(__name__)


def load(path) -> PNGFile:
    return PNGFile(Path(path))


def save(png: PNGFile, path) -> None:
    Path(path).write_bytes(png.pack())
    logger.debug('written %d chunks to \'%s\'' % (len(png), path))


def encode(path, chunk_type: str, message: str, output=None) -> Chunk:
    png = load(path)
    chunk = Chunk(ChunkType.from_str(chunk_type), message.encode('utf-8'))
    png.append_chunk(chunk)

    save(png, output if output is not None else path)
    logger.info('encoded %r' % chunk)

    return chunk


def decode(path, chunk_type: str) -> str:
    png = load(path)
    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        raise NotFoundException(msg=f'no chunk with type {chunk_type!r}')

    return chunk.data_as_string()


def remove(path, chunk_type: str) -> Chunk:
    png = load(path)
    chunk = png.remove_chunk(chunk_type)

    save(png, path)
    logger.info('removed %r' % chunk)

    return chunk


def print_chunks(path) -> str:
    return str(load(path))
