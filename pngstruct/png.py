'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

Here we are interested only in the chunk layer: a PNG file is a signature
followed by a sequence of chunks whose data is kept opaque, so that it's
possible to add and remove chunks without knowing anything about the image.
'''
import logging
from typing import Iterator, List, Optional

from .chunk import Chunk, LENGTH, OVERHEAD
from .chunk_type import PROPERTY_FLAGS
from .exceptions import (
    FormatException,
    MagicException,
    NotFoundException,
    TruncatedException,
)
from .streams import Stream


logger = logging.getLogger(__name__)

PNG_SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'


class PNGFile(object):
    '''The signature followed by an ordered list of chunks.

    You can pass a path or the raw bytes of a file to unpack it directly

        png = PNGFile('image.png')
        png = PNGFile(open('image.png', 'rb').read())

    otherwise you can build it passing the chunks.
    '''

    def __init__(self, filepath=None, chunks=None):
        self.logger = logging.getLogger(f'{self.__module__}.{self.__class__.__name__}')
        self._chunks: List[Chunk] = list(chunks) if chunks else []

        if filepath is not None:
            with Stream(filepath) as stream:
                self.logger.debug('unpacking \'%s\' from %s' % (self.__class__.__name__, stream))
                self.unpack(stream)

    @property
    def header(self) -> bytes:
        return PNG_SIGNATURE

    @property
    def chunks(self):
        '''A read-only view of the chunks: use append_chunk() and remove_chunk() to modify them.'''
        return tuple(self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self._chunks)

    def __getitem__(self, item):
        return self._chunks[item]

    def unpack(self, stream: Stream) -> None:
        '''Read the whole stream: either all the chunks are fine or nothing is
        loaded into this instance.'''
        magic = stream.read(len(PNG_SIGNATURE))
        if magic != PNG_SIGNATURE:
            self.logger.warning('magic doesn\'t correspond: %r' % magic)
            raise MagicException(chain=['header'])

        chunks = []
        while not stream.eof():
            offset = stream.tell()
            try:
                chunks.append(self._unpack_chunk(stream))
            except FormatException as e:
                e.chain.append('chunks[%d]' % len(chunks))
                raise
            self.logger.debug('chunk %r at offset 0x%08x' % (chunks[-1], offset))

        self._chunks = chunks

    def _unpack_chunk(self, stream: Stream) -> Chunk:
        '''Read exactly the bytes of the next chunk, using the length field to know how many.'''
        stream.save()
        length = LENGTH.unpack(stream.read(LENGTH.size))
        stream.restore()

        window = stream.read(OVERHEAD + length)
        if len(window) < OVERHEAD + length:
            raise TruncatedException(
                chain=['data'],
                msg=f'chunk needs {OVERHEAD + length} bytes but only {len(window)} are left')

        return Chunk.unpack(window)

    def append_chunk(self, chunk: Chunk) -> None:
        if not isinstance(chunk, Chunk):
            raise TypeError(f'expected Chunk, got {chunk.__class__.__name__}')
        self._chunks.append(chunk)

    def _index_by_type(self, name: str) -> Optional[int]:
        for idx, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == name:
                return idx

        return None

    def chunk_by_type(self, name: str) -> Optional[Chunk]:
        '''Return the first chunk with the given type, None if there is none.'''
        idx = self._index_by_type(name)
        return self._chunks[idx] if idx is not None else None

    def remove_chunk(self, name: str) -> Chunk:
        '''Remove and return the first chunk with the given type.'''
        idx = self._index_by_type(name)
        if idx is None:
            raise NotFoundException(msg=f'no chunk with type {name!r}')

        chunk = self._chunks.pop(idx)
        self.logger.debug('removed %r at index %d' % (chunk, idx))

        return chunk

    def pack(self) -> bytes:
        return PNG_SIGNATURE + b''.join(_.pack() for _ in self._chunks)

    def __bytes__(self):
        return self.pack()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(repr(_) for _ in self._chunks))

    def __str__(self):
        lines = []
        for idx, chunk in enumerate(self._chunks):
            flags = chunk.chunk_type.flags
            lines.append('[%02d] %s length=%d crc=0x%08x %s' % (
                idx,
                chunk.chunk_type,
                chunk.length,
                chunk.crc,
                '|'.join(_.name for _ in PROPERTY_FLAGS if _ in flags) or '-',
            ))

        return '\n'.join(lines)
