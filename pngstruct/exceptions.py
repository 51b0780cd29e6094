class PNGStructException(Exception):
    '''Base class to extend in order to throw exception in pngstruct.

    It takes as first argument the chain of the components that caused
    the exception, innermost first; each layer re-raising the exception
    appends its own name so that the final message points to the exact
    location into the stream.
    '''
    description = 'unable to process the stream'

    def __init__(self, chain=None, msg=None):
        self.chain = chain if chain is not None else []
        self.msg = msg or self.description
        super().__init__(self.msg)

    @property
    def location(self):
        return '.'.join(reversed(self.chain))

    def __str__(self):
        location = self.location
        return f'{self.msg} at {location}' if location else self.msg


class FormatException(PNGStructException):
    description = 'invalid format'


class MagicException(FormatException):
    description = 'not a recognized container'


class ChunkTypeException(FormatException):
    description = 'invalid chunk type'


class ReservedBitException(FormatException):
    description = 'reserved bit of the chunk type is set'


class TruncatedException(FormatException):
    description = 'truncated data'


class LengthMismatchException(FormatException):
    description = 'length field does not match payload size'


class CRCException(FormatException):
    description = 'checksum mismatch'


class NotFoundException(PNGStructException):
    description = 'chunk not found'


class TextDecodeException(PNGStructException):
    description = 'data is not valid UTF-8'
