import io
import os
import logging


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: we want to read sequentially the data
    and know when it's exhausted, without caring where it comes from.'''
    def __init__(self, obj, flags='rb'):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self.flags = flags
        self.obj = os.fspath(obj) if isinstance(obj, os.PathLike) else obj
        self._type = type(self.obj)
        self.history = []

        init_method_name = 'init_%s' % self._type.__name__

        init_method = getattr(self, init_method_name, None)
        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to use as stream' % self._type.__name__)

        init_method()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self._type.__name__)

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, self.flags)

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_bytes
    init_memoryview = init_bytes

    def close(self):
        self.obj.close()

    @property
    def size(self):
        self.save()
        self.obj.seek(0, io.SEEK_END)
        size = self.obj.tell()
        self.restore()

        return size

    def eof(self):
        return self.obj.tell() >= self.size

    def read_all(self):
        '''Returns all the data from the actual position until the end'''
        return self.obj.read()

    def save(self):
        self.history.append(self.obj.tell())

    def restore(self):
        old_seek = self.history.pop()
        self.obj.seek(old_seek)
