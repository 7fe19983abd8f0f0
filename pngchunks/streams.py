import io
import logging


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around in-memory binary data to
    uniform its properties with the ones of a file object.'''
    def __init__(self, obj):
        self.history = []

        if isinstance(obj, (bytes, bytearray, memoryview)):
            obj = io.BytesIO(bytes(obj))
        elif not isinstance(obj, io.BytesIO):
            raise ValueError('\'%s\' is the wrong kind of object for a stream' % obj.__class__.__name__)

        self.obj = obj

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __repr__(self):
        return f'<{self.__class__.__name__}(offset={self.obj.tell()})>'

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset)

        return self

    def read(self, size=-1):
        return self.obj.read(size)

    def read_all(self):
        '''Returns all the data from the actual offset till the end.'''
        return self.obj.read()

    def write(self, data):
        return self.obj.write(data)

    def getvalue(self):
        return self.obj.getvalue()

    def save(self):
        self.history.append(self.obj.tell())

    def restore(self):
        old_seek = self.history.pop()
        logger.debug('restoring offset %d' % old_seek)
        self.obj.seek(old_seek)
