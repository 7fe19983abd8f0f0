class PNGChunksException(Exception):
    '''Base class to extend in order to throw exception in pngchunks.

    It takes as first argument the chain of the layer that caused the
    exception (innermost field first); every chunk the exception passes
    through while unpacking appends its own field name.
    '''

    def __init__(self, chain, msg=None):
        self.chain = chain
        self.msg = msg
        super().__init__(msg)

    def __str__(self):
        where = '.'.join(reversed(self.chain))
        if not where:
            return self.msg or ''

        return f'{where}: {self.msg}' if self.msg else where


class UnpackException(PNGChunksException):
    '''There are not enough bytes in the stream to unpack a field.'''
    pass


class ChunkTooSmallException(UnpackException):
    pass


class InvalidDataLengthException(UnpackException):
    '''The declared length doesn't fit into the available data.'''
    pass


class InvalidChunkTypeException(PNGChunksException):
    pass


class ChunkTypeLengthException(InvalidChunkTypeException):
    pass


class ValidationException(PNGChunksException):
    '''A field was unpacked correctly but its value is not consistent
    with the rest of the chunk.'''
    pass


class CRCException(ValidationException):
    pass
