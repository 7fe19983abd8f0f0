'''
# Portable Network Graphics chunks

A PNG datastream is a sequence of chunks, each one self-describing: its length,
its type, the data and a CRC to detect corruption.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Structures.html>.

'''
import logging

from ..core import Chunk
from ..fields import StructField, StringField
from ..meta import Endianess
from ..properties import Dependency
from ..common.crc import CRCField
from ..exceptions import (
    ChunkTooSmallException,
    InvalidDataLengthException,
    UnpackException,
)
from .chunk_type import ChunkType
from .fields import ChunkTypeField


logger = logging.getLogger(__name__)

# length, type and crc
CHUNK_OVERHEAD = 12
MAX_DATA_LENGTH = 2**32 - 1


class PNGChunk(Chunk):
    '''This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each field is intended big-endian.

    The length counts only the bytes of the data field. The crc field is
    network-byte-order CRC-32 computed over the chunk type and chunk data,
    but not the length.

    A chunk is built either from its type and data

        chunk = PNGChunk(ChunkType.from_str('RuSt'), b'kebab')

    or unpacking it from bytes with PNGChunk.from_bytes(); in both cases
    the resulting chunk is read-only.
    '''
    length = StructField('I', endianess=Endianess.BIG_ENDIAN)
    type   = ChunkTypeField()
    data   = StringField(Dependency('.length'))
    crc    = CRCField(['type', 'data'], endianess=Endianess.BIG_ENDIAN)

    def __init__(self, chunk_type=None, data=b'', stream=None, **kwargs):
        if chunk_type is None and stream is None:
            raise ValueError('a chunk type is needed to build a chunk')

        super().__init__(stream=stream, **kwargs)

        if stream is None:
            self.type.value = chunk_type
            self.data.value = data
            self.crc.update()
            self.relayout()

        self.seal()

    @classmethod
    def from_bytes(cls, raw):
        '''Unpack the chunk at the start of raw, what follows it is ignored.'''
        if len(raw) < CHUNK_OVERHEAD:
            raise ChunkTooSmallException(
                chain=[], msg=f'a chunk is at least {CHUNK_OVERHEAD} bytes, got {len(raw)}')

        try:
            return cls(stream=raw)
        except UnpackException as e:
            raise InvalidDataLengthException(chain=e.chain, msg=f'data length is invalid ({e.msg})') from e

    def __str__(self):
        return self.data_as_string() or ''

    def data_as_string(self):
        '''Returns the data decoded as UTF-8, None if it's not text.'''
        try:
            return self.data.value.decode('utf-8')
        except UnicodeDecodeError:
            logger.debug(f'data of chunk {self.type.value} is not UTF-8')
            return None

    def is_critical(self):
        return self.type.value.is_critical()
