'''
The chunk type is a 4-byte code restricted to the ASCII letters: the case
of each letter (that is bit 5 of each byte) encodes a property of the chunk

    RuSt
    ||||
    |||+- safe-to-copy bit: lowercase means safe to copy
    ||+-- reserved bit: must be uppercase
    |+--- private bit: uppercase means public
    +---- ancillary bit: uppercase means critical

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structures.html#Chunk-naming-conventions>.
'''
import logging

from bitstring import Bits

from ..exceptions import InvalidChunkTypeException, ChunkTypeLengthException


logger = logging.getLogger(__name__)

CHUNK_TYPE_SIZE = 4

# bit 5 of each byte, counting from the most significant one
PROPERTY_BIT = 2


class ChunkType(object):
    '''Immutable 4-byte chunk type code.'''

    __slots__ = ('_bytes', '_bits')

    def __init__(self, raw):
        raw = bytes(raw)

        if len(raw) != CHUNK_TYPE_SIZE:
            raise ChunkTypeLengthException(
                chain=[], msg=f'chunk type must be {CHUNK_TYPE_SIZE} bytes, not {len(raw)}')

        if not raw.isalpha():
            raise InvalidChunkTypeException(chain=[], msg=f'invalid chunk type {raw!r}')

        object.__setattr__(self, '_bytes', raw)
        object.__setattr__(self, '_bits', Bits(raw))

    @classmethod
    def from_str(cls, text):
        raw = text.encode('utf-8')

        logger.debug(f'chunk type from string {text!r}')

        if len(raw) != CHUNK_TYPE_SIZE:
            raise ChunkTypeLengthException(
                chain=[], msg=f'chunk type must be {CHUNK_TYPE_SIZE} bytes, {text!r} is {len(raw)}')

        return cls(raw)

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        return (self.__class__, (self._bytes,))

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._bytes == other._bytes

    def __hash__(self):
        return hash(self._bytes)

    def __str__(self):
        return self._bytes.decode('ascii')

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._bytes!r})>'

    def bytes(self):
        return self._bytes

    def _is_upper(self, pos):
        return not self._bits[pos * 8 + PROPERTY_BIT]

    def is_critical(self):
        return self._is_upper(0)

    def is_public(self):
        return self._is_upper(1)

    def is_reserved_bit_valid(self):
        return self._is_upper(2)

    def is_safe_to_copy(self):
        return not self._is_upper(3)

    def is_valid(self):
        '''The only constraint not enforced at construction time is the reserved bit.'''
        return self.is_reserved_bit_valid()
