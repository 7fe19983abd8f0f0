from .. import fields
from .chunk_type import ChunkType, CHUNK_TYPE_SIZE


class ChunkTypeField(fields.Field):
    '''The type of a chunk: a string field whose value is a ChunkType,
    so the ASCII-letter rule is enforced both setting and unpacking it.'''

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value!r})>'

    def _set_value(self, value):
        if value is not None and not isinstance(value, ChunkType):
            value = ChunkType.from_str(value) if isinstance(value, str) else ChunkType(value)

        super()._set_value(value)

    def _get_size(self):
        return CHUNK_TYPE_SIZE

    def _get_raw(self):
        if self.value is None:
            raise ValueError(f"field '{self.name}' has no chunk type set")

        return self.value.bytes()

    def unpack(self, stream):
        self.value = ChunkType(self.read(stream, self.size))
