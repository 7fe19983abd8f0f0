"""
Core module for the abstraction of a file format

"""
from typing import Tuple, List, Dict

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import PNGChunksException
from .properties import (
    get_root_from_chunk,
    ChunkPhase,
)


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: its main attributes
    are offset and size that identify a Chunk.

    A Chunk is described declaratively by its fields, packed and unpacked in
    the order they are declared

        class Record(Chunk):
            length = fields.StructField('I', endianess=Endianess.BIG_ENDIAN)
            data   = fields.StringField(Dependency('.length'))

    Passing some data (bytes or a Stream) to the constructor unpacks it.
    """

    def __init__(self, stream=None, **kwargs):
        super().__init__(**kwargs)

        if stream is not None:
            stream = stream if isinstance(stream, Stream) else Stream(stream)
            self.logger.debug('unpacking \'%s\' from %r' % (self.__class__.__name__, stream))
            self.unpack(stream)

        self.relayout()

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, field in self.get_fields():
            msg += '%s: %s\n' % (field_name, repr(field))
        return msg

    def __eq__(self, other):
        if not isinstance(other, Chunk) or other.__class__ != self.__class__:
            return NotImplemented

        return self.raw == other.raw

    def __hash__(self):
        return hash((self.__class__, self.raw))

    def __bytes__(self):
        return self.pack()

    def init(self):
        for _, field in self.get_fields():
            field.init()

    def _get_value(self):
        return {name: field.value for name, field in self.get_fields()}

    def _set_value(self, value):
        for name, field_value in value.items():
            getattr(self, name).value = field_value

    @property
    def root(self):
        '''Obtain the final father of this chunk'''
        return get_root_from_chunk(self)

    def seal(self):
        for _, field in self.get_fields():
            field.seal()

        super().seal()

    def _get_size(self):
        '''the size parameter MUST not be set but MUST be derived from the subchunks'''
        size = 0
        for _, field in self.get_fields():
            size += field.size

        return size

    def _get_raw(self):
        value = b''
        for field_name, field_instance in self.get_fields():
            field_raw = field_instance.raw
            self.logger.debug("field '{}' raw={!r}".format(field_name, field_raw))
            value += field_raw

        return value

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        result = {}
        for name, field in self.get_fields():
            result[name] = (field.offset, field.size)

        return result

    def relayout(self, offset=0):
        '''This method triggers the chunk's children to reset the offsets.'''
        if self.is_sealed:
            return self.size

        phase_old = self._phase
        self._phase = ChunkPhase.RELAYOUTING
        self.offset = offset

        size = 0
        for field_name, field_instance in self.get_fields():
            self.logger.debug('relayouting %s.%s' % (self.__class__.__name__, field_name))
            size += field_instance.relayout(offset=offset + size)

        self._phase = phase_old

        return size

    def pack(self, stream=None):
        '''Encode the chunk into its binary representation.

        If a stream is passed the data is written starting from its actual
        position, in any case the packed bytes are returned.'''
        self.relayout()

        out = Stream(b'')

        for field_name, field_instance in self.get_fields():
            self.logger.debug('packing %s.%s at offset %08x' % (
                self.__class__.__name__, field_name, field_instance.offset))
            out.seek(field_instance.offset)
            field_instance.pack(stream=out)

        data = out.getvalue()

        if stream is not None:
            stream.write(data)

        return data

    def unpack(self, stream):
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class this method
        is implemented.

        Any exception raised by a field gets the field name appended to its chain
        so that the caller knows exactly where the unpacking failed.'''
        self._phase = ChunkPhase.UNPACKING
        for field_name, field in self.get_fields():
            self.logger.debug('unpacking %s.%s at offset %d' % (
                self.__class__.__name__, field_name, stream.tell()))

            offset = stream.tell()

            try:
                field.unpack(stream)
            except PNGChunksException as e:
                e.chain.append(field_name)
                raise

            field.offset = offset

        self.validate()

        self._phase = ChunkPhase.INIT

    def validate(self):
        '''Check each field is consistent with the others, raising the
        exception the field indicates otherwise.'''
        for field_name, field in self.get_fields():
            if not field.is_valid():
                self.logger.warning(f'validation for field \'{field_name}\' failed')
                raise field.invalid_exception(chain=[field_name], msg=f'field \'{field_name}\' is not valid')
