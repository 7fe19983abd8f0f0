"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable without need for relayouting.
"""
import logging
import struct

from .meta import FieldBase, Endianess
from .properties import Dependency, ChunkPhase
from .exceptions import UnpackException, ValidationException


class Field(FieldBase):
    """Base class to subclass from"""

    invalid_exception = ValidationException

    def __init__(self, *args, name=None, father=None, default=None, offset=None,
                 endianess=Endianess.LITTLE_ENDIAN):
        super().__init__()
        self._phase = ChunkPhase.INIT
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.father = father
        self.default = default
        self.offset = offset
        self.endianess = endianess

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def get_dependencies(self):
        """Return the dictionary containing as key the attribute name"""
        instance_dict = self.__dict__
        return {_k: _v for _k, _v in instance_dict.items() if isinstance(_v, Dependency)}

    @property
    def is_sealed(self):
        return self._phase == ChunkPhase.DONE

    def seal(self):
        '''After this the value can't be changed anymore.'''
        self._phase = ChunkPhase.DONE

    def _get_value(self):
        return self._value

    def _set_value(self, value):
        self._value = value

    def _set_value_if_not_sealed(self, value):
        if self.is_sealed:
            raise AttributeError(f"field '{self.name}' is read-only")

        self._set_value(value)

    value = property(
        fget=lambda self: self._get_value(),
        fset=lambda self, value: self._set_value_if_not_sealed(value))

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _get_raw(self) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}._get_raw() not implemented")

    raw = property(
        fget=lambda self: self._get_raw(),
    )

    def relayout(self, offset=0):
        if not self.is_sealed:
            self.offset = offset

        return self.size

    def is_valid(self):
        '''Fields that can be checked against the rest of the chunk override this.'''
        return True

    def read(self, stream, size):
        '''Read exactly size bytes or fail.'''
        data = stream.read(size)

        if len(data) != size:
            raise UnpackException(
                chain=[],
                msg=f'expected {size} bytes but only {len(data)} are available')

        return data

    def pack(self, stream=None):
        if stream is not None:
            stream.write(self.raw)

        return self.raw

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def _set_value(self, value) -> None:
        try:
            struct.pack(self.get_format(), value)
        except struct.error as e:
            raise ValueError(f"value {value!r} can't be encoded with format '{self.get_format()}': {e}") from e

        super()._set_value(value)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def _get_raw(self) -> bytes:
        return struct.pack(self.get_format(), self.value)

    def unpack(self, stream):
        raw = self.read(stream, self.size)

        self.value = struct.unpack(self.get_format(), raw)[0]


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    The length can be a fixed integer or a Dependency, in the latter case
    setting the value updates the field the length depends on."""

    def __init__(self, n=None, **kw):
        if n is None and 'default' not in kw:
            raise ValueError(f"StringField must have 'n' or 'default' indicated!")

        self._length = n if n is not None else len(kw['default'])

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def __len__(self):
        return self.length

    @property
    def length(self):
        if isinstance(self._length, Dependency):
            return len(self.value)

        return self._length

    def value_from_default(self):
        if self.default is not None:
            return self.default

        return b'' if isinstance(self._length, Dependency) else b'\x00' * self._length

    def _set_value(self, value) -> None:
        if isinstance(value, int):
            raise TypeError(f'a byte string is needed for \'{self.name}\', not an integer')

        value = bytes(value)

        if isinstance(self._length, Dependency):
            if self.father is not None:
                self._length.resolve_and_set(self, len(value))
        elif len(value) != self._length:
            raise ValueError(f'you are trying to set a value with the wrong size (that is {self._length} bytes)')

        super()._set_value(value)

    def _get_size(self):
        return len(self.value)

    def _get_raw(self):
        return self.value

    def unpack(self, stream):
        length = self._length.resolve(self) if isinstance(self._length, Dependency) else self._length

        self.logger.debug('reading %d bytes for \'%s\'' % (length, self.name))

        super()._set_value(self.read(stream, length))
