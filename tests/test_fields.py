import pytest

from pngchunks.exceptions import UnpackException
from pngchunks.fields import StructField, StringField
from pngchunks.meta import Endianess
from pngchunks.streams import Stream


def test_structfield_conversion_raw_value():
    """Check that the attributes "value" and "raw" are the analogous
    of the integers and bytes representation for a field."""
    field = StructField('I')

    assert field.size == 4
    assert field.raw == b'\x00\x00\x00\x00'
    assert field.value == 0

    field.value = 0xcafe

    assert field.value == 0xcafe
    assert field.raw == b'\xfe\xca\x00\x00'


def test_structfield_big_endian():
    field = StructField('I', endianess=Endianess.BIG_ENDIAN)

    field.value = 0xcafe

    assert field.raw == b'\x00\x00\xca\xfe'


def test_structfield_out_of_range():
    field = StructField('I')

    with pytest.raises(ValueError):
        field.value = 2**32

    with pytest.raises(ValueError):
        field.value = -1

    assert field.value == 0


def test_structfield_unpack():
    field = StructField('I')

    field.unpack(Stream(b'\x01\x02\x03\x04'))
    assert field.value == 0x04030201

    with pytest.raises(UnpackException) as e:
        field.unpack(Stream(b'\x01\x02'))

    assert e.value.chain == []


def test_stringfield():
    field = StringField(0x10)

    assert field.size == 0x10
    assert len(field.raw) == field.size
    assert field.raw == b'\x00' * field.size

    with pytest.raises(ValueError):
        field.value = b'kebab'

    data = b''.join([bytes([_]) for _ in range(0x10)])

    field.value = data

    assert field.value == data
    assert field.raw == data


def test_stringfield_needs_length():
    with pytest.raises(ValueError):
        StringField()

    field = StringField(default=b'kebab')

    assert len(field) == 5


def test_stringfield_unpack_short():
    field = StringField(8)

    with pytest.raises(UnpackException):
        field.unpack(Stream(b'kebab'))


def test_sealed_field():
    field = StructField('I', default=0xbad)

    field.seal()

    assert field.is_sealed

    with pytest.raises(AttributeError):
        field.value = 0xcafe

    assert field.value == 0xbad


def test_stringfield_rejects_integers():
    field = StringField(5)

    with pytest.raises(TypeError):
        field.value = 5

    assert field.value == b'\x00' * 5


def test_sealed_field_keeps_offset():
    field = StructField('I')

    field.relayout(offset=8)
    field.seal()

    assert field.relayout(offset=99) == 4
    assert field.offset == 8
