import pytest

from pngchunks.exceptions import InvalidChunkTypeException, ChunkTypeLengthException
from pngchunks.png.chunk_type import ChunkType


def test_chunk_type_from_bytes():
    expected = bytes([82, 117, 83, 116])
    actual = ChunkType([82, 117, 83, 116])

    assert actual.bytes() == expected
    assert ChunkType(b'RuSt') == actual
    assert ChunkType(bytearray(b'RuSt')) == actual


def test_chunk_type_from_str():
    assert ChunkType.from_str('RuSt') == ChunkType([82, 117, 83, 116])


def test_chunk_type_from_str_with_wrong_length():
    with pytest.raises(ChunkTypeLengthException):
        ChunkType.from_str('RuS')

    with pytest.raises(ChunkTypeLengthException):
        ChunkType.from_str('RuStt')

    # the length is in bytes, not characters
    with pytest.raises(ChunkTypeLengthException):
        ChunkType.from_str('Ruśt')

    with pytest.raises(ChunkTypeLengthException):
        ChunkType(b'RuS')


def test_chunk_type_only_letters():
    with pytest.raises(InvalidChunkTypeException):
        ChunkType.from_str('Ru1t')

    with pytest.raises(InvalidChunkTypeException):
        ChunkType(b'Ru\x00t')

    with pytest.raises(InvalidChunkTypeException) as e:
        ChunkType.from_str('Ruś')

    assert not isinstance(e.value, ChunkTypeLengthException)

    for border in (b'@', b'[', b'`', b'{'):
        with pytest.raises(InvalidChunkTypeException):
            ChunkType(b'RuS' + border)


def test_chunk_type_is_critical():
    assert ChunkType.from_str('RuSt').is_critical()
    assert not ChunkType.from_str('ruSt').is_critical()


def test_chunk_type_is_public():
    assert ChunkType.from_str('RUSt').is_public()
    assert not ChunkType.from_str('RuSt').is_public()


def test_chunk_type_is_reserved_bit_valid():
    assert ChunkType.from_str('RuSt').is_reserved_bit_valid()
    assert not ChunkType.from_str('Rust').is_reserved_bit_valid()


def test_chunk_type_is_safe_to_copy():
    assert ChunkType.from_str('RuSt').is_safe_to_copy()
    assert not ChunkType.from_str('RuST').is_safe_to_copy()


def test_chunk_type_is_valid():
    assert ChunkType.from_str('RuSt').is_valid()
    assert not ChunkType.from_str('Rust').is_valid()


def test_chunk_type_boundary_letters():
    upper = ChunkType(b'AZAZ')
    lower = ChunkType(b'azaz')

    assert upper.is_critical() and upper.is_public() and upper.is_reserved_bit_valid()
    assert not upper.is_safe_to_copy()

    assert not lower.is_critical() and not lower.is_public() and not lower.is_reserved_bit_valid()
    assert lower.is_safe_to_copy()


def test_chunk_type_string():
    chunk_type = ChunkType.from_str('RuSt')

    assert str(chunk_type) == 'RuSt'
    assert repr(chunk_type) == "<ChunkType(b'RuSt')>"


def test_chunk_type_is_a_value():
    chunk_type = ChunkType.from_str('RuSt')

    assert chunk_type == ChunkType(b'RuSt')
    assert chunk_type != ChunkType(b'RuST')
    assert chunk_type != b'RuSt'
    assert len({chunk_type, ChunkType(b'RuSt')}) == 1

    with pytest.raises(AttributeError):
        chunk_type._bytes = b'IEND'


def test_chunk_type_every_case_combination():
    for mask in range(16):
        letters = [
            _.upper() if mask & (1 << idx) else _
            for idx, _ in enumerate('rust')
        ]
        chunk_type = ChunkType.from_str(''.join(letters))

        assert chunk_type.is_critical() == bool(mask & 0b0001)
        assert chunk_type.is_public() == bool(mask & 0b0010)
        assert chunk_type.is_reserved_bit_valid() == bool(mask & 0b0100)
        assert chunk_type.is_safe_to_copy() == (not mask & 0b1000)
