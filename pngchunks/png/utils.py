import logging

from . import PNGChunk


logger = logging.getLogger(__name__)


def iter_chunks(raw):
    '''Unpack one chunk after the other till the data is exhausted.'''
    offset = 0

    while offset < len(raw):
        chunk = PNGChunk.from_bytes(raw[offset:])
        logger.debug(f'chunk {chunk.type.value} at offset {offset:08x} with size {chunk.size}')

        offset += chunk.size

        yield chunk


def get_chunk_by_type(chunks, name):
    chunk = list(filter(lambda x: str(x.type.value) == name, chunks))

    if len(chunk) == 0:
        raise ValueError(f'no chunk with type {name}')

    return chunk if len(chunk) > 1 else chunk[0]
