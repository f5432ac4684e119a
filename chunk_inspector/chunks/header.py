"""
Chunk header reading for PNG-style containers

Each chunk is laid out as a 4-byte big-endian length, the 4-byte type,
the payload and a 4-byte CRC. Only the header is read here; payloads
and CRCs are skipped.
"""

import logging
import struct
from dataclasses import dataclass
from typing import Iterator

from .base import ChunkParsingError
from .chunk_type import ChunkType

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'
CHUNK_HEADER_SIZE = 8
CHUNK_CRC_SIZE = 4


@dataclass(frozen=True)
class ChunkHeader:
    """Header of a single chunk"""
    length: int
    chunk_type: ChunkType
    offset: int

    @property
    def data_offset(self) -> int:
        return self.offset + CHUNK_HEADER_SIZE

    @property
    def end_offset(self) -> int:
        """Offset just past the chunk CRC"""
        return self.data_offset + self.length + CHUNK_CRC_SIZE


def read_chunk_header(data: bytes, offset: int = 0, reversed_name: bool = False) -> ChunkHeader:
    """
    Read a chunk header at the given offset

    Args:
        data: Raw container bytes
        offset: Offset of the length field
        reversed_name: Whether the type bytes are stored reversed

    Returns:
        ChunkHeader with a validated chunk type

    Raises:
        ChunkParsingError: If fewer than 8 bytes remain
        InvalidChunkType: If the type field is not 4 ASCII letters
    """
    header = bytes(data[offset:offset + CHUNK_HEADER_SIZE])
    if len(header) < CHUNK_HEADER_SIZE:
        raise ChunkParsingError(
            f"Truncated chunk header at offset {offset}: {len(header)} bytes"
        )

    length = struct.unpack('>I', header[:4])[0]
    name = header[4:8]
    if reversed_name:
        name = name[::-1]

    chunk_type = ChunkType.from_bytes(name)
    logger.debug(f"Chunk {chunk_type} at {offset}, length {length}")
    return ChunkHeader(length=length, chunk_type=chunk_type, offset=offset)


def iter_chunk_headers(data: bytes, offset: int = 0) -> Iterator[ChunkHeader]:
    """
    Walk consecutive chunk headers until the data is exhausted

    Args:
        data: Raw container bytes
        offset: Offset of the first chunk (len(PNG_SIGNATURE) to skip a PNG signature)

    Yields:
        ChunkHeader for each chunk

    Raises:
        ChunkParsingError: If a chunk extends beyond the end of data
    """
    size = len(data)
    while offset < size:
        header = read_chunk_header(data, offset)
        if header.end_offset > size:
            raise ChunkParsingError(
                f"Chunk {header.chunk_type} at {offset} extends beyond end of data"
            )
        yield header
        offset = header.end_offset
