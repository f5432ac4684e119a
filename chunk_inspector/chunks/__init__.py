# chunk_inspector/chunks/__init__.py
"""Chunk type parsing package."""
from .base import ChunkParsingError, InvalidChunkType
from .flags import ChunkTypeFlags
from .chunk_type import ChunkType
from .header import ChunkHeader, PNG_SIGNATURE, read_chunk_header, iter_chunk_headers

__all__ = [
    'ChunkParsingError',
    'InvalidChunkType',
    'ChunkTypeFlags',
    'ChunkType',
    'ChunkHeader',
    'PNG_SIGNATURE',
    'read_chunk_header',
    'iter_chunk_headers',
]
