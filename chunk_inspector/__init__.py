# chunk_inspector/__init__.py
"""Chunk type inspector package."""
from .chunks import ChunkType, ChunkTypeFlags, ChunkParsingError, InvalidChunkType

__version__ = '0.1.0'

__all__ = [
    'ChunkType',
    'ChunkTypeFlags',
    'ChunkParsingError',
    'InvalidChunkType'
]
