# chunk_inspector/chunks/flags.py
from enum import IntFlag, auto


class ChunkTypeFlags(IntFlag):
    """Properties encoded in the letter case of a chunk type."""
    CRITICAL = auto()        # Byte 0 uppercase
    PUBLIC = auto()          # Byte 1 uppercase
    RESERVED_VALID = auto()  # Byte 2 uppercase
    SAFE_TO_COPY = auto()    # Byte 3 lowercase
