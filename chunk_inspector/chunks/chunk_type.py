"""
Chunk type codes for PNG-style chunked containers
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Union

from .base import InvalidChunkType
from .flags import ChunkTypeFlags

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


@dataclass(frozen=True, repr=False)
class ChunkType:
    """
    A validated 4-byte chunk type code

    The letter case of each byte carries one property:
    ancillary (0), private (1), reserved (2) and safe-to-copy (3).
    Instances are immutable and compare byte for byte.
    """

    raw: bytes

    SIZE = 4

    def __post_init__(self):
        if not isinstance(self.raw, bytes):
            raise InvalidChunkType(
                f"Chunk type must be bytes, got {type(self.raw).__name__}",
                InvalidChunkType.CHARSET
            )
        if len(self.raw) != self.SIZE:
            logger.debug(f"Rejected chunk type {self.raw!r}: length {len(self.raw)}")
            raise InvalidChunkType(
                f"Chunk type must be {self.SIZE} bytes, got {len(self.raw)}",
                InvalidChunkType.LENGTH
            )
        if not self.raw.isalpha():
            logger.debug(f"Rejected chunk type {self.raw!r}: not ASCII letters")
            reason = (InvalidChunkType.NOT_ASCII if not self.raw.isascii()
                      else InvalidChunkType.CHARSET)
            raise InvalidChunkType(
                f"Chunk type {self.raw!r} contains bytes outside A-Z/a-z",
                reason
            )

    @classmethod
    def from_bytes(cls, data: BytesLike) -> 'ChunkType':
        """
        Build a chunk type from 4 raw byte values

        Args:
            data: bytes-like object or iterable of ints (e.g. [82, 117, 83, 116])

        Returns:
            ChunkType holding the bytes unchanged

        Raises:
            InvalidChunkType: If data is not 4 ASCII letters
        """
        if isinstance(data, (int, str)):
            raise InvalidChunkType(
                f"Cannot build chunk type from {type(data).__name__}",
                InvalidChunkType.CHARSET
            )
        try:
            raw = bytes(data)
        except ValueError as e:
            raise InvalidChunkType(f"Byte value out of range in {data!r}",
                                   InvalidChunkType.NOT_ASCII) from e
        except TypeError as e:
            raise InvalidChunkType(f"Cannot read bytes from {data!r}",
                                   InvalidChunkType.CHARSET) from e
        return cls(raw)

    @classmethod
    def from_string(cls, text: str) -> 'ChunkType':
        """
        Build a chunk type from its 4 character name

        The characters must be alphabetic and the UTF-8 encoding must be
        exactly 4 ASCII letters, so multi-byte characters are rejected
        even when the byte count happens to match.

        Raises:
            InvalidChunkType: If text is not a 4 letter ASCII name
        """
        if not isinstance(text, str):
            raise InvalidChunkType(
                f"Chunk type name must be str, got {type(text).__name__}",
                InvalidChunkType.CHARSET
            )
        try:
            encoded = text.encode('utf-8')
        except UnicodeEncodeError as e:
            raise InvalidChunkType(f"Cannot encode chunk type name {text!r}",
                                   InvalidChunkType.NOT_ASCII) from e

        if len(encoded) != cls.SIZE:
            logger.debug(f"Rejected chunk type name {text!r}: {len(encoded)} bytes")
            raise InvalidChunkType(
                f"Chunk type name {text!r} is {len(encoded)} bytes, expected {cls.SIZE}",
                InvalidChunkType.LENGTH
            )
        if not text.isalpha():
            logger.debug(f"Rejected chunk type name {text!r}: non-alphabetic character")
            raise InvalidChunkType(
                f"Chunk type name {text!r} contains non-alphabetic characters",
                InvalidChunkType.CHARSET
            )
        return cls.from_bytes(encoded)

    def to_bytes(self) -> bytes:
        """Return the 4 raw bytes"""
        return self.raw

    def to_string(self) -> str:
        return self.raw.decode('ascii')

    def is_critical(self) -> bool:
        """Uppercase first letter: decoders must understand the chunk"""
        return self.raw[0:1].isupper()

    def is_public(self) -> bool:
        """Uppercase second letter: part of the public format"""
        return self.raw[1:2].isupper()

    def is_reserved_bit_valid(self) -> bool:
        """Third letter must be uppercase in the current format version"""
        return self.raw[2:3].isupper()

    def is_safe_to_copy(self) -> bool:
        """Lowercase fourth letter: editors may copy the chunk unmodified"""
        return self.raw[3:4].islower()

    def is_valid(self) -> bool:
        """Same as is_reserved_bit_valid"""
        return self.is_reserved_bit_valid()

    def flags(self) -> ChunkTypeFlags:
        """Collect the case-encoded properties into a flag set"""
        flags = ChunkTypeFlags(0)
        if self.is_critical():
            flags |= ChunkTypeFlags.CRITICAL
        if self.is_public():
            flags |= ChunkTypeFlags.PUBLIC
        if self.is_reserved_bit_valid():
            flags |= ChunkTypeFlags.RESERVED_VALID
        if self.is_safe_to_copy():
            flags |= ChunkTypeFlags.SAFE_TO_COPY
        return flags

    def describe(self) -> Dict[str, Any]:
        """
        Summarise the chunk type for diagnostics

        Returns:
            JSON serialisable dictionary of the name, bytes and properties
        """
        return {
            'name': self.to_string(),
            'bytes': list(self.raw),
            'critical': self.is_critical(),
            'public': self.is_public(),
            'reserved_bit_valid': self.is_reserved_bit_valid(),
            'safe_to_copy': self.is_safe_to_copy(),
            'valid': self.is_valid()
        }

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ChunkType({self.to_string()!r})"
