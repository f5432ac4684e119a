"""Base chunk errors."""


class ChunkParsingError(Exception):
    """Raised when chunk data cannot be read."""
    pass


class InvalidChunkType(ChunkParsingError, ValueError):
    """Raised when a 4-byte chunk type code fails validation.

    Args:
        message: Human readable description
        reason: One of LENGTH, CHARSET or NOT_ASCII
    """

    LENGTH = 'length'
    CHARSET = 'charset'
    NOT_ASCII = 'not_ascii'

    def __init__(self, message: str, reason: str = CHARSET):
        super().__init__(message)
        self.reason = reason
