"""
Tests for reading chunk headers from PNG-style data
"""

import struct
import zlib

import pytest

from chunk_inspector.chunks import (
    ChunkType, ChunkParsingError, InvalidChunkType,
    PNG_SIGNATURE, read_chunk_header, iter_chunk_headers
)


def create_test_chunk(name: bytes, data: bytes, reversed: bool = False) -> bytes:
    """Create a test chunk with length, name, data and CRC"""
    chunk_name = name[::-1] if reversed else name
    crc = zlib.crc32(chunk_name + data) & 0xffffffff
    return struct.pack('>I', len(data)) + chunk_name + data + struct.pack('>I', crc)


def create_test_png() -> bytes:
    """Create a minimal PNG-like byte stream"""
    ihdr = struct.pack('>IIBBBBB', 1, 1, 8, 2, 0, 0, 0)
    return (PNG_SIGNATURE
            + create_test_chunk(b'IHDR', ihdr)
            + create_test_chunk(b'RuSt', b'hidden message')
            + create_test_chunk(b'IEND', b''))


class TestReadChunkHeader:
    """Test reading a single chunk header"""

    def test_read_header(self):
        data = create_test_chunk(b'RuSt', b'payload')
        header = read_chunk_header(data)

        assert header.length == 7
        assert header.chunk_type == ChunkType.from_string('RuSt')
        assert header.offset == 0
        assert header.data_offset == 8
        assert header.end_offset == len(data)

    def test_read_at_offset(self):
        data = create_test_png()
        header = read_chunk_header(data, len(PNG_SIGNATURE))

        assert str(header.chunk_type) == 'IHDR'
        assert header.length == 13
        assert header.chunk_type.is_critical()

    def test_reversed_name(self):
        """Test byte-swapped chunk names are read in the right order"""
        data = create_test_chunk(b'RuSt', b'', reversed=True)
        assert data[4:8] == b'tSuR'

        header = read_chunk_header(data, reversed_name=True)
        assert str(header.chunk_type) == 'RuSt'

    def test_truncated_header(self):
        with pytest.raises(ChunkParsingError):
            read_chunk_header(b'\x00\x00\x00\x01IHD')

    def test_invalid_chunk_type(self):
        """Test the type field goes through byte validation"""
        data = struct.pack('>I', 0) + b'Ru1t' + struct.pack('>I', 0)
        with pytest.raises(InvalidChunkType):
            read_chunk_header(data)


class TestIterChunkHeaders:
    """Test walking consecutive chunks"""

    def test_iter_png(self):
        data = create_test_png()
        headers = list(iter_chunk_headers(data, len(PNG_SIGNATURE)))

        assert [str(h.chunk_type) for h in headers] == ['IHDR', 'RuSt', 'IEND']
        assert [h.length for h in headers] == [13, 14, 0]
        assert headers[-1].end_offset == len(data)

    def test_flags_of_iterated_chunks(self):
        data = create_test_png()
        ancillary = [h.chunk_type for h in iter_chunk_headers(data, len(PNG_SIGNATURE))
                     if not h.chunk_type.is_public()]
        assert ancillary == [ChunkType.from_string('RuSt')]

    def test_empty_data(self):
        assert list(iter_chunk_headers(b'')) == []

    def test_chunk_beyond_end(self):
        """Test a declared length longer than the data"""
        data = create_test_chunk(b'IDAT', b'abcdef')[:-6]
        with pytest.raises(ChunkParsingError):
            list(iter_chunk_headers(data))

    def test_trailing_garbage(self):
        """Test leftover bytes too short for a header"""
        data = create_test_chunk(b'IEND', b'') + b'\x00\x00'
        headers = iter_chunk_headers(data)
        assert str(next(headers).chunk_type) == 'IEND'
        with pytest.raises(ChunkParsingError):
            next(headers)
