# chunk_inspector/main.py
import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from chunk_inspector.chunks import ChunkType, InvalidChunkType
from chunk_inspector.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_byte_list(token: str) -> List[int]:
    """Parse a comma-separated list of decimal byte values."""
    try:
        return [int(part) for part in token.split(',')]
    except ValueError as e:
        raise InvalidChunkType(f"Not a comma-separated byte list: {token!r}",
                               InvalidChunkType.CHARSET) from e


def inspect_token(token: str, as_bytes: bool = False) -> Dict[str, Any]:
    """Inspect one command line token.

    Args:
        token: Chunk type name, or byte list when as_bytes is set
        as_bytes: Treat token as comma-separated byte values

    Returns:
        describe() output, or an error entry for invalid input
    """
    try:
        if as_bytes:
            chunk_type = ChunkType.from_bytes(parse_byte_list(token))
        else:
            chunk_type = ChunkType.from_string(token)
    except InvalidChunkType as e:
        logger.error(f"Invalid chunk type {token!r}: {e}")
        return {'input': token, 'error': str(e)}

    logger.debug(f"Parsed {chunk_type!r} flags={chunk_type.flags()!r}")
    return chunk_type.describe()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Validate chunk type codes and show their case-encoded flags'
    )
    parser.add_argument('tokens', nargs='+', metavar='TOKEN',
                        help='Chunk type name (e.g. RuSt)')
    parser.add_argument('--bytes',
                        action='store_true',
                        help='Read each TOKEN as comma-separated byte values (e.g. 82,117,83,116)')
    parser.add_argument('--log-dir',
                        help='Also write a log file to this directory')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    results = [inspect_token(token, args.bytes) for token in args.tokens]
    json.dump(results, sys.stdout, indent=2)
    sys.stdout.write('\n')

    return 1 if any('error' in result for result in results) else 0


if __name__ == "__main__":
    sys.exit(main())
