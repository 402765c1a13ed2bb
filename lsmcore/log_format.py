"""Constants describing the layout of write-ahead log files."""

from enum import IntEnum

__all__ = ["RecordType", "MAX_RECORD_TYPE", "BLOCK_SIZE", "HEADER_SIZE"]


class RecordType(IntEnum):
    """Type tag stored in each physical log record header."""

    # Zero is reserved for preallocated files.
    ZERO = 0
    FULL = 1
    # Fragments of a record that spans several blocks.
    FIRST = 2
    MIDDLE = 3
    LAST = 4


MAX_RECORD_TYPE = RecordType.LAST

BLOCK_SIZE = 32768

# Header is checksum (4 bytes), length (2 bytes), type (1 byte).
HEADER_SIZE = 4 + 2 + 1