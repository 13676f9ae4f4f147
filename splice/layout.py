"""
Splice pattern file layout.

File Structure (multi-byte integers are big-endian unless noted):
    Offset  Size    Description
    0       6       Magic "SPLICE"
    6       8       Payload length (bytes after offset 14 in this pattern)
    14      32      Hardware version, ASCII, null bytes ignored
    46      4       Tempo, binary32 float, little-endian
    50      var     Track records until the payload length is used up

Track record:
    Size    Description
    1       Track ID (0-255)
    3       Padding
    1       Name length N
    N       Name
    16      Note mask, one byte per step, 0x00 or 0x01
"""

MAGIC = b"SPLICE"

MAGIC_SIZE = 6
PAYLOAD_LENGTH_SIZE = 8
HEADER_SIZE = MAGIC_SIZE + PAYLOAD_LENGTH_SIZE

HW_VERSION_SIZE = 32
TEMPO_SIZE = 4
METADATA_SIZE = HW_VERSION_SIZE + TEMPO_SIZE

TRACK_ID_SIZE = 1
TRACK_PADDING_SIZE = 3
TRACK_NAME_LENGTH_SIZE = 1
NOTES_PER_TRACK = 16
MAX_TRACK_NAME_LENGTH = 255

# Fixed part of a track record, excluding the name bytes
TRACK_RECORD_OVERHEAD = (
    TRACK_ID_SIZE + TRACK_PADDING_SIZE + TRACK_NAME_LENGTH_SIZE + NOTES_PER_TRACK
)

NOTE_OFF = 0x00
NOTE_ON = 0x01


def track_data_size(payload_length: int) -> int:
    """Size of the track region for a given payload length."""
    return payload_length - METADATA_SIZE


def track_record_size(name_length: int) -> int:
    """Size of one track record with a name of `name_length` bytes."""
    return TRACK_RECORD_OVERHEAD + name_length
