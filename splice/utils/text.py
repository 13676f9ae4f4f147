"""
Text helpers for fixed and length-prefixed string fields.
"""

# latin-1 maps every byte to one character, so decoding never fails and
# non-printable bytes pass through unchanged.
TEXT_ENCODING = "latin-1"


def remove_null_bytes(data: bytes) -> bytes:
    """Remove every 0x00 byte, wherever it appears."""
    return data.replace(b"\x00", b"")


def decode_text(data: bytes) -> str:
    """Decode a raw text field into an owned string."""
    return bytes(data).decode(TEXT_ENCODING)


def encode_text(text: str) -> bytes:
    """
    Encode a string for a text field.

    Raises:
        ValueError: If the text contains characters outside latin-1
    """
    try:
        return text.encode(TEXT_ENCODING)
    except UnicodeEncodeError as e:
        raise ValueError(f"Text {text!r} cannot be encoded: {e.reason}") from e


def is_printable_ascii(byte: int) -> bool:
    """Check if a byte is in the printable ASCII range (0x20-0x7E)."""
    return 32 <= byte <= 126
