"""
Sequential byte reading over binary file-like sources.

ByteStream is the only thing the decoder reads through. It provides an
exact-read primitive, typed decoders with an explicit byte order per field,
and bounded child streams that stop at a byte budget instead of at the
physical end of the source.

Example:
    stream = ByteStream(io.BytesIO(data))
    magic = stream.read_exact(6, "magic")
    length = stream.read_u64_be("payload length")
"""

import struct
from typing import BinaryIO, Optional

from splice.utils.errors import SourceReadError, TruncatedInputError

_U8 = struct.Struct(">B")
_U64_BE = struct.Struct(">Q")
_F32_LE = struct.Struct("<f")


class ByteStream:
    """
    Cursor over a binary source with an optional byte budget.

    Attributes:
        position: Bytes consumed through this stream (including children)
        limit: Byte budget, or None for unbounded
    """

    def __init__(
        self,
        source: BinaryIO,
        limit: Optional[int] = None,
        offset: int = 0,
        parent: Optional["ByteStream"] = None,
    ):
        self._source = source
        self._parent = parent
        self._base = offset
        self.limit = limit
        self.position = 0

    @property
    def offset(self) -> int:
        """Absolute offset from the start of the outermost stream."""
        return self._base + self.position

    @property
    def remaining(self) -> Optional[int]:
        """Bytes left in the budget, or None if unbounded."""
        if self.limit is None:
            return None
        return self.limit - self.position

    def read_exact(self, size: int, field: str = "data") -> bytes:
        """
        Read exactly `size` bytes.

        Args:
            size: Number of bytes to read
            field: Field name used in error messages

        Returns:
            The bytes read (an owned copy)

        Raises:
            TruncatedInputError: If the source or budget ends first
            SourceReadError: If the source raises an I/O error
        """
        start = self.offset
        self._check_budget(size, field)

        chunks = []
        got = 0
        while got < size:
            try:
                chunk = self._source.read(size - got)
            except (OSError, ValueError) as e:
                raise SourceReadError(f"Error reading {field}: {e}", offset=start) from e
            if not chunk:
                break
            chunks.append(chunk)
            got += len(chunk)

        self._advance(got)
        if got < size:
            raise TruncatedInputError(field, size, got, offset=start)

        return b"".join(chunks)

    def skip(self, size: int, field: str = "padding") -> None:
        """Read and discard `size` bytes."""
        self.read_exact(size, field)

    def read_u8(self, field: str = "byte") -> int:
        """Read one unsigned byte."""
        return _U8.unpack(self.read_exact(1, field))[0]

    def read_u64_be(self, field: str = "u64") -> int:
        """Read an unsigned big-endian 64-bit integer."""
        return _U64_BE.unpack(self.read_exact(8, field))[0]

    def read_f32_le(self, field: str = "f32") -> float:
        """Read a little-endian IEEE-754 binary32 float."""
        return _F32_LE.unpack(self.read_exact(4, field))[0]

    def bounded(self, limit: int) -> "ByteStream":
        """
        Create a child stream that may consume at most `limit` bytes.

        Bytes read through the child also advance this stream.
        """
        return ByteStream(self._source, limit=limit, offset=self.offset, parent=self)

    def _check_budget(self, size: int, field: str) -> None:
        # Budgets of enclosing streams bind too.
        stream = self
        while stream is not None:
            remaining = stream.remaining
            if remaining is not None and size > remaining:
                raise TruncatedInputError(field, size, remaining, offset=self.offset)
            stream = stream._parent

    def _advance(self, count: int) -> None:
        self.position += count
        if self._parent is not None:
            self._parent._advance(count)
