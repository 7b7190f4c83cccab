"""Little-endian binary cursor over an in-memory world file."""
from typing import Callable, List, Optional
import logging
import struct

from ..errors import CursorBoundsError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


class ByteCursor:
    """Sequential reader with a movable offset.

    Every read advances the offset by the full width of its type, even when
    the read fails. Out-of-range reads raise CursorBoundsError unless the
    cursor was built with ignore_bounds=True, in which case they yield a zero
    value of the requested type.

    Args:
        data: Raw file contents
        ignore_bounds: Substitute zero values instead of raising on overrun
        progress_callback: Called with 1..100 as the offset crosses each
            successive percent of the buffer size
    """

    def __init__(self,
                 data: bytes,
                 ignore_bounds: bool = False,
                 progress_callback: Optional[ProgressCallback] = None):
        self._data = bytes(data)
        self._length = len(self._data)
        self._offset = 0
        self.ignore_bounds = ignore_bounds
        self._progress_callback = progress_callback
        self._percent = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def length(self) -> int:
        return self._length

    @property
    def remaining(self) -> int:
        return max(0, self._length - self._offset)

    def _report_progress(self) -> None:
        if self._progress_callback is None or self._length == 0:
            return
        reached = min(100, self._offset * 100 // self._length)
        while self._percent < reached:
            self._percent += 1
            self._progress_callback(self._percent)

    def _advance(self, size: int) -> Optional[int]:
        """Move past `size` bytes, returning the start offset if they exist."""
        start = self._offset
        self._offset += size
        self._report_progress()
        if self._offset > self._length:
            if self.ignore_bounds:
                return None
            raise CursorBoundsError(start, size, self._length)
        return start

    def _unpack(self, fmt: str, size: int, zero):
        start = self._advance(size)
        if start is None:
            return zero
        return struct.unpack_from(fmt, self._data, start)[0]

    def read_u8(self) -> int:
        return self._unpack('<B', 1, 0)

    def read_u16(self) -> int:
        return self._unpack('<H', 2, 0)

    def read_i16(self) -> int:
        return self._unpack('<h', 2, 0)

    def read_u32(self) -> int:
        return self._unpack('<I', 4, 0)

    def read_i32(self) -> int:
        return self._unpack('<i', 4, 0)

    def read_f32(self) -> float:
        return self._unpack('<f', 4, 0.0)

    def read_f64(self) -> float:
        return self._unpack('<d', 8, 0.0)

    def read_bool(self) -> bool:
        return self.read_u8() != 0

    def read_bytes(self, count: int) -> bytes:
        """Read exactly `count` bytes.

        In lenient mode the bytes that fall outside the buffer are zeros.
        """
        start = self._offset
        self._advance(count)
        chunk = self._data[start:start + count]
        if len(chunk) < count:
            chunk += b'\0' * (count - len(chunk))
        return chunk

    def read_varint(self) -> int:
        """Read an unsigned integer stored as 7-bit groups, low group first."""
        value = 0
        shift = 0
        while True:
            byte = self.read_u8()
            value |= (byte & 0x7F) << shift
            shift += 7
            if not byte & 0x80:
                return value

    def read_string(self, length: Optional[int] = None) -> str:
        """Read a UTF-8 string.

        Args:
            length: Byte length; when omitted a varint length prefix is read

        Returns:
            Decoded string
        """
        if length is None:
            length = self.read_varint()
        return self.read_bytes(length).decode('utf-8', 'replace')

    def read_bit_flags(self, total_bits: int) -> List[bool]:
        """Unpack `total_bits` booleans, least significant bit first."""
        raw = self.read_bytes((total_bits + 7) // 8)
        return [bool(raw[i >> 3] & (1 << (i & 7))) for i in range(total_bits)]

    def skip(self, count: int) -> None:
        self._offset += count
        self._report_progress()

    def seek(self, offset: int) -> None:
        """Jump to an absolute offset (section boundaries only)."""
        if offset < 0:
            raise ValueError(f"Cannot seek to negative offset {offset}")
        self._offset = offset
        self._report_progress()


def parse_guid(raw: bytes) -> str:
    """Format 16 raw bytes as a GUID string.

    The first three groups are stored little endian, the rest as-is.
    """
    if len(raw) != 16:
        raise ValueError(f"GUID must be 16 bytes, got {len(raw)}")
    ordered = raw[3::-1] + raw[5:3:-1] + raw[7:5:-1] + raw[8:]
    h = ordered.hex()
    return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"
