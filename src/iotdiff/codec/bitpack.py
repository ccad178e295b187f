"""Bit-level stream primitives.

BitWriter and BitReader move data through a byte buffer one bit at a time,
most significant bit first within each byte. Fields are not byte aligned:
a 5-bit character code may straddle two bytes.
"""

from __future__ import annotations

from ..exceptions import OutOfData


class BitWriter:
    """Accumulates bits into a growable byte buffer.

    Example:
        >>> writer = BitWriter()
        >>> writer.write_bit(True)
        >>> writer.write_bits(b"\\x05", 3)
        >>> writer.to_bytes()
        b'\\xd0'
    """

    def __init__(self) -> None:
        """Initialize an empty bit writer."""
        self._bits: list[int] = []  # List of 0s and 1s

    def write_bit(self, value: bool) -> None:
        """Append a single bit.

        Args:
            value: Bit to append (True=1, False=0)
        """
        self._bits.append(1 if value else 0)

    def write_bits(self, data: bytes, bit_count: int) -> None:
        """Append the low ``bit_count`` bits of ``data``.

        ``data`` is read as one big-endian integer and its low ``bit_count``
        bits are written most significant first. A count wider than the data
        is filled with leading zeros.

        Args:
            data: Source bytes
            bit_count: Number of bits to append (>= 0)

        Raises:
            ValueError: If bit_count is negative
        """
        if bit_count < 0:
            raise ValueError(f"bit_count must be >= 0, got {bit_count}")

        value = int.from_bytes(data, "big")
        for i in range(bit_count - 1, -1, -1):
            self._bits.append((value >> i) & 1)

    def write_bytes(self, data: bytes) -> None:
        """Append whole bytes (not necessarily byte aligned in the stream)."""
        self.write_bits(data, len(data) * 8)

    def bit_length(self) -> int:
        """Return the number of bits written so far."""
        return len(self._bits)

    def to_bytes(self) -> bytes:
        """Return the packed buffer.

        If the number of bits is not a multiple of 8, the last byte
        is padded with zeros on the right (LSB side).

        Returns:
            Packed bytes
        """
        if not self._bits:
            return b""

        padded_bits = self._bits + [0] * ((-len(self._bits)) % 8)

        result = bytearray()
        for i in range(0, len(padded_bits), 8):
            byte = 0
            for j in range(8):
                byte = (byte << 1) | padded_bits[i + j]
            result.append(byte)

        return bytes(result)


class BitReader:
    """Forward-only bit cursor over a fixed byte buffer.

    Example:
        >>> reader = BitReader(b"\\xd0")
        >>> reader.read_bit()
        True
        >>> reader.read_bytes(1, bits_per_unit=3)
        b'\\x05'
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader over ``data``."""
        self._bits: list[int] = []
        for byte in data:
            for i in range(7, -1, -1):
                self._bits.append((byte >> i) & 1)
        self._position = 0

    def read_bit(self) -> bool:
        """Read the next bit.

        Raises:
            OutOfData: If the buffer is exhausted
        """
        if self._position >= len(self._bits):
            raise OutOfData(1, 0)

        value = self._bits[self._position] == 1
        self._position += 1
        return value

    def read_bytes(self, count: int, bits_per_unit: int = 8) -> bytes:
        """Read ``count`` units of ``bits_per_unit`` bits each.

        Each unit is returned right-aligned in its own byte, so
        ``read_bytes(4)`` yields four raw bytes and ``read_bytes(12, 5)``
        yields twelve 5-bit character codes.

        Args:
            count: Number of units to read
            bits_per_unit: Width of each unit in bits (1-8)

        Returns:
            One byte per unit

        Raises:
            ValueError: If count is negative or bits_per_unit is out of range
            OutOfData: If fewer than ``count * bits_per_unit`` bits remain;
                nothing is consumed in that case
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if bits_per_unit < 1 or bits_per_unit > 8:
            raise ValueError(f"bits_per_unit must be 1-8, got {bits_per_unit}")

        needed = count * bits_per_unit
        if needed > self.bits_remaining():
            raise OutOfData(needed, self.bits_remaining())

        result = bytearray()
        for _ in range(count):
            unit = 0
            for _ in range(bits_per_unit):
                unit = (unit << 1) | self._bits[self._position]
                self._position += 1
            result.append(unit)

        return bytes(result)

    def bits_remaining(self) -> int:
        """Return the number of unread bits."""
        return len(self._bits) - self._position

    def position(self) -> int:
        """Return the current read position in bits."""
        return self._position
