"""
Growable bit vector using 64-bit block storage.

This module provides a variable-length bit vector that packs bits into
fixed-width blocks and grows or shrinks at its tail only.

Storage Layout:
- Block 0 is the front block and holds the most recently pushed bits.
  The newest bit is the LSB of block 0.
- Within a block, bits are MSB-first in push order (a more significant
  bit was pushed earlier).
- The last block is the oldest. It is the only block that may be
  partially used, and its meaningful bits are right-aligned.

Taken together the blocks form one integer, block k contributing bits
[k * 64, k * 64 + 64), and bit position 0 (the first bit pushed) is the
most significant of its `length` bits.
"""

import logging

from bitvec.errors import EmptyContainerError, InvalidBitValueError, OutOfRangeError

logger = logging.getLogger(__name__)

BLOCK_WIDTH = 64
BLOCK_MASK = (1 << BLOCK_WIDTH) - 1
BYTE_WIDTH = 8
BYTE_MASK = 0xFF


def _check_bit(value: int) -> None:
    if not isinstance(value, int) or value not in (0, 1):
        raise InvalidBitValueError(value)


class BitVec:
    """Variable-length bit vector using 64-bit block storage."""

    def __init__(self) -> None:
        """Initialize an empty bit vector."""
        self._data = []
        self.length = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "BitVec":
        """
        Build a bit vector from bytes.

        Args:
            data: Bytes (or iterable of ints 0-255) pushed MSB-first

        Returns:
            New BitVec holding len(data) * 8 bits
        """
        bv = cls()
        for byte in data:
            bv.push_byte(byte)
        return bv

    @classmethod
    def from_text(cls, text: str, encoding: str = "utf-8") -> "BitVec":
        """Build a bit vector from the encoded bytes of a string."""
        return cls.from_bytes(text.encode(encoding))

    @property
    def blocks(self) -> tuple:
        """Snapshot of the storage blocks, front block first."""
        return tuple(self._data)

    def _last_block_size(self) -> int:
        """Number of meaningful bits in the last (oldest) block."""
        if self.length == 0:
            return 0
        return self.length % BLOCK_WIDTH or BLOCK_WIDTH

    def _shift_left(self, count: int) -> None:
        """
        Shift every stored bit toward the oldest block by count positions.

        Storage grows so it can hold length + count bits. The vacated low
        bits of the front blocks are zero. Does not change length.
        """
        whole, remains = divmod(count, BLOCK_WIDTH)

        if remains:
            if len(self._data) * BLOCK_WIDTH < self.length + remains:
                self._data.append(0)
                logger.debug("Allocated back block %d", len(self._data) - 1)

            carry = BLOCK_WIDTH - remains
            # Oldest to newest: each block pulls from a newer neighbour
            # that has not been shifted yet.
            for i in range(len(self._data) - 1, -1, -1):
                word = (self._data[i] << remains) & BLOCK_MASK
                if i > 0:
                    word |= self._data[i - 1] >> carry
                self._data[i] = word

        if whole:
            self._data[0:0] = [0] * whole
            logger.debug("Allocated %d front block(s)", whole)

    def _shift_right(self) -> None:
        """Shift every stored bit one position toward the front block."""
        last = len(self._data) - 1
        for i in range(last + 1):
            word = self._data[i] >> 1
            if i < last:
                word |= (self._data[i + 1] & 1) << (BLOCK_WIDTH - 1)
            self._data[i] = word

    def _fill_block(self, index: int, value: int) -> None:
        self._data[index] = BLOCK_MASK if value else 0

    def get(self, index: int) -> int:
        """
        Get bit value at position.

        Args:
            index: Bit position (0 = first pushed, length-1 = last pushed)

        Returns:
            Bit value (0 or 1)

        Raises:
            EmptyContainerError: If the vector holds no bits
            OutOfRangeError: If index is out of range
        """
        if self.length == 0:
            raise EmptyContainerError(index)
        if index < 0 or index >= self.length:
            raise OutOfRangeError(index, self.length)

        # Distance from the newest bit, which is the LSB of block 0
        rev = self.length - 1 - index
        block_index, bit_in_block = divmod(rev, BLOCK_WIDTH)

        return (self._data[block_index] >> bit_in_block) & 1

    def push(self, value: int) -> None:
        """
        Append a single bit.

        Args:
            value: Bit value (0 or 1)

        Raises:
            InvalidBitValueError: If value is not 0 or 1
        """
        _check_bit(value)

        self._shift_left(1)
        self._data[0] |= value
        self.length += 1

    def pop(self) -> "int | None":
        """
        Remove and return the most recently pushed bit.

        Returns:
            Bit value (0 or 1), or None if the vector is empty
        """
        if self.length == 0:
            return None

        bit = self._data[0] & 1
        self._shift_right()
        self.length -= 1

        if self.length <= (len(self._data) - 1) * BLOCK_WIDTH:
            self._data.pop()
            logger.debug("Released back block %d", len(self._data))

        return bit

    def push_byte(self, value: int) -> None:
        """
        Append the 8 bits of a byte, MSB first.

        Args:
            value: Byte value (0-255)

        Raises:
            ValueError: If value is not in range [0, 255]
        """
        if not isinstance(value, int) or value < 0 or value > BYTE_MASK:
            raise ValueError(f"Byte value {value!r} out of range [0, {BYTE_MASK}]")

        self._shift_left(BYTE_WIDTH)
        self._data[0] |= value
        self.length += BYTE_WIDTH

    def append_many(self, value: int, count: int) -> None:
        """
        Append count copies of a bit.

        Same result as count calls to push(value), in a single shift.

        Args:
            value: Bit value (0 or 1)
            count: Number of bits to append (0 is a no-op)

        Raises:
            InvalidBitValueError: If value is not 0 or 1
            TypeError: If count is not an int
            ValueError: If count is negative
        """
        _check_bit(value)
        if not isinstance(count, int):
            raise TypeError(f"count must be an int, got {count!r}")
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return

        self._shift_left(count)

        whole, remains = divmod(count, BLOCK_WIDTH)
        for i in range(whole):
            self._fill_block(i, value)
        if remains and value:
            self._data[whole] |= (1 << remains) - 1

        self.length += count

    def to_bytes(self) -> bytes:
        """
        Convert bit vector to bytes.

        The first byte holds the first 8 bits pushed, MSB first. A trailing
        partial byte is zero-padded in its low bits.

        Returns:
            Bytes representation, ceil(length / 8) bytes long
        """
        result = bytearray()
        pending = 0
        pending_bits = 0

        last = len(self._data) - 1
        for block_index in range(last, -1, -1):
            if block_index == last:
                width = self._last_block_size()
            else:
                width = BLOCK_WIDTH

            pending = (pending << width) | self._data[block_index]
            pending_bits += width

            while pending_bits >= BYTE_WIDTH:
                pending_bits -= BYTE_WIDTH
                result.append((pending >> pending_bits) & BYTE_MASK)
            pending &= (1 << pending_bits) - 1

        if pending_bits:
            result.append((pending << (BYTE_WIDTH - pending_bits)) & BYTE_MASK)

        return bytes(result)

    def to_string(self) -> str:
        """
        Render the bits as '0'/'1' characters, first pushed bit first.

        Returns:
            String of length len(self), empty for an empty vector
        """
        if self.length == 0:
            return ""

        parts = [format(self._data[-1], f"0{self._last_block_size()}b")]
        for block in reversed(self._data[:-1]):
            parts.append(format(block, f"0{BLOCK_WIDTH}b"))
        return "".join(parts)

    def copy(self) -> "BitVec":
        """
        Create a copy of this bit vector.

        Returns:
            New BitVec with same contents
        """
        result = BitVec()
        result._data = list(self._data)
        result.length = self.length
        return result

    def equals(self, other: "BitVec") -> bool:
        """
        Check equality with another bit vector.

        Args:
            other: Other bit vector

        Returns:
            True if other is a BitVec holding the same bits
        """
        if not isinstance(other, BitVec) or self.length != other.length:
            return False

        return all(mine == theirs for mine, theirs in zip(self._data, other._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVec):
            return NotImplemented
        return self.equals(other)

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> int:
        return self.get(index)

    def __iter__(self):
        for i in range(self.length):
            yield self.get(i)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BitVec(length={self.length}, bits='{self.to_string()}')"
