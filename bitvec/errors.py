"""
Exceptions raised by BitVec operations.

Each error subclasses the built-in exception normally raised for the same
condition, so callers may catch either ``InvalidBitValueError`` or
``ValueError``, ``OutOfRangeError`` or ``IndexError``.
"""


class BitVecError(Exception):
    """Base class for all BitVec errors."""


class InvalidBitValueError(BitVecError, ValueError):
    """A bit-setting operation received a value other than 0 or 1."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Bit value must be 0 or 1, got {value!r}")


class OutOfRangeError(BitVecError, IndexError):
    """A bit position outside [0, length) was requested."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Bit position {index} out of range [0, {length})")


class EmptyContainerError(OutOfRangeError):
    """A bit was requested from a BitVec holding no bits."""

    def __init__(self, index: int) -> None:
        super().__init__(index, 0)
        self.args = (f"Cannot get bit {index} from an empty BitVec",)
