"""
Growable bit vector packed into 64-bit blocks.

Supports tail push/pop, runs of a repeated bit, random-access reads, and
conversion to and from bytes and '0'/'1' text.
"""

__version__ = "1.0.0"

from bitvec.bitvec import BLOCK_WIDTH, BitVec
from bitvec.errors import (
    BitVecError,
    EmptyContainerError,
    InvalidBitValueError,
    OutOfRangeError,
)

__all__ = [
    "BitVec",
    "BLOCK_WIDTH",
    "BitVecError",
    "EmptyContainerError",
    "InvalidBitValueError",
    "OutOfRangeError",
    "__version__",
]
