"""Stub test to verify CI pipeline works."""

import bitvec


def test_version() -> None:
    """Test that version is defined."""
    assert bitvec.__version__ == "1.0.0"


def test_public_api() -> None:
    """Test that the container and its errors are exported."""
    bv = bitvec.BitVec()
    assert len(bv) == 0
    assert bitvec.BLOCK_WIDTH == 64
    assert issubclass(bitvec.InvalidBitValueError, bitvec.BitVecError)
    assert issubclass(bitvec.EmptyContainerError, bitvec.OutOfRangeError)
