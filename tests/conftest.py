"""Pytest configuration and fixtures."""

import pytest

from bitvec import BitVec


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--fast",
        action="store_true",
        default=False,
        help="Skip slow tests (randomized operation sequences)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests when --fast flag is used."""
    if config.getoption("--fast"):
        skip_slow = pytest.mark.skip(reason="skipped with --fast flag")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


def push_all(bv: BitVec, bits) -> BitVec:
    """Push each bit of an iterable onto bv and return it."""
    for bit in bits:
        bv.push(bit)
    return bv


@pytest.fixture()
def pushed():
    """Provide a helper building a BitVec from a sequence of bits."""

    def build(bits) -> BitVec:
        return push_all(BitVec(), bits)

    return build
