"""Shared fixtures for dsf2wav tests."""

import pytest


def make_dsf_header(chunk_id: bytes = b"DSD ", format_id: bytes = b"fmt ") -> bytes:
    """Create a 28-byte DSF preamble with the given tags."""
    return chunk_id + b"\x1c" + b"\x00" * 7 + format_id + b"\x00" * 12


@pytest.fixture
def dsf_header() -> bytes:
    return make_dsf_header()


@pytest.fixture
def alternating_dsf(tmp_path, dsf_header):
    """A DSF file with one 4096-byte block of alternating 0x01/0x00."""
    path = tmp_path / "input.dsf"
    path.write_bytes(dsf_header + b"\x01\x00" * 2048)
    return path
