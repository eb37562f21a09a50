"""Shared test fixtures for flatodt."""

from __future__ import annotations

from pathlib import Path

import pytest

from flatodt.config import Settings
from flatodt.document import TextDocument

# Smallest valid PNG: 1x1 transparent pixel.
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d49484452000000010000000108060000001f15c489"
    "0000000d49444154789c63000100000500010d0a2db40000000049454e44ae426082"
)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        initial_creator="Test Author",
        generator="flatodt/test",
    )


@pytest.fixture
def document(settings: Settings) -> TextDocument:
    return TextDocument(settings)


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    path = tmp_path / "pixel.png"
    path.write_bytes(PNG_BYTES)
    return path
