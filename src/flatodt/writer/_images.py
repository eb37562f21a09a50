"""Image bytes for embedding."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from flatodt.errors import ImageReadError

ImageReader = Callable[[str], bytes]


def read_image_bytes(path: str) -> bytes:
    """Default :data:`ImageReader`: read the file from disk.

    Raises:
        ImageReadError: If the file cannot be read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ImageReadError(path, e.strerror or str(e)) from e
