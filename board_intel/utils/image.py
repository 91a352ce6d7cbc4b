# raster decode helpers
# board_intel/utils/image.py
from __future__ import annotations
from pathlib import Path
import io
import numpy as np
from PIL import Image, UnidentifiedImageError

from board_intel.errors import ImageDecodeError

def open_rgba(path: str | Path) -> np.ndarray:
    """Decode an image file into a (height, width, 4) uint8 RGBA buffer."""
    p = Path(path)
    if not p.exists():
        raise ImageDecodeError(f"image not found: {p}")
    try:
        with Image.open(p) as img:
            return np.asarray(img.convert("RGBA"), dtype=np.uint8).copy()
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"cannot decode {p}: {e}") from e

def check_rgba(buf) -> np.ndarray:
    """Validate a decoded pixel buffer; raise ImageDecodeError when it is not HxWx4."""
    if not isinstance(buf, np.ndarray):
        raise ImageDecodeError(f"expected a numpy pixel buffer, got {type(buf).__name__}")
    if buf.ndim != 3 or buf.shape[2] != 4:
        raise ImageDecodeError(f"expected height x width x 4 buffer, got shape {buf.shape}")
    if buf.shape[0] == 0 or buf.shape[1] == 0:
        raise ImageDecodeError("empty image")
    if buf.dtype != np.uint8:
        raise ImageDecodeError(f"expected uint8 pixels, got {buf.dtype}")
    return buf

def from_bytes(data: bytes) -> np.ndarray:
    try:
        with Image.open(io.BytesIO(data)) as img:
            return np.asarray(img.convert("RGBA"), dtype=np.uint8).copy()
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"cannot decode image bytes: {e}") from e
