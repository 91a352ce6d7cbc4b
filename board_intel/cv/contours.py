# board_intel/cv/contours.py
from __future__ import annotations
import math
from typing import List, Optional

import cv2
import numpy as np
from loguru import logger

from board_intel.errors import PreprocessingError
from board_intel.schema.types import GeometricPrimitive
from board_intel.utils.image import check_rgba


def binarize(rgba: np.ndarray, blur_ksize: int = 5, block_size: int = 11, C: int = 2,
             invert: bool = True, median_ksize: int = 3) -> np.ndarray:
    """
    RGBA → gray → Gaussian blur → adaptive Gaussian threshold → binary mask.
    With invert=True dark outlines become foreground (255).
    """
    if block_size % 2 == 0:
        block_size += 1
    if blur_ksize % 2 == 0:
        blur_ksize += 1
    try:
        gray = cv2.cvtColor(rgba, cv2.COLOR_RGBA2GRAY)
        gray = cv2.GaussianBlur(gray, (blur_ksize, blur_ksize), 0)
        mode = cv2.THRESH_BINARY_INV if invert else cv2.THRESH_BINARY
        thr = cv2.adaptiveThreshold(gray, 255, cv2.ADAPTIVE_THRESH_GAUSSIAN_C, mode, block_size, C)
        if median_ksize and median_ksize > 1:
            thr = cv2.medianBlur(thr, median_ksize)
    except cv2.error as e:
        raise PreprocessingError(f"binarization failed: {e}") from e
    return thr


def primitive_from_contour(index: int, contour: np.ndarray) -> Optional[GeometricPrimitive]:
    """Measure one contour; None for degenerate outlines (no perimeter or no height)."""
    area = float(cv2.contourArea(contour))
    perimeter = float(cv2.arcLength(contour, True))
    x, y, w, h = cv2.boundingRect(contour)
    if perimeter <= 0 or h <= 0:
        return None
    pts = tuple((float(px), float(py)) for px, py in contour.reshape(-1, 2))
    return GeometricPrimitive(
        index=index,
        points=pts,
        area=area,
        perimeter=perimeter,
        bbox=(float(x), float(y), float(x + w), float(y + h)),
        aspect_ratio=w / float(h),
        circularity=4 * math.pi * area / (perimeter * perimeter),
    )


def find_external_contours(mask: np.ndarray) -> list:
    try:
        contours, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    except cv2.error as e:
        raise PreprocessingError(f"contour extraction failed: {e}") from e
    return list(contours)


def extract_primitives(rgba: np.ndarray, min_area: float = 50, **binarize_kw) -> List[GeometricPrimitive]:
    """
    Outer-boundary primitives of an RGBA board image.
    Contours below `min_area` are dropped; degenerate ones are skipped.
    """
    check_rgba(rgba)
    mask = binarize(rgba, **binarize_kw)
    out: List[GeometricPrimitive] = []
    skipped = 0
    for i, cnt in enumerate(find_external_contours(mask)):
        if cv2.contourArea(cnt) < min_area:
            continue
        prim = primitive_from_contour(i, cnt)
        if prim is None:
            skipped += 1
            continue
        out.append(prim)
    if skipped:
        logger.debug(f"[contours] skipped {skipped} degenerate contours")
    logger.info(f"[contours] {rgba.shape[1]}x{rgba.shape[0]}: primitives={len(out)}")
    return out
