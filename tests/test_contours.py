"""Shape extraction on synthetic board images."""

import cv2
import numpy as np
import pytest

from board_intel.cv.contours import binarize, extract_primitives, primitive_from_contour
from board_intel.errors import ImageDecodeError, PreprocessingError


def blank(w=400, h=300):
    return np.full((h, w, 4), 255, dtype=np.uint8)


def test_blank_image_has_no_primitives():
    assert extract_primitives(blank()) == []


def test_filled_rectangle_yields_one_outline():
    img = blank()
    cv2.rectangle(img, (100, 100), (159, 114), (0, 0, 0, 255), thickness=-1)
    prims = extract_primitives(img)
    assert len(prims) == 1
    p = prims[0]
    assert 50 <= p.width <= 66
    assert 12 <= p.height <= 20
    assert 2.5 < p.aspect_ratio < 5.5
    assert 0 < p.circularity <= 1
    cx, cy = p.center
    assert abs(cx - 130) < 4 and abs(cy - 107) < 4


def test_small_specks_are_dropped():
    img = blank()
    cv2.rectangle(img, (50, 50), (53, 53), (0, 0, 0, 255), thickness=-1)
    assert extract_primitives(img, min_area=50) == []


def test_binarize_marks_dark_ink_as_foreground():
    img = blank(100, 100)
    cv2.line(img, (10, 50), (90, 50), (0, 0, 0, 255), 3)
    mask = binarize(img)
    assert mask.dtype == np.uint8
    assert mask[50, 50] == 255
    assert mask[10, 50] == 0


def test_degenerate_contour_is_skipped():
    line = np.array([[[5, 5]], [[5, 5]]], dtype=np.int32)
    assert primitive_from_contour(0, line) is None


def test_wrong_buffer_shape_is_rejected():
    with pytest.raises(ImageDecodeError):
        extract_primitives(np.zeros((10, 10, 3), dtype=np.uint8))
    with pytest.raises(ImageDecodeError):
        extract_primitives(np.zeros((10, 10, 4), dtype=np.float32))


def test_opencv_failure_becomes_preprocessing_error(monkeypatch):
    def boom(*a, **k):
        raise cv2.error("synthetic failure")
    monkeypatch.setattr(cv2, "adaptiveThreshold", boom)
    with pytest.raises(PreprocessingError):
        extract_primitives(blank())
