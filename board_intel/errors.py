# board_intel/errors.py
"""Failures that abort a whole analysis run.

Anything below this level (a blob that matches no template, an estimate that
falls through every bucket) is an expected outcome and is never raised.
"""


class BoardIntelError(Exception):
    """Base class for unrecoverable pipeline failures."""


class ImageDecodeError(BoardIntelError):
    """The input could not be read or is not a width x height x 4 pixel buffer."""


class PreprocessingError(BoardIntelError):
    """Binarization or contour extraction failed inside OpenCV."""
