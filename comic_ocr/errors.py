"""Error kinds raised by the OCR pipeline."""


class ComicOcrError(Exception):
    """Base class for pipeline errors."""


class ImageLoadError(ComicOcrError):
    """Raised when an input image cannot be read or decoded."""


class InvalidDimensionsError(ComicOcrError, ValueError):
    """Raised when an image has a zero or negative size."""


class RecognitionError(ComicOcrError):
    """Raised when the OCR engine fails on a region."""


class OutputWriteError(ComicOcrError):
    """Raised when the text output cannot be written."""
