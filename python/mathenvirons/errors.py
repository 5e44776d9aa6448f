"""Mathenvirons exceptions."""


class MathEnvironsError(Exception):
    """Base class for preprocessor errors."""

    exit_code = 1


class PayloadError(MathEnvironsError):
    """Raised when the [context, book] payload from mdbook cannot be read."""


class BookError(MathEnvironsError):
    """Raised when the book tree does not have the shape mdbook sends."""


class TransformError(MathEnvironsError):
    """Raised when a single chapter cannot be transformed.

    The book walker catches this and writes the message into the chapter,
    so one bad chapter never aborts the whole build.
    """

    def __init__(self, message: str, chapter: str = ""):
        self.chapter = chapter
        if chapter:
            message = f"{chapter}: {message}"
        super().__init__(message)


class MarkerTableError(ValueError):
    """Raised when a marker table would make replacement order ambiguous."""
