# mathenvirons: latex-like math environments for mdbook
#
# Expands {#theorem}, {#proof} and {/proof} markers in chapter text
# into HTML before mdbook renders the book.

from __future__ import annotations

__version__: str = "0.1.0"

from .errors import (
    MathEnvironsError,
    PayloadError,
    BookError,
    TransformError,
    MarkerTableError,
)
from .markers import MarkerRule, MarkerTable, THEOREM, PROOF_START, PROOF_END, DEFAULT_TABLE
from .engine import Substitutor, transform
from .book import process, for_each_chapter
from .preprocessor import MathEnvirons, parse_input, check_version, MDBOOK_VERSION

__all__ = [
    # errors
    "MathEnvironsError",
    "PayloadError",
    "BookError",
    "TransformError",
    "MarkerTableError",
    # markers
    "MarkerRule",
    "MarkerTable",
    "THEOREM",
    "PROOF_START",
    "PROOF_END",
    "DEFAULT_TABLE",
    # engine
    "Substitutor",
    "transform",
    "process",
    "for_each_chapter",
    # mdbook
    "MathEnvirons",
    "parse_input",
    "check_version",
    "MDBOOK_VERSION",
]
