"""mdbook preprocessor entry points: payload parsing, version check, run."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, TextIO, Tuple

from . import book as book_walker
from .engine import Substitutor
from .errors import PayloadError
from .markers import DEFAULT_TABLE, MarkerTable

logger = logging.getLogger(__name__)

# mdbook release this preprocessor is built against
MDBOOK_VERSION = "0.4.40"

SUPPORTED_RENDERERS = frozenset({"html"})


def parse_input(stream: TextIO) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Read the [context, book] pair mdbook writes to stdin."""
    try:
        data = json.load(stream)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PayloadError(f"Unable to parse the input: {e}") from e

    if not isinstance(data, list) or len(data) != 2:
        raise PayloadError("Expected a [context, book] JSON array")

    context, book = data
    if not isinstance(context, dict) or not isinstance(book, dict):
        raise PayloadError("Context and book must both be JSON objects")
    return context, book


def check_version(context: Dict[str, Any], name: str) -> bool:
    """Warn when mdbook's version differs from ours. Never blocks processing."""
    version = context.get("mdbook_version")
    if version == MDBOOK_VERSION:
        return True
    logger.warning(
        f"Warning: The {name} plugin was built against version {MDBOOK_VERSION} "
        f"of mdbook, but we're being called from version {version or 'unknown'}"
    )
    return False


class MathEnvirons:
    """Adds latex-like theorem and proof environments to mdbook."""

    name = "mathenvirons"

    def __init__(self, table: MarkerTable = DEFAULT_TABLE):
        self.substitutor = Substitutor(table)

    def run(self, context: Dict[str, Any], book: Dict[str, Any]) -> Dict[str, Any]:
        logger.debug(f"Running {self.name} for root {context.get('root', '?')}")
        return book_walker.process(book, self.substitutor)

    def supports_renderer(self, renderer: str) -> bool:
        return renderer in SUPPORTED_RENDERERS
