"""Walk the mdbook book tree and rewrite chapter content."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

from .engine import Substitutor
from .errors import BookError, TransformError

logger = logging.getLogger(__name__)


def _items(book: Dict[str, Any]) -> List[Any]:
    # mdbook 0.5 renamed `sections` to `items`
    if not isinstance(book, dict):
        raise BookError(f"Expected book object, got {type(book).__name__}")
    for key in ("sections", "items"):
        if key in book:
            items = book[key]
            if not isinstance(items, list):
                raise BookError(f"Book '{key}' must be a list")
            return items
    raise BookError("Book has no 'sections' or 'items'")


def for_each_chapter(items: List[Any], fn: Callable[[Dict[str, Any]], None]) -> None:
    """Call fn on every chapter, depth first, in document order.

    Separators and part titles carry no content and are skipped.

    Raises:
        BookError: if a chapter or its sub_items have the wrong type.
    """
    for item in items:
        if isinstance(item, dict) and 'Chapter' in item:
            chapter = item['Chapter']
            if not isinstance(chapter, dict):
                raise BookError(f"Chapter must be an object, got {type(chapter).__name__}")
            fn(chapter)
            sub_items = chapter.get('sub_items', [])
            if not isinstance(sub_items, list):
                raise BookError(f"Chapter {chapter.get('name', '?')!r} 'sub_items' must be a list")
            for_each_chapter(sub_items, fn)


def process(book: Dict[str, Any], substitutor: Substitutor) -> Dict[str, Any]:
    """Expand markers in every chapter of the book, in place."""

    def _process_chapter(chapter: Dict[str, Any]) -> None:
        name = chapter.get('name', '?')
        content = chapter.get('content')
        if not isinstance(content, str):
            raise BookError(f"Chapter {name!r} 'content' must be a string")
        try:
            chapter['content'] = substitutor.transform(content)
        except TransformError as e:
            if not e.chapter:
                e = TransformError(str(e), chapter=name)
            logger.warning(f"Could not expand chapter {name!r}: {e}")
            chapter['content'] = str(e)

    for_each_chapter(_items(book), _process_chapter)
    return book
