"""Literal placeholder substitution."""

from __future__ import annotations

import logging

from .markers import DEFAULT_TABLE, MarkerTable

logger = logging.getLogger(__name__)


class Substitutor:
    """Applies a marker table to chapter text."""

    def __init__(self, table: MarkerTable = DEFAULT_TABLE):
        self.table = table

    def transform(self, text: str) -> str:
        """
        Replace every marker occurrence, one rule at a time.

        Each rule sees the output of the previous one. Text without any
        marker is returned unchanged.

        Raises:
            TransformError: if a rule cannot be applied. Literal rules never do.
        """
        for rule in self.table:
            count = text.count(rule.marker)
            if count:
                logger.debug(f"Expanding {count} x {rule.marker}")
                text = text.replace(rule.marker, rule.expansion)
        return text


def transform(text: str, table: MarkerTable = DEFAULT_TABLE) -> str:
    """Expand markers in text with a one-off substitutor."""
    return Substitutor(table).transform(text)
