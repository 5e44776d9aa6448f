"""
Marker vocabulary for theorem and proof environments.

Syntax:
    {#theorem} statement here

    {#proof}
    argument here
    {/proof}

Rules are applied in table order over the progressively rewritten text, so an
expansion containing a later rule's marker will be rewritten again by that rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .errors import MarkerTableError


@dataclass(frozen=True)
class MarkerRule:
    """A literal marker and the text it expands to."""
    marker: str
    expansion: str


class MarkerTable:
    """Immutable, ordered set of marker rules."""

    def __init__(self, rules: Iterable[MarkerRule]):
        self._rules: Tuple[MarkerRule, ...] = tuple(rules)
        self._check()

    def _check(self) -> None:
        markers = [rule.marker for rule in self._rules]
        for i, marker in enumerate(markers):
            if not marker:
                raise MarkerTableError(f"Empty marker at position {i}")
            for j, other in enumerate(markers):
                if i != j and marker in other:
                    raise MarkerTableError(
                        f"Marker {marker!r} collides with marker {other!r}"
                    )

    @property
    def rules(self) -> Tuple[MarkerRule, ...]:
        return self._rules

    def __iter__(self) -> Iterator[MarkerRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"MarkerTable({[rule.marker for rule in self._rules]!r})"


THEOREM = MarkerRule(
    marker="{#theorem}",
    expansion="<strong>Theorem.</strong>",
)

PROOF_START = MarkerRule(
    marker="{#proof}",
    expansion=(
        '<details markdown="block">\n'
        "    <summary>\n"
        "    <b>Proof</b>. (Expand to view)\n"
        "    </summary> \n"
        "    <p>"
    ),
)

PROOF_END = MarkerRule(
    marker="{/proof}",
    expansion=(
        "</p> \n"
        '    <span style="float:right;"> &#9634; </span>&nbsp;\n'
        "    </details>"
    ),
)

# proof-close runs before proof-open
DEFAULT_TABLE = MarkerTable([THEOREM, PROOF_END, PROOF_START])
