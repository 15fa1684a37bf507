"""
Selectable table model — rows plus a single wrap-around selection cursor.

Pure Python, no Textual imports.  The render loop is the only caller that
mutates it; the UI reads ``selected`` when it draws.

Correctness invariants:
  - ``selected`` is None until the first navigation.
  - When set, ``0 <= selected < len(items)``.
  - ``next()`` / ``previous()`` on an empty table are no-ops.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

Row = list[str]


@dataclass
class SelectableTable:
    """Rows of one feed and the currently highlighted row index."""

    items: list[Row] = field(default_factory=list)
    selected: int | None = None

    @classmethod
    def from_rows(cls, rows: Sequence[Row]) -> SelectableTable:
        return cls(items=[list(r) for r in rows])

    def __len__(self) -> int:
        return len(self.items)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next(self) -> None:
        """Select the following row, wrapping from the last row to the first."""
        if not self.items:
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = (self.selected + 1) % len(self.items)

    def previous(self) -> None:
        """Select the preceding row, wrapping from the first row to the last."""
        if not self.items:
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = (self.selected - 1 + len(self.items)) % len(self.items)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def selected_row(self) -> Row | None:
        if self.selected is None:
            return None
        return self.items[self.selected]


__all__ = ["Row", "SelectableTable"]
