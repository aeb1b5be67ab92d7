"""Checkbox selection state for bulk actions."""

from __future__ import annotations

from collections.abc import Iterable

from recruitdesk.models import SelectionSummary


class SelectionState:
    """Set of checked candidate ids, kept in the order they were checked.

    Lives as long as the view does; it is not persisted.
    """

    def __init__(self, ids: Iterable[str] = ()) -> None:
        self._ids: dict[str, None] = dict.fromkeys(ids)

    def __contains__(self, candidate_id: str) -> bool:
        return candidate_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    @property
    def selected_ids(self) -> tuple[str, ...]:
        return tuple(self._ids)

    def toggle(self, candidate_id: str) -> bool:
        """Flip membership of *candidate_id*; return the new membership."""
        if candidate_id in self._ids:
            del self._ids[candidate_id]
            return False
        self._ids[candidate_id] = None
        return True

    def toggle_all(self, visible_ids: Iterable[str]) -> None:
        """Select every visible id, or clear them if all are already selected.

        Ids outside *visible_ids* are never touched.
        """
        visible = list(visible_ids)
        if all(cid in self._ids for cid in visible):
            for cid in visible:
                self._ids.pop(cid, None)
        else:
            for cid in visible:
                self._ids.setdefault(cid, None)

    def clear(self) -> None:
        self._ids.clear()

    def summary(self, visible_ids: Iterable[str]) -> SelectionSummary:
        visible = set(visible_ids)
        hits = sum(1 for cid in visible if cid in self._ids)
        return SelectionSummary(
            all_selected=bool(visible) and hits == len(visible),
            indeterminate=0 < hits < len(visible),
            selected_count=len(self._ids),
            visible_selected_count=hits,
        )
