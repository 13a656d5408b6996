"""Active note multiset - tracks simultaneous holds per note number."""

import logging
from typing import Dict, List, Optional

from .pitch import get_pitch_classes

logger = logging.getLogger(__name__)


class ActiveNotes:
    """Multiset of held notes.

    Each note number maps to how many sources currently hold it. A note
    is active while its count is at least one; releasing more often than
    it was pressed is ignored.
    """

    def __init__(self):
        self._counts: Dict[int, int] = {}

    def increment(self, note: int) -> None:
        """Register one more hold of a note."""
        self._counts[note] = self._counts.get(note, 0) + 1

    def decrement(self, note: int) -> None:
        """Release one hold of a note."""
        current = self._counts.get(note, 0)
        if current == 0:
            logger.debug("Ignoring release of unheld note %d", note)
            return

        if current <= 1:
            del self._counts[note]
        else:
            self._counts[note] = current - 1

    def clear(self) -> None:
        self._counts.clear()

    def count(self, note: int) -> int:
        """Number of holds on a note (0 when inactive)."""
        return self._counts.get(note, 0)

    @property
    def sorted_notes(self) -> List[int]:
        """Active note numbers, lowest first."""
        return sorted(self._counts)

    @property
    def pitch_classes(self) -> List[int]:
        return get_pitch_classes(self._counts)

    @property
    def bass(self) -> Optional[int]:
        """Lowest active note, or None."""
        return min(self._counts) if self._counts else None

    def __contains__(self, note: int) -> bool:
        return note in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __bool__(self) -> bool:
        return bool(self._counts)

    def __repr__(self) -> str:
        return f"ActiveNotes({self._counts!r})"
