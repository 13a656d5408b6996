"""Computer keyboard as a note source.

Maps a row of letter keys to a chromatic run of notes. Holding a key
counts as one hold of its note; key auto-repeat does not add holds.
"""

from typing import Dict, List, Optional, Sequence, Set

from ..core.constants import COMPUTER_KEY_BASE_NOTE, COMPUTER_KEY_SEQUENCE


class ComputerKeyboard:
    """Track held computer keys and the notes they stand for."""

    def __init__(
        self,
        base_note: int = COMPUTER_KEY_BASE_NOTE,
        keys: Sequence[str] = COMPUTER_KEY_SEQUENCE,
    ):
        """
        Initialize ComputerKeyboard.

        Args:
            base_note: Note played by the first key (default: C4)
            keys: Keys in chromatic order
        """
        self.base_note = base_note
        self.key_to_note: Dict[str, int] = {
            key.lower(): base_note + index for index, key in enumerate(keys)
        }
        self._held: Set[str] = set()

    def note_for(self, key: str) -> Optional[int]:
        return self.key_to_note.get(key.lower())

    def press(self, key: str) -> Optional[int]:
        """
        Press a key.

        Returns:
            The note to hold, or None if the key is unmapped or already held
        """
        key = key.lower()
        note = self.key_to_note.get(key)
        if note is None or key in self._held:
            return None
        self._held.add(key)
        return note

    def release(self, key: str) -> Optional[int]:
        """
        Release a key.

        Returns:
            The note to release, or None if the key was not held
        """
        key = key.lower()
        if key not in self._held:
            return None
        self._held.discard(key)
        return self.key_to_note[key]

    def release_all(self) -> List[int]:
        """Release every held key (e.g. when input focus is lost)."""
        notes = [self.key_to_note[key] for key in sorted(self._held)]
        self._held.clear()
        return notes

    @property
    def held_keys(self) -> Set[str]:
        return set(self._held)
