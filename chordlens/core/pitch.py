"""Pitch arithmetic - pitch classes, intervals and note names."""

import re
from typing import Iterable, List, Optional

from .constants import NOTE_LABELS, LETTER_PITCH_CLASSES, MIDI_MAX, MIDI_MIN

_NOTE_NAME_RE = re.compile(r"^\s*([A-Ga-g])([#♯b♭]*)(-?\d+)\s*$")


def normalize_pitch_class(value: int) -> int:
    """Reduce any integer to a pitch class (0-11)."""
    return value % 12


def label_pitch_class(pitch_class: int) -> str:
    """Display label for a pitch class (e.g. 1 -> 'D♭')."""
    return NOTE_LABELS[normalize_pitch_class(pitch_class)]


def midi_note_to_name(note: int) -> str:
    """Get note name with octave (e.g. 60 -> 'C4', 61 -> 'D♭4')."""
    octave = (note // 12) - 1
    return f"{label_pitch_class(note)}{octave}"


def check_midi_note(note: int) -> int:
    """Return the note unchanged, or raise ValueError if it is not a MIDI note."""
    if not MIDI_MIN <= note <= MIDI_MAX:
        raise ValueError(f"Note {note} outside MIDI range {MIDI_MIN}-{MIDI_MAX}")
    return note


def parse_note_name(name: str) -> int:
    """
    Parse a note name such as 'C4', 'F#3' or 'B♭2' into a MIDI note number.

    Raises:
        ValueError: If the name cannot be parsed or falls outside the MIDI range
    """
    match = _NOTE_NAME_RE.match(name)
    if not match:
        raise ValueError(f"Invalid note name: {name!r}")

    letter, accidentals, octave = match.groups()
    offset = 0
    for symbol in accidentals:
        offset += 1 if symbol in "#♯" else -1

    note = (int(octave) + 1) * 12 + LETTER_PITCH_CLASSES[letter.upper()] + offset
    return check_midi_note(note)


def get_pitch_classes(notes: Iterable[int]) -> List[int]:
    """Ascending, deduplicated pitch classes of the given notes."""
    return sorted({normalize_pitch_class(n) for n in notes})


def get_intervals_from_root(root_pitch_class: int, pitch_classes: Iterable[int]) -> List[int]:
    """Ascending interval classes of each pitch class above the root."""
    return sorted({normalize_pitch_class(pc - root_pitch_class) for pc in pitch_classes})


def get_root_reference(root_pitch_class: int, active_notes: List[int]) -> Optional[int]:
    """
    Lowest sounding instance of the root.

    When the root is not held, the bass note is moved down to the nearest
    note of the root's pitch class instead.

    Args:
        root_pitch_class: Candidate root (0-11)
        active_notes: Held notes, sorted ascending

    Returns:
        Reference note number, or None if nothing is held
    """
    if not active_notes:
        return None

    for note in active_notes:
        if normalize_pitch_class(note) == root_pitch_class:
            return note

    bass = active_notes[0]
    return bass - normalize_pitch_class(bass - root_pitch_class)


def has_upper_extension(root_pitch_class: int, interval: int, active_notes: List[int]) -> bool:
    """Check whether the interval is voiced an octave or more above the root reference."""
    reference = get_root_reference(root_pitch_class, active_notes)
    if reference is None:
        return False

    target = normalize_pitch_class(root_pitch_class + interval)
    return any(
        normalize_pitch_class(note) == target and note - reference >= 12
        for note in active_notes
    )
