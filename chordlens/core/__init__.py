"""Core types and constants for Chordlens."""

from .notes import ActiveNotes
from .constants import (
    NOTE_LABELS,
    LETTERS,
    LETTER_PITCH_CLASSES,
    INVERSION_NAMES,
    COLOR_ORDER,
    MIDI_MIN,
    MIDI_MAX,
)
from .pitch import (
    normalize_pitch_class,
    label_pitch_class,
    midi_note_to_name,
    parse_note_name,
    check_midi_note,
    get_pitch_classes,
    get_intervals_from_root,
    get_root_reference,
    has_upper_extension,
)

__all__ = [
    "ActiveNotes",
    "NOTE_LABELS",
    "LETTERS",
    "LETTER_PITCH_CLASSES",
    "INVERSION_NAMES",
    "COLOR_ORDER",
    "MIDI_MIN",
    "MIDI_MAX",
    "normalize_pitch_class",
    "label_pitch_class",
    "midi_note_to_name",
    "parse_note_name",
    "check_midi_note",
    "get_pitch_classes",
    "get_intervals_from_root",
    "get_root_reference",
    "has_upper_extension",
]
