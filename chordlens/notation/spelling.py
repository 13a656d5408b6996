"""Enharmonic spelling - letter names for held notes in chord context.

The spelling context fixes the root letter and a few preferences so that
every held note is written relative to the chord: E♭ over C is a minor
third, but D♯ over C7 is a sharp ninth.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core import (
    LETTERS,
    LETTER_PITCH_CLASSES,
    label_pitch_class,
    get_intervals_from_root,
    get_pitch_classes,
    normalize_pitch_class,
)
from ..inference import ChordCandidate, ChordFamily

ACCIDENTALS = {-2: "𝄫", -1: "♭", 0: "", 1: "♯", 2: "𝄪"}
ACCIDENTAL_OFFSETS = {symbol: offset for offset, symbol in ACCIDENTALS.items()}


@dataclass(frozen=True)
class SpellingContext:
    """Letter/accidental frame derived from the primary chord."""

    root_pitch_class: int
    root_letter: str  # A-G
    has_major_third: bool
    prefer_sharp_eleven: bool
    prefer_sharp_five: bool
    prefer_double_flat_seven: bool

    @property
    def root_letter_index(self) -> int:
        return LETTERS.index(self.root_letter)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "root_pitch_class": self.root_pitch_class,
            "root_letter": self.root_letter,
            "has_major_third": self.has_major_third,
            "prefer_sharp_eleven": self.prefer_sharp_eleven,
            "prefer_sharp_five": self.prefer_sharp_five,
            "prefer_double_flat_seven": self.prefer_double_flat_seven,
        }


@dataclass(frozen=True)
class SpelledNote:
    """A note written as letter + accidental in a given octave."""

    note: int
    letter: str
    accidental: str
    octave: int
    staff_step: int  # diatonic steps above C4 (negative below)

    @property
    def name(self) -> str:
        return f"{self.letter}{self.accidental}{self.octave}"


def build_spelling_context(
    notes: Iterable[int],
    primary: Optional[ChordCandidate] = None,
) -> Optional[SpellingContext]:
    """
    Derive a spelling context from the primary candidate.

    Falls back to the lowest held note as root when there is no primary
    candidate or it carries no root.

    Args:
        notes: Held note numbers
        primary: Primary candidate of the analysis, if any

    Returns:
        SpellingContext, or None when nothing is held
    """
    active_notes = sorted(set(notes))
    if not active_notes:
        return None

    if primary is not None and primary.root_pitch_class is not None:
        root = primary.root_pitch_class
        family = primary.family
    else:
        root = normalize_pitch_class(active_notes[0])
        family = None

    root_letter = label_pitch_class(root)[:1]
    if root_letter not in LETTER_PITCH_CLASSES:
        return None

    intervals = set(get_intervals_from_root(root, get_pitch_classes(active_notes)))
    has_major_third = 4 in intervals
    has_fifth = 7 in intervals

    return SpellingContext(
        root_pitch_class=root,
        root_letter=root_letter,
        has_major_third=has_major_third,
        # Tritone reads as ♯11 over a perfect fifth, as ♭5 otherwise or in diminished chords
        prefer_sharp_eleven=has_fifth and family is not ChordFamily.DIM,
        prefer_sharp_five=(
            family is ChordFamily.AUG
            or (has_major_third and 8 in intervals and not has_fifth)
        ),
        prefer_double_flat_seven=(
            family is ChordFamily.DIM and 9 in intervals and 10 not in intervals
        ),
    )


def degree_for_interval(interval: int, context: SpellingContext) -> int:
    """Diatonic steps above the root letter used to write an interval."""
    if interval == 0:
        return 0
    if interval in (1, 2):
        return 1
    if interval == 3:
        return 1 if context.has_major_third else 2
    if interval == 4:
        return 2
    if interval == 5:
        return 3
    if interval == 6:
        return 3 if context.prefer_sharp_eleven else 4
    if interval == 7:
        return 4
    if interval == 8:
        return 4 if context.prefer_sharp_five else 5
    if interval == 9:
        return 6 if context.prefer_double_flat_seven else 5
    return 6


def spell_note(note: int, context: Optional[SpellingContext] = None) -> SpelledNote:
    """
    Spell a held note for staff rendering.

    Without a context the default pitch-class label is used.
    """
    if context is None:
        label = label_pitch_class(note)
        letter, accidental = label[0], label[1:]
    else:
        interval = normalize_pitch_class(note - context.root_pitch_class)
        letter_index = (context.root_letter_index + degree_for_interval(interval, context)) % 7
        letter = LETTERS[letter_index]
        offset = normalize_pitch_class(note - LETTER_PITCH_CLASSES[letter])
        if offset > 6:
            offset -= 12
        accidental = ACCIDENTALS.get(offset, "")

    # B♯ belongs to the octave below, C♭ to the octave above
    natural = note - ACCIDENTAL_OFFSETS[accidental]
    octave = natural // 12 - 1
    staff_step = (octave - 4) * 7 + LETTERS.index(letter)

    return SpelledNote(
        note=note,
        letter=letter,
        accidental=accidental,
        octave=octave,
        staff_step=staff_step,
    )

