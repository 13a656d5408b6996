"""Chord families - quality classification, sevenths, core tones and base symbols.

Every decision point that depends on the chord family dispatches on the
closed ChordFamily enumeration:
- Family classification from an interval set
- Seventh / added-sixth detection
- Core interval sets
- Base chord symbols
- Chord-tone ordering for inversion labels
"""

from enum import Enum
from typing import Iterable, List, Optional, Set

from ..core import INVERSION_NAMES, label_pitch_class, normalize_pitch_class


class ChordFamily(Enum):
    """Chord quality families."""
    MAJOR = "major"
    MINOR = "minor"
    DIM = "dim"
    AUG = "aug"
    SUS4 = "sus4"
    SUS2 = "sus2"
    POWER = "power"

    @property
    def is_sus(self) -> bool:
        return self in (ChordFamily.SUS4, ChordFamily.SUS2)

    @property
    def is_major_or_minor(self) -> bool:
        return self in (ChordFamily.MAJOR, ChordFamily.MINOR)


class SeventhKind(Enum):
    """Seventh attached to a family."""
    NONE = "none"
    MINOR = "b7"
    MAJOR = "M7"
    DIMINISHED = "dim7"


# Third-equivalent and fifth-equivalent for each family
FAMILY_TONES = {
    ChordFamily.MAJOR: (4, 7),
    ChordFamily.MINOR: (3, 7),
    ChordFamily.DIM: (3, 6),
    ChordFamily.AUG: (4, 8),
    ChordFamily.SUS4: (5, 7),
    ChordFamily.SUS2: (2, 7),
    ChordFamily.POWER: (None, 7),
}

SEVENTH_INTERVALS = {
    SeventhKind.MINOR: 10,
    SeventhKind.MAJOR: 11,
    SeventhKind.DIMINISHED: 9,
}

# (no seventh, b7, M7, dim7) symbols per family
BASE_SYMBOLS = {
    ChordFamily.MAJOR: {SeventhKind.NONE: "", SeventhKind.MINOR: "7", SeventhKind.MAJOR: "Δ7"},
    ChordFamily.MINOR: {SeventhKind.NONE: "m", SeventhKind.MINOR: "m7", SeventhKind.MAJOR: "mΔ7"},
    ChordFamily.DIM: {SeventhKind.NONE: "°", SeventhKind.MINOR: "ø7", SeventhKind.DIMINISHED: "°7"},
    ChordFamily.AUG: {SeventhKind.NONE: "+", SeventhKind.MINOR: "7♯5", SeventhKind.MAJOR: "Δ7♯5"},
    ChordFamily.SUS4: {SeventhKind.NONE: "sus", SeventhKind.MINOR: "7sus", SeventhKind.MAJOR: "Δ7sus"},
    ChordFamily.SUS2: {SeventhKind.NONE: "sus2", SeventhKind.MINOR: "7sus2", SeventhKind.MAJOR: "Δ7sus2"},
    ChordFamily.POWER: {},
}

SIXTH_SYMBOLS = {
    ChordFamily.MAJOR: "6",
    ChordFamily.MINOR: "m6",
}


def choose_family(intervals: Iterable[int]) -> Optional[ChordFamily]:
    """
    Classify an interval set into a chord family.

    Augmented and diminished are tested before plain major and minor so
    that a major third with an augmented fifth reads as augmented.

    Returns:
        ChordFamily, or None when no family matches
    """
    intervals = set(intervals)
    has_major_third = 4 in intervals
    has_minor_third = 3 in intervals
    has_fifth = 7 in intervals

    if has_major_third and 8 in intervals:
        return ChordFamily.AUG
    if has_minor_third and 6 in intervals:
        return ChordFamily.DIM
    if has_major_third:
        return ChordFamily.MAJOR
    if has_minor_third:
        return ChordFamily.MINOR
    if 5 in intervals and has_fifth:
        return ChordFamily.SUS4
    if 2 in intervals and has_fifth:
        return ChordFamily.SUS2
    if has_fifth:
        return ChordFamily.POWER
    return None


def detect_seventh(intervals: Iterable[int], family: ChordFamily) -> SeventhKind:
    """Determine which seventh, if any, the family carries."""
    intervals = set(intervals)
    has_minor_seventh = 10 in intervals

    if family is ChordFamily.DIM and 9 in intervals and not has_minor_seventh:
        return SeventhKind.DIMINISHED
    if has_minor_seventh:
        return SeventhKind.MINOR
    if 11 in intervals:
        return SeventhKind.MAJOR
    return SeventhKind.NONE


def uses_added_sixth(intervals: Iterable[int], family: ChordFamily, seventh: SeventhKind) -> bool:
    """Major/minor triads with a major sixth and no seventh read as 6 / m6."""
    return family.is_major_or_minor and seventh is SeventhKind.NONE and 9 in set(intervals)


def get_core_intervals(family: ChordFamily, seventh: SeventhKind, use_six: bool = False) -> Set[int]:
    """Intervals absorbed by the family's core tones."""
    third, fifth = FAMILY_TONES[family]
    core = {0, fifth}
    if third is not None:
        core.add(third)

    if family is ChordFamily.POWER:
        return core

    if use_six and family.is_major_or_minor:
        core.add(9)
    elif seventh is SeventhKind.DIMINISHED:
        if family is ChordFamily.DIM:
            core.add(9)
    elif seventh is SeventhKind.MAJOR:
        if family is not ChordFamily.DIM:
            core.add(11)
    elif seventh is SeventhKind.MINOR:
        core.add(10)

    return core


def base_symbol(family: ChordFamily, seventh: SeventhKind, use_six: bool = False) -> str:
    """Base chord symbol for a family, seventh and sixth flag."""
    if family is ChordFamily.POWER:
        return "5"
    if use_six and family in SIXTH_SYMBOLS:
        return SIXTH_SYMBOLS[family]

    symbols = BASE_SYMBOLS[family]
    return symbols.get(seventh, symbols[SeventhKind.NONE])


def has_seventh_in_core(core_intervals: Set[int], family: ChordFamily) -> bool:
    if family is ChordFamily.DIM and 9 in core_intervals:
        return True
    return 10 in core_intervals or 11 in core_intervals


def ordered_chord_tones(family: ChordFamily, core_intervals: Set[int]) -> List[int]:
    """Chord-tone intervals above the root in stacking order (third, fifth, sixth/seventh)."""
    ordered = []
    third = FAMILY_TONES[family][0]
    if third is not None:
        ordered.append(third)

    for interval in (6, 7, 8):
        if interval in core_intervals and interval not in ordered:
            ordered.append(interval)

    for interval in (9, 10, 11):
        if interval in core_intervals:
            ordered.append(interval)

    return ordered


def get_inversion_label(
    root_pitch_class: int,
    bass_pitch_class: int,
    core_intervals: Set[int],
    family: ChordFamily,
) -> str:
    """
    Name the inversion implied by the bass note.

    Returns:
        'root position', an ordinal inversion name, or 'slash bass (X)'
        when the bass is not a chord tone
    """
    if bass_pitch_class == root_pitch_class:
        return "root position"

    bass_interval = normalize_pitch_class(bass_pitch_class - root_pitch_class)
    ordered = ordered_chord_tones(family, core_intervals)
    if bass_interval not in ordered:
        return f"slash bass ({label_pitch_class(bass_pitch_class)})"

    index = ordered.index(bass_interval)
    if index < len(INVERSION_NAMES):
        return INVERSION_NAMES[index]
    return f"{index + 1}th inversion"
