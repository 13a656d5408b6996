"""Chord candidates - root readings of the held notes.

For each held pitch class taken as a root, the notes are read either as
a clean family (root analysis) or as a looser shell (interval fallback).
Each reading carries everything the scorer and the symbol builder need.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from ..core import get_intervals_from_root, label_pitch_class, normalize_pitch_class
from .extensions import ExtensionContext, collect_extensions
from .fallback import ShellFamily, build_shell_core, get_fallback_family
from .families import (
    ChordFamily,
    base_symbol,
    choose_family,
    detect_seventh,
    get_core_intervals,
    get_inversion_label,
    has_seventh_in_core,
    uses_added_sixth,
)
from .symbols import ChordSymbol, build_chord_symbol, slash_suffix


class CandidateSource(Enum):
    """Where a candidate came from."""
    SINGLE_NOTE = "single-note"
    ROOT_ANALYSIS = "root-analysis"
    ADD9_HEURISTIC = "add9-heuristic"
    ADD11_HEURISTIC = "add11-heuristic"
    INTERVAL_FALLBACK = "interval-fallback"
    UPPER_STRUCTURE = "upper-structure"


@dataclass(frozen=True)
class ChordCandidate:
    """A named interpretation of the held notes with its ranking score."""
    full_name: str
    inversion_label: str
    score: int
    source: CandidateSource
    root_pitch_class: Optional[int] = None
    family: Optional[ChordFamily] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "full_name": self.full_name,
            "inversion_label": self.inversion_label,
            "score": self.score,
            "source": self.source.value,
            "root_pitch_class": self.root_pitch_class,
            "family": self.family.value if self.family else None,
        }


@dataclass
class RootReading:
    """One way of reading the held notes from a given root."""

    root_pitch_class: int
    bass_pitch_class: int
    intervals: List[int]  # ascending interval classes above the root
    family: Optional[ChordFamily]  # None for shell readings
    core_intervals: Set[int]
    has_seventh: bool
    context: ExtensionContext
    symbol: ChordSymbol
    inversion_family: ChordFamily
    use_six: bool = False
    shell: Optional[ShellFamily] = None
    interval_set: Set[int] = field(init=False)

    def __post_init__(self):
        self.interval_set = set(self.intervals)

    @property
    def bass_interval(self) -> int:
        return normalize_pitch_class(self.bass_pitch_class - self.root_pitch_class)

    @property
    def is_root_position(self) -> bool:
        return self.bass_pitch_class == self.root_pitch_class

    @property
    def bass_in_core(self) -> bool:
        return self.bass_interval in self.core_intervals

    @property
    def has_third(self) -> bool:
        return 3 in self.interval_set or 4 in self.interval_set

    @property
    def note_count(self) -> int:
        """Number of distinct pitch classes held."""
        return len(self.intervals)

    @property
    def root_name(self) -> str:
        return label_pitch_class(self.root_pitch_class)

    @property
    def slash(self) -> str:
        return slash_suffix(self.root_pitch_class, self.bass_pitch_class)

    @property
    def full_name(self) -> str:
        return self.symbol.full_name(self.root_pitch_class, self.bass_pitch_class)

    @property
    def inversion_label(self) -> str:
        return get_inversion_label(
            self.root_pitch_class,
            self.bass_pitch_class,
            self.core_intervals,
            self.inversion_family,
        )


def read_root(
    root_pitch_class: int,
    active_notes: List[int],
    pitch_classes: List[int],
    bass_pitch_class: int,
) -> Optional[RootReading]:
    """
    Read the held notes from one root, falling back to a shell reading.

    Args:
        root_pitch_class: Candidate root (must be one of the pitch classes)
        active_notes: Held notes, sorted ascending
        pitch_classes: Ascending distinct pitch classes of the held notes
        bass_pitch_class: Pitch class of the lowest held note

    Returns:
        RootReading, or None if the root is not held
    """
    intervals = get_intervals_from_root(root_pitch_class, pitch_classes)
    if 0 not in intervals:
        return None

    family = choose_family(intervals)
    if family is None:
        return read_shell(root_pitch_class, active_notes, intervals, bass_pitch_class)

    seventh = detect_seventh(intervals, family)
    use_six = uses_added_sixth(intervals, family, seventh)
    core = get_core_intervals(family, seventh, use_six)
    has_seventh = has_seventh_in_core(core, family)

    context = ExtensionContext.for_root(
        root_pitch_class,
        active_notes,
        family=family,
        has_seventh=has_seventh,
        has_major_third=4 in intervals,
    )
    extensions = collect_extensions(intervals, core, context)
    symbol = build_chord_symbol(
        base_symbol(family, seventh, use_six),
        extensions,
        family,
        has_seventh,
    )

    return RootReading(
        root_pitch_class=root_pitch_class,
        bass_pitch_class=bass_pitch_class,
        intervals=intervals,
        family=family,
        core_intervals=core,
        has_seventh=has_seventh,
        context=context,
        symbol=symbol,
        inversion_family=family,
        use_six=use_six,
    )


def read_shell(
    root_pitch_class: int,
    active_notes: List[int],
    intervals: List[int],
    bass_pitch_class: int,
) -> RootReading:
    """Read the notes as a shell voicing when no family matches."""
    shell = get_fallback_family(intervals)
    shell_core = build_shell_core(shell, intervals)
    core = shell_core.core_intervals
    has_seventh = bool({10, 11} & (core | set(intervals)))

    context = ExtensionContext.for_root(
        root_pitch_class,
        active_notes,
        family=shell_core.inversion_family,
        has_seventh=has_seventh,
        has_major_third=4 in intervals,
    )
    extensions = collect_extensions(intervals, core, context)
    symbol = build_chord_symbol(
        shell_core.symbol,
        extensions,
        shell_core.inversion_family,
        has_seventh and "7" in shell_core.symbol,
        allow_six_nine=False,
    )

    return RootReading(
        root_pitch_class=root_pitch_class,
        bass_pitch_class=bass_pitch_class,
        intervals=intervals,
        family=None,
        core_intervals=core,
        has_seventh=has_seventh,
        context=context,
        symbol=symbol,
        inversion_family=shell_core.inversion_family,
        shell=shell,
    )
