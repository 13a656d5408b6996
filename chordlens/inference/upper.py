"""Upper-structure slash chords - a clean triad over a foreign bass."""

from typing import List, Optional, Tuple

from ..core import get_intervals_from_root, label_pitch_class, normalize_pitch_class
from .candidates import CandidateSource, ChordCandidate
from .families import ChordFamily

# Triad patterns tested in order: (intervals, symbol, family)
UPPER_TRIADS = [
    ({0, 4, 7}, "", ChordFamily.MAJOR),
    ({0, 3, 7}, "m", ChordFamily.MINOR),
    ({0, 3, 6}, "°", ChordFamily.DIM),
    ({0, 4, 8}, "+", ChordFamily.AUG),
    ({0, 5, 7}, "sus", ChordFamily.SUS4),
    ({0, 2, 7}, "sus2", ChordFamily.SUS2),
]

UPPER_STRUCTURE_SCORE = 108
STEP_BASS_BONUS = 10
PLAIN_TRIAD_BONUS = 5


def detect_simple_upper_chord(intervals) -> Optional[Tuple[str, ChordFamily]]:
    """Match a three-note interval set against the simple triad patterns."""
    intervals = set(intervals)
    for pattern, symbol, family in UPPER_TRIADS:
        if pattern <= intervals:
            return symbol, family
    return None


def build_upper_structure_candidates(
    pitch_classes: List[int],
    bass_pitch_class: int,
) -> List[ChordCandidate]:
    """
    Propose '<triad>/<bass>' readings.

    Only applies when exactly three pitch classes remain above the bass,
    so these labels do not overshadow clearer root names.
    """
    upper = [pc for pc in pitch_classes if pc != bass_pitch_class]
    if len(upper) != 3:
        return []

    bass_name = label_pitch_class(bass_pitch_class)
    candidates = []
    for root_pitch_class in upper:
        intervals = set(get_intervals_from_root(root_pitch_class, upper))
        match = detect_simple_upper_chord(intervals)
        if match is None:
            continue

        symbol, family = match
        bass_interval = normalize_pitch_class(bass_pitch_class - root_pitch_class)
        if bass_interval in intervals:
            continue

        score = UPPER_STRUCTURE_SCORE
        if bass_interval in (2, 5):
            score += STEP_BASS_BONUS
        if family.is_major_or_minor:
            score += PLAIN_TRIAD_BONUS

        candidates.append(ChordCandidate(
            full_name=f"{label_pitch_class(root_pitch_class)}{symbol}/{bass_name}",
            inversion_label=f"slash bass ({bass_name})",
            score=score,
            source=CandidateSource.UPPER_STRUCTURE,
            root_pitch_class=root_pitch_class,
            family=family,
        ))

    return candidates
