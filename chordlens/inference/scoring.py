"""Candidate scoring - how well a root reading explains the held notes.

Hand-tuned integer heuristics. Clean tertian readings start from a high
baseline; shell readings start much lower so they never outrank a clean
family match.
"""

from typing import Iterable, Optional, Tuple

from .candidates import RootReading
from .families import ChordFamily
from .fallback import ShellFamily


def tertian_root_strength(intervals: Iterable[int], family: Optional[ChordFamily]) -> Tuple[int, bool]:
    """
    Score how strongly the intervals stack in thirds above the root.

    Returns:
        (strength, has_fifth) where the fifth is the family's own fifth
    """
    intervals = set(intervals)
    has_third = 3 in intervals or 4 in intervals
    if family is ChordFamily.DIM:
        has_fifth = 6 in intervals
    elif family is ChordFamily.AUG:
        has_fifth = 8 in intervals
    else:
        has_fifth = 7 in intervals
    has_seventh = 10 in intervals or 11 in intervals or (family is ChordFamily.DIM and 9 in intervals)

    strength = 0
    if has_third:
        strength += CandidateScorer.THIRD_STRENGTH
    if has_fifth:
        strength += CandidateScorer.FIFTH_STRENGTH
    if has_seventh:
        strength += CandidateScorer.SEVENTH_STRENGTH
    if has_third and has_fifth:
        strength += CandidateScorer.TRIAD_BONUS
    if has_third and has_fifth and has_seventh:
        strength += CandidateScorer.SEVENTH_CHORD_BONUS
    if 5 in intervals and not has_third:
        strength -= 4

    return strength, has_fifth


class CandidateScorer:
    """Score root readings.

    All weights are integers; the order of adjustments follows the order
    in which the reading's facts are established.
    """

    ROOT_BASELINE = 72
    SHELL_BASELINE = 34
    SINGLE_NOTE_SCORE = 1

    # Tertian strength
    THIRD_STRENGTH = 12
    FIFTH_STRENGTH = 14
    SEVENTH_STRENGTH = 10
    TRIAD_BONUS = 8
    SEVENTH_CHORD_BONUS = 8

    # Bass placement: (root position, bass is a core tone, foreign bass)
    ROOT_BASS_WEIGHTS = (18, -6, -14)
    SHELL_BASS_WEIGHTS = (10, -2, -10)

    # Companion readings for sus chords voiced with a high 9th / 11th
    ADD9_HEURISTIC_BONUS = 6
    ADD11_HEURISTIC_BONUS = 5

    def score_root(self, reading: RootReading) -> int:
        """Score a clean family reading."""
        family = reading.family
        inverted = not reading.is_root_position
        has_third = reading.has_third
        has_seventh = reading.has_seventh
        strength, has_fifth = tertian_root_strength(reading.intervals, family)

        score = self.ROOT_BASELINE + strength
        score += self._bass_weight(reading, self.ROOT_BASS_WEIGHTS)
        score += 7 if has_third else -2
        score += 4 if has_seventh else 0
        score -= len(reading.symbol.color_tokens)

        if family.is_major_or_minor:
            score += 6

        if inverted:
            score -= 4

        if reading.use_six and inverted:
            score -= 10

        if reading.note_count <= 3 and inverted and has_third and not has_seventh:
            score -= 8

        if family is ChordFamily.SUS2 and reading.context.high9 and not has_seventh:
            score += 4

        if family is ChordFamily.SUS4 and reading.context.high11 and not has_seventh:
            score += 3

        # A sus reading that also holds a third contradicts itself
        if family.is_sus and has_third:
            score -= 18

        if inverted and has_seventh and not has_third:
            score -= 16

        if reading.symbol.symbol == "7sus2":
            score -= 8

        # Missing fifth is rarely the intended reading
        if family.is_major_or_minor and not has_fifth:
            score -= 8 if has_seventh else 26

        return score

    def score_shell(self, reading: RootReading) -> int:
        """Score a shell fallback reading."""
        intervals = reading.interval_set
        has_fifth_like = bool({6, 7, 8} & intervals)
        has_upper_color = bool({1, 2, 5, 9} & intervals)

        score = self.SHELL_BASELINE
        score += 10 if reading.has_third else 0
        score += 7 if has_fifth_like else 0
        score += 8 if reading.has_seventh else 0
        score += 2 if has_upper_color else 0
        score += self._bass_weight(reading, self.SHELL_BASS_WEIGHTS)
        score -= len(reading.symbol.color_tokens)

        if reading.shell in (ShellFamily.MAJOR, ShellFamily.MINOR):
            score += 6

        return score

    def score(self, reading: RootReading) -> int:
        if reading.family is None:
            return self.score_shell(reading)
        return self.score_root(reading)

    @staticmethod
    def _bass_weight(reading: RootReading, weights: Tuple[int, int, int]) -> int:
        root_position, core_tone, foreign = weights
        if reading.is_root_position:
            return root_position
        return core_tone if reading.bass_in_core else foreign
