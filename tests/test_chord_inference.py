"""Comprehensive tests for chord inference.

Tests cover:
- Family classification and seventh/sixth detection
- Extension classification and colour-token ordering
- Symbol assembly and promotion
- Shell fallback, scoring and upper-structure slash chords
- Ranking, deduplication and inversion labels
- End-to-end naming of common voicings
"""

import pytest
from pathlib import Path
import sys

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from chordlens.inference import (
    AnalyzerConfig,
    CandidateScorer,
    CandidateSource,
    ChordAnalyzer,
    ChordCandidate,
    ChordFamily,
    ExtensionContext,
    ExtensionKind,
    SeventhKind,
    ShellFamily,
    base_symbol,
    build_shell_core,
    build_upper_structure_candidates,
    choose_family,
    classify_non_core_interval,
    detect_seventh,
    detect_simple_upper_chord,
    get_chord_candidates,
    get_core_intervals,
    get_fallback_family,
    get_inversion_label,
    promote_extension_symbol,
    rank_candidates,
    read_root,
    sort_color_tokens,
    tertian_root_strength,
    uses_added_sixth,
)
from chordlens.inference.candidates import read_shell
from chordlens.inference.extensions import ClassifiedExtensions
from chordlens.inference.symbols import build_chord_symbol


# ============================================================================
# Helpers
# ============================================================================

def primary(notes):
    """Primary candidate for a list of held notes."""
    candidates = get_chord_candidates(notes)
    assert candidates, f"No candidates for {notes}"
    return candidates[0]


def primary_name(notes):
    return primary(notes).full_name


def context(family=ChordFamily.MAJOR, has_seventh=False, has_major_third=True, **high):
    return ExtensionContext(
        family=family,
        has_seventh=has_seventh,
        has_major_third=has_major_third,
        **high,
    )


def candidate(name, score, source=CandidateSource.ROOT_ANALYSIS):
    return ChordCandidate(full_name=name, inversion_label="root position", score=score, source=source)


# ============================================================================
# Family Classification
# ============================================================================

class TestChooseFamily:
    """Tests for family classification."""

    @pytest.mark.parametrize("intervals,expected", [
        ({0, 4, 7}, ChordFamily.MAJOR),
        ({0, 3, 7}, ChordFamily.MINOR),
        ({0, 3, 6}, ChordFamily.DIM),
        ({0, 4, 8}, ChordFamily.AUG),
        ({0, 5, 7}, ChordFamily.SUS4),
        ({0, 2, 7}, ChordFamily.SUS2),
        ({0, 7}, ChordFamily.POWER),
    ])
    def test_basic_families(self, intervals, expected):
        assert choose_family(intervals) is expected

    def test_augmented_beats_major(self):
        """Major third with augmented fifth reads as augmented."""
        assert choose_family({0, 4, 7, 8}) is ChordFamily.AUG

    def test_diminished_beats_minor(self):
        assert choose_family({0, 3, 6, 7}) is ChordFamily.DIM

    def test_third_beats_sus(self):
        assert choose_family({0, 4, 5, 7}) is ChordFamily.MAJOR

    def test_no_family(self):
        assert choose_family({0}) is None
        assert choose_family({0, 1, 2}) is None
        assert choose_family({0, 5}) is None

    def test_deterministic(self):
        for intervals in ({0, 4, 7, 10}, {0, 2, 5}, {0, 3, 6, 9}):
            assert choose_family(intervals) is choose_family(set(intervals))


class TestSeventhDetection:
    """Tests for seventh and added-sixth detection."""

    def test_dominant_seventh(self):
        assert detect_seventh({0, 4, 7, 10}, ChordFamily.MAJOR) is SeventhKind.MINOR

    def test_major_seventh(self):
        assert detect_seventh({0, 4, 7, 11}, ChordFamily.MAJOR) is SeventhKind.MAJOR

    def test_minor_beats_major_seventh(self):
        assert detect_seventh({0, 4, 7, 10, 11}, ChordFamily.MAJOR) is SeventhKind.MINOR

    def test_diminished_seventh(self):
        assert detect_seventh({0, 3, 6, 9}, ChordFamily.DIM) is SeventhKind.DIMINISHED

    def test_half_diminished(self):
        assert detect_seventh({0, 3, 6, 10}, ChordFamily.DIM) is SeventhKind.MINOR
        assert detect_seventh({0, 3, 6, 9, 10}, ChordFamily.DIM) is SeventhKind.MINOR

    def test_sixth_is_not_a_seventh_outside_dim(self):
        assert detect_seventh({0, 4, 7, 9}, ChordFamily.MAJOR) is SeventhKind.NONE

    def test_added_sixth(self):
        assert uses_added_sixth({0, 4, 7, 9}, ChordFamily.MAJOR, SeventhKind.NONE)
        assert uses_added_sixth({0, 3, 7, 9}, ChordFamily.MINOR, SeventhKind.NONE)
        assert not uses_added_sixth({0, 4, 7, 9, 10}, ChordFamily.MAJOR, SeventhKind.MINOR)
        assert not uses_added_sixth({0, 5, 7, 9}, ChordFamily.SUS4, SeventhKind.NONE)


class TestCoreIntervalsAndSymbols:
    """Tests for core tones and base symbols."""

    def test_core_intervals(self):
        assert get_core_intervals(ChordFamily.MAJOR, SeventhKind.MINOR) == {0, 4, 7, 10}
        assert get_core_intervals(ChordFamily.MINOR, SeventhKind.NONE, use_six=True) == {0, 3, 7, 9}
        assert get_core_intervals(ChordFamily.DIM, SeventhKind.DIMINISHED) == {0, 3, 6, 9}
        assert get_core_intervals(ChordFamily.DIM, SeventhKind.MAJOR) == {0, 3, 6}
        assert get_core_intervals(ChordFamily.POWER, SeventhKind.MINOR) == {0, 7}

    @pytest.mark.parametrize("family,seventh,use_six,expected", [
        (ChordFamily.MAJOR, SeventhKind.NONE, False, ""),
        (ChordFamily.MAJOR, SeventhKind.MINOR, False, "7"),
        (ChordFamily.MAJOR, SeventhKind.MAJOR, False, "Δ7"),
        (ChordFamily.MAJOR, SeventhKind.NONE, True, "6"),
        (ChordFamily.MINOR, SeventhKind.NONE, False, "m"),
        (ChordFamily.MINOR, SeventhKind.MINOR, False, "m7"),
        (ChordFamily.MINOR, SeventhKind.MAJOR, False, "mΔ7"),
        (ChordFamily.MINOR, SeventhKind.NONE, True, "m6"),
        (ChordFamily.DIM, SeventhKind.NONE, False, "°"),
        (ChordFamily.DIM, SeventhKind.DIMINISHED, False, "°7"),
        (ChordFamily.DIM, SeventhKind.MINOR, False, "ø7"),
        (ChordFamily.AUG, SeventhKind.NONE, False, "+"),
        (ChordFamily.AUG, SeventhKind.MINOR, False, "7♯5"),
        (ChordFamily.SUS4, SeventhKind.MINOR, False, "7sus"),
        (ChordFamily.SUS2, SeventhKind.MAJOR, False, "Δ7sus2"),
        (ChordFamily.POWER, SeventhKind.NONE, False, "5"),
    ])
    def test_base_symbol(self, family, seventh, use_six, expected):
        assert base_symbol(family, seventh, use_six) == expected


# ============================================================================
# Extensions and Symbols
# ============================================================================

class TestExtensionClassifier:
    """Tests for non-core interval classification."""

    def test_flat_nine_always_altered(self):
        token = classify_non_core_interval(1, context())
        assert token.kind is ExtensionKind.ALTERED
        assert token.token == "♭9"

    def test_ninth_placement(self):
        assert classify_non_core_interval(2, context(has_seventh=True, high9=True)).token == 9
        assert classify_non_core_interval(2, context(high9=True)).token == "add9"
        assert classify_non_core_interval(2, context(has_seventh=True)).token == "add2"
        assert classify_non_core_interval(2, context()).token == "add2"

    def test_minor_third_interval(self):
        assert classify_non_core_interval(3, context()).token == "♯9"
        minor = context(family=ChordFamily.MINOR, has_major_third=False)
        assert classify_non_core_interval(3, minor).token == "add3"
        sus = context(family=ChordFamily.SUS4, has_major_third=False)
        assert classify_non_core_interval(3, sus).token == "add♭3"

    def test_eleventh_placement(self):
        assert classify_non_core_interval(5, context(has_seventh=True, high11=True)).token == 11
        assert classify_non_core_interval(5, context(high11=True)).token == "add11"
        assert classify_non_core_interval(5, context(has_seventh=True)).token == "add4"

    def test_tritone(self):
        assert classify_non_core_interval(6, context()).token == "♯11"
        assert classify_non_core_interval(6, context(family=ChordFamily.DIM)).token == "add♭5"

    def test_minor_sixth(self):
        assert classify_non_core_interval(8, context()).token == "♭13"
        assert classify_non_core_interval(8, context(family=ChordFamily.AUG)).token == "add♭6"

    def test_thirteenth_placement(self):
        natural = classify_non_core_interval(9, context(has_seventh=True, high13=True))
        assert natural.kind is ExtensionKind.NATURAL
        assert natural.token == 13
        assert classify_non_core_interval(9, context(high13=True)).token == "add13"
        assert classify_non_core_interval(9, context(has_seventh=True)).token == "add6"

    def test_sevenths_outside_core(self):
        assert classify_non_core_interval(10, context(has_seventh=True)).token == "♭7"
        assert classify_non_core_interval(10, context()).token == "add♭7"
        assert classify_non_core_interval(11, context(has_seventh=True)).token == "Δ7"
        assert classify_non_core_interval(11, context()).token == "add7"

    def test_root_is_not_an_extension(self):
        assert classify_non_core_interval(0, context()) is None

    def test_sort_color_tokens(self):
        tokens = ["add9", "13", "♭9", "zzz", "♯11", "add9", "aaa"]
        assert sort_color_tokens(tokens) == ["♭9", "♯11", "13", "add9", "aaa", "zzz"]


class TestSymbolBuilder:
    """Tests for promotion and symbol assembly."""

    @pytest.mark.parametrize("symbol,highest,expected", [
        ("7", 13, "13"),
        ("m7", 9, "m9"),
        ("Δ7", 11, "Δ11"),
        ("mΔ7", 9, "mΔ9"),
        ("7sus", 13, "13sus"),
        ("7sus", 11, "11sus"),
        ("7sus", 9, "9sus"),
        ("7sus2", 13, "13sus2"),
        ("ø7", 11, "ø7"),
    ])
    def test_promote_extension_symbol(self, symbol, highest, expected):
        assert promote_extension_symbol(symbol, ChordFamily.MAJOR, highest) == expected

    def test_power_promotion(self):
        assert promote_extension_symbol("5", ChordFamily.POWER, 9) == "5(add9)"

    def test_promotion_needs_only_naturals(self):
        ext = ClassifiedExtensions(naturals=[9, 13], altered=["♯11"])
        built = build_chord_symbol("7", ext, ChordFamily.MAJOR, has_seventh=True)
        assert built.symbol == "7"
        assert built.color_tokens == ["9", "♯11", "13"]

    def test_promotion_uses_highest_natural(self):
        ext = ClassifiedExtensions(naturals=[9, 13])
        assert ext.highest_natural == 13
        assert ClassifiedExtensions().highest_natural is None
        built = build_chord_symbol("m7", ext, ChordFamily.MINOR, has_seventh=True)
        assert built.symbol == "m13"
        assert built.color_tokens == []

    def test_six_nine_collapse(self):
        ext = ClassifiedExtensions(adds=["add9", "add13"])
        assert build_chord_symbol("", ext, ChordFamily.MAJOR, has_seventh=False).symbol == "69"
        ext = ClassifiedExtensions(adds=["add9"])
        assert build_chord_symbol("m6", ext, ChordFamily.MINOR, has_seventh=False).symbol == "m69"

    def test_six_nine_blocked_by_eleventh(self):
        ext = ClassifiedExtensions(adds=["add9", "add13", "add11"])
        built = build_chord_symbol("", ext, ChordFamily.MAJOR, has_seventh=False)
        assert built.symbol == ""
        assert built.color_tokens == ["add9", "add11", "add13"]

    def test_lone_add_token_replaces_parentheses(self):
        built = build_chord_symbol("", ClassifiedExtensions(adds=["add9"]), ChordFamily.MAJOR, False)
        assert built.full_name(0, 0) == "Cadd9"
        assert built.full_name(0, 4) == "Cadd9/E"

    def test_parenthesised_tokens_and_slash(self):
        built = build_chord_symbol("7", ClassifiedExtensions(altered=["♯9", "♭9"]), ChordFamily.MAJOR, True)
        assert built.full_name(0, 4) == "C7(♭9,♯9)/E"


# ============================================================================
# Fallback, Scoring, Upper Structures
# ============================================================================

class TestShellFallback:
    """Tests for shell readings."""

    def test_fallback_family_priority(self):
        assert get_fallback_family({0, 4, 5}) is ShellFamily.MAJOR
        assert get_fallback_family({0, 3}) is ShellFamily.MINOR
        assert get_fallback_family({0, 2, 5}) is ShellFamily.SUS4
        assert get_fallback_family({0, 2}) is ShellFamily.SUS2
        assert get_fallback_family({0, 7}) is ShellFamily.POWER
        assert get_fallback_family({0, 1}) is ShellFamily.CLUSTER

    def test_shell_core(self):
        shell = build_shell_core(ShellFamily.MAJOR, {0, 4, 10})
        assert shell.core_intervals == {0, 4, 10}
        assert shell.symbol == "7"
        assert shell.inversion_family is ChordFamily.MAJOR

        shell = build_shell_core(ShellFamily.SUS4, {0, 5, 11})
        assert shell.symbol == "Δ7sus"

        shell = build_shell_core(ShellFamily.CLUSTER, {0, 1})
        assert shell.core_intervals == {0}
        assert shell.symbol == ""

    def test_sus_shell_promotes_ninth(self):
        """D E G C with E two octaves up reads as D9sus."""
        reading = read_root(2, [38, 60, 64, 67], [0, 2, 4, 7], 2)
        assert reading.family is None
        assert reading.shell is ShellFamily.SUS4
        assert reading.full_name == "D9sus"

    def test_cluster_candidate(self):
        best = primary([60, 61])
        assert best.full_name == "C(♭9)"
        assert best.source is CandidateSource.INTERVAL_FALLBACK
        assert best.score == 45


class TestScoring:
    """Tests for candidate scoring."""

    def test_tertian_strength(self):
        assert tertian_root_strength({0, 4, 7}, ChordFamily.MAJOR) == (34, True)
        assert tertian_root_strength({0, 4, 7, 10}, ChordFamily.MAJOR) == (52, True)
        assert tertian_root_strength({0, 3, 6, 9}, ChordFamily.DIM) == (52, True)
        assert tertian_root_strength({0, 5, 7}, ChordFamily.SUS4) == (10, True)
        assert tertian_root_strength({0, 4, 10}, ChordFamily.MAJOR) == (22, False)

    def test_root_position_triad_score(self):
        reading = read_root(0, [60, 64, 67], [0, 4, 7], 0)
        assert CandidateScorer().score(reading) == 137

    def test_first_inversion_score(self):
        reading = read_root(0, [64, 67, 72], [0, 4, 7], 4)
        assert CandidateScorer().score(reading) == 101

    def test_dominant_seventh_score(self):
        reading = read_root(0, [60, 64, 67, 70], [0, 4, 7, 10], 0)
        assert CandidateScorer().score(reading) == 159

    def test_fifthless_triad_penalty(self):
        reading = read_root(4, [64, 67, 72], [0, 4, 7], 4)
        assert reading.full_name == "Em(♭13)"
        assert CandidateScorer().score(reading) == 88

    def test_major_shell_with_seventh_score(self):
        reading = read_shell(0, [60, 64, 70], [0, 4, 10], 0)
        assert reading.shell is ShellFamily.MAJOR
        assert reading.full_name == "C7"
        assert CandidateScorer().score(reading) == 68

    def test_shell_bass_weights(self):
        reading = read_shell(0, [64, 70, 72], [0, 4, 10], 4)
        assert CandidateScorer().score(reading) == 56

        reading = read_root(0, [61, 72], [0, 1], 1)
        assert reading.full_name == "C(♭9)/D♭"
        assert CandidateScorer().score(reading) == 25

    def test_sus_shell_score(self):
        reading = read_root(2, [38, 60, 64, 67], [0, 2, 4, 7], 2)
        assert reading.full_name == "D9sus"
        assert CandidateScorer().score(reading) == 54

    def test_inverted_sixth_penalty(self):
        reading = read_root(0, [64, 67, 69, 72], [0, 4, 7, 9], 4)
        assert reading.full_name == "C6/E"
        assert CandidateScorer().score(reading) == 99

    def test_inverted_seventh_without_third_penalty(self):
        reading = read_root(0, [65, 67, 70, 72], [0, 5, 7, 10], 5)
        assert reading.full_name == "C7sus/F"
        assert CandidateScorer().score(reading) == 68

    def test_seven_sus_two_penalty(self):
        reading = read_root(0, [60, 62, 67, 70], [0, 2, 7, 10], 0)
        assert reading.full_name == "C7sus2"
        assert CandidateScorer().score(reading) == 108


class TestUpperStructures:
    """Tests for triad-over-bass slash candidates."""

    def test_detect_simple_upper_chord(self):
        assert detect_simple_upper_chord({0, 4, 7}) == ("", ChordFamily.MAJOR)
        assert detect_simple_upper_chord({0, 3, 6}) == ("°", ChordFamily.DIM)
        assert detect_simple_upper_chord({0, 2, 7}) == ("sus2", ChordFamily.SUS2)
        assert detect_simple_upper_chord({0, 1, 7}) is None

    def test_requires_three_upper_pitch_classes(self):
        assert build_upper_structure_candidates([0, 4, 7], 4) == []
        assert build_upper_structure_candidates([0, 2, 4, 7, 11], 2) == []

    def test_triad_over_step_bass(self):
        candidates = build_upper_structure_candidates([0, 2, 4, 7], 2)
        assert len(candidates) == 1
        upper = candidates[0]
        assert upper.full_name == "C/D"
        assert upper.score == 123
        assert upper.inversion_label == "slash bass (D)"
        assert upper.root_pitch_class == 0

    def test_upper_structure_wins_over_weak_bass(self):
        best = primary([38, 60, 64, 67])
        assert best.full_name == "C/D"
        assert best.source is CandidateSource.UPPER_STRUCTURE

    def test_strong_bass_suppresses_upper_structures(self):
        candidates = get_chord_candidates([60, 64, 67, 70])
        assert all(c.source is not CandidateSource.UPPER_STRUCTURE for c in candidates)

    def test_threshold_is_configurable(self):
        analyzer = ChordAnalyzer(AnalyzerConfig(strong_bass_threshold=1000))
        names = [c.full_name for c in analyzer.get_chord_candidates([60, 64, 67, 70])]
        assert "E°/C" in names
        assert names[0] == "C7"


# ============================================================================
# Ranking and Inversions
# ============================================================================

class TestRanking:
    """Tests for ranking and deduplication."""

    def test_sorted_descending(self):
        ranked = rank_candidates([candidate("A", 10), candidate("B", 30), candidate("C", 20)])
        assert [c.full_name for c in ranked] == ["B", "C", "A"]

    def test_ties_keep_original_order(self):
        ranked = rank_candidates([candidate("A", 10), candidate("B", 10), candidate("C", 10)])
        assert [c.full_name for c in ranked] == ["A", "B", "C"]

    def test_duplicates_keep_highest(self):
        ranked = rank_candidates([
            candidate("Cadd9", 100),
            candidate("Cadd9", 112, CandidateSource.ADD9_HEURISTIC),
        ])
        assert len(ranked) == 1
        assert ranked[0].score == 112
        assert ranked[0].source is CandidateSource.ADD9_HEURISTIC

    def test_names_unique(self):
        for notes in ([60, 64, 67], [38, 60, 64, 67], [48, 52, 55, 59, 62, 66, 69], [60, 61, 62, 63]):
            names = [c.full_name for c in get_chord_candidates(notes)]
            assert len(names) == len(set(names))

    def test_alternatives_limited(self):
        analysis = ChordAnalyzer().analyze([48, 52, 55, 59, 62, 66, 69])
        assert analysis.primary is analysis.candidates[0]
        assert len(analysis.alternatives) <= 6


class TestInversionLabels:
    """Tests for inversion naming."""

    def test_root_position(self):
        assert get_inversion_label(0, 0, {0, 4, 7}, ChordFamily.MAJOR) == "root position"

    def test_ordinal_inversions(self):
        core = {0, 4, 7, 10}
        assert get_inversion_label(0, 4, core, ChordFamily.MAJOR) == "1st inversion"
        assert get_inversion_label(0, 7, core, ChordFamily.MAJOR) == "2nd inversion"
        assert get_inversion_label(0, 10, core, ChordFamily.MAJOR) == "3rd inversion"

    def test_beyond_table(self):
        core = {0, 4, 6, 7, 8, 9, 10, 11}
        assert get_inversion_label(0, 8, core, ChordFamily.MAJOR) == "4th inversion"
        assert get_inversion_label(0, 9, core, ChordFamily.MAJOR) == "5th inversion"

    def test_non_chord_tone_bass(self):
        assert get_inversion_label(0, 2, {0, 4, 7}, ChordFamily.MAJOR) == "slash bass (D)"

    def test_sus_and_power(self):
        assert get_inversion_label(0, 5, {0, 5, 7}, ChordFamily.SUS4) == "1st inversion"
        assert get_inversion_label(0, 7, {0, 7}, ChordFamily.POWER) == "1st inversion"


# ============================================================================
# End-to-end naming
# ============================================================================

class TestChordNaming:
    """Tests for the full candidate pipeline."""

    def test_no_notes(self):
        assert get_chord_candidates([]) == []

    def test_single_note(self):
        candidates = get_chord_candidates([64])
        assert len(candidates) == 1
        assert candidates[0].full_name == "E"
        assert candidates[0].inversion_label == "single note"
        assert candidates[0].score == 1
        assert candidates[0].source is CandidateSource.SINGLE_NOTE

    def test_octaves_are_a_single_note(self):
        candidates = get_chord_candidates([48, 60, 72])
        assert len(candidates) == 1
        assert candidates[0].full_name == "C"

    def test_c_major(self):
        best = primary([60, 64, 67])
        assert best.full_name == "C"
        assert best.inversion_label == "root position"
        assert best.root_pitch_class == 0

    def test_order_independent(self):
        assert get_chord_candidates([64, 67, 60]) == get_chord_candidates([60, 64, 67])

    def test_idempotent(self):
        notes = [48, 55, 64, 70, 74]
        assert get_chord_candidates(notes) == get_chord_candidates(notes)

    def test_first_inversion(self):
        best = primary([64, 67, 72])
        assert best.full_name == "C/E"
        assert best.inversion_label == "1st inversion"

    @pytest.mark.parametrize("notes,expected", [
        ([60, 64, 67, 70], "C7"),
        ([60, 63, 66, 69], "C°7"),
        ([60, 63, 67, 70], "Cm7"),
        ([60, 64, 67, 71], "CΔ7"),
        ([60, 64, 67, 69], "C6"),
        ([60, 64, 68], "C+"),
        ([60, 63, 66], "C°"),
        ([60, 65, 67], "Csus"),
        ([60, 62, 67], "Csus2"),
        ([48, 55], "C5"),
        ([60, 64, 67, 74], "Cadd9"),
        ([60, 62, 64, 67], "Cadd2"),
        ([60, 64, 67, 70, 74], "C9"),
        ([60, 62, 64, 67, 70], "C7(add2)"),
        ([48, 52, 58, 69], "C13"),
        ([60, 64, 67, 69, 74], "C69"),
        ([60, 64, 67, 70, 75], "C7(♯9)"),
        ([60, 64, 67, 70, 73], "C7(♭9)"),
        ([68, 71, 75], "A♭m"),
    ])
    def test_common_voicings(self, notes, expected):
        assert primary_name(notes) == expected

    def test_sus2_with_high_ninth_prefers_add9(self):
        candidates = get_chord_candidates([48, 55, 62])
        assert candidates[0].full_name == "Cadd9"
        assert candidates[0].source is CandidateSource.ADD9_HEURISTIC
        assert candidates[0].score == 112
        assert candidates[1].full_name == "Csus2"

    def test_sus4_with_high_eleventh_prefers_add11(self):
        candidates = get_chord_candidates([48, 55, 65])
        assert candidates[0].full_name == "Cadd11"
        assert candidates[0].source is CandidateSource.ADD11_HEURISTIC
        assert candidates[1].full_name == "Csus"

    def test_sus_heuristics_can_be_disabled(self):
        analyzer = ChordAnalyzer(AnalyzerConfig(enable_sus_heuristics=False))
        assert analyzer.get_chord_candidates([48, 55, 62])[0].full_name == "Csus2"

    def test_root_labels_use_flats(self):
        assert primary_name([61, 65, 68]) == "D♭"


class TestAnalyzerConfig:
    """Tests for analyzer configuration."""

    def test_defaults(self):
        config = AnalyzerConfig()
        assert config.strong_bass_threshold == 92
        assert config.max_alternatives == 6

    def test_negative_alternatives_rejected(self):
        with pytest.raises(ValueError):
            AnalyzerConfig(max_alternatives=-1)

    def test_alternatives_respect_config(self):
        analyzer = ChordAnalyzer(AnalyzerConfig(max_alternatives=1))
        analysis = analyzer.analyze([60, 64, 67, 70])
        assert len(analysis.alternatives) <= 1
