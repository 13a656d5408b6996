"""Inference layer - Chord recognition from held notes.

This layer turns a set of held notes into ranked chord names:
- Family classification (major, minor, dim, aug, sus4, sus2, power)
- Seventh / added-sixth detection
- Extension classification (natural, altered, add tones)
- Chord symbol assembly
- Candidate scoring and shell fallback
- Upper-structure slash chords
- Ranking, deduplication and inversion labels

Pipeline: Notes → Pitch classes → Root readings → Scored candidates → Ranked list
"""

from .families import (
    ChordFamily,
    SeventhKind,
    choose_family,
    detect_seventh,
    uses_added_sixth,
    get_core_intervals,
    base_symbol,
    get_inversion_label,
)
from .extensions import (
    ExtensionKind,
    ExtensionToken,
    ExtensionContext,
    classify_non_core_interval,
    sort_color_tokens,
)
from .symbols import ChordSymbol, build_chord_symbol, promote_extension_symbol
from .fallback import ShellFamily, get_fallback_family, build_shell_core
from .candidates import CandidateSource, ChordCandidate, RootReading, read_root
from .scoring import CandidateScorer, tertian_root_strength
from .upper import build_upper_structure_candidates, detect_simple_upper_chord
from .analyzer import (
    AnalyzerConfig,
    ChordAnalysis,
    ChordAnalyzer,
    get_chord_candidates,
    rank_candidates,
)

__all__ = [
    # Families
    "ChordFamily",
    "SeventhKind",
    "choose_family",
    "detect_seventh",
    "uses_added_sixth",
    "get_core_intervals",
    "base_symbol",
    "get_inversion_label",
    # Extensions
    "ExtensionKind",
    "ExtensionToken",
    "ExtensionContext",
    "classify_non_core_interval",
    "sort_color_tokens",
    # Symbols
    "ChordSymbol",
    "build_chord_symbol",
    "promote_extension_symbol",
    # Fallback
    "ShellFamily",
    "get_fallback_family",
    "build_shell_core",
    # Candidates
    "CandidateSource",
    "ChordCandidate",
    "RootReading",
    "read_root",
    "CandidateScorer",
    "tertian_root_strength",
    "build_upper_structure_candidates",
    "detect_simple_upper_chord",
    # Analysis
    "AnalyzerConfig",
    "ChordAnalysis",
    "ChordAnalyzer",
    "get_chord_candidates",
    "rank_candidates",
]
