"""Chordlens - Real-time chord recognition for held notes.

Architecture Layers:
    1. core/       - Pitch arithmetic, constants, active-note multiset
    2. inference/  - Chord families, extensions, symbols, scoring, ranking
    3. notation/   - Enharmonic spelling for staff rendering
    4. input/      - Note sources (MIDI messages, computer keyboard)
    5. engine      - Engine object owning the held notes
"""

__version__ = "0.1.0"

# Core types
from .core import ActiveNotes, midi_note_to_name, parse_note_name

# Inference layer
from .inference import (
    AnalyzerConfig,
    ChordAnalysis,
    ChordAnalyzer,
    ChordCandidate,
    ChordFamily,
    CandidateSource,
    get_chord_candidates,
)

# Notation layer
from .notation import SpellingContext, SpelledNote, build_spelling_context, spell_note

# Input layer
from .input import ComputerKeyboard, decode_midi_message

from .engine import ChordEngine

__all__ = [
    # Core
    "ActiveNotes",
    "midi_note_to_name",
    "parse_note_name",
    # Inference
    "AnalyzerConfig",
    "ChordAnalysis",
    "ChordAnalyzer",
    "ChordCandidate",
    "ChordFamily",
    "CandidateSource",
    "get_chord_candidates",
    # Notation
    "SpellingContext",
    "SpelledNote",
    "build_spelling_context",
    "spell_note",
    # Input
    "ComputerKeyboard",
    "decode_midi_message",
    # Engine
    "ChordEngine",
]
