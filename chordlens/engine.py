"""Chord engine - owns the held notes and keeps the latest analysis.

Note events from any source are applied to the active-note multiset and
the chord analysis is recomputed in full. The spelling context of the
latest analysis is cached for rendering.
"""

import logging
from typing import List, Optional, Sequence

from .core import ActiveNotes
from .inference import AnalyzerConfig, ChordAnalysis, ChordAnalyzer
from .input import ComputerKeyboard, NoteEventKind, decode_midi_message
from .notation import SpellingContext, SpelledNote, build_spelling_context, spell_note

logger = logging.getLogger(__name__)


class ChordEngine:
    """Real-time chord recognition over held notes.

    Usage:
        engine = ChordEngine()
        engine.note_on(60)
        engine.note_on(64)
        analysis = engine.note_on(67)
        analysis.primary.full_name  # 'C'
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        keyboard: Optional[ComputerKeyboard] = None,
    ):
        self.analyzer = ChordAnalyzer(config=config)
        self.keyboard = keyboard or ComputerKeyboard()
        self.active_notes = ActiveNotes()
        self.analysis = ChordAnalysis(max_alternatives=self.analyzer.config.max_alternatives)
        self.spelling_context: Optional[SpellingContext] = None

    def note_on(self, note: int) -> ChordAnalysis:
        self.active_notes.increment(note)
        return self.update()

    def note_off(self, note: int) -> ChordAnalysis:
        self.active_notes.decrement(note)
        return self.update()

    def handle_midi_message(self, data: Sequence[int]) -> Optional[ChordAnalysis]:
        """
        Apply a raw MIDI message.

        Returns:
            The new analysis, or None if the message was ignored
        """
        event = decode_midi_message(data)
        if event is None:
            return None
        if event.kind is NoteEventKind.ON:
            return self.note_on(event.note)
        return self.note_off(event.note)

    def key_down(self, key: str) -> Optional[ChordAnalysis]:
        note = self.keyboard.press(key)
        if note is None:
            return None
        return self.note_on(note)

    def key_up(self, key: str) -> Optional[ChordAnalysis]:
        note = self.keyboard.release(key)
        if note is None:
            return None
        return self.note_off(note)

    def release_computer_keys(self) -> ChordAnalysis:
        """Release every held computer key, leaving other sources untouched."""
        for note in self.keyboard.release_all():
            self.active_notes.decrement(note)
        return self.update()

    def reset(self) -> ChordAnalysis:
        self.keyboard.release_all()
        self.active_notes.clear()
        return self.update()

    def update(self) -> ChordAnalysis:
        """Recompute the analysis and spelling context from the held notes."""
        notes = self.active_notes.sorted_notes
        self.analysis = self.analyzer.analyze(notes)
        self.spelling_context = build_spelling_context(notes, self.analysis.primary)

        if self.analysis.primary:
            logger.debug("Held %s -> %s", notes, self.analysis.primary.full_name)
        return self.analysis

    def spelled_notes(self) -> List[SpelledNote]:
        """Held notes spelled with the cached context, lowest first."""
        return [spell_note(note, self.spelling_context) for note in self.active_notes.sorted_notes]
