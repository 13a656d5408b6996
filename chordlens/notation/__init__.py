"""Notation layer - enharmonic spelling for staff rendering."""

from .spelling import (
    SpellingContext,
    SpelledNote,
    build_spelling_context,
    degree_for_interval,
    spell_note,
)

__all__ = [
    "SpellingContext",
    "SpelledNote",
    "build_spelling_context",
    "degree_for_interval",
    "spell_note",
]
