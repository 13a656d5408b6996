"""Input layer - note sources feeding the engine."""

from .midi import NoteEvent, NoteEventKind, decode_midi_message
from .keyboard import ComputerKeyboard

__all__ = [
    "NoteEvent",
    "NoteEventKind",
    "decode_midi_message",
    "ComputerKeyboard",
]
