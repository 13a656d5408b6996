"""MIDI message decoding - raw note-on/note-off bytes to note events."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

NOTE_OFF = 0x80
NOTE_ON = 0x90


class NoteEventKind(Enum):
    ON = "on"
    OFF = "off"


@dataclass(frozen=True)
class NoteEvent:
    """A decoded note-on or note-off."""
    kind: NoteEventKind
    note: int
    velocity: int = 0
    channel: int = 0


def decode_midi_message(data: Sequence[int]) -> Optional[NoteEvent]:
    """
    Decode a raw MIDI message.

    Note-on with velocity 0 is treated as note-off. Messages other than
    note-on / note-off decode to None.

    Args:
        data: Status byte, note number, velocity

    Returns:
        NoteEvent, or None for ignored messages

    Raises:
        ValueError: If fewer than three bytes are given
    """
    if len(data) < 3:
        raise ValueError(f"MIDI note message needs 3 bytes, got {len(data)}")

    status, note, velocity = data[0], data[1], data[2]
    message_type = status & 0xF0
    channel = status & 0x0F

    if message_type == NOTE_ON and velocity > 0:
        return NoteEvent(NoteEventKind.ON, note, velocity, channel)
    if message_type == NOTE_OFF or message_type == NOTE_ON:
        return NoteEvent(NoteEventKind.OFF, note, velocity, channel)
    return None
