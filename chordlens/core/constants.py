"""Global constants for Chordlens."""

# Pitch-class display labels (flats for black keys)
NOTE_LABELS = ["C", "D♭", "D", "E♭", "E", "F", "F♯", "G", "A♭", "A", "B♭", "B"]

# Natural letters and their pitch classes
LETTERS = ["C", "D", "E", "F", "G", "A", "B"]
LETTER_PITCH_CLASSES = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

INVERSION_NAMES = ["1st inversion", "2nd inversion", "3rd inversion", "4th inversion"]

# Display priority for colour tokens: low altered tensions, naturals, adds
COLOR_ORDER = [
    "♭9",
    "9",
    "♯9",
    "11",
    "♯11",
    "♭13",
    "13",
    "♭7",
    "Δ7",
    "add9",
    "add11",
    "add13",
    "add2",
    "add4",
    "add♭3",
    "add3",
    "add♭5",
    "add5",
    "add♭6",
    "add6",
    "add♭7",
    "add7",
]

# MIDI ranges
MIDI_MIN = 0
MIDI_MAX = 127

# Computer keyboard: chromatic run starting at C4
COMPUTER_KEY_SEQUENCE = ["a", "w", "s", "e", "d", "f", "t", "g", "y", "h", "u", "j", "k", "o", "l", "p"]
COMPUTER_KEY_BASE_NOTE = 60
