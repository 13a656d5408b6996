"""Shell fallback - loose readings for voicings no family explains.

When the family classifier finds nothing for a root, the notes are read
as a minimal shell: root plus the most telling interval (third, fourth,
second or fifth) and an optional seventh.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Set

from .families import ChordFamily


class ShellFamily(Enum):
    """Shell readings, in fallback priority order."""
    MAJOR = "major-shell"
    MINOR = "minor-shell"
    SUS4 = "sus4-shell"
    SUS2 = "sus2-shell"
    POWER = "power-shell"
    CLUSTER = "cluster"


@dataclass
class ShellCore:
    """Core tones and symbol for a shell reading."""
    core_intervals: Set[int]
    symbol: str
    inversion_family: ChordFamily


# shell -> (shell interval, family used for inversions, symbols for none / b7 / M7)
SHELL_SPECS = {
    ShellFamily.MAJOR: (4, ChordFamily.MAJOR, ("", "7", "Δ7")),
    ShellFamily.MINOR: (3, ChordFamily.MINOR, ("m", "m7", "mΔ7")),
    ShellFamily.SUS4: (5, ChordFamily.SUS4, ("sus", "7sus", "Δ7sus")),
    ShellFamily.SUS2: (2, ChordFamily.SUS2, ("sus2", "7sus2", "Δ7sus2")),
}


def get_fallback_family(intervals: Iterable[int]) -> ShellFamily:
    """Pick the shell that best describes an unclassified interval set."""
    intervals = set(intervals)
    if 4 in intervals:
        return ShellFamily.MAJOR
    if 3 in intervals:
        return ShellFamily.MINOR
    if 5 in intervals:
        return ShellFamily.SUS4
    if 2 in intervals:
        return ShellFamily.SUS2
    if 7 in intervals:
        return ShellFamily.POWER
    return ShellFamily.CLUSTER


def build_shell_core(shell: ShellFamily, intervals: Iterable[int]) -> ShellCore:
    """Build the minimal core (root, shell tone, optional seventh) for a shell."""
    intervals = set(intervals)

    if shell is ShellFamily.POWER:
        return ShellCore({0, 7}, "5", ChordFamily.POWER)
    if shell is ShellFamily.CLUSTER:
        return ShellCore({0}, "", ChordFamily.POWER)

    shell_interval, family, (plain, minor_seventh, major_seventh) = SHELL_SPECS[shell]
    core = {0, shell_interval}

    if 10 in intervals:
        core.add(10)
        return ShellCore(core, minor_seventh, family)
    if 11 in intervals:
        core.add(11)
        return ShellCore(core, major_seventh, family)
    return ShellCore(core, plain, family)
