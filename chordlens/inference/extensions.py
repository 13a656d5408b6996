"""Extension classification - name every tone outside the chord's core.

Each non-core interval becomes a colour token of one of three kinds:
- natural: 9, 11 or 13 stacked above a seventh chord
- altered: ♭9, ♯9, ♯11, ♭13, ♭7, Δ7
- add: added colour without a stacked-third reading (add2, add9, add6, ...)

A 9th, 11th or 13th only counts as "high" when it sounds an octave or
more above the root reference note.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Set, Union

from ..core import COLOR_ORDER, has_upper_extension
from .families import ChordFamily


class ExtensionKind(Enum):
    """Kinds of colour tokens."""
    NATURAL = "natural"
    ALTERED = "altered"
    ADD = "add"


@dataclass(frozen=True)
class ExtensionToken:
    """A single classified colour tone."""
    kind: ExtensionKind
    token: Union[int, str]  # degree for naturals, symbol otherwise


@dataclass
class ExtensionContext:
    """Facts about a root reading that the classification rules consult."""
    family: Optional[ChordFamily]
    has_seventh: bool
    has_major_third: bool
    high9: bool = False
    high11: bool = False
    high13: bool = False

    @classmethod
    def for_root(
        cls,
        root_pitch_class: int,
        active_notes: List[int],
        family: Optional[ChordFamily],
        has_seventh: bool,
        has_major_third: bool,
    ) -> "ExtensionContext":
        """Build a context, measuring 9/11/13 placement against the held notes."""
        return cls(
            family=family,
            has_seventh=has_seventh,
            has_major_third=has_major_third,
            high9=has_upper_extension(root_pitch_class, 2, active_notes),
            high11=has_upper_extension(root_pitch_class, 5, active_notes),
            high13=has_upper_extension(root_pitch_class, 9, active_notes),
        )


def _natural(degree: int) -> ExtensionToken:
    return ExtensionToken(ExtensionKind.NATURAL, degree)


def _altered(symbol: str) -> ExtensionToken:
    return ExtensionToken(ExtensionKind.ALTERED, symbol)


def _add(symbol: str) -> ExtensionToken:
    return ExtensionToken(ExtensionKind.ADD, symbol)


def classify_non_core_interval(interval: int, context: ExtensionContext) -> Optional[ExtensionToken]:
    """
    Classify one interval that is not part of the chord's core.

    Args:
        interval: Interval above the root (1-11)
        context: Family, seventh and register facts for the reading

    Returns:
        ExtensionToken, or None for the root itself
    """
    family = context.family

    if interval == 1:
        return _altered("♭9")

    if interval == 2:
        if context.high9:
            return _natural(9) if context.has_seventh else _add("add9")
        return _add("add2")

    if interval == 3:
        if context.has_major_third:
            return _altered("♯9")
        if family in (ChordFamily.MINOR, ChordFamily.DIM):
            return _add("add3")
        return _add("add♭3")

    if interval == 4:
        return _add("add3")

    if interval == 5:
        if context.high11:
            return _natural(11) if context.has_seventh else _add("add11")
        return _add("add4")

    if interval == 6:
        if family is ChordFamily.DIM:
            return _add("add♭5")
        return _altered("♯11")

    if interval == 7:
        return _add("add5")

    if interval == 8:
        if family is ChordFamily.AUG:
            return _add("add♭6")
        return _altered("♭13")

    if interval == 9:
        if context.high13:
            return _natural(13) if context.has_seventh else _add("add13")
        return _add("add6")

    if interval == 10:
        return _altered("♭7") if context.has_seventh else _add("add♭7")

    if interval == 11:
        return _altered("Δ7") if context.has_seventh else _add("add7")

    return None


@dataclass
class ClassifiedExtensions:
    """Colour tokens collected for one reading, deduplicated per kind."""
    naturals: List[int] = field(default_factory=list)
    altered: List[str] = field(default_factory=list)
    adds: List[str] = field(default_factory=list)

    def add(self, token: ExtensionToken) -> None:
        if token.kind is ExtensionKind.NATURAL:
            if token.token not in self.naturals:
                self.naturals.append(token.token)
                self.naturals.sort()
        elif token.kind is ExtensionKind.ALTERED:
            if token.token not in self.altered:
                self.altered.append(token.token)
        elif token.token not in self.adds:
            self.adds.append(token.token)

    @property
    def highest_natural(self) -> Optional[int]:
        return max(self.naturals) if self.naturals else None


def collect_extensions(
    intervals: Iterable[int],
    core_intervals: Set[int],
    context: ExtensionContext,
) -> ClassifiedExtensions:
    """Classify every interval not absorbed by the core."""
    collected = ClassifiedExtensions()
    for interval in intervals:
        if interval in core_intervals:
            continue
        token = classify_non_core_interval(interval, context)
        if token is not None:
            collected.add(token)
    return collected


def sort_color_tokens(tokens: Iterable[str]) -> List[str]:
    """Deduplicate and order tokens by display priority, alphabetical on ties."""
    order = {token: index for index, token in enumerate(COLOR_ORDER)}
    return sorted(set(tokens), key=lambda token: (order.get(token, 999), token))
