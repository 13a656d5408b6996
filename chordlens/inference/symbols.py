"""Chord symbol assembly.

Builds the full chord name from a base family symbol and the collected
colour tokens:
- 69 / m69 collapse for sixth chords with an added ninth
- Promotion of a seventh symbol to its highest natural extension (C7 -> C13)
- Parenthesised colour list, or a bare add-token on a plain triad (Cadd9)
- Slash bass suffix
"""

from dataclasses import dataclass
from typing import List, Optional

from ..core import label_pitch_class
from .extensions import ClassifiedExtensions, sort_color_tokens
from .families import ChordFamily


@dataclass
class ChordSymbol:
    """A base symbol together with the colour tokens shown after it."""
    symbol: str
    color_tokens: List[str]

    def full_name(self, root_pitch_class: int, bass_pitch_class: int) -> str:
        """Render as e.g. 'C7(♭9)/E'."""
        root_name = label_pitch_class(root_pitch_class)
        name = f"{root_name}{self.symbol}"

        if self.color_tokens:
            if (
                not self.symbol
                and len(self.color_tokens) == 1
                and self.color_tokens[0].startswith("add")
            ):
                name = f"{root_name}{self.color_tokens[0]}"
            else:
                name += f"({','.join(self.color_tokens)})"

        return name + slash_suffix(root_pitch_class, bass_pitch_class)


def slash_suffix(root_pitch_class: int, bass_pitch_class: int) -> str:
    if bass_pitch_class == root_pitch_class:
        return ""
    return f"/{label_pitch_class(bass_pitch_class)}"


def promote_extension_symbol(symbol: str, family: Optional[ChordFamily], highest_natural: int) -> str:
    """Replace the 7 of a seventh symbol with the highest natural extension."""
    if symbol == "7":
        return str(highest_natural)
    if symbol == "m7":
        return f"m{highest_natural}"
    if symbol == "Δ7":
        return f"Δ{highest_natural}"
    if symbol == "mΔ7":
        return f"mΔ{highest_natural}"
    if symbol == "7sus":
        # Fixed names regardless of which tension triggered the promotion
        if highest_natural == 13:
            return "13sus"
        if highest_natural == 11:
            return "11sus"
        return "9sus"
    if symbol == "7sus2":
        return f"{highest_natural}sus2"
    if family is ChordFamily.POWER and highest_natural == 9:
        return "5(add9)"
    return symbol


def _collapse_six_nine(symbol: str, adds: List[str]) -> Optional[str]:
    """Return the 69 / m69 symbol when the colour tones allow it."""
    if "add11" in adds or "add4" in adds or "add9" not in adds:
        return None
    if symbol in ("", "m") and "add13" in adds:
        return f"{symbol}69"
    if symbol in ("6", "m6"):
        return symbol.replace("6", "69")
    return None


def build_chord_symbol(
    base: str,
    extensions: ClassifiedExtensions,
    family: Optional[ChordFamily],
    has_seventh: bool,
    allow_six_nine: bool = True,
) -> ChordSymbol:
    """
    Combine a base symbol with classified extensions.

    Args:
        base: Base family symbol (e.g. '', 'm7', '7sus')
        extensions: Colour tokens collected for the reading
        family: Family used for power-chord promotion
        has_seventh: Whether a seventh is part of the core
        allow_six_nine: Whether the 69 collapse may apply

    Returns:
        ChordSymbol with the final symbol and ordered colour tokens
    """
    symbol = base
    naturals = list(extensions.naturals)
    altered = list(extensions.altered)
    adds = list(extensions.adds)

    if allow_six_nine and not has_seventh and not altered:
        collapsed = _collapse_six_nine(symbol, adds)
        if collapsed is not None:
            symbol = collapsed
            adds = [token for token in adds if token not in ("add9", "add13")]

    if has_seventh and not altered and not adds and naturals:
        symbol = promote_extension_symbol(symbol, family, extensions.highest_natural)
        naturals = []

    tokens = sort_color_tokens([str(n) for n in naturals] + altered + adds)
    return ChordSymbol(symbol=symbol, color_tokens=tokens)
