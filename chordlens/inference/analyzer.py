"""Chord analysis - rank every reading of the held notes.

Pipeline:
    held notes -> pitch classes -> root readings for every held pitch class
    -> scored candidates (+ sus companions) -> upper-structure slash chords
    when the bass reading is weak -> stable sort by score -> dedup by name
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..core import get_pitch_classes, label_pitch_class, normalize_pitch_class
from .candidates import CandidateSource, ChordCandidate, RootReading, read_root
from .families import ChordFamily
from .scoring import CandidateScorer
from .upper import build_upper_structure_candidates

logger = logging.getLogger(__name__)


@dataclass
class AnalyzerConfig:
    """Configuration for chord analysis.

    Attributes:
        strong_bass_threshold: Score a bass-rooted candidate must reach to
            suppress upper-structure slash readings (default: 92)
        max_alternatives: Alternatives exposed after the primary (default: 6)
        enable_upper_structures: Propose triad-over-bass readings (default: True)
        enable_sus_heuristics: Add add9/add11 companions to sus readings (default: True)
    """

    strong_bass_threshold: int = 92
    max_alternatives: int = 6
    enable_upper_structures: bool = True
    enable_sus_heuristics: bool = True

    def __post_init__(self):
        if self.max_alternatives < 0:
            raise ValueError(f"max_alternatives must be >= 0, got {self.max_alternatives}")


@dataclass
class ChordAnalysis:
    """Container for the result of one analysis pass."""

    notes: List[int] = field(default_factory=list)  # held notes, ascending
    candidates: List[ChordCandidate] = field(default_factory=list)
    max_alternatives: int = 6

    @property
    def primary(self) -> Optional[ChordCandidate]:
        return self.candidates[0] if self.candidates else None

    @property
    def alternatives(self) -> List[ChordCandidate]:
        return self.candidates[1:1 + self.max_alternatives]


class ChordAnalyzer:
    """Infer chord names from the set of held notes.

    Features:
    - Every held pitch class is tried as a root
    - Family readings with sevenths, sixths and colour tones
    - Shell fallback for voicings no family explains
    - Upper-structure slash chords over a weak bass
    - Stable ranking with duplicate names removed
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        scorer: Optional[CandidateScorer] = None,
    ):
        """
        Initialize ChordAnalyzer.

        Args:
            config: Optional AnalyzerConfig
            scorer: Optional CandidateScorer (default weights when omitted)
        """
        self.config = config or AnalyzerConfig()
        self.scorer = scorer or CandidateScorer()

    def analyze(self, notes: Iterable[int]) -> ChordAnalysis:
        """
        Analyze the held notes.

        Args:
            notes: Held note numbers, in any order

        Returns:
            ChordAnalysis with ranked, deduplicated candidates
        """
        active_notes = sorted(set(notes))
        return ChordAnalysis(
            notes=active_notes,
            candidates=self.get_chord_candidates(active_notes),
            max_alternatives=self.config.max_alternatives,
        )

    def get_chord_candidates(self, notes: Iterable[int]) -> List[ChordCandidate]:
        """Ranked candidates, highest score first, unique by name."""
        active_notes = sorted(set(notes))
        pitch_classes = get_pitch_classes(active_notes)
        if not pitch_classes:
            return []

        if len(pitch_classes) == 1:
            pitch_class = pitch_classes[0]
            return [ChordCandidate(
                full_name=label_pitch_class(pitch_class),
                inversion_label="single note",
                score=CandidateScorer.SINGLE_NOTE_SCORE,
                source=CandidateSource.SINGLE_NOTE,
                root_pitch_class=pitch_class,
            )]

        bass_pitch_class = normalize_pitch_class(active_notes[0])
        root_candidates = []
        for root_pitch_class in pitch_classes:
            root_candidates.extend(
                self._root_candidates(root_pitch_class, active_notes, pitch_classes, bass_pitch_class)
            )

        candidates = list(root_candidates)
        if self.config.enable_upper_structures and not self._has_strong_bass_root(
            root_candidates, bass_pitch_class
        ):
            upper = build_upper_structure_candidates(pitch_classes, bass_pitch_class)
            logger.debug("Bass reading weak; %d upper-structure candidates", len(upper))
            candidates.extend(upper)

        ranked = rank_candidates(candidates)
        if ranked:
            logger.debug("Primary %s (score %d) of %d candidates", ranked[0].full_name, ranked[0].score, len(ranked))
        return ranked

    def _root_candidates(
        self,
        root_pitch_class: int,
        active_notes: List[int],
        pitch_classes: List[int],
        bass_pitch_class: int,
    ) -> List[ChordCandidate]:
        reading = read_root(root_pitch_class, active_notes, pitch_classes, bass_pitch_class)
        if reading is None:
            return []

        score = self.scorer.score(reading)
        if reading.family is None:
            return [self._candidate(reading, score, CandidateSource.INTERVAL_FALLBACK)]

        candidates = [self._candidate(reading, score, CandidateSource.ROOT_ANALYSIS)]
        if self.config.enable_sus_heuristics:
            candidates.extend(self._sus_companions(reading, score))
        return candidates

    def _sus_companions(self, reading: RootReading, score: int) -> List[ChordCandidate]:
        """Offer add9/add11 names for sus voicings with a high 9th or 11th and no seventh."""
        if reading.has_seventh:
            return []

        if reading.family is ChordFamily.SUS2 and reading.context.high9:
            return [self._candidate(
                reading,
                score + CandidateScorer.ADD9_HEURISTIC_BONUS,
                CandidateSource.ADD9_HEURISTIC,
                full_name=f"{reading.root_name}add9{reading.slash}",
            )]

        if reading.family is ChordFamily.SUS4 and reading.context.high11:
            return [self._candidate(
                reading,
                score + CandidateScorer.ADD11_HEURISTIC_BONUS,
                CandidateSource.ADD11_HEURISTIC,
                full_name=f"{reading.root_name}add11{reading.slash}",
            )]

        return []

    @staticmethod
    def _candidate(
        reading: RootReading,
        score: int,
        source: CandidateSource,
        full_name: Optional[str] = None,
    ) -> ChordCandidate:
        return ChordCandidate(
            full_name=full_name or reading.full_name,
            inversion_label=reading.inversion_label,
            score=score,
            source=source,
            root_pitch_class=reading.root_pitch_class,
            family=reading.family or reading.inversion_family,
        )

    def _has_strong_bass_root(self, candidates: List[ChordCandidate], bass_pitch_class: int) -> bool:
        return any(
            c.root_pitch_class == bass_pitch_class and c.score >= self.config.strong_bass_threshold
            for c in candidates
        )


def rank_candidates(candidates: List[ChordCandidate]) -> List[ChordCandidate]:
    """Stable sort by descending score, keeping the first candidate of each name."""
    ranked = []
    seen = set()
    for candidate in sorted(candidates, key=lambda c: -c.score):
        if candidate.full_name in seen:
            continue
        seen.add(candidate.full_name)
        ranked.append(candidate)
    return ranked


def get_chord_candidates(notes: Iterable[int]) -> List[ChordCandidate]:
    """Ranked candidates for the held notes using the default configuration."""
    return ChordAnalyzer().get_chord_candidates(notes)
