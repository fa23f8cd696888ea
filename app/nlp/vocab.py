# app/nlp/vocab.py
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

# Function words that carry no signal for matching.
STOPWORDS: FrozenSet[str] = frozenset({
    "the", "a", "an", "and", "or", "of", "to", "in", "for", "on", "with", "at",
    "by", "from", "as", "is", "are", "was", "were", "this", "that", "it",
    "be", "will", "can", "your", "you", "we", "our", "they", "their", "but",
    "about",
})


@dataclass(frozen=True)
class SectionSignal:
    terms: Tuple[str, ...]
    flag: str


@dataclass(frozen=True)
class LengthBucket:
    """Inclusive word-count range; ``high=None`` means unbounded."""
    low: int
    high: Optional[int]
    score: int
    note: Optional[str]

    def contains(self, wc: int) -> bool:
        if wc < self.low:
            return False
        return self.high is None or wc <= self.high


SECTION_SIGNALS: Tuple[SectionSignal, ...] = (
    SectionSignal(("experience", "work history"), "Missing Work Experience section."),
    SectionSignal(("education",), "Missing Education section."),
    SectionSignal(("skills",), "Missing Skills section."),
    SectionSignal(("summary", "objective"), "Missing Summary/Profile section."),
    SectionSignal(("email", "phone", "contact"), "Missing contact info."),
)

# Evaluated in order; first match wins.
LENGTH_BUCKETS: Tuple[LengthBucket, ...] = (
    LengthBucket(300, 900, 15, None),
    LengthBucket(200, 299, 9, "Resume is short."),
    LengthBucket(901, 1300, 9, "Resume is long."),
    LengthBucket(0, 199, 5, "Resume is very short."),
    LengthBucket(1301, None, 5, "Resume is very long."),
)


@dataclass(frozen=True)
class ScoringConfig:
    stopwords: FrozenSet[str] = STOPWORDS
    min_keyword_len: int = 4
    sections: Tuple[SectionSignal, ...] = SECTION_SIGNALS
    points_per_section: int = 4
    length_buckets: Tuple[LengthBucket, ...] = LENGTH_BUCKETS
    # bucket maxima
    coverage_max: float = 55.0
    similarity_max: float = 10.0
    total_max: float = 100.0
    # suggestion thresholds
    low_coverage: float = 40.0
    low_similarity: float = 5.0
    max_listed_missing: int = 10


DEFAULT_SCORING_CONFIG = ScoringConfig()
