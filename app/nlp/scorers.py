# app/nlp/scorers.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from app.nlp.similarity import keyword_jaccard
from app.nlp.vocab import DEFAULT_SCORING_CONFIG, ScoringConfig


@dataclass(frozen=True)
class CoverageResult:
    score: float
    matched: List[str]
    missing: List[str]


@dataclass(frozen=True)
class StructureResult:
    score: float
    flags: List[str]


@dataclass(frozen=True)
class LengthResult:
    score: float
    note: Optional[str]
    word_count: int


@dataclass(frozen=True)
class SimilarityResult:
    score: float
    ratio: float


def round1(value: float) -> float:
    """Round half up to one decimal (round() would round 0.25 -> 0.2)."""
    return math.floor(value * 10 + 0.5) / 10


def score_coverage(
    keywords: Sequence[str],
    resume_tokens: Set[str],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> CoverageResult:
    matched: List[str] = []
    missing: List[str] = []
    for kw in keywords:
        (matched if kw in resume_tokens else missing).append(kw)

    ratio = len(matched) / max(len(keywords), 1)
    return CoverageResult(
        score=round1(ratio * config.coverage_max),
        matched=matched,
        missing=missing,
    )


def score_structure(resume_text: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> StructureResult:
    lower = (resume_text or "").lower()
    points = 0
    flags: List[str] = []
    for section in config.sections:
        if any(term in lower for term in section.terms):
            points += config.points_per_section
        else:
            flags.append(section.flag)
    return StructureResult(score=float(points), flags=flags)


def score_length(word_count: int, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> LengthResult:
    for bucket in config.length_buckets:
        if bucket.contains(word_count):
            return LengthResult(score=float(bucket.score), note=bucket.note, word_count=word_count)
    # buckets cover every non-negative count; fall back to the last one
    last = config.length_buckets[-1]
    return LengthResult(score=float(last.score), note=last.note, word_count=word_count)


def score_similarity(
    keywords: Sequence[str],
    resume_tokens: Set[str],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> SimilarityResult:
    ratio = keyword_jaccard(keywords, resume_tokens)
    return SimilarityResult(score=round1(ratio * config.similarity_max), ratio=ratio)
