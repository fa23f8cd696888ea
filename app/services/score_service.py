# app/services/score_service.py
from __future__ import annotations

from typing import List, Optional

from app.core.log import get_logger
from app.nlp.keywords import extract_keywords
from app.nlp.scorers import score_coverage, score_length, score_similarity, score_structure
from app.nlp.tokenizer import tokenize
from app.nlp.vocab import DEFAULT_SCORING_CONFIG, ScoringConfig
from app.schemas.base import AnalysisReport, ScoreBreakdown, ScoreResponse
from app.utils.timing import timer

log = get_logger(__name__)

TERMINOLOGY_TIP = "Increase alignment with job responsibilities by reflecting similar terminology."
FALLBACK_TIP = "This resume is strong. Add measurable achievements for extra polish."


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def build_suggestions(
    coverage_score: float,
    missing_keywords: List[str],
    structure_flags: List[str],
    length_note: Optional[str],
    similarity_score: float,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> List[str]:
    """
    Checklist, all applicable entries kept, order fixed:
    coverage -> structure -> length -> similarity -> fallback.
    """
    tips: List[str] = []
    if coverage_score < config.low_coverage and missing_keywords:
        top = ", ".join(missing_keywords[: config.max_listed_missing])
        tips.append(f"Missing important keywords: {top}")

    tips.extend(structure_flags)

    if length_note:
        tips.append(length_note)

    if similarity_score < config.low_similarity:
        tips.append(TERMINOLOGY_TIP)

    return tips or [FALLBACK_TIP]


def score_resume(
    resume_text: str,
    jd_text: str,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> ScoreResponse:
    """
    Pure function of the two texts: same inputs, same report.
    Empty strings are valid and score low rather than fail.
    """
    with timer() as elapsed:
        keywords = extract_keywords(jd_text or "", config)
        resume_tokens = tokenize(resume_text or "", config)
        resume_set = set(resume_tokens)

        coverage = score_coverage(keywords, resume_set, config)
        structure = score_structure(resume_text or "", config)
        length = score_length(len(resume_tokens), config)
        similarity = score_similarity(keywords, resume_set, config)

        total = clamp(
            coverage.score + structure.score + length.score + similarity.score,
            0.0,
            config.total_max,
        )

        suggestions = build_suggestions(
            coverage.score,
            coverage.missing,
            structure.flags,
            length.note,
            similarity.score,
            config,
        )
        runtime_ms = elapsed()

    log.info(
        "scored resume: words=%d keywords=%d matched=%d total=%.1f (%d ms)",
        length.word_count, len(keywords), len(coverage.matched), total, runtime_ms,
    )

    return ScoreResponse(
        score=total,
        breakdown=ScoreBreakdown(
            keyword_coverage=coverage.score,
            structure=structure.score,
            length=length.score,
            overall_similarity=similarity.score,
            total=total,
        ),
        suggestions=suggestions,
        analysis=AnalysisReport(
            matched_keywords=coverage.matched,
            missing_keywords=coverage.missing,
            structure_flags=structure.flags,
            length_note=length.note,
            word_count=length.word_count,
        ),
    )
