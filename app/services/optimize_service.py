# app/services/optimize_service.py
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Union

from app.core.log import get_logger
from app.schemas.base import OptimizeResponse, ScoreResponse
from app.services.generator import GeneratorError, TextGenerator
from app.services.prompts import optimize_resume_prompt
from app.utils.llm_json import loads_object
from app.utils.timing import timer

log = get_logger(__name__)

GENERIC_CHANGE_NOTE = "Optimized using Gemini"
UNAVAILABLE_NOTE = "Optimization service unavailable; resume returned unchanged."

# inclusive bounds of the advertised boost
BOOST_MIN = 5
BOOST_MAX = 19


@dataclass(frozen=True)
class ParsedRewrite:
    resume: str
    changes: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RawRewrite:
    text: str


RewriteOutcome = Union[ParsedRewrite, RawRewrite]


def parse_rewrite(raw: str) -> RewriteOutcome:
    """
    Tag the generator output. Only an object with a string "resume" counts
    as structured; anything else is kept verbatim as the rewritten text.
    """
    data = loads_object(raw)
    if data is None or not isinstance(data.get("resume"), str):
        return RawRewrite(text=raw)

    changes = data.get("changes")
    if isinstance(changes, list):
        notes = [str(c) for c in changes]
    else:
        notes = [GENERIC_CHANGE_NOTE]
    return ParsedRewrite(resume=data["resume"], changes=notes)


def expected_score_boost(total: float, rng: random.Random) -> float:
    """Teaser estimate, not a re-score: min(100 - total, U{5..19})."""
    return min(100 - total, rng.randint(BOOST_MIN, BOOST_MAX))


def optimize_resume(
    resume_text: str,
    jd_text: str,
    scored: ScoreResponse,
    generator: TextGenerator,
    rng: random.Random,
) -> OptimizeResponse:
    prompt = optimize_resume_prompt(
        resume_text,
        jd_text,
        scored.analysis.missing_keywords,
        scored.suggestions,
    )

    with timer() as elapsed:
        try:
            raw = generator.generate(prompt)
        except GeneratorError as exc:
            log.warning("optimize degraded, returning original resume: %s", exc)
            return OptimizeResponse(
                optimized_resume=resume_text,
                changes_summary=[UNAVAILABLE_NOTE],
                expected_score_boost=0,
            )
        runtime_ms = elapsed()

    outcome = parse_rewrite(raw)
    if isinstance(outcome, ParsedRewrite):
        optimized, changes = outcome.resume, outcome.changes
    else:
        log.warning("generator returned unstructured output (%d chars); using it verbatim", len(outcome.text))
        optimized, changes = outcome.text, [GENERIC_CHANGE_NOTE]

    boost = expected_score_boost(scored.breakdown.total, rng)
    log.info("optimized resume via %s: %d changes, boost=%s (%d ms)", generator.name, len(changes), boost, runtime_ms)

    return OptimizeResponse(
        optimized_resume=optimized,
        changes_summary=changes,
        expected_score_boost=boost,
    )
