# app/services/analyze_service.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from app.core.log import get_logger
from app.services.generator import TextGenerator
from app.services.prompts import gap_analysis_prompt, rewrite_section_prompt
from app.utils.llm_json import loads_object
from app.utils.timing import timer

log = get_logger(__name__)


@dataclass(frozen=True)
class ParsedAnalysis:
    data: Dict[str, Any]


@dataclass(frozen=True)
class RawAnalysis:
    text: str


AnalysisOutcome = Union[ParsedAnalysis, RawAnalysis]


def analyze_gaps(
    resume_text: str,
    jd_text: str,
    generator: TextGenerator,
    max_chars: int,
) -> AnalysisOutcome:
    # GeneratorError propagates; the route maps it to 503
    with timer() as elapsed:
        raw = generator.generate(gap_analysis_prompt(resume_text, jd_text, max_chars))
        runtime = elapsed()

    data = loads_object(raw)
    if data is None:
        log.warning("gap analysis not parseable as JSON (%d ms): %.200s", runtime, raw)
        return RawAnalysis(text=raw)
    log.info("gap analysis via %s (%d ms)", generator.name, runtime)
    return ParsedAnalysis(data=data)


def rewrite_section(
    text: str,
    jd_text: str,
    instruction: Optional[str],
    generator: TextGenerator,
    jd_max_chars: int,
) -> str:
    """Rephrase one resume fragment toward the JD; facts stay as given."""
    raw = generator.generate(rewrite_section_prompt(text, jd_text, instruction, jd_max_chars))
    return (raw or "").strip()
