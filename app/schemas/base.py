from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreRequest(CamelModel):
    action: Optional[str] = None
    resume_text: Optional[str] = None
    job_description: Optional[str] = None


class ScoreBreakdown(CamelModel):
    keyword_coverage: float
    structure: float
    length: float
    overall_similarity: float
    total: float


class AnalysisReport(CamelModel):
    matched_keywords: List[str]
    missing_keywords: List[str]
    structure_flags: List[str]
    length_note: Optional[str] = None
    word_count: int


class ScoreResponse(CamelModel):
    score: float
    breakdown: ScoreBreakdown
    suggestions: List[str]
    analysis: AnalysisReport


class OptimizeResponse(CamelModel):
    optimized_resume: str
    changes_summary: List[str]
    expected_score_boost: float


class AnalyzeRequest(CamelModel):
    resume_text: Optional[str] = None
    jd_text: Optional[str] = None


class RewriteRequest(CamelModel):
    text: Optional[str] = None
    jd_text: Optional[str] = None
    instruction: Optional[str] = None


class RewriteResponse(CamelModel):
    optimized_text: str


class ParseResponse(BaseModel):
    text: str
