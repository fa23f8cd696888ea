from fastapi import APIRouter, Depends, HTTPException

from app.core.config import settings as cfg
from app.schemas.base import AnalyzeRequest
from app.services.analyze_service import ParsedAnalysis, analyze_gaps
from app.services.generator import GeneratorError, TextGenerator, get_generator
from app.utils.text import clean_text, is_blank


router = APIRouter()


@router.post("", summary="Generator-backed gap analysis")
def analyze(req: AnalyzeRequest, generator: TextGenerator = Depends(get_generator)):
    if is_blank(req.resume_text) or is_blank(req.jd_text):
        raise HTTPException(status_code=400, detail="Missing resume or JD text")
    try:
        outcome = analyze_gaps(
            clean_text(req.resume_text), clean_text(req.jd_text), generator, cfg.analyze_max_chars
        )
    except GeneratorError:
        raise HTTPException(status_code=503, detail="Analysis service unavailable")
    if not isinstance(outcome, ParsedAnalysis):
        raise HTTPException(status_code=500, detail="Failed to parse analysis result")
    return outcome.data
