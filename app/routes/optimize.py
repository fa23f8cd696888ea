from fastapi import APIRouter, Depends, HTTPException

from app.core.config import settings as cfg
from app.schemas.base import RewriteRequest, RewriteResponse
from app.services.analyze_service import rewrite_section
from app.services.generator import GeneratorError, TextGenerator, get_generator
from app.utils.text import clean_text, is_blank


router = APIRouter()


@router.post("", response_model=RewriteResponse, summary="Rephrase one resume fragment")
def optimize(req: RewriteRequest, generator: TextGenerator = Depends(get_generator)):
    if is_blank(req.text) or is_blank(req.jd_text):
        raise HTTPException(status_code=400, detail="Missing text or JD")
    try:
        text = rewrite_section(
            clean_text(req.text), clean_text(req.jd_text), req.instruction, generator, cfg.rewrite_jd_max_chars
        )
    except GeneratorError:
        raise HTTPException(status_code=503, detail="Optimization service unavailable")
    return RewriteResponse(optimized_text=text)
