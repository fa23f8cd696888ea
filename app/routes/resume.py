# app/routes/resume.py
from __future__ import annotations
import random
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Request

from app.middleware.rate_limit import LIMIT_DETAIL, DailyQuota, client_ip, get_quota
from app.schemas.base import OptimizeResponse, ScoreRequest, ScoreResponse
from app.services.generator import TextGenerator, get_generator
from app.services.optimize_service import optimize_resume
from app.services.score_service import score_resume
from app.utils.analytics import track
from app.utils.text import clean_text, is_blank


router = APIRouter()


def get_rng() -> random.Random:
    return random.Random()


@router.post("", response_model=Union[ScoreResponse, OptimizeResponse])
def resume(
    req: ScoreRequest,
    request: Request,
    generator: TextGenerator = Depends(get_generator),
    rng: random.Random = Depends(get_rng),
    quota: Optional[DailyQuota] = Depends(get_quota),
):
    if is_blank(req.resume_text) or is_blank(req.job_description):
        raise HTTPException(status_code=400, detail="Missing resume or job description text")
    if req.action not in ("score", "optimize"):
        raise HTTPException(status_code=400, detail="Invalid action")

    # only the generator-backed action spends quota
    if req.action == "optimize" and quota is not None:
        if not quota.allow(client_ip(request.scope.get("client"))):
            raise HTTPException(status_code=429, detail=LIMIT_DETAIL)

    resume_text = clean_text(req.resume_text)
    jd_text = clean_text(req.job_description)

    # shared scoring pipeline
    scored = score_resume(resume_text, jd_text)

    if req.action == "score":
        track(request, "score_completed", {"total": scored.score})
        return scored

    optimized = optimize_resume(resume_text, jd_text, scored, generator, rng)
    track(request, "optimize_completed", {"total": scored.score, "boost": optimized.expected_score_boost})
    return optimized
