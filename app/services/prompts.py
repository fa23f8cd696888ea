# app/services/prompts.py
from __future__ import annotations

from typing import List

OPTIMIZE_RESUME_PROMPT = """You are an ATS resume optimization assistant.

Rewrite the following resume to match the job description without inventing fake experiences.

Rules:
- Keep only real experience
- Add missing keywords naturally, and only where they truthfully describe the work
- Improve phrasing and structure
- Add measurable achievements where possible (but realistic)
- Maintain professional ATS-friendly formatting (plain text)
- Fix structure issues (skills, summary, education, experience)
- DO NOT invent new jobs, employers, dates, credentials or education

Resume:
{resume}

Job Description:
{jd}

Missing Keywords:
{missing}

Structural + improvement suggestions:
{suggestions}

Return output in this JSON format:
{{
  "resume": "...optimized resume text...",
  "changes": ["change1", "change2"]
}}
"""

GAP_ANALYSIS_PROMPT = """You are an expert Resume Analyzer and ATS Optimization Specialist.
Analyze the following Resume against the Job Description (JD).

JOB DESCRIPTION:
{jd}

RESUME:
{resume}

Perform a deep gap analysis and scoring based on these criteria:
1. Keyword Coverage (0-100): Are critical hard skills and tools present?
2. Semantic Similarity (0-100): Does the resume convey the same meaning/context?
3. Seniority Match (0-100): Does the experience level align?

Return the output STRICTLY in this JSON format (no markdown formatting, just raw JSON):
{{
  "scores": {{
    "total": number,
    "keyword_coverage": number,
    "semantic_similarity": number,
    "seniority_match": number
  }},
  "gaps": {{
    "missing_keywords": ["string"],
    "weak_matches": [
      {{ "resume_term": "string", "jd_preference": "string", "reason": "string" }}
    ]
  }},
  "over_represented": ["string"],
  "seniority_analysis": {{
    "jd_level": "string",
    "resume_level": "string",
    "status": "Match" | "Underqualified" | "Overqualified",
    "reason": "string"
  }}
}}
"total" is the weighted average 0.5 * keyword_coverage + 0.3 * semantic_similarity + 0.2 * seniority_match.
"""

REWRITE_SECTION_PROMPT = """You are an expert Resume Editor committed to ethical optimization.
Rephrase the following resume content to better align with the Job Description (JD),
while STRICTLY maintaining factual accuracy.

JOB DESCRIPTION:
{jd}

ORIGINAL CONTENT:
"{text}"

INSTRUCTION: {instruction}

RULES:
1. NEVER invent skills, tools, or experiences.
2. NEVER exaggerate quantitative results.
3. ONLY incorporate JD keywords if they accurately describe the work.
4. Use active voice and strong action verbs.
5. Front-load achievements.

Return ONLY the optimized text. Do not include explanations or markdown formatting.
"""

DEFAULT_REWRITE_INSTRUCTION = "Optimize for impact and relevance to JD."


def optimize_resume_prompt(resume: str, jd: str, missing: List[str], suggestions: List[str]) -> str:
    return OPTIMIZE_RESUME_PROMPT.format(
        resume=resume,
        jd=jd,
        missing=", ".join(missing),
        suggestions="\n".join(suggestions),
    )


def gap_analysis_prompt(resume: str, jd: str, max_chars: int) -> str:
    return GAP_ANALYSIS_PROMPT.format(jd=jd[:max_chars], resume=resume[:max_chars])


def rewrite_section_prompt(text: str, jd: str, instruction: str | None, jd_max_chars: int) -> str:
    return REWRITE_SECTION_PROMPT.format(
        jd=jd[:jd_max_chars],
        text=text,
        instruction=instruction or DEFAULT_REWRITE_INSTRUCTION,
    )
