"""HTTP surface through FastAPI's TestClient, generator scripted."""

import inspect
import json

import pytest

from app.routes import parse as parse_route
from app.services.generator import GeneratorError
from app.services.optimize_service import GENERIC_CHANGE_NOTE, UNAVAILABLE_NOTE
from app.services.parse_service import DOCX
from tests.test_parse_service import _docx_bytes

RESUME = "Summary: Python engineer.\nExperience: built APIs.\nEducation: BSc.\nSkills: Docker.\nEmail: a@b.io"
JD = "Python Kubernetes Docker backend engineer"


@pytest.mark.api
def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["ok"] is True


@pytest.mark.api
def test_score_response_shape(client):
    r = client.post("/api/resume", json={"action": "score", "resumeText": RESUME, "jobDescription": JD})
    assert r.status_code == 200
    body = r.json()
    assert set(body) == {"score", "breakdown", "suggestions", "analysis"}
    assert set(body["breakdown"]) == {"keywordCoverage", "structure", "length", "overallSimilarity", "total"}
    assert set(body["analysis"]) == {"matchedKeywords", "missingKeywords", "structureFlags", "lengthNote", "wordCount"}
    assert body["score"] == body["breakdown"]["total"]
    assert body["analysis"]["missingKeywords"] == ["kubernetes", "backend"]
    assert body["analysis"]["structureFlags"] == []
    assert body["analysis"]["lengthNote"] == "Resume is very short."


@pytest.mark.api
def test_score_is_byte_identical_across_calls(client):
    payload = {"action": "score", "resumeText": RESUME, "jobDescription": JD}
    first = client.post("/api/resume", json=payload).content
    assert client.post("/api/resume", json=payload).content == first


@pytest.mark.api
def test_score_does_not_call_generator(client, generator):
    client.post("/api/resume", json={"action": "score", "resumeText": RESUME, "jobDescription": JD})
    assert generator.prompts == []


@pytest.mark.api
@pytest.mark.parametrize(
    "payload",
    [
        {"action": "score", "jobDescription": JD},
        {"action": "score", "resumeText": RESUME},
        {"action": "score", "resumeText": "   ", "jobDescription": JD},
        {"action": "optimize", "resumeText": RESUME, "jobDescription": ""},
    ],
)
def test_missing_text_is_rejected(client, payload):
    r = client.post("/api/resume", json=payload)
    assert r.status_code == 400
    assert r.json()["detail"] == "Missing resume or job description text"


@pytest.mark.api
@pytest.mark.parametrize("action", ["rescore", None, ""])
def test_invalid_action(client, action):
    r = client.post("/api/resume", json={"action": action, "resumeText": RESUME, "jobDescription": JD})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid action"


@pytest.mark.api
def test_optimize_structured(client, generator):
    generator.reply = json.dumps({"resume": "Better resume", "changes": ["Added Kubernetes context"]})
    r = client.post("/api/resume", json={"action": "optimize", "resumeText": RESUME, "jobDescription": JD})
    assert r.status_code == 200
    body = r.json()
    assert body["optimizedResume"] == "Better resume"
    assert body["changesSummary"] == ["Added Kubernetes context"]
    assert 5 <= body["expectedScoreBoost"] <= 19
    assert "kubernetes, backend" in generator.prompts[0]


@pytest.mark.api
def test_optimize_unstructured_reply(client, generator):
    generator.reply = "Sure! Here is the resume:\nJane Doe"
    body = client.post("/api/resume", json={"action": "optimize", "resumeText": RESUME, "jobDescription": JD}).json()
    assert body["optimizedResume"] == "Sure! Here is the resume:\nJane Doe"
    assert body["changesSummary"] == [GENERIC_CHANGE_NOTE]


@pytest.mark.api
def test_optimize_generator_down(client, generator):
    generator.error = GeneratorError("no response")
    r = client.post("/api/resume", json={"action": "optimize", "resumeText": RESUME, "jobDescription": JD})
    assert r.status_code == 200
    assert r.json() == {
        "optimizedResume": RESUME,
        "changesSummary": [UNAVAILABLE_NOTE],
        "expectedScoreBoost": 0,
    }


@pytest.mark.api
def test_analyze_passes_parsed_json_through(client, generator):
    analysis = {"scores": {"total": 71}, "gaps": {"missing_keywords": ["Kubernetes"]}}
    generator.reply = "```json\n" + json.dumps(analysis) + "\n```"
    r = client.post("/api/analyze", json={"resumeText": RESUME, "jdText": JD})
    assert r.status_code == 200
    assert r.json() == analysis


@pytest.mark.api
def test_analyze_truncates_inputs(client, generator):
    generator.reply = "{}"
    client.post("/api/analyze", json={"resumeText": "r" * 12000, "jdText": JD})
    assert "r" * 10000 in generator.prompts[0]
    assert "r" * 10001 not in generator.prompts[0]


@pytest.mark.api
def test_analyze_unparseable(client, generator):
    generator.reply = "I think the candidate is great."
    r = client.post("/api/analyze", json={"resumeText": RESUME, "jdText": JD})
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to parse analysis result"


@pytest.mark.api
def test_analyze_generator_down(client, generator):
    generator.error = GeneratorError("quota")
    r = client.post("/api/analyze", json={"resumeText": RESUME, "jdText": JD})
    assert r.status_code == 503


@pytest.mark.api
def test_analyze_requires_both_texts(client):
    assert client.post("/api/analyze", json={"resumeText": RESUME}).status_code == 400


@pytest.mark.api
def test_rewrite_fragment(client, generator):
    generator.reply = "  Led migration of 12 services to Kubernetes.\n"
    r = client.post(
        "/api/optimize",
        json={"text": "Moved services to k8s", "jdText": JD, "instruction": "Make it concise"},
    )
    assert r.status_code == 200
    assert r.json() == {"optimizedText": "Led migration of 12 services to Kubernetes."}
    assert "INSTRUCTION: Make it concise" in generator.prompts[0]


@pytest.mark.api
def test_rewrite_default_instruction(client, generator):
    generator.reply = "ok"
    client.post("/api/optimize", json={"text": "Moved services", "jdText": JD})
    assert "INSTRUCTION: Optimize for impact and relevance to JD." in generator.prompts[0]


@pytest.mark.api
def test_rewrite_errors(client, generator):
    assert client.post("/api/optimize", json={"jdText": JD}).status_code == 400
    generator.error = GeneratorError("timeout")
    assert client.post("/api/optimize", json={"text": "x", "jdText": JD}).status_code == 503


@pytest.mark.api
def test_parse_plain_text_upload(client):
    r = client.post("/api/parse", files={"file": ("cv.txt", b"  Jane Doe\n", "text/plain")})
    assert r.status_code == 200
    assert r.json() == {"text": "Jane Doe"}


@pytest.mark.api
def test_parse_docx_upload(client):
    r = client.post("/api/parse", files={"file": ("cv.docx", _docx_bytes("Jane Doe"), DOCX)})
    assert r.status_code == 200
    assert r.json()["text"].startswith("Jane Doe")


@pytest.mark.api
def test_parse_rejects_unsupported_and_missing(client):
    r = client.post("/api/parse", files={"file": ("cv.png", b"\x89PNG", "image/png")})
    assert r.status_code == 400
    assert r.json()["detail"] == "Unsupported file type"
    assert client.post("/api/parse").status_code == 400


@pytest.mark.api
def test_parse_broken_pdf(client):
    r = client.post("/api/parse", files={"file": ("cv.pdf", b"", "application/pdf")})
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to parse file"


@pytest.mark.unit
def test_parse_route_runs_in_threadpool():
    # blocking pypdf / python-docx work must not run on the event loop
    assert not inspect.iscoroutinefunction(parse_route.parse)
