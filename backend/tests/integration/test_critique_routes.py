import random
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from resume_roast.core.critique_service import CritiqueService, get_critique_service
from resume_roast.core.scoring import DEMO_TIERS, roast_level_for
from resume_roast.main import app

client = TestClient(app)


@pytest.fixture
def use_service():
    """Swap the process-wide CritiqueService for one built by the test."""
    def _use(service: CritiqueService) -> CritiqueService:
        app.dependency_overrides[get_critique_service] = lambda: service
        return service
    yield _use
    app.dependency_overrides.pop(get_critique_service, None)


@pytest.fixture
def demo_service(use_service, settings_no_key):
    return use_service(CritiqueService(settings_no_key, rng=random.Random(11)))


@pytest.fixture
def fake_llm():
    return MagicMock()


@pytest.fixture
def live_service(use_service, settings_with_key, fake_llm):
    return use_service(CritiqueService(settings_with_key, llm_service=fake_llm))


def test_demo_critique(demo_service):
    r = client.post("/api/critique", json={"resumeText": "x" * 150, "filename": "resume.pdf"})

    assert r.status_code == 200, r.text
    data = r.json()
    assert set(data) == {"critique", "score", "roastLevel"}
    assert "resume.pdf" in data["critique"]
    assert 65 <= data["score"] <= 89
    assert data["roastLevel"] == roast_level_for(data["score"], DEMO_TIERS).value


@pytest.mark.parametrize(
    "body",
    [
        {"resumeText": "", "filename": "resume.pdf"},
        {"resumeText": "x" * 150, "filename": ""},
        {"filename": "resume.pdf"},
        {},
    ],
)
def test_missing_fields_return_400(demo_service, body):
    r = client.post("/api/critique", json=body)

    assert r.status_code == 400
    assert r.json() == {"error": "Resume text and filename are required"}


def test_malformed_body_returns_400(demo_service):
    r = client.post("/api/critique", json={"resumeText": 123, "filename": "resume.pdf"})

    assert r.status_code == 400
    assert "error" in r.json()


def test_live_critique_extracts_score(live_service, fake_llm):
    fake_llm.generate_response.return_value = {"content": "...great work! FINAL SCORE: 42/100"}

    r = client.post("/api/critique", json={"resumeText": "x" * 150, "filename": "resume.pdf"})

    assert r.status_code == 200, r.text
    data = r.json()
    assert data["score"] == 42
    assert data["roastLevel"] == "nuclear"
    fake_llm.generate_response.assert_called_once()


def test_live_critique_provider_failure_returns_500(live_service, fake_llm):
    fake_llm.generate_response.side_effect = ConnectionError("network down")

    r = client.post("/api/critique", json={"resumeText": "x" * 150, "filename": "resume.pdf"})

    assert r.status_code == 500
    data = r.json()
    assert set(data) == {"error"}
    assert data["error"].startswith("Failed to generate critique")


def test_upload_pdf_and_critique(demo_service, resume_pdf):
    files = {"file": ("resume.pdf", resume_pdf, "application/pdf")}
    r = client.post("/api/critique/upload", files=files)

    assert r.status_code == 200, r.text
    data = r.json()
    assert data["filename"] == "resume.pdf"
    assert "JANE DOE" in data["resumeText"]
    assert "resume.pdf" in data["critique"]
    assert data["roastLevel"] == roast_level_for(data["score"], DEMO_TIERS).value
    assert data["id"]
    assert data["timestamp"]


def test_upload_rejects_non_pdf(demo_service):
    files = {"file": ("resume.txt", b"plain text resume", "text/plain")}
    r = client.post("/api/critique/upload", files=files)

    assert r.status_code == 415
    assert "PDF" in r.json()["error"]


def test_upload_rejects_image_only_pdf(demo_service, make_pdf):
    files = {"file": ("scan.pdf", make_pdf([]), "application/pdf")}
    r = client.post("/api/critique/upload", files=files)

    assert r.status_code == 400
    assert "No text found" in r.json()["error"]


def test_upload_without_file_returns_400(demo_service):
    r = client.post("/api/critique/upload")
    assert r.status_code == 400


def test_export_pdf():
    body = {"filename": "resume.pdf", "critique": "💯 FINAL SCORE: 73/100", "score": 73, "roastLevel": "spicy"}
    r = client.post("/api/critique/export/pdf", json=body)

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/pdf")
    assert 'filename="resume-critique-resume.pdf"' in r.headers["content-disposition"]
    assert r.content[:4] == b"%PDF"


def test_export_docx():
    body = {"filename": "resume.pdf", "critique": "Needs numbers.", "score": 91, "roastLevel": "mild"}
    r = client.post("/api/critique/export/docx", json=body)

    assert r.status_code == 200
    assert r.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    )
    assert len(r.content) > 500


def test_export_rejects_unknown_roast_level():
    body = {"filename": "resume.pdf", "critique": "x", "score": 50, "roastLevel": "volcanic"}
    r = client.post("/api/critique/export/pdf", json=body)
    assert r.status_code == 400


def test_health():
    r = client.get("/health")

    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["mode"] in {"live", "demo"}


def test_metrics_exposes_roast_counters(demo_service):
    client.post("/api/critique", json={"resumeText": "x" * 150, "filename": "resume.pdf"})
    r = client.get("/metrics")

    assert r.status_code == 200
    assert "roast_level_total" in r.text
    assert "critique_requests_total" in r.text


def test_live_critique_oversized_score_digits_fall_back(live_service, fake_llm):
    fake_llm.generate_response.return_value = {"content": "9" * 5000 + "/100"}

    r = client.post("/api/critique", json={"resumeText": "x" * 150, "filename": "resume.pdf"})

    assert r.status_code == 200, r.text
    assert 70 <= r.json()["score"] <= 99


def test_upload_over_size_limit_returns_413(demo_service, settings_no_key, resume_pdf):
    small = settings_no_key.model_copy(update={"max_upload_bytes": 100})
    files = {"file": ("resume.pdf", resume_pdf, "application/pdf")}

    with patch("resume_roast.api.routes.critique.get_settings", return_value=small):
        r = client.post("/api/critique/upload", files=files)

    assert r.status_code == 413
    assert "error" in r.json()


def test_export_non_latin_filename():
    body = {"filename": "履歴書.pdf", "critique": "Needs numbers.", "score": 70, "roastLevel": "medium"}
    r = client.post("/api/critique/export/pdf", json=body)

    assert r.status_code == 200
    disposition = r.headers["content-disposition"]
    assert "filename*=UTF-8''resume-critique-%E5%B1%A5%E6%AD%B4%E6%9B%B8.pdf" in disposition
    assert 'filename="resume-critique-___.pdf"' in disposition


def test_export_filename_with_quote_keeps_header_intact():
    body = {"filename": 'my "best" cv.pdf', "critique": "x", "score": 70, "roastLevel": "medium"}
    r = client.post("/api/critique/export/docx", json=body)

    assert r.status_code == 200
    disposition = r.headers["content-disposition"]
    assert disposition.count('"') == 2
    assert "%22best%22" in disposition


def test_metrics_counts_rejected_uploads_by_error_type(demo_service):
    files = {"file": ("resume.txt", b"plain text resume", "text/plain")}
    client.post("/api/critique/upload", files=files)
    r = client.get("/metrics")

    assert 'error_type="UnsupportedFileTypeError"' in r.text
    assert 'component="pdf_extractor"' in r.text
