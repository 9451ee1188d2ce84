from io import BytesIO

import pytest
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from resume_roast.config import Settings


SAMPLE_RESUME_LINES = [
    "JANE DOE - Senior Software Engineer",
    "EXPERIENCE",
    "Acme Corp (2019-2024): Responsible for managing tasks and synergy.",
    "Built internal tooling in Python and reduced build times considerably.",
    "SKILLS",
    "Python, SQL, FastAPI, Kubernetes, Leadership, Microsoft Word",
]


def _settings(**overrides) -> Settings:
    values = {
        "llm_provider": "groq",
        "groq_api_key": None,
        "openai_api_key": None,
        "gemini_api_key": None,
        "mlflow_enabled": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings_no_key():
    """Settings with no usable credential (demo mode)."""
    return _settings()


@pytest.fixture
def settings_with_key():
    """Settings with a Groq key configured (live mode)."""
    return _settings(groq_api_key="gsk-test-key")


@pytest.fixture
def make_pdf():
    """Build a small in-memory PDF with one line of text per entry."""
    def _make(lines):
        buf = BytesIO()
        c = canvas.Canvas(buf, pagesize=LETTER)
        textobject = c.beginText(54, LETTER[1] - 72)
        textobject.setFont("Times-Roman", 11)
        for line in lines:
            textobject.textLine(line)
        c.drawText(textobject)
        c.showPage()
        c.save()
        return buf.getvalue()
    return _make


@pytest.fixture
def resume_pdf(make_pdf):
    return make_pdf(SAMPLE_RESUME_LINES)
