#!/usr/bin/env python
"""
Demo script to show the roast pipeline in action.

Runs CritiqueService against a PDF (or a built-in sample resume) and
prints the result. Without an API key in the environment it serves a
canned demo roast and makes no network calls.

Usage:
    python demo_roast.py [path/to/resume.pdf]
"""

import sys
from pathlib import Path

from resume_roast.config import get_settings
from resume_roast.core.critique_service import CritiqueService
from resume_roast.core.pdf_extractor import ExtractionError, extract_resume_text
from resume_roast.models.schemas import CritiqueRequest

SAMPLE_RESUME = """JANE DOE
Detail-oriented professional with a passion for synergy.

EXPERIENCE
Software Engineer, Acme Corp (2019-2024)
- Responsible for managing tasks
- Worked on various projects using various technologies

SKILLS
Python, Java, C++, Rust, Go, Kubernetes, Leadership, Microsoft Word
"""

print("=" * 80)
print("RESUME ROAST DEMO")
print("=" * 80)
print()

settings = get_settings()
if len(sys.argv) > 1:
    pdf_path = Path(sys.argv[1])
    try:
        resume_text = extract_resume_text(pdf_path.read_bytes(), filename=pdf_path.name)
    except ExtractionError as e:
        print(f"✗ {e}")
        sys.exit(1)
    filename = pdf_path.name
    print(f"✓ Extracted {len(resume_text)} characters from {filename}")
else:
    resume_text = SAMPLE_RESUME
    filename = "sample_resume.pdf"
    print("✓ Using built-in sample resume")

service = CritiqueService(settings)
print(f"Mode: {service.mode} (provider: {settings.llm_provider})")
print()

result = service.submit(CritiqueRequest(resume_text=resume_text, filename=filename))

print("-" * 80)
print(result.critique)
print("-" * 80)
print(f"Score: {result.score}/100")
print(f"Roast level: {result.roast_level.label}")
print()

if service.mode == "demo":
    print("To get a real roast, set GROQ_API_KEY (or LLM_PROVIDER + its key) and rerun.")
