from __future__ import annotations

import re
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import Response

from resume_roast.config import get_settings
from resume_roast.core.critique_service import CritiqueService, get_critique_service
from resume_roast.core.pdf_extractor import extract_resume_text
from resume_roast.models.schemas import (
    CritiqueExportRequest,
    CritiqueRequest,
    CritiqueResponse,
    CritiqueResult,
    ErrorResponse,
)
from resume_roast.services.document_service import DocumentService, GeneratedFile

router = APIRouter(prefix="/api/critique", tags=["critique"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_docs() -> DocumentService:
    return DocumentService()


def _content_disposition(filename: str) -> str:
    # Header values are Latin-1; the UTF-8 name goes in filename* (RFC 5987)
    fallback = re.sub(r"[^A-Za-z0-9._-]", "_", filename)
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def _attachment(f: GeneratedFile) -> Response:
    return Response(
        content=f.data,
        media_type=f.content_type,
        headers={"Content-Disposition": _content_disposition(f.filename)},
    )


@router.post("", response_model=CritiqueResponse, responses=ERROR_RESPONSES)
def create_critique(
    req: CritiqueRequest,
    service: CritiqueService = Depends(get_critique_service),
):
    return service.submit(req)


@router.post(
    "/upload",
    response_model=CritiqueResult,
    responses={**ERROR_RESPONSES, 413: {"model": ErrorResponse}, 415: {"model": ErrorResponse}},
)
def upload_and_critique(
    file: UploadFile = File(...),
    service: CritiqueService = Depends(get_critique_service),
):
    max_bytes = get_settings().max_upload_bytes
    filename = file.filename or ""
    # one byte past the limit is enough to reject the upload
    content = file.file.read(max_bytes + 1)
    text = extract_resume_text(
        content, filename=filename, content_type=file.content_type, max_bytes=max_bytes
    )

    critique = service.submit(CritiqueRequest(resume_text=text, filename=filename))
    return CritiqueResult(
        filename=filename,
        resume_text=text,
        critique=critique.critique,
        score=critique.score,
        roast_level=critique.roast_level,
    )


@router.post("/export/pdf")
def export_critique_pdf(
    req: CritiqueExportRequest,
    docs: DocumentService = Depends(get_docs),
):
    f = docs.critique_pdf(req.filename, req.critique, req.score, req.roast_level)
    return _attachment(f)


@router.post("/export/docx")
def export_critique_docx(
    req: CritiqueExportRequest,
    docs: DocumentService = Depends(get_docs),
):
    f = docs.critique_docx(req.filename, req.critique, req.score, req.roast_level)
    return _attachment(f)
