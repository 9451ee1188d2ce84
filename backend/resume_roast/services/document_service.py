from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from pathlib import PurePath

from docx import Document
from docx.shared import Pt
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from resume_roast.models.schemas import RoastLevel


@dataclass
class GeneratedFile:
    filename: str
    content_type: str
    data: bytes


DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def export_filename(resume_filename: str, extension: str) -> str:
    stem = PurePath(resume_filename).stem or "resume"
    return f"resume-critique-{stem}.{extension}"


class DocumentService:
    """
    Generates downloadable copies of a critique (DOCX/PDF).
    """

    def critique_docx(
        self,
        resume_filename: str,
        critique: str,
        score: int,
        roast_level: RoastLevel,
    ) -> GeneratedFile:
        doc = Document()
        style = doc.styles["Normal"]
        style.font.name = "Calibri"
        style.font.size = Pt(11)

        doc.add_heading(f"Resume Roast: {resume_filename}", level=1)
        doc.add_paragraph(f"{roast_level.label} - Score: {score}/100")

        for para in critique.strip().split("\n"):
            doc.add_paragraph(para)

        buf = BytesIO()
        doc.save(buf)
        return GeneratedFile(
            filename=export_filename(resume_filename, "docx"),
            content_type=DOCX_CONTENT_TYPE,
            data=buf.getvalue(),
        )

    def critique_pdf(
        self,
        resume_filename: str,
        critique: str,
        score: int,
        roast_level: RoastLevel,
    ) -> GeneratedFile:
        buf = BytesIO()
        c = canvas.Canvas(buf, pagesize=LETTER)
        width, height = LETTER
        top, bottom = height - 72, 72

        header = [
            f"Resume Roast: {resume_filename}",
            f"{roast_level.label} - Score: {score}/100",
            "",
        ]
        lines = header + [
            wrapped
            for line in critique.strip().split("\n")
            for wrapped in self._wrap_line(self._pdf_safe(line), max_chars=95)
        ]

        textobject = c.beginText(54, top)  # margins
        textobject.setFont("Times-Roman", 11)
        for line in lines:
            # new page once the cursor reaches the bottom margin
            if textobject.getY() < bottom:
                c.drawText(textobject)
                c.showPage()
                textobject = c.beginText(54, top)
                textobject.setFont("Times-Roman", 11)
            textobject.textLine(self._pdf_safe(line))
        c.drawText(textobject)
        c.showPage()
        c.save()

        return GeneratedFile(
            filename=export_filename(resume_filename, "pdf"),
            content_type="application/pdf",
            data=buf.getvalue(),
        )

    # -----------------------
    # helpers
    # -----------------------
    @staticmethod
    def _pdf_safe(text: str) -> str:
        # Standard Type 1 fonts only cover Latin-1; emojis are dropped
        return text.encode("latin-1", errors="ignore").decode("latin-1").strip()

    def _wrap_line(self, line: str, max_chars: int) -> list[str]:
        if len(line) <= max_chars:
            return [line]
        out: list[str] = []
        words = line.split(" ")
        cur = ""
        for w in words:
            if len(cur) + len(w) + 1 <= max_chars:
                cur = (cur + " " + w).strip()
            else:
                if cur:
                    out.append(cur)
                cur = w
        if cur:
            out.append(cur)
        return out
