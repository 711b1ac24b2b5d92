import io
from datetime import datetime
from typing import Dict

from docx import Document

from schemas import ParsedCandidateView


def export_filename(prefix: str = "cv_analysis", ext: str = "docx") -> str:
    return f"{prefix}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.{ext}"


def report_to_docx(jd_text: str, views: Dict[str, ParsedCandidateView]) -> bytes:
    """Render parsed candidate views as a Word document and return its bytes."""
    doc = Document()
    doc.add_heading("CV Analysis Report", level=0)
    doc.add_paragraph(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")

    doc.add_heading("Job Description", level=1)
    for line in jd_text.strip().splitlines():
        if line.strip():
            doc.add_paragraph(line.strip())

    if not views:
        doc.add_paragraph("No candidate sections found.")

    for view in views.values():
        doc.add_heading(view.display_name, level=1)
        doc.add_paragraph().add_run(f"Match Score: {view.match_score}/100").bold = True
        for line in view.body_text.splitlines():
            line = line.strip()
            if not line or set(line) <= {"─", "-", "="}:
                continue
            if line.startswith("- "):
                doc.add_paragraph(line[2:].replace("**", ""), style="List Bullet")
            else:
                doc.add_paragraph(line.replace("**", ""))

    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()
