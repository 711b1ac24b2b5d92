from pydantic import BaseModel, ConfigDict
from typing import List

JOB_HEADER = "📄 Job Description:"
SECTION_TEMPLATE = "===== {name} ====="


# One uploaded CV, as received from the multipart form
class UploadedFile(BaseModel):
    file_name: str
    content: bytes


# Job description + CVs for one analysis run
class AnalysisRequest(BaseModel):
    job_description: str
    files: List[UploadedFile] = []


# Text pulled out of one file; empty text means extraction failed
class ExtractedDocument(BaseModel):
    file_name: str
    text: str = ""


# Analysis of a single candidate
class CandidateReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_name: str
    analysis_text: str


class CombinedReport(BaseModel):
    """All candidate reports of one batch, in upload order."""

    model_config = ConfigDict(frozen=True)

    job_description: str
    reports: List[CandidateReport] = []

    def to_text(self) -> str:
        """Serialize to the plain-text format read by the dashboard and the exporter."""
        output = f"{JOB_HEADER}\n{self.job_description}\n\n"
        for report in self.reports:
            output += f"{SECTION_TEMPLATE.format(name=report.file_name)}\n{report.analysis_text}\n\n"
        return output


# Per-candidate view rebuilt from the report text on the client side
class ParsedCandidateView(BaseModel):
    display_name: str
    match_score: int = 0
    body_text: str = ""
