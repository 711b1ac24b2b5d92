import logging
from typing import Callable, Sequence

from fastapi.concurrency import run_in_threadpool

from config import EXTRACTION_FAILED_MESSAGE
from errors import ValidationError
from parsers.pdf import pdf_to_text
from schemas import CandidateReport, CombinedReport, ExtractedDocument, UploadedFile
from .llm_client import LLMClient
from .prompts import build_prompt

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Missing job description or files."


async def analyze_batch(
    jd_text: str,
    files: Sequence[UploadedFile],
    client: LLMClient,
    extractor: Callable[[bytes], str] = pdf_to_text,
) -> CombinedReport:
    """
    Analyze every CV against the job description, one file at a time.

    Files whose text cannot be extracted get a placeholder report and are not
    sent to the model. ServiceUnavailable from the client aborts the batch.
    """
    if not jd_text or not jd_text.strip() or not files:
        raise ValidationError(MISSING_INPUT_MESSAGE)

    reports = []
    for i, upload in enumerate(files, 1):
        text = await run_in_threadpool(extractor, upload.content)
        doc = ExtractedDocument(file_name=upload.file_name, text=text or "")

        if not doc.text:
            logger.warning(f"[{i}/{len(files)}] No text extracted from {doc.file_name}")
            reports.append(CandidateReport(file_name=doc.file_name, analysis_text=EXTRACTION_FAILED_MESSAGE))
            continue

        prompt = build_prompt(jd_text, doc.text)
        analysis = await run_in_threadpool(client.request_analysis, prompt)
        logger.info(f"[{i}/{len(files)}] Analyzed {doc.file_name} ({len(doc.text)} chars)")
        reports.append(CandidateReport(file_name=doc.file_name, analysis_text=analysis))

    return CombinedReport(job_description=jd_text, reports=reports)
