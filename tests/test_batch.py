"""
Unit tests for the batch CV analysis pipeline.
"""
import asyncio
import re

import pytest

from config import EXTRACTION_FAILED_MESSAGE, FALLBACK_RESPONSE
from errors import ServiceUnavailable, ValidationError
from matching.batch import analyze_batch
from matching.llm_client import LLMClient
from schemas import UploadedFile

JD = "Senior Backend Engineer...\nPython, PostgreSQL, Kubernetes."
SECTION_RE = re.compile(r"^===== (.+) =====$", re.MULTILINE)


def run(coro):
    return asyncio.run(coro)


def text_extractor(content: bytes) -> str:
    return content.decode()


class RecordingExtractor:
    def __init__(self):
        self.calls = []

    def __call__(self, content):
        self.calls.append(content)
        return content.decode()


class FailingClient:
    def __init__(self, fail_on=1):
        self.fail_on = fail_on
        self.calls = 0

    def request_analysis(self, prompt):
        self.calls += 1
        if self.calls >= self.fail_on:
            raise ServiceUnavailable("connection refused")
        return "Match Score: 50/100"


def test_one_section_per_file_in_input_order(fake_client):
    files = [UploadedFile(file_name=f"{n}.pdf", content=f"CV of {n}".encode()) for n in ("zoe", "adam", "mia")]
    report = run(analyze_batch(JD, files, fake_client, extractor=text_extractor))

    assert [r.file_name for r in report.reports] == ["zoe.pdf", "adam.pdf", "mia.pdf"]
    text = report.to_text()
    assert text.startswith(f"📄 Job Description:\n{JD}\n\n")
    assert SECTION_RE.findall(text) == ["zoe.pdf", "adam.pdf", "mia.pdf"]
    assert len(fake_client.prompts) == 3
    assert "CV of zoe" in fake_client.prompts[0]


def test_empty_extraction_skips_model_call(fake_client):
    files = [
        UploadedFile(file_name="blank.pdf", content=b""),
        UploadedFile(file_name="ok.pdf", content=b"Some CV"),
    ]
    report = run(analyze_batch(JD, files, fake_client, extractor=text_extractor))

    assert report.reports[0].analysis_text == EXTRACTION_FAILED_MESSAGE
    assert report.reports[1].analysis_text == fake_client.answer
    assert len(fake_client.prompts) == 1
    assert "Some CV" in fake_client.prompts[0]


@pytest.mark.parametrize("jd", ["", "   \n"])
def test_missing_job_description_rejected_before_any_call(jd, fake_client):
    extractor = RecordingExtractor()
    files = [UploadedFile(file_name="a.pdf", content=b"cv")]
    with pytest.raises(ValidationError):
        run(analyze_batch(jd, files, fake_client, extractor=extractor))
    assert extractor.calls == []
    assert fake_client.prompts == []


def test_empty_file_list_rejected_before_any_call(fake_client):
    extractor = RecordingExtractor()
    with pytest.raises(ValidationError, match="Missing job description or files."):
        run(analyze_batch(JD, [], fake_client, extractor=extractor))
    assert extractor.calls == []


def test_service_failure_aborts_batch():
    extractor = RecordingExtractor()
    client = FailingClient(fail_on=2)
    files = [UploadedFile(file_name=f"{i}.pdf", content=b"cv") for i in range(3)]

    with pytest.raises(ServiceUnavailable):
        run(analyze_batch(JD, files, client, extractor=extractor))
    assert client.calls == 2
    assert len(extractor.calls) == 2


def test_empty_completion_recorded_as_fallback():
    class EmptySession:
        def post(self, url, **kwargs):
            class Response:
                def raise_for_status(self):
                    pass

                def json(self):
                    return {"choices": [{"message": {"content": ""}}]}

            return Response()

    client = LLMClient(api_key="sk-test", http=EmptySession())
    files = [UploadedFile(file_name="quiet.pdf", content=b"cv text")]
    report = run(analyze_batch(JD, files, client, extractor=text_extractor))

    assert report.reports[0].analysis_text == FALLBACK_RESPONSE
    assert "===== quiet.pdf =====\nNo response.\n" in report.to_text()


def test_valid_and_corrupt_pdf(cv_pdf, fake_client):
    files = [
        UploadedFile(file_name="carol.pdf", content=cv_pdf),
        UploadedFile(file_name="dave.pdf", content=b"%PDF-1.4 corrupt"),
    ]
    report = run(analyze_batch(JD, files, fake_client))

    text = report.to_text()
    assert SECTION_RE.findall(text) == ["carol.pdf", "dave.pdf"]
    assert re.search(r"Match Score: (\d+)/100", report.reports[0].analysis_text)
    assert report.reports[1].analysis_text == EXTRACTION_FAILED_MESSAGE
    assert len(fake_client.prompts) == 1
    assert "Carol Jones" in fake_client.prompts[0]


def test_reports_are_immutable(fake_client):
    files = [UploadedFile(file_name="a.pdf", content=b"cv")]
    report = run(analyze_batch(JD, files, fake_client, extractor=text_extractor))
    with pytest.raises(Exception):
        report.reports[0].analysis_text = "edited"
