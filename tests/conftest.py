import fitz
import pytest

from config import FALLBACK_RESPONSE


def make_pdf(text: str) -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


class FakeLLMClient:
    """Records prompts and answers with a canned analysis."""

    def __init__(self, answer="Candidate: Test\nMatch Score: 72/100\n\nSummary: solid fit."):
        self.answer = answer
        self.prompts = []

    def request_analysis(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answer or FALLBACK_RESPONSE


@pytest.fixture
def cv_pdf():
    return make_pdf("Carol Jones - Backend Engineer. Python, Go, PostgreSQL, Kubernetes.")


@pytest.fixture
def fake_client():
    return FakeLLMClient()
