import fitz
import pytest

from settings import Settings


class FakeClient:
    """Stands in for GeminiClient; records prompts and replays a canned reply."""

    def __init__(self, reply="## Missing Critical Skills\n- Kubernetes", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key", model_name="gemini-test", request_timeout=5)


@pytest.fixture
def fake_client():
    return FakeClient()


def make_pdf(text: str) -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    if text:
        page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def pdf_bytes():
    return make_pdf("Jane Doe jane.doe@example.com Python developer")


@pytest.fixture
def pdf_factory():
    return make_pdf
