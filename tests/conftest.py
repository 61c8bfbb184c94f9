import json
import logging
from contextlib import asynccontextmanager

import pytest

TEMPLATE = """<html><body>
<h1>{{ personal_info.name }}</h1>
<p>{{ summary.professional_summary }}</p>
{% for job in experience %}<div class="job">{{ job.position }} at {{ job.company }}</div>{% endfor %}
<p class="skills">{{ join(skills.languages) }}</p>
</body></html>
"""


@pytest.fixture
def cv_data():
    return {
        "personal_info": {"name": "Jane Doe", "email": "jane@example.com", "position": "Engineer"},
        "summary": {"professional_summary": "Builds reliable systems."},
        "experience": [
            {"position": "Engineer", "company": "Acme Corp"},
            {"position": "Intern", "company": "Initech"},
        ],
        "skills": {"languages": ["Python", "Go", "SQL"]},
    }


@pytest.fixture
def template_path(tmp_path):
    path = tmp_path / "template.html"
    path.write_text(TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def input_path(tmp_path, cv_data):
    path = tmp_path / "cv.json"
    path.write_text(json.dumps(cv_data), encoding="utf-8")
    return path


class FakeRenderer:
    """Stands in for PdfRenderer and returns a preset result."""

    def __init__(self, result):
        self.result = result
        self.calls = []

    def convert(self, html, output_path):
        self.calls.append((html, output_path))
        return self.result


@pytest.fixture
def fake_renderer():
    return FakeRenderer


@pytest.fixture
def broken_playwright(monkeypatch):
    """Make every browser launch fail as if Chromium were not installed."""

    @asynccontextmanager
    async def fake_async_playwright():
        raise RuntimeError("Executable doesn't exist at /ms-playwright/chromium")
        yield

    monkeypatch.setattr("jobpare_cv.pdf.async_playwright", fake_async_playwright)


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """The CLI attaches a stderr handler; drop it so later tests start clean."""
    yield
    logging.getLogger("jobpare_cv").handlers.clear()
