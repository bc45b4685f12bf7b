"""Shared fixtures: settings without .env, fake LLM and fake PDF renderer."""

import pytest

from paste2resume.config import AISettings, Settings
from paste2resume.services import ResumeService


EXTRACTION_RESPONSE = """
**name:** Jane Doe
**age:** 34
**location:** Berlin, Germany
**email:** jane@example.com
**phone:** N/A
**links:**
1. https://github.com/janedoe
2. LinkedIn: https://linkedin.com/in/janedoe
**interests:**
1. Chess - weekend tournaments
2. Hiking: Alpine routes
**work_experience:**
1. company: Acme, position: Senior Engineer, start_date: 2019, end_date: Present
   description: Led the payments team, cut latency by 40%
2. company: Initech
   position: Engineer
   start_date: 2015
   end_date: 2019
**education:**
1. school: MIT, degree: BSc, field_of_study: Computer Science, graduation_year: 2015
**certifications:**
1. name: AWS Solutions Architect, organization: Amazon, date_earned: 2021
**resume_style_notes:** Modern, minimal, tech industry
"""

HTML_RESPONSE = """Here is your resume:
```html
<!DOCTYPE html>
<html><body><h1>Jane Doe</h1></body></html>
```
"""

FAKE_PDF = b"%PDF-1.4 fake resume"


class FakeAIService:
    """Returns canned responses in order and records every call."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    def generate_completion(self, prompt, model, system_prompt=None, temperature=0.0, max_tokens=None):
        self.calls.append({
            "prompt": prompt,
            "model": model,
            "system_prompt": system_prompt,
            "temperature": temperature,
        })
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakePdfService:
    """Stands in for the headless browser."""

    def __init__(self, error=None):
        self.error = error
        self.rendered = []

    def render(self, html):
        self.rendered.append(html)
        if self.error:
            raise self.error
        return FAKE_PDF


@pytest.fixture
def settings():
    return Settings(_env_file=None, ai_settings=AISettings())


@pytest.fixture
def extraction_response():
    return EXTRACTION_RESPONSE


@pytest.fixture
def html_response():
    return HTML_RESPONSE


@pytest.fixture
def fake_ai():
    return FakeAIService([EXTRACTION_RESPONSE, HTML_RESPONSE])


@pytest.fixture
def fake_pdf():
    return FakePdfService()


@pytest.fixture
def resume_service(settings, fake_ai, fake_pdf):
    return ResumeService(settings, ai_service=fake_ai, pdf_service=fake_pdf)


@pytest.fixture
def make_ai():
    """Build a fake LLM with its own response queue."""
    return FakeAIService


@pytest.fixture
def make_pdf():
    """Build a fake renderer, optionally failing with the given error."""
    return FakePdfService
