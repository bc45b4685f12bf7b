"""Tests for HTML generation and response cleanup."""

import pytest

from paste2resume.exceptions import HtmlGenerationError
from paste2resume.models import ResumeRecord
from paste2resume.services.html_service import HtmlService, clean_html_response


def test_clean_strips_fences_and_chatter(html_response):
    assert clean_html_response(html_response) == (
        "<!DOCTYPE html>\n<html><body><h1>Jane Doe</h1></body></html>"
    )


def test_clean_keeps_fragment_without_document_markers():
    assert clean_html_response("```\n<div>Jane</div>\n```") == "<div>Jane</div>"


def test_clean_cuts_after_last_closing_tag():
    response = "<html><body>Jane</body></html>\nLet me know if you need changes!"
    assert clean_html_response(response) == "<html><body>Jane</body></html>"


def test_clean_handles_empty_response():
    assert clean_html_response("") == ""
    assert clean_html_response(None) == ""


def test_generate_sends_record_json(settings, make_ai, html_response):
    ai = make_ai([html_response])
    record = ResumeRecord(name="Jane Doe", resume_style_notes="Finance, conservative")

    html = HtmlService(settings, ai).generate(record)

    assert html.startswith("<!DOCTYPE html>")
    call = ai.calls[0]
    assert call["model"] == settings.ai_settings.generation_model
    assert call["temperature"] == 0.2
    assert call["prompt"].endswith(f"STRUCTURED INFO: {record.to_prompt_json()}")
    assert "resume_style_notes" in call["prompt"]


def test_empty_model_output_is_an_error(settings, make_ai):
    with pytest.raises(HtmlGenerationError):
        HtmlService(settings, make_ai(["```html\n```"])).generate(ResumeRecord(name="Jane"))


def test_model_failure_is_wrapped(settings, make_ai):
    with pytest.raises(HtmlGenerationError, match="timeout"):
        HtmlService(settings, make_ai([TimeoutError("timeout")])).generate(ResumeRecord(name="Jane"))
