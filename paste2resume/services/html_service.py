"""
HTML resume generation from a structured resume record.
"""

import re
import time

from paste2resume.config import Settings
from paste2resume.exceptions import HtmlGenerationError
from paste2resume.models import ResumeRecord
from paste2resume.services.ai_service import AIService
from paste2resume.utils.logger import get_logger

logger = get_logger(__name__)


HTML_PROMPT_TEMPLATE = """You are a resume builder. Create an HTML resume based on the provided structured information.
The resume should be well-formatted and ready to be converted to PDF.
Include appropriate styling using inline CSS.
Tailor the resume to the person's industry based on their resume_style_notes.
Output only the HTML code.

STRUCTURED INFO: {structured_info}"""

FENCE_PATTERN = re.compile(r"```(?:html)?", re.IGNORECASE)
DOCUMENT_START = re.compile(r"<!DOCTYPE html|<html\b", re.IGNORECASE)
DOCUMENT_END = re.compile(r"</html\s*>", re.IGNORECASE)


def clean_html_response(response: str) -> str:
    """
    Strip Markdown fences and any chatter around the HTML document.

    Args:
        response: Raw model output

    Returns:
        HTML markup
    """
    html = FENCE_PATTERN.sub("", response or "")

    start = DOCUMENT_START.search(html)
    if start:
        html = html[start.start():]
    ends = list(DOCUMENT_END.finditer(html))
    if ends:
        html = html[:ends[-1].end()]

    return html.strip()


class HtmlService:
    """Second prompting step: turn the record into a styled HTML page."""

    def __init__(self, settings: Settings, ai_service: AIService):
        self.settings = settings
        self.ai_service = ai_service
        self.model = settings.ai_settings.generation_model
        self.temperature = settings.ai_settings.generation_temperature

    def generate(self, record: ResumeRecord) -> str:
        """
        Generate resume HTML.

        Args:
            record: Structured resume data

        Returns:
            HTML document ready for rendering

        Raises:
            HtmlGenerationError: If the model fails or returns nothing usable
        """
        prompt = HTML_PROMPT_TEMPLATE.format(structured_info=record.to_prompt_json())

        logger.info(f"🎨 Generating resume HTML with {self.model}...")
        start = time.time()
        try:
            response = self.ai_service.generate_completion(
                prompt,
                model=self.model,
                temperature=self.temperature,
            )
        except Exception as e:
            logger.error(f"❌ HTML generation failed: {e}")
            raise HtmlGenerationError(f"HTML generation request failed: {e}") from e

        html = clean_html_response(response)
        if not html:
            logger.error("❌ Model returned no HTML")
            raise HtmlGenerationError("Model returned an empty HTML document")

        logger.info(f"✅ HTML generated in {time.time() - start:.2f}s ({len(html)} chars)")
        return html
