"""
Resume pipeline: pasted text -> structured record -> HTML -> PDF.
"""

import time
from datetime import datetime
from typing import Optional

from paste2resume.config import Settings
from paste2resume.models import ResumeRecord
from paste2resume.services.ai_service import AIService
from paste2resume.services.extraction_service import ExtractionService
from paste2resume.services.html_service import HtmlService
from paste2resume.services.pdf_service import PdfService
from paste2resume.utils.file_utils import save_json, save_text
from paste2resume.utils.logger import get_logger
from paste2resume.utils.paths import get_debug_artifact_path

logger = get_logger(__name__)


class ResumeService:
    """Run the resume steps strictly in sequence for a single request."""

    def __init__(
        self,
        settings: Settings,
        ai_service: Optional[AIService] = None,
        extraction_service: Optional[ExtractionService] = None,
        html_service: Optional[HtmlService] = None,
        pdf_service: Optional[PdfService] = None
    ):
        """
        Initialize resume service.

        Args:
            settings: Application settings
            ai_service: Shared LLM client (created from settings when omitted)
            extraction_service: Override for the extraction step
            html_service: Override for the HTML generation step
            pdf_service: Override for the rendering step
        """
        self.settings = settings
        ai_service = ai_service or AIService(settings)
        self.extraction_service = extraction_service or ExtractionService(settings, ai_service)
        self.html_service = html_service or HtmlService(settings, ai_service)
        self.pdf_service = pdf_service or PdfService(settings)

        logger.info("Resume service initialized")

    def analyze(self, raw_text: str, custom_input: Optional[str] = None) -> ResumeRecord:
        """
        Extract a resume record for review/editing without rendering.

        Args:
            raw_text: Text pasted by the user
            custom_input: Optional extra hints

        Returns:
            Extracted resume record
        """
        record, response = self.extraction_service.extract_with_response(raw_text, custom_input)
        if self.settings.save_debug_artifacts:
            self._save_artifacts(response=response, record=record)
        return record

    def build_pdf(self, record: ResumeRecord) -> bytes:
        """
        Generate HTML for a record and render it to PDF.

        Args:
            record: Structured (possibly user-edited) resume data

        Returns:
            PDF file contents
        """
        return self._render(record, save_record=True)

    def generate(self, raw_text: str, custom_input: Optional[str] = None) -> bytes:
        """
        Run the whole pipeline for pasted text.

        Args:
            raw_text: Text pasted by the user
            custom_input: Optional extra hints

        Returns:
            PDF file contents
        """
        logger.info("=" * 70)
        logger.info("⏱️  RESUME GENERATION STARTED")
        logger.info("=" * 70)
        start = time.time()

        record = self.analyze(raw_text, custom_input)
        logger.info(f"Structured info: {record.name or 'unnamed'}, {len(record.links)} links")
        # analyze() already saved the record artifact
        pdf_bytes = self._render(record, save_record=False)

        logger.info(f"✅ Resume generated in {time.time() - start:.2f}s")
        return pdf_bytes

    def _render(self, record: ResumeRecord, save_record: bool) -> bytes:
        html = self.html_service.generate(record)
        if self.settings.save_debug_artifacts:
            self._save_artifacts(record=record if save_record else None, html=html)
        return self.pdf_service.render(html)

    def _save_artifacts(
        self,
        response: Optional[str] = None,
        record: Optional[ResumeRecord] = None,
        html: Optional[str] = None
    ) -> None:
        """Write intermediate results under data/debug for troubleshooting prompts."""
        timestamp = datetime.now()
        if response is not None:
            save_text(response, get_debug_artifact_path("extraction", "txt", timestamp))
        if record is not None:
            save_json(record.model_dump(), get_debug_artifact_path("record", "json", timestamp))
        if html is not None:
            save_text(html, get_debug_artifact_path("resume", "html", timestamp))
        logger.info(f"💾 Debug artifacts saved ({timestamp:%H:%M:%S})")
