"""Service layer modules."""

from .ai_service import AIService
from .extraction_service import ExtractionService
from .html_service import HtmlService
from .pdf_service import PdfService
from .resume_service import ResumeService

__all__ = ["AIService", "ExtractionService", "HtmlService", "PdfService", "ResumeService"]
