"""
Exceptions raised by the resume pipeline.
"""

from typing import Optional


class ResumeError(Exception):
    """Base class for every error raised while building a resume."""


class InvalidRequestError(ResumeError):
    """Raised when the caller supplied missing or unusable input."""


class ConfigurationError(ResumeError):
    """Raised when an AI provider cannot be configured."""


class ExtractionError(ResumeError):
    """
    Raised when structured data could not be extracted from pasted text.

    Attributes:
        message: Error description
        model: Model that was asked to do the extraction
    """

    def __init__(self, message: str, model: Optional[str] = None):
        self.message = message
        self.model = model
        super().__init__(f"{message} (model: {model})" if model else message)


class HtmlGenerationError(ResumeError):
    """Raised when the model did not return a usable HTML document."""


class RenderError(ResumeError):
    """Raised when the headless browser failed to produce a PDF."""
