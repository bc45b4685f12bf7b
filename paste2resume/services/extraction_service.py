"""
Extraction of structured resume data from pasted profile text.
"""

import time
from typing import Optional, Tuple

from paste2resume.config import Settings
from paste2resume.exceptions import ExtractionError, InvalidRequestError
from paste2resume.models import ResumeRecord
from paste2resume.services.ai_service import AIService
from paste2resume.utils.logger import get_logger
from paste2resume.utils.structured_text import parse_structured_text

logger = get_logger(__name__)


EXTRACTION_SYSTEM_PROMPT = """
You are a document analyzer. Your task is to extract the important data for a resume based on the specified format.
You will be given messy user info copied from a website and need to extract the data according to the format.

Extract and organize the following information in a structured way:
- name: The person's full name
- age: The person's age (as a number)
- location: Where the person is located
- email: Contact email address
- phone: Contact phone number
- links: List of relevant links (LinkedIn, GitHub, portfolio, etc.)
- interests: List each interest with a brief description
- work_experience: For each position include company, position, start_date, end_date, and description
- education: For each entry include school, degree, field_of_study, and graduation_year
- certifications: For each certification include name, organization, and date_earned
- resume_style_notes: Notes about the desired style, industry focus, or special formatting

Format your response as a valid JSON object with these fields, but DO NOT use curly braces in your response.
Instead, use a clear structured format with field names followed by values.
For arrays, use a numbered list format.
""".strip()

# Top-level names the decoder may treat as new fields
KNOWN_FIELDS = set(ResumeRecord.model_fields) | set(ResumeRecord.ALIASES)

# Item keys per list field, including the list's synonyms
ENTRY_FIELDS = {
    field: ResumeRecord.ENTRY_TYPES[ResumeRecord.ALIASES.get(field, field)].known_keys()
    for field in KNOWN_FIELDS
    if ResumeRecord.ALIASES.get(field, field) in ResumeRecord.ENTRY_TYPES
}


def build_extraction_prompt(raw_text: str, custom_input: Optional[str] = None) -> Tuple[str, str]:
    """
    Build the system and user messages for the extraction call.

    Args:
        raw_text: Text pasted by the user
        custom_input: Optional extra hints from the user

    Returns:
        Tuple of (system_prompt, user_prompt)
    """
    system_prompt = EXTRACTION_SYSTEM_PROMPT
    if custom_input and custom_input.strip():
        system_prompt += f"\n\nADDITIONAL INFORMATION: {custom_input.strip()}"
    return system_prompt, f"USER INFO: {raw_text}"


class ExtractionService:
    """Ask the model for structured resume fields and decode its answer."""

    def __init__(self, settings: Settings, ai_service: AIService):
        self.settings = settings
        self.ai_service = ai_service
        self.model = settings.ai_settings.extraction_model
        self.temperature = settings.ai_settings.extraction_temperature

    def extract(self, raw_text: str, custom_input: Optional[str] = None) -> ResumeRecord:
        """
        Extract a resume record from pasted text.

        Args:
            raw_text: Text pasted by the user (e.g. a LinkedIn profile)
            custom_input: Optional extra instructions or facts

        Returns:
            ResumeRecord with every field the model could find
        """
        record, _ = self.extract_with_response(raw_text, custom_input)
        return record

    def extract_with_response(
        self, raw_text: str, custom_input: Optional[str] = None
    ) -> Tuple[ResumeRecord, str]:
        """
        Extract a resume record and keep the raw model answer.

        Args:
            raw_text: Text pasted by the user
            custom_input: Optional extra instructions or facts

        Returns:
            Tuple of (record, raw model response)

        Raises:
            InvalidRequestError: If raw_text is empty
            ExtractionError: If the model call fails
        """
        if not raw_text or not raw_text.strip():
            raise InvalidRequestError("Content is required")

        system_prompt, user_prompt = build_extraction_prompt(raw_text, custom_input)

        logger.info(f"🤖 Extracting resume data ({len(raw_text)} chars) with {self.model}...")
        start = time.time()
        try:
            response = self.ai_service.generate_completion(
                user_prompt,
                model=self.model,
                system_prompt=system_prompt,
                temperature=self.temperature,
            )
        except Exception as e:
            logger.error(f"❌ Extraction failed after {time.time() - start:.2f}s: {e}")
            raise ExtractionError(f"Extraction request failed: {e}", model=self.model) from e

        logger.debug(f"Raw extraction response:\n{response}")

        record = ResumeRecord.from_structured(parse_structured_text(response, KNOWN_FIELDS, ENTRY_FIELDS))
        if record.is_empty():
            logger.warning("⚠️ Model response contained no recognisable resume fields")

        logger.info(
            f"✅ Extraction finished in {time.time() - start:.2f}s "
            f"({len(record.work_experience)} positions, {len(record.education)} education entries)"
        )
        return record, response
