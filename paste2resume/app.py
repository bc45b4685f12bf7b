"""
Flask web application: form UI plus the JSON/PDF resume endpoints.
"""

import time
from typing import Optional, Tuple

from flask import Flask, Response, jsonify, render_template_string, request
from pydantic import ValidationError

from paste2resume.config import Settings, get_settings
from paste2resume.exceptions import InvalidRequestError
from paste2resume.models import ResumeRecord
from paste2resume.services.resume_service import ResumeService
from paste2resume.templates import HTML_TEMPLATE
from paste2resume.utils.logger import get_logger

logger = get_logger(__name__)

PDF_FILENAME = "resume.pdf"


def pdf_response(pdf_bytes: bytes) -> Response:
    """Wrap PDF bytes as a downloadable attachment."""
    return Response(
        pdf_bytes,
        mimetype="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{PDF_FILENAME}"'}
    )


def read_content_request() -> Tuple[str, Optional[str]]:
    """
    Pull the pasted content and optional hints out of the JSON body.

    Returns:
        Tuple of (content, custom_input)

    Raises:
        InvalidRequestError: If content is missing or blank
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise InvalidRequestError("Content is required")

    content = data.get("content")
    if not isinstance(content, str) or not content.strip():
        raise InvalidRequestError("Content is required")

    custom_input = data.get("customInput", data.get("custom_input"))
    if custom_input is not None and not isinstance(custom_input, str):
        custom_input = str(custom_input)

    return content, custom_input


def read_record_request() -> ResumeRecord:
    """
    Validate the edited record posted by the form.

    Raises:
        InvalidRequestError: If no record object was sent
        ValidationError: If the record cannot be coerced
    """
    data = request.get_json(silent=True) or {}
    record = data.get("record") if isinstance(data, dict) else None
    if not isinstance(record, dict):
        raise InvalidRequestError("Record is required")
    return ResumeRecord.from_structured(record)


def validation_message(error: ValidationError) -> str:
    """Summarize a pydantic error for the client."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
        for err in error.errors()
    )
    return f"Invalid record: {details}"


def create_app(
    settings: Optional[Settings] = None,
    resume_service: Optional[ResumeService] = None
) -> Flask:
    """
    Build the Flask application.

    Args:
        settings: Application settings (cached defaults when omitted)
        resume_service: Pipeline to use (built from settings when omitted)

    Returns:
        Configured Flask app
    """
    settings = settings or get_settings()
    resume_service = resume_service or ResumeService(settings)

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = settings.max_content_length
    app.extensions["resume_service"] = resume_service

    @app.route('/')
    def index():
        """Render the main page."""
        return render_template_string(HTML_TEMPLATE)

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    @app.route('/api/resume', methods=['POST'])
    def create_resume():
        """Paste-to-PDF in a single request."""
        try:
            content, custom_input = read_content_request()
        except InvalidRequestError as e:
            return jsonify({'error': str(e)}), 400

        start = time.time()
        try:
            pdf_bytes = resume_service.generate(content, custom_input)
            return pdf_response(pdf_bytes)

        except Exception:
            logger.exception(f"❌ Resume generation error after {time.time() - start:.2f}s")
            return jsonify({'error': 'Failed to process resume data'}), 500

    @app.route('/api/resume/extract', methods=['POST'])
    def extract_resume():
        """Return the structured record so the user can review it."""
        try:
            content, custom_input = read_content_request()
        except InvalidRequestError as e:
            return jsonify({'error': str(e)}), 400

        try:
            record = resume_service.analyze(content, custom_input)
            return jsonify({'record': record.model_dump()})

        except Exception:
            logger.exception("❌ Content analysis error")
            return jsonify({'error': 'Failed to analyze content'}), 500

    @app.route('/api/resume/render', methods=['POST'])
    def render_resume():
        """Generate the PDF from a (possibly edited) record."""
        try:
            record = read_record_request()
        except InvalidRequestError as e:
            return jsonify({'error': str(e)}), 400
        except ValidationError as e:
            return jsonify({'error': validation_message(e)}), 400

        try:
            pdf_bytes = resume_service.build_pdf(record)
            return pdf_response(pdf_bytes)

        except Exception:
            logger.exception("❌ Resume rendering error")
            return jsonify({'error': 'Failed to generate resume'}), 500

    logger.info("🌐 Web app created")
    return app
