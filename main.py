"""
Main entry point for the resume builder web UI.
"""

from dotenv import load_dotenv

from paste2resume.app import create_app
from paste2resume.config import get_settings
from paste2resume.utils.logger import setup_logging, get_logger
from paste2resume.utils.paths import ensure_data_directories, get_log_file_path

# Load environment variables
load_dotenv()


def main():
    """
    Main application entry point with web UI.
    """
    settings = get_settings()

    ensure_data_directories()
    setup_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        log_file=settings.log_file or str(get_log_file_path("web_ui"))
    )
    logger = get_logger(__name__)

    app = create_app(settings)

    print("\n" + "="*70)
    print("📄 AI RESUME BUILDER - WEB UI")
    print("="*70)
    print(f"🌐 Opening web UI at http://{settings.host}:{settings.port}")
    print(f"   Press Ctrl+C to stop\n")
    logger.info(f"Models: extraction={settings.ai_settings.extraction_model}, "
                f"generation={settings.ai_settings.generation_model}")

    app.run(debug=settings.debug, host=settings.host, port=settings.port, use_reloader=False)


if __name__ == "__main__":
    main()
