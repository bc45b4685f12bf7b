"""
HTML to PDF rendering using a headless Playwright browser.
"""

import time
from typing import Dict

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from paste2resume.config import Settings
from paste2resume.exceptions import RenderError
from paste2resume.utils.logger import get_logger

logger = get_logger(__name__)


class PdfService:
    """Render resume HTML to PDF bytes with headless Chromium."""

    def __init__(self, settings: Settings):
        """
        Initialize PDF service.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self.render_settings = settings.render_settings

        logger.info(f"PDF service initialized (headless={self.render_settings.headless})")

    @property
    def margins(self) -> Dict[str, str]:
        margin = self.render_settings.margin
        return {"top": margin, "right": margin, "bottom": margin, "left": margin}

    def render(self, html: str) -> bytes:
        """
        Render an HTML document to PDF.

        A fresh browser is launched for every document and always closed
        afterwards.

        Args:
            html: Complete HTML document

        Returns:
            PDF file contents

        Raises:
            RenderError: If the browser could not load or print the page
        """
        if not html or not html.strip():
            raise RenderError("No HTML to render")

        options = self.render_settings
        launch_options = {"headless": options.headless, "args": list(options.browser_args)}
        if options.executable_path:
            launch_options["executable_path"] = options.executable_path

        logger.info(f"🖨️ Rendering PDF ({options.page_format}, margins {options.margin})...")
        start = time.time()

        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(**launch_options)
                try:
                    context = browser.new_context(ignore_https_errors=True)
                    page = context.new_page()
                    page.set_content(
                        html,
                        wait_until=options.wait_until,
                        timeout=options.timeout_ms
                    )
                    pdf_bytes = page.pdf(
                        format=options.page_format,
                        margin=self.margins,
                        print_background=options.print_background
                    )
                finally:
                    browser.close()

        except PlaywrightError as e:
            logger.error(f"❌ Error generating PDF: {e}")
            raise RenderError(f"Browser failed to render the resume: {e}") from e

        logger.info(f"✅ PDF rendered in {time.time() - start:.2f}s ({len(pdf_bytes):,} bytes)")
        return pdf_bytes
