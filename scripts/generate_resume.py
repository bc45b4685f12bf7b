#!/usr/bin/env python3
"""
Build a resume PDF from a text file without starting the web UI.

Usage:
    python scripts/generate_resume.py profile.txt [--custom-input TEXT] [--output resume.pdf]
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from paste2resume.config import get_settings
from paste2resume.exceptions import ResumeError
from paste2resume.services import ResumeService
from paste2resume.utils.logger import setup_logging


def main():
    """Run the resume pipeline on a local file."""
    parser = argparse.ArgumentParser(description="Generate a resume PDF from pasted profile text")
    parser.add_argument("input", type=Path, help="Text file with the pasted profile content")
    parser.add_argument("--custom-input", default=None, help="Additional information for the resume")
    parser.add_argument("--output", "-o", type=Path, default=Path("resume.pdf"), help="PDF output path")
    parser.add_argument("--config", default=None, help="Optional JSON configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    load_dotenv()
    settings = get_settings(args.config)
    setup_logging(level="DEBUG" if args.verbose else settings.log_level, log_file=settings.log_file)

    if not args.input.exists():
        print(f"❌ Input file not found: {args.input}")
        return 1

    content = args.input.read_text(encoding="utf-8")
    print(f"📄 Generating resume from {args.input} ({len(content):,} chars)...")

    try:
        pdf_bytes = ResumeService(settings).generate(content, args.custom_input)
    except ResumeError as e:
        print(f"❌ {e}")
        return 1

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_bytes(pdf_bytes)
    print(f"✅ Saved {args.output} ({len(pdf_bytes):,} bytes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
