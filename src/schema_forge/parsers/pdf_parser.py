# src/schema_forge/parsers/pdf_parser.py

import logging
import re
from pathlib import Path
from typing import Any, BinaryIO, cast

import pdfplumber

from .base import TextExtractor

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r"\r\n|\n|\r")


class PdfTextExtractor(TextExtractor):
    """
    PDF to text, one labelled block per page:

        Page 1: <page text on one line>

        Page 2: ...
    """

    def extract_text(self, source: str | Path | BinaryIO) -> str:
        parts = []

        # pdfplumber.open accepts path-like or buffer objects; cast to Any
        with pdfplumber.open(cast(Any, source)) as pdf:
            for page_number, page in enumerate(pdf.pages, start=1):
                parts.append(
                    f"Page {page_number}: {self._flatten(page.extract_text() or '')}\n\n"
                )

        logger.info("Extracted text from %d PDF pages", len(parts))
        return "".join(parts)

    def _flatten(self, text: str) -> str:
        return _LINE_BREAKS.sub(" ", text).strip()
