from .base import TextExtractor
from .pdf_parser import PdfTextExtractor

__all__ = ["PdfTextExtractor", "TextExtractor"]
