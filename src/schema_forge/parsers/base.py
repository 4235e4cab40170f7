# src/schema_forge/parsers/base.py

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO


class TextExtractor(ABC):
    @abstractmethod
    def extract_text(self, source: str | Path | BinaryIO) -> str:
        """
        Convert a document into page-joined plain text.

        Requirements:
        - Deterministic output for same input
        - Pages appear in document order
        """
        raise NotImplementedError
