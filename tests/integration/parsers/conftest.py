from pathlib import Path

import pytest
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from schema_forge.parsers import PdfTextExtractor


def _create_requirements_pdf(path: Path) -> None:
    """Creates a deterministic two-page requirements document."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    width, height = LETTER

    # Page 1
    text = c.beginText(40, height - 50)
    page1_lines = [
        "CAMPSITE BOOKING REQUIREMENTS",
        "",
        "Campers create an account with email and phone number.",
        "Each campsite has a name, a region and a nightly price.",
    ]
    for line in page1_lines:
        text.textLine(line)
    c.drawText(text)
    c.showPage()

    # Page 2
    text = c.beginText(40, height - 50)
    page2_lines = [
        "RESERVATIONS:",
        "A reservation links a camper to a campsite for a date range.",
    ]
    for line in page2_lines:
        text.textLine(line)
    c.drawText(text)
    c.showPage()

    c.save()


def _create_blank_pdf(path: Path) -> None:
    c = canvas.Canvas(str(path), pagesize=LETTER)
    c.showPage()
    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _create_requirements_pdf(dir_path / "requirements.pdf")
    _create_blank_pdf(dir_path / "blank.pdf")

    return dir_path


@pytest.fixture(scope="module")
def requirements_text(pdf_dir: Path) -> str:
    """Extract the requirements PDF once, reuse across tests."""
    return PdfTextExtractor().extract_text(pdf_dir / "requirements.pdf")
