from pathlib import Path

import pytest
from docx import Document
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def write_pdf(path: Path, lines: list[str], title: str = "", author: str = "", encrypt: str | None = None) -> Path:
    c = canvas.Canvas(str(path), pagesize=letter, encrypt=encrypt)
    if title:
        c.setTitle(title)
    if author:
        c.setAuthor(author)
    for line in lines:
        c.drawString(72, 720, line)
        c.showPage()
    c.save()
    return path


@pytest.fixture()
def sample_pdf_path(tmp_path: Path) -> Path:
    """Single-page PDF with known text, title and author."""
    return write_pdf(
        tmp_path / "sample.pdf",
        ["Hello PDF World"],
        title="Quarterly Report",
        author="Jane Roe",
    )


@pytest.fixture()
def multi_page_pdf_path(tmp_path: Path) -> Path:
    return write_pdf(tmp_path / "multi.pdf", ["Page one content", "Page two content"])


@pytest.fixture()
def empty_pdf_path(tmp_path: Path) -> Path:
    """Valid PDF with a blank page and no text."""
    path = tmp_path / "empty.pdf"
    c = canvas.Canvas(str(path), pagesize=letter)
    c.showPage()
    c.save()
    return path


@pytest.fixture()
def encrypted_pdf_path(tmp_path: Path) -> Path:
    return write_pdf(tmp_path / "locked.pdf", ["Top secret"], encrypt="hunter2")


@pytest.fixture()
def sample_docx_path(tmp_path: Path) -> Path:
    """Word document with two paragraphs and core properties."""
    path = tmp_path / "memo.docx"
    document = Document()
    document.add_paragraph("Merger discussion with Acme")
    document.add_paragraph("Please keep confidential")
    document.core_properties.author = "John Doe"
    document.core_properties.title = "Merger Memo"
    document.save(str(path))
    return path


@pytest.fixture()
def sample_text_path(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text("I like bananas", encoding="utf-8")
    return path


def write_pdf_with_info(path: Path, text: str, info: dict[str, str]) -> Path:
    """Write a one-page PDF whose info dictionary holds arbitrary keys."""
    stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    info_entries = " ".join(f"/{name} ({value})" for name, value in info.items())
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R"
        b" /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        f"<< {info_entries} >>".encode("latin-1"),
    ]
    body = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, obj in enumerate(objects, start=1):
        offsets.append(len(body))
        body += b"%d 0 obj\n" % number + obj + b"\nendobj\n"
    xref_at = len(body)
    body += b"xref\n0 %d\n0000000000 65535 f \n" % (len(objects) + 1)
    for offset in offsets:
        body += b"%010d 00000 n \n" % offset
    body += b"trailer\n<< /Size %d /Root 1 0 R /Info %d 0 R >>\n" % (len(objects) + 1, len(objects))
    body += b"startxref\n%d\n%%%%EOF\n" % xref_at
    path.write_bytes(bytes(body))
    return path


@pytest.fixture()
def forged_info_pdf_path(tmp_path: Path) -> Path:
    """PDF whose info dictionary uses the names of reserved record fields."""
    return write_pdf_with_info(
        tmp_path / "forged.pdf",
        "Hello PDF World",
        {
            "Title": "Board Minutes",
            "OriginalPath": "forged/path.txt",
            "ProcessingException": "forged failure",
            "DocumentText": "forged text",
            "Native": "forged bytes",
        },
    )
