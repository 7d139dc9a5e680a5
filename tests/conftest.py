"""Root test configuration: shared .docx builders and cwd isolation"""

from io import BytesIO

import pytest
from docx import Document


def build_sample_docx() -> bytes:
    """A small .docx with a heading, mixed-style paragraph, and subheading."""
    document = Document()
    document.add_heading("Quarterly Report", level=1)
    p = document.add_paragraph("Revenue grew ")
    p.add_run("strongly").bold = True
    p.add_run(" this ")
    p.add_run("quarter").italic = True
    p.add_run(".")
    document.add_heading("Outlook", level=2)
    document.add_paragraph("Stable.")
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture(name="sample_docx")
def sample_docx_fixture() -> bytes:
    return build_sample_docx()


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so config.yaml and outputs are isolated."""
    monkeypatch.chdir(tmp_path)
    for name in ("OUTPUT_DIR", "OUTPUT_FILENAME", "ACCEPTED_EXTENSIONS", "PRESERVE_INLINE",
                 "DOCUMENT_TIMESTAMP", "DOCUMENT_AUTHOR", "LOG_LEVEL", "APP_NAME"):
        monkeypatch.delenv(f"DOCEDIT_{name}", raising=False)
