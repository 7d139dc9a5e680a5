"""Document model serializer: DocumentModel to .docx bytes via python-docx

Output is deterministic: core properties are pinned and the zip container is
rewritten with a fixed member timestamp. The pinned timestamp (default
2000-01-01T00:00:00) is the only time-dependent content in the package.
"""

import logging
import re
import zipfile
from datetime import datetime
from io import BytesIO

from docx import Document
from docx.document import Document as DocxDocument
from docx.shared import Pt

from docedit.core.errors import SerializationError
from docedit.core.models import DocumentModel, Paragraph


logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP = datetime(2000, 1, 1)
DEFAULT_AUTHOR = "docedit"

# characters XML 1.0 forbids; tab, newline and carriage return are allowed
XML_ILLEGAL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def _heading_style(level: int) -> str:
    return f"Heading {level}"


def xml_safe(text: str) -> str:
    """Remove control characters that cannot appear in a WordprocessingML part."""
    return XML_ILLEGAL_RE.sub("", text)


def _add_paragraph(document: DocxDocument, paragraph: Paragraph) -> None:
    style = _heading_style(paragraph.heading) if paragraph.heading else None
    out = document.add_paragraph(style=style)
    for run in paragraph.runs:
        r = out.add_run(xml_safe(run.text))
        if run.bold:
            r.bold = True
        if run.italic:
            r.italic = True
        if run.size:
            r.font.size = Pt(run.size / 2)      # half-points -> points


def build_docx(doc: DocumentModel, timestamp: datetime = DEFAULT_TIMESTAMP, author: str = DEFAULT_AUTHOR) -> DocxDocument:
    """Build a python-docx Document with pinned core properties."""
    document = Document()
    props = document.core_properties
    props.author = author
    props.last_modified_by = author
    props.title = ""
    props.revision = 1
    props.created = timestamp
    props.modified = timestamp
    props.last_printed = timestamp
    for paragraph in doc.paragraphs:
        _add_paragraph(document, paragraph)
    return document


def _normalize_zip(blob: bytes, timestamp: datetime) -> bytes:
    """Rewrite every zip member with the same fixed timestamp, preserving order."""
    date_time = (max(timestamp.year, 1980), timestamp.month, timestamp.day,
                 timestamp.hour, timestamp.minute, timestamp.second)
    out = BytesIO()
    with zipfile.ZipFile(BytesIO(blob)) as src, zipfile.ZipFile(out, "w", zipfile.ZIP_DEFLATED) as dst:
        for info in src.infolist():
            member = zipfile.ZipInfo(info.filename, date_time=date_time)
            member.compress_type = zipfile.ZIP_DEFLATED
            dst.writestr(member, src.read(info.filename))
    return out.getvalue()


def document_to_docx(doc: DocumentModel, timestamp: datetime = DEFAULT_TIMESTAMP, author: str = DEFAULT_AUTHOR) -> bytes:
    """Serialize a DocumentModel to .docx bytes; same model, same bytes."""
    try:
        buffer = BytesIO()
        build_docx(doc, timestamp, author).save(buffer)
        data = _normalize_zip(buffer.getvalue(), timestamp)
    except Exception as e:
        raise SerializationError(f"Failed to generate the document: {e}") from e
    logger.debug("Serialized %d paragraph(s) into %d bytes", len(doc.paragraphs), len(data))
    return data
