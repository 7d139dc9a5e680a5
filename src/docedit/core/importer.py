"""Import transcoder: .docx bytes to editor markup via mammoth"""

import logging
from io import BytesIO
from pathlib import Path

import mammoth

from docedit.core.errors import ConversionError


logger = logging.getLogger(__name__)


def import_docx(data: bytes) -> str:
    """Convert .docx bytes to an HTML string for the editing surface.

    Raises ConversionError when the bytes are not a readable .docx package;
    partial output is never returned.
    """
    if not data:
        raise ConversionError("Failed to parse the document: the file is empty.")

    try:
        result = mammoth.convert_to_html(BytesIO(data))
    except Exception as e:
        raise ConversionError(
            "Failed to parse the document. Ensure it's a valid .docx file."
        ) from e

    for message in result.messages:
        logger.warning("mammoth %s: %s", message.type, message.message)
    return (result.value or "").strip()


def import_docx_file(path: Path) -> str:
    """Read a .docx file fully into memory and convert it."""
    return import_docx(Path(path).read_bytes())
