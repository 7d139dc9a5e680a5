"""Render a DocumentModel back into editor markup"""

from html import escape

from docedit.core.models import DocumentModel, Paragraph, Run


def _wrap_run(run: Run, bold_implied: bool = False) -> str:
    text = escape(run.text, quote=False)
    if run.italic:
        text = f"<em>{text}</em>"
    if run.bold and not bold_implied:
        text = f"<strong>{text}</strong>"
    return text


def render_paragraph(paragraph: Paragraph) -> str:
    """Render one paragraph as a top-level element.

    Headings render as <hN>; bold and size are implied by the level, so only
    italic runs are wrapped inside them. A lone bold-only or italic-only run renders as a top-level
    <strong>/<em>, mirroring how such blocks are read on export.
    """
    if paragraph.heading:
        body = "".join(_wrap_run(r, bold_implied=True) for r in paragraph.runs)
        return f"<h{paragraph.heading}>{body}</h{paragraph.heading}>"

    if len(paragraph.runs) == 1:
        run = paragraph.runs[0]
        if run.bold and not run.italic:
            return f"<strong>{escape(run.text, quote=False)}</strong>"
        if run.italic and not run.bold:
            return f"<em>{escape(run.text, quote=False)}</em>"

    return "<p>" + "".join(_wrap_run(r) for r in paragraph.runs) + "</p>"


def document_to_html(doc: DocumentModel) -> str:
    """Render every paragraph in order; an empty model renders as ''."""
    return "".join(render_paragraph(p) for p in doc.paragraphs)
