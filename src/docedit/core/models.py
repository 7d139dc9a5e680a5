"""Markup tree nodes and the structured document model"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    """Block kinds recognised in the editor's markup"""
    heading1 = "heading1"
    heading2 = "heading2"
    heading3 = "heading3"
    paragraph = "paragraph"
    bold_run = "bold_run"
    italic_run = "italic_run"
    list_item = "list_item"
    unknown_block = "unknown_block"


class MarkupNode(BaseModel):
    """A single top-level node of the flat markup tree."""
    kind: NodeKind
    tag:  str                       # lower-case tag name, '#text' for bare text
    text: str                       # full text content, descendants included


class Run(BaseModel):
    """A styled span of text within a paragraph."""
    text:   str
    bold:   bool = False
    italic: bool = False
    size:   Optional[int] = Field(default=None, gt=0, description="Font size in half-points (32 == 16pt)")

    def same_style(self, other: "Run") -> bool:
        return (self.bold, self.italic, self.size) == (other.bold, other.italic, other.size)


class Paragraph(BaseModel):
    """A block-level element: ordered runs plus an optional heading level."""
    runs:    list[Run] = Field(default_factory=list)
    heading: Optional[int] = Field(default=None, ge=1, le=3)

    @property
    def text(self) -> str:
        return "".join(r.text for r in self.runs)


class DocumentModel(BaseModel):
    """Exportable document: ordered paragraphs and the tags dropped on the way in."""
    paragraphs: list[Paragraph] = Field(default_factory=list)
    dropped:    list[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.paragraphs
