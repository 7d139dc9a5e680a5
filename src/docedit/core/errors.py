"""Exception taxonomy for import, export, and file handling"""


class DocEditError(Exception):
    """Base class for all docedit failures."""


class ConversionError(DocEditError):
    """Input bytes or markup could not be parsed into the expected structure."""


class SerializationError(DocEditError):
    """A document model could not be turned into output bytes."""


class ValidationError(DocEditError):
    """A file was rejected before conversion (e.g. wrong extension)."""
