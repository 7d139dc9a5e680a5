"""Glue between file acquisition, the editing surface, and export"""

import logging
from pathlib import Path
from typing import Callable, Optional

from docedit.config import Settings, load_config
from docedit.core.errors import ConversionError, DocEditError, SerializationError, ValidationError
from docedit.core.export import html_to_document
from docedit.core.importer import import_docx
from docedit.core.serialize import document_to_docx
from docedit.editor.surface import EditingSurface
from docedit.logs import configure_logging
from docedit.util.fs import has_extension, save_bytes


logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


def _user_message(error: Exception) -> str:
    """Short user-facing text for a failure."""
    if isinstance(error, (ConversionError, ValidationError)):
        return str(error)
    if isinstance(error, SerializationError):
        return "Failed to generate the document."
    return f"Failed to save the document: {error}"


class Orchestrator:
    """Wires import into the surface and the surface into export + save.

    Every failure is reported once through notify and re-raised to the
    caller; nothing is retried.
    """

    def __init__(
        self,
        settings: Settings,
        surface: Optional[EditingSurface] = None,
        notify: Optional[Notifier] = None,
        ) -> None:
        self.settings = settings
        self.surface = surface or EditingSurface()
        self._notify = notify or (lambda msg: None)

    def open_file(self, path: Path) -> str:
        """Validate the extension, read the whole file, and load it into the surface."""
        path = Path(path)
        if not has_extension(path, self.settings.accepted_extensions):
            error = ValidationError(
                f"Please upload a valid {'/'.join(self.settings.accepted_extensions)} file."
            )
            self._notify(_user_message(error))
            raise error
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.error("Could not read %s: %s", path, e)
            self._notify(f"Failed to open the document: {e}")
            raise
        return self.on_file_acquired(data)

    def on_file_acquired(self, data: bytes) -> str:
        """Import bytes and replace the surface content; the surface is untouched on failure."""
        try:
            markup = import_docx(data)
        except ConversionError as e:
            logger.error("Import failed: %s", e)
            self._notify(_user_message(e))
            raise
        self.surface.replace(markup)
        logger.info("Loaded document (%d chars of markup)", len(markup))
        return markup

    def on_export_requested(self) -> Path:
        """Transcode the current snapshot, serialize it, and save under the fixed file name."""
        target = Path(self.settings.output_dir) / self.settings.output_filename
        try:
            doc = html_to_document(self.surface.get_snapshot(), self.settings.preserve_inline)
            data = document_to_docx(doc, self.settings.document_timestamp, self.settings.document_author)
            saved = save_bytes(data, target)
        except (DocEditError, OSError) as e:
            self.on_save_failure(e)
            raise
        logger.info("Exported %d paragraph(s) to %s", len(doc.paragraphs), saved)
        return saved

    def on_save_failure(self, error: Exception) -> None:
        logger.error("Export failed: %s", error)
        self._notify(_user_message(error))


def create_orchestrator(overrides: dict = None, notify: Optional[Notifier] = None) -> Orchestrator:
    """Load settings, configure logging, and return an Orchestrator over a fresh surface."""
    settings = load_config(overrides=overrides)
    configure_logging(settings.log_level)
    return Orchestrator(settings, EditingSurface(), notify=notify)
