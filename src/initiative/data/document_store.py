"""File-system persistence for the YAML document."""
from __future__ import annotations

import logging
from pathlib import Path

from initiative.data.yaml_loader import dump_yaml, load_yaml
from initiative.domain.models import Document
from initiative.services.document_service import DocumentService
from initiative.services.errors import SaveLoadError

logger = logging.getLogger(__name__)


class DocumentStore:
    """Loads and saves the whole Document as a single YAML file."""

    def __init__(self, path: Path | str, service: DocumentService | None = None) -> None:
        self._path = Path(path)
        self._service = service or DocumentService()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Document:
        """Read the document; a missing file is an empty document."""
        if not self._path.exists():
            logger.info("No data file at %s, starting empty", self._path)
            return Document()
        payload = load_yaml(self._path)
        document = self._service.deserialize(payload)
        logger.info("Loaded %d game(s) from %s", len(document.games), self._path)
        return document

    def save(self, document: Document) -> None:
        """Write the whole document synchronously."""
        text = dump_yaml(self._service.serialize(document))
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(text, encoding="utf-8")
            # a failed write leaves the previous file intact
            tmp_path.replace(self._path)
        except OSError as exc:
            if tmp_path.parent.is_dir():
                tmp_path.unlink(missing_ok=True)
            raise SaveLoadError(f"Unable to write data file {self._path}: {exc}") from exc
        logger.info("Saved %d game(s) to %s", len(document.games), self._path)
