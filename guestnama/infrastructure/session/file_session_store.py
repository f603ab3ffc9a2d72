from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from guestnama.application.ports.session_store_port import SessionStorePort
from guestnama.domain.entities.user import SessionUser
from guestnama.domain.exceptions import SessionStoreError
from guestnama.infrastructure.mappers.storage_mapper import (
    map_row_to_session_user,
    map_session_user_to_row,
)


logger = logging.getLogger(__name__)

SESSION_NAMESPACE = "guestnama_db_v1"
SESSION_KEY = "guestnama_session"


class FileSessionStore(SessionStorePort):
    """Single session slot kept in a JSON document on disk.

    Layout: ``{"guestnama_db_v1": {"guestnama_session": {...identity...}}}``.
    Other namespaces in the same document are preserved on write.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        namespace: str = SESSION_NAMESPACE,
        key: str = SESSION_KEY,
    ):
        self._path = Path(path)
        self._namespace = namespace
        self._key = key

    def get(self) -> SessionUser | None:
        if not self._path.exists():
            return None
        try:
            document = self._read_document()
            bucket = document.get(self._namespace) or {}
            row = bucket.get(self._key)
            if row is None:
                return None
            return map_row_to_session_user(row)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            raise SessionStoreError(f"Unreadable session file {self._path}.") from exc

    def set(self, user: SessionUser) -> None:
        document = self._read_document_or_empty()
        bucket = document.get(self._namespace)
        if not isinstance(bucket, dict):
            bucket = {}
        bucket[self._key] = map_session_user_to_row(user)
        document[self._namespace] = bucket
        self._write_document(document)

    def clear(self) -> None:
        if not self._path.exists():
            return
        document = self._read_document_or_empty()
        bucket = document.get(self._namespace)
        if isinstance(bucket, dict):
            bucket.pop(self._key, None)
            if not bucket:
                document.pop(self._namespace, None)
        self._write_document(document)

    def _read_document(self) -> dict[str, Any]:
        with self._path.open("r", encoding="utf-8") as handle:
            document = json.load(handle)
        if not isinstance(document, dict):
            raise ValueError("Session document must be a JSON object.")
        return document

    def _read_document_or_empty(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            return self._read_document()
        except (OSError, ValueError) as exc:
            logger.warning("file_session_store: discarding_unreadable_document path=%s error=%s", self._path, exc)
            return {}

    def _write_document(self, document: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(f"{self._path.name}.tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(document, handle, indent=2)
        os.replace(tmp_path, self._path)
