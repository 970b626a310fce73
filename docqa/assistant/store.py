"""In-memory document store keyed by session.

Each session holds at most one document. Uploading again replaces the
stored index wholesale; nothing survives a process restart.
"""

import threading
from dataclasses import dataclass

from docqa.models.schemas import DocumentIndex


@dataclass(frozen=True, slots=True)
class StoredDocument:
    filename: str
    index: DocumentIndex


class DocumentStore:
    """Thread-safe mapping of session id to the session's document."""

    def __init__(self) -> None:
        self._documents: dict[str, StoredDocument] = {}
        self._lock = threading.Lock()

    def put(self, session_id: str, filename: str, index: DocumentIndex) -> StoredDocument:
        stored = StoredDocument(filename=filename, index=index)
        with self._lock:
            self._documents[session_id] = stored
        return stored

    def get(self, session_id: str) -> StoredDocument | None:
        with self._lock:
            return self._documents.get(session_id)

    def remove(self, session_id: str) -> bool:
        with self._lock:
            return self._documents.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)
