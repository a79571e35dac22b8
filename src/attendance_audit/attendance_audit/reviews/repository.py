from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AuditQueueEntry


class AuditQueueRepository(Protocol):
    def replace_all(self, entries: Sequence[AuditQueueEntry]) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[AuditQueueEntry]:
        raise NotImplementedError

    def get(self, entry_id: str) -> Optional[AuditQueueEntry]:
        raise NotImplementedError

    def save(self, entry: AuditQueueEntry) -> None:
        raise NotImplementedError


class InMemoryAuditQueueRepository:
    """Process-local store; insertion order is preserved."""

    def __init__(self):
        self._entries: dict[str, AuditQueueEntry] = {}

    def replace_all(self, entries: Sequence[AuditQueueEntry]) -> None:
        self._entries = {e.entry_id: e for e in entries}

    def list_all(self) -> Sequence[AuditQueueEntry]:
        return list(self._entries.values())

    def get(self, entry_id: str) -> Optional[AuditQueueEntry]:
        return self._entries.get(entry_id)

    def save(self, entry: AuditQueueEntry) -> None:
        self._entries[entry.entry_id] = entry
