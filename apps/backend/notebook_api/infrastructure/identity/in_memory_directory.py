"""
============================================================
TARJETA CRC — infrastructure/identity/in_memory_directory.py
============================================================
Class: InMemoryIdentityDirectory

Responsibilities:
  - Directorio de usuarios en memoria (tests / local dev).
  - Mismo contrato que Cognito: resolve por email, lookup por subject id.

Constraints / Notes:
  - Thread-safe: Lock protege los índices.
  - Emails comparados tal cual (igual que el filtro exacto de Cognito).
============================================================
"""

from __future__ import annotations

from threading import Lock
from typing import Dict, Iterable

from ...domain.entities import Identity
from ...domain.services import IdentityDirectory


class InMemoryIdentityDirectory(IdentityDirectory):
    def __init__(
        self, directory_id: str = "local-pool", users: Iterable[Identity] = ()
    ) -> None:
        self._directory_id = directory_id
        self._lock = Lock()
        self._by_subject: Dict[str, Identity] = {}
        for user in users:
            self.add_user(user)

    @property
    def directory_id(self) -> str:
        return self._directory_id

    def add_user(self, identity: Identity) -> None:
        with self._lock:
            self._by_subject[identity.subject_id] = identity

    def resolve(self, email: str) -> Identity | None:
        with self._lock:
            for identity in self._by_subject.values():
                if identity.email == email:
                    return identity
        return None

    def lookup_by_identifier(self, subject_id: str) -> Identity | None:
        with self._lock:
            return self._by_subject.get(subject_id)
