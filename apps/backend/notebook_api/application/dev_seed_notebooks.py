"""
Name: Dev Seed Notebooks (Local-only)

Responsibilities:
  - Provision demo notebooks (two public, the rest private) for local runs
  - Provision matching demo users for the in-memory identity directory
  - Enforce safety guard: never in production
  - Keep operations idempotent (safe to run multiple times)

CRC:
  Component: ensure_demo_notebooks / ensure_demo_users
  Collaborators:
    - NotebookRepository (find_by_id/save)
    - InMemoryIdentityDirectory-like port (add_user/lookup_by_identifier)
    - Settings (dev_seed_notebooks/app_env)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..crosscutting.config import Settings
from ..crosscutting.logger import logger
from ..domain.entities import Identity, Notebook, NotebookVisibility
from ..domain.repositories import NotebookRepository


class UserDirectoryPort(Protocol):
    """R: Directory port needed by the seed task (in-memory only)."""

    def add_user(self, identity: Identity) -> None: ...

    def lookup_by_identifier(self, subject_id: str) -> Identity | None: ...


@dataclass(frozen=True, slots=True)
class _SeedNotebook:
    id: str
    name: str
    owner_id: str
    content: str
    public: bool = False


_ALICE = "x5e2612d-4eb7-4265-b4b5-4c845a2825f7"
_BOB = "b5e2612d-4eb7-4265-b4b5-4c845a2825f7"
_CAROL = "81d58348-a380-4ee9-a864-4d3d62915307"

DEMO_USERS: tuple[Identity, ...] = (
    Identity(subject_id=_ALICE, email="alice@example.com"),
    Identity(subject_id=_BOB, email="bob@example.com"),
    Identity(subject_id=_CAROL, email="carol@example.com"),
)

_DEMO_NOTEBOOKS: tuple[_SeedNotebook, ...] = (
    _SeedNotebook(
        "0",
        "Seneca",
        _ALICE,
        "We suffer more often in imagination than in reality.",
        public=True,
    ),
    _SeedNotebook(
        "1",
        "Marcus Aurelius",
        _ALICE,
        "You have power over your mind, not outside events.",
        public=True,
    ),
    _SeedNotebook("2", "Work Projects", _BOB, "Q3 roadmap"),
    _SeedNotebook("3", "Personal Journal", _BOB, "Day one."),
    _SeedNotebook("4", "Recipe Collection", _CAROL, "Sourdough, risotto"),
    _SeedNotebook("5", "Travel Plans", _CAROL, "Europe"),
    _SeedNotebook("6", "Study Notes", _BOB, "formal verification, tla+"),
)


def _assert_not_production(settings: Settings) -> None:
    """R: Fail-fast so demo data never lands in a real store."""
    if settings.is_production():
        raise RuntimeError(
            "FATAL: DEV_SEED_NOTEBOOKS is enabled in production. "
            "Safety guard prevents accidental seeding."
        )


def ensure_demo_notebooks(
    *, repository: NotebookRepository, settings: Settings
) -> int:
    """Crea los notebooks demo que falten. Devuelve cuántos creó."""
    _assert_not_production(settings)

    created = 0
    for seed in _DEMO_NOTEBOOKS:
        if repository.find_by_id(seed.id) is not None:
            continue
        repository.save(
            Notebook(
                id=seed.id,
                owner_id=seed.owner_id,
                name=seed.name,
                content=seed.content,
                visibility=(
                    NotebookVisibility.PUBLIC
                    if seed.public
                    else NotebookVisibility.PRIVATE
                ),
            )
        )
        created += 1

    logger.info("Dev seed notebooks: done", extra={"notebooks_created": created})
    return created


def ensure_demo_users(*, directory: UserDirectoryPort, settings: Settings) -> int:
    """Registra los usuarios demo en el directorio local. Devuelve cuántos agregó."""
    _assert_not_production(settings)

    added = 0
    for identity in DEMO_USERS:
        if directory.lookup_by_identifier(identity.subject_id) is None:
            directory.add_user(identity)
            added += 1
    return added
