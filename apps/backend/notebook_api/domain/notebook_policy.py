"""
===============================================================================
TARJETA CRC — domain/notebook_policy.py
===============================================================================

Módulo:
    Política de Acceso a Notebooks (equivalente local del policy set Cedar)

Responsabilidades:
    - Definir reglas puras de acceso a notebooks (sin AWS, sin FastAPI).
    - Separar "policy" de "stores" (stores traen grants, policy decide).
    - Ser 100% testeable: funciones puras, inputs explícitos.

Colaboradores:
    - domain.entities.Notebook, Grant
    - infrastructure.policies.in_memory: motor de autorización local.
    - application/usecases/sharing: owner check antes de compartir / ver ACL.

Reglas (mismas que el policy store):
    - Owner puede todo.
    - Cualquiera puede leer un notebook público.
    - Un grant explícito permite su acción sobre su recurso.
===============================================================================
"""

from __future__ import annotations

from typing import Iterable

from .entities import Grant, Notebook
from .value_objects import NotebookAction, PrincipalRef


def is_owner(notebook: Notebook, principal: PrincipalRef | None) -> bool:
    if principal is None:
        return False
    return notebook.is_owned_by(principal.subject_id)


def _has_grant(
    notebook: Notebook,
    principal: PrincipalRef,
    action: NotebookAction,
    grants: Iterable[Grant],
) -> bool:
    return any(
        g.principal == principal and g.resource_id == notebook.id and g.action == action
        for g in grants
    )


def can_access_notebook(
    notebook: Notebook,
    principal: PrincipalRef | None,
    action: NotebookAction,
    *,
    grants: Iterable[Grant] = (),
) -> bool:
    """Evalúa la acción para el principal."""
    if principal is None:
        return False

    if is_owner(notebook, principal):
        return True

    if action == NotebookAction.READ and notebook.is_public:
        return True

    return _has_grant(notebook, principal, action, grants)


def can_manage_sharing(notebook: Notebook, principal: PrincipalRef | None) -> bool:
    """Compartir y ver el ACL: solo el owner."""
    return is_owner(notebook, principal)
