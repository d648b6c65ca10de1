"""
===============================================================================
TARJETA CRC — schemas/sharing.py
===============================================================================

Módulo:
    Schemas HTTP para sharing (share-notebook / get-acl)

Responsabilidades:
    - Definir DTOs de request/response con los nombres camelCase que usa el
      cliente web.
    - Aceptar notebookId como alias de resourceId.
    - NO validar presencia de campos: un campo vacío es INVALID_REQUEST del
      caso de uso (400), no un 422 de FastAPI.
===============================================================================
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ShareNotebookReq(BaseModel):
    """Request para compartir un notebook por email."""

    model_config = ConfigDict(populate_by_name=True)

    resource_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("resourceId", "notebookId", "resource_id"),
        max_length=256,
        description="Id del notebook a compartir",
    )
    email: str | None = Field(
        default=None, max_length=320, description="Email del usuario destino"
    )


class ShareNotebookRes(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    already_shared: bool = Field(serialization_alias="alreadyShared")


class AclEntryRes(BaseModel):
    email: str
    provisional: bool = False


class AclRes(BaseModel):
    """ACL: `acl` es la lista plana de emails; `entries` agrega el flag provisional."""

    acl: list[str]
    entries: list[AclEntryRes]
