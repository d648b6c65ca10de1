"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/sharing.py
===============================================================================
Class/Module:
    Sharing Router

Responsibilities:
    - PUT /share-notebook: compartir un notebook por email.
    - GET /get-acl/{resourceId}: ACL del notebook (emails), con entrada
      provisoria opcional (?pending=<email>) justo después de compartir.
    - GET /shared-with-me: notebooks compartidos con el caller.
    - Traducir SharingError -> RFC7807.

Collaborators:
    - application.usecases.sharing (Share/GetAcl/ListSharedWithMe)
    - identity.cognito_auth.require_caller
    - container (factories DI)
    - schemas.sharing / schemas.notebooks (DTOs)

Notas:
    - Endpoints sync (def): FastAPI los corre en el threadpool, así las
      llamadas bloqueantes a boto3 no frenan el event loop.
    - DependencyError se propaga y lo mapea api/exception_handlers.py.
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from notebook_api.application.usecases.sharing import (
    GetAclUseCase,
    ListSharedWithMeUseCase,
    ShareNotebookUseCase,
)
from notebook_api.container import (
    get_acl_use_case,
    get_list_shared_with_me_use_case,
    get_share_notebook_use_case,
)
from notebook_api.domain.entities import Caller
from notebook_api.identity.cognito_auth import require_caller

from ..error_mapping import raise_sharing_error
from ..schemas.notebooks import NotebookRes
from ..schemas.sharing import AclEntryRes, AclRes, ShareNotebookReq, ShareNotebookRes

router = APIRouter()


@router.put(
    "/share-notebook",
    response_model=ShareNotebookRes,
    tags=["sharing"],
)
def share_notebook(
    req: ShareNotebookReq,
    use_case: ShareNotebookUseCase = Depends(get_share_notebook_use_case),
    caller: Caller = Depends(require_caller),
):
    result = use_case.execute(req.resource_id, req.email, actor=caller)
    if result.error is not None:
        raise_sharing_error(result.error, resource_id=req.resource_id)

    return ShareNotebookRes(
        message=result.message, already_shared=bool(result.already_shared)
    )


@router.get(
    "/get-acl/{resource_id}",
    response_model=AclRes,
    tags=["sharing"],
)
def get_acl(
    resource_id: str,
    pending: str | None = Query(
        None,
        max_length=320,
        description="Email recién compartido; se antepone si aún no aparece",
    ),
    use_case: GetAclUseCase = Depends(get_acl_use_case),
    caller: Caller = Depends(require_caller),
):
    result = use_case.execute(resource_id, actor=caller, provisional_email=pending)
    if result.error is not None:
        raise_sharing_error(result.error, resource_id=resource_id)

    entries = result.acl.entries if result.acl is not None else []
    return AclRes(
        acl=[e.email for e in entries],
        entries=[AclEntryRes(email=e.email, provisional=e.provisional) for e in entries],
    )


@router.get(
    "/shared-with-me",
    response_model=list[NotebookRes],
    tags=["sharing"],
)
def shared_with_me(
    use_case: ListSharedWithMeUseCase = Depends(get_list_shared_with_me_use_case),
    caller: Caller = Depends(require_caller),
):
    result = use_case.execute(actor=caller)
    return [NotebookRes.from_entity(n) for n in result.notebooks]
