"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/notebooks.py
===============================================================================
Class/Module:
    Notebook Router

Responsibilities:
    - Exponer el CRUD de notebooks.
    - Convertir requests HTTP -> inputs de casos de uso.
    - Traducir NotebookError -> RFC7807.

Collaborators:
    - application.usecases.notebooks
    - identity.cognito_auth.require_caller
    - container (factories DI)
    - schemas.notebooks (DTOs Pydantic)
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from notebook_api.application.usecases.notebooks import (
    CreateNotebookInput,
    CreateNotebookUseCase,
    DeleteNotebookUseCase,
    GetNotebookUseCase,
    ListNotebooksUseCase,
    UpdateNotebookUseCase,
)
from notebook_api.container import (
    get_create_notebook_use_case,
    get_delete_notebook_use_case,
    get_get_notebook_use_case,
    get_list_notebooks_use_case,
    get_update_notebook_use_case,
)
from notebook_api.crosscutting.error_responses import internal_error
from notebook_api.domain.entities import Caller, NotebookVisibility
from notebook_api.identity.cognito_auth import require_caller

from ..error_mapping import raise_notebook_error
from ..schemas.notebooks import CreateNotebookReq, NotebookRes, UpdateNotebookReq

router = APIRouter()


@router.get("/notebooks", response_model=list[NotebookRes], tags=["notebooks"])
def list_notebooks(
    use_case: ListNotebooksUseCase = Depends(get_list_notebooks_use_case),
    caller: Caller = Depends(require_caller),
):
    result = use_case.execute(actor=caller)
    if result.error is not None:
        raise_notebook_error(result.error)
    return [NotebookRes.from_entity(n) for n in result.notebooks]


@router.post(
    "/notebooks",
    response_model=NotebookRes,
    status_code=201,
    tags=["notebooks"],
)
def create_notebook(
    req: CreateNotebookReq,
    use_case: CreateNotebookUseCase = Depends(get_create_notebook_use_case),
    caller: Caller = Depends(require_caller),
):
    result = use_case.execute(
        CreateNotebookInput(
            name=req.name,
            content=req.content,
            visibility=(
                NotebookVisibility.PUBLIC if req.public else NotebookVisibility.PRIVATE
            ),
            actor=caller,
        )
    )
    if result.error is not None:
        raise_notebook_error(result.error)
    if result.notebook is None:
        raise internal_error()
    return NotebookRes.from_entity(result.notebook)


@router.get("/notebooks/{notebook_id}", response_model=NotebookRes, tags=["notebooks"])
def get_notebook(
    notebook_id: str,
    use_case: GetNotebookUseCase = Depends(get_get_notebook_use_case),
    caller: Caller = Depends(require_caller),
):
    result = use_case.execute(notebook_id, actor=caller)
    if result.error is not None:
        raise_notebook_error(result.error, notebook_id=notebook_id)
    return NotebookRes.from_entity(result.notebook)


@router.put("/notebooks/{notebook_id}", response_model=NotebookRes, tags=["notebooks"])
def update_notebook(
    notebook_id: str,
    req: UpdateNotebookReq,
    use_case: UpdateNotebookUseCase = Depends(get_update_notebook_use_case),
    caller: Caller = Depends(require_caller),
):
    result = use_case.execute(
        notebook_id,
        actor=caller,
        name=req.name,
        content=req.content,
        visibility=req.visibility(),
    )
    if result.error is not None:
        raise_notebook_error(result.error, notebook_id=notebook_id)
    return NotebookRes.from_entity(result.notebook)


@router.delete("/notebooks/{notebook_id}", status_code=204, tags=["notebooks"])
def delete_notebook(
    notebook_id: str,
    use_case: DeleteNotebookUseCase = Depends(get_delete_notebook_use_case),
    caller: Caller = Depends(require_caller),
):
    result = use_case.execute(notebook_id, actor=caller)
    if result.error is not None:
        raise_notebook_error(result.error, notebook_id=notebook_id)
    return Response(status_code=204)
