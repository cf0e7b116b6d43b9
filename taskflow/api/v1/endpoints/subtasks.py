"""Subtasks API, nested under /tasks/{task_id}/subtasks."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, status

from taskflow.api.v1.dependencies import CurrentUser, get_subtask_service
from taskflow.application.use_cases.subtasks import SubtaskService
from taskflow.schemas.common import Envelope, Row, ok
from taskflow.schemas.subtask import SubtaskCreateRequest, SubtaskUpdateRequest

router = APIRouter()

Service = Annotated[SubtaskService, Depends(get_subtask_service)]


@router.get("", response_model=Envelope[list[Row]], response_model_exclude_unset=True)
async def list_subtasks(task_id: str, user: CurrentUser, service: Service) -> Any:
    return ok(await service.list_subtasks(user.id, task_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[Row],
    response_model_exclude_unset=True,
)
async def create_subtask(
    task_id: str, user: CurrentUser, service: Service, body: SubtaskCreateRequest
) -> Any:
    subtask = await service.create_subtask(user.id, task_id, body.model_dump())
    return ok(subtask, "Subtask created successfully")


@router.put("/{subtask_id}", response_model=Envelope[Row], response_model_exclude_unset=True)
async def update_subtask(
    task_id: str,
    subtask_id: str,
    user: CurrentUser,
    service: Service,
    body: SubtaskUpdateRequest,
) -> Any:
    subtask = await service.update_subtask(user.id, task_id, subtask_id, body.changes())
    return ok(subtask, "Subtask updated successfully")


@router.patch(
    "/{subtask_id}/toggle", response_model=Envelope[Row], response_model_exclude_unset=True
)
async def toggle_subtask(task_id: str, subtask_id: str, user: CurrentUser, service: Service) -> Any:
    subtask = await service.toggle_subtask(user.id, task_id, subtask_id)
    state = "complete" if subtask.get("completed") else "incomplete"
    return ok(subtask, f"Subtask marked as {state}")


@router.delete("/{subtask_id}", response_model=Envelope[Any], response_model_exclude_unset=True)
async def delete_subtask(task_id: str, subtask_id: str, user: CurrentUser, service: Service) -> Any:
    await service.delete_subtask(user.id, task_id, subtask_id)
    return ok(message="Subtask deleted successfully")
