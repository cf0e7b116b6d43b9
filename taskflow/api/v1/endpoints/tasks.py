"""Tasks API: CRUD, toggle, reorder, and the today/overdue views.

Fixed paths (/today, /overdue, /reorder) are declared before /{task_id}.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, status

from taskflow.api.v1.dependencies import CurrentUser, get_task_service
from taskflow.application.dtos.task import TaskFilters
from taskflow.application.use_cases.tasks import TaskService
from taskflow.domain.enums import Priority, TaskStatus
from taskflow.schemas.common import Envelope, Row, ok
from taskflow.schemas.task import TaskCreateRequest, TaskReorderRequest, TaskUpdateRequest

router = APIRouter()

Service = Annotated[TaskService, Depends(get_task_service)]


@router.get("", response_model=Envelope[list[Row]], response_model_exclude_unset=True)
async def list_tasks(
    user: CurrentUser,
    service: Service,
    status_filter: Annotated[TaskStatus | None, Query(alias="status")] = None,
    priority: Annotated[Priority | None, Query()] = None,
    category_id: Annotated[str | None, Query()] = None,
    search: Annotated[str | None, Query(max_length=255)] = None,
    tags: Annotated[list[str] | None, Query()] = None,
) -> Any:
    """List the caller's tasks by position. ``tags`` may repeat; all must match."""
    filters = TaskFilters(
        status=status_filter.value if status_filter else None,
        priority=priority.value if priority else None,
        category_id=category_id or None,
        search=search or None,
        tags=tuple(tags or ()),
    )
    return ok(await service.list_tasks(user.id, filters))


@router.get("/today", response_model=Envelope[list[Row]], response_model_exclude_unset=True)
async def today_tasks(user: CurrentUser, service: Service) -> Any:
    """Tasks created or starting today (configured timezone), most urgent first."""
    return ok(await service.today_tasks(user.id))


@router.get("/overdue", response_model=Envelope[list[Row]], response_model_exclude_unset=True)
async def overdue_tasks(user: CurrentUser, service: Service) -> Any:
    """Unfinished tasks past their estimated end."""
    return ok(await service.overdue_tasks(user.id))


@router.put("/reorder", response_model=Envelope[Any], response_model_exclude_unset=True)
async def reorder_tasks(user: CurrentUser, service: Service, body: TaskReorderRequest) -> Any:
    await service.reorder_tasks(user.id, body.task_ids)
    return ok(message="Tasks reordered successfully")


@router.get("/{task_id}", response_model=Envelope[Row], response_model_exclude_unset=True)
async def get_task(task_id: str, user: CurrentUser, service: Service) -> Any:
    return ok(await service.get_task(user.id, task_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[Row],
    response_model_exclude_unset=True,
)
async def create_task(user: CurrentUser, service: Service, body: TaskCreateRequest) -> Any:
    task = await service.create_task(user.id, body.model_dump(mode="json", exclude_unset=True))
    return ok(task, "Task created successfully")


@router.put("/{task_id}", response_model=Envelope[Row], response_model_exclude_unset=True)
async def update_task(
    task_id: str, user: CurrentUser, service: Service, body: TaskUpdateRequest
) -> Any:
    task = await service.update_task(user.id, task_id, body.changes())
    return ok(task, "Task updated successfully")


@router.patch("/{task_id}/toggle", response_model=Envelope[Row], response_model_exclude_unset=True)
async def toggle_task(task_id: str, user: CurrentUser, service: Service) -> Any:
    task = await service.toggle_task(user.id, task_id)
    return ok(task, f"Task marked as {task.get('status', 'updated')}")


@router.delete("/{task_id}", response_model=Envelope[Any], response_model_exclude_unset=True)
async def delete_task(task_id: str, user: CurrentUser, service: Service) -> Any:
    await service.delete_task(user.id, task_id)
    return ok(message="Task deleted successfully")
