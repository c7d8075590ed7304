# Tasks Feature - Router

from datetime import datetime
from soapdesk.features.tasks.models import Task
from soapdesk.features.tasks.schemas import TaskCreate, TaskResponse, TaskUpdate
from soapdesk.shared.crud import OwnedResourceService, build_crud_router


class TaskService(OwnedResourceService[Task]):

    def apply_derived_fields(self, record: Task) -> None:
        if record.status == "completed":
            record.completed_at = record.completed_at or datetime.utcnow()
        else:
            record.completed_at = None


task_service = TaskService(Task, TaskResponse, label="Task", resource_type="task")

router = build_crud_router(
    task_service,
    TaskCreate,
    TaskUpdate,
    prefix="/tasks",
    tags=["Tasks"],
)
