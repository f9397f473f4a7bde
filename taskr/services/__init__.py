from taskr.services.create_task_service import CreateTaskService
from taskr.services.delete_task_service import DeleteTaskService
from taskr.services.find_task_service import FindTaskService
from taskr.services.update_task_service import UpdateTaskService


__all__ = [
    "CreateTaskService",
    "DeleteTaskService",
    "FindTaskService",
    "UpdateTaskService",
]
