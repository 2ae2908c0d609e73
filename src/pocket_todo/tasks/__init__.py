from .task_models import NotFoundError, Task, TaskError, ValidationError
from .task_store import TaskListStore

__all__ = ["NotFoundError", "Task", "TaskError", "TaskListStore", "ValidationError"]
