from .employee import Employee
from .task import Task, TaskStatus
from .user import Role, User
