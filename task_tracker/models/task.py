# task_tracker/models/task.py
import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from task_tracker.database import Base
from task_tracker.models.base import utcnow


class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, default="", nullable=False)
    status = Column(
        Enum(TaskStatus, name="task_status", values_callable=lambda statuses: [s.value for s in statuses]),
        default=TaskStatus.PENDING,
        nullable=False,
    )
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)

    # System dates
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    employee = relationship("Employee", back_populates="tasks")
