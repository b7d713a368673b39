# task_tracker/models/employee.py
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from task_tracker.database import Base
from task_tracker.models.base import utcnow


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    tasks = relationship("Task", back_populates="employee")
    user = relationship("User", back_populates="employee", uselist=False)
