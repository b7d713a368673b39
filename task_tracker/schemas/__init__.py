from .user import UserRegister, UserLogin, UserOut
from .tokens import Token
from .employee import EmployeeCreate, EmployeeRef, EmployeeOut, EmployeeWithTaskCount
from .task import TaskCreate, TaskUpdate, TaskOut
from .dashboard import DashboardOut, EmployeeTaskBreakdown, DailyActivity
