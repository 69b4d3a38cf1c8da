# employee_api/schemas/__init__.py
from .employee import EmployeeCreate, EmployeeUpdate, EmployeeOut, MessageOut, ErrorOut
