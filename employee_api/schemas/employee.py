# employee_api/schemas/employee.py
from typing import Optional
from pydantic import BaseModel

from employee_api.models.employee import EmployeeModel

class EmployeeBase(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    department: str = ""

class EmployeeCreate(EmployeeBase):
    pass

class EmployeeUpdate(EmployeeBase):
    pass

class EmployeeOut(BaseModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None

    @classmethod
    def from_model(cls, employee: EmployeeModel) -> "EmployeeOut":
        # Empty strings are dropped together with missing fields on output.
        return cls(
            id=employee.id,
            name=employee.name or None,
            email=employee.email or None,
            phone=employee.phone or None,
            department=employee.department or None,
        )

class MessageOut(BaseModel):
    message: str

class ErrorOut(BaseModel):
    error: str
