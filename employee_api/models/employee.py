# employee_api/models/employee.py
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

class EmployeeModel(BaseModel):
    id: str = Field(default="", alias="_id")
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None

    class Config:
        populate_by_name = True

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "EmployeeModel":
        data = {k: v for k, v in document.items() if k not in ("_id", "id")}
        return cls(id=str(document["_id"]), **data)
