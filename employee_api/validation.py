# employee_api/validation.py
from typing import Callable, List, NamedTuple, Optional

from email_validator import EmailNotValidError, validate_email

from employee_api.schemas.employee import EmployeeBase


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class FieldRule(NamedTuple):
    field: str
    label: str
    check: Optional[Callable[[str], bool]] = None
    message: str = ""


EMPLOYEE_RULES = (
    FieldRule("name", "Name"),
    FieldRule("email", "Email", _is_email, "must be a valid email address"),
    FieldRule("phone", "Phone"),
    FieldRule("department", "Department"),
)


def validate_employee(employee: EmployeeBase) -> List[str]:
    """Return one message per invalid field, in rule order.

    An empty list means the employee may be persisted. A missing value
    masks any format check on the same field.
    """
    violations = []
    for rule in EMPLOYEE_RULES:
        value = getattr(employee, rule.field) or ""
        if not value.strip():
            violations.append(f"Field '{rule.label}' is required")
        elif rule.check is not None and not rule.check(value):
            violations.append(f"Field '{rule.label}' {rule.message}")
    return violations


def format_violations(violations: List[str]) -> str:
    return ", ".join(violations)
