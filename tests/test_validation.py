"""Field rules applied to employee payloads before they reach the store."""

import pytest

from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate
from employee_api.validation import format_violations, validate_employee


def test_complete_employee_has_no_violations(ann):
    assert validate_employee(EmployeeCreate(**ann)) == []


def test_every_missing_field_is_reported_in_order():
    violations = validate_employee(EmployeeCreate())
    assert violations == [
        "Field 'Name' is required",
        "Field 'Email' is required",
        "Field 'Phone' is required",
        "Field 'Department' is required",
    ]


@pytest.mark.parametrize("field", ["name", "email", "phone", "department"])
def test_blank_field_counts_as_missing(ann, field):
    ann[field] = "   "
    violations = validate_employee(EmployeeCreate(**ann))
    assert violations == [f"Field '{field.capitalize()}' is required"]


@pytest.mark.parametrize("email", ["not-an-email", "ann@", "@x.com", "ann x@x.com"])
def test_malformed_email_is_rejected(ann, email):
    ann["email"] = email
    assert validate_employee(EmployeeCreate(**ann)) == [
        "Field 'Email' must be a valid email address"
    ]


def test_missing_email_reports_required_not_format(ann):
    ann["email"] = ""
    assert validate_employee(EmployeeCreate(**ann)) == ["Field 'Email' is required"]


def test_update_uses_the_same_rules():
    payload = {"name": "", "email": "not-an-email", "phone": "555", "department": "Ops"}
    assert validate_employee(EmployeeUpdate(**payload)) == validate_employee(
        EmployeeCreate(**payload)
    )


def test_format_violations_joins_messages():
    violations = validate_employee(
        EmployeeCreate(phone="1", department="Eng", email="bad")
    )
    assert format_violations(violations) == (
        "Field 'Name' is required, Field 'Email' must be a valid email address"
    )


def test_validation_does_not_mutate_payload(ann):
    employee = EmployeeCreate(**ann)
    validate_employee(employee)
    assert employee.model_dump() == ann
