"""Outcomes — verifies tagged success/failure values.

Tests:
    - Success and Failure expose ok
    - Failure helpers carry kind, identifier and a descriptive message
"""

from employee_registry.core.outcome import (
    Failure, FailureKind, Success, already_exists, not_found,
)


def test_success_is_ok():
    assert Success({"id": "1"}).ok is True


def test_failure_is_not_ok():
    assert Failure(FailureKind.INTERNAL, "boom").ok is False


def test_already_exists_helper():
    failure = already_exists("42")
    assert failure.kind == FailureKind.ALREADY_EXISTS
    assert failure.identifier == "42"
    assert failure.message == "Employee with id 42 already exists"


def test_not_found_helper():
    failure = not_found("42")
    assert failure.kind == FailureKind.NOT_FOUND
    assert failure.message == "Employee with id 42 not found"


def test_failure_kind_values_serialize_to_string():
    assert FailureKind.ALREADY_EXISTS.value == "already_exists"
    assert FailureKind.NOT_FOUND.value == "not_found"
    assert FailureKind.INTERNAL.value == "internal"
