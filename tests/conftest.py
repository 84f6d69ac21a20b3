from datetime import date

import pytest

from inventory_tracker.models import Employee, Season, Transaction


@pytest.fixture
def season():
    return Season(start=date(2025, 6, 1), end=date(2025, 8, 31))


@pytest.fixture
def make_employee():
    def _make(emp_id, region="East", role="Installer", name=None, employment_type="Full-time"):
        return Employee(
            id=emp_id,
            name=name or f"Employee {emp_id}",
            role=role,
            employment_type=employment_type,
            team="Alpha",
            region=region,
        )

    return _make


@pytest.fixture
def issue():
    def _issue(emp_id, qty, timestamp="2025-07-01T10:00:00Z", activity="Install"):
        return Transaction(
            employee_id=emp_id,
            type="issue",
            activity=activity,
            quantity=qty,
            timestamp=timestamp,
        )

    return _issue


@pytest.fixture
def loss():
    def _loss(emp_id, qty, value=0.0, reason="Damaged", timestamp="2025-07-02T10:00:00Z"):
        return Transaction(
            employee_id=emp_id,
            type="loss",
            activity="Install",
            quantity=qty,
            timestamp=timestamp,
            loss_value=value,
            loss_reason=reason,
        )

    return _loss
