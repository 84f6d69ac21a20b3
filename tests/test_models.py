import os
from datetime import date
from pathlib import Path

import pytest

from inventory_tracker.config import Config
from inventory_tracker.models import (
    INSTALLER_ROLE,
    Activity,
    Employee,
    LossReason,
    Season,
    Transaction,
    TransactionType,
)
from inventory_tracker.seed import default_season, seed_employees


def test_employee_from_stored_dict():
    emp = Employee.from_dict(
        {"id": "abc", "name": "Quinn Patel", "role": "Installer", "empType": "Summer", "team": "Bravo", "region": "West"}
    )

    assert emp.employment_type == "Summer"
    assert emp.is_installer
    assert Employee.from_dict(emp.to_dict()) == emp


def test_employee_missing_fields_become_blank():
    emp = Employee.from_dict({"id": 7})

    assert emp.id == "7"
    assert emp.region == ""
    assert not emp.is_installer


def test_transaction_lenient_numbers():
    txn = Transaction.from_dict(
        {"employeeId": "a", "type": "loss", "qty": "two", "lossValue": "??", "lossReason": ""}
    )

    assert txn.quantity == 0
    assert txn.loss_value == 0.0
    assert txn.loss_reason is None


def test_transaction_accepts_enum_members():
    txn = Transaction(
        employee_id="a",
        type=TransactionType.LOSS,
        activity=Activity.INSTALL,
        quantity=1,
        loss_reason=LossReason.EXPIRED_OBSOLETE,
    )

    data = txn.to_dict()

    assert data["type"] == "loss"
    assert data["activity"] == "Install"
    assert data["lossReason"] == "Expired/Obsolete"


def test_season_from_dict_rejects_bad_dates():
    with pytest.raises(ValueError):
        Season.from_dict({"start": "June", "end": "2025-08-31"})


def test_default_season_is_current_summer():
    assert default_season(date(2031, 12, 31)) == Season(start=date(2031, 6, 1), end=date(2031, 8, 31))


def test_seed_roster():
    first, second = seed_employees(), seed_employees()

    assert len(first) == 10
    assert [e.employment_type for e in first].count("Summer") == 5
    assert {e.region for e in first} == {"East", "West", "South", "North"}
    assert {e.id for e in first}.isdisjoint(e.id for e in second)


def test_seed_roster_uses_installer_role():
    assert all(e.role == INSTALLER_ROLE for e in seed_employees())


@pytest.mark.skipif("INVENTORY_TRACKER_DATA_DIR" in os.environ, reason="data directory set in environment")
def test_default_data_dir_is_relative_to_working_directory():
    assert Config.DATA_DIR == Path("data")
