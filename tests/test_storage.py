import json
from datetime import date

import pytest

from inventory_tracker.config import Config
from inventory_tracker.models import Employee, Season, Transaction
from inventory_tracker.storage import (
    JsonStore,
    load_state,
    reset_demo,
    save_state,
)


@pytest.fixture
def store(tmp_path):
    return JsonStore(tmp_path / "state")


def test_load_missing_key_returns_fallback(store):
    assert store.load("nothing", {"a": 1}) == {"a": 1}


@pytest.mark.parametrize("content", ["{not json", "", "\x00\x01", '{"start": '])
def test_load_corrupt_content_returns_fallback(store, content):
    store.directory.mkdir(parents=True)
    (store.directory / "broken.json").write_text(content, encoding="utf-8")

    assert store.load("broken", []) == []


def test_load_undecodable_bytes_returns_fallback(store):
    store.directory.mkdir(parents=True)
    (store.directory / "binary.json").write_bytes(b"\xff\xfe\xfa")

    assert store.load("binary", "fallback") == "fallback"


def test_unavailable_directory_never_raises(tmp_path):
    blocker = tmp_path / "occupied"
    blocker.write_text("a file, not a directory")
    store = JsonStore(blocker / "nested")

    store.save("key", {"value": 1})

    assert store.load("key", "fallback") == "fallback"
    assert store.available is False


def test_save_then_load(store):
    store.save("season", {"start": "2025-06-01", "end": "2025-08-31"})

    assert store.load("season", None) == {"start": "2025-06-01", "end": "2025-08-31"}


def test_save_swallows_unserializable_values(store):
    store.save("bad", {"when": object()})

    assert store.load("bad", "fallback") == "fallback"


def test_load_state_seeds_empty_store(store):
    employees, transactions, season = load_state(store, mode="derived", today=date(2026, 3, 4))

    assert len(employees) == 10
    assert all(e.is_installer for e in employees)
    assert len({e.id for e in employees}) == 10
    assert transactions == []
    assert season == Season(start=date(2026, 6, 1), end=date(2026, 8, 31))


def test_demo_mode_tops_up_short_roster(store):
    short = [Employee(id="x", name="Solo", region="East")]
    store.save(Config.EMPLOYEES_KEY, [e.to_dict() for e in short])

    demo_roster, _, _ = load_state(store, mode="demo")
    derived_roster, _, _ = load_state(store, mode="derived")

    assert len(demo_roster) == 10
    assert derived_roster == short


def test_corrupt_season_falls_back_to_default(store):
    store.save(Config.SEASON_KEY, {"start": "yesterday"})

    _, _, season = load_state(store, mode="derived", today=date(2025, 1, 1))

    assert season == Season(start=date(2025, 6, 1), end=date(2025, 8, 31))


def test_state_round_trip(store):
    employees = [Employee(id=str(i), name=f"E{i}", team="Alpha", region="West") for i in range(10)]
    transactions = [
        Transaction(employee_id="1", type="issue", activity="Install", quantity=3, timestamp="2025-07-01T10:00:00Z"),
        Transaction(
            employee_id="2",
            type="loss",
            activity="Install",
            quantity=1,
            timestamp="2025-07-02T10:00:00Z",
            loss_value=75.0,
            loss_reason="Stolen",
        ),
    ]
    season = Season(start=date(2025, 5, 1), end=date(2025, 9, 30))

    save_state(store, employees, transactions, season)
    loaded = load_state(store, mode="demo")

    assert loaded == (employees, transactions, season)
    stored = json.loads((store.directory / f"{Config.TRANSACTIONS_KEY}.json").read_text())
    assert stored[1]["qty"] == 1
    assert stored[1]["lossReason"] == "Stolen"
    assert "lossValue" not in stored[0]


def test_reset_demo_reseeds_and_clears_log(store):
    season = Season(start=date(2025, 5, 1), end=date(2025, 9, 30))
    save_state(
        store,
        [Employee(id="x", name="Solo")],
        [Transaction(employee_id="x", type="issue", activity="Install", quantity=1)],
        season,
    )

    employees, transactions = reset_demo(store)

    assert len(employees) == 10
    assert transactions == []
    assert load_state(store, mode="derived") == (employees, [], season)


def test_infinite_quantities_load_as_zero(store):
    store.directory.mkdir(parents=True)
    (store.directory / f"{Config.TRANSACTIONS_KEY}.json").write_text(
        '[{"employeeId": "a", "type": "issue", "activity": "Install", "qty": 1e999,'
        ' "timestamp": "2025-07-01T10:00:00Z"},'
        ' {"employeeId": "a", "type": "loss", "activity": "Install", "qty": "inf",'
        ' "timestamp": "2025-07-01T10:00:00Z", "lossValue": "-inf"}]',
        encoding="utf-8",
    )

    _, transactions, _ = load_state(store, mode="derived")

    assert [t.quantity for t in transactions] == [0, 0]
    assert transactions[1].loss_value == 0.0
