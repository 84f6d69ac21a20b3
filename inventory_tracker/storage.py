"""
Local key-value store for the dashboard state.

Each key is a JSON file in one directory. Reads fall back, writes are
best-effort; neither raises.
"""
import json
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

from .config import DEMO, Config
from .models import Employee, Season, Transaction
from .seed import default_season, seed_employees

logger = logging.getLogger(__name__)


class JsonStore:
    """
    JSON blob store

    Example:
        store = JsonStore(Path("data"))
        season = store.load("inv_season_v2", {"start": "2025-06-01", "end": "2025-08-31"})
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    @property
    def available(self) -> bool:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Storage directory unavailable: {self.directory} ({e})")
            return False
        return self.directory.is_dir()

    def load(self, key: str, fallback):
        path = self._path(key)
        try:
            if not path.is_file():
                return fallback
            raw = path.read_text(encoding="utf-8")
            if not raw:
                return fallback
            return json.loads(raw)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {key} from {path}, using fallback: {e}")
            return fallback

    def save(self, key: str, value) -> None:
        if not self.available:
            return
        path = self._path(key)
        try:
            path.write_text(json.dumps(value, ensure_ascii=False), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Could not save {key} to {path}: {e}")


def load_employees(store: JsonStore) -> List[Employee]:
    rows = store.load(Config.EMPLOYEES_KEY, None)
    if not isinstance(rows, list):
        return seed_employees()
    return [Employee.from_dict(row) for row in rows if isinstance(row, dict)]


def load_transactions(store: JsonStore) -> List[Transaction]:
    rows = store.load(Config.TRANSACTIONS_KEY, [])
    if not isinstance(rows, list):
        return []
    return [Transaction.from_dict(row) for row in rows if isinstance(row, dict)]


def load_season(store: JsonStore, today: Optional[date] = None) -> Season:
    data = store.load(Config.SEASON_KEY, None)
    try:
        return Season.from_dict(data)
    except (TypeError, KeyError, ValueError):
        return default_season(today)


def load_state(
    store: JsonStore, mode: str = DEMO, today: Optional[date] = None
) -> Tuple[List[Employee], List[Transaction], Season]:
    """
    Read roster, transaction log and season, seeding whatever is missing.

    In demo mode a roster shorter than Config.DEMO_ROSTER_SIZE is replaced
    by the seed roster.
    """
    employees = load_employees(store)
    if mode == DEMO and len(employees) < Config.DEMO_ROSTER_SIZE:
        logger.info(f"Roster has {len(employees)} employees, loading demo installers")
        employees = seed_employees()
    return employees, load_transactions(store), load_season(store, today)


def save_employees(store: JsonStore, employees: List[Employee]) -> None:
    store.save(Config.EMPLOYEES_KEY, [e.to_dict() for e in employees])


def save_transactions(store: JsonStore, transactions: List[Transaction]) -> None:
    store.save(Config.TRANSACTIONS_KEY, [t.to_dict() for t in transactions])


def save_season(store: JsonStore, season: Season) -> None:
    store.save(Config.SEASON_KEY, season.to_dict())


def save_state(
    store: JsonStore,
    employees: List[Employee],
    transactions: List[Transaction],
    season: Season,
) -> None:
    save_employees(store, employees)
    save_transactions(store, transactions)
    save_season(store, season)


def reset_demo(store: JsonStore) -> Tuple[List[Employee], List[Transaction]]:
    """Seed roster, empty transaction log. The season is left alone."""
    employees = seed_employees()
    save_employees(store, employees)
    save_transactions(store, [])
    logger.info(f"Demo data reset: {len(employees)} installers loaded")
    return employees, []
