"""
Inventory usage and incentives tracker.
"""

from .config import Config, LeaderboardConfig
from .export import export_filename, to_delimited_text
from .leaderboard import compute_leaderboard
from .models import (
    Activity,
    Employee,
    EmploymentType,
    Leaderboard,
    LossReason,
    PerformanceRecord,
    RegionRollup,
    Season,
    Transaction,
    TransactionType,
)
from .storage import JsonStore

__all__ = [
    "Activity",
    "Config",
    "Employee",
    "EmploymentType",
    "JsonStore",
    "Leaderboard",
    "LeaderboardConfig",
    "LossReason",
    "PerformanceRecord",
    "RegionRollup",
    "Season",
    "Transaction",
    "TransactionType",
    "compute_leaderboard",
    "export_filename",
    "to_delimited_text",
]
