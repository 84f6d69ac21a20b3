"""
Application settings.
"""
import os
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional

import pandas as pd

from .models import Activity

DEMO = "demo"
DERIVED = "derived"
MODES = (DEMO, DERIVED)


class Config:
    """Settings read from the environment."""

    DATA_DIR = Path(os.getenv("INVENTORY_TRACKER_DATA_DIR", "data"))

    MODE = os.getenv("INVENTORY_TRACKER_MODE", DEMO).lower()
    TIMEZONE = os.getenv("INVENTORY_TRACKER_TIMEZONE", "UTC")
    LOG_LEVEL = os.getenv("INVENTORY_TRACKER_LOG_LEVEL", "INFO").upper()

    # Storage keys
    EMPLOYEES_KEY = "inv_employees_v2"
    TRANSACTIONS_KEY = "inv_txns_v2"
    SEASON_KEY = "inv_season_v2"

    # Demo mode keeps at least this many employees on the roster
    DEMO_ROSTER_SIZE = 10

    BRAND_COLOR = "#282a3b"


@dataclass
class LeaderboardConfig:
    """
    How a leaderboard is produced.

    mode is "derived" (aggregate the transaction log) or "demo" (synthesize
    metrics from rng). scored_activities lists the issue activities counted
    as installs; add an Activity member here to score a new activity.
    """

    mode: str = DERIVED
    rng: Optional[random.Random] = None
    timezone: str = "UTC"
    scored_activities: FrozenSet[str] = field(
        default_factory=lambda: frozenset({Activity.INSTALL.value})
    )

    def __post_init__(self):
        self.mode = str(self.mode).lower()
        if self.mode not in MODES:
            raise ValueError(f"Unknown leaderboard mode: {self.mode!r} (expected one of {MODES})")
        try:
            pd.Timestamp(0).tz_localize(self.timezone)
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {self.timezone!r}") from e
        if self.mode == DEMO and self.rng is None:
            self.rng = random.Random()

    @classmethod
    def from_settings(cls, rng: Optional[random.Random] = None) -> "LeaderboardConfig":
        return cls(mode=Config.MODE, rng=rng, timezone=Config.TIMEZONE)
