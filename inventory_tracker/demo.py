"""
Synthetic leaderboard metrics for demos.
"""
import random
from typing import List

from .models import Employee, LossReason, PerformanceRecord

DEMO_REASONS = [r.value for r in LossReason if r is not LossReason.OTHER]


def synthesize_record(emp: Employee, rng: random.Random) -> PerformanceRecord:
    installs = rng.randint(35, 120)
    losses = rng.randint(0, max(0, int(installs * 0.2)))
    unit_cost = rng.randint(40, 250)
    return PerformanceRecord(
        employee=emp,
        installs=installs,
        losses=losses,
        loss_value=float(losses * unit_cost),
        loss_reason=rng.choice(DEMO_REASONS),
        # display values, not derived from installs/losses
        score=rng.randint(1, 10),
        progress_percent=rng.randint(35, 100),
    )


def synthesize_records(installers: List[Employee], rng: random.Random) -> List[PerformanceRecord]:
    return [synthesize_record(emp, rng) for emp in installers]
