"""
Installer leaderboard.

Turns the roster, the transaction log and the season window into one
PerformanceRecord per installer plus a per-region rollup.
"""
import logging
import math
from datetime import timedelta
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from .config import DEMO, LeaderboardConfig
from .demo import synthesize_records
from .models import (
    NO_REASON,
    UNKNOWN_REGION,
    Employee,
    Leaderboard,
    PerformanceRecord,
    RegionRollup,
    Season,
    Transaction,
    TransactionType,
    as_text,
)

logger = logging.getLogger(__name__)

MIN_SCORE = 1
MAX_SCORE = 10

TRANSACTION_COLUMNS = [
    "employee_id",
    "type",
    "activity",
    "quantity",
    "timestamp",
    "loss_value",
    "loss_reason",
]


def running_total(values: pd.Series) -> float:
    """Left-to-right sum, so totals match adding the values one by one."""
    return sum(values.tolist(), 0.0)


def score_for(installs: int, losses: int) -> int:
    """Net installs, saturating at both ends of the 1-10 scale."""
    return int(np.clip(installs - losses, MIN_SCORE, MAX_SCORE))


def progress_for(score) -> int:
    percent = math.floor(score / MAX_SCORE * 100 + 0.5)
    return int(np.clip(percent, 0, 100))


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Normalise the log; unusable values become 0, "-" or NaT."""
    df = pd.DataFrame(
        [
            (
                as_text(t.employee_id),
                as_text(t.type),
                as_text(t.activity),
                t.quantity,
                as_text(t.timestamp),
                t.loss_value,
                t.loss_reason,
            )
            for t in transactions
        ],
        columns=TRANSACTION_COLUMNS,
    )
    for column in ("quantity", "loss_value"):
        values = pd.to_numeric(df[column], errors="coerce")
        df[column] = values.replace([np.inf, -np.inf], np.nan).fillna(0)
    df["loss_reason"] = df["loss_reason"].map(
        lambda reason: as_text(reason) or NO_REASON
    ).astype(object)
    df["timestamp"] = pd.to_datetime(
        df["timestamp"], errors="coerce", utc=True, format="ISO8601"
    )
    return df


def in_season(df: pd.DataFrame, season: Season, timezone: str = "UTC") -> pd.DataFrame:
    """Rows from the first instant of season.start through the last of season.end."""
    start = pd.Timestamp(season.start).tz_localize(timezone)
    stop = pd.Timestamp(season.end + timedelta(days=1)).tz_localize(timezone)
    mask = (df["timestamp"] >= start) & (df["timestamp"] < stop)
    return df[mask]


def dominant_reasons(loss_rows: pd.DataFrame) -> pd.Series:
    """Reason with the largest quantity per employee; first seen wins a tie."""
    if loss_rows.empty:
        return pd.Series(dtype=object)
    per_reason = loss_rows.groupby(["employee_id", "loss_reason"], sort=False)["quantity"].sum()
    best = per_reason.groupby(level="employee_id", sort=False).idxmax()
    return best.map(lambda key: key[1])


def derive_records(
    installers: List[Employee],
    transactions: Iterable[Transaction],
    season: Season,
    config: LeaderboardConfig,
) -> List[PerformanceRecord]:
    df = transactions_frame(transactions)
    window = in_season(df, season, config.timezone)

    installer_ids = {e.id for e in installers}
    orphans = ~window["employee_id"].isin(list(installer_ids))
    if orphans.any():
        logger.debug(f"{int(orphans.sum())} transactions in season match no installer")
    window = window[~orphans]

    issued = window[
        (window["type"] == TransactionType.ISSUE.value)
        & (window["activity"].isin(list(config.scored_activities)))
    ]
    lost = window[window["type"] == TransactionType.LOSS.value]

    installs = issued.groupby("employee_id")["quantity"].sum()
    losses = lost.groupby("employee_id")["quantity"].sum()
    loss_values = lost.groupby("employee_id")["loss_value"].agg(running_total)
    reasons = dominant_reasons(lost)

    records = []
    for emp in installers:
        emp_installs = int(installs.get(emp.id, 0))
        emp_losses = int(losses.get(emp.id, 0))
        score = score_for(emp_installs, emp_losses)
        records.append(
            PerformanceRecord(
                employee=emp,
                installs=emp_installs,
                losses=emp_losses,
                loss_value=float(loss_values.get(emp.id, 0.0)),
                loss_reason=str(reasons.get(emp.id, NO_REASON)),
                score=score,
                progress_percent=progress_for(score),
            )
        )
    return records


def rank_records(records: List[PerformanceRecord]) -> List[PerformanceRecord]:
    """Score, then installs, both descending; equal records keep roster order."""
    return sorted(records, key=lambda r: (-r.score, -r.installs))


def rollup_regions(records: List[PerformanceRecord]) -> List[RegionRollup]:
    if not records:
        return []
    frame = pd.DataFrame(
        [
            (r.employee.region or UNKNOWN_REGION, r.installs, r.losses, r.loss_value, r.score)
            for r in records
        ],
        columns=["region", "installs", "losses", "loss_value", "score"],
    )
    totals = (
        frame.groupby("region", sort=False, as_index=False)
        .agg(
            installs=("installs", "sum"),
            losses=("losses", "sum"),
            loss_value=("loss_value", running_total),
            score=("score", "sum"),
        )
        .sort_values("score", ascending=False, kind="stable")
    )
    return [
        RegionRollup(
            region=row.region,
            installs=int(row.installs),
            losses=int(row.losses),
            loss_value=float(row.loss_value),
            score=int(row.score),
        )
        for row in totals.itertuples(index=False)
    ]


def compute_leaderboard(
    employees: Iterable[Employee],
    transactions: Iterable[Transaction],
    season: Season,
    config: Optional[LeaderboardConfig] = None,
) -> Leaderboard:
    """
    Build the season leaderboard.

    Only employees whose role is Installer (any case) are ranked. In demo
    mode the metrics come from config.rng and the transaction log is ignored.

    Args:
        employees: current roster
        transactions: inventory transaction log
        season: inclusive scoring window
        config: mode and scoring options, derived mode when omitted

    Returns:
        Leaderboard: ranked records and region totals
    """
    config = config or LeaderboardConfig()
    installers = [e for e in employees if e.is_installer]

    if config.mode == DEMO:
        records = synthesize_records(installers, config.rng)
    else:
        records = derive_records(installers, transactions, season, config)

    ranked = rank_records(records)
    logger.debug(f"Leaderboard computed ({config.mode}): {len(ranked)} installers")
    return Leaderboard(per_employee=ranked, regions=rollup_regions(ranked))
