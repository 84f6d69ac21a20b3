import logging
import random
from datetime import date

import pandas as pd
import plotly.express as px
import streamlit as st

from inventory_tracker.config import DEMO, Config, LeaderboardConfig
from inventory_tracker.export import employees_csv, export_filename, transactions_csv
from inventory_tracker.leaderboard import compute_leaderboard
from inventory_tracker.models import EmploymentType, Season
from inventory_tracker.storage import JsonStore, load_state, reset_demo, save_state

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("inventory_tracker.app")

st.set_page_config(
    page_title="Inventory Usage & Incentives Tracker",
    page_icon="📦",
    layout="wide",
)


def format_currency(value: float) -> str:
    if pd.isna(value):
        return "$0"
    return f"${value:,.0f}"


@st.cache_data
def leaderboard_for(employees, transactions, season, mode, timezone):
    rng = random.Random() if mode == DEMO else None
    config = LeaderboardConfig(mode=mode, rng=rng, timezone=timezone)
    return compute_leaderboard(employees, transactions, season, config)


def select_season(season: Season) -> Season:
    st.sidebar.header("Season Window")

    selected_dates = st.sidebar.date_input(
        "Season",
        value=(season.start, season.end),
    )

    if isinstance(selected_dates, tuple) and len(selected_dates) == 2:
        start_date, end_date = selected_dates
        season = Season(start=start_date, end=end_date)

    st.sidebar.caption(
        "Adjust dates to recalculate the derived leaderboard. "
        "In demo mode values are synthesized."
    )
    return season


def employee_table(records, badge_summer=False) -> pd.DataFrame:
    rows = []
    for r in records:
        name = r.employee.name
        if badge_summer and r.employee.employment_type == EmploymentType.SUMMER.value:
            name = f"{name} ☀ Summer"
        rows.append(
            {
                "Employee": name,
                "Type": r.employee.employment_type,
                "Region": r.employee.region,
                "Installs": r.installs,
                "Losses": r.losses,
                "Loss $": format_currency(r.loss_value),
                "Reason": r.loss_reason or "-",
                "Score": r.score,
                "Progress": r.progress_percent,
            }
        )
    return pd.DataFrame(rows)


def region_table(regions) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Region": r.region,
                "Installs": r.installs,
                "Losses": r.losses,
                "Loss $": format_currency(r.loss_value),
                "Score": r.score,
            }
            for r in regions
        ]
    )


def show_employee_table(records, score_label="Score", badge_summer=False):
    table = employee_table(records, badge_summer=badge_summer)
    if table.empty:
        st.info("No installers on the roster.")
        return
    st.dataframe(
        table.rename(columns={"Score": score_label}),
        use_container_width=True,
        hide_index=True,
        column_config={
            "Progress": st.column_config.ProgressColumn(
                "Progress", min_value=0, max_value=100, format="%d%%"
            ),
        },
    )


def create_bar(data, x, y, title):
    if data.empty:
        st.info(f"No data available for {title.lower()}.")
        return
    fig = px.bar(
        data,
        x=x,
        y=y,
        title=title,
        text_auto=True,
        color_discrete_sequence=[Config.BRAND_COLOR],
    )
    fig.update_layout(height=380, xaxis_title=None, yaxis_title=None)
    st.plotly_chart(fig, use_container_width=True)


store = JsonStore(Config.DATA_DIR)

try:
    employees, transactions, season = load_state(store, mode=Config.MODE)
    leaderboard_config = LeaderboardConfig.from_settings()
except Exception as e:
    st.error(f"Unable to prepare the dashboard. {e}")
    st.stop()

season = select_season(season)

st.markdown(
    f"""
    <div style="background:{Config.BRAND_COLOR};color:white;border-radius:16px;padding:16px">
    <h2 style="color:white;margin:0">📦 Inventory Usage & Incentives Tracker</h2>
    </div>
    """,
    unsafe_allow_html=True,
)

export_col1, export_col2, reset_col = st.columns(3)

with reset_col:
    if st.button("Reset Demo Data", use_container_width=True):
        employees, transactions = reset_demo(store)
        st.toast(f"Demo data reset: {len(employees)} installers loaded")

save_state(store, employees, transactions, season)

with export_col1:
    st.download_button(
        "Export Employees",
        data=employees_csv(employees).encode("utf-8"),
        file_name=export_filename("employees", date.today()),
        mime="text/csv",
        use_container_width=True,
    )

with export_col2:
    st.download_button(
        "Export Transactions",
        data=transactions_csv(transactions).encode("utf-8"),
        file_name=export_filename("transactions", date.today()),
        mime="text/csv",
        use_container_width=True,
    )

board = leaderboard_for(
    employees,
    transactions,
    season,
    leaderboard_config.mode,
    leaderboard_config.timezone,
)

tabs = st.tabs(["Leaderboard", "Incentives"])

with tabs[0]:
    st.subheader("🏆 Installer Leaderboard (Season)")
    st.caption(f"Season: **{season.start:%b %d, %Y}** to **{season.end:%b %d, %Y}**")

    show_employee_table(board.per_employee, badge_summer=True)

    if board.per_employee:
        leader = board.per_employee[0]
        st.caption(
            f"Current leader: **{leader.employee.name}** with a score of **{leader.score}** "
            f"and **{leader.installs}** installs."
        )

    st.markdown("### Top Regions")
    regions = region_table(board.regions)
    region_left, region_right = st.columns(2)
    with region_left:
        if regions.empty:
            st.info("No regions to show.")
        else:
            st.dataframe(regions, use_container_width=True, hide_index=True)
    with region_right:
        create_bar(regions, "Region", "Score", "Region Score")

with tabs[1]:
    st.subheader("🎯 Programs & Installer Progress")

    program_col, season_col = st.columns(2)
    with program_col:
        st.markdown(
            """
            #### Installers – Summer Competition
            - Competition for **top team/region** during the season window.
            - Prize: **$3,000** at end of summer or Mexico trip.
            - Company will **match amount to charity** of winner's choice.
            """
        )
        st.caption("We show a normalized **Score (1–10)** and **Progress %** toward incentive.")
    with season_col:
        st.markdown("#### Season Window")
        st.write(f"{season.start.isoformat()} – {season.end.isoformat()}")
        st.caption("Change the season in the sidebar.")

    st.markdown("### Installer Incentive Progress")
    show_employee_table(board.per_employee, score_label="Score (1–10)")

st.markdown("---")
st.caption(f"Leaderboard mode: {leaderboard_config.mode}. Data directory: {Config.DATA_DIR}")
