"""
Seed roster and default season.
"""
import uuid
from datetime import date
from typing import List, Optional

from .models import INSTALLER_ROLE, Employee, EmploymentType, Season

SEED_ROSTER = [
    ("Jordan Kim", EmploymentType.FULL_TIME, "Alpha", "East"),
    ("Taylor Brooks", EmploymentType.FULL_TIME, "Alpha", "West"),
    ("Riley Gomez", EmploymentType.FULL_TIME, "Alpha", "South"),
    ("Casey Morgan", EmploymentType.FULL_TIME, "Alpha", "North"),
    ("Avery Chen", EmploymentType.FULL_TIME, "Alpha", "West"),
    ("Peyton Diaz", EmploymentType.SUMMER, "Bravo", "East"),
    ("Quinn Patel", EmploymentType.SUMMER, "Bravo", "West"),
    ("Drew Allen", EmploymentType.SUMMER, "Bravo", "South"),
    ("Skylar Nguyen", EmploymentType.SUMMER, "Bravo", "North"),
    ("Emerson Lee", EmploymentType.SUMMER, "Bravo", "East"),
]


def seed_employees() -> List[Employee]:
    """Ten installers with fresh ids."""
    return [
        Employee(
            id=uuid.uuid4().hex,
            name=name,
            role=INSTALLER_ROLE,
            employment_type=emp_type.value,
            team=team,
            region=region,
        )
        for name, emp_type, team, region in SEED_ROSTER
    ]


def default_season(today: Optional[date] = None) -> Season:
    """Summer of the current year."""
    today = today or date.today()
    return Season.for_year(today.year)
