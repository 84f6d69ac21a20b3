"""
CSV export.
"""
from datetime import date
from typing import Iterable, List, Mapping, Optional


def _quote(value) -> str:
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def to_delimited_text(records: List[Mapping]) -> str:
    """
    Comma-separated text with every value quoted.

    The header comes from the first record's keys. No records, no header.
    """
    headers = list(records[0].keys()) if records else []
    if not headers:
        return ""
    lines = [",".join(headers)]
    lines.extend(",".join(_quote(row.get(h)) for h in headers) for row in records)
    return "\n".join(lines)


def export_filename(entity: str, today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"{entity}_{today.isoformat()}.csv"


def employees_csv(employees: Iterable) -> str:
    return to_delimited_text([e.to_export_row() for e in employees])


def transactions_csv(transactions: Iterable) -> str:
    return to_delimited_text([t.to_dict() for t in transactions])
