from __future__ import annotations

import csv
import io
from typing import Sequence

import pandas as pd

REPORT_COLUMNS = [
    ("employee_id", "Employee ID"),
    ("employee_name", "Name"),
    ("date", "Date"),
    ("check_in", "Check In"),
    ("check_out", "Check Out"),
    ("reported_working_hours", "Hours"),
    ("working_hours", "Computed Hours"),
    ("late_minutes", "Late Minutes"),
    ("status", "Status"),
    ("late_flag", "Late Flag"),
    ("computed_is_late", "Computed Is Late"),
]


def _display_rows(rows: Sequence[dict]) -> list[dict]:
    out = []
    for row in rows:
        item = {}
        for key, header in REPORT_COLUMNS:
            value = row.get(key)
            if isinstance(value, bool):
                value = "Yes" if value else "No"
            item[header] = "" if value is None else value
        out.append(item)
    return out


def rows_to_csv(rows: Sequence[dict]) -> bytes:
    """Attendance table as CSV; BOM so spreadsheet apps detect UTF-8."""

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=[header for _, header in REPORT_COLUMNS])
    writer.writeheader()
    for row in _display_rows(rows):
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")


def rows_to_excel(rows: Sequence[dict], *, sheet_name: str = "Attendance") -> bytes:
    df = pd.DataFrame(_display_rows(rows), columns=[header for _, header in REPORT_COLUMNS])

    # Written in memory, nothing touches the disk.
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()
