from __future__ import annotations

import io

import pandas as pd

from .model import PayrollHoursReport

SHIFTS_SHEET = "Shifts"
SUMMARY_SHEET = "Summary"

_SHIFT_COLUMNS = [
    "Date", "Start", "End", "Break start", "Break end", "Break paid",
    "Break (min)", "Hours", "Regular hours", "Overtime hours",
]


def report_to_frames(report: PayrollHoursReport) -> tuple[pd.DataFrame, pd.DataFrame]:
    rows = [
        {
            "Date": d.work_date.strftime("%Y-%m-%d"),
            "Start": d.start_time,
            "End": d.end_time,
            "Break start": d.break_start or "",
            "Break end": d.break_end or "",
            "Break paid": "yes" if d.break_paid else "no",
            "Break (min)": d.break_minutes,
            "Hours": d.hours,
            "Regular hours": d.regular_hours,
            "Overtime hours": d.overtime_hours,
        }
        for d in report.summary.details
    ]
    shifts_df = pd.DataFrame(rows, columns=_SHIFT_COLUMNS)

    breakdown = report.breakdown
    summary_df = pd.DataFrame(
        [
            ("Period", report.period.name),
            ("From", report.period.start_date.strftime("%Y-%m-%d")),
            ("To", report.period.end_date.strftime("%Y-%m-%d")),
            ("Shifts", report.summary.total_shifts),
            ("Total hours", breakdown.total_hours),
            ("Regular hours", breakdown.regular_hours),
            ("Overtime hours", breakdown.overtime_hours),
            ("Regular rate", report.result.regular_rate),
            ("Overtime rate", report.result.overtime_rate),
            ("Gross pay", report.result.gross_pay),
            ("Rates from", report.wage_source.value),
        ],
        columns=["Item", "Value"],
    )
    return shifts_df, summary_df


def export_report_xlsx(report: PayrollHoursReport) -> io.BytesIO:
    """Write the report to an in-memory Excel workbook (nothing touches the disk)."""
    shifts_df, summary_df = report_to_frames(report)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        summary_df.to_excel(writer, index=False, sheet_name=SUMMARY_SHEET)
        shifts_df.to_excel(writer, index=False, sheet_name=SHIFTS_SHEET)

    output.seek(0)
    return output
