"""Example: use the service layer directly (no Flask).

Controllers stay thin; the payroll rules live in the services and calculators.
"""

from datetime import date, datetime

from shift_payroll.core.enums import WageMode
from shift_payroll.payroll.model import PayrollPeriod, WageConfig
from shift_payroll.payroll.service import PayrollService
from shift_payroll.shifts.model import ShiftInterval


def main():
    shifts = [
        ShiftInterval(
            work_date=date(2025, 3, 3),
            start_time="09:00",
            end_time="17:00",
            break_start=datetime(2025, 3, 3, 12, 0),
            break_end=datetime(2025, 3, 3, 12, 30),
        ),
        ShiftInterval(work_date=date(2025, 3, 4), start_time="22:00", end_time="09:00"),
        ShiftInterval(work_date=date(2025, 3, 5), start_time="08:00"),
    ]
    period = PayrollPeriod(name="March W1", start_date=date(2025, 3, 1), end_date=date(2025, 3, 7))
    wage_config = WageConfig(mode=WageMode.HOURLY, hourly_rate=20)

    report = PayrollService().calculate_hours(shifts=shifts, period=period, wage_config=wage_config)
    print(report.breakdown)
    print(report.result)


if __name__ == "__main__":
    main()
