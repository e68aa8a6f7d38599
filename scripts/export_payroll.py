"""Export a payroll hours report to Excel.

Input is a JSON file with the same body as POST /api/payroll/calculate-hours:
``{"shifts": [...], "wageConfig": {...}, "period": {...}, "overtimeRule": "per_shift"}``.
"""

from __future__ import annotations

import argparse
import importlib
import json
from datetime import datetime
from pathlib import Path

from shift_payroll.config import get_settings_module
from shift_payroll.container import build_container
from shift_payroll.core.exceptions import DomainError
from shift_payroll.payroll.export import export_report_xlsx
from shift_payroll.payroll.payload import period_from_dict, shift_from_dict, wage_config_from_dict


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("payload", type=Path, help="JSON file with shifts, wageConfig and period")
    parser.add_argument("-o", "--out-dir", type=Path, default=Path(__file__).resolve().parents[1] / "exports")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    body = json.loads(args.payload.read_text(encoding="utf-8"))
    try:
        shifts = [shift_from_dict(s) for s in body.get("shifts", [])]
        wage_config = wage_config_from_dict(body["wageConfig"], default_multiplier=container.overtime_multiplier)
        period = period_from_dict(body["period"])
        service = container.payroll_service_for(body.get("overtimeRule"))
        report = service.calculate_hours(shifts=shifts, period=period, wage_config=wage_config)
    except (KeyError, DomainError) as e:
        raise SystemExit(f"Invalid payload: {e}")

    args.out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = args.out_dir / f"payroll_{ts}.xlsx"
    out_file.write_bytes(export_report_xlsx(report).getvalue())

    b = report.breakdown
    print(
        f"OK: {out_file} ({report.summary.total_shifts} shifts, "
        f"{b.total_hours:.2f} h = {b.regular_hours:.2f} regular + {b.overtime_hours:.2f} overtime, "
        f"gross {report.result.gross_pay:.2f})"
    )


if __name__ == "__main__":
    main()
