from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request, send_file

from ..container import Container
from ..core.exceptions import DomainError, InvalidInputError
from .export import export_report_xlsx
from .model import PayrollEntry, PayrollHoursReport
from .payload import (
    amounts_from_dict,
    entry_to_dict,
    period_from_dict,
    report_to_dict,
    shift_from_dict,
    wage_config_from_dict,
)

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _json_body() -> dict[str, Any]:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise InvalidInputError("Request body must be a JSON object")
        return body

    def _object(body: dict[str, Any], key: str) -> dict[str, Any]:
        value = body.get(key)
        if not isinstance(value, dict):
            raise InvalidInputError(f"{key} is required")
        return value

    def _build_report(body: dict[str, Any]) -> PayrollHoursReport:
        raw_shifts = body.get("shifts")
        if not isinstance(raw_shifts, list) or not all(isinstance(s, dict) for s in raw_shifts):
            raise InvalidInputError("shifts must be a list of objects")

        shifts = [shift_from_dict(s) for s in raw_shifts]
        wage_config = wage_config_from_dict(
            _object(body, "wageConfig"), default_multiplier=container.overtime_multiplier
        )
        period = period_from_dict(_object(body, "period"))

        service = container.payroll_service_for(body.get("overtimeRule"))
        return service.calculate_hours(shifts=shifts, period=period, wage_config=wage_config)

    def _error(e: Exception, action: str):
        if isinstance(e, DomainError):
            return jsonify({"error": str(e)}), 400
        logger.exception("Error %s", action)
        return jsonify({"error": "Internal server error"}), 500

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/payroll/calculate-hours", methods=["POST"], endpoint="payroll_calculate_hours")
    def calculate_hours():
        try:
            report = _build_report(_json_body())
            return jsonify(report_to_dict(report))
        except Exception as e:
            return _error(e, "calculating hours")

    @app.route("/api/payroll/entries/preview", methods=["POST"], endpoint="payroll_entry_preview")
    def entry_preview():
        try:
            body = _json_body()
            employee_id = body.get("employeeId")
            period_id = body.get("payrollPeriodId")
            if not employee_id or not period_id:
                raise InvalidInputError("Employee ID and Payroll Period ID are required")

            entry = PayrollEntry(
                employee_id=str(employee_id),
                payroll_period_id=str(period_id),
                amounts=amounts_from_dict(body),
                notes=body.get("notes"),
            )
            return jsonify(entry_to_dict(entry))
        except Exception as e:
            return _error(e, "previewing payroll entry")

    @app.route("/api/payroll/export", methods=["POST"], endpoint="payroll_export")
    def export_xlsx():
        try:
            report = _build_report(_json_body())
            output = export_report_xlsx(report)
        except Exception as e:
            return _error(e, "exporting payroll report")

        filename = f"payroll_{report.period.start_date:%Y%m%d}_{report.period.end_date:%Y%m%d}.xlsx"
        return send_file(
            output,
            download_name=filename,
            as_attachment=True,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
