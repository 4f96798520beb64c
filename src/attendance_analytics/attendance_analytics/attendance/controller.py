from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from ..reports.exporters import rows_to_csv, rows_to_excel

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _search_args() -> dict:
        return {
            "employee_id": request.args.get("employee_id"),
            "from_date": request.args.get("from_date"),
            "to_date": request.args.get("to_date"),
        }

    def _bad_request(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    def _server_error(message: str):
        return jsonify({"success": False, "message": message}), 500

    def _report_filename(extension: str) -> str:
        args = _search_args()
        parts = ["attendance_report"]
        for key in ("employee_id", "from_date", "to_date"):
            value = (args[key] or "").strip()
            if value:
                parts.append(value.replace("-", ""))
        return "_".join(parts) + f".{extension}"

    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    def api_employees():
        try:
            employees = container.analytics_service.list_employees()
        except Exception:
            logger.exception("failed to list employees")
            return _server_error("Failed to fetch employee list")

        return jsonify(
            {
                "employees": [
                    {"Employee_ID": e.employee_id, "Employee_Name": e.employee_name} for e in employees
                ]
            }
        )

    @app.route("/api/search", methods=["GET"], endpoint="api_search")
    def api_search():
        try:
            report = container.analytics_service.search_report(**_search_args())
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            logger.exception("attendance search failed")
            return _server_error("Failed to fetch records")

        return jsonify(report.as_dict())

    @app.route("/api/report.csv", methods=["GET"], endpoint="api_report_csv")
    def api_report_csv():
        try:
            report = container.analytics_service.search_report(**_search_args())
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            logger.exception("CSV export failed")
            return _server_error("Failed to export report")

        return app.response_class(
            rows_to_csv(report.rows),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={_report_filename('csv')}"},
        )

    @app.route("/api/report.xlsx", methods=["GET"], endpoint="api_report_xlsx")
    def api_report_xlsx():
        try:
            report = container.analytics_service.search_report(**_search_args())
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            logger.exception("Excel export failed")
            return _server_error("Failed to export report")

        return app.response_class(
            rows_to_excel(report.rows),
            mimetype=XLSX_MIMETYPE,
            headers={"Content-Disposition": f"attachment; filename={_report_filename('xlsx')}"},
        )
