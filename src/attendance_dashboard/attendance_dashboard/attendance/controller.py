from __future__ import annotations

import csv
import io
import logging

from flask import Flask, jsonify, request

from ..common.responses import domain_error_response, error_response
from ..common.validators import optional_iso_date, optional_text, require_choice
from ..container import Container
from ..core.enums import ReportMode
from ..core.exceptions import DomainError, ValidationError
from .classifier import status_label
from .model import AttendanceFilter, AttendanceRecord, Summary
from .report import summarize

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "date_start",
    "site_id",
    "staff_id",
    "name",
    "shift_code",
    "start_time",
    "date_end",
    "end_time",
    "status",
    "note",
]


def register(app: Flask, container: Container) -> None:
    def _filters_from_args() -> AttendanceFilter:
        start = optional_iso_date(request.args.get("start_date"), "start_date")
        end = optional_iso_date(request.args.get("end_date"), "end_date")
        if start and end and start > end:
            raise ValidationError("start_date must not be after end_date")
        return AttendanceFilter(
            start_date=start.isoformat() if start else "",
            end_date=end.isoformat() if end else "",
            site_id=optional_text(request.args.get("site_id")),
            staff_id=optional_text(request.args.get("staff_id")),
        )

    def _load_snapshot() -> None:
        if request.args.get("refresh") == "1":
            container.snapshot_service.refresh()
        else:
            container.snapshot_service.ensure_loaded()

    def _record_json(r: AttendanceRecord) -> dict:
        return {
            "staff_id": r.staff_id,
            "site_id": r.site_id,
            "name": r.name,
            "shift_code": r.shift_code,
            "date_start": r.date_start,
            "start_time": r.start_time,
            "date_end": r.date_end,
            "end_time": r.end_time,
            "status": r.status.value,
            "status_label": status_label(r.status),
            "has_valid_date": r.has_valid_date,
            "note": r.note or "",
        }

    def _summary_json(s: Summary) -> dict:
        return {
            "total": s.total,
            "on_time": s.on_time,
            "late": s.late,
            "absent": s.absent,
            "unclassified": s.unclassified,
            "on_time_rate": s.on_time_rate,
        }

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance")
    def attendance():
        try:
            filters = _filters_from_args()
            mode = require_choice(request.args.get("mode"), ReportMode, "mode", ReportMode.LOGS)
            day = optional_iso_date(request.args.get("day"), "day")
            _load_snapshot()
            view = container.attendance_service.query(filters, mode=mode, day=day)
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("attendance query failed")
            return error_response("SERVER_ERROR", str(e), 500)

        return jsonify(
            {
                "mode": mode.value,
                "shift_code": view.shift_code,
                "records": [_record_json(r) for r in view.records],
                "summary": _summary_json(view.summary),
                "by_site": {site: _summary_json(s) for site, s in view.by_site.items()},
            }
        )

    @app.route("/api/attendance/daily", methods=["GET"], endpoint="attendance_daily")
    def attendance_daily():
        """Today and yesterday, relative to the server's local date."""

        try:
            filters = _filters_from_args()
            _load_snapshot()
            today = container.attendance_service.today()
            views = container.attendance_service.daily(filters, today=today)
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("daily attendance failed")
            return error_response("SERVER_ERROR", str(e), 500)

        return jsonify(
            {
                "today": today.isoformat(),
                "today_records": [_record_json(r) for r in views.today],
                "today_summary": _summary_json(summarize(views.today)),
                "yesterday_records": [_record_json(r) for r in views.yesterday],
                "yesterday_summary": _summary_json(summarize(views.yesterday)),
            }
        )

    @app.route("/api/attendance/export.csv", methods=["GET"], endpoint="attendance_csv")
    def attendance_csv():
        try:
            filters = _filters_from_args()
            mode = require_choice(request.args.get("mode"), ReportMode, "mode", ReportMode.LOGS)
            day = optional_iso_date(request.args.get("day"), "day")
            _load_snapshot()
            view = container.attendance_service.query(filters, mode=mode, day=day)
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("attendance export failed")
            return error_response("SERVER_ERROR", str(e), 500)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for r in view.records:
            writer.writerow(_record_json(r))

        suffix = (filters.start_date or "all").replace("-", "")
        if filters.end_date:
            suffix += "_" + filters.end_date.replace("-", "")
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=attendance_{suffix}.csv"},
        )
