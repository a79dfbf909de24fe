from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import FormatError, NotFoundError, PersistenceError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.schedule_service

    def domain_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "reason": e.reason.value, "message": str(e)}), 400
            except FormatError as e:
                return jsonify({"success": False, "reason": "FORMAT", "message": str(e)}), 400
            except NotFoundError as e:
                return jsonify({"success": False, "reason": "NOT_FOUND", "message": str(e)}), 404
            except PersistenceError as e:
                logger.warning("Storage unavailable while handling %s: %s", request.path, e)
                return jsonify({"success": False, "reason": "PERSISTENCE", "message": str(e)}), 503

        return wrapper

    def _optional_date(value) -> Optional[date]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return parse_iso_date(value)

    def _optional_text(value) -> Optional[str]:
        return None if value is None else str(value)

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def _today_arg() -> Optional[date]:
        return _optional_date(request.args.get("today"))

    @app.route("/api/calendar/<int:year>/<int:month>", methods=["GET"], endpoint="calendar_month")
    @domain_errors
    def calendar_month(year: int, month: int):
        view = service.get_month_view(year, month, today=_today_arg())
        payload = view.to_dict()
        if service.load_warning:
            payload["warning"] = service.load_warning
        return jsonify(payload)

    @app.route("/api/calendar/navigate", methods=["GET"], endpoint="calendar_navigate")
    @domain_errors
    def calendar_navigate():
        year = request.args.get("year", type=int)
        month = request.args.get("month", type=int)
        offset = request.args.get("offset", default=0, type=int)
        target_year, target_month = service.navigate(year, month, offset)
        return jsonify({"year": target_year, "month": target_month})

    @app.route("/api/days/<day>", methods=["GET"], endpoint="day_detail")
    @domain_errors
    def day_detail(day: str):
        detail = service.get_day_detail(parse_iso_date(day), today=_today_arg())
        return jsonify(detail.to_dict())

    @app.route("/api/vacations", methods=["GET"], endpoint="vacations_list")
    @domain_errors
    def vacations_list():
        return jsonify({"vacations": [v.to_dict() for v in service.list_vacations()]})

    @app.route("/api/vacations/<vacation_id>", methods=["GET"], endpoint="vacations_get")
    @domain_errors
    def vacations_get(vacation_id: str):
        return jsonify(service.get_vacation(vacation_id).to_dict())

    @app.route("/api/vacations", methods=["POST"], endpoint="vacations_create")
    @domain_errors
    def vacations_create():
        data = _json_body()
        record = service.create_vacation(
            data.get("label"),
            _optional_date(data.get("startDate")),
            _optional_date(data.get("endDate")),
            _optional_text(data.get("notes")),
        )
        return jsonify({"success": True, "vacation": record.to_dict()}), 201

    @app.route("/api/vacations/<vacation_id>", methods=["PUT"], endpoint="vacations_update")
    @domain_errors
    def vacations_update(vacation_id: str):
        data = _json_body()
        record = service.update_vacation(
            vacation_id,
            data.get("label"),
            _optional_date(data.get("startDate")),
            _optional_date(data.get("endDate")),
            _optional_text(data.get("notes")),
        )
        return jsonify({"success": True, "vacation": record.to_dict()})

    @app.route("/api/vacations/<vacation_id>", methods=["DELETE"], endpoint="vacations_delete")
    @domain_errors
    def vacations_delete(vacation_id: str):
        return jsonify({"success": True, "deleted": service.delete_vacation(vacation_id)})
