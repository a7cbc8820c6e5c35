from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.responses import domain_error_response, error_response, to_json
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _guarded(build):
        try:
            container.snapshot_service.ensure_loaded()
            return jsonify(build())
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("directory request failed")
            return error_response("SERVER_ERROR", str(e), 500)

    @app.route("/api/filters", methods=["GET"], endpoint="filters")
    def filters():
        return _guarded(lambda: to_json(container.directory_service.filter_options()))

    @app.route("/api/employees", methods=["GET"], endpoint="employees")
    def employees():
        return _guarded(lambda: {"employees": to_json(container.store.current().employees)})

    @app.route("/api/shifts", methods=["GET"], endpoint="shifts")
    def shifts():
        return _guarded(lambda: {"shifts": to_json(container.store.current().shifts)})
