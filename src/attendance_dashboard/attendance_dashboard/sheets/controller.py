from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.responses import domain_error_response, error_response
from ..container import Container
from ..core.exceptions import DomainError, PayloadError, UpstreamError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sheets/data", methods=["GET"], endpoint="sheets_data")
    def sheets_data():
        """Raw upstream payload, passed through untouched.

        Errors keep the proxy's wire format: upstream HTTP errors are echoed
        with the upstream status, everything else is a 500.
        """

        try:
            data = container.sheets_client.fetch_payload()
        except UpstreamError as e:
            if e.status is not None:
                return error_response("GAS_FETCH_ERROR", e.body, e.status, status=e.status)
            return error_response("SERVER_ERROR", str(e), 500)
        except PayloadError as e:
            return error_response(e.code, str(e), 500, details=str(e))
        except Exception as e:
            logger.exception("sheets proxy failed")
            return error_response("SERVER_ERROR", str(e), 500)
        return jsonify(data)

    @app.route("/api/refresh", methods=["POST"], endpoint="refresh")
    def refresh():
        try:
            snapshot = container.snapshot_service.refresh()
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("refresh failed")
            return error_response("SERVER_ERROR", str(e), 500)
        return jsonify(
            {
                "success": True,
                "fetched_at": snapshot.fetched_at.isoformat(timespec="seconds"),
                "counts": snapshot.counts(),
            }
        )
