from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest

from csv_browser.config import DEFAULT_ROUTE
from csv_browser.core.exceptions import SnapshotError
from csv_browser.services.snapshot_service import SnapshotService

logger = logging.getLogger(__name__)


def register_snapshot_routes(
    server: Flask,
    service: SnapshotService,
    route: str = DEFAULT_ROUTE,
) -> None:
    """
    Expose the snapshot slot at one fixed endpoint:

    - PUT/POST <route>: store the JSON body verbatim, always 200 on success
    - GET <route>: last stored body, or 404 if nothing was ever stored
    """

    @server.route(route, methods=["PUT", "POST"], endpoint="snapshot_write")
    def write_snapshot():
        try:
            payload = request.get_json(force=True)
        except BadRequest:
            logger.warning("Rejected snapshot write with a non-JSON body")
            return jsonify({"error": "Request body must be JSON"}), 400

        try:
            service.save(payload)
        except SnapshotError as exc:
            return jsonify({"error": str(exc), "type": type(exc).__name__}), 500
        return jsonify({"status": "ok"}), 200

    @server.route(route, methods=["GET"], endpoint="snapshot_read")
    def read_snapshot():
        try:
            payload = service.load()
        except SnapshotError as exc:
            return jsonify({"error": str(exc), "type": type(exc).__name__}), 500

        if payload is None:
            return jsonify({"error": "No data found"}), 404
        return jsonify(payload), 200
