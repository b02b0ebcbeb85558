from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .mapping import to_wire

logger = logging.getLogger(__name__)


def _json_body() -> Dict[str, Any]:
    # Read before the per-route try blocks so a 413 reaches the error handler.
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _message(text: str, status: int):
    return jsonify({"message": text}), status


def register(app: Flask, container: Container) -> None:
    service = container.visitor_service

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        try:
            container.conn.ping()
            return jsonify({"status": "ok", "message": "Database connection successful."}), 200
        except Exception:
            logger.exception("Health check failed")
            return jsonify({"status": "error", "message": "Failed to connect to the database."}), 503

    @app.route("/api/visitors", methods=["GET"], endpoint="api_visitors_list")
    def api_visitors_list():
        try:
            return jsonify([to_wire(v) for v in service.list()])
        except Exception:
            logger.exception("Error fetching visitors")
            return _message("Failed to fetch visitors.", 500)

    @app.route("/api/visitors", methods=["POST"], endpoint="api_visitors_create")
    def api_visitors_create():
        body = _json_body()
        try:
            visitor = service.create(body)
            return jsonify({**to_wire(visitor), "message": "Visitor signed in successfully."}), 201
        except ValidationError as e:
            return _message(str(e), 400)
        except Exception:
            logger.exception("Error inserting visitor")
            return _message("Failed to sign in visitor.", 500)

    @app.route("/api/visitors/schedule", methods=["POST"], endpoint="api_visitors_schedule")
    def api_visitors_schedule():
        body = _json_body()
        try:
            visitor = service.schedule(body)
            return jsonify(to_wire(visitor)), 201
        except ValidationError as e:
            return _message(str(e), 400)
        except Exception:
            logger.exception("Error scheduling visitor")
            return _message("Failed to schedule visitor.", 500)

    @app.route("/api/visitors/search", methods=["GET"], endpoint="api_visitors_search")
    def api_visitors_search():
        try:
            found = service.search(request.args.get("name"), request.args.get("status"))
            return jsonify([to_wire(v) for v in found])
        except ValidationError as e:
            return _message(str(e), 400)
        except Exception:
            logger.exception("Error searching visitors")
            return _message("Failed to search visitors.", 500)

    @app.route("/api/visitors/<int:visitor_id>", methods=["GET"], endpoint="api_visitors_get")
    def api_visitors_get(visitor_id: int):
        try:
            return jsonify(to_wire(service.get(visitor_id)))
        except NotFoundError as e:
            return _message(str(e), 404)
        except Exception:
            logger.exception("Error fetching visitor %s", visitor_id)
            return _message("Failed to fetch visitor.", 500)

    @app.route("/api/visitors/<int:visitor_id>", methods=["PUT"], endpoint="api_visitors_update")
    def api_visitors_update(visitor_id: int):
        body = _json_body()
        try:
            return jsonify(to_wire(service.update(visitor_id, body)))
        except ValidationError as e:
            return _message(str(e), 400)
        except NotFoundError as e:
            return _message(str(e), 404)
        except Exception:
            logger.exception("Error updating visitor %s", visitor_id)
            return _message("Failed to update visitor.", 500)

    @app.route("/api/visitors/<int:visitor_id>/log-arrival", methods=["PUT"], endpoint="api_visitors_log_arrival")
    def api_visitors_log_arrival(visitor_id: int):
        body = _json_body()
        try:
            visitor = service.log_arrival(visitor_id, time_in=body.get("timeIn"), date=body.get("date"))
            return jsonify(to_wire(visitor))
        except ValidationError as e:
            return _message(str(e), 400)
        except NotFoundError as e:
            return _message(str(e), 404)
        except Exception:
            logger.exception("Error logging arrival for visitor %s", visitor_id)
            return _message("Failed to log visitor arrival.", 500)

    @app.route("/api/visitors/<int:visitor_id>/signout", methods=["PUT"], endpoint="api_visitors_sign_out")
    def api_visitors_sign_out(visitor_id: int):
        body = _json_body()
        try:
            visitor = service.sign_out(visitor_id, time_out=body.get("timeOut"))
            return jsonify(to_wire(visitor))
        except ValidationError as e:
            return _message(str(e), 400)
        except NotFoundError as e:
            return _message(str(e), 404)
        except Exception:
            logger.exception("Error signing out visitor %s", visitor_id)
            return _message("Failed to sign out visitor.", 500)

    @app.route("/api/visitors/<int:visitor_id>", methods=["DELETE"], endpoint="api_visitors_delete")
    def api_visitors_delete(visitor_id: int):
        try:
            service.delete(visitor_id)
            return "", 204
        except NotFoundError as e:
            return _message(str(e), 404)
        except Exception:
            logger.exception("Error deleting visitor %s", visitor_id)
            return _message("Failed to delete visitor.", 500)
