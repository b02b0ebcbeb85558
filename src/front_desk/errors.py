from __future__ import annotations

from flask import Flask, jsonify, request


def register_error_handlers(app: Flask) -> None:
    def _api_or_default(e, message: str, status: int):
        if request.path.startswith("/api/"):
            return jsonify({"message": message}), status
        return e

    @app.errorhandler(404)
    def not_found(e):
        return _api_or_default(e, "Not found.", 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return _api_or_default(e, "Method not allowed.", 405)

    @app.errorhandler(413)
    def too_large(e):
        return _api_or_default(e, "Request body is too large.", 413)
