from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import NotFoundError, SchemaNotInitializedError, StorageError, ValidationError
from .endpoints import AVAILABLE_ENDPOINTS

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    def _expose_details() -> bool:
        return bool(app.config.get("EXPOSE_ERROR_DETAILS", False))

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        body = {"error": str(e)}
        if e.fields:
            body["fields"] = list(e.fields)
        return jsonify(body), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(StorageError)
    def handle_storage_error(e: StorageError):
        body = {"error": str(e)}
        if isinstance(e, SchemaNotInitializedError):
            body["code"] = "SCHEMA_NOT_INITIALIZED"
            body["hint"] = "Call GET /api/init to create the attendance table"
        if _expose_details() and e.details:
            body["details"] = e.details
        return jsonify(body), 500

    @app.errorhandler(404)
    def handle_unknown_endpoint(e):
        return jsonify({"error": "Endpoint not found", "availableEndpoints": AVAILABLE_ENDPOINTS}), 404

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.description}), e.code
        logger.exception("Unhandled error")
        body = {"error": "Internal server error"}
        body["message"] = str(e) if _expose_details() else "Something went wrong"
        return jsonify(body), 500
