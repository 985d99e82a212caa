"""API response helper functions."""
from flask import jsonify

from turning.errors import MalformedSegment


def success_response(data=None, message=None):
    """Return a successful API response."""
    response = {"status": "ok"}
    if data is not None:
        response["data"] = data
    if message is not None:
        response["message"] = message
    return jsonify(response), 200


def error_response(message, status_code=400):
    """Return an error API response."""
    return jsonify({"status": "error", "message": message}), status_code


def offset_error_response(error):
    """Return a 400 response for an engine error, naming the bad record if known."""
    body = {"status": "error", "message": str(error)}
    if isinstance(error, MalformedSegment):
        body["index"] = error.index
        body["record"] = error.record
    return jsonify(body), 400


def validation_response(errors):
    """Return a validation result response."""
    return jsonify({"valid": len(errors) == 0, "errors": errors}), 200
