from flask import jsonify, request

from license_manager.utils.validation import ValidationError


def json_error(message, code=400):
    return jsonify({"success": False, "message": message}), code


def read_json():
    """Request body as JSON; malformed JSON is a ValidationError, not a 500."""
    data = request.get_json(silent=True)
    if data is None and request.get_data(cache=True):
        raise ValidationError("Invalid JSON payload provided")
    return data
