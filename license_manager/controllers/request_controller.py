from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from license_manager.services.request_service import RequestService
from license_manager.utils.decorators import admin_required
from license_manager.utils.http import json_error, read_json
from license_manager.utils.validation import NotFoundError, ValidationError

request_bp = Blueprint("requests", __name__, url_prefix="/api/requests")


@request_bp.get("")
@jwt_required()
def list_requests():
    return jsonify({"success": True, "data": [r.to_dict() for r in RequestService.list_requests()]})


@request_bp.post("")
@admin_required
def save_requests():
    try:
        counts = RequestService.save_all(read_json())
        return jsonify({"success": True, "message": "Request data saved successfully to database", **counts})
    except NotFoundError as e:
        return json_error(str(e), 404)
    except ValidationError as e:
        return json_error(str(e), 400)
