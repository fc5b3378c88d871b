from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required
from sqlalchemy.exc import IntegrityError

from license_manager.services.rda_service import RdaService
from license_manager.utils.decorators import admin_required
from license_manager.utils.http import json_error, read_json
from license_manager.utils.validation import ValidationError

rda_bp = Blueprint("rda", __name__, url_prefix="/api/rda")


@rda_bp.get("")
@jwt_required()
def list_rdas():
    return jsonify({"success": True, "data": [r.to_dict() for r in RdaService.list_rdas()]})


@rda_bp.post("")
@admin_required
def import_rdas():
    try:
        count = RdaService.replace_all(read_json())
        return jsonify({"success": True, "message": "RDA data saved successfully to database", "count": count})
    except ValidationError as e:
        if e.field == "rda" and "Duplicate" in e.message:
            return json_error(f"Failed to save data. {e}", 409)
        return json_error(str(e), 400)
    except IntegrityError:
        return json_error("Failed to save data. Duplicate value for field: rda", 409)
