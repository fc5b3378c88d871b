from flask import Blueprint, Response, jsonify
from flask_jwt_extended import jwt_required
from sqlalchemy.exc import IntegrityError

from license_manager.services.license_service import LicenseService
from license_manager.utils.decorators import admin_required
from license_manager.utils.http import json_error, read_json
from license_manager.utils.validation import NotFoundError, ValidationError

license_bp = Blueprint("licenses", __name__, url_prefix="/api/licenses")


@license_bp.get("")
@jwt_required()
def list_licenses():
    return jsonify({"success": True, "data": [x.to_dict() for x in LicenseService.list_licenses()]})


@license_bp.get("/<int:license_id>")
@jwt_required()
def get_license(license_id: int):
    try:
        return jsonify({"success": True, "data": LicenseService.get_license(license_id).to_dict()})
    except NotFoundError as e:
        return json_error(str(e), 404)


@license_bp.get("/export.csv")
@jwt_required()
def export_licenses():
    return Response(
        LicenseService.export_csv(),
        mimetype="text/csv",
        headers={"Content-Disposition": "attachment; filename=licenses.csv"},
    )


@license_bp.post("")
@admin_required
def import_licenses():
    try:
        count = LicenseService.replace_all(read_json())
        return jsonify({"success": True, "message": "Data saved successfully to database", "count": count})
    except ValidationError as e:
        return json_error(str(e), 400)
    except IntegrityError as e:
        return json_error(f"Failed to save data: {e.orig}", 409)


@license_bp.post("/item")
@admin_required
def create_license():
    try:
        lic = LicenseService.create_license(read_json() or {})
        return jsonify({"success": True, "data": lic.to_dict()}), 201
    except ValidationError as e:
        return json_error(str(e), 400)


@license_bp.put("/<int:license_id>")
@admin_required
def update_license(license_id: int):
    try:
        lic = LicenseService.update_license(license_id, read_json() or {})
        return jsonify({"success": True, "data": lic.to_dict()})
    except NotFoundError as e:
        return json_error(str(e), 404)
    except ValidationError as e:
        return json_error(str(e), 400)


@license_bp.delete("/<int:license_id>")
@admin_required
def delete_license(license_id: int):
    try:
        LicenseService.delete_license(license_id)
        return jsonify({"success": True})
    except NotFoundError as e:
        return json_error(str(e), 404)
