from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from license_manager.services.supplier_service import SupplierService
from license_manager.utils.decorators import admin_required
from license_manager.utils.http import json_error, read_json
from license_manager.utils.validation import NotFoundError, ValidationError

supplier_bp = Blueprint("suppliers", __name__, url_prefix="/api/suppliers")


@supplier_bp.get("")
@jwt_required()
def list_suppliers():
    return jsonify({
        "success": True,
        "data": [s.to_dict(with_licenses=True) for s in SupplierService.list_suppliers()],
    })


@supplier_bp.post("")
@admin_required
def save_suppliers():
    try:
        count = SupplierService.save_all(read_json())
        return jsonify({"success": True, "message": "Supplier data saved successfully to database", "count": count})
    except NotFoundError as e:
        return json_error(str(e), 404)
    except ValidationError as e:
        return json_error(str(e), 400)


@supplier_bp.delete("/<int:supplier_id>")
@admin_required
def delete_supplier(supplier_id: int):
    try:
        SupplierService.delete_supplier(supplier_id)
        return jsonify({"success": True})
    except NotFoundError as e:
        return json_error(str(e), 404)


@supplier_bp.post("/relink")
@admin_required
def relink_suppliers():
    result = SupplierService.relink_by_name()
    return jsonify({"success": True, **result})
