from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity, get_jwt

from license_manager.utils.decorators import token_roles

auth_bp = Blueprint("auth", __name__)


@auth_bp.get("/me", endpoint="auth_me")
@jwt_required()
def me():
    """Identity as seen in the identity provider's token."""
    claims = get_jwt() or {}
    return jsonify({
        "success": True,
        "user": {
            "id": get_jwt_identity(),
            "name": claims.get("name") or claims.get("preferred_username"),
            "email": claims.get("email"),
            "roles": sorted(token_roles(claims)),
        }
    })
