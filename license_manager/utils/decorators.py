from functools import wraps
from flask import current_app, jsonify
from flask_jwt_extended import verify_jwt_in_request, get_jwt


def token_roles(claims: dict) -> set:
    """Roles from `roles` and, if present, the Keycloak-style `realm_access.roles`."""
    roles = set(claims.get("roles") or [])
    realm = claims.get("realm_access") or {}
    roles.update(realm.get("roles") or [])
    return roles


def role_required(*roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            wanted = set(roles) or {current_app.config["ADMIN_ROLE"]}
            if not (token_roles(get_jwt() or {}) & wanted):
                return jsonify({"success": False, "message": "Forbidden"}), 403
            return fn(*args, **kwargs)
        return wrapper
    return decorator


def admin_required(fn):
    return role_required()(fn)
