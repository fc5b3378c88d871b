import hmac

from flask import Blueprint, current_app, jsonify, request

from license_manager.services.expiration_scanner import ScanAlreadyRunning, build_scanner

notif_bp = Blueprint("notifications", __name__, url_prefix="/api")


def _bearer_ok() -> bool:
    secret = current_app.config.get("CRON_SECRET")
    if not secret:
        return True
    header = request.headers.get("Authorization", "")
    token = header[len("Bearer "):] if header.startswith("Bearer ") else ""
    return hmac.compare_digest(token.encode(), secret.encode())


@notif_bp.get("/notify-expirations")
def notify_expirations():
    if not _bearer_ok():
        return jsonify({"message": "Unauthorized"}), 401

    try:
        report = build_scanner(current_app.config).scan()
    except ScanAlreadyRunning as e:
        return jsonify({"message": str(e)}), 409
    except Exception as e:
        current_app.logger.exception(f"[notify] Failed to run expiration notification flow: {e}")
        return jsonify({"message": "Failed to run expiration check", "error": str(e)}), 500

    if report.errors:
        current_app.logger.error(f"[notify] Errors during expiration check: {report.errors}")

    message = (
        f"Processing complete. Generated {len(report.sent_emails)} notification(s). "
        "Check server logs for details."
    )
    return jsonify({"message": message, "details": report.to_dict()})
