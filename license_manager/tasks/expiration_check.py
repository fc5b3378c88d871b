# license_manager/tasks/expiration_check.py
from flask import current_app

from license_manager.services.expiration_scanner import ScanAlreadyRunning, build_scanner


def run_expiration_check_job(app):
    """
    Daily job: same scan as GET /api/notify-expirations, report goes to the log.
    Returns the ScanReport, or None when another scan was already running.
    """
    with app.app_context():
        try:
            report = build_scanner(current_app.config).scan()
        except ScanAlreadyRunning:
            current_app.logger.info("[expiration_check] another scan is running, skipped.")
            return None

        for err in report.errors:
            current_app.logger.error(f"[expiration_check] {err}")
        current_app.logger.info(
            f"[expiration_check] notifications={len(report.sent_emails)} errors={len(report.errors)}"
        )
        return report
