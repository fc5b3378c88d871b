# license_manager/services/expiration_scanner.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from flask import current_app

from license_manager.models.notification import NotificationResult, ScanReport
from license_manager.repositories.license_repo import LicenseRepo
from license_manager.services.mail_service import DeliveryError, MailService
from license_manager.services.notification_content import build_generator
from license_manager.utils.dates import add_months, format_date, today_in

# One scan at a time per process (manual trigger vs. daily job).
_scan_lock = threading.Lock()


class ScanAlreadyRunning(RuntimeError):
    pass


@dataclass(frozen=True)
class NotificationSettings:
    window_months: int = 4
    recipient_override: Optional[str] = None
    send_immediately: bool = True
    timezone: str = "UTC"

    @classmethod
    def from_config(cls, config) -> "NotificationSettings":
        return cls(
            window_months=int(config.get("NOTIFY_WINDOW_MONTHS", 4)),
            recipient_override=config.get("NOTIFICATION_RECIPIENT") or None,
            send_immediately=bool(config.get("NOTIFY_SEND_IMMEDIATELY", True)),
            timezone=config.get("SCHEDULER_TIMEZONE") or "UTC",
        )


def is_eligible(lic, start: date, end: date) -> bool:
    exp = lic.expiration_date
    email = lic.reseller_email
    return exp is not None and start <= exp <= end and bool(email) and "@" in email


class ExpirationScanner:
    """
    Finds licenses expiring in [today, today + window_months] and drafts one
    notice per license. Per-license failures land in report.errors and never
    stop the loop; a failing record source propagates to the caller.
    """

    def __init__(
        self,
        generator,
        settings: NotificationSettings | None = None,
        mailer: Optional[Callable[[str, str, str], None]] = None,
        source=LicenseRepo,
    ):
        self.generator = generator
        self.settings = settings or NotificationSettings()
        self.mailer = mailer
        self.source = source

    def window(self, today: date) -> tuple[date, date]:
        return today, add_months(today, self.settings.window_months)

    def scan(self, today: date | None = None) -> ScanReport:
        if not _scan_lock.acquire(blocking=False):
            raise ScanAlreadyRunning("An expiration scan is already running")
        try:
            return self._scan(today or today_in(self.settings.timezone))
        finally:
            _scan_lock.release()

    def _scan(self, today: date) -> ScanReport:
        start, end = self.window(today)
        candidates = [lic for lic in self.source.find_expiring(start, end) if is_eligible(lic, start, end)]
        current_app.logger.info(f"[scanner] {len(candidates)} license(s) expiring between {start} and {end}")

        report = ScanReport()
        for lic in candidates:
            try:
                content = self.generator.generate(
                    lic.product,
                    format_date(lic.expiration_date),
                    lic.reseller,
                    lic.reseller_email,
                )
            except Exception as e:
                report.errors.append(f"Failed to generate email for license ID {lic.id}: {e}")
                continue

            result = NotificationResult(
                recipient=self.settings.recipient_override or lic.reseller_email,
                subject=content.subject,
                body=content.body,
                license_id=lic.id,
                product=lic.product,
            )

            if self.mailer is not None and self.settings.send_immediately:
                try:
                    self.mailer(result.recipient, result.subject, result.body)
                except DeliveryError as e:
                    current_app.logger.warning(f"[scanner] delivery failed for license {lic.id}: {e}")
                    report.errors.append(f"Failed to send email for license ID {lic.id}: {e}")
                    continue

            report.sent_emails.append(result)

        return report


def build_scanner(config) -> ExpirationScanner:
    settings = NotificationSettings.from_config(config)
    return ExpirationScanner(
        generator=build_generator(config),
        settings=settings,
        mailer=MailService.send_email if settings.send_immediately else None,
    )
