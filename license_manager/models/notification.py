"""Ephemeral results of an expiration scan. Nothing here is persisted."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class NotificationResult:
    recipient: str
    subject: str
    body: str          # HTML
    license_id: int
    product: str

    def to_dict(self) -> dict:
        return {
            "recipient": self.recipient,
            "subject": self.subject,
            "body": self.body,
            "licenseId": self.license_id,
            "product": self.product,
        }


@dataclass
class ScanReport:
    sent_emails: list[NotificationResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "sentEmails": [r.to_dict() for r in self.sent_emails],
            "errors": list(self.errors),
        }
