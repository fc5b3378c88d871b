# license_manager/services/mail_service.py
from __future__ import annotations

from flask import current_app
from flask_mail import Message

from license_manager.extensions import mail


class DeliveryError(Exception):
    pass


class MailService:
    @staticmethod
    def send_email(to_email: str, subject: str, html_body: str) -> None:
        """
        Sends one HTML message through the configured SMTP relay.
        Raises DeliveryError when the relay rejects it or is unreachable.
        """
        try:
            msg = Message(subject=subject, recipients=[to_email], html=html_body)
            mail.send(msg)
        except Exception as e:
            current_app.logger.warning(f"[MailService] Mail could not be sent to {to_email}: {e}")
            raise DeliveryError(str(e)) from e
        current_app.logger.info(f"[MailService] Mail sent to {to_email}: {subject}")
