from datetime import timedelta

from license_manager.extensions import mail
from license_manager.repositories.license_repo import LicenseRepo
from license_manager.services.expiration_scanner import _scan_lock
from license_manager.utils.dates import today_in


def test_returns_report(client, make_license):
    lic = make_license(product="Widget Pro", expiration_date=today_in("UTC") + timedelta(days=30))
    make_license(product="Old", expiration_date=today_in("UTC") - timedelta(days=1))

    res = client.get("/api/notify-expirations")

    assert res.status_code == 200
    body = res.get_json()
    assert body["message"].startswith("Processing complete. Generated 1 notification(s).")
    assert body["details"]["errors"] == []
    [sent] = body["details"]["sentEmails"]
    assert sent["licenseId"] == lic.id
    assert sent["recipient"] == "ops@acme.test"
    assert sent["product"] == "Widget Pro"
    assert sent["subject"] == "License Expiration Notice for Widget Pro"


def test_sends_html_mail(client, make_license):
    make_license(reseller_email="ops@acme.test", expiration_date=today_in("UTC") + timedelta(days=3))

    with mail.record_messages() as outbox:
        res = client.get("/api/notify-expirations")

    assert res.status_code == 200
    assert len(outbox) == 1
    assert outbox[0].recipients == ["ops@acme.test"]
    assert outbox[0].subject == "License Expiration Notice for Widget Pro"
    assert "Widget Pro" in outbox[0].html


def test_recipient_override(app, client, make_license):
    app.config["NOTIFICATION_RECIPIENT"] = "licenses@infn.test"
    make_license(expiration_date=today_in("UTC") + timedelta(days=3))

    with mail.record_messages() as outbox:
        res = client.get("/api/notify-expirations")

    assert res.get_json()["details"]["sentEmails"][0]["recipient"] == "licenses@infn.test"
    assert outbox[0].recipients == ["licenses@infn.test"]


def test_secret_mismatch_is_unauthorized(app, client, make_license):
    app.config["CRON_SECRET"] = "s3cret"
    make_license(expiration_date=today_in("UTC") + timedelta(days=3))

    with mail.record_messages() as outbox:
        missing = client.get("/api/notify-expirations")
        wrong = client.get("/api/notify-expirations", headers={"Authorization": "Bearer nope"})

    assert missing.status_code == 401
    assert wrong.status_code == 401
    assert wrong.get_json() == {"message": "Unauthorized"}
    assert outbox == []


def test_secret_match_runs_scan(app, client):
    app.config["CRON_SECRET"] = "s3cret"
    res = client.get("/api/notify-expirations", headers={"Authorization": "Bearer s3cret"})
    assert res.status_code == 200
    assert res.get_json()["details"] == {"sentEmails": [], "errors": []}


def test_source_failure_is_500(client, monkeypatch):
    def boom(start, end):
        raise RuntimeError("connection refused")

    monkeypatch.setattr(LicenseRepo, "find_expiring", staticmethod(boom))
    res = client.get("/api/notify-expirations")

    assert res.status_code == 500
    assert res.get_json() == {"message": "Failed to run expiration check", "error": "connection refused"}


def test_running_scan_is_409(client):
    assert _scan_lock.acquire(blocking=False)
    try:
        res = client.get("/api/notify-expirations")
    finally:
        _scan_lock.release()
    assert res.status_code == 409
