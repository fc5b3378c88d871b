# license_manager/services/notification_content.py
"""
Subject/body generation for license expiration notices.

Two strategies with the same `generate(...)` signature:
- TemplateContentGenerator: fixed HTML template, deterministic.
- GenerativeContentGenerator: asks an LLM for a JSON {subject, body}.
"""
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from html import escape

from license_manager.services.llm_client import LLMClient, OpenAILLMClient

SIGNATURE = "License Management System"

EMAIL_PROMPT = """You are an assistant responsible for writing professional email notifications about expiring software licenses.
The tone should be helpful and urgent, but not alarming.
The email should be sent to the reseller.
The license for the product "{product}" will expire on {expiration_date}.
The reseller is "{reseller}".

Generate a subject and a body for the email to be sent to {reseller_email}.
The body should be in HTML format.
The subject should clearly state the product and that its license is expiring soon.
The body should mention the product name, the expiration date, and suggest that the reseller contact their client to arrange for a renewal.

Reply with a single JSON object with exactly two string fields: "subject" and "body"."""

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class ContentGenerationError(Exception):
    pass


@dataclass(frozen=True)
class NotificationContent:
    subject: str
    body: str  # HTML


class TemplateContentGenerator:
    def generate(self, product: str, expiration_date: str | None, reseller: str, reseller_email: str) -> NotificationContent:
        subject = f"License Expiration Notice for {product}"
        greeting = f"Dear {escape(reseller.strip())}," if reseller and reseller.strip() else "Hello,"
        body = (
            f"<p>{greeting}</p>\n"
            "<p>This is a notification that the software license for the following product is expiring soon:</p>\n"
            "<p>"
            f"Product: {escape(product)}<br>\n"
            f"Expiration Date: {escape(expiration_date or 'N/A')}"
            "</p>\n"
            "<p>Please contact your client to arrange for a renewal.</p>\n"
            f"<p>Thank you,<br>\n{SIGNATURE}</p>"
        )
        return NotificationContent(subject=subject, body=body)


class GenerativeContentGenerator:
    def __init__(self, llm: LLMClient, max_tokens: int = 800, temperature: float = 0.3):
        self.llm = llm
        self.max_tokens = max_tokens
        self.temperature = temperature

    def generate(self, product: str, expiration_date: str | None, reseller: str, reseller_email: str) -> NotificationContent:
        prompt = EMAIL_PROMPT.format(
            product=product,
            expiration_date=expiration_date or "N/A",
            reseller=reseller,
            reseller_email=reseller_email,
        )
        try:
            raw = self.llm.complete(prompt, self.max_tokens, self.temperature)
        except Exception as e:
            raise ContentGenerationError(f"LLM call failed: {e}") from e
        return self.parse_reply(raw)

    @staticmethod
    def parse_reply(raw: str) -> NotificationContent:
        text = (raw or "").strip()
        m = _FENCE_RE.match(text)
        if m:
            text = m.group(1)
        try:
            data = json.loads(text)
        except ValueError:
            raise ContentGenerationError("LLM reply is not valid JSON")
        if not isinstance(data, dict):
            raise ContentGenerationError("LLM reply is not a JSON object")

        subject = data.get("subject")
        body = data.get("body")
        if not isinstance(subject, str) or not subject.strip():
            raise ContentGenerationError("LLM reply has no subject")
        if not isinstance(body, str) or not body.strip():
            raise ContentGenerationError("LLM reply has no body")
        return NotificationContent(subject=subject.strip(), body=body.strip())


def build_generator(config):
    strategy = (config.get("NOTIFY_CONTENT_STRATEGY") or "template").lower()
    if strategy == "template":
        return TemplateContentGenerator()
    if strategy == "llm":
        if not config.get("LLM_API_KEY"):
            raise ValueError("NOTIFY_CONTENT_STRATEGY=llm requires LLM_API_KEY")
        client = OpenAILLMClient(
            api_key=config["LLM_API_KEY"],
            model=config.get("LLM_MODEL", "gpt-4o-mini"),
            base_url=config.get("LLM_BASE_URL"),
            timeout=config.get("LLM_TIMEOUT_SECONDS", 30.0),
        )
        return GenerativeContentGenerator(
            client,
            max_tokens=config.get("LLM_MAX_TOKENS", 800),
            temperature=config.get("LLM_TEMPERATURE", 0.3),
        )
    raise ValueError(f"Unknown NOTIFY_CONTENT_STRATEGY: {strategy}")
