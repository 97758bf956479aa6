"""
WhatsApp 메시지/딥링크 생성

네트워크 호출은 없다. 만든 링크를 사용자 환경에서 여는 것까지가 전부.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import quote

WHATSAPP_BASE_URL = "https://wa.me"

# encodeURIComponent 가 그대로 두는 문자
_URI_COMPONENT_SAFE = "-_.!~*'()"

GREETING = "Hi PASA Coffee 👋"
GREETING_TEXT = "Hi PASA Coffee 👋 I want to improve my V60!"

INTERESTS = ("Barista Training", "Coffee Gadgets", "Machine Rental", "General")


@dataclass
class LeadForm:
    name: str = ""
    interest: str = INTERESTS[0]
    phone: str = ""
    note: str = ""


def build_message(parts: Iterable[Optional[str]]) -> str:
    return "\n".join(part for part in parts if part)


def build_deep_link(destination_id: str, message: str, base_url: str = WHATSAPP_BASE_URL) -> str:
    encoded = quote(message, safe=_URI_COMPONENT_SAFE)
    return f"{base_url.rstrip('/')}/{destination_id}?text={encoded}"


def share_text(score: int) -> str:
    return f"My V60 score is {score}/1000"


def lead_message(form: LeadForm, best: Optional[int]) -> str:
    name = (form.name or "").strip()
    phone = (form.phone or "").strip()
    note = (form.note or "").strip()
    return build_message(
        [
            GREETING,
            f"I'm interested in: {form.interest}",
            f"Name: {name or '(not provided)'}",
            f"Phone: {phone}" if phone else None,
            f"My latest V60 score: {best}/1000" if best is not None else None,
            f"Note: {note}" if note else None,
        ]
    )


def can_send_lead(form: LeadForm) -> bool:
    return bool((form.name or "").strip())
